"""
Pytest configuration for all configuranator tests — validates the environment,
registers markers and provides shared configuration fixtures.
"""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest

from configuranator.config.schemas import (
    AircraftProperties,
    CommConfig,
    Coordinates,
    ManagerConfig,
    Point,
    default_vision_model_config,
)

# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmp_dir = tempfile.mkdtemp()
    yield Path(tmp_dir)
    shutil.rmtree(tmp_dir, ignore_errors=True)


@pytest.fixture
def sample_config():
    """A fully populated configuration with points in every area."""
    return ManagerConfig(
        test=False,
        sauron_config=default_vision_model_config(),
        aircraft_properties=AircraftProperties(turn_radius=35.0, velocity=22.5),
        coordinates=Coordinates(
            waypoints=(Point(x=38.31, y=-76.55), Point(x=38.32, y=-76.54)),
            mapping_area=(Point(x=0.0, y=0.0), Point(x=0.0, y=10.0), Point(x=10.0, y=10.0)),
            target_area=(Point(x=1.5, y=-2.25),),
            flying_threshold=75.0,
            mapping_threshold=60.0,
        ),
        commconfig=CommConfig(
            dad_gnc_port=5000,
            gnc_dad_port=5001,
            dad_sauron_port=5002,
            sauron_dad_port=5003,
            groundstation_ip="192.168.1.10",
            flightcomputer_ip="fe80::1",
        ),
    )


@pytest.fixture
def scenario_answers(temp_dir):
    """
    Operator answers for a full builder run, in prompt order.

    test=true, no waypoints, no mapping points, one target point (1, 2),
    blank folder paths.
    """
    return [
        str(temp_dir / "flight.toml"),
        "true",
        "12.5",
        "20.0",
        "no",                    # waypoints
        "no",                    # mapping area
        "yes", "1", "2", "no",   # target area
        "10",
        "5",
        "5000", "5001", "5002", "5003",
        "192.168.1.10",
        "10.0.0.2",
        "./sauron/data/custom.onnx",
        "640",
        "", "", "",
        "93.0, 81.0",
        "4096, 2160",
        "COCO",
    ]


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Validate test environment and configure pytest with custom markers."""
    missing = []
    for mod in ("click", "pydantic", "toml"):
        try:
            __import__(mod)
        except ImportError:
            missing.append(mod)

    if missing:
        print(
            "\n"
            "=" * 70 + "\n"
            " TEST ENVIRONMENT ERROR\n"
            "=" * 70 + "\n"
            f"\n"
            f" Missing dependencies: {', '.join(missing)}\n"
            f"\n"
            f" Run: pip install -e '.[test]'\n"
            "=" * 70,
            file=sys.stderr,
        )
        raise SystemExit(1)

    config.addinivalue_line(
        "markers", "unit: Fast unit tests with no external dependencies"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests for full workflows"
    )

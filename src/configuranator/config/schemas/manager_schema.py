"""
Manager Schema
===============

Pydantic models for the shared configuration document read by every process
(vision, guidance, communications).

This provides:
- Type validation for all config fields
- Immutable records once built (frozen models, tuples instead of lists)
- A default factory for the vision model section
- Documentation for each setting
"""

from typing import Annotated

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# File name suffix every configuration document must carry
CONFIG_SUFFIX = ".toml"

# Datasets the vision model can be trained on
ALLOWED_DATASETS: tuple[str, ...] = ("COCO",)

Real = Annotated[StrictFloat, AllowInfNan(False)]


class _Record(BaseModel):
    """Shared pydantic config: immutable, no unknown keys"""

    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())


class Point(_Record):
    """A point in 2D space"""

    x: Real = Field(..., description="X coordinate")
    y: Real = Field(..., description="Y coordinate")


class Coordinates(_Record):
    """Coordinate sets used in competition"""

    waypoints: tuple[Point, ...] = Field(
        ...,
        description="Ordered flight waypoints"
    )
    mapping_area: tuple[Point, ...] = Field(
        ...,
        description="Polygon to map"
    )
    target_area: tuple[Point, ...] = Field(
        ...,
        description="Polygon containing targets"
    )
    flying_threshold: Real = Field(
        ...,
        description="Flying altitude threshold"
    )
    mapping_threshold: Real = Field(
        ...,
        description="Mapping altitude threshold"
    )


class AircraftProperties(_Record):
    """Physical properties of the aircraft"""

    turn_radius: Real = Field(..., description="Turn radius (meters)")
    velocity: Real = Field(..., description="Cruise velocity (meters/second)")


class VisionModelConfig(_Record):
    """Configuration for the YOLO detection model and its image folders"""

    model_path: StrictStr = Field(
        ...,
        description="Path to the exported model file"
    )
    input_size: StrictInt = Field(
        ...,
        description="Model image input size (pixels)"
    )
    dataset_name: StrictStr = Field(
        ...,
        description="Dataset the model was trained on (see ALLOWED_DATASETS)"
    )
    fov: tuple[Real, Real] = Field(
        ...,
        description="Camera field of view (horizontal, vertical) in degrees"
    )
    resolution: tuple[StrictInt, StrictInt] = Field(
        ...,
        description="Camera resolution (width, height) in pixels"
    )
    untagged_image_folder: StrictStr = Field(
        ...,
        description="Images captured before the bounds check"
    )
    detection_image_folder: StrictStr = Field(
        ...,
        description="Images with detections"
    )
    mapping_image_folder: StrictStr = Field(
        ...,
        description="Images used for mapping"
    )


class CommConfig(_Record):
    """Communication settings between all processes"""

    dad_gnc_port: StrictInt = Field(..., description="Dad to GNC port")
    gnc_dad_port: StrictInt = Field(..., description="GNC to Dad port")
    dad_sauron_port: StrictInt = Field(..., description="Dad to Sauron port")
    sauron_dad_port: StrictInt = Field(..., description="Sauron to Dad port")
    groundstation_ip: StrictStr = Field(..., description="Ground station IP address")
    flightcomputer_ip: StrictStr = Field(..., description="Flight computer IP address")


class ManagerConfig(_Record):
    """
    Root configuration schema.

    This is the unit of persistence: one document holds exactly one
    ManagerConfig and every sub-section is required.
    """

    test: StrictBool = Field(..., description="Whether this is a test configuration")
    sauron_config: VisionModelConfig = Field(..., description="Vision model settings")
    aircraft_properties: AircraftProperties = Field(..., description="Aircraft properties")
    coordinates: Coordinates = Field(..., description="Competition coordinates")
    commconfig: CommConfig = Field(..., description="Inter-process communication settings")


def default_vision_model_config() -> VisionModelConfig:
    """Return a fresh copy of the canonical vision model defaults."""
    return VisionModelConfig(
        model_path="./sauron/data/yolov8n.onnx",
        input_size=640,
        dataset_name="COCO",
        fov=(93.0, 81.0),
        resolution=(4096, 2160),
        untagged_image_folder="/feonix-images/untagged",
        detection_image_folder="/feonix-images/detection",
        mapping_image_folder="/feonix-images/mapping",
    )

"""Configuration schema and TOML document codec."""

from configuranator.config.codec import dumps_config, generate_config, loads_config, read_config
from configuranator.config.schemas import (
    ALLOWED_DATASETS,
    CONFIG_SUFFIX,
    AircraftProperties,
    CommConfig,
    Coordinates,
    ManagerConfig,
    Point,
    VisionModelConfig,
    default_vision_model_config,
)

__all__ = [
    "ALLOWED_DATASETS",
    "CONFIG_SUFFIX",
    "AircraftProperties",
    "CommConfig",
    "Coordinates",
    "ManagerConfig",
    "Point",
    "VisionModelConfig",
    "default_vision_model_config",
    "dumps_config",
    "generate_config",
    "loads_config",
    "read_config",
]

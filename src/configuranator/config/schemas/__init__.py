"""
Configuration Schemas
======================

Pydantic schemas for the TOML configuration document.

Separates the *definition* of config from the *loading* of config.
"""

from .manager_schema import (
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
    'ALLOWED_DATASETS',
    'CONFIG_SUFFIX',
    'AircraftProperties',
    'CommConfig',
    'Coordinates',
    'ManagerConfig',
    'Point',
    'VisionModelConfig',
    'default_vision_model_config',
]

"""Configuranator: build, save and load the shared platform configuration."""

from configuranator.config import (
    ManagerConfig,
    default_vision_model_config,
    generate_config,
    read_config,
)

__version__ = "0.1.0"

__all__ = [
    "ManagerConfig",
    "default_vision_model_config",
    "generate_config",
    "read_config",
    "__version__",
]

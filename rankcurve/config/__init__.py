"""Configuration management for rankcurve."""

from .loader import CONFIG_ENV, DEFAULT_CONFIG_PATH, Config, load_config, save_config
from .models import (
    AdjustmentConfig,
    ConfigModel,
    PostgresConfig,
    RatingConfig,
    SearchConfig,
    StorageConfig,
)

__all__ = [
    "AdjustmentConfig",
    "CONFIG_ENV",
    "Config",
    "ConfigModel",
    "DEFAULT_CONFIG_PATH",
    "PostgresConfig",
    "RatingConfig",
    "SearchConfig",
    "StorageConfig",
    "load_config",
    "save_config",
]

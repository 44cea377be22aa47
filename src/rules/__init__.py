"""Configuration and policy rules for archmap."""

from rules.config import (
    ArchmapConfig,
    CIConfig,
    ConfigError,
    MetricsConfig,
    ThresholdsConfig,
    load_config,
    load_config_file,
)

__all__ = [
    "ArchmapConfig",
    "CIConfig",
    "ConfigError",
    "MetricsConfig",
    "ThresholdsConfig",
    "load_config",
    "load_config_file",
]

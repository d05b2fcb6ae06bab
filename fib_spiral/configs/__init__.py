"""
Configuration module.

Loads ``spiral.yaml`` into frozen dataclasses with validation.
"""

from fib_spiral.configs.loader import (
    ConfigError,
    ExportConfig,
    GCodeConfig,
    LoggingConfig,
    SpiralConfig,
    StepsConfig,
    load_config,
)

__all__ = [
    "ConfigError",
    "ExportConfig",
    "GCodeConfig",
    "LoggingConfig",
    "SpiralConfig",
    "StepsConfig",
    "load_config",
]

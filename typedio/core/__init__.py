"""
typedio Core Module

Configuration and start-up of the file-access layer.
"""

from .config_loader import (
    ConfigLoader,
    Config,
    IOConfig,
    EngineConfig,
    LoggingConfig,
    get_config,
    validate_config,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'IOConfig',
    'EngineConfig',
    'LoggingConfig',
    'get_config',
    'validate_config',
]

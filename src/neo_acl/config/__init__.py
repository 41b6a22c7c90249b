"""Configuration module for neo-acl."""

from .constants import PathDefaults, EnvPrefix

from .settings import (
    PermissionTreeSettings,
    get_settings,
    reset_settings,
)

# Logging configuration
from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Constants
    "PathDefaults",
    "EnvPrefix",
    
    # Settings
    "PermissionTreeSettings",
    "get_settings",
    "reset_settings",
    
    # Logging
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]

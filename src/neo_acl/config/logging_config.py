"""Centralized logging configuration for neo-acl.

Provides consistent, configurable logging with environment-based control
over verbosity and log levels.
"""

import logging
import logging.config
from typing import Dict, Any, Optional
from enum import Enum

from .settings import PermissionTreeSettings, get_settings


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    return verbosity_map.get(LogVerbosity(verbosity.upper()), LogLevel.WARNING.value)


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Mutation logging is noisy; kept at WARNING unless tree logging is enabled
    TREE_MODULES = [
        "neo_acl.features.permissions.entities.permission_tree",
    ]
    
    @classmethod
    def build_config(cls, settings: Optional[PermissionTreeSettings] = None) -> Dict[str, Any]:
        """Build a dictConfig mapping from settings.
        
        Args:
            settings: Settings to use, defaults to the cached global settings
            
        Returns:
            Dictionary accepted by logging.config.dictConfig
        """
        settings = settings or get_settings()
        effective_log_level = settings.log_level or get_log_level_from_verbosity(settings.log_verbosity)
        format_string = FORMAT_STRINGS[LogFormat(settings.log_format)]
        
        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "neo_acl": {
                    "level": effective_log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            }
        }
        
        if not settings.enable_tree_logging:
            for module in cls.TREE_MODULES:
                logging_config["loggers"][module] = {
                    "level": "WARNING" if effective_log_level != "DEBUG" else "INFO",
                    "handlers": ["console"],
                    "propagate": False,
                }
        
        return logging_config
    
    @classmethod
    def configure(cls, settings: Optional[PermissionTreeSettings] = None) -> None:
        """Configure neo-acl logging based on settings."""
        logging_config = cls.build_config(settings)
        logging.config.dictConfig(logging_config)
        
        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={logging_config['loggers']['neo_acl']['level']}")


def setup_logging(settings: Optional[PermissionTreeSettings] = None) -> None:
    """Setup logging configuration from settings.
    
    This is the main entry point for configuring logging in an application
    that embeds neo-acl. It should be called once at application startup.
    """
    LoggingConfig.configure(settings)

"""Settings for neo-acl.

Environment-driven configuration with pydantic-settings. All variables
use the ``NEO_ACL_`` prefix and may also be read from a ``.env`` file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import PathDefaults, EnvPrefix


class PermissionTreeSettings(BaseSettings):
    """Global permission tree settings."""
    
    model_config = SettingsConfigDict(
        env_prefix=EnvPrefix.NEO_ACL.value,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Path handling
    path_delimiter: str = Field(
        default=PathDefaults.DELIMITER,
        min_length=1,
        max_length=1,
        description="Separator between path segments"
    )
    
    # Logging
    log_level: Optional[str] = Field(default=None, description="Explicit log level, overrides log_verbosity")
    log_verbosity: str = Field(default="NORMAL", description="QUIET, NORMAL, VERBOSE or DEBUG")
    log_format: str = Field(default="simple", description="simple, detailed or json")
    enable_tree_logging: bool = Field(default=False, description="Log every tree mutation")
    configure_logging_on_import: bool = Field(default=False, description="Call setup_logging() when neo_acl is imported")
    
    @field_validator("path_delimiter")
    @classmethod
    def validate_path_delimiter(cls, v: str) -> str:
        if v.isspace() or v.isalnum():
            raise ValueError(f"path_delimiter must be a punctuation character, got: {v!r}")
        return v
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log_level: {v}")
        return v
    
    @field_validator("log_verbosity")
    @classmethod
    def validate_log_verbosity(cls, v: str) -> str:
        v = v.upper()
        if v not in {"QUIET", "NORMAL", "VERBOSE", "DEBUG"}:
            raise ValueError(f"Invalid log_verbosity: {v}")
        return v
    
    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in {"simple", "detailed", "json"}:
            raise ValueError(f"Invalid log_format: {v}")
        return v


@lru_cache()
def get_settings() -> PermissionTreeSettings:
    """Get cached settings instance."""
    return PermissionTreeSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()

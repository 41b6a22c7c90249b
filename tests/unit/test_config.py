"""Tests for neo-acl settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from neo_acl.config import (
    PermissionTreeSettings,
    get_settings,
    reset_settings,
    LoggingConfig,
    setup_logging,
)
from neo_acl.config.logging_config import get_log_level_from_verbosity
from neo_acl.features.permissions import PermissionTree


class TestPermissionTreeSettings:
    """Test cases for environment-driven settings."""
    
    def test_defaults(self):
        """Test default settings values."""
        settings = PermissionTreeSettings()
        assert settings.path_delimiter == "."
        assert settings.log_verbosity == "NORMAL"
        assert settings.log_format == "simple"
        assert settings.enable_tree_logging is False
        assert settings.log_level is None
        assert settings.configure_logging_on_import is False
    
    def test_environment_overrides(self, monkeypatch):
        """Test NEO_ACL_ variables override defaults."""
        monkeypatch.setenv("NEO_ACL_PATH_DELIMITER", "/")
        monkeypatch.setenv("NEO_ACL_LOG_VERBOSITY", "debug")
        monkeypatch.setenv("NEO_ACL_LOG_FORMAT", "JSON")
        settings = PermissionTreeSettings()
        assert settings.path_delimiter == "/"
        assert settings.log_verbosity == "DEBUG"
        assert settings.log_format == "json"
    
    @pytest.mark.parametrize("delimiter", ["", "ab", "a", " "])
    def test_invalid_delimiter(self, delimiter):
        """Test delimiters must be a single punctuation character."""
        with pytest.raises(ValidationError):
            PermissionTreeSettings(path_delimiter=delimiter)
    
    def test_log_level_from_environment(self, monkeypatch):
        """Test NEO_ACL_LOG_LEVEL is read and normalized."""
        monkeypatch.setenv("NEO_ACL_LOG_LEVEL", "info")
        assert PermissionTreeSettings().log_level == "INFO"
    
    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            PermissionTreeSettings(log_level="CHATTY")
    
    def test_invalid_verbosity(self):
        """Test unknown verbosity is rejected."""
        with pytest.raises(ValidationError):
            PermissionTreeSettings(log_verbosity="LOUD")
    
    def test_cached_settings_reset(self, monkeypatch):
        """Test get_settings caches until reset."""
        first = get_settings()
        assert get_settings() is first
        
        monkeypatch.setenv("NEO_ACL_PATH_DELIMITER", ":")
        assert get_settings().path_delimiter == "."
        
        reset_settings()
        assert get_settings().path_delimiter == ":"
    
    def test_tree_uses_configured_delimiter(self, monkeypatch):
        """Test trees pick up the configured delimiter."""
        monkeypatch.setenv("NEO_ACL_PATH_DELIMITER", "/")
        reset_settings()
        
        tree = PermissionTree(["a/b"])
        assert tree.has_permission("a/b")
        assert tree.has_permission(["a", "b"])
        assert tree.get_flat_permissions() == {"a/b": True}


class TestLoggingConfig:
    """Test cases for logging configuration."""
    
    @pytest.mark.parametrize("verbosity,level", [
        ("QUIET", "ERROR"),
        ("NORMAL", "WARNING"),
        ("VERBOSE", "INFO"),
        ("debug", "DEBUG"),
    ])
    def test_verbosity_mapping(self, verbosity, level):
        """Test verbosity modes map to log levels."""
        assert get_log_level_from_verbosity(verbosity) == level
    
    def test_build_config_quiets_tree_logging(self):
        """Test tree mutation logging is kept at WARNING by default."""
        config = LoggingConfig.build_config(PermissionTreeSettings(log_verbosity="VERBOSE"))
        assert config["loggers"]["neo_acl"]["level"] == "INFO"
        tree_logger = config["loggers"]["neo_acl.features.permissions.entities.permission_tree"]
        assert tree_logger["level"] == "WARNING"
    
    def test_build_config_with_tree_logging(self):
        """Test enabling tree logging leaves the tree module at package level."""
        config = LoggingConfig.build_config(
            PermissionTreeSettings(log_verbosity="DEBUG", enable_tree_logging=True)
        )
        assert config["loggers"]["neo_acl"]["level"] == "DEBUG"
        assert "neo_acl.features.permissions.entities.permission_tree" not in config["loggers"]
    
    def test_build_config_formats(self):
        """Test the detailed format includes the logger name."""
        config = LoggingConfig.build_config(PermissionTreeSettings(log_format="detailed"))
        assert "%(name)s" in config["formatters"]["default"]["format"]
    
    def test_setup_logging_applies_levels(self):
        """Test setup_logging configures the neo_acl logger."""
        setup_logging(PermissionTreeSettings(log_verbosity="QUIET"))
        try:
            assert logging.getLogger("neo_acl").level == logging.ERROR
        finally:
            logger = logging.getLogger("neo_acl")
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
            logger.propagate = True
            tree_logger = logging.getLogger("neo_acl.features.permissions.entities.permission_tree")
            tree_logger.handlers.clear()
            tree_logger.setLevel(logging.NOTSET)
            tree_logger.propagate = True

    
    def test_explicit_log_level_overrides_verbosity(self):
        """Test log_level wins over the verbosity mapping."""
        config = LoggingConfig.build_config(
            PermissionTreeSettings(log_verbosity="QUIET", log_level="DEBUG")
        )
        assert config["loggers"]["neo_acl"]["level"] == "DEBUG"
        assert config["handlers"]["console"]["level"] == "DEBUG"

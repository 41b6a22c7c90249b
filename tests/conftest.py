"""Pytest configuration and fixtures for neo-acl tests."""

import pytest

from neo_acl.config import reset_settings
from neo_acl.features.permissions import PermissionTree, Role


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    for name in (
        "NEO_ACL_PATH_DELIMITER",
        "NEO_ACL_LOG_LEVEL",
        "NEO_ACL_LOG_VERBOSITY",
        "NEO_ACL_LOG_FORMAT",
        "NEO_ACL_ENABLE_TREE_LOGGING",
        "NEO_ACL_CONFIGURE_LOGGING_ON_IMPORT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def empty_tree():
    """Tree without any grants."""
    return PermissionTree()


@pytest.fixture
def sample_tree():
    """Tree granting a.b.c and b.c."""
    return PermissionTree(["a.b.c", "b.c"])


@pytest.fixture
def editor_role():
    """Role allowed to edit articles and read user profiles."""
    return Role.create("editor", ["articles", "users.profile"])


@pytest.fixture
def auditor_role():
    """Role allowed to read audit logs and user emails."""
    return Role.create("auditor", ["audit.logs", "users.email"])

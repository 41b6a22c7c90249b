"""Tests for the neo-acl exception hierarchy."""

import pytest

from neo_acl.core.exceptions import (
    NeoAclError,
    PermissionTreeError,
    InvalidArgumentError,
    InvalidPermissionsObjectError,
    InvalidPathError,
    AuthorizationError,
    PermissionDeniedError,
    create_error_response,
)


class TestExceptionHierarchy:
    """Test cases for exception inheritance."""
    
    @pytest.mark.parametrize("exc_class,builtin", [
        (InvalidArgumentError, TypeError),
        (InvalidPermissionsObjectError, ValueError),
        (InvalidPathError, LookupError),
    ])
    def test_tree_errors_extend_builtins(self, exc_class, builtin):
        """Test tree errors are catchable as their builtin counterpart."""
        error = exc_class("boom")
        assert isinstance(error, PermissionTreeError)
        assert isinstance(error, NeoAclError)
        assert isinstance(error, builtin)
    
    def test_permission_denied_is_authorization_error(self):
        """Test authorization errors share a base."""
        assert issubclass(PermissionDeniedError, AuthorizationError)
        assert issubclass(AuthorizationError, NeoAclError)
        assert not issubclass(AuthorizationError, PermissionTreeError)


class TestErrorDetails:
    """Test cases for structured error information."""
    
    def test_defaults(self):
        """Test error code defaults to the class name and details to a dict."""
        error = InvalidPathError("invalid path to sub-permission: x")
        assert error.message == "invalid path to sub-permission: x"
        assert error.error_code == "InvalidPathError"
        assert error.details == {}
        assert str(error) == "invalid path to sub-permission: x"
    
    def test_create_error_response(self):
        """Test the standard error payload."""
        error = PermissionDeniedError(
            "Permission denied: a.b",
            error_code="PERMISSION_DENIED",
            details={"path": "a.b"}
        )
        assert create_error_response(error) == {
            "error": {
                "code": "PERMISSION_DENIED",
                "message": "Permission denied: a.b",
                "details": {"path": "a.b"},
                "type": "PermissionDeniedError",
            }
        }

"""Exceptions module for neo-acl.

This module provides the complete exception hierarchy for neo-acl.
"""

from .base import (
    NeoAclError,
    create_error_response,
)

from .permissions import (
    # Permission Tree Errors
    PermissionTreeError,
    InvalidArgumentError,
    InvalidPermissionsObjectError,
    InvalidPathError,
    
    # Authorization Errors
    AuthorizationError,
    PermissionDeniedError,
)

__all__ = [
    # Base Exception
    "NeoAclError",
    
    # Permission Tree Errors
    "PermissionTreeError",
    "InvalidArgumentError",
    "InvalidPermissionsObjectError",
    "InvalidPathError",
    
    # Authorization Errors
    "AuthorizationError",
    "PermissionDeniedError",
    
    # Utility Functions
    "create_error_response",
]

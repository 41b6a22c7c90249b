"""Permission tree and authorization exceptions for neo-acl."""

from .base import NeoAclError


class PermissionTreeError(NeoAclError):
    """Base exception for permission tree errors."""
    pass


class InvalidArgumentError(PermissionTreeError, TypeError):
    """Raised when a path, path list or tree argument has the wrong type or shape."""
    pass


class InvalidPermissionsObjectError(PermissionTreeError, ValueError):
    """Raised when a structural permissions value is malformed."""
    pass


class InvalidPathError(PermissionTreeError, LookupError):
    """Raised when a path does not exist in the permission tree."""
    pass


class AuthorizationError(NeoAclError):
    """Authorization error."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when a role set lacks the permission for a path or a data field."""
    pass

"""Core module for neo-acl.

Clean Core - Only exports exceptions and value objects.
Entities are accessed through features/.
"""

from .exceptions import *
from .value_objects import *

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
    "create_error_response",
    
    # Value Objects
    "PermissionPath",
    "PathLike",
]

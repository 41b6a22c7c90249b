"""Neo-ACL - Hierarchical permission trees for the NeoMultiTenant platform.

Dot-path grants (``users.profile.email``) stored as a tree where a grant
covers every path below it. Trees answer containment queries, merge with
other trees, and validate or filter nested data against their grants.
"""

from .__version__ import __version__

from .config import (
    PermissionTreeSettings,
    get_settings,
    reset_settings,
    setup_logging,
    LoggingConfig,
)

# Optional logging initialization on import
if get_settings().configure_logging_on_import:
    setup_logging()

from .core.exceptions import (
    # Base Exception
    NeoAclError,
    
    # Permission Tree Errors
    PermissionTreeError,
    InvalidArgumentError,
    InvalidPermissionsObjectError,
    InvalidPathError,
    
    # Authorization Errors
    AuthorizationError,
    PermissionDeniedError,
    
    # Utility Functions
    create_error_response,
)

from .core.value_objects import PermissionPath

from .features.permissions import (
    PermissionNode,
    Granted,
    Partial,
    GRANTED,
    CheckResult,
    Satisfied,
    Violation,
    PermissionTree,
    Role,
    RoleCode,
    PermissionTreeService,
)

__all__ = [
    "__version__",
    
    # Configuration
    "PermissionTreeSettings",
    "get_settings",
    "reset_settings",
    "setup_logging",
    "LoggingConfig",
    
    # Exceptions
    "NeoAclError",
    "PermissionTreeError",
    "InvalidArgumentError",
    "InvalidPermissionsObjectError",
    "InvalidPathError",
    "AuthorizationError",
    "PermissionDeniedError",
    "create_error_response",
    
    # Value Objects
    "PermissionPath",
    
    # Entities
    "PermissionNode",
    "Granted",
    "Partial",
    "GRANTED",
    "CheckResult",
    "Satisfied",
    "Violation",
    "PermissionTree",
    "Role",
    "RoleCode",
    
    # Services
    "PermissionTreeService",
]

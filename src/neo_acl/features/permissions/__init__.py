"""Permissions feature for neo-acl.

Feature-First architecture for hierarchical permission trees:
- entities/: Permission nodes, trees, check results and roles
- services/: Authorization decisions over role sets
"""

from .entities import (
    PermissionNode, Granted, Partial, GRANTED,
    CheckResult, Satisfied, Violation,
    PermissionTree, Role, RoleCode,
)

from .services import PermissionTreeService

__all__ = [
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

"""Permission entities: node types, check results, trees and roles."""

from .nodes import (
    PermissionNode,
    Granted,
    Partial,
    GRANTED,
    StructuralValue,
    validate_structure,
    node_from_value,
)
from .check_result import CheckResult, Satisfied, Violation, SATISFIED
from .permission_tree import PermissionTree
from .role import Role, RoleCode

__all__ = [
    # Nodes
    "PermissionNode",
    "Granted",
    "Partial",
    "GRANTED",
    "StructuralValue",
    "validate_structure",
    "node_from_value",
    
    # Check results
    "CheckResult",
    "Satisfied",
    "Violation",
    "SATISFIED",
    
    # Tree and roles
    "PermissionTree",
    "Role",
    "RoleCode",
]

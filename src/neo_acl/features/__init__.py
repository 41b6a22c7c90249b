"""Features module for neo-acl."""

from .permissions import PermissionTree, PermissionTreeService

__all__ = [
    "PermissionTree",
    "PermissionTreeService",
]

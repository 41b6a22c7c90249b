"""Permission services."""

from .permission_tree_service import PermissionTreeService

__all__ = ["PermissionTreeService"]

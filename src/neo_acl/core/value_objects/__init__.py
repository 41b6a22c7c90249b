"""Value objects for neo-acl."""

from .permission_path import PermissionPath, PathLike

__all__ = [
    "PermissionPath",
    "PathLike",
]

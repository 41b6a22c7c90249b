"""Role domain entity for neo-acl permissions feature.

A role is a named permission tree. Roles can be merged into one another
and delegate every permission query to their tree.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence, Union

from ....config.constants import PathDefaults
from ....core.exceptions import InvalidArgumentError
from ....core.value_objects import PathLike
from .check_result import CheckResult
from .nodes import StructuralValue
from .permission_tree import PermissionTree


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoleCode:
    """Immutable value object for role identifier with validation."""
    
    value: str
    
    def __post_init__(self):
        """Validate role code format and constraints."""
        if not isinstance(self.value, str) or not self.value:
            logger.warning("Rejected empty role code")
            raise InvalidArgumentError("Role code cannot be empty")
        
        if len(self.value) > PathDefaults.MAX_ROLE_CODE_LENGTH:
            logger.warning(f"Rejected role code longer than {PathDefaults.MAX_ROLE_CODE_LENGTH} characters")
            raise InvalidArgumentError(
                f"Role code cannot exceed {PathDefaults.MAX_ROLE_CODE_LENGTH} characters, got: {len(self.value)}"
            )
        
        if not re.match(PathDefaults.ROLE_CODE_PATTERN, self.value):
            logger.warning(f"Rejected malformed role code: {self.value!r}")
            raise InvalidArgumentError(
                f"Role code must contain only alphanumeric characters, underscores, and hyphens: {self.value}"
            )
    
    def __str__(self) -> str:
        return self.value


@dataclass
class Role:
    """Domain entity representing a named set of permission grants."""
    
    code: RoleCode
    name: Optional[str] = None
    description: Optional[str] = None
    permissions: PermissionTree = field(default_factory=PermissionTree)
    
    def __post_init__(self):
        """Normalize code and default the display name."""
        if isinstance(self.code, str):
            self.code = RoleCode(self.code)
        if self.name is None:
            self.name = self.code.value
        if not isinstance(self.permissions, PermissionTree):
            logger.warning(f"Rejected role permissions of type {type(self.permissions).__name__}")
            raise InvalidArgumentError(
                "Role permissions must be a PermissionTree",
                details={"type": type(self.permissions).__name__}
            )
    
    @classmethod
    def create(
        cls,
        code: str,
        permissions: Union[None, Iterable[PathLike], StructuralValue] = None,
        name: Optional[str] = None,
        description: Optional[str] = None
    ) -> "Role":
        """Create a role from a list of paths or a structural permissions value."""
        return cls(
            code=RoleCode(code),
            name=name,
            description=description,
            permissions=PermissionTree(permissions)
        )
    
    def add_permission(self, path: PathLike) -> None:
        """Grant a path to this role."""
        self.permissions.add_permission(path)
    
    def has_permission(self, path: PathLike, allow_partial: bool = False) -> bool:
        """Check if role is granted a path."""
        return self.permissions.has_permission(path, allow_partial=allow_partial)
    
    can = has_permission
    
    def merge(self, roles: Union["Role", Sequence["Role"]]) -> "Role":
        """Union other roles' grants into this role."""
        if isinstance(roles, Role):
            roles = [roles]
        elif not isinstance(roles, (list, tuple)):
            logger.warning(f"Rejected role merge of type {type(roles).__name__}")
            raise InvalidArgumentError(
                "roles must be of type Role or sequence of Role",
                details={"type": type(roles).__name__}
            )
        for role in roles:
            if not isinstance(role, Role):
                logger.warning(f"Rejected role merge element of type {type(role).__name__}")
                raise InvalidArgumentError(
                    "roles must be of type sequence of Role",
                    details={"type": type(role).__name__}
                )
        self.permissions.merge([role.permissions for role in roles])
        return self
    
    def check_object(self, data: Any, path: Optional[PathLike] = None) -> CheckResult:
        """Check data against this role's permissions."""
        return self.permissions.check_object(data, path)
    
    def filter_object(self, data: Any, paths: Union[None, str, Sequence[PathLike]] = None) -> Any:
        """Strip fields this role may not see."""
        return self.permissions.filter_object(data, paths)
    
    def __str__(self) -> str:
        return f"Role({self.code})"

"""Permission tree service for authorization decisions over role sets.

Coordinates role merging, path authorization and data checks for an
embedding authorization service. Roles are supplied by the caller; binding
roles to users is not handled here.
"""

from typing import Any, Iterable, List, Optional, Sequence, Union
import logging

from ....config.settings import PermissionTreeSettings, get_settings
from ....core.exceptions import PermissionDeniedError, InvalidArgumentError
from ....core.value_objects import PathLike, PermissionPath
from ..entities import CheckResult, PermissionTree, Role


logger = logging.getLogger(__name__)


class PermissionTreeService:
    """Service answering permission questions for a set of roles."""
    
    def __init__(self, settings: Optional[PermissionTreeSettings] = None):
        self.settings = settings or get_settings()
    
    def _roles(self, roles: Union[Role, Iterable[Role]]) -> List[Role]:
        if isinstance(roles, Role):
            return [roles]
        roles = list(roles)
        for role in roles:
            if not isinstance(role, Role):
                logger.warning(f"Rejected role of type {type(role).__name__}")
                raise InvalidArgumentError(
                    "roles must be of type Role or iterable of Role",
                    details={"type": type(role).__name__}
                )
        return roles
    
    def _parse(self, path: PathLike) -> PermissionPath:
        return PermissionPath.parse(path, self.settings.path_delimiter)
    
    def effective_tree(self, roles: Union[Role, Iterable[Role]]) -> PermissionTree:
        """Union of all roles' permissions as a new tree."""
        roles = self._roles(roles)
        tree = PermissionTree(delimiter=self.settings.path_delimiter)
        tree.merge([role.permissions for role in roles])
        logger.debug(f"Built effective permissions for {len(roles)} role(s)")
        return tree
    
    def is_authorized(self, roles: Union[Role, Iterable[Role]], path: PathLike) -> bool:
        """Check if any of the roles grants path."""
        roles = self._roles(roles)
        permission = self._parse(path)
        segments = list(permission.segments)
        granted = any(role.permissions.has_permission(segments) for role in roles)
        logger.debug(f"Permission {permission} {'granted' if granted else 'denied'}")
        return granted
    
    def authorize(self, roles: Union[Role, Iterable[Role]], path: PathLike) -> None:
        """Require that one of the roles grants path.
        
        Raises:
            PermissionDeniedError: If no role grants path
        """
        roles = self._roles(roles)
        if self.is_authorized(roles, path):
            return
        
        described = self._parse(path).join()
        role_codes = [role.code.value for role in roles]
        logger.warning(f"Permission denied for {described} (roles: {role_codes})")
        raise PermissionDeniedError(
            f"Permission denied: {described}",
            details={"path": described, "roles": role_codes}
        )
    
    def check(
        self,
        roles: Union[Role, Iterable[Role]],
        data: Any,
        path: Optional[PathLike] = None
    ) -> CheckResult:
        """Check data against the union of the roles' permissions at path."""
        return self.effective_tree(roles).check_object(data, path)
    
    def enforce(
        self,
        roles: Union[Role, Iterable[Role]],
        data: Any,
        path: Optional[PathLike] = None
    ) -> None:
        """Require that every field of data is covered by the roles.
        
        Raises:
            PermissionDeniedError: On the first uncovered field
            InvalidPathError: If path does not exist in the effective permissions
        """
        roles = self._roles(roles)
        result = self.check(roles, data, path)
        if result:
            return
        
        role_codes = [role.code.value for role in roles]
        if result.path is None:
            message = "Permission denied: value is not an object"
        else:
            message = f"Permission denied for field: {result.path}"
        logger.warning(f"{message} (roles: {role_codes})")
        raise PermissionDeniedError(
            message,
            details={"field": result.path, "roles": role_codes}
        )
    
    def filter(
        self,
        roles: Union[Role, Iterable[Role]],
        data: Any,
        paths: Union[None, str, Sequence[PathLike]] = None
    ) -> Any:
        """Strip from data every field none of the roles may see."""
        return self.effective_tree(roles).filter_object(data, paths)

"""Result type for structural data checks."""

from dataclasses import dataclass
from typing import Optional


class CheckResult:
    """Outcome of PermissionTree.check_object.
    
    Truthy only when the checked data is fully covered by the permissions.
    """
    
    __slots__ = ()
    
    @property
    def allowed(self) -> bool:
        return bool(self)


@dataclass(frozen=True)
class Satisfied(CheckResult):
    """Every field of the data is covered."""
    
    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Violation(CheckResult):
    """The first field not covered by the permissions.
    
    ``path`` is the joined path of the offending field, or None when the
    checked value itself is not a mapping.
    """
    
    path: Optional[str] = None
    
    def __bool__(self) -> bool:
        return False
    
    @property
    def is_not_an_object(self) -> bool:
        return self.path is None


SATISFIED = Satisfied()

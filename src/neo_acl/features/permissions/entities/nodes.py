"""Permission tree node types.

A node is either ``Granted`` (this node and everything below it is permitted)
or ``Partial`` (only the listed children are permitted). The plain-Python
structural form is ``True`` for a granted node and a dict of segment to
structural value for a partial node.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from ....core.exceptions import InvalidPermissionsObjectError


logger = logging.getLogger(__name__)


StructuralValue = Union[bool, Dict[str, Any]]


class PermissionNode(ABC):
    """Base class for permission tree nodes."""
    
    __slots__ = ()
    
    @property
    def is_granted(self) -> bool:
        return False
    
    @abstractmethod
    def to_value(self) -> StructuralValue:
        """Convert to the plain structural form."""
        ...
    
    @abstractmethod
    def copy(self) -> "PermissionNode":
        """Return an independent deep copy."""
        ...


@dataclass(frozen=True)
class Granted(PermissionNode):
    """Terminal node: this node and every path below it are permitted."""
    
    @property
    def is_granted(self) -> bool:
        return True
    
    def to_value(self) -> StructuralValue:
        return True
    
    def copy(self) -> "Granted":
        return self
    
    def __repr__(self) -> str:
        return "Granted()"


GRANTED = Granted()


@dataclass
class Partial(PermissionNode):
    """Inner node granting only its listed children."""
    
    children: Dict[str, PermissionNode] = field(default_factory=dict)
    
    def __len__(self) -> int:
        return len(self.children)
    
    def __contains__(self, segment: object) -> bool:
        return segment in self.children
    
    def get(self, segment: Any) -> Union[PermissionNode, None]:
        """Child node for a segment, or None when absent."""
        return self.children.get(segment)
    
    def to_value(self) -> StructuralValue:
        return {key: child.to_value() for key, child in self.children.items()}
    
    def copy(self) -> "Partial":
        return Partial({key: child.copy() for key, child in self.children.items()})


def validate_structure(value: Any, _path: str = "") -> None:
    """Recursively validate a structural permissions value.
    
    ``True`` is valid. A non-empty mapping with string keys whose values all
    validate is valid. Anything else is rejected.
    
    Raises:
        InvalidPermissionsObjectError: On the first invalid position found
    """
    if value is True:
        return
    
    if isinstance(value, Mapping):
        if not value:
            logger.warning(f"Rejected permissions object: empty mapping at {_path!r}")
            raise InvalidPermissionsObjectError(
                "Invalid permissions object: empty mapping",
                details={"path": _path}
            )
        for key, sub_value in value.items():
            if not isinstance(key, str) or not key:
                logger.warning(f"Rejected permissions object: key {key!r} at {_path!r}")
                raise InvalidPermissionsObjectError(
                    f"Invalid permissions object: keys must be non-empty strings, got: {key!r}",
                    details={"path": _path}
                )
            validate_structure(sub_value, f"{_path}.{key}" if _path else key)
        return
    
    logger.warning(f"Rejected permissions object: leaf {value!r} at {_path!r}")
    raise InvalidPermissionsObjectError(
        f"Invalid permissions object: expected True or a mapping, got: {value!r}",
        details={"path": _path}
    )


def node_from_value(value: Any) -> PermissionNode:
    """Validate a structural value and build the matching node tree."""
    validate_structure(value)
    return _build(value)


def _build(value: Any) -> PermissionNode:
    if value is True:
        return GRANTED
    return Partial({key: _build(sub_value) for key, sub_value in value.items()})

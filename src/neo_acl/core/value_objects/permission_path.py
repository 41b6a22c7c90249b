"""Permission path value object for neo-acl.

A path addresses a node in a permission tree. It is accepted either as a
single delimiter-joined string (``"users.profile.email"``) or as an explicit
sequence of segments (``["users", "profile", "email"]``); both forms
normalize to the same immutable tuple of segments.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Union

from ..exceptions import InvalidArgumentError


logger = logging.getLogger(__name__)


PathLike = Union[str, Sequence[str], "PermissionPath"]


@dataclass(frozen=True)
class PermissionPath:
    """Immutable value object for a permission path with validation."""
    
    segments: Tuple[str, ...] = ()
    delimiter: str = "."
    
    def __post_init__(self):
        """Validate segments: every segment must be a non-empty string."""
        for segment in self.segments:
            if not isinstance(segment, str):
                logger.warning(f"Rejected path segment of type {type(segment).__name__}")
                raise InvalidArgumentError(
                    f"Path segments must be strings, got: {type(segment).__name__}",
                    details={"segment": repr(segment)}
                )
            if not segment:
                logger.warning(f"Rejected path with empty segment: {self.segments!r}")
                raise InvalidArgumentError(
                    f"Path segments cannot be empty: {self.segments!r}",
                    details={"segments": list(self.segments)}
                )
    
    @classmethod
    def parse(cls, value: Optional[PathLike], delimiter: str = ".", allow_none: bool = False) -> "PermissionPath":
        """Normalize a string, segment sequence or PermissionPath into a PermissionPath.
        
        Args:
            value: The path in any accepted form
            delimiter: Separator used to split string paths
            allow_none: Treat None as the root path instead of rejecting it
            
        Returns:
            Normalized PermissionPath
            
        Raises:
            InvalidArgumentError: If value is neither a string nor a sequence of strings
        """
        if isinstance(value, PermissionPath):
            if value.delimiter == delimiter:
                return value
            return cls(value.segments, delimiter)
        
        if value is None and allow_none:
            return cls((), delimiter)
        
        if isinstance(value, str):
            if value == "":
                return cls((), delimiter)
            return cls(tuple(value.split(delimiter)), delimiter)
        
        if isinstance(value, (list, tuple)):
            return cls(tuple(value), delimiter)
        
        logger.warning(f"Rejected path of type {type(value).__name__}")
        raise InvalidArgumentError(
            f"Path must be of type string or sequence of strings, got: {type(value).__name__}",
            details={"value": repr(value)}
        )
    
    @property
    def is_root(self) -> bool:
        """Whether this path addresses the tree root."""
        return not self.segments
    
    @property
    def parent(self) -> "PermissionPath":
        """Path of the parent node. The root is its own parent."""
        return PermissionPath(self.segments[:-1], self.delimiter)
    
    @property
    def name(self) -> Optional[str]:
        """Last segment, or None for the root."""
        return self.segments[-1] if self.segments else None
    
    def child(self, segment: str) -> "PermissionPath":
        """Path extended by one segment."""
        return PermissionPath(self.segments + (segment,), self.delimiter)
    
    def join(self) -> str:
        """Render as a single delimiter-joined string."""
        return self.delimiter.join(self.segments)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)
    
    def __len__(self) -> int:
        return len(self.segments)
    
    def __str__(self) -> str:
        return self.join()

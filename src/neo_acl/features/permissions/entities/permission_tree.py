"""Permission tree entity for neo-acl permissions feature.

A PermissionTree holds dot-path grants such as ``users.profile`` as a tree of
Granted / Partial nodes. A grant on a path implicitly grants every path below
it, and granted nodes never carry children. The tree answers containment
queries, merges with other trees, and validates or strips nested data
against its grants.
"""

import logging
import threading
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ....config.settings import get_settings
from ....core.exceptions import InvalidArgumentError, InvalidPathError
from ....core.value_objects import PermissionPath, PathLike
from .check_result import CheckResult, Violation, SATISFIED
from .nodes import GRANTED, PermissionNode, Partial, StructuralValue, node_from_value


logger = logging.getLogger(__name__)


class PermissionTree:
    """Mutable tree of hierarchical permission grants.

    The root is guarded by a re-entrant lock; every public operation runs
    under it so concurrent readers never observe a half-applied mutation.
    """

    def __init__(
        self,
        initial: Union[None, Iterable[PathLike], StructuralValue, PermissionNode, "PermissionTree"] = None,
        delimiter: Optional[str] = None
    ):
        """Create a tree.

        Args:
            initial: Nothing for an empty tree, a sequence of paths to grant,
                a structural value (``True`` or a nested mapping), a node or
                another tree to copy
            delimiter: Path separator, defaults to the configured one

        Raises:
            InvalidArgumentError: If initial is of an unsupported type
            InvalidPermissionsObjectError: If a structural value is malformed
        """
        self.delimiter = delimiter or get_settings().path_delimiter
        self._lock = threading.RLock()
        self._root: PermissionNode = Partial()

        if initial is None:
            return
        if isinstance(initial, PermissionTree):
            self._root = initial.root.copy()
        elif isinstance(initial, PermissionNode):
            self._root = initial.copy()
        elif initial is True or isinstance(initial, Mapping):
            self.set_permissions(initial)
        elif isinstance(initial, (list, tuple, set, frozenset)):
            for path in initial:
                self.add_permission(path)
        else:
            logger.warning(f"Rejected initial permissions of type {type(initial).__name__}")
            raise InvalidArgumentError(
                "permissions must be a mapping, True or a sequence of paths",
                details={"type": type(initial).__name__}
            )

    @classmethod
    def from_paths(cls, paths: Iterable[PathLike], delimiter: Optional[str] = None) -> "PermissionTree":
        """Build a tree granting every path in paths."""
        tree = cls(delimiter=delimiter)
        for path in paths:
            tree.add_permission(path)
        return tree

    @classmethod
    def from_value(cls, value: StructuralValue, delimiter: Optional[str] = None) -> "PermissionTree":
        """Build a tree from a structural value."""
        tree = cls(delimiter=delimiter)
        tree.set_permissions(value)
        return tree

    @property
    def root(self) -> PermissionNode:
        return self._root

    def _path(self, value: Optional[PathLike], allow_none: bool = False) -> PermissionPath:
        return PermissionPath.parse(value, self.delimiter, allow_none=allow_none)

    # Mutations

    def add_permission(self, path: PathLike) -> None:
        """Grant a path and, implicitly, everything below it.

        A grant below an already granted node is a no-op. A grant on a node
        with finer-grained grants replaces them.

        Raises:
            InvalidArgumentError: If path is not a string or sequence of strings, or is empty
        """
        permission = self._path(path)
        if permission.is_root:
            logger.warning("Rejected grant of an empty path")
            raise InvalidArgumentError("Cannot grant an empty path")

        with self._lock:
            node = self._root
            segments = permission.segments
            for index, key in enumerate(segments):
                if node.is_granted:
                    logger.debug(f"Grant {permission} already covered by an ancestor")
                    return
                if index == len(segments) - 1:
                    node.children[key] = GRANTED
                else:
                    child = node.children.get(key)
                    if child is None:
                        child = node.children[key] = Partial()
                    node = child

        logger.debug(f"Granted permission {permission}")

    def set_permissions(self, value: StructuralValue) -> None:
        """Replace the whole tree with a validated structural value.

        Raises:
            InvalidPermissionsObjectError: If value (or any nested value) is
                an empty mapping, False, or any other non-True leaf
        """
        root = node_from_value(value)
        with self._lock:
            self._root = root
        logger.debug("Installed permissions object")

    def merge(self, others: Union["PermissionTree", Sequence["PermissionTree"]]) -> "PermissionTree":
        """Union the grants of other trees into this one.

        Args:
            others: A tree or a sequence of trees

        Returns:
            This tree

        Raises:
            InvalidArgumentError: If others is not a tree or contains a non-tree
        """
        if isinstance(others, PermissionTree):
            others = [others]
        elif not isinstance(others, (list, tuple)):
            logger.warning(f"Rejected merge of type {type(others).__name__}")
            raise InvalidArgumentError(
                "roles must be of type PermissionTree or sequence of PermissionTree",
                details={"type": type(others).__name__}
            )

        for other in others:
            if not isinstance(other, PermissionTree):
                logger.warning(f"Rejected merge element of type {type(other).__name__}")
                raise InvalidArgumentError(
                    "roles must be of type sequence of PermissionTree",
                    details={"type": type(other).__name__}
                )

        # Snapshot the other trees first so no two tree locks are ever held together
        snapshots = [other._snapshot() for other in others if other is not self]

        with self._lock:
            for fully_granted, granted in snapshots:
                if fully_granted:
                    self._root = GRANTED
                    continue
                for segments in granted:
                    self.add_permission(list(segments))

        logger.debug(f"Merged {len(others)} permission tree(s)")
        return self

    # Queries

    def has_permission(self, path: PathLike, allow_partial: bool = False) -> bool:
        """Check whether path or one of its ancestors is granted.

        Args:
            path: Path to check
            allow_partial: Also accept a path that merely exists in the tree
                with finer-grained grants below it

        Returns:
            True if granted; an empty path is never granted
        """
        permission = self._path(path)
        if permission.is_root:
            return False

        with self._lock:
            node = self._root
            for key in permission:
                if node.is_granted:
                    return True
                node = node.get(key)
                if node is None:
                    return False
            return node.is_granted or allow_partial

    can = has_permission

    def __contains__(self, path: PathLike) -> bool:
        return self.has_permission(path)

    def get_sub_permissions(self, path: Optional[PathLike] = None) -> PermissionNode:
        """Get the node addressed by path (the root if omitted).

        Walking through a granted node yields that granted node.

        Raises:
            InvalidPathError: If a segment does not exist in the tree
        """
        permission = self._path(path, allow_none=True)

        with self._lock:
            node = self._root
            for key in permission:
                if node.is_granted:
                    return node
                child = node.get(key)
                if child is None:
                    logger.warning(f"Invalid path to sub-permission: {permission}")
                    raise InvalidPathError(
                        f"invalid path to sub-permission: {permission}",
                        details={"path": permission.join(), "segment": key}
                    )
                node = child
            return node

    def get_flat_permissions(self, path: Optional[PathLike] = None, value: Any = True) -> Dict[str, Any]:
        """Flatten the maximal grants below path into joined path strings.

        Args:
            path: Sub-permission path to flatten, the root if omitted
            value: Value every flattened path maps to, e.g. 1 for field projections

        Returns:
            Mapping of path (relative to ``path``) to value
        """
        with self._lock:
            node = self.get_sub_permissions(path)
            return {
                self.delimiter.join(segments): value
                for segments in self._flatten(node)
            }

    def granted_paths(self) -> List[str]:
        """Every maximal granted path of the tree, joined."""
        with self._lock:
            return [self.delimiter.join(segments) for segments in self._flatten(self._root)]

    def _snapshot(self) -> Tuple[bool, List[Tuple[str, ...]]]:
        with self._lock:
            return self._root.is_granted, list(self._flatten(self._root))

    def _flatten(self, node: PermissionNode, prefix: Tuple[str, ...] = ()) -> Iterator[Tuple[str, ...]]:
        if node.is_granted:
            return
        for key, child in node.children.items():
            segments = prefix + (key,)
            if child.is_granted:
                yield segments
            else:
                yield from self._flatten(child, segments)

    def is_empty(self, path: Optional[PathLike] = None) -> bool:
        """Whether the node at path (the root if omitted) grants nothing.

        Raises:
            InvalidPathError: If path does not exist in the tree
        """
        with self._lock:
            node = self.get_sub_permissions(path)
            return not node.is_granted and len(node) == 0

    # Data checks

    def check_object(self, data: Any, path: Optional[PathLike] = None) -> CheckResult:
        """Check that every field of data is covered by the permissions at path.

        The data drives the traversal: every key of every nested mapping is
        looked up in the permissions. Non-mapping values below the top level
        count as covered leaves.

        Returns:
            Satisfied, or a Violation holding the joined path of the first
            uncovered field (None when data itself is not a mapping)

        Raises:
            InvalidPathError: If path does not exist in the tree
        """
        with self._lock:
            node = self.get_sub_permissions(path)
            result = self._check(data, node, "")

        if not result:
            logger.debug(f"Object check failed at {result.path!r}")
        return result

    def _check(self, data: Any, node: Optional[PermissionNode], path: str) -> CheckResult:
        if node is not None and node.is_granted:
            return SATISFIED
        if node is None:
            return Violation(path or None)
        if isinstance(data, Mapping):
            for key, sub_data in data.items():
                sub_path = f"{path}{self.delimiter}{key}" if path else str(key)
                result = self._check(sub_data, node.get(key), sub_path)
                if not result:
                    return result
        elif path == "":
            return Violation(None)
        return SATISFIED

    def filter_object(self, data: Any, paths: Union[None, str, Sequence[PathLike]] = None) -> Any:
        """Strip from data every key not covered by the permissions.

        Args:
            data: Nested mapping to filter, mutated in place
            paths: Optional path or sequence of paths whose sub-permissions are
                unioned and used instead of the whole tree; paths that do not
                exist contribute nothing

        Returns:
            The same data object

        Raises:
            InvalidArgumentError: If paths is neither a string nor a sequence of paths
        """
        if paths is None or (isinstance(paths, (list, tuple)) and len(paths) == 0):
            with self._lock:
                return self._filter(data, self._root)

        if isinstance(paths, (str, PermissionPath)):
            paths = [paths]
        elif not isinstance(paths, (list, tuple)):
            logger.warning(f"Rejected filter paths of type {type(paths).__name__}")
            raise InvalidArgumentError(
                "paths must be of type sequence",
                details={"type": type(paths).__name__}
            )

        helper = PermissionTree(delimiter=self.delimiter)
        with self._lock:
            for path in paths:
                try:
                    sub_permissions = self.get_sub_permissions(path)
                except InvalidPathError:
                    logger.debug(f"Skipping unknown filter path {path!r}")
                    continue
                helper.merge(PermissionTree(sub_permissions, delimiter=self.delimiter))

        if helper.is_empty():
            if isinstance(data, MutableMapping):
                data.clear()
            return data

        return helper._filter(data, helper.root)

    def _filter(self, data: Any, node: PermissionNode) -> Any:
        if node.is_granted:
            return data
        if isinstance(data, MutableMapping):
            for key in list(data.keys()):
                child = node.get(key)
                if child is not None:
                    data[key] = self._filter(data[key], child)
                else:
                    del data[key]
        return data

    # Conversion

    def to_dict(self) -> StructuralValue:
        """Plain structural form: True for a fully granted tree, else nested dicts."""
        with self._lock:
            return self._root.to_value()

    def copy(self) -> "PermissionTree":
        """Independent deep copy of this tree."""
        with self._lock:
            return PermissionTree(self._root, delimiter=self.delimiter)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionTree):
            return NotImplemented
        return self._root == other._root

    def __repr__(self) -> str:
        if self._root.is_granted:
            return "PermissionTree(True)"
        return f"PermissionTree({sorted(self.granted_paths())!r})"

"""
Path resolution utilities for jsonchanges.

This module turns dotted or segmented paths into locations inside a tree of
nested dicts and lists, and provides the primitive read, existence, write
and delete operations the change applicator is built on.

Resolution never raises for malformed or non-matching paths: lookups report
"not found" and mutations report that nothing changed.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any

from jsonchanges.core.types import (
    MISSING,
    JSONArray,
    JSONObject,
    JSONValue,
    PathLike,
    PathSegments,
)
from jsonchanges.exceptions import PathNotFoundError
from jsonchanges.models import DEFAULT_OPTIONS, ApplyOptions, IndexGapPolicy

logger = logging.getLogger(__name__)

_INDEX_PATTERN = re.compile(r"0|[1-9][0-9]*")


@dataclass
class ResolvedSlot:
    """
    The container that directly holds an addressed slot, and the slot's key.

    For dict containers the key is the segment string, for lists it is the
    parsed index. The index may point past the end of the list when the slot
    was resolved for a write.
    """

    container: JSONObject | JSONArray
    key: str | int

    @property
    def exists(self) -> bool:
        """Check whether the slot currently holds a value."""
        if isinstance(self.container, list):
            return 0 <= self.key < len(self.container)
        return self.key in self.container

    def get(self) -> JSONValue:
        """Return the value held by the slot."""
        return self.container[self.key]


def split_path(path: PathLike, separator: str = ".") -> PathSegments:
    """
    Normalize a path into its segments.

    Params:
        path: Delimited string, or a sequence of segments used verbatim
        separator: Delimiter for string paths

    Returns:
        Tuple of string segments, empty for an empty path

    Examples:
        "users.0.name" -> ("users", "0", "name")
        ["a.b", 1] -> ("a.b", "1")
        "" -> ()
    """
    if isinstance(path, str):
        if not path:
            return ()
        return tuple(path.split(separator))
    return tuple(str(segment) for segment in path)


def parse_index(segment: str) -> int | None:
    """
    Parse a segment as a list index.

    Only canonical non-negative integers qualify, so "-1", "01" and "1.5"
    are not indexes.
    """
    if _INDEX_PATTERN.fullmatch(segment):
        return int(segment)
    return None


def _child(container: Any, segment: str) -> Any:
    """Look up one segment in a container, MISSING if there is nothing there."""
    if isinstance(container, dict):
        return container.get(segment, MISSING)
    if isinstance(container, list):
        index = parse_index(segment)
        if index is not None and index < len(container):
            return container[index]
    return MISSING


def _assign(
    container: JSONObject | JSONArray,
    key: str | int,
    value: Any,
    options: ApplyOptions,
) -> bool:
    """Write a value into a resolved slot, honouring the index gap policy."""
    if isinstance(container, dict):
        container[key] = value
        return True

    if key < len(container):
        container[key] = value
        return True

    if options.index_gap is IndexGapPolicy.IGNORE and key > len(container):
        return False

    container.extend([None] * (key - len(container)))
    container.append(value)
    return True


def _slot_key(container: Any, segment: str) -> str | int | None:
    if isinstance(container, dict):
        return segment
    if isinstance(container, list):
        return parse_index(segment)
    return None


def resolve_parent(
    root: JSONValue,
    path: PathLike,
    *,
    create: bool = False,
    options: ApplyOptions | None = None,
) -> ResolvedSlot | None:
    """
    Locate the container holding the slot addressed by a path.

    Segments are matched against the container found at each step: against
    a list a segment must be an in-bounds index, against a dict it is an
    exact key, so numeric-looking segments are plain keys in dicts.

    Params:
        root: Tree to walk
        path: Path to resolve
        create: Create missing intermediates as dicts, replacing primitives
            that stand in the way
        options: Separator and index gap policy

    Returns:
        ResolvedSlot for the final segment, or None when the path is empty or
        cannot be walked
    """
    options = options or DEFAULT_OPTIONS
    segments = split_path(path, options.separator)
    if not segments:
        return None

    current: Any = root
    for segment in segments[:-1]:
        child = _child(current, segment)
        if isinstance(child, dict | list):
            current = child
            continue
        if not create:
            return None

        key = _slot_key(current, segment)
        if key is None:
            return None
        child = {}
        if not _assign(current, key, child, options):
            return None
        current = child

    key = _slot_key(current, segments[-1])
    if key is None:
        return None
    return ResolvedSlot(container=current, key=key)


def has_path(root: JSONValue, path: PathLike, separator: str = ".") -> bool:
    """Check whether a path resolves to a present value."""
    slot = resolve_parent(root, path, options=ApplyOptions(separator=separator))
    return slot is not None and slot.exists


def get_path(
    root: JSONValue,
    path: PathLike,
    default: Any = MISSING,
    separator: str = ".",
) -> JSONValue:
    """
    Read the value at a path.

    Params:
        root: Tree to read from
        path: Path to the value
        default: Returned when the path does not resolve
        separator: Delimiter for string paths

    Returns:
        The value found at the path, or default

    Raises:
        PathNotFoundError: When the path does not resolve and no default is given
    """
    slot = resolve_parent(root, path, options=ApplyOptions(separator=separator))
    if slot is not None and slot.exists:
        return slot.get()
    if default is MISSING:
        raise PathNotFoundError(path)
    return default


def set_path(
    root: JSONValue,
    path: PathLike,
    value: JSONValue,
    options: ApplyOptions | None = None,
) -> bool:
    """
    Write a value at a path in place, creating intermediate dicts as needed.

    Params:
        root: Tree to mutate
        path: Path of the slot to write
        value: Value to store, overwriting any existing one
        options: Separator and index gap policy

    Returns:
        True when the tree was written to
    """
    options = options or DEFAULT_OPTIONS
    slot = resolve_parent(root, path, create=True, options=options)
    if slot is None:
        logger.debug("Skipping set of %r: path cannot be resolved", path)
        return False
    if not _assign(slot.container, slot.key, value, options):
        logger.debug("Skipping set of %r: index %s is past the end", path, slot.key)
        return False
    return True


def delete_path(
    root: JSONValue,
    path: PathLike,
    options: ApplyOptions | None = None,
) -> bool:
    """
    Remove the slot at a path in place.

    Dict slots lose their key; list slots are removed and the following
    elements shift down by one.

    Returns:
        True when a slot was removed
    """
    if not root:
        return False

    slot = resolve_parent(root, path, options=options)
    if slot is None or not slot.exists:
        logger.debug("Skipping delete of %r: nothing at this path", path)
        return False

    del slot.container[slot.key]
    return True

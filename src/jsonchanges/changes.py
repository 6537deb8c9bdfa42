"""
Change records and the change applicator.

A change pairs a path with a value. Supplying a value, even None, makes it a
set; leaving the value out makes it a delete. `apply_changes` folds a list of
changes, in order, over a deep copy of the input tree.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationError,
    field_validator,
    model_serializer,
)

from jsonchanges.core.cloning import clone_tree
from jsonchanges.core.path_utils import delete_path, set_path, split_path
from jsonchanges.core.types import (
    MISSING,
    JSONArray,
    JSONObject,
    JSONValue,
    PathLike,
    PathSegments,
)
from jsonchanges.exceptions import ChangeFormatError
from jsonchanges.models import DEFAULT_OPTIONS, ApplyOptions

logger = logging.getLogger(__name__)


class Change(BaseModel):
    """
    One path-addressed edit.

    A change without a value is a delete. The absent value is held as MISSING
    and left out of dumps, so `Change(path="a", value=None)` stays a write of
    null and a dumped delete reloads as a delete.
    """

    model_config = ConfigDict(frozen=True)

    path: str | tuple[str, ...]
    value: Any = MISSING

    @field_validator("path", mode="before")
    @classmethod
    def _normalize_segments(cls, path: Any) -> Any:
        if isinstance(path, list | tuple):
            return tuple(str(segment) for segment in path)
        return path

    @model_serializer(mode="wrap")
    def _omit_missing_value(self, handler: SerializerFunctionWrapHandler) -> dict:
        data = handler(self)
        if self.value is MISSING:
            data.pop("value", None)
        return data

    @classmethod
    def set(cls, path: PathLike, value: JSONValue) -> "Change":
        """Build a change that writes value at path."""
        return cls(path=path, value=value)

    @classmethod
    def delete(cls, path: PathLike) -> "Change":
        """Build a change that removes the slot at path."""
        return cls(path=path)

    @property
    def is_delete(self) -> bool:
        """Check if this change removes its slot rather than writing to it."""
        return self.value is MISSING

    def segments(self, separator: str = ".") -> PathSegments:
        """Return the path split into segments."""
        return split_path(self.path, separator)


def _as_change(item: Any) -> Change:
    if isinstance(item, Change):
        return item
    if isinstance(item, Mapping):
        try:
            return Change.model_validate(dict(item))
        except ValidationError as e:
            raise ChangeFormatError(item, str(e)) from e
    raise ChangeFormatError(
        item, f"expected a Change or a mapping, got {type(item).__name__}"
    )


def flatten_changes(changes: tuple[Any, ...]) -> list[Change]:
    """
    Flatten change arguments by one level.

    Lists nested any deeper carry no path and are skipped.

    Params:
        changes: Changes, mappings, or lists/tuples of them

    Returns:
        The changes in order, as Change instances

    Raises:
        ChangeFormatError: When an item cannot be read as a change
    """
    flat: list[Change] = []
    for item in changes:
        if isinstance(item, list | tuple):
            for inner in item:
                if isinstance(inner, list | tuple):
                    logger.debug("Skipping nested change list %r", inner)
                    continue
                flat.append(_as_change(inner))
        else:
            flat.append(_as_change(item))
    return flat


def apply_change(
    tree: JSONValue,
    change: Change,
    options: ApplyOptions | None = None,
) -> JSONValue:
    """
    Apply one change to a tree in place.

    Paths that cannot be resolved are skipped without error.

    Params:
        tree: Tree to mutate; callers wanting value semantics clone it first
        change: The set or delete to apply
        options: Resolution and write behaviour

    Returns:
        The same tree reference that was passed in
    """
    options = options or DEFAULT_OPTIONS

    if change.is_delete:
        delete_path(tree, change.path, options)
    else:
        value = clone_tree(change.value) if options.copy_values else change.value
        set_path(tree, change.path, value, options)

    return tree


def apply_changes(
    initial: JSONObject | JSONArray,
    *changes: Change | Mapping[str, Any] | list | tuple,
    options: ApplyOptions | None = None,
) -> JSONObject | JSONArray:
    """
    Apply changes, in order, to a copy of a tree.

    The input tree is never modified and the result shares no containers
    with it. Later changes observe the effect of earlier ones, so the last
    write to a path wins.

    Params:
        initial: Tree to start from
        *changes: Changes, mappings with "path" and optional "value", or
            lists/tuples of those
        options: Resolution and write behaviour

    Returns:
        A new tree with every change applied

    Examples:
        apply_changes({}, {"path": "a.b", "value": 1}) -> {"a": {"b": 1}}
        apply_changes(["x", "y"], Change.delete("0")) -> ["y"]
    """
    flat = flatten_changes(changes)
    result = clone_tree(initial)
    for change in flat:
        result = apply_change(result, change, options)

    logger.debug("Applied %d change(s)", len(flat))
    return result

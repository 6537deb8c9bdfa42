"""
Core jsonchanges components.

This package provides the building blocks the change applicator is composed
of: type definitions, the structural cloner and the path resolver.
"""

from jsonchanges.core.cloning import clone_tree
from jsonchanges.core.path_utils import (
    ResolvedSlot,
    delete_path,
    get_path,
    has_path,
    parse_index,
    resolve_parent,
    set_path,
    split_path,
)
from jsonchanges.core.types import (
    MISSING,
    JSONArray,
    JSONObject,
    JSONValue,
    PathLike,
    PathSegments,
)

__all__ = [
    "MISSING",
    "JSONArray",
    "JSONObject",
    "JSONValue",
    "PathLike",
    "PathSegments",
    "ResolvedSlot",
    "clone_tree",
    "delete_path",
    "get_path",
    "has_path",
    "parse_index",
    "resolve_parent",
    "set_path",
    "split_path",
]

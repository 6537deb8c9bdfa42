"""
jsonchanges - Apply path-addressed edits to JSON-like trees

jsonchanges applies ordered set/delete changes to nested dicts and lists and
returns a new tree, leaving the input untouched.
"""

from importlib.metadata import version

from jsonchanges.changes import Change, apply_change, apply_changes
from jsonchanges.core import (
    JSONArray,
    JSONObject,
    JSONValue,
    PathLike,
    clone_tree,
    delete_path,
    get_path,
    has_path,
    resolve_parent,
    set_path,
    split_path,
)
from jsonchanges.exceptions import (
    ChangeFormatError,
    JsonChangesError,
    PathNotFoundError,
)
from jsonchanges.models import ApplyOptions, IndexGapPolicy

__version__ = version("jsonchanges")

__all__ = [
    "__version__",
    "apply_changes",
    "apply_change",
    "Change",
    "ApplyOptions",
    "IndexGapPolicy",
    "clone_tree",
    "split_path",
    "resolve_parent",
    "has_path",
    "get_path",
    "set_path",
    "delete_path",
    "JSONValue",
    "JSONObject",
    "JSONArray",
    "PathLike",
    "JsonChangesError",
    "ChangeFormatError",
    "PathNotFoundError",
]

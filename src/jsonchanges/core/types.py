"""
Core type definitions for jsonchanges.

This module contains the type aliases shared by the cloner, the path
resolver and the change applicator.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Union

JSONObject = dict[str, "JSONValue"]

JSONArray = list["JSONValue"]

JSONValue = Union[str, int, float, bool, None, JSONObject, JSONArray]

PathLike = str | Sequence[str | int]

PathSegments = tuple[str, ...]


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


# Marks an absent value, as opposed to an explicit None
MISSING = _Missing.MISSING

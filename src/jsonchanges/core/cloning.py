"""
Structural deep copy of JSON-like trees.
"""

from typing import Any

from jsonchanges.core.types import JSONValue


def clone_tree(tree: JSONValue) -> JSONValue:
    """
    Copy a tree so that no container in the result is shared with the input.

    Mappings and sequences are rebuilt (tuples come back as lists); every
    other value is a leaf and is returned as-is. The walk uses an explicit
    stack, so nesting depth is not bounded by the interpreter's recursion
    limit.

    Params:
        tree: The value to copy

    Returns:
        A deep-equal copy built from freshly allocated containers
    """
    holder: list[Any] = [None]
    # (target container, key in target, source value)
    stack: list[tuple[Any, Any, Any]] = [(holder, 0, tree)]

    while stack:
        target, key, value = stack.pop()
        if isinstance(value, dict):
            copied: Any = dict.fromkeys(value)
            stack.extend((copied, k, v) for k, v in value.items())
        elif isinstance(value, list | tuple):
            copied = [None] * len(value)
            stack.extend((copied, i, item) for i, item in enumerate(value))
        else:
            copied = value
        target[key] = copied

    return holder[0]

"""
Exception classes for jsonchanges.

Malformed or non-matching paths are never errors: the applicator skips
them. The exceptions below cover caller mistakes outside the path
contract, such as passing something that is not a change at all.
"""

from typing import Any


class JsonChangesError(Exception):
    """Base exception for all jsonchanges errors."""

    pass


class ChangeFormatError(JsonChangesError, TypeError):
    """Raised when an argument cannot be interpreted as a change record."""

    def __init__(self, change: Any, reason: str):
        """
        Initialize the exception.

        Params:
            change: The offending argument
            reason: Why it could not be read as a change
        """
        self.change = change
        self.reason = reason
        super().__init__(f"Invalid change {change!r}: {reason}")


class PathNotFoundError(JsonChangesError, KeyError):
    """Raised by strict lookups when a path does not resolve to a value."""

    def __init__(self, path: Any, reason: str = "no value at this path"):
        """
        Initialize the exception.

        Params:
            path: The path that failed to resolve
            reason: Which step of the walk failed
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve path {path!r}: {reason}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])

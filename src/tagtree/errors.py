"""
Exceptions raised by tagtree.

Only two things can go wrong: the input lines do not form a balanced document,
or remove_tag() is asked to remove a tag it does not know how to unwrap.
Everything else (missing table, missing row, missing word) is a no-op.
"""

from __future__ import annotations


class TagTreeError(Exception):
    """Base class for all tagtree errors."""
    pass


class MalformedInputError(TagTreeError, ValueError):
    """Raised when the input lines cannot be built into a tree."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidArgumentError(TagTreeError, ValueError):
    """Raised when an edit is called with an argument outside its contract."""
    pass

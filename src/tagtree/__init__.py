"""
tagtree - a small DOM engine for line-oriented HTML-like documents.

Build a tree from lines, edit it in place, render it back.
"""

from .builder import build, parse, read_lines
from .dom import Element, Node, Text, Tree, find_element, siblings, walk
from .edits import add_tag, bold_row, remove_tag, replace_tag
from .errors import InvalidArgumentError, MalformedInputError, TagTreeError
from .render import render, render_lines

__all__ = [
    "Element",
    "InvalidArgumentError",
    "MalformedInputError",
    "Node",
    "TagTreeError",
    "Text",
    "Tree",
    "add_tag",
    "bold_row",
    "build",
    "find_element",
    "parse",
    "read_lines",
    "remove_tag",
    "render",
    "render_lines",
    "replace_tag",
    "siblings",
    "walk",
]

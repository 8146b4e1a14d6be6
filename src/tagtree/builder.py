"""
Builder: turn document lines into a Tree.

Each input line is exactly one of:
- an open marker   <name>
- a close marker   </name>
- a line of text   (anything else, kept verbatim)

Open elements are tracked on a stack of back-references; ownership stays with
the tree links.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .config import get_config
from .dom import Element, Node, Text, Tree, last_in_chain
from .errors import MalformedInputError

logger = logging.getLogger(__name__)


def is_close_marker(line: str) -> bool:
    return len(line) >= 2 and line[0] == "<" and line[-1] == ">" and line[1] == "/"


def is_open_marker(line: str) -> bool:
    return len(line) >= 2 and line[0] == "<" and line[-1] == ">" and line[1] != "/"


def build(lines: Iterable[str]) -> Tree:
    """
    Build a tree from document lines.

    Raises MalformedInputError for a close marker with nothing open, text
    outside any element, an empty line, or elements still open at the end.
    """
    tree = Tree()
    stack: list[Element] = []
    line_number = 0
    created = 0

    for line_number, line in enumerate(lines, start=1):
        if not line:
            raise MalformedInputError("empty line", line_number)

        if is_close_marker(line):
            if not stack:
                raise MalformedInputError(f"{line} closes nothing", line_number)
            closed = stack.pop()
            if line[2:-1] != closed.name:
                logger.warning(
                    "line %d: %s closes <%s>", line_number, line, closed.name
                )
            continue

        if is_open_marker(line):
            node: Node = Element(name=line[1:-1])
        else:
            if not stack:
                raise MalformedInputError(
                    f"text outside any element: {line[:50]!r}", line_number
                )
            node = Text(content=line)

        if stack:
            stack[-1].append_child(node)
        elif tree.root is None:
            tree.root = node
        else:
            # a second top-level element continues the root chain
            last_in_chain(tree.root).next_sibling = node
        created += 1

        if isinstance(node, Element):
            stack.append(node)

    if stack:
        raise MalformedInputError(
            f"unclosed element <{stack[-1].name}>", line_number + 1
        )

    logger.debug("Built tree with %d nodes from %d lines", created, line_number)
    return tree


def read_lines(text: str, skip_blank: bool | None = None) -> list[str]:
    """
    Split document text into builder lines.

    Line breaks (\\n, \\r\\n) are removed. Empty lines are dropped unless
    skip_blank is False (defaults to the io.skip_blank_lines setting).
    Whitespace-only lines are text and always kept.
    """
    if skip_blank is None:
        skip_blank = get_config().io.skip_blank_lines
    lines = text.splitlines()
    if skip_blank:
        lines = [line for line in lines if line]
    return lines


def parse(text: str) -> Tree:
    """Build a tree straight from document text."""
    return build(read_lines(text))

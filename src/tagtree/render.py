"""
Serializer: render a Tree back to document lines.

Output uses the same one-unit-per-line grammar the builder reads, so
render(build(lines)) gives the lines back.
"""

from __future__ import annotations

from .dom import Element, Node, Tree, siblings


def render_lines(tree: Tree) -> list[str]:
    """Render the tree as a list of lines, without line breaks."""
    lines: list[str] = []
    _render_chain(tree.root, lines)
    return lines


def render(tree: Tree) -> str:
    """Render the tree as text, one unit per line, each ending in a newline."""
    return "".join(line + "\n" for line in render_lines(tree))


def _render_chain(node: Node | None, out: list[str]) -> None:
    for current in siblings(node):
        if isinstance(current, Element):
            out.append(f"<{current.name}>")
            _render_chain(current.first_child, out)
            out.append(f"</{current.name}>")
        else:
            out.append(current.content)

"""
DOM - Document Object Model for tagtree

A document is a forest of nodes linked first-child / next-sibling. Each node
owns its first child and its next sibling, so every sibling chain is a plain
singly linked list. There are no parent pointers: code that needs the
enclosing node carries it down the recursion.

Key invariant: only Elements have children. Text nodes are leaves.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Element:
    """A structural tag, e.g. <td>, owning a chain of children."""
    name: str
    first_child: Node | None = field(default=None, repr=False)
    next_sibling: Node | None = field(default=None, repr=False)

    def children(self) -> Iterator[Node]:
        """Iterate direct children in document order."""
        return siblings(self.first_child)

    def append_child(self, child: Node) -> Node:
        """Link child as the last child and return it for chaining."""
        if self.first_child is None:
            self.first_child = child
        else:
            last_in_chain(self.first_child).next_sibling = child
        return child


@dataclass(eq=False)
class Text:
    """A line of literal document content."""
    content: str
    next_sibling: Node | None = field(default=None, repr=False)


Node = Element | Text


@dataclass(eq=False)
class Tree:
    """A parsed document: the head of the top-level sibling chain."""
    root: Node | None = None

    def __iter__(self) -> Iterator[Node]:
        """Traverse the whole document in preorder."""
        return walk(self.root)

    def top_level(self) -> Iterator[Node]:
        """Iterate the top-level chain (normally just the root element)."""
        return siblings(self.root)


def siblings(node: Node | None) -> Iterator[Node]:
    """Iterate a sibling chain starting at node."""
    while node is not None:
        # read the link first so callers may relink the yielded node
        following = node.next_sibling
        yield node
        node = following


def last_in_chain(node: Node) -> Node:
    """Return the last node of the chain that starts at node."""
    while node.next_sibling is not None:
        node = node.next_sibling
    return node


def walk(node: Node | None) -> Iterator[Node]:
    """Traverse a chain depth-first, yielding each node before its children."""
    for current in siblings(node):
        yield current
        if isinstance(current, Element):
            yield from walk(current.first_child)


def find_element(
    start: Tree | Node | None, name: str, populated: bool = False
) -> Element | None:
    """
    Find the first element with the given name, in preorder.

    With populated=True, elements without children are skipped.
    """
    nodes = iter(start) if isinstance(start, Tree) else walk(start)
    for node in nodes:
        if not isinstance(node, Element) or node.name != name:
            continue
        if populated and node.first_child is None:
            continue
        return node
    return None

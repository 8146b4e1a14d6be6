"""
Structural edits on a Tree.

All four edits work in place on the sibling chains. Anything that replaces a
node in a chain needs the slot pointing at it: the predecessor's
next_sibling, the parent's first_child, or the tree root. Since nodes carry
no parent pointer, the recursion passes (parent, prev) down explicitly.
"""

from __future__ import annotations

import logging

from .config import get_config
from .dom import Element, Node, Text, Tree, find_element, last_in_chain, siblings
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

INLINE_TAGS = frozenset({"p", "em", "b"})
LIST_TAGS = frozenset({"ol", "ul"})
REMOVABLE_TAGS = INLINE_TAGS | LIST_TAGS


def _relink(tree: Tree, parent: Element | None, prev: Node | None, node: Node | None) -> None:
    """Point whatever slot precedes a chain position at node."""
    if prev is not None:
        prev.next_sibling = node
    elif parent is not None:
        parent.first_child = node
    else:
        tree.root = node


# ── rename ──


def replace_tag(tree: Tree, old: str, new: str) -> None:
    """Rename every <old> element to <new>. Text and childless elements are never touched."""
    count = _rename(tree.root, old, new)
    logger.debug("replace_tag %r -> %r: %d elements renamed", old, new, count)


def _rename(node: Node | None, old: str, new: str) -> int:
    count = 0
    for current in siblings(node):
        if isinstance(current, Element) and current.first_child is not None:
            count += _rename(current.first_child, old, new)
            if current.name == old:
                current.name = new
                count += 1
    return count


# ── bold row ──


def bold_row(tree: Tree, row: int) -> None:
    """
    Boldface every column of one row of the first table that has children.

    Rows and columns are positional: the row-th child of the table (1-based)
    and each child of that row, whatever their tag names. A bold element is
    inserted directly under each column, adopting the column's content.
    No table, row < 1, or too few rows: nothing happens.
    """
    markup = get_config().markup
    table = find_element(tree, markup.table_tag, populated=True)
    if table is None or row < 1:
        logger.debug("bold_row %d: no table or row out of range", row)
        return

    target = table.first_child
    for _ in range(row - 1):
        if target is None:
            break
        target = target.next_sibling
    if not isinstance(target, Element):
        logger.debug("bold_row %d: table has no such row", row)
        return

    for column in target.children():
        if isinstance(column, Element):
            column.first_child = Element(markup.bold_tag, first_child=column.first_child)
    logger.debug("bold_row %d: row <%s> boldfaced", row, target.name)


# ── remove ──


def remove_tag(tree: Tree, name: str) -> None:
    """
    Remove every <name> element, promoting its children into its place.
    Childless elements are left where they are.

    p, em and b are unwrapped as is. For ol and ul, the li elements directly
    under the removed list become p first, so each item stays a paragraph.
    """
    if name not in REMOVABLE_TAGS:
        raise InvalidArgumentError(
            f"Cannot remove <{name}>: expected one of {', '.join(sorted(REMOVABLE_TAGS))}"
        )
    count = _remove(tree, tree.root, None, name)
    logger.debug("remove_tag %r: %d elements removed", name, count)


def _remove(tree: Tree, node: Node | None, parent: Element | None, name: str) -> int:
    markup = get_config().markup
    count = 0
    prev: Node | None = None

    for current in siblings(node):
        # text and childless elements are never unwrapped
        if not isinstance(current, Element) or current.first_child is None:
            prev = current
            continue

        count += _remove(tree, current.first_child, current, name)
        if current.name != name:
            prev = current
            continue

        if name in LIST_TAGS:
            for item in current.children():
                if isinstance(item, Element) and item.name == markup.list_item_tag:
                    item.name = markup.list_item_replacement

        promoted = current.first_child
        _relink(tree, parent, prev, promoted)
        tail = last_in_chain(promoted)
        tail.next_sibling = current.next_sibling
        # promoted nodes were cleaned by the recursion above
        prev = tail
        current.first_child = None
        current.next_sibling = None
        count += 1

    return count


# ── word tag ──


def add_tag(tree: Tree, word: str, tag: str) -> None:
    """
    Wrap word in a new <tag> element wherever it appears in text.

    Matching is case-insensitive on space-separated tokens, and one trailing
    punctuation mark is allowed ("end." matches "end"); the mark stays inside
    the tag. Only the first occurrence in each text node is wrapped.
    """
    if not word:
        return
    count = _tag_words(tree, tree.root, None, word.lower(), tag)
    logger.debug("add_tag %r in <%s>: %d occurrences tagged", word, tag, count)


def _matches(token: str, word: str, punctuation: str) -> bool:
    lowered = token.lower()
    if lowered == word:
        return True
    return len(token) > 1 and token[-1] in punctuation and lowered[:-1] == word


def _tag_words(tree: Tree, node: Node | None, parent: Element | None, word: str, tag: str) -> int:
    punctuation = get_config().words.punctuation
    count = 0
    prev: Node | None = None

    for current in siblings(node):
        if isinstance(current, Element):
            count += _tag_words(tree, current.first_child, current, word, tag)
            prev = current
            continue

        tokens = current.content.split(" ")
        hit = next((i for i, t in enumerate(tokens) if _matches(t, word, punctuation)), None)
        if hit is None:
            prev = current
            continue

        wrapper = Element(tag, first_child=Text(tokens[hit]))
        chain: list[Node] = []
        if hit > 0:
            chain.append(Text(" ".join(tokens[:hit])))
        chain.append(wrapper)
        if hit < len(tokens) - 1:
            chain.append(Text(" ".join(tokens[hit + 1:])))

        for left, right in zip(chain, chain[1:]):
            left.next_sibling = right
        chain[-1].next_sibling = current.next_sibling
        _relink(tree, parent, prev, chain[0])
        current.next_sibling = None

        # the suffix is not rescanned
        prev = chain[-1]
        count += 1

    return count

"""
Tier 0: Data Model Contract Tests

These tests pin down the node model the builder and the edits rely on:
first-child / next-sibling links, no parent pointers, text nodes as leaves.
"""

from tagtree.dom import Element, Text, Tree, find_element, last_in_chain, siblings, walk


def _chain(*nodes):
    for left, right in zip(nodes, nodes[1:]):
        left.next_sibling = right
    return nodes[0]


class TestNodeCreation:
    def test_element_creation(self):
        node = Element(name="td")
        assert node.name == "td"
        assert node.first_child is None
        assert node.next_sibling is None

    def test_text_creation(self):
        node = Text(content="hello world")
        assert node.content == "hello world"
        assert node.next_sibling is None

    def test_text_has_no_children(self):
        assert not hasattr(Text(content="x"), "first_child")

    def test_nodes_compare_by_identity(self):
        assert Text(content="x") != Text(content="x")

    def test_repr_does_not_follow_links(self):
        node = Element(name="p", first_child=Text(content="inner"))
        assert "inner" not in repr(node)


class TestAppendChild:
    def test_append_to_empty(self):
        parent = Element(name="p")
        child = Text(content="a")
        result = parent.append_child(child)
        assert result is child
        assert parent.first_child is child

    def test_append_keeps_order(self):
        parent = Element(name="ul")
        a, b, c = Element(name="li"), Element(name="li"), Element(name="li")
        parent.append_child(a)
        parent.append_child(b)
        parent.append_child(c)
        assert list(parent.children()) == [a, b, c]
        assert c.next_sibling is None


class TestChains:
    def test_siblings(self):
        a, b, c = Text("a"), Text("b"), Text("c")
        assert list(siblings(_chain(a, b, c))) == [a, b, c]

    def test_siblings_of_none(self):
        assert list(siblings(None)) == []

    def test_siblings_survives_relinking_current(self):
        a, b, c = Text("a"), Text("b"), Text("c")
        seen = []
        for node in siblings(_chain(a, b, c)):
            seen.append(node)
            node.next_sibling = None
        assert seen == [a, b, c]

    def test_last_in_chain(self):
        a, b, c = Text("a"), Text("b"), Text("c")
        assert last_in_chain(_chain(a, b, c)) is c
        assert last_in_chain(c) is c


class TestTreeTraversal:
    def _tree(self):
        gc = Text("gc")
        c1 = Element("c1", first_child=gc)
        c2 = Text("c2")
        root = Element("root", first_child=_chain(c1, c2))
        return Tree(root=root)

    def test_walk_is_preorder(self):
        tree = self._tree()
        labels = [n.name if isinstance(n, Element) else n.content for n in walk(tree.root)]
        assert labels == ["root", "c1", "gc", "c2"]

    def test_tree_iterates_preorder(self):
        tree = self._tree()
        assert list(tree) == list(walk(tree.root))

    def test_empty_tree(self):
        tree = Tree()
        assert list(tree) == []
        assert list(tree.top_level()) == []


class TestFindElement:
    def test_first_match_in_preorder(self):
        inner = Element("table", first_child=Text("inner"))
        outer_first = Element("div", first_child=inner)
        later = Element("table", first_child=Text("later"))
        tree = Tree(root=Element("body", first_child=_chain(outer_first, later)))
        assert find_element(tree, "table") is inner

    def test_text_never_matches(self):
        tree = Tree(root=Element("p", first_child=Text("table")))
        assert find_element(tree, "table") is None

    def test_from_node(self):
        target = Element("b")
        start = Element("p", first_child=target)
        assert find_element(start, "b") is target

    def test_not_found(self):
        assert find_element(Tree(), "table") is None

    def test_populated_skips_childless(self):
        empty = Element("table")
        full = Element("table", first_child=Text("row"))
        tree = Tree(root=Element("body", first_child=_chain(empty, full)))
        assert find_element(tree, "table") is empty
        assert find_element(tree, "table", populated=True) is full

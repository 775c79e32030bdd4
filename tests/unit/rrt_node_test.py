import pytest

from kinorrt.algorithms.rrt_node import RRTNode, RRTTree
from kinorrt.data_models import State


def state(z: float) -> State:
    return State(0.0, 0.0, z, 0.0, 0.0)


class TestRRTTree:
    def setup_method(self):
        self.tree = RRTTree(state(0))

    def test_new_tree_has_only_root(self):
        assert len(self.tree) == 1
        assert self.tree.root.index == 0
        assert self.tree.root.state == state(0)
        assert self.tree.parent(self.tree.root) is None
        assert self.tree.children(self.tree.root) == []

    def test_add_child(self):
        a = self.tree.add_child(self.tree.root, state(1))
        b = self.tree.add_child(self.tree.root, state(2))
        c = self.tree.add_child(a, state(3))

        assert len(self.tree) == 4
        assert self.tree.parent(a) is self.tree.root
        assert self.tree.parent(c) is a
        assert self.tree.children(self.tree.root) == [a, b]
        assert self.tree.children(a) == [c]
        assert c in self.tree

    def test_foreign_parent_is_rejected(self):
        other = RRTTree(state(0))
        with pytest.raises(ValueError):
            self.tree.add_child(other.add_child(other.root, state(5)), state(1))
        with pytest.raises(ValueError):
            self.tree.add_child(RRTNode(index=0, state=state(0)), state(1))
        assert len(self.tree) == 1

    def test_traverse_is_pre_order(self):
        a = self.tree.add_child(self.tree.root, state(1))
        b = self.tree.add_child(self.tree.root, state(2))
        c = self.tree.add_child(a, state(3))
        d = self.tree.add_child(b, state(4))
        e = self.tree.add_child(a, state(5))

        order = [n.index for n in self.tree.traverse()]
        assert order == [0, a.index, c.index, e.index, b.index, d.index]

    def test_deep_tree_traversal_and_path(self):
        node = self.tree.root
        for i in range(1, 5001):
            node = self.tree.add_child(node, state(i))

        assert sum(1 for _ in self.tree.traverse()) == 5001
        path = self.tree.path_to_root(node)
        assert len(path) == 5001
        assert path[0] is node
        assert path[-1] is self.tree.root

    def test_edges(self):
        a = self.tree.add_child(self.tree.root, state(1))
        b = self.tree.add_child(a, state(2))
        assert list(self.tree.edges()) == [(self.tree.root, a), (a, b)]

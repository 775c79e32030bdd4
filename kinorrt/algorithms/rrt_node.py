import typing as t
from dataclasses import dataclass, field

from kinorrt.data_models import State


@dataclass
class RRTNode:
    index: int
    state: State
    parent: t.Optional[int] = None
    children: t.List[int] = field(default_factory=list)


class RRTTree:
    """Append-only tree of states stored as an arena of nodes.

    Nodes refer to their parent and children by index into `nodes`. The root holds the
    start state and sits at index 0. Nodes are never removed.
    """

    def __init__(self, root_state: State):
        self.nodes: t.List[RRTNode] = [RRTNode(index=0, state=root_state)]

    @property
    def root(self) -> RRTNode:
        return self.nodes[0]

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node: t.Any) -> bool:
        return (
            isinstance(node, RRTNode)
            and 0 <= node.index < len(self.nodes)
            and self.nodes[node.index] is node
        )

    def add_child(self, parent: RRTNode, state: State) -> RRTNode:
        if parent not in self:
            raise ValueError("Parent node does not belong to this tree")
        node = RRTNode(index=len(self.nodes), state=state, parent=parent.index)
        self.nodes.append(node)
        parent.children.append(node.index)
        return node

    def children(self, node: RRTNode) -> t.List[RRTNode]:
        return [self.nodes[i] for i in node.children]

    def parent(self, node: RRTNode) -> t.Optional[RRTNode]:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def traverse(self) -> t.Iterator[RRTNode]:
        """Pre-order traversal: a node, then each of its child subtrees in insertion order."""
        stack = [0]
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    def path_to_root(self, node: RRTNode) -> t.List[RRTNode]:
        path = []
        cur: t.Optional[RRTNode] = node
        while cur is not None:
            path.append(cur)
            cur = self.parent(cur)
        return path

    def edges(self) -> t.Iterator[t.Tuple[RRTNode, RRTNode]]:
        for node in self.nodes[1:]:
            yield self.nodes[node.parent], node  # type: ignore

import typing as t

from kinorrt.algorithms.rrt_node import RRTNode, RRTTree
from kinorrt.data_models import State

ClosenessMeasure = t.Callable[[State, State], float]


def nearest_node(target: State, tree: RRTTree, closeness: ClosenessMeasure) -> RRTNode:
    """
    Scans every node of the tree in pre-order and returns the one closest to `target`.

    Ties keep the first node encountered, so the root and earlier-inserted branches win
    over later ones at equal closeness.
    """
    nodes = tree.traverse()
    nearest = next(nodes)
    min_dist = closeness(target, nearest.state)
    for node in nodes:
        dist = closeness(target, node.state)
        if dist < min_dist:
            min_dist = dist
            nearest = node
    return nearest

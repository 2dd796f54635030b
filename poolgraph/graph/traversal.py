"""Traversal of a built pool graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from poolgraph.graph.nodes import Node


def order_by_bfs(root: Node) -> list[Node]:
    """Breadth-first ordering of a graph: root, its children, grandchildren, ...

    Each node is visited at most once even if it is reachable through more
    than one parent. The ``marked`` flags used during the walk are cleared
    again before returning, so the same tree can be traversed repeatedly.

    Args:
        root: Root node of a built graph

    Returns:
        Nodes in breadth-first order, children in their declared order
    """
    queue: deque[Node] = deque([root])
    ordered_nodes: list[Node] = []
    root.marked = True
    try:
        while queue:
            current = queue.popleft()
            ordered_nodes.append(current)
            for child in current.children:
                if not child.marked:
                    child.marked = True
                    queue.append(child)
    finally:
        for node in ordered_nodes:
            node.marked = False
        for node in queue:
            node.marked = False
    return ordered_nodes


def leaf_addresses(nodes: Iterable[Node]) -> list[str]:
    """Addresses of the leaf (input/output token) nodes, in input order."""
    return [node.address for node in nodes if node.is_leaf]

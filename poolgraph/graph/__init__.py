"""Pool graph: nested pool composition as a tree of nodes.

- builder: recursive construction from a root pool (PoolGraph)
- linear: linear pool children (wrapped token / main token)
- nodes: Node, join/exit action tables, input node factory
- traversal: BFS ordering and leaf collection
- paths: single-token path from a token up to the root
"""

from .builder import PoolGraph, get_token_total
from .linear import create_linear_node_children, create_wrapped_token_node
from .nodes import (
    EXIT_ACTIONS,
    JOIN_ACTIONS,
    ExitAction,
    JoinAction,
    Node,
    SpotPrices,
    create_input_node,
    get_exit_action,
    get_join_action,
)
from .paths import root_path
from .traversal import leaf_addresses, order_by_bfs

__all__ = [
    # Builder
    "PoolGraph",
    "get_token_total",
    # Nodes
    "Node",
    "SpotPrices",
    "JoinAction",
    "ExitAction",
    "JOIN_ACTIONS",
    "EXIT_ACTIONS",
    "get_join_action",
    "get_exit_action",
    "create_input_node",
    # Linear pools
    "create_linear_node_children",
    "create_wrapped_token_node",
    # Traversal
    "order_by_bfs",
    "leaf_addresses",
    "root_path",
]

"""Pool graph nodes.

A built graph is a tree: every node exclusively owns its ``children`` and keeps a
non-owning ``parent`` reference for walking back up to the root.

Join/exit actions are fixed per pool category by two immutable tables. A
category missing from either table is unsupported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from poolgraph.constants import FULL_PROPORTION, INPUT_TYPE, NOT_APPLICABLE
from poolgraph.models.pool import PoolType

__all__ = [
    "JoinAction",
    "ExitAction",
    "JOIN_ACTIONS",
    "EXIT_ACTIONS",
    "Node",
    "SpotPrices",
    "create_input_node",
    "get_join_action",
    "get_exit_action",
]

# Sibling token address -> fixed-point spot price of that token vs the pool's BPT
SpotPrices = dict[str, str]


class JoinAction(str, Enum):
    """Operation moving value from a node into its parent."""

    INPUT = "input"
    BATCH_SWAP = "batchSwap"
    WRAP = "wrap"
    JOIN_POOL = "joinPool"
    WRAP_AAVE_DYNAMIC_TOKEN = "wrapAaveDynamicToken"
    WRAP_ERC4626 = "wrapERC4626"


class ExitAction(str, Enum):
    """Operation moving value from a parent out into a node."""

    OUTPUT = "output"
    BATCH_SWAP = "batchSwap"
    UNWRAP = "unwrap"
    EXIT_POOL = "exitPool"
    UNWRAP_AAVE_STATIC_TOKEN = "unwrapAaveStaticToken"
    UNWRAP_ERC4626 = "unwrapERC4626"


JOIN_ACTIONS: MappingProxyType[str, JoinAction] = MappingProxyType(
    {
        PoolType.AAVE_LINEAR: JoinAction.BATCH_SWAP,
        PoolType.ERC4626_LINEAR: JoinAction.BATCH_SWAP,
        PoolType.ELEMENT: JoinAction.BATCH_SWAP,
        PoolType.INVESTMENT: JoinAction.JOIN_POOL,
        PoolType.LIQUIDITY_BOOTSTRAPPING: JoinAction.JOIN_POOL,
        PoolType.META_STABLE: JoinAction.JOIN_POOL,
        PoolType.STABLE: JoinAction.JOIN_POOL,
        PoolType.STABLE_PHANTOM: JoinAction.BATCH_SWAP,
        PoolType.WEIGHTED: JoinAction.JOIN_POOL,
        PoolType.COMPOSABLE_STABLE: JoinAction.JOIN_POOL,
    }
)

EXIT_ACTIONS: MappingProxyType[str, ExitAction] = MappingProxyType(
    {
        PoolType.AAVE_LINEAR: ExitAction.BATCH_SWAP,
        PoolType.ERC4626_LINEAR: ExitAction.BATCH_SWAP,
        PoolType.ELEMENT: ExitAction.BATCH_SWAP,
        PoolType.INVESTMENT: ExitAction.EXIT_POOL,
        PoolType.LIQUIDITY_BOOTSTRAPPING: ExitAction.EXIT_POOL,
        PoolType.META_STABLE: ExitAction.EXIT_POOL,
        PoolType.STABLE: ExitAction.EXIT_POOL,
        PoolType.STABLE_PHANTOM: ExitAction.BATCH_SWAP,
        PoolType.WEIGHTED: ExitAction.EXIT_POOL,
        PoolType.COMPOSABLE_STABLE: ExitAction.EXIT_POOL,
    }
)


def get_join_action(pool_type: str) -> JoinAction | None:
    """Look up the join action for a pool category, None if unsupported."""
    # PoolType is a str enum, so plain category strings hash to the same keys
    return JOIN_ACTIONS.get(pool_type)


def get_exit_action(pool_type: str) -> ExitAction | None:
    """Look up the exit action for a pool category, None if unsupported."""
    return EXIT_ACTIONS.get(pool_type)


@dataclass(eq=False)
class Node:
    """A pool, wrapped token or input/output token in a pool graph.

    Nodes compare by identity. ``parent`` is excluded from repr to keep it
    finite.

    Attributes:
        address: Token or pool contract address
        id: Pool id, or NOT_APPLICABLE for tokens that are not pools
        type: Pool category, "WrappedToken" or "Input"
        join_action: Action moving value from this node into its parent
        exit_action: Action moving value from the parent out into this node
        children: Child nodes, in pool token order
        parent: Owning parent node, None for the root
        proportion_of_parent: Share of the root amount flowing through this
            node, 18-decimal fixed-point (ONE_18 == 100%)
        is_leaf: True only for input/output token nodes
        spot_prices: Token address -> spot price vs this pool's BPT
        decimals: Token decimals
        index: Positional label assigned during construction
        marked: Visited flag, only meaningful during a BFS traversal
    """

    address: str
    id: str
    type: str
    join_action: JoinAction
    exit_action: ExitAction
    index: str
    proportion_of_parent: int
    is_leaf: bool
    decimals: int
    parent: Node | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list)
    spot_prices: SpotPrices = field(default_factory=dict)
    marked: bool = False

    @property
    def is_pool(self) -> bool:
        """Whether this node is a pool with supported join/exit actions."""
        return (
            self.id != NOT_APPLICABLE
            and get_join_action(self.type) is not None
            and get_exit_action(self.type) is not None
        )


def create_input_node(
    node_index: int,
    address: str,
    decimals: int,
    parent: Node | None,
    proportion_of_parent: int = FULL_PROPORTION,
) -> tuple[Node, int]:
    """Create a leaf input/output token node.

    This is the only constructor for leaf nodes.

    Args:
        node_index: Index label for the new node
        address: Token address
        decimals: Token decimals
        parent: Owning parent node (None for a detached node)
        proportion_of_parent: Share of the root amount through this token

    Returns:
        Tuple of (input node, next node index)
    """
    node = Node(
        address=address,
        id=NOT_APPLICABLE,
        type=INPUT_TYPE,
        join_action=JoinAction.INPUT,
        exit_action=ExitAction.OUTPUT,
        # Relabelled with real amounts when the join/exit is encoded
        index=str(node_index),
        parent=parent,
        proportion_of_parent=proportion_of_parent,
        is_leaf=True,
        decimals=decimals,
    )
    return node, node_index + 1

"""Pool graph construction.

Expands a root pool into a tree of nodes by recursively looking up every pool
token. Tokens that do not resolve to a pool become input (leaf) nodes.

Children are expanded strictly one after another, in pool token order: the
node index is threaded through each call, so the pre-order numbering is only
deterministic when a child's whole subtree is built before its next sibling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from poolgraph.constants import DEFAULT_DECIMALS, FULL_PROPORTION
from poolgraph.errors import EmptyPoolBalances, PoolNotFound, UnsupportedPoolType
from poolgraph.graph.linear import create_linear_node_children
from poolgraph.graph.nodes import (
    Node,
    SpotPrices,
    create_input_node,
    get_exit_action,
    get_join_action,
)
from poolgraph.graph.paths import root_path
from poolgraph.graph.traversal import leaf_addresses, order_by_bfs
from poolgraph.math.fixed_point import Bfp
from poolgraph.models.types import normalize_address

if TYPE_CHECKING:
    from poolgraph.data.base import PoolRepository, SpotPriceCalculator
    from poolgraph.models.pool import Pool

logger = structlog.get_logger()


def get_token_total(pool: Pool) -> int:
    """Sum of a pool's token balances in base units, excluding its phantom BPT."""
    bpt_index = pool.bpt_index
    return sum(
        balance for i, balance in enumerate(pool.parsed_balances) if i != bpt_index
    )


class PoolGraph:
    """Builds and navigates the token graph of a (possibly nested) pool.

    Usage:
        graph = PoolGraph(pools=repository, prices=spot_price_calculator)
        root = await graph.build_root(pool_id, wrap_main_tokens=False)
        ordered = PoolGraph.order_by_bfs(root)
        path = PoolGraph.root_path(ordered, token, starting_index=0)
    """

    def __init__(self, pools: PoolRepository, prices: SpotPriceCalculator) -> None:
        """Initialize the graph builder.

        Args:
            pools: Repository the pool records are looked up in
            prices: Spot price calculator for pool tokens vs their BPT
        """
        self._pools = pools
        self._prices = prices

    async def build_root(self, pool_id: str, wrap_main_tokens: bool) -> Node:
        """Build the full graph below a root pool.

        Args:
            pool_id: Pool id of the root pool
            wrap_main_tokens: If True, linear pools are entered through their
                wrapped token; otherwise through their main token directly

        Returns:
            The root node, owning the whole tree

        Raises:
            PoolNotFound: If the root pool (or a leaf's parent pool) is unknown
            UnsupportedPoolType: If any pool category has no join/exit action
            MalformedLinearPool: If a linear pool lacks main/wrapped indices
            EmptyPoolBalances: If a non-linear pool holds no token balance at all
            PoolRepositoryError: If a repository lookup itself fails
        """
        root_pool = await self._find_by_id(pool_id)
        if root_pool is None:
            raise PoolNotFound(f"Pool {pool_id} does not exist")

        root, node_count = await self.expand(
            root_pool.address,
            0,
            None,
            FULL_PROPORTION,
            wrap_main_tokens,
        )
        logger.debug(
            "pool_graph_built",
            pool_id=pool_id,
            wrap_main_tokens=wrap_main_tokens,
            node_count=node_count,
        )
        return root

    async def expand(
        self,
        address: str,
        node_index: int,
        parent: Node | None,
        proportion_of_parent: int,
        wrap_main_tokens: bool,
    ) -> tuple[Node, int]:
        """Build the node for ``address`` and, recursively, its subtree.

        Args:
            address: Pool or token address
            node_index: Index to give the new node
            parent: Parent node, None for the root
            proportion_of_parent: Share of the root amount through this node
            wrap_main_tokens: See build_root

        Returns:
            Tuple of (node, next free node index)
        """
        pool = await self._find_by_address(address)

        if pool is None:
            if parent is None:
                raise PoolNotFound(f"Pool with address {address} does not exist")
            # Not a pool, so it is a token held by the parent pool
            return await self._create_leaf_token_node(
                address, node_index, parent, proportion_of_parent
            )

        join_action = get_join_action(pool.pool_type)
        exit_action = get_exit_action(pool.pool_type)
        if join_action is None or exit_action is None:
            raise UnsupportedPoolType(
                f"Pool {pool.id} has unsupported pool type '{pool.pool_type}'"
            )

        token_total = get_token_total(pool)
        spot_prices, decimals = self._get_spot_prices(pool)

        pool_node = Node(
            address=pool.address,
            id=pool.id,
            type=pool.pool_type,
            join_action=join_action,
            exit_action=exit_action,
            index=str(node_index),
            parent=parent,
            proportion_of_parent=proportion_of_parent,
            is_leaf=False,
            spot_prices=spot_prices,
            decimals=decimals,
        )
        node_index += 1

        if pool.is_linear:
            return create_linear_node_children(pool_node, node_index, pool, wrap_main_tokens)

        pool_address = normalize_address(pool.address)
        parent_share = Bfp.from_wei(proportion_of_parent)
        for token, balance in zip(pool.tokens, pool.parsed_balances, strict=True):
            # Skip the phantom BPT
            if normalize_address(token.address) == pool_address:
                continue
            if token_total == 0:
                raise EmptyPoolBalances(f"Pool {pool.id} has no token balances to split by")
            proportion = Bfp.from_wei(balance).div_down(Bfp.from_wei(token_total))
            final_proportion = proportion.mul_down(parent_share)
            child, node_index = await self.expand(
                token.address,
                node_index,
                pool_node,
                final_proportion.value,
                wrap_main_tokens,
            )
            pool_node.children.append(child)

        return pool_node, node_index

    async def _create_leaf_token_node(
        self,
        address: str,
        node_index: int,
        parent: Node,
        proportion_of_parent: int,
    ) -> tuple[Node, int]:
        """Create an input node for a token of the parent pool."""
        parent_pool = await self._find_by_address(parent.address)
        if parent_pool is None:
            raise PoolNotFound(
                f"Parent pool {parent.address} of token {address} does not exist"
            )
        decimals = parent_pool.token_decimals(address)
        if decimals is None:
            decimals = DEFAULT_DECIMALS

        logger.debug(
            "pool_graph_leaf_token",
            token=address,
            parent_pool=parent_pool.id,
            decimals=decimals,
        )
        return create_input_node(node_index, address, decimals, parent, proportion_of_parent)

    def _get_spot_prices(self, pool: Pool) -> tuple[SpotPrices, int]:
        """Spot price of every pool token vs the pool's BPT, and the BPT decimals.

        The spot price of a path is the product of the spot prices of each
        pool along it, so every token's price is recorded up front.
        """
        spot_prices: SpotPrices = {}
        decimals = DEFAULT_DECIMALS
        pool_address = normalize_address(pool.address)
        for token in pool.tokens:
            if normalize_address(token.address) == pool_address:
                # BPT decimals are the node's decimals (0 is not a real BPT value)
                decimals = token.decimals or DEFAULT_DECIMALS
                continue
            spot_prices[token.address] = self._prices.spot_price(
                pool, token.address, pool.address
            )
        return spot_prices, decimals

    async def _find_by_id(self, pool_id: str) -> Pool | None:
        # Repository failures propagate: a failed lookup aborts the whole build
        return await self._pools.find_by_id(pool_id)

    async def _find_by_address(self, address: str) -> Pool | None:
        return await self._pools.find_by_address(address)

    order_by_bfs = staticmethod(order_by_bfs)
    root_path = staticmethod(root_path)
    leaf_addresses = staticmethod(leaf_addresses)

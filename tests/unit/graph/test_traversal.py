"""Tests for BFS ordering and leaf collection."""

import asyncio

from poolgraph.graph import (
    ExitAction,
    JoinAction,
    Node,
    PoolGraph,
    create_input_node,
    leaf_addresses,
    order_by_bfs,
)
from poolgraph.math import ONE_18
from tests.helpers import POOL_B, ROOT_POOL, TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_D


def make_pool_node(address: str, index: str, parent: Node | None = None) -> Node:
    node = Node(
        address=address,
        id=f"{address}-id",
        type="Weighted",
        join_action=JoinAction.JOIN_POOL,
        exit_action=ExitAction.EXIT_POOL,
        index=index,
        parent=parent,
        proportion_of_parent=ONE_18,
        is_leaf=False,
        decimals=18,
    )
    if parent is not None:
        parent.children.append(node)
    return node


def add_leaf(parent: Node, address: str, index: int) -> Node:
    leaf, _ = create_input_node(index, address, 18, parent, ONE_18)
    parent.children.append(leaf)
    return leaf


class TestOrderByBfs:
    """Tests for order_by_bfs."""

    def test_single_node(self) -> None:
        root = make_pool_node(ROOT_POOL, "0")
        assert order_by_bfs(root) == [root]

    def test_level_order(self) -> None:
        root = make_pool_node(ROOT_POOL, "0")
        pool_b = make_pool_node(POOL_B, "1", root)
        leaf_a = add_leaf(root, TOKEN_A, 2)
        leaf_c = add_leaf(pool_b, TOKEN_C, 3)
        leaf_d = add_leaf(pool_b, TOKEN_D, 4)

        assert order_by_bfs(root) == [root, pool_b, leaf_a, leaf_c, leaf_d]

    def test_shared_child_visited_once(self) -> None:
        root = make_pool_node(ROOT_POOL, "0")
        pool_b = make_pool_node(POOL_B, "1", root)
        shared = add_leaf(root, TOKEN_A, 2)
        pool_b.children.append(shared)

        ordered = order_by_bfs(root)

        assert ordered == [root, pool_b, shared]
        assert len({id(n) for n in ordered}) == len(ordered)

    def test_marks_cleared_after_traversal(self) -> None:
        root = make_pool_node(ROOT_POOL, "0")
        add_leaf(root, TOKEN_A, 1)
        add_leaf(root, TOKEN_B, 2)

        first = order_by_bfs(root)
        second = order_by_bfs(root)

        assert first == second
        assert not any(n.marked for n in first)

    def test_built_graph_visits_every_node(self, nested_graph: PoolGraph) -> None:
        root = asyncio.run(nested_graph.build_root("root", False))
        ordered = PoolGraph.order_by_bfs(root)

        assert [n.address for n in ordered] == [ROOT_POOL, TOKEN_A, POOL_B, TOKEN_C, TOKEN_D]
        assert ordered[0] is root


class TestLeafAddresses:
    """Tests for leaf_addresses."""

    def test_only_leaves_in_input_order(self) -> None:
        root = make_pool_node(ROOT_POOL, "0")
        pool_b = make_pool_node(POOL_B, "1", root)
        add_leaf(root, TOKEN_A, 2)
        add_leaf(pool_b, TOKEN_D, 3)
        add_leaf(pool_b, TOKEN_C, 4)

        assert leaf_addresses(order_by_bfs(root)) == [TOKEN_A, TOKEN_D, TOKEN_C]

    def test_empty(self) -> None:
        assert leaf_addresses([]) == []

    def test_no_leaves(self) -> None:
        root = make_pool_node(ROOT_POOL, "0")
        make_pool_node(POOL_B, "1", root)
        assert PoolGraph.leaf_addresses(order_by_bfs(root)) == []

"""Linear pool expansion.

A linear pool holds a single underlying "main" token and its yield-bearing
"wrapped" form. Its graph child is either the wrapped token (which in turn owns
the main token as an input) or, when main tokens are not wrapped, the main
token directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from poolgraph.constants import NOT_APPLICABLE, WRAPPED_TOKEN_TYPE
from poolgraph.errors import MalformedLinearPool
from poolgraph.graph.nodes import ExitAction, JoinAction, Node, create_input_node
from poolgraph.models.pool import PoolType

if TYPE_CHECKING:
    from poolgraph.models.pool import Pool

# Decimals of wrapped tokens handled by the relayer
WRAPPED_TOKEN_DECIMALS = 18


def create_linear_node_children(
    linear_pool_node: Node,
    node_index: int,
    linear_pool: Pool,
    wrap_main_tokens: bool,
) -> tuple[Node, int]:
    """Attach the single child subtree of a linear pool node.

    Args:
        linear_pool_node: Freshly built node for ``linear_pool``
        node_index: Next free node index
        linear_pool: The linear pool record
        wrap_main_tokens: If True, join/exit through the wrapped token;
            otherwise the main token is the linear pool's direct child

    Returns:
        Tuple of (linear pool node, next node index)

    Raises:
        MalformedLinearPool: If the pool lacks a required token index
    """
    if wrap_main_tokens:
        wrapped_node, node_index = create_wrapped_token_node(
            linear_pool,
            node_index,
            linear_pool_node,
            linear_pool_node.proportion_of_parent,
        )
        linear_pool_node.children.append(wrapped_node)
        return linear_pool_node, node_index

    main_token = linear_pool.token_at(linear_pool.main_index)
    if main_token is None:
        raise MalformedLinearPool(f"Linear pool {linear_pool.id} has no main token index")
    main_address, main_decimals = main_token

    input_node, node_index = create_input_node(
        node_index,
        main_address,
        main_decimals,
        linear_pool_node,
        linear_pool_node.proportion_of_parent,
    )
    linear_pool_node.children.append(input_node)
    return linear_pool_node, node_index


def create_wrapped_token_node(
    linear_pool: Pool,
    node_index: int,
    parent: Node | None,
    proportion_of_parent: int,
) -> tuple[Node, int]:
    """Build a wrapped-token node owning an input node for the main token.

    Wrapping does not split the flow: the main token input carries the same
    proportion as the wrapped token.

    Returns:
        Tuple of (wrapped token node, next node index)

    Raises:
        MalformedLinearPool: If the pool lacks its main or wrapped token index
    """
    main_token = linear_pool.token_at(linear_pool.main_index)
    wrapped_token = linear_pool.token_at(linear_pool.wrapped_index)
    if main_token is None or wrapped_token is None:
        raise MalformedLinearPool(
            f"Linear pool {linear_pool.id} needs both main and wrapped token indices"
        )

    # The relayer wraps ERC4626 vaults and Aave static tokens differently
    if linear_pool.pool_type == PoolType.ERC4626_LINEAR:
        join_action, exit_action = JoinAction.WRAP_ERC4626, ExitAction.UNWRAP_ERC4626
    else:
        join_action = JoinAction.WRAP_AAVE_DYNAMIC_TOKEN
        exit_action = ExitAction.UNWRAP_AAVE_STATIC_TOKEN

    wrapped_node = Node(
        address=wrapped_token[0],
        id=NOT_APPLICABLE,
        type=WRAPPED_TOKEN_TYPE,
        join_action=join_action,
        exit_action=exit_action,
        index=str(node_index),
        parent=parent,
        proportion_of_parent=proportion_of_parent,
        is_leaf=False,
        decimals=WRAPPED_TOKEN_DECIMALS,
    )
    node_index += 1

    main_address, main_decimals = main_token
    input_node, node_index = create_input_node(
        node_index,
        main_address,
        main_decimals,
        wrapped_node,
        proportion_of_parent,
    )
    wrapped_node.children = [input_node]
    return wrapped_node, node_index

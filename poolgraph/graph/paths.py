"""Single-token paths through a pool graph.

Joining (or exiting) with one token only uses the chain of nodes between that
token and the root. The chain is built from copies so the shared graph is never
modified.
"""

from __future__ import annotations

from dataclasses import replace

from poolgraph.constants import FULL_PROPORTION
from poolgraph.errors import InvalidInputToken
from poolgraph.graph.nodes import Node, create_input_node
from poolgraph.models.types import same_address

# Index given to inactive nodes (no amount flows through them)
INACTIVE_INDEX = "0"


def root_path(ordered_nodes: list[Node], input_token: str, starting_index: int) -> list[Node]:
    """Chain of nodes from ``input_token`` up to the root, carrying 100% of the flow.

    The first element is an input node for ``input_token`` with a proportion
    of 100%. It is followed by a copy of each ancestor up to and including the
    root, with proportion 0 (its amount is implied by its single active
    child) and indices counting up from ``starting_index + 1``. In the copy of
    the first ancestor, every other child is deactivated with index "0".

    Args:
        ordered_nodes: Every node of a built graph, in BFS order (root first)
        input_token: Address of the token to join or exit with (any case)
        starting_index: Index after which the path's nodes are numbered

    Returns:
        [input node, parent copy, grandparent copy, ..., root copy]

    Raises:
        InvalidInputToken: If input_token is the root's own token or is not
            part of the graph
    """
    if not ordered_nodes:
        raise InvalidInputToken(f"Token {input_token} is not part of an empty pool graph")
    root = ordered_nodes[0]
    # Can't join/exit using the root token itself
    if same_address(input_token, root.address):
        raise InvalidInputToken(f"Cannot use root pool token {input_token} as input/output")

    input_node = next(
        (node for node in ordered_nodes if same_address(node.address, input_token)), None
    )
    if input_node is None:
        raise InvalidInputToken(f"Token {input_token} is not part of the pool graph")

    if input_node.is_leaf:
        path_input = replace(input_node, proportion_of_parent=FULL_PROPORTION, index="0")
    else:
        # Entering at a pool or wrapped token: use it as a plain input token
        path_input, _ = create_input_node(
            starting_index,
            input_token,
            input_node.decimals,
            input_node.parent,
            FULL_PROPORTION,
        )

    nodes_to_root: list[Node] = [path_input]
    index = starting_index + 1
    parent = input_node.parent
    while parent is not None:
        children = parent.children
        if len(nodes_to_root) == 1:
            # Only the input's own branch stays active below the first ancestor
            children = [
                replace(child, index=INACTIVE_INDEX)
                for child in parent.children
                if not same_address(child.address, path_input.address)
            ]
            children.append(path_input)
        # TODO: confirm a zero proportion is what join/exit encoding expects for path ancestors
        nodes_to_root.append(
            replace(
                parent,
                proportion_of_parent=0,
                index=str(index),
                children=list(children),
            )
        )
        index += 1
        parent = parent.parent
    return nodes_to_root

"""Pool graph - nested Balancer pool composition as a tree of nodes."""

from poolgraph.graph import Node, PoolGraph

__version__ = "0.1.0"
__all__ = ["Node", "PoolGraph", "__version__"]

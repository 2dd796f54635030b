"""Pool data access.

Provides the collaborator interfaces the graph builder depends on and the
repositories shipped with the library.
"""

from .base import PoolRepository, SpotPriceCalculator
from .fallback import PoolsFallbackRepository
from .static import StaticPoolRepository

__all__ = [
    "PoolRepository",
    "SpotPriceCalculator",
    "StaticPoolRepository",
    "PoolsFallbackRepository",
]

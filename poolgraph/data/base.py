"""Interfaces of the collaborators a pool graph is built from."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from poolgraph.models.pool import Pool


@runtime_checkable
class PoolRepository(Protocol):
    """Source of pool records.

    Implementations return None for unknown pools and raise
    PoolRepositoryError when the lookup itself fails.
    """

    async def find_by_id(self, pool_id: str) -> Pool | None:
        """Find a pool by its pool id."""
        ...

    async def find_by_address(self, address: str) -> Pool | None:
        """Find a pool by its contract (BPT) address."""
        ...


class SpotPriceCalculator(Protocol):
    """Computes a pool's instantaneous spot price between two of its tokens."""

    def spot_price(self, pool: Pool, token_in: str, token_out: str) -> str:
        """Return the spot price of token_in vs token_out as a decimal string."""
        ...

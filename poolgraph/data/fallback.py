"""Fallback pool repository.

Takes several pool repositories and uses them in order, falling back to the
next one when a request fails or times out. This lets the Balancer API serve
lookups while the subgraph stays available as a backup.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, TypeVar

import structlog

from poolgraph.config import DEFAULT_CONFIG
from poolgraph.errors import NoWorkingProviders

if TYPE_CHECKING:
    from poolgraph.data.base import PoolRepository
    from poolgraph.models.pool import Pool

logger = structlog.get_logger()

T = TypeVar("T")


class PoolsFallbackRepository:
    """Pool repository that falls back through a list of providers.

    A provider that times out or raises is abandoned for good: later calls
    start from the next provider. Once every provider has failed, all calls
    raise NoWorkingProviders.
    """

    def __init__(
        self,
        providers: Sequence[PoolRepository],
        timeout: float = DEFAULT_CONFIG.provider_timeout,
    ) -> None:
        """Initialize the repository.

        Args:
            providers: Repositories to query, in order of preference
            timeout: Seconds to wait for each provider call
        """
        self._providers = list(providers)
        self._timeout = timeout
        self.current_provider_idx = 0

    @property
    def current_provider(self) -> PoolRepository | None:
        """The provider currently answering lookups, None once all have failed."""
        if self.current_provider_idx >= len(self._providers):
            return None
        return self._providers[self.current_provider_idx]

    async def find_by_id(self, pool_id: str) -> Pool | None:
        """Find a pool by its pool id."""
        return await self._fallback_query("find_by_id", lambda p: p.find_by_id(pool_id))

    async def find_by_address(self, address: str) -> Pool | None:
        """Find a pool by its contract (BPT) address."""
        return await self._fallback_query(
            "find_by_address", lambda p: p.find_by_address(address)
        )

    async def _fallback_query(
        self, method: str, call: Callable[[PoolRepository], Awaitable[T]]
    ) -> T:
        """Run ``call`` against providers until one answers in time.

        Raises:
            NoWorkingProviders: If no provider is left
        """
        while True:
            provider = self.current_provider
            if provider is None:
                raise NoWorkingProviders(
                    f"No working providers found ({len(self._providers)} configured)"
                )
            try:
                return await asyncio.wait_for(call(provider), timeout=self._timeout)
            except TimeoutError:
                logger.warning(
                    "pool_provider_timeout",
                    provider_index=self.current_provider_idx,
                    method=method,
                    timeout_seconds=self._timeout,
                    message="Provider timed out, falling back to next provider",
                )
            except Exception as err:
                logger.warning(
                    "pool_provider_failed",
                    provider_index=self.current_provider_idx,
                    method=method,
                    error=str(err),
                    message="Provider failed, falling back to next provider",
                )
            self.current_provider_idx += 1

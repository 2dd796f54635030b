"""In-memory pool repository.

Serves a fixed set of pool records, typically a snapshot of all pools at a
pinned block loaded from JSON.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog
from pydantic import TypeAdapter

from poolgraph.models.pool import Pool
from poolgraph.models.types import normalize_address

logger = structlog.get_logger()

_POOL_LIST_ADAPTER = TypeAdapter(list[Pool])


class StaticPoolRepository:
    """Pool repository backed by a fixed list of pool records.

    Lookups by id and by address are case-insensitive. If two records share an
    id or address, the later one wins.
    """

    def __init__(self, pools: list[Pool] | None = None) -> None:
        self._by_id: dict[str, Pool] = {}
        self._by_address: dict[str, Pool] = {}
        for pool in pools or []:
            self.add_pool(pool)

    @classmethod
    def from_json(cls, path: Path | str) -> StaticPoolRepository:
        """Load pool records from a JSON file containing a list of pools.

        Args:
            path: Path to the JSON snapshot

        Returns:
            Repository serving every pool in the file

        Raises:
            pydantic.ValidationError: If a record does not match the pool schema
        """
        with open(path) as f:
            data = json.load(f)
        pools = _POOL_LIST_ADAPTER.validate_python(data)
        logger.debug("static_pools_loaded", path=str(path), pool_count=len(pools))
        return cls(pools)

    def add_pool(self, pool: Pool) -> None:
        """Add (or replace) a pool record."""
        self._by_id[pool.id.lower()] = pool
        self._by_address[normalize_address(pool.address)] = pool

    @property
    def pool_count(self) -> int:
        """Number of distinct pool ids served."""
        return len(self._by_id)

    async def find_by_id(self, pool_id: str) -> Pool | None:
        """Find a pool by its pool id."""
        return self._by_id.get(pool_id.lower())

    async def find_by_address(self, address: str) -> Pool | None:
        """Find a pool by its contract (BPT) address."""
        return self._by_address.get(normalize_address(address))

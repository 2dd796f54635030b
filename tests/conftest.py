"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from poolgraph.data import StaticPoolRepository
from poolgraph.graph import PoolGraph
from poolgraph.models.pool import Pool
from tests.helpers import (
    POOL_B,
    ROOT_POOL,
    TOKEN_A,
    TOKEN_C,
    TOKEN_D,
    FakeSpotPriceCalculator,
    RecordingPoolRepository,
    make_pool,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"
POOLS_DIR = FIXTURES_DIR / "pools"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def boosted_pools_path() -> Path:
    """Snapshot of a WETH / Aave boosted stable pool stack."""
    return POOLS_DIR / "boosted_pools.json"


@pytest.fixture
def boosted_repository(boosted_pools_path: Path) -> StaticPoolRepository:
    """Static repository serving the boosted pool snapshot."""
    return StaticPoolRepository.from_json(boosted_pools_path)


@pytest.fixture
def spot_prices() -> FakeSpotPriceCalculator:
    """Spot price calculator pricing every token at 1."""
    return FakeSpotPriceCalculator()


@pytest.fixture
def nested_pools() -> list[Pool]:
    """Root (A: 25%, POOL_B: 75%) where POOL_B holds C and D in equal parts."""
    return [
        make_pool(ROOT_POOL, [(TOKEN_A, "100"), (POOL_B, "300")], pool_id="root"),
        make_pool(POOL_B, [(TOKEN_C, "50", 6), (TOKEN_D, "50", 6)], pool_id="pool-b"),
    ]


@pytest.fixture
def nested_repository(nested_pools: list[Pool]) -> RecordingPoolRepository:
    """Recording repository serving the nested pools."""
    return RecordingPoolRepository(nested_pools)


@pytest.fixture
def nested_graph(
    nested_repository: RecordingPoolRepository, spot_prices: FakeSpotPriceCalculator
) -> PoolGraph:
    """Graph builder over the nested pools."""
    return PoolGraph(pools=nested_repository, prices=spot_prices)

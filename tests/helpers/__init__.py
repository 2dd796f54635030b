"""Test helpers module for shared test utilities.

- constants: Synthetic and mainnet addresses
- factories: Pool record factory functions
- fakes: Fake repositories and spot price calculators
"""

from tests.helpers.constants import (
    BB_A_DAI,
    BB_A_USD,
    BB_A_USD_ID,
    BB_A_USDC,
    BB_A_USDT,
    DAI,
    LINEAR_POOL,
    POOL_B,
    ROOT_POOL,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    UNKNOWN_TOKEN,
    USDC,
    USDT,
    WA_DAI,
    WA_USDC,
    WA_USDT,
    WETH,
    WETH_BB_A_USD,
    WETH_BB_A_USD_ID,
    WRAPPED_TOKEN,
)
from tests.helpers.factories import make_linear_pool, make_pool
from tests.helpers.fakes import (
    ExhaustedPoolRepository,
    FailingPoolRepository,
    FakeSpotPriceCalculator,
    RecordingPoolRepository,
    SlowPoolRepository,
)

__all__ = [
    # Constants
    "ROOT_POOL",
    "POOL_B",
    "LINEAR_POOL",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "TOKEN_D",
    "WRAPPED_TOKEN",
    "UNKNOWN_TOKEN",
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "WA_DAI",
    "WA_USDC",
    "WA_USDT",
    "BB_A_DAI",
    "BB_A_USDC",
    "BB_A_USDT",
    "BB_A_USD",
    "BB_A_USD_ID",
    "WETH_BB_A_USD",
    "WETH_BB_A_USD_ID",
    # Factories
    "make_pool",
    "make_linear_pool",
    # Fakes
    "FakeSpotPriceCalculator",
    "RecordingPoolRepository",
    "FailingPoolRepository",
    "SlowPoolRepository",
    "ExhaustedPoolRepository",
]

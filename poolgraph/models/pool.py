"""Pydantic models for Balancer pool records.

The shape follows the pool records served by the Balancer API and subgraph,
which is also the format of pinned-block pool snapshots.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from poolgraph.constants import DEFAULT_DECIMALS
from poolgraph.math.fixed_point import parse_fixed
from poolgraph.models.types import Address, normalize_address


class PoolType(str, Enum):
    """Protocol-defined pool categories."""

    WEIGHTED = "Weighted"
    INVESTMENT = "Investment"
    STABLE = "Stable"
    COMPOSABLE_STABLE = "ComposableStable"
    META_STABLE = "MetaStable"
    STABLE_PHANTOM = "StablePhantom"
    LIQUIDITY_BOOTSTRAPPING = "LiquidityBootstrapping"
    AAVE_LINEAR = "AaveLinear"
    LINEAR = "Linear"
    ERC4626_LINEAR = "ERC4626Linear"
    ELEMENT = "Element"
    GYRO2 = "Gyro2"
    GYRO3 = "Gyro3"
    GYROE = "GyroE"
    MANAGED = "Managed"
    BEEFY_LINEAR = "BeefyLinear"
    EULER_LINEAR = "EulerLinear"
    GEARBOX_LINEAR = "GearboxLinear"
    REAPER_LINEAR = "ReaperLinear"
    YEARN_LINEAR = "YearnLinear"
    FX = "FX"


class PoolToken(BaseModel):
    """A token held by a pool."""

    address: Address
    # Human-readable amount, e.g. "1234.56" (not base units)
    balance: str | None = "0"
    # Some records omit decimals for the pool's own BPT entry
    decimals: int | None = Field(default=None, ge=0, le=77)


class Pool(BaseModel):
    """A Balancer pool record.

    Attributes:
        id: balancerPoolId (32-byte hex string)
        address: Pool contract (BPT) address
        pool_type: Category name. Kept as a plain string so that categories
            unknown to this library still parse; they are rejected during graph
            construction instead.
        tokens: Per-token metadata in pool order
        tokens_list: Token addresses in pool order (same order as ``tokens``)
        main_index: Position of the underlying token (linear pools only)
        wrapped_index: Position of the wrapped token (linear pools only)
    """

    id: str
    address: Address
    pool_type: str = Field(alias="poolType")
    tokens: list[PoolToken]
    tokens_list: list[Address] = Field(alias="tokensList")
    main_index: int | None = Field(default=None, alias="mainIndex", ge=0)
    wrapped_index: int | None = Field(default=None, alias="wrappedIndex", ge=0)

    model_config = {"populate_by_name": True}

    @property
    def is_linear(self) -> bool:
        """Whether this pool wraps a single main token (any linear variant)."""
        return "Linear" in self.pool_type

    @property
    def bpt_index(self) -> int | None:
        """Position of the pool's own (phantom) BPT in its token list, if present."""
        address = normalize_address(self.address)
        for i, token in enumerate(self.tokens_list):
            if normalize_address(token) == address:
                return i
        return None

    @property
    def parsed_balances(self) -> list[int]:
        """Token balances in integer base units, in pool token order.

        Each balance is scaled by its own token's decimals (default 18).
        """
        return [
            parse_fixed(token.balance, _decimals_or_default(token.decimals))
            if token.balance
            else 0
            for token in self.tokens
        ]

    def token_decimals(self, address: str) -> int | None:
        """Get decimals for a pool token by address.

        Args:
            address: Token address (any case)

        Returns:
            The token's decimals (18 when the record omits them), or None if
            the token is not part of this pool
        """
        address = normalize_address(address)
        for i, token_address in enumerate(self.tokens_list):
            if normalize_address(token_address) == address:
                return _decimals_or_default(self.tokens[i].decimals)
        return None

    def token_at(self, index: int | None) -> tuple[str, int] | None:
        """Get (address, decimals) of the token at ``index`` in tokens_list."""
        if index is None or index >= len(self.tokens_list) or index >= len(self.tokens):
            return None
        return self.tokens_list[index], _decimals_or_default(self.tokens[index].decimals)


def _decimals_or_default(decimals: int | None) -> int:
    # 0 is a valid decimals value, so only None falls back
    return DEFAULT_DECIMALS if decimals is None else decimals

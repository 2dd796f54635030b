"""Pydantic models for Balancer pool records."""

from poolgraph.models.pool import Pool, PoolToken, PoolType
from poolgraph.models.types import (
    Address,
    normalize_address,
    same_address,
)

__all__ = [
    # Types
    "Address",
    "normalize_address",
    "same_address",
    # Pool records
    "Pool",
    "PoolToken",
    "PoolType",
]

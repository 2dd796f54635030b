"""Configuration for pool graph data access."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Timeout for a single pool provider call before falling back (seconds)
DEFAULT_PROVIDER_TIMEOUT = 10.0


@dataclass(frozen=True)
class PoolGraphConfig:
    """Centralized configuration for pool graph data access.

    Attributes:
        provider_timeout: Seconds a pool provider may take to answer before
            a fallback repository moves on to the next provider (default: 10)
    """

    provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT

    def __post_init__(self) -> None:
        if self.provider_timeout <= 0:
            raise ValueError(f"provider_timeout must be positive, got {self.provider_timeout}")

    @classmethod
    def from_env(cls) -> PoolGraphConfig:
        """Build configuration from environment variables.

        - POOLGRAPH_PROVIDER_TIMEOUT: provider timeout in seconds (default: 10)
        """
        timeout = float(
            os.environ.get("POOLGRAPH_PROVIDER_TIMEOUT", str(DEFAULT_PROVIDER_TIMEOUT))
        )
        return cls(provider_timeout=timeout)


# Default configuration instance
DEFAULT_CONFIG = PoolGraphConfig()

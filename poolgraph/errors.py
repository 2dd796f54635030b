"""Pool graph error classes.

Every failure during graph construction or path extraction is fatal to the
operation in progress; no partial trees or paths are returned.
"""


class PoolGraphError(Exception):
    """Base error for pool graph operations."""

    pass


class PoolNotFound(PoolGraphError):
    """Root pool id has no record, or a leaf token's parent pool cannot be found."""

    pass


class UnsupportedPoolType(PoolGraphError):
    """Pool category has no entry in the join/exit action tables."""

    pass


class MalformedLinearPool(PoolGraphError):
    """Linear pool record lacks its main or wrapped token index."""

    pass


class InvalidInputToken(PoolGraphError):
    """Input/output token is the root pool's own token, or is not in the graph."""

    pass


class PoolRepositoryError(PoolGraphError):
    """A pool lookup failed after all repository remedies."""

    pass


class NoWorkingProviders(PoolRepositoryError):
    """Every provider of a fallback repository has failed or timed out."""

    pass


class EmptyPoolBalances(PoolGraphError):
    """Non-linear pool whose token balances sum to zero, so no proportions exist."""

    pass

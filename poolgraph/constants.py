"""Shared constants for pool graph construction."""

from poolgraph.math.fixed_point import ONE_18

# Proportions are 18-decimal fixed-point: 100% == ONE_18
FULL_PROPORTION = ONE_18

# Decimals assumed when a pool record omits them
DEFAULT_DECIMALS = 18

# Id carried by nodes that are not pools (leaf tokens, wrapped tokens)
NOT_APPLICABLE = "N/A"

# Node types that are not pool categories
WRAPPED_TOKEN_TYPE = "WrappedToken"
INPUT_TYPE = "Input"

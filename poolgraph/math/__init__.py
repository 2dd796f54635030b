"""Mathematical utilities for pool graph construction.

This package provides mathematical primitives for proportion calculations:
- Bfp: 18-decimal fixed-point arithmetic (Balancer-style)
- parse_fixed: decimal strings to integer base units
"""

from poolgraph.math.fixed_point import ONE_18, Bfp, parse_fixed

__all__ = ["Bfp", "ONE_18", "parse_fixed"]

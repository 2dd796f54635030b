"""Balancer Fixed Point (Bfp) math.

18-decimal fixed-point arithmetic with Solidity rounding. All values are stored
as integers scaled by 10^18, and every mul/div multiplies before dividing.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import ClassVar

__all__ = ["Bfp", "ONE_18", "parse_fixed"]

ONE_18 = 10**18


def parse_fixed(value: str, decimals: int) -> int:
    """Convert a human-readable decimal string into integer base units.

    Fractional digits beyond ``decimals`` are truncated, matching ethers'
    parseFixed behaviour for the values pool APIs return.

    Args:
        value: Decimal string, e.g. "1234.5"
        decimals: Number of decimals of the token

    Returns:
        Integer amount scaled by 10^decimals

    Raises:
        ValueError: If value is not a decimal number or decimals is negative

    Examples:
        parse_fixed("1.5", 6) == 1_500_000
        parse_fixed("0.0000001", 6) == 0
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as err:
        raise ValueError(f"Not a decimal number: '{value}'") from err
    if not amount.is_finite():
        raise ValueError(f"Not a finite decimal number: '{value}'")
    # Decimal arithmetic is context-rounded at 28 digits, so scale the coefficient as an int
    sign, digits, exponent = amount.as_tuple()
    coefficient = int("".join(str(d) for d in digits) or "0")
    shift = int(exponent) + decimals
    if shift >= 0:
        scaled = coefficient * 10**shift
    else:
        scaled = coefficient // 10**-shift
    return -scaled if sign else scaled


class Bfp:
    """18-decimal fixed-point number stored as int.

    Example: 0.25 is stored as 250_000_000_000_000_000
    """

    ONE: ClassVar[int] = ONE_18

    __slots__ = ("value",)
    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, value: int) -> None:
        """Create Bfp from raw scaled value."""
        self.value = value

    @classmethod
    def from_wei(cls, wei: int) -> Bfp:
        """Create from raw wei value (already scaled to 18 decimals)."""
        return cls(wei)

    def mul_down(self, other: Bfp) -> Bfp:
        """Multiply with floor rounding: (a * b) // 10^18"""
        return Bfp((self.value * other.value) // self.ONE)

    def div_down(self, other: Bfp) -> Bfp:
        """Divide with floor rounding: (a * 10^18) // b"""
        if other.value == 0:
            raise ZeroDivisionError("Bfp division by zero")
        return Bfp((self.value * self.ONE) // other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bfp):
            return NotImplemented
        return self.value == other.value

    def __repr__(self) -> str:
        return f"Bfp({self.value})"

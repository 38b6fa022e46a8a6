"""Fixed-point primitives shared by the BrownFi curve variants.

These mirror the helpers the on-chain libraries use (``FullMath.mulDiv``,
``FullMath.mulDivRoundingUp``, Babylonian ``sqrt`` and the decimals parsing
helpers). Every function works on unbounded integers through SafeInt, so a
zero divisor or a negative intermediate raises instead of wrapping.

Curve-specific constants (Q64, Q128, fee denominators) live in the formula
modules; only the canonical decimal count is shared here.
"""

from __future__ import annotations

from oracle_amm.safe_int import S, SafeInt, Underflow

__all__ = [
    "CANONICAL_DECIMALS",
    "mul_div_floor",
    "mul_div_ceil",
    "isqrt_floor",
    "to_canonical_scale",
    "from_canonical_scale",
]

# Internal decimal count all cross-token math is carried out in
CANONICAL_DECIMALS = 18


def mul_div_floor(a: SafeInt | int, b: SafeInt | int, denominator: SafeInt | int) -> SafeInt:
    """Compute floor(a * b / denominator).

    Raises:
        DivisionByZero: If denominator is zero
    """
    return (S(a) * S(b)) // S(denominator)


def mul_div_ceil(a: SafeInt | int, b: SafeInt | int, denominator: SafeInt | int) -> SafeInt:
    """Compute ceil(a * b / denominator).

    Used wherever the protocol rounds in its own favour, so the required
    input is never under-charged.

    Raises:
        DivisionByZero: If denominator is zero
    """
    return (S(a) * S(b)).ceiling_div(S(denominator))


def isqrt_floor(value: SafeInt | int) -> SafeInt:
    """Integer square root, rounded down (Babylonian method).

    Starts from x = v, y = (v + 1) / 2 and iterates while y keeps decreasing,
    the same loop the on-chain library runs. Exact for perfect squares.

    Raises:
        Underflow: If value is negative
    """
    v = int(S(value))
    if v < 0:
        raise Underflow(f"Square root of negative value: {v}")
    if v == 0:
        return SafeInt.zero()
    x = v
    y = (v + 1) // 2
    while y < x:
        x = y
        y = (v // x + x) // 2
    return S(x)


def to_canonical_scale(decimals: int, amount: SafeInt | int) -> SafeInt:
    """Rescale a native token amount to CANONICAL_DECIMALS.

    Tokens with more than 18 decimals lose precision (floor), matching the
    contract's parsing.

    Args:
        decimals: The token's native decimal count
        amount: Amount in native units

    Returns:
        Amount in canonical 18-decimal units
    """
    if decimals > CANONICAL_DECIMALS:
        return S(amount) // 10 ** (decimals - CANONICAL_DECIMALS)
    return S(amount) * 10 ** (CANONICAL_DECIMALS - decimals)


def from_canonical_scale(decimals: int, amount: SafeInt | int) -> SafeInt:
    """Rescale a canonical 18-decimal amount back to native token units.

    Tokens with fewer than 18 decimals lose precision (floor).

    Args:
        decimals: The token's native decimal count
        amount: Amount in canonical units

    Returns:
        Amount in native units
    """
    if decimals > CANONICAL_DECIMALS:
        return S(amount) * 10 ** (decimals - CANONICAL_DECIMALS)
    return S(amount) // 10 ** (CANONICAL_DECIMALS - decimals)

"""Mathematical utilities for the quoter.

This package provides the fixed-point primitives shared by the curve variants:
- mul_div_floor / mul_div_ceil: truncating and rounding-up multiply-divide
- isqrt_floor: integer square root
- to_canonical_scale / from_canonical_scale: decimals normalisation
"""

from oracle_amm.math.fixed_point import (
    CANONICAL_DECIMALS,
    from_canonical_scale,
    isqrt_floor,
    mul_div_ceil,
    mul_div_floor,
    to_canonical_scale,
)

__all__ = [
    "CANONICAL_DECIMALS",
    "mul_div_floor",
    "mul_div_ceil",
    "isqrt_floor",
    "to_canonical_scale",
    "from_canonical_scale",
]

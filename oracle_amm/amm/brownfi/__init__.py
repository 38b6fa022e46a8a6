"""BrownFi oracle-anchored pool implementations.

This package provides swap quotes for BrownFi pairs, matching the on-chain
BrownFiV1Library / BrownFiV2Library integer arithmetic exactly.

Curve variants supported:
- V1: single Q128 oracle price, exact-output quotes only
- V2: two Q64 oracle prices with reserve skew, decimals-aware
"""

# AMM facade
from .amm import BrownFiAMM, pool_math_for

# Errors
from .errors import (
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientOutputAmount,
    MaxReserveFractionExceeded,
    QuoteError,
    QuoteNotImplemented,
)

# Skew
from .skew import skewed_prices

# Formula variants
from .v1_math import BrownFiV1Math
from .v2_math import BrownFiV2Math

__all__ = [
    # Facade
    "BrownFiAMM",
    "pool_math_for",
    # Formulas
    "BrownFiV1Math",
    "BrownFiV2Math",
    "skewed_prices",
    # Errors
    "QuoteError",
    "InsufficientInputAmount",
    "InsufficientOutputAmount",
    "InsufficientLiquidity",
    "MaxReserveFractionExceeded",
    "QuoteNotImplemented",
]

"""AMM (Automated Market Maker) quote implementations."""

from oracle_amm.amm.base import PoolMath, SwapResult
from oracle_amm.amm.brownfi import BrownFiAMM, BrownFiV1Math, BrownFiV2Math

__all__ = [
    # Base types
    "PoolMath",
    "SwapResult",
    # BrownFi
    "BrownFiAMM",
    "BrownFiV1Math",
    "BrownFiV2Math",
]

"""BrownFi Quoter - off-chain swap quotes for oracle-anchored AMM pools."""

from oracle_amm.amm.brownfi import (
    BrownFiAMM,
    BrownFiV1Math,
    BrownFiV2Math,
    QuoteError,
    pool_math_for,
)
from oracle_amm.config import QuoterConfig
from oracle_amm.pools.types import PoolState, PoolStateV1, PoolStateV2

__version__ = "0.1.0"
__all__ = [
    "BrownFiAMM",
    "BrownFiV1Math",
    "BrownFiV2Math",
    "PoolState",
    "PoolStateV1",
    "PoolStateV2",
    "QuoteError",
    "QuoterConfig",
    "pool_math_for",
    "__version__",
]

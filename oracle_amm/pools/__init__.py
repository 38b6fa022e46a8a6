"""BrownFi pool state snapshots and parsing."""

from oracle_amm.pools.types import PoolState, PoolStateV1, PoolStateV2
from oracle_amm.pools.parsing import parse_pool, parse_pool_v1, parse_pool_v2

__all__ = [
    "PoolState",
    "PoolStateV1",
    "PoolStateV2",
    "parse_pool",
    "parse_pool_v1",
    "parse_pool_v2",
]

"""Test helpers module for shared test utilities.

- constants: Token addresses, pool addresses and fixed-point bases
- factories: Pool and snapshot factory functions
"""

from tests.helpers.constants import (
    DAI,
    ONE_ETHER,
    Q64,
    Q128,
    USDC,
    V1_PAIR,
    V2_PAIR,
    WETH,
    ZERO_ADDRESS,
)
from tests.helpers.factories import (
    make_v1_pool,
    make_v1_snapshot,
    make_v2_pool,
    make_v2_snapshot,
)

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "V1_PAIR",
    "V2_PAIR",
    "ZERO_ADDRESS",
    "Q64",
    "Q128",
    "ONE_ETHER",
    # Factories
    "make_v1_pool",
    "make_v2_pool",
    "make_v1_snapshot",
    "make_v2_snapshot",
]

"""Shared constants for tests.

All addresses are lowercase for consistency with normalize_address().

Usage:
    from tests.helpers import WETH, USDC
    # or
    from tests.helpers.constants import Q64, Q128
"""

# =============================================================================
# Tokens
# =============================================================================

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"  # Wrapped Ether (18 decimals)
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USD Coin (6 decimals)
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Dai Stablecoin (18 decimals)

# =============================================================================
# Pools
# =============================================================================

V1_PAIR = "0x1111111111111111111111111111111111111111"
V2_PAIR = "0x2222222222222222222222222222222222222222"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# =============================================================================
# Fixed-point bases
# =============================================================================

Q64 = 1 << 64
Q128 = 1 << 128
ONE_ETHER = 10**18

"""BrownFi pool state snapshots.

A snapshot is built by the state provider for a single quote and never
mutated afterwards. V1 and V2 pools share the base reserve fields and add
their own curve parameters.
"""

from __future__ import annotations

from dataclasses import dataclass

from oracle_amm.models.types import normalize_address


@dataclass(frozen=True)
class PoolState:
    """Fields common to every BrownFi pair.

    Attributes:
        address: Pair contract address
        token0: First token of the pair (sorted as on-chain)
        token1: Second token of the pair
        reserve0: Reserve of token0 in its native decimals
        reserve1: Reserve of token1 in its native decimals
    """

    address: str
    token0: str
    token1: str
    reserve0: int
    reserve1: int

    def __post_init__(self) -> None:
        if self.reserve0 < 0 or self.reserve1 < 0:
            raise ValueError(
                f"Reserves must be non-negative, got ({self.reserve0}, {self.reserve1})"
            )

    def reserves(self, zero_to_one: bool) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if zero_to_one:
            return self.reserve0, self.reserve1
        return self.reserve1, self.reserve0

    def direction_for(self, token_in: str, token_out: str) -> bool:
        """Resolve a token pair to a swap direction.

        Returns:
            True when swapping token0 for token1, False for the reverse

        Raises:
            ValueError: If the pair does not belong to this pool
        """
        token_in_norm = normalize_address(token_in)
        token_out_norm = normalize_address(token_out)
        token0 = normalize_address(self.token0)
        token1 = normalize_address(self.token1)
        if (token_in_norm, token_out_norm) == (token0, token1):
            return True
        if (token_in_norm, token_out_norm) == (token1, token0):
            return False
        raise ValueError(f"Pair {token_in}->{token_out} not in pool {self.address}")


@dataclass(frozen=True)
class PoolStateV1(PoolState):
    """BrownFi V1 pair.

    Attributes:
        kappa: Curvature, Q128 fixed point. 0 means one unit (Q128).
        fee: Swap fee in parts per 10_000 (25 = 0.25%)
        oracle_price: Price of token1 in token0, Q128 fixed point
        decimal_shift: Carried from the pair contract, unused by quoting
        qti: Carried from the pair contract, unused by quoting
    """

    kappa: int = 0
    fee: int = 0
    oracle_price: int = 0
    decimal_shift: int = 0
    qti: int = 0


@dataclass(frozen=True)
class PoolStateV2(PoolState):
    """BrownFi V2 pair.

    Attributes:
        kappa: Curvature, Q64 fixed point. 2*Q64 selects the constant-product form.
        lambda_: Skew sensitivity, Q64 fixed point. 0 disables skew.
        fee: Swap fee in parts per 10^8 (250_000 = 0.25%)
        token0_decimals: Native decimals of token0
        token1_decimals: Native decimals of token1
        price0: Oracle price of token0, Q64 fixed point
        price1: Oracle price of token1, Q64 fixed point
        update_fee: Oracle update fee, owned by the price-feed updater
        update_feed_data: Encoded oracle update payload, owned by the price-feed updater
    """

    kappa: int = 0
    lambda_: int = 0
    fee: int = 0
    token0_decimals: int = 18
    token1_decimals: int = 18
    price0: int = 0
    price1: int = 0
    update_fee: int = 0
    update_feed_data: str = "0x"

    def decimals(self, zero_to_one: bool) -> tuple[int, int]:
        """Get token decimals ordered as (decimals_in, decimals_out)."""
        if zero_to_one:
            return self.token0_decimals, self.token1_decimals
        return self.token1_decimals, self.token0_decimals

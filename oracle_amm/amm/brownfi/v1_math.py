"""BrownFi V1 pool math.

V1 prices every swap against a single Q128 oracle price of token1 in
token0, with a curvature parameter kappa controlling price impact:

    R         = kappa * dx / (x - dx)
    avg price = (2 + R) / (2 * P)   for token0 -> token1
              = P * (2 + R) / 2     for token1 -> token0

where dx is the requested output grossed up for the fee and x is the output
reserve. Every division rounds up so the pool never under-collects.

Only the exact-output direction has a published formula. Exact input and
spot price are placeholders upstream; they raise QuoteNotImplemented unless
the caller opts into the placeholder values.
"""

from oracle_amm.math.fixed_point import mul_div_ceil
from oracle_amm.pools.types import PoolStateV1
from oracle_amm.safe_int import S

from .errors import InsufficientLiquidity, InsufficientOutputAmount, QuoteNotImplemented

# Fee is expressed in parts per 10_000
FEE_DENOMINATOR = 10_000
Q128 = 1 << 128


class BrownFiV1Math:
    """Quote math for BrownFi V1 pairs.

    Args:
        placeholders: Return the upstream placeholder values (identity for
            exact input, 1.0 for spot price) instead of raising.
    """

    def __init__(self, placeholders: bool = False) -> None:
        self.placeholders = placeholders

    def quote_by_input(self, pool: PoolStateV1, zero_to_one: bool, amount_in: int) -> int:
        """Exact-input quote. No V1 formula is defined.

        Raises:
            QuoteNotImplemented: Unless placeholders are enabled
        """
        if not self.placeholders:
            raise QuoteNotImplemented("BrownFi V1 defines no exact-input formula")
        return amount_in

    def quote_by_output(self, pool: PoolStateV1, zero_to_one: bool, amount_out: int) -> int:
        """Calculate the input required for an exact output.

        Args:
            pool: V1 pool snapshot
            zero_to_one: True to buy token1 with token0
            amount_out: Desired output in native units

        Returns:
            Required input amount (rounded up)

        Raises:
            InsufficientOutputAmount: If amount_out <= 0 or the grossed-up
                output reaches 90% of the output reserve
            InsufficientLiquidity: If either reserve is empty
            SafeIntError: If fee >= FEE_DENOMINATOR or oracle_price is zero
        """
        reserve_in, reserve_out = pool.reserves(zero_to_one)
        kappa = pool.kappa or Q128

        if amount_out <= 0:
            raise InsufficientOutputAmount("BrownFiV1Library: INSUFFICIENT_OUTPUT_AMOUNT")
        if reserve_in <= 0 or reserve_out <= 0:
            raise InsufficientLiquidity("BrownFiV1Library: INSUFFICIENT_LIQUIDITY")

        amount_out_with_fee = mul_div_ceil(
            amount_out, FEE_DENOMINATOR, S(FEE_DENOMINATOR) - pool.fee
        )

        # 10 * dx < 9 * x
        if amount_out_with_fee * 10 >= S(reserve_out) * 9:
            raise InsufficientOutputAmount("BrownFiV1Library: INSUFFICIENT_OUTPUT_AMOUNT")

        r = mul_div_ceil(kappa, amount_out_with_fee, S(reserve_out) - amount_out_with_fee)

        if zero_to_one:
            avg_price = mul_div_ceil(r + 2 * Q128, Q128, S(pool.oracle_price) * 2)
        else:
            avg_price = mul_div_ceil(pool.oracle_price, r + 2 * Q128, 2 * Q128)

        return mul_div_ceil(amount_out_with_fee, avg_price, Q128).to_uint256()

    def spot_price(self, pool: PoolStateV1, zero_to_one: bool) -> float:
        """Spot price. No V1 formula is defined.

        Raises:
            QuoteNotImplemented: Unless placeholders are enabled
        """
        if not self.placeholders:
            raise QuoteNotImplemented("BrownFi V1 defines no spot price formula")
        return 1.0

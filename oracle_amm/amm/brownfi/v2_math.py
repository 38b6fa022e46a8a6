"""BrownFi V2 pool math.

V2 quotes against two Q64 oracle prices (one per token), skewed by the
reserve imbalance, with all amounts normalised to 18 decimals first. The
curve is

    (priceOut * dy) * (2 + R) / 2 = priceIn * dx,   R = K * dy / (y - dy)

For exact output this gives the required input directly. For exact input it
is a quadratic in dy:

    dy = (pOut*y + pIn*dx - sqrt((pIn*dx - pOut*y)^2 + 2*K*pIn*pOut*y*dx))
         / (pOut * (2 - K))

which degenerates to the constant-product form when K == 2. Unlike V1 every
division here truncates, matching BrownFiV2Library.
"""

from oracle_amm.math.fixed_point import (
    from_canonical_scale,
    isqrt_floor,
    mul_div_floor,
    to_canonical_scale,
)
from oracle_amm.pools.types import PoolStateV2
from oracle_amm.safe_int import S, SafeInt

from .errors import (
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientOutputAmount,
    MaxReserveFractionExceeded,
)
from .skew import Q64, skewed_prices

# Fee is expressed in parts per 10^8
PRECISION = 10**8
TWO_Q64 = 2 * Q64


class BrownFiV2Math:
    """Quote math for BrownFi V2 pairs."""

    def quote_by_input(self, pool: PoolStateV2, zero_to_one: bool, amount_in: int) -> int:
        """Calculate output amount for an exact input (BrownFiV2Library.getAmountOut).

        Args:
            pool: V2 pool snapshot
            zero_to_one: True to sell token0 for token1
            amount_in: Input in native units

        Returns:
            Output amount in the output token's native units (rounded down)

        Raises:
            InsufficientInputAmount: If amount_in <= 0
            InsufficientLiquidity: If the output reserve is empty
            SafeIntError: If kappa > 2*Q64 or the prices make the curve degenerate
        """
        if amount_in <= 0:
            raise InsufficientInputAmount("BrownFiV2Library: INSUFFICIENT_INPUT_AMOUNT")

        _, reserve_out = pool.reserves(zero_to_one)
        decimals_in, decimals_out = pool.decimals(zero_to_one)

        if reserve_out <= 0:
            raise InsufficientLiquidity("BrownFiV2Library: INSUFFICIENT_LIQUIDITY")

        parsed_amount_in = to_canonical_scale(decimals_in, amount_in)
        parsed_reserve_out = to_canonical_scale(decimals_out, reserve_out)
        price_in, price_out = _directional_prices(pool, zero_to_one)

        # Fee is taken out of the input before it reaches the curve
        effective_in = mul_div_floor(parsed_amount_in, PRECISION, PRECISION + pool.fee)

        if pool.kappa == TWO_Q64:
            amount_out = mul_div_floor(
                parsed_reserve_out * effective_in,
                price_in,
                price_out * parsed_reserve_out + effective_in * price_in,
            )
        else:
            amount_out = _solve_output(
                effective_in, price_in, price_out, parsed_reserve_out, S(pool.kappa)
            )

        return from_canonical_scale(decimals_out, amount_out).to_uint256()

    def quote_by_output(self, pool: PoolStateV2, zero_to_one: bool, amount_out: int) -> int:
        """Calculate the input required for an exact output (BrownFiV2Library.getAmountIn).

        Args:
            pool: V2 pool snapshot
            zero_to_one: True to buy token1 with token0
            amount_out: Desired output in native units

        Returns:
            Required input in the input token's native units (rounded down)

        Raises:
            InsufficientOutputAmount: If amount_out <= 0
            InsufficientLiquidity: If the output reserve is empty
            MaxReserveFractionExceeded: If amount_out >= 80% of the output reserve
            SafeIntError: If the input-side price is zero
        """
        if amount_out <= 0:
            raise InsufficientOutputAmount("BrownFiV2Library: INSUFFICIENT_OUTPUT_AMOUNT")

        _, reserve_out = pool.reserves(zero_to_one)
        decimals_in, decimals_out = pool.decimals(zero_to_one)

        if reserve_out <= 0:
            raise InsufficientLiquidity("BrownFiV2Library: INSUFFICIENT_LIQUIDITY")

        if S(amount_out) * 10 >= S(reserve_out) * 8:
            raise MaxReserveFractionExceeded("BrownFiV2Library: MAX_80_PERCENT_OF_RESERVE")

        parsed_amount_out = to_canonical_scale(decimals_out, amount_out)
        parsed_reserve_out = to_canonical_scale(decimals_out, reserve_out)
        price_in, price_out = _directional_prices(pool, zero_to_one)

        # R = K * dy / (y - dy)
        price_impact = mul_div_floor(
            S(pool.kappa) * Q64,
            parsed_amount_out,
            (parsed_reserve_out - parsed_amount_out) * Q64,
        )

        amount_in = mul_div_floor(
            parsed_amount_out,
            mul_div_floor(price_out, price_impact + TWO_Q64, price_in),
            TWO_Q64,
        )
        amount_in = mul_div_floor(amount_in, PRECISION + pool.fee, PRECISION)

        return from_canonical_scale(decimals_in, amount_in).to_uint256()

    def spot_price(self, pool: PoolStateV2, zero_to_one: bool) -> float:
        """Skew-adjusted oracle price ratio, without fee.

        Returns price0 / price1 for token0 -> token1 and the inverse
        otherwise. Display only, never used for settlement.

        Raises:
            ZeroDivisionError: If the denominator price is zero
        """
        price0, price1 = skewed_prices(
            pool.price0,
            pool.price1,
            to_canonical_scale(pool.token0_decimals, pool.reserve0),
            to_canonical_scale(pool.token1_decimals, pool.reserve1),
            pool.lambda_,
        )
        if zero_to_one:
            return float(price0.value) / float(price1.value)
        return float(price1.value) / float(price0.value)


def _directional_prices(pool: PoolStateV2, zero_to_one: bool) -> tuple[SafeInt, SafeInt]:
    """Skew-adjusted (price_in, price_out) over canonical reserves of both tokens.

    Only the prices follow the swap direction; reserves are always passed as
    (reserve0, reserve1), as BrownFiV2Library does.
    """
    reserve0 = to_canonical_scale(pool.token0_decimals, pool.reserve0)
    reserve1 = to_canonical_scale(pool.token1_decimals, pool.reserve1)
    if zero_to_one:
        return skewed_prices(pool.price0, pool.price1, reserve0, reserve1, pool.lambda_)
    return skewed_prices(pool.price1, pool.price0, reserve0, reserve1, pool.lambda_)


def _solve_output(
    amount_in: SafeInt,
    price_in: SafeInt,
    price_out: SafeInt,
    reserve_out: SafeInt,
    kappa: SafeInt,
) -> SafeInt:
    """Root of the V2 curve quadratic for the output amount (kappa != 2*Q64)."""
    left_numerator = price_out * reserve_out + price_in * amount_in
    left_sqrt = mul_div_floor(amount_in, price_in, Q64).abs_diff(
        mul_div_floor(reserve_out, price_out, Q64)
    ) ** 2
    right_sqrt = mul_div_floor(price_in * price_out, kappa, Q64 * Q64) * mul_div_floor(
        reserve_out * amount_in, 2, Q64
    )
    denominator = mul_div_floor(price_out, S(TWO_Q64) - kappa, Q64)

    return (left_numerator - isqrt_floor(left_sqrt + right_sqrt) * Q64) // denominator

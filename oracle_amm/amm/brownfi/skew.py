"""Reserve-imbalance price skew for BrownFi V2.

The V2 pair nudges the oracle prices towards rebalancing the pool: the side
holding more notional value is quoted at a discount and the other side at a
premium, by a fraction proportional to the imbalance.

    s = lambda * |vA - vB| / (vA + vB),   vX = reserveX * priceX
    over-represented price  *= (1 - s)
    under-represented price *= (1 + s)

All values are Q64 fixed point; reserves are in canonical 18-decimal units.
"""

from oracle_amm.math.fixed_point import mul_div_floor
from oracle_amm.safe_int import S, SafeInt

Q64 = 1 << 64


def skewed_prices(
    price_a: SafeInt | int,
    price_b: SafeInt | int,
    reserve_a: SafeInt | int,
    reserve_b: SafeInt | int,
    lambda_: SafeInt | int,
) -> tuple[SafeInt, SafeInt]:
    """Adjust a pair of oracle prices for the current reserve imbalance.

    Args:
        price_a: Q64 oracle price of token A
        price_b: Q64 oracle price of token B
        reserve_a: Canonical-scale reserve of token A
        reserve_b: Canonical-scale reserve of token B
        lambda_: Q64 skew sensitivity (0 disables the adjustment)

    Returns:
        Tuple of (adjusted_price_a, adjusted_price_b)

    Raises:
        DivisionByZero: If lambda_ is set and both notional values are zero
        Underflow: If lambda_ exceeds Q64 enough to drive (1 - s) negative
    """
    price_a, price_b = S(price_a), S(price_b)
    if S(lambda_) == 0:
        return price_a, price_b

    value_a = S(reserve_a) * price_a
    value_b = S(reserve_b) * price_b
    s = mul_div_floor(value_a.abs_diff(value_b), lambda_, value_a + value_b)

    discount = S(Q64) - s
    premium = S(Q64) + s
    if value_a >= value_b:
        return mul_div_floor(price_a, discount, Q64), mul_div_floor(price_b, premium, Q64)
    return mul_div_floor(price_a, premium, Q64), mul_div_floor(price_b, discount, Q64)

"""BrownFi AMM facade.

Dispatches a pool snapshot to the formula for its curve variant and exposes
token-address based quoting for routing code. The formulas raise on bad
input; this layer logs the failure and reports the pool as unusable.
"""

from __future__ import annotations

import structlog

from oracle_amm.amm.base import PoolMath, SwapResult
from oracle_amm.config import DEFAULT_QUOTER_CONFIG, QuoterConfig
from oracle_amm.models.types import normalize_address
from oracle_amm.pools.types import PoolState, PoolStateV1, PoolStateV2

from .errors import QuoteError
from .v1_math import BrownFiV1Math
from .v2_math import BrownFiV2Math

logger = structlog.get_logger()


def pool_math_for(pool: PoolState, config: QuoterConfig = DEFAULT_QUOTER_CONFIG) -> PoolMath:
    """Select the formula implementation for a pool's curve variant.

    Raises:
        TypeError: If the snapshot is not a known BrownFi variant
    """
    if isinstance(pool, PoolStateV2):
        return BrownFiV2Math()
    if isinstance(pool, PoolStateV1):
        return BrownFiV1Math(placeholders=config.allow_v1_placeholders)
    raise TypeError(f"Unsupported pool state: {type(pool).__name__}")


def _variant(pool: PoolState) -> str:
    return "v2" if isinstance(pool, PoolStateV2) else "v1"


class BrownFiAMM:
    """Quote swaps through BrownFi V1 and V2 pairs by token address.

    Provides simulate_swap and simulate_swap_exact_output returning
    SwapResult, or None when the pool cannot serve the trade.
    """

    def __init__(self, config: QuoterConfig = DEFAULT_QUOTER_CONFIG) -> None:
        self.config = config

    def simulate_swap(
        self,
        pool: PoolState,
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> SwapResult | None:
        """Quote a swap through a pool (exact input).

        Args:
            pool: The pool snapshot
            token_in: Input token address
            token_out: Output token address
            amount_in: Amount of input token

        Returns:
            SwapResult with amounts and pool info, or None if the quote fails
        """
        try:
            zero_to_one = pool.direction_for(token_in, token_out)
            amount_out = pool_math_for(pool, self.config).quote_by_input(
                pool, zero_to_one, amount_in
            )
        except (QuoteError, ArithmeticError, ValueError) as e:
            logger.debug(
                "brownfi_swap_failed",
                pool=pool.address,
                variant=_variant(pool),
                token_in=token_in,
                token_out=token_out,
                amount_in=amount_in,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            pool_address=pool.address,
            token_in=normalize_address(token_in),
            token_out=normalize_address(token_out),
        )

    def simulate_swap_exact_output(
        self,
        pool: PoolState,
        token_in: str,
        token_out: str,
        amount_out: int,
    ) -> SwapResult | None:
        """Quote a swap to get an exact output amount (buy order).

        Args:
            pool: The pool snapshot
            token_in: Input token address
            token_out: Output token address
            amount_out: Desired output amount

        Returns:
            SwapResult with required input and desired output, or None if the quote fails
        """
        try:
            zero_to_one = pool.direction_for(token_in, token_out)
            amount_in = pool_math_for(pool, self.config).quote_by_output(
                pool, zero_to_one, amount_out
            )
        except (QuoteError, ArithmeticError, ValueError) as e:
            logger.debug(
                "brownfi_exact_output_failed",
                pool=pool.address,
                variant=_variant(pool),
                token_in=token_in,
                token_out=token_out,
                amount_out=amount_out,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            pool_address=pool.address,
            token_in=normalize_address(token_in),
            token_out=normalize_address(token_out),
        )

    def spot_price(self, pool: PoolState, token_in: str, token_out: str) -> float | None:
        """Display spot price of token_in in token_out, or None if unavailable."""
        try:
            zero_to_one = pool.direction_for(token_in, token_out)
            return pool_math_for(pool, self.config).spot_price(pool, zero_to_one)
        except (QuoteError, ArithmeticError, ValueError) as e:
            logger.debug(
                "brownfi_spot_price_failed",
                pool=pool.address,
                variant=_variant(pool),
                token_in=token_in,
                token_out=token_out,
                error=str(e),
            )
            return None

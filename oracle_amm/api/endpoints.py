"""API endpoints for the quoter."""

import structlog
from fastapi import APIRouter, Depends

from oracle_amm.amm.brownfi import QuoteError, pool_math_for
from oracle_amm.config import QuoterConfig
from oracle_amm.models.snapshot import (
    QuoteRequest,
    QuoteResponse,
    SpotPriceRequest,
    SpotPriceResponse,
)
from oracle_amm.pools.parsing import parse_pool
from oracle_amm.pools.types import PoolState

logger = structlog.get_logger()

router = APIRouter(prefix="/quote")


class QuoteRejected(Exception):
    """Raised by handlers; rendered as an ErrorResponse by the app."""

    def __init__(self, status_code: int, error: str, detail: str) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.error = error
        self.detail = detail


def get_config() -> QuoterConfig:
    """Dependency provider for quoter configuration.

    Override this in tests:
        app.dependency_overrides[get_config] = lambda: QuoterConfig(...)
    """
    return QuoterConfig.from_env()


def _resolve(
    request: QuoteRequest | SpotPriceRequest, config: QuoterConfig
) -> tuple[PoolState, bool]:
    """Parse the snapshot and resolve the swap direction."""
    pool = parse_pool(request.pool, config)
    if pool is None:
        raise QuoteRejected(400, "InvalidPool", f"Pool {request.pool.address} cannot be quoted")
    try:
        zero_to_one = pool.direction_for(request.token_in, request.token_out)
    except ValueError as e:
        raise QuoteRejected(400, "TokenNotInPool", str(e)) from e
    return pool, zero_to_one


def _rejection(e: Exception, **context: object) -> QuoteRejected:
    """Map a formula failure to a rejection, keeping the two failure families apart."""
    error = e.kind if isinstance(e, QuoteError) else type(e).__name__
    logger.info("quote_rejected", error=error, detail=str(e), **context)
    return QuoteRejected(422, error, str(e))


@router.post("/exact-input")
async def quote_exact_input(
    request: QuoteRequest,
    config: QuoterConfig = Depends(get_config),
) -> QuoteResponse:
    """Quote the output of selling an exact amount of token_in.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Unusable pool or foreign token: 400 with ErrorResponse
        - Rejected trade or degenerate parameters: 422 with ErrorResponse
    """
    pool, zero_to_one = _resolve(request, config)
    try:
        amount_out = pool_math_for(pool, config).quote_by_input(pool, zero_to_one, request.amount)
    except (QuoteError, ArithmeticError) as e:
        raise _rejection(e, pool=pool.address, amount_in=request.amount) from e

    logger.debug(
        "quoted_exact_input",
        pool=pool.address,
        amount_in=request.amount,
        amount_out=amount_out,
    )
    return QuoteResponse(
        pool=pool.address,
        token_in=request.token_in,
        token_out=request.token_out,
        amount_in=str(request.amount),
        amount_out=str(amount_out),
    )


@router.post("/exact-output")
async def quote_exact_output(
    request: QuoteRequest,
    config: QuoterConfig = Depends(get_config),
) -> QuoteResponse:
    """Quote the input required to buy an exact amount of token_out."""
    pool, zero_to_one = _resolve(request, config)
    try:
        amount_in = pool_math_for(pool, config).quote_by_output(pool, zero_to_one, request.amount)
    except (QuoteError, ArithmeticError) as e:
        raise _rejection(e, pool=pool.address, amount_out=request.amount) from e

    logger.debug(
        "quoted_exact_output",
        pool=pool.address,
        amount_in=amount_in,
        amount_out=request.amount,
    )
    return QuoteResponse(
        pool=pool.address,
        token_in=request.token_in,
        token_out=request.token_out,
        amount_in=str(amount_in),
        amount_out=str(request.amount),
    )


@router.post("/spot-price")
async def quote_spot_price(
    request: SpotPriceRequest,
    config: QuoterConfig = Depends(get_config),
) -> SpotPriceResponse:
    """Display spot price of token_in in token_out, without fee."""
    pool, zero_to_one = _resolve(request, config)
    try:
        price = pool_math_for(pool, config).spot_price(pool, zero_to_one)
    except (QuoteError, ArithmeticError) as e:
        raise _rejection(e, pool=pool.address) from e

    return SpotPriceResponse(
        pool=pool.address,
        token_in=request.token_in,
        token_out=request.token_out,
        price=price,
    )

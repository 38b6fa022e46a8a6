"""Pydantic models for pool snapshots and quote requests.

Field names follow the BrownFi pair contracts (camelCase), so a snapshot
produced by the state provider can be posted as-is. Integer fields accept
either ints or decimal strings.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from oracle_amm.models.types import Address, Bytes, Uint256


class PoolSnapshotV1(BaseModel):
    """State of a BrownFi V1 pair as read from the chain."""

    version: Literal["v1"]
    address: Address
    token0: Address
    token1: Address
    reserve0: Uint256
    reserve1: Uint256
    kappa: Uint256 | None = None
    fee: Uint256 | None = None
    oracle_price: Uint256 | None = Field(default=None, alias="oraclePrice")
    decimal_shift: Uint256 | None = Field(default=None, alias="decimalShift")
    qti: Uint256 | None = None

    model_config = {"populate_by_name": True}


class PoolSnapshotV2(BaseModel):
    """State of a BrownFi V2 pair, including the oracle prices."""

    version: Literal["v2"]
    address: Address
    token0: Address
    token1: Address
    reserve0: Uint256
    reserve1: Uint256
    kappa: Uint256 | None = None
    lambda_: Uint256 | None = Field(default=None, alias="lambda")
    fee: Uint256 | None = None
    # Most tokens use 18 decimals; uint8 on-chain
    token0_decimals: int | None = Field(default=None, ge=0, le=255, alias="token0Decimals")
    token1_decimals: int | None = Field(default=None, ge=0, le=255, alias="token1Decimals")
    price0: Uint256 | None = None
    price1: Uint256 | None = None
    update_fee: Uint256 | None = Field(default=None, alias="updateFee")
    update_feed_data: Bytes | None = Field(default=None, alias="updateFeedData")

    model_config = {"populate_by_name": True}


PoolSnapshot = Annotated[PoolSnapshotV1 | PoolSnapshotV2, Field(discriminator="version")]


class QuoteRequest(BaseModel):
    """Quote an exact input or exact output swap through one pool."""

    pool: PoolSnapshot
    token_in: Address = Field(alias="tokenIn")
    token_out: Address = Field(alias="tokenOut")
    amount: Uint256 = Field(description="Exact input or exact output, in native units")

    model_config = {"populate_by_name": True}


class SpotPriceRequest(BaseModel):
    """Ask for the display spot price of a pool in one direction."""

    pool: PoolSnapshot
    token_in: Address = Field(alias="tokenIn")
    token_out: Address = Field(alias="tokenOut")

    model_config = {"populate_by_name": True}


class QuoteResponse(BaseModel):
    """A computed quote. Amounts are decimal strings to survive JSON."""

    pool: str
    token_in: str = Field(alias="tokenIn")
    token_out: str = Field(alias="tokenOut")
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")

    model_config = {"populate_by_name": True}


class SpotPriceResponse(BaseModel):
    """Spot price of token_in in units of token_out. Display only."""

    pool: str
    token_in: str = Field(alias="tokenIn")
    token_out: str = Field(alias="tokenOut")
    price: float

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Failure body returned for rejected quotes."""

    error: str
    detail: str

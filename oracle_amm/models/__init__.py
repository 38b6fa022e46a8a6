"""Pydantic models for pool snapshots and quotes."""

from oracle_amm.models.snapshot import (
    ErrorResponse,
    PoolSnapshot,
    PoolSnapshotV1,
    PoolSnapshotV2,
    QuoteRequest,
    QuoteResponse,
    SpotPriceRequest,
    SpotPriceResponse,
)
from oracle_amm.models.types import Address, Bytes, Uint256

__all__ = [
    # Types
    "Address",
    "Bytes",
    "Uint256",
    # Snapshots
    "PoolSnapshot",
    "PoolSnapshotV1",
    "PoolSnapshotV2",
    # Requests / responses
    "QuoteRequest",
    "QuoteResponse",
    "SpotPriceRequest",
    "SpotPriceResponse",
    "ErrorResponse",
]

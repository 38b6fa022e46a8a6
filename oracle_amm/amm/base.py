"""Base types for pool math implementations."""

from dataclasses import dataclass
from typing import Protocol, TypeVar, runtime_checkable

from oracle_amm.pools.types import PoolState

PoolT_contra = TypeVar("PoolT_contra", bound=PoolState, contravariant=True)


@dataclass(frozen=True)
class SwapResult:
    """Result of quoting a swap through a pool."""

    amount_in: int
    amount_out: int
    pool_address: str
    token_in: str
    token_out: str


@runtime_checkable
class PoolMath(Protocol[PoolT_contra]):
    """Quoting capability shared by every curve variant.

    Each variant is parameterised by its own state shape. Amounts are
    integers in native token units; `zero_to_one` selects token0 -> token1.

    Implementations raise QuoteError subclasses for rejected trade sizes and
    SafeIntError subclasses for degenerate pool parameters.
    """

    def quote_by_input(self, pool: PoolT_contra, zero_to_one: bool, amount_in: int) -> int:
        """Output amount for an exact input."""
        ...

    def quote_by_output(self, pool: PoolT_contra, zero_to_one: bool, amount_out: int) -> int:
        """Required input amount for an exact output."""
        ...

    def spot_price(self, pool: PoolT_contra, zero_to_one: bool) -> float:
        """Marginal price without fee, for display only."""
        ...

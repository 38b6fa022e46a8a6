"""BrownFi quote error classes.

These map to the revert reasons of the BrownFi V1/V2 libraries. They are
trade-size and liquidity validation failures; arithmetic failures caused by
degenerate pool parameters raise SafeIntError subclasses instead.
"""


class QuoteError(Exception):
    """Base error for rejected quotes."""

    kind: str = "QuoteError"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.kind)


class InsufficientInputAmount(QuoteError):
    """INSUFFICIENT_INPUT_AMOUNT: input amount is not positive."""

    kind = "InsufficientInputAmount"


class InsufficientOutputAmount(QuoteError):
    """INSUFFICIENT_OUTPUT_AMOUNT: output is not positive, or V1 output takes >= 90% of reserve."""

    kind = "InsufficientOutputAmount"


class InsufficientLiquidity(QuoteError):
    """INSUFFICIENT_LIQUIDITY: a reserve the quote depends on is empty."""

    kind = "InsufficientLiquidity"


class MaxReserveFractionExceeded(QuoteError):
    """MAX_80_PERCENT_OF_RESERVE: V2 output takes >= 80% of reserve."""

    kind = "MaxReserveFractionExceeded"


class QuoteNotImplemented(QuoteError):
    """The curve variant defines no formula for this operation."""

    kind = "QuoteNotImplemented"

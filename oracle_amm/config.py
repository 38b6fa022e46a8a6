"""Configuration for the quoter."""

import os
from dataclasses import dataclass

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class QuoterConfig:
    """Centralized configuration for quoting.

    Curve constants (fee denominators, Q64/Q128 bases) are fixed per formula
    module.

    Attributes:
        allow_v1_placeholders: If True, V1 exact-input and spot-price return
            the upstream placeholder values (identity, 1.0). If False they
            raise QuoteNotImplemented.
        default_token_decimals: Decimals assumed when a V2 snapshot omits them
    """

    allow_v1_placeholders: bool = False
    default_token_decimals: int = 18

    @classmethod
    def from_env(cls) -> "QuoterConfig":
        """Build a config from environment variables.

        - QUOTER_ALLOW_V1_PLACEHOLDERS: Enable V1 placeholder quotes (default: false)
        - QUOTER_DEFAULT_TOKEN_DECIMALS: Fallback token decimals (default: 18)
        """
        return cls(
            allow_v1_placeholders=os.environ.get("QUOTER_ALLOW_V1_PLACEHOLDERS", "false").lower()
            in _TRUTHY,
            default_token_decimals=int(os.environ.get("QUOTER_DEFAULT_TOKEN_DECIMALS", "18")),
        )


# Default configuration instance
DEFAULT_QUOTER_CONFIG = QuoterConfig()

"""BrownFi pool snapshot parsing.

Functions to turn validated wire snapshots into immutable PoolState values.
Fields the state provider could not read default the same way the provider
does: numeric parameters to 0, token decimals to 18, feed data to "0x".
"""

from __future__ import annotations

import structlog

from oracle_amm.config import DEFAULT_QUOTER_CONFIG, QuoterConfig
from oracle_amm.models.snapshot import PoolSnapshotV1, PoolSnapshotV2
from oracle_amm.models.types import normalize_address

from .types import PoolState, PoolStateV1, PoolStateV2

logger = structlog.get_logger()


def _distinct_tokens(snapshot: PoolSnapshotV1 | PoolSnapshotV2, pool_type: str) -> bool:
    if normalize_address(snapshot.token0) == normalize_address(snapshot.token1):
        logger.warning(
            f"{pool_type}_identical_tokens",
            pool=snapshot.address,
            token=snapshot.token0,
        )
        return False
    return True


def parse_pool_v1(snapshot: PoolSnapshotV1) -> PoolStateV1 | None:
    """Parse a V1 snapshot into PoolStateV1.

    Args:
        snapshot: Validated V1 snapshot

    Returns:
        PoolStateV1, or None if the snapshot cannot be quoted against
    """
    if not _distinct_tokens(snapshot, "v1_pool"):
        return None

    oracle_price = snapshot.oracle_price or 0
    if oracle_price == 0:
        logger.warning("v1_pool_missing_oracle_price", pool=snapshot.address)
        return None

    if snapshot.kappa is None:
        logger.debug("v1_pool_default_kappa", pool=snapshot.address)

    return PoolStateV1(
        address=snapshot.address,
        token0=snapshot.token0,
        token1=snapshot.token1,
        reserve0=snapshot.reserve0,
        reserve1=snapshot.reserve1,
        kappa=snapshot.kappa or 0,
        fee=snapshot.fee or 0,
        oracle_price=oracle_price,
        decimal_shift=snapshot.decimal_shift or 0,
        qti=snapshot.qti or 0,
    )


def parse_pool_v2(
    snapshot: PoolSnapshotV2,
    config: QuoterConfig = DEFAULT_QUOTER_CONFIG,
) -> PoolStateV2 | None:
    """Parse a V2 snapshot into PoolStateV2.

    Args:
        snapshot: Validated V2 snapshot
        config: Supplies the fallback token decimals

    Returns:
        PoolStateV2, or None if the snapshot cannot be quoted against
    """
    if not _distinct_tokens(snapshot, "v2_pool"):
        return None

    price0 = snapshot.price0 or 0
    price1 = snapshot.price1 or 0
    if price0 == 0 or price1 == 0:
        # Prices are filled in by the oracle updater; a fresh pair has none yet
        logger.warning(
            "v2_pool_missing_prices",
            pool=snapshot.address,
            price0=price0,
            price1=price1,
        )
        return None

    token0_decimals = snapshot.token0_decimals
    if token0_decimals is None:
        token0_decimals = config.default_token_decimals
    token1_decimals = snapshot.token1_decimals
    if token1_decimals is None:
        token1_decimals = config.default_token_decimals

    return PoolStateV2(
        address=snapshot.address,
        token0=snapshot.token0,
        token1=snapshot.token1,
        reserve0=snapshot.reserve0,
        reserve1=snapshot.reserve1,
        kappa=snapshot.kappa or 0,
        lambda_=snapshot.lambda_ or 0,
        fee=snapshot.fee or 0,
        token0_decimals=token0_decimals,
        token1_decimals=token1_decimals,
        price0=price0,
        price1=price1,
        update_fee=snapshot.update_fee or 0,
        update_feed_data=snapshot.update_feed_data or "0x",
    )


def parse_pool(
    snapshot: PoolSnapshotV1 | PoolSnapshotV2,
    config: QuoterConfig = DEFAULT_QUOTER_CONFIG,
) -> PoolState | None:
    """Parse a snapshot of either variant."""
    if isinstance(snapshot, PoolSnapshotV2):
        return parse_pool_v2(snapshot, config)
    return parse_pool_v1(snapshot)

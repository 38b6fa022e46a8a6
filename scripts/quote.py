"""Quote a swap through a BrownFi pool snapshot.

Reads a pool snapshot (the same JSON the quoting API accepts under "pool")
and prints the exact-input quote, exact-output quote or spot price.

Usage:
    python -m scripts.quote pool.json --token-in 0x... --token-out 0x... --exact-in 1000000
    python -m scripts.quote pool.json --token-in 0x... --token-out 0x... --spot
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import structlog
from pydantic import TypeAdapter, ValidationError

from oracle_amm.amm.brownfi import QuoteError, pool_math_for
from oracle_amm.config import QuoterConfig
from oracle_amm.models.snapshot import PoolSnapshot
from oracle_amm.pools.parsing import parse_pool

logger = structlog.get_logger()


def load_snapshot(path: Path) -> PoolSnapshot:
    """Load and validate a pool snapshot file.

    Raises:
        ValidationError: If the file does not describe a V1 or V2 pool
    """
    with open(path) as f:
        data = json.load(f)
    return TypeAdapter(PoolSnapshot).validate_python(data)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Quote a swap through a BrownFi pool snapshot")
    parser.add_argument("snapshot", type=Path, help="Pool snapshot JSON file")
    parser.add_argument("--token-in", required=True, help="Input token address")
    parser.add_argument("--token-out", required=True, help="Output token address")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--exact-in", type=int, help="Exact input amount (native units)")
    mode.add_argument("--exact-out", type=int, help="Exact output amount (native units)")
    mode.add_argument("--spot", action="store_true", help="Print the display spot price")
    parser.add_argument(
        "--allow-v1-placeholders",
        action="store_true",
        help="Return placeholder values for V1 operations without a formula",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    if not args.snapshot.exists():
        logger.error("snapshot_not_found", path=str(args.snapshot))
        return 1

    try:
        snapshot = load_snapshot(args.snapshot)
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("snapshot_invalid", path=str(args.snapshot), error=str(e))
        return 1

    config = QuoterConfig(allow_v1_placeholders=args.allow_v1_placeholders)
    pool = parse_pool(snapshot, config)
    if pool is None:
        return 1

    try:
        zero_to_one = pool.direction_for(args.token_in, args.token_out)
        math = pool_math_for(pool, config)
        if args.spot:
            print(math.spot_price(pool, zero_to_one))
        elif args.exact_in is not None:
            print(math.quote_by_input(pool, zero_to_one, args.exact_in))
        else:
            print(math.quote_by_output(pool, zero_to_one, args.exact_out))
    except (QuoteError, ArithmeticError, ValueError) as e:
        logger.error("quote_failed", pool=pool.address, error=str(e), error_type=type(e).__name__)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Export the startup seed data set as JSON fixture files.

Usage::

    python scripts/export_fixtures.py --seed 42 --output fixtures --pretty
"""

import argparse

from banking_mock.config import MockBankConfig
from banking_mock.logging import get_logger, setup_logging
from banking_mock.service import BankingService
from banking_mock.sinks import JsonFileSink

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export mock banking fixtures to JSON")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    parser.add_argument("--output", default=None, help="Output directory (default: OUTPUT_DIR or fixtures)")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = MockBankConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    setup_logging(args.log_level or config.log_level, config.log_format)

    service = BankingService(config)
    sink = JsonFileSink(
        args.output or config.output.json_output_dir,
        pretty=args.pretty or config.output.pretty_json,
    )
    counts = sink.write_store(service.store)
    sink.close()
    logger.info("Exported %d entity kinds", len(counts))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""CLI entry point: shows the JMA forecast on a WiFiDigit display."""

import argparse
import logging
from pathlib import Path

from keepipe.config.loader import DEFAULT_CONFIG, ConfigError, load_config
from keepipe.pipeline.run_pipeline import KeepipePipeline
from keepipe.reporting.formatters import format_forecast_text

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="keepipe",
        description="Send the JMA temperature forecast to a WiFiDigit display",
    )
    parser.add_argument(
        "-c", "--config", default=DEFAULT_CONFIG, type=Path,
        help="Config TOML path",
    )
    parser.add_argument(
        "-t", "--test-config", action="store_true",
        help="Check the configuration and exit",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Print the forecast and log debug output",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Log device requests instead of sending them",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.debug("config path: %s", args.config)
    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    if args.test_config:
        print(f"Config OK: {args.config}")
        return 0
    logger.debug("config: %s", config)

    pipeline = KeepipePipeline(config, dry_run=args.dry_run)
    summary = pipeline.run()

    if args.verbose and summary.forecast is not None:
        print(format_forecast_text(summary.forecast))

    return 0 if not summary.errors and not summary.failed else 1

# Area: Shared
"""
reveal_referee.cli — Command-line interface
===========================================

Provides CLI entry point for running the reveal bot.

Usage:
    reveal-referee                          # Run with .env / environment
    reveal-referee --config config.json     # Run with config file
    reveal-referee --sync-only              # Register slash commands and exit
    python -m reveal_referee --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import List, Optional

from ._shared import setup_logging
from .config import load_config, validate_for_discord
from .errors import ConfigError

logger = logging.getLogger("reveal_referee")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Reveal Referee - simultaneous reveal matches on Discord",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  reveal-referee
  reveal-referee --config config.json
  reveal-referee --sync-only
  DISCORD_TOKEN=... GUILD_ID=... reveal-referee
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        help="Override the configured log level (DEBUG, INFO, ...)",
    )

    parser.add_argument(
        "--sync-only",
        action="store_true",
        help="Register slash commands and exit without serving",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        overrides = {"log_level": args.log_level} if args.log_level else None
        config = load_config(args.config, overrides=overrides)
        validate_for_discord(config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Set via config file, .env or environment variables.", file=sys.stderr)
        return 1

    setup_logging(log_file_path=config.log_file, level=config.log_level_value)

    # Imported here so config errors are reported without loading discord.py
    from ._discord import run_bot, sync_only

    if args.sync_only:
        sync_only(config)
        logger.info("Slash commands registered.")
        return 0

    logger.info("=" * 60)
    logger.info("  Reveal Referee — Starting")
    logger.info(f"  Guilds: {config.guild_ids or 'global'}")
    logger.info(f"  Expiry: {config.match_expiry_seconds:.0f}s")
    logger.info(f"  Raw capture: {'on' if config.capture_raw_messages else 'off'}")
    logger.info("=" * 60)
    run_bot(config)
    return 0

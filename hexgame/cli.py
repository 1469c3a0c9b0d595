"""
Hexgame CLI - Command-line entry point.

Usage:
    hexgame <size> <first player> <second player> [auto-print]

The second player may be BogoAI or HeroAI to play against a bot.
Commands are then read from standard input, one per line.
"""

import argparse
import logging
import sys

from .config import ConfigError, GameConfig
from .session import GameLoop, GameManager


def main(argv=None):
    """Main CLI entry point."""
    # Player names may start with "-", so only long options are recognised
    # and everything else is passed through as game settings
    parser = argparse.ArgumentParser(
        description="Hexgame - Hex for two players, human or bot",
        prog="hexgame",
        usage="%(prog)s [--log-level LEVEL] <size> <first player> <second player> [auto-print]",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--help",
        action="help",
        help="Show this help message and exit",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic logging level (written to stderr)",
    )

    args, settings = parser.parse_known_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = GameConfig.from_args(settings)
    except ConfigError as e:
        for message in e.errors:
            print(f"Error: {message}", file=sys.stderr)
        return 1

    manager = GameManager(config)
    GameLoop(manager).run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())

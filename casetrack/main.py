"""Composition root for casetrack.

This module is the ONLY location that wires configuration, logging,
the replay adapter and the CLI together.

Module Structure:
- Configuration loading via config module
- Logging setup
- Argument parsing
- Command dispatch
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from casetrack.adapters.cli.commands import ReplayCommandHandler
from casetrack.adapters.replay.player import ScriptPlayer
from casetrack.config import load_settings


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Logs go to stderr so that command output on stdout stays parseable.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    # Map string level to logging constant
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_parser(default_format: str = "json") -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="casetrack",
        description="Track test case lifecycles and render their results.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    replay = subparsers.add_parser(
        "replay", help="Replay a recorded event script and print the result"
    )
    replay.add_argument("script", help="Path of the JSON event script")
    replay.add_argument(
        "--format",
        choices=["json", "text"],
        default=default_format,
        help=f"Output format (default: {default_format})",
    )
    replay.add_argument(
        "--verbose", action="store_true", help="Log a summary of the result"
    )
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """Load configuration, parse arguments and execute a command.

    Returns:
        Process exit code: 0 on success, 1 when the command failed.
    """
    settings = load_settings()
    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    args = build_parser(settings.output_format).parse_args(argv)

    if args.command == "replay":
        handler = ReplayCommandHandler(
            ScriptPlayer(settings.repeated_property_initial_index)
        )
        result = handler.replay(args.script, args.format, args.verbose)
    else:
        logger.error(f"Unknown command: {args.command}")
        return 1

    if result["status"] != "success":
        print(json.dumps(result, indent=2))
        return 1

    if isinstance(result["data"], str):
        print(result["data"])
    else:
        print(json.dumps(result["data"], indent=2))
    return 0


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful command
        1: Command or fatal error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

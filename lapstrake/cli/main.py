"""
cli/main.py - Command line entry point.
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import sys

from ..errors import LapstrakeError, format_error_chain
from .commands import ALL_COMMANDS
from .core import CLIContext, CommandRegistry, format_output

logger = logging.getLogger("cli")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    for command_class in ALL_COMMANDS:
        registry.register(command_class())
    return registry


def build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lapstrake",
        description="Loft a hull from a table of offsets and spile its planks.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for command in registry.get_all().values():
        sub = subparsers.add_parser(command.name, aliases=command.aliases, help=command.description)
        command.configure_parser(sub)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run one command; returns the process exit code."""
    registry = build_registry()
    args = build_parser(registry).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    command = registry.get(args.command)
    ctx = CLIContext(verbose=args.verbose)
    try:
        result = command.execute(ctx, args)
    except LapstrakeError as err:
        logger.debug(f"Command {command.name} failed: {err!r}")
        print(format_error_chain(err), file=sys.stderr)
        return 1

    print(format_output(result))
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())

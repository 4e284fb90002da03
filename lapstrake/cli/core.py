"""
cli/core.py - Core CLI infrastructure.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import argparse
import logging

from ..hull import Hull
from ..spec import HullSpec, load_spec

logger = logging.getLogger("cli")


@dataclass
class CLIContext:
    """Context for CLI operations."""

    verbose: bool = False

    # Loaded on first use
    spec: Optional[HullSpec] = None
    hull: Optional[Hull] = None

    def load_hull(self, directory: str) -> Hull:
        """Load the spec directory and loft its hull."""
        if self.hull is None:
            logger.debug(f"Loading spec from {directory}")
            self.spec = load_spec(directory)
            self.hull = Hull.from_spec(self.spec)
        return self.hull


@dataclass
class CommandResult:
    """Result of a CLI command execution."""

    message: str = ""
    data: Any = None
    exit_code: int = 0


class CLICommand(ABC):
    """Base class for CLI commands."""

    name: str = "command"
    description: str = "Base command"
    aliases: List[str] = []

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute the command."""
        pass

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Configure argument parser for this command."""
        pass


class CommandRegistry:
    """Registry for CLI commands."""

    def __init__(self):
        self._commands: Dict[str, CLICommand] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, command: CLICommand) -> None:
        """Register a command."""
        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def get(self, name: str) -> Optional[CLICommand]:
        """Get command by name or alias."""
        if name in self._commands:
            return self._commands[name]
        if name in self._aliases:
            return self._commands[self._aliases[name]]
        return None

    def list_commands(self) -> List[str]:
        """List all command names."""
        return list(self._commands.keys())

    def get_all(self) -> Dict[str, CLICommand]:
        """Get all commands."""
        return dict(self._commands)


def format_output(result: CommandResult) -> str:
    """Format command result for display."""
    output = result.message
    if result.data:
        if isinstance(result.data, list):
            output += "".join(f"\n{row}" for row in result.data)
        else:
            output += f"\n{result.data}"
    return output

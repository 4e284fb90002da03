"""
cli/ - Command line interface.

- planks:     flatten the planks and write their layout
- stations:   draw the half-breadth view of every station
- station-at: print a station synthesized at a fore-aft position
- offsets:    write dense station samples as CSV
- cross-sections: draw full-breadth station templates
"""

from .core import (
    CLIContext,
    CommandResult,
    CommandRegistry,
    CLICommand,
)
from .commands import (
    PlanksCommand,
    StationsCommand,
    StationAtCommand,
    OffsetsCommand,
    CrossSectionsCommand,
)

__all__ = [
    # Core
    "CLIContext",
    "CommandResult",
    "CommandRegistry",
    "CLICommand",
    # Commands
    "PlanksCommand",
    "StationsCommand",
    "StationAtCommand",
    "OffsetsCommand",
    "CrossSectionsCommand",
]

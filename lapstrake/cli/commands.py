"""
cli/commands.py - CLI command implementations.

Every command takes the spec directory (data.csv, planks.csv, config.csv)
as its first argument. Lofting errors propagate to main(), which prints
the chain of causes.
"""

from __future__ import annotations
import argparse

from ..exporters import (
    CSVExporter,
    SVGExporter,
    cross_section_drawing,
    exporter_for_file,
    half_breadth_drawing,
    plank_drawing,
)
from ..errors import ExportError
from ..spec import Feet
from .core import CLICommand, CLIContext, CommandResult


def _add_spec_dir(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("spec_dir", help="Directory holding data.csv, planks.csv and config.csv")


def _add_scale(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--scale", type=float, default=100.0, help="SVG units per foot")


def _exporter(path: str, scale: float):
    try:
        exporter = exporter_for_file(path)
    except ValueError as err:
        raise ExportError(path, str(err)) from err
    if isinstance(exporter, SVGExporter):
        exporter = SVGExporter(scale=scale)
    return exporter


class PlanksCommand(CLICommand):
    """Flatten every plank and write the layout."""

    name = "planks"
    description = "Draw the flattened planks"
    aliases = ["spile"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_spec_dir(parser)
        parser.add_argument("-o", "--output", default="planks.svg", help="Output file (.svg, .csv or .json)")
        _add_scale(parser)

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        hull = ctx.load_hull(args.spec_dir)
        planks = hull.get_flattened_planks()
        _exporter(args.output, args.scale).export_to_file(plank_drawing(planks), args.output)
        return CommandResult(message=f"Wrote {len(planks)} planks to {args.output}")


class StationsCommand(CLICommand):
    """Write the half-breadth view of every station."""

    name = "stations"
    description = "Draw the station curves over the offsets grid"
    aliases = ["half-breadths"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_spec_dir(parser)
        parser.add_argument("-o", "--output", default="half-breadths.svg", help="Output file (.svg, .csv or .json)")
        _add_scale(parser)

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        hull = ctx.load_hull(args.spec_dir)
        drawing = half_breadth_drawing(hull)
        _exporter(args.output, args.scale).export_to_file(drawing, args.output)
        return CommandResult(message=f"Wrote {len(hull.stations)} stations to {args.output}")


class StationAtCommand(CLICommand):
    """Synthesize a station at a fore-aft position."""

    name = "station-at"
    description = "Print the points of a station synthesized at a fore-aft position"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_spec_dir(parser)
        parser.add_argument("position", help="Fore-aft position as feet-inches-eighths, e.g. 12-3-4")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        hull = ctx.load_hull(args.spec_dir)
        station = hull.hallucinate_station(Feet.parse(args.position))
        rows = [f"{p.x:.4f}\t{p.y:.4f}\t{p.z:.4f}" for p in station.points]
        return CommandResult(
            message=f"Station at {station.name} ({len(rows)} points, x y z):",
            data=rows,
        )


class OffsetsCommand(CLICommand):
    """Write dense samples of every station curve."""

    name = "offsets"
    description = "Write sampled station curves as CSV"
    aliases = ["samples"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_spec_dir(parser)
        parser.add_argument("-o", "--output", default="samples.csv", help="Output CSV file")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        hull = ctx.load_hull(args.spec_dir)
        CSVExporter().export_stations_to_file(hull.stations, args.output)
        return CommandResult(message=f"Wrote samples of {len(hull.stations)} stations to {args.output}")


class CrossSectionsCommand(CLICommand):
    """Write full-breadth templates of the stations."""

    name = "cross-sections"
    description = "Draw station templates with alignment holes and mounting tabs"
    aliases = ["molds"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_spec_dir(parser)
        parser.add_argument("-o", "--output", default="cross-sections.svg", help="Output file (.svg, .csv or .json)")
        parser.add_argument(
            "--exclude", nargs="*", default=["Stem", "Post"], metavar="STATION",
            help="Stations to leave out (default: Stem Post)",
        )
        _add_scale(parser)

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        hull = ctx.load_hull(args.spec_dir)
        drawing = cross_section_drawing(hull, excluded=args.exclude)
        count = sum(1 for path in drawing.paths if path.closed)
        _exporter(args.output, args.scale).export_to_file(drawing, args.output)
        return CommandResult(message=f"Wrote {count} cross-sections to {args.output}")


ALL_COMMANDS = [
    PlanksCommand,
    StationsCommand,
    StationAtCommand,
    OffsetsCommand,
    CrossSectionsCommand,
]

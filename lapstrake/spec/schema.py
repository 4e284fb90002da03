"""
spec/schema.py - Hull specification data contracts.

A hull specification is what the loader reads from the three CSV sheets:

- the table of offsets (station names, fore-aft positions, heights measured
  along buttock lines and half-breadths measured along waterlines),
- the plank table (where each plank edge lies on each station, as a
  fraction of the station's girth from the bottom),
- configuration options.

Lines are modelled as tagged values: a kind plus the measurement that
names the line, when it has one.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from ..core.constants import PLANK_LAYOUT_GAP
from ..errors import LoadError, MissingMeasurementError, PlankFractionError
from .units import Feet


# =============================================================================
# LINES
# =============================================================================

class LineKind(str, Enum):
    """Kinds of reference line in a table of offsets."""
    SHEER = "sheer"        # Top edge of the hull, always measured
    WALE = "wale"          # Wale strake height (breadth tables only)
    BUT_OUT = "but_out"    # Buttock: constant half-breadth
    WL_UP = "wl_up"        # Waterline: constant height


@dataclass(frozen=True)
class HeightLine:
    """A line along the hull of constant height: the sheer or a waterline."""

    kind: LineKind = LineKind.SHEER
    height: Optional[Feet] = None

    @classmethod
    def sheer(cls) -> HeightLine:
        return cls(LineKind.SHEER)

    @classmethod
    def wl_up(cls, height: Feet) -> HeightLine:
        return cls(LineKind.WL_UP, height)

    @classmethod
    def parse(cls, text: str) -> HeightLine:
        """Row header: "Sheer", or the waterline height like 1-6-0."""
        if text.strip().lower() == "sheer":
            return cls.sheer()
        try:
            return cls.wl_up(Feet.parse(text))
        except LoadError as err:
            raise LoadError(f"Was unable to read height line '{text}'") from err

    def __str__(self) -> str:
        if self.kind is LineKind.WL_UP:
            return f"WL {self.height!r} up"
        return self.kind.value.capitalize()


@dataclass(frozen=True)
class BreadthLine:
    """A line along the hull of constant breadth: sheer, wale or a buttock."""

    kind: LineKind = LineKind.SHEER
    breadth: Optional[Feet] = None

    @classmethod
    def sheer(cls) -> BreadthLine:
        return cls(LineKind.SHEER)

    @classmethod
    def wale(cls) -> BreadthLine:
        return cls(LineKind.WALE)

    @classmethod
    def but_out(cls, breadth: Feet) -> BreadthLine:
        return cls(LineKind.BUT_OUT, breadth)

    @classmethod
    def parse(cls, text: str) -> BreadthLine:
        """Row header: "Sheer", "Wale", or the buttock breadth like 2-0-0."""
        name = text.strip().lower()
        if name == "sheer":
            return cls.sheer()
        if name == "wale":
            return cls.wale()
        try:
            return cls.but_out(Feet.parse(text))
        except LoadError as err:
            raise LoadError(f"Was unable to read breadth line '{text}'") from err

    def __str__(self) -> str:
        if self.kind is LineKind.BUT_OUT:
            return f"Buttock {self.breadth!r} out"
        return self.kind.value.capitalize()


Cell = Optional[Feet]
HeightRow = Tuple[HeightLine, List[Cell]]
BreadthRow = Tuple[BreadthLine, List[Cell]]


# =============================================================================
# TABLE OF OFFSETS
# =============================================================================

@dataclass
class OffsetTable:
    """A standard set of reference points for the hull shape."""

    stations: List[str] = field(default_factory=list)
    """Station (cross-section) names, one per column."""

    positions: List[HeightRow] = field(default_factory=list)
    """Fore-aft position of each station, along the sheer or a waterline."""

    heights: List[BreadthRow] = field(default_factory=list)
    """Height above base at each half-breadth from center."""

    breadths: List[HeightRow] = field(default_factory=list)
    """Half-breadth from centerline at each height above base."""

    def station_position(self, index: int, line: Optional[HeightLine] = None) -> Feet:
        """
        Fore-aft position of station `index` along `line`.

        Stations with a raked stem or post sit at a different fore-aft
        position on each waterline. Lines without their own positions row
        use the position at the sheer.
        """
        line = line or HeightLine.sheer()
        if line.kind is not LineKind.SHEER:
            found = _find(self.positions, index, line)
            if found is not None:
                return found
            line = HeightLine.sheer()
        return _lookup(self.positions, index, line)

    def sheer_breadth(self, index: int) -> Feet:
        """Half-breadth of the sheer at station `index`."""
        return _lookup(self.breadths, index, HeightLine.sheer())

    def sheer_height(self, index: int) -> Feet:
        """Height of the sheer at station `index`."""
        return _lookup(self.heights, index, BreadthLine.sheer())

    def waterline_heights(self) -> List[float]:
        """Heights of every waterline in the breadths table."""
        return [
            float(line.height) for line, _ in self.breadths
            if line.kind is LineKind.WL_UP
        ]

    def buttock_breadths(self) -> List[float]:
        """Half-breadths of every buttock line in the heights table."""
        return [
            float(line.breadth) for line, _ in self.heights
            if line.kind is LineKind.BUT_OUT
        ]


def _find(rows, index: int, line) -> Optional[Feet]:
    for row_line, cells in rows:
        if row_line == line and index < len(cells) and cells[index] is not None:
            return cells[index]
    return None


def _lookup(rows, index: int, line) -> Feet:
    found = _find(rows, index, line)
    if found is None:
        raise MissingMeasurementError(line=str(line), station_index=index)
    return found


# =============================================================================
# PLANK TABLE
# =============================================================================

class PlankStationKind(str, Enum):
    """How a plank table column locates its cross-section."""
    STATION = "station"      # An existing, measured station
    POSITION = "position"    # A fore-aft position to interpolate at


@dataclass(frozen=True)
class PlankStation:
    """A plank table column: a named station or a fore-aft position."""

    kind: PlankStationKind
    name: str = ""
    position: Optional[Feet] = None

    @classmethod
    def station(cls, name: str) -> PlankStation:
        return cls(PlankStationKind.STATION, name=name)

    @classmethod
    def at_position(cls, position: Feet) -> PlankStation:
        return cls(PlankStationKind.POSITION, position=position)

    @classmethod
    def parse(cls, text: str) -> PlankStation:
        """Column header: a measurement is a position, anything else a name."""
        try:
            return cls.at_position(Feet.parse(text))
        except LoadError:
            return cls.station(text.strip())

    @property
    def label(self) -> str:
        if self.kind is PlankStationKind.POSITION:
            return str(self.position)
        return self.name


@dataclass
class PlankTable:
    """
    Where planks should lie on the hull.

    Rows come in pairs, bottom edge then top edge, one pair per plank.
    Each cell is a fraction from 0 (bottom of the station) to 1 (the
    sheer), or None where the plank edge does not reach that station.
    """

    stations: List[PlankStation] = field(default_factory=list)
    rows: List[List[Optional[float]]] = field(default_factory=list)

    def __post_init__(self):
        for row_index, row in enumerate(self.rows):
            if len(row) != len(self.stations):
                raise LoadError(
                    f"Plank row {row_index} has {len(row)} cells "
                    f"for {len(self.stations)} stations"
                )
            for fraction in row:
                if fraction is not None and not 0.0 <= fraction <= 1.0:
                    raise PlankFractionError(fraction, row=row_index)

    @property
    def plank_count(self) -> int:
        return len(self.rows) // 2

    def plank_rows(self) -> List[Tuple[List[Optional[float]], List[Optional[float]]]]:
        """(bottom, top) row pairs, one per plank."""
        return [
            (self.rows[i], self.rows[i + 1])
            for i in range(0, 2 * self.plank_count, 2)
        ]


# =============================================================================
# CONFIGURATION
# =============================================================================

class LoftingConfig(BaseModel):
    """Configuration options from config.csv."""

    resolution: int = Field(
        ..., ge=1, description="Samples per knot interval of every spline"
    )
    layout_gap: float = Field(
        default=PLANK_LAYOUT_GAP,
        ge=0.0,
        description="Vertical clearance between laid-out flattened planks (ft)",
    )


@dataclass
class HullSpec:
    """The spec for the hull of a ship, plus configuration options."""

    data: OffsetTable
    planks: PlankTable
    config: LoftingConfig

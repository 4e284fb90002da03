"""
hull/hull.py - A ship's hull assembled from a table of offsets.

The hull owns its stations (one per column of the table of offsets,
ordered fore to aft by position), the plank table, and the grid lines the
offsets were measured on. It can synthesize ("hallucinate") a station at
any fore-aft position by interpolating first along every real station and
then across the hull.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple, Union
import logging

from ..core.constants import HALLUCINATION_RESOLUTION, PLANK_LAYOUT_GAP
from ..errors import (
    LapstrakeError,
    PlankBuildError,
    PlankFractionError,
    StationError,
    UnknownStationError,
)
from ..geometry import Point2D, Point3D, Spline, bounds_3d
from ..spec.schema import HullSpec, LineKind, PlankStation, PlankStationKind, PlankTable
from ..spec.units import Feet
from .plank import FlattenedPlank, Plank, layout_planks
from .station import Station

logger = logging.getLogger(__name__)

Position = Union[Feet, float]


class Hull:
    """
    A ship's hull.

    Immutable after construction; every query is a pure function of the
    stations and plank table it was built with.
    """

    def __init__(
        self,
        stations: Sequence[Station],
        planks: Optional[PlankTable] = None,
        resolution: int = 10,
        heights: Sequence[float] = (),
        breadths: Sequence[float] = (),
        wale: Sequence[Point2D] = (),
        layout_gap: float = PLANK_LAYOUT_GAP,
    ):
        """
        Initialize hull.

        Args:
            stations: Cross-sections, in any order
            planks: Where the plank edges lie on the stations
            resolution: Spline samples per knot interval
            heights: Waterline heights the offsets were measured at
            breadths: Buttock half-breadths the offsets were measured at
            wale: Wale line as (fore-aft, height) points
            layout_gap: Clearance between flattened planks when stacked
        """
        self._stations: Tuple[Station, ...] = tuple(sorted(stations, key=lambda s: s.position))
        self.planks = planks or PlankTable()
        self.resolution = resolution
        self.heights: Tuple[float, ...] = tuple(heights)
        self.breadths: Tuple[float, ...] = tuple(breadths)
        self.wale: Tuple[Point2D, ...] = tuple(wale)
        self.layout_gap = layout_gap

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def from_spec(cls, spec: HullSpec) -> Hull:
        """
        Build every station from the table of offsets.

        Each station starts from its sheer point, then gains one point per
        buttock height and one per waterline half-breadth that was not
        omitted. Wale heights are kept as the wale line instead.

        Raises:
            StationError: A station is missing its sheer, or has fewer than
                four distinct points; the cause is chained
        """
        data = spec.data
        resolution = spec.config.resolution
        stations = []
        wale = []

        for i, name in enumerate(data.stations):
            try:
                sheer_x = float(data.station_position(i))
                points = [Point3D(
                    sheer_x,
                    float(data.sheer_breadth(i)),
                    float(data.sheer_height(i)),
                )]

                # Heights measured along buttocks sit at the sheer's position.
                for line, cells in data.heights:
                    height = _cell(cells, i)
                    if height is None:
                        continue
                    if line.kind is LineKind.BUT_OUT:
                        points.append(Point3D(sheer_x, float(line.breadth), float(height)))
                    elif line.kind is LineKind.WALE:
                        wale.append(Point2D(sheer_x, float(height)))
                    elif line.kind is not LineKind.SHEER:
                        logger.debug(f"Skipping {line} row in heights table")

                # Half-breadths measured along waterlines.
                for line, cells in data.breadths:
                    breadth = _cell(cells, i)
                    if breadth is None:
                        continue
                    if line.kind is LineKind.WL_UP:
                        x = float(data.station_position(i, line))
                        points.append(Point3D(x, float(breadth), float(line.height)))
                    elif line.kind is not LineKind.SHEER:
                        logger.debug(f"Skipping {line} row in breadths table")

                stations.append(Station.create(name, points, resolution, position=sheer_x))
            except LapstrakeError as err:
                raise StationError(name) from err

        logger.info(f"Built hull with {len(stations)} stations at resolution {resolution}")
        return cls(
            stations=stations,
            planks=spec.planks,
            resolution=resolution,
            heights=data.waterline_heights(),
            breadths=data.buttock_breadths(),
            wale=wale,
            layout_gap=spec.config.layout_gap,
        )

    # =========================================================================
    # STATIONS
    # =========================================================================

    @property
    def stations(self) -> List[Station]:
        """Stations ordered by fore-aft position."""
        return list(self._stations)

    @property
    def station_names(self) -> List[str]:
        return [station.name for station in self._stations]

    def get_station(self, name: str) -> Station:
        """
        Look up a station by name.

        Raises:
            UnknownStationError: No station has that name
        """
        for station in self._stations:
            if station.name == name:
                return station
        raise UnknownStationError(name, known=self.station_names)

    def get_line(self, t: float) -> Spline:
        """
        A line across the hull that is a constant fraction `t` of the
        distance along the edge of each cross section.
        """
        points = [station.at_t(t) for station in self._stations]
        return Spline(points, self.resolution)

    def hallucinate_station(self, position: Position) -> Station:
        """
        Synthesize a station at a fore-aft position with no measurements.

        For each of a fixed set of girth fractions, fits a line across the
        hull through every station at that fraction and takes its point
        nearest the position. Those points become the new station.
        """
        x = float(position)
        points = []
        for i in range(HALLUCINATION_RESOLUTION + 1):
            t = i / HALLUCINATION_RESOLUTION
            points.append(self.get_line(t).at_x(x))

        name = str(position) if isinstance(position, Feet) else f"{x:g}"
        logger.debug(f"Hallucinated station {name} at x={x}")
        return Station.create(name, points, self.resolution, position=x)

    def resolve_station(self, plank_station: PlankStation) -> Station:
        """The station a plank table column refers to, real or synthesized."""
        if plank_station.kind is PlankStationKind.POSITION:
            return self.hallucinate_station(plank_station.position)
        return self.get_station(plank_station.name)

    def get_point(self, fraction: float, plank_station: PlankStation) -> Point3D:
        """
        Point a fraction of the way along the curve of the given station.

        Raises:
            PlankFractionError: `fraction` lies outside [0, 1]
            UnknownStationError: A named station does not exist
        """
        return _point_on(self.resolve_station(plank_station), fraction)

    # =========================================================================
    # PLANKS
    # =========================================================================

    def get_planks(self) -> List[Plank]:
        """
        Planks described by the plank table, bottom edge row then top edge
        row for each plank. Cells left blank are skipped.

        Raises:
            PlankBuildError: A plank could not be built; the cause is chained
        """
        columns: Dict[int, Station] = {}
        planks = []
        for index, (bottom_row, top_row) in enumerate(self.planks.plank_rows()):
            try:
                bottom_line = []
                top_line = []
                for j, plank_station in enumerate(self.planks.stations):
                    bottom_f = bottom_row[j]
                    top_f = top_row[j]
                    if bottom_f is None and top_f is None:
                        continue
                    if j not in columns:
                        columns[j] = self.resolve_station(plank_station)
                    station = columns[j]
                    if bottom_f is not None:
                        bottom_line.append(_point_on(station, bottom_f))
                    if top_f is not None:
                        top_line.append(_point_on(station, top_f))
                planks.append(Plank.create(bottom_line, top_line, self.resolution))
            except LapstrakeError as err:
                raise PlankBuildError(index) from err

        logger.info(f"Built {len(planks)} planks")
        return planks

    def get_flattened_planks(self) -> List[FlattenedPlank]:
        """Planks flattened to 2d and stacked without overlap."""
        flattened = [plank.flatten() for plank in self.get_planks()]
        return layout_planks(flattened, gap=self.layout_gap)

    # =========================================================================
    # EXTENTS
    # =========================================================================

    def bounds(self) -> Tuple[Point3D, Point3D]:
        """Minimum and maximum corners over every station's fair curve."""
        samples = [p for station in self._stations for p in station.spline.sample()]
        return bounds_3d(samples)

    def __repr__(self) -> str:
        return (
            f"Hull(stations={self.station_names}, planks={self.planks.plank_count}, "
            f"resolution={self.resolution})"
        )


def _cell(cells, index: int) -> Optional[Feet]:
    return cells[index] if index < len(cells) else None


def _point_on(station: Station, fraction: float) -> Point3D:
    if not 0.0 <= fraction <= 1.0:
        raise PlankFractionError(fraction)
    return station.at_t(fraction)

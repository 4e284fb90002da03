"""
exporters/csv_exporter.py - CSV exporter.
"""

from __future__ import annotations
import csv
import io
from typing import Sequence

from ..hull import Station
from .base import BaseExporter, write_text
from .schema import Drawing, ExportFormat

PATH_HEADERS = ["path", "index", "x", "y"]
STATION_HEADERS = ["station", "position", "index", "x", "y", "z"]


class CSVExporter(BaseExporter):
    """
    Exports drawing paths, or dense station samples, as CSV rows.

    One row per point; the path (or station) it belongs to is repeated on
    every row.
    """

    format = ExportFormat.CSV

    def __init__(self, delimiter: str = ",", include_header: bool = True, precision: int = 6):
        """
        Initialize CSV exporter.

        Args:
            delimiter: Field delimiter character
            include_header: Write a header row first
            precision: Decimal places for coordinates
        """
        self.delimiter = delimiter
        self.include_header = include_header
        self.precision = precision

    def export(self, drawing: Drawing) -> str:
        """Export every path of the drawing, one row per point."""
        output = io.StringIO()
        writer = csv.writer(output, delimiter=self.delimiter, lineterminator="\n")
        if self.include_header:
            writer.writerow(PATH_HEADERS)

        for i, path in enumerate(drawing.paths):
            label = path.label or f"path {i}"
            for j, p in enumerate(path.points):
                writer.writerow([label, j, self._num(p.x), self._num(p.y)])

        return output.getvalue()

    def export_stations(self, stations: Sequence[Station]) -> str:
        """Export the sampled fair curve of each station in 3D."""
        output = io.StringIO()
        writer = csv.writer(output, delimiter=self.delimiter, lineterminator="\n")
        if self.include_header:
            writer.writerow(STATION_HEADERS)

        for station in stations:
            for j, p in enumerate(station.spline.sample()):
                writer.writerow([
                    station.name,
                    self._num(station.position),
                    j,
                    self._num(p.x),
                    self._num(p.y),
                    self._num(p.z),
                ])

        return output.getvalue()

    def export_stations_to_file(self, stations: Sequence[Station], file_path: str) -> None:
        write_text(self.export_stations(stations), file_path, self.format)

    def _num(self, value: float) -> str:
        return f"{value:.{self.precision}f}"

"""
spec/ - Hull specification: units, data contracts, and the CSV loader.
"""

from .units import Feet, OMITTED
from .schema import (
    LineKind,
    HeightLine,
    BreadthLine,
    OffsetTable,
    PlankStationKind,
    PlankStation,
    PlankTable,
    LoftingConfig,
    HullSpec,
)
from .loader import (
    load_spec,
    load_offsets,
    load_planks,
    load_config,
    read_plank_fraction,
)

__all__ = [
    # Units
    "Feet",
    "OMITTED",
    # Schema
    "LineKind",
    "HeightLine",
    "BreadthLine",
    "OffsetTable",
    "PlankStationKind",
    "PlankStation",
    "PlankTable",
    "LoftingConfig",
    "HullSpec",
    # Loader
    "load_spec",
    "load_offsets",
    "load_planks",
    "load_config",
    "read_plank_fraction",
]

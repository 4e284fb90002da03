"""
hull/__init__.py - Lofting and spiling.

- Station: a cross-section of the hull and its fair curve
- Hull: stations assembled from a table of offsets
- Plank / FlattenedPlank: a strip of planking and its flat pattern
"""

from .station import Station
from .plank import (
    Plank,
    FlattenedPlank,
    triangulate,
    practically_zero,
    layout_planks,
)
from .hull import Hull

__all__ = [
    "Station",
    "Plank",
    "FlattenedPlank",
    "triangulate",
    "practically_zero",
    "layout_planks",
    "Hull",
]

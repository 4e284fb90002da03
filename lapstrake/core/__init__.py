"""
core/ - Shared constants for lapstrake.
"""

from .constants import (
    INCHES_PER_FOOT,
    EIGHTHS_PER_INCH,
    EIGHTHS_PER_FOOT,
    EQUALITY_THRESHOLD,
    PRACTICALLY_ZERO,
    MIN_SPLINE_POINTS,
    HALLUCINATION_RESOLUTION,
    PLANK_LAYOUT_GAP,
)

__all__ = [
    "INCHES_PER_FOOT",
    "EIGHTHS_PER_INCH",
    "EIGHTHS_PER_FOOT",
    "EQUALITY_THRESHOLD",
    "PRACTICALLY_ZERO",
    "MIN_SPLINE_POINTS",
    "HALLUCINATION_RESOLUTION",
    "PLANK_LAYOUT_GAP",
]

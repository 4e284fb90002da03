"""
errors/ - Error taxonomy for lofting and spiling.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorSeverity,
    LapstrakeError,
    LoadError,
    UnitParseError,
    MissingMeasurementError,
    UnknownStationError,
    PlankFractionError,
    StationError,
    PlankBuildError,
    GeometryError,
    TooFewPointsError,
    SplineRangeError,
    PlankError,
    ExportError,
    DrawingError,
    error_chain,
    format_error_chain,
)

__all__ = [
    "ErrorCategory",
    "ErrorSeverity",
    "LapstrakeError",
    "LoadError",
    "UnitParseError",
    "MissingMeasurementError",
    "UnknownStationError",
    "PlankFractionError",
    "StationError",
    "PlankBuildError",
    "GeometryError",
    "TooFewPointsError",
    "SplineRangeError",
    "PlankError",
    "ExportError",
    "DrawingError",
    "error_chain",
    "format_error_chain",
]

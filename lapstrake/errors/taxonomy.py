"""
errors/taxonomy.py - Lofting error taxonomy.

Structured error types for loading a hull specification and for the
geometry computed from it.

Input errors (bad or missing measurements, unknown stations, plank
fractions out of range) halt the affected computation and carry a
human-readable cause chain. Geometry errors signal an invariant violation
upstream and are never retried. Numeric degeneracies are not errors at
all; the geometry code resolves them in place.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from enum import Enum


# =============================================================================
# ERROR CATEGORIES AND SEVERITY
# =============================================================================

class ErrorCategory(Enum):
    """Categories of lofting errors."""
    LOAD = "load"              # Input files unreadable or malformed
    INPUT = "input"            # Measurements inconsistent or missing
    GEOMETRY = "geometry"      # Geometric invariant violated
    EXPORT = "export"          # Writing an output failed


class ErrorSeverity(Enum):
    """Severity levels for lofting errors."""
    ERROR = "error"        # Computation for the entity halted
    FATAL = "fatal"        # Logic error upstream, nothing to recover


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class LapstrakeError(Exception):
    """
    Base class for lofting errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Recovery hint for the person editing the tables
    - Detailed context for debugging
    """

    code: str = "LAP_000"
    category: ErrorCategory = ErrorCategory.INPUT
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str = "",
        *,
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Lofting error"
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary, including the chain of causes."""
        return {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
            "causes": [str(cause) for cause in error_chain(self)[1:]],
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# INPUT ERRORS
# =============================================================================

class LoadError(LapstrakeError):
    """Failed to load ship specification."""

    code = "LAP_001"
    category = ErrorCategory.LOAD

    def __init__(self, message: str = "", **kwargs):
        super().__init__(
            message=message or "Failed to load ship specification",
            **kwargs,
        )


class UnitParseError(LoadError):
    """A measurement could not be read."""

    code = "LAP_002"

    def __init__(self, text: str, reason: str, **kwargs):
        super().__init__(
            message=f"Was not able to read measurement '{text}': {reason}",
            recovery_hint=(
                "Write measurements as feet-inches-eighths, like 3-4-5 for "
                "3' 4 5/8\". All three parts are required, even if zero."
            ),
            text=text,
            reason=reason,
            **kwargs,
        )


class MissingMeasurementError(LapstrakeError):
    """A required measurement was omitted."""

    code = "LAP_003"
    category = ErrorCategory.INPUT

    def __init__(self, line: str, station_index: int, **kwargs):
        super().__init__(
            message=(
                f"Could not find a measurement for {line} "
                f"at station index {station_index}"
            ),
            recovery_hint="Fill in the cell; the sheer is always required.",
            line=line,
            station_index=station_index,
            **kwargs,
        )


class UnknownStationError(LapstrakeError):
    """A plank boundary names a station the hull does not have."""

    code = "LAP_004"
    category = ErrorCategory.INPUT

    def __init__(self, name: str, known: Optional[List[str]] = None, **kwargs):
        super().__init__(
            message=f"Station {name} not found",
            recovery_hint="Use a station name from data.csv or a fore-aft position.",
            name=name,
            known=list(known or []),
            **kwargs,
        )


class PlankFractionError(LapstrakeError):
    """A plank location fraction lies outside [0, 1]."""

    code = "LAP_005"
    category = ErrorCategory.INPUT

    def __init__(self, fraction: float, **kwargs):
        super().__init__(
            message=(
                "Plank location fractions must be between 0 and 1. "
                f"Read fraction {fraction}"
            ),
            fraction=fraction,
            **kwargs,
        )


class StationError(LapstrakeError):
    """A station of the hull could not be built."""

    code = "LAP_006"
    category = ErrorCategory.INPUT

    def __init__(self, name: str, **kwargs):
        super().__init__(message=f"Could not build station {name}", name=name, **kwargs)


class PlankBuildError(LapstrakeError):
    """A plank could not be built from its rows of the plank table."""

    code = "LAP_007"
    category = ErrorCategory.INPUT

    def __init__(self, index: int, **kwargs):
        super().__init__(
            message=f"Could not build plank {index} (plank table rows {2 * index} and {2 * index + 1})",
            recovery_hint="Each plank edge needs at least four stations with a fraction.",
            index=index,
            **kwargs,
        )


# =============================================================================
# GEOMETRY ERRORS
# =============================================================================

class GeometryError(LapstrakeError):
    """Geometric invariant violated."""

    code = "LAP_100"
    category = ErrorCategory.GEOMETRY
    severity = ErrorSeverity.FATAL


class TooFewPointsError(GeometryError):
    """A spline needs at least four distinct points."""

    code = "LAP_101"

    def __init__(self, count: int, minimum: int = 4, **kwargs):
        super().__init__(
            message=(
                f"Splines must have at least {minimum} points, "
                f"got {count} after removing duplicates"
            ),
            recovery_hint="Add measurements to the station, or check for repeated cells.",
            count=count,
            minimum=minimum,
            **kwargs,
        )


class SplineRangeError(GeometryError):
    """An arc-length query fell off the end of a spline."""

    code = "LAP_102"

    def __init__(self, distance: float, length: float, **kwargs):
        super().__init__(
            message=f"Fell off the end of a spline: asked for {distance}, length is {length}",
            distance=distance,
            length=length,
            **kwargs,
        )


class PlankError(GeometryError):
    """Plank boundaries do not line up."""

    code = "LAP_103"

    def __init__(self, top_count: int, bottom_count: int, **kwargs):
        super().__init__(
            message=(
                "Plank unexpectedly has different number of top and bottom "
                f"points. {top_count} {bottom_count}"
            ),
            top_count=top_count,
            bottom_count=bottom_count,
            **kwargs,
        )


# =============================================================================
# EXPORT ERRORS
# =============================================================================

class ExportError(LapstrakeError):
    """Export operation failed."""

    code = "LAP_200"
    category = ErrorCategory.EXPORT

    def __init__(self, format: str, reason: str, **kwargs):
        super().__init__(
            message=f"Export to {format} failed: {reason}",
            format=format,
            reason=reason,
            **kwargs,
        )


class DrawingError(LapstrakeError):
    """A drawing cannot be laid out from the hull."""

    code = "LAP_201"
    category = ErrorCategory.EXPORT

    def __init__(self, drawing: str, reason: str, **kwargs):
        super().__init__(
            message=f"Cannot draw {drawing}: {reason}",
            drawing=drawing,
            reason=reason,
            **kwargs,
        )


# =============================================================================
# CAUSE CHAIN HELPERS
# =============================================================================

def error_chain(error: BaseException) -> List[BaseException]:
    """
    Walk an exception and its explicit causes (``raise ... from``).

    Returns:
        The error first, then each cause in turn.
    """
    chain = []
    current: Optional[BaseException] = error
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__
    return chain


def format_error_chain(error: BaseException) -> str:
    """
    Render an error and its causes for a terminal.

    The first line is ``Error: ...``; each cause follows on its own
    ``Cause: ...`` line.
    """
    chain = error_chain(error)
    lines = [f"Error: {chain[0]}"]
    for cause in chain[1:]:
        lines.append(f"Cause: {cause}")
    return "\n".join(lines)

"""
lapstrake Geometric Constants

Fixed thresholds and resolutions shared by the lofting and spiling code.
All lengths are in feet.
"""

# ==================== Unit Conversions ====================

INCHES_PER_FOOT = 12.0
EIGHTHS_PER_INCH = 8.0
EIGHTHS_PER_FOOT = INCHES_PER_FOOT * EIGHTHS_PER_INCH  # 96

# ==================== Point Equality ====================

# Two reference points closer than this are the same point (1/16").
EQUALITY_THRESHOLD = 1.0 / (INCHES_PER_FOOT * 16.0)

# Lengths below this are treated as zero by the triangulation.
PRACTICALLY_ZERO = 1e-6

# ==================== Curve Sampling ====================

# Minimum number of distinct points a Catmull-Rom spline can be built from.
MIN_SPLINE_POINTS = 4

# Number of intervals along each station used to synthesize a new station.
HALLUCINATION_RESOLUTION = 10

# ==================== Plank Layout ====================

# Vertical clearance between stacked flattened planks.
PLANK_LAYOUT_GAP = 2.0 * EQUALITY_THRESHOLD

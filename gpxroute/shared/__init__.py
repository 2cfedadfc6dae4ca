"""
Shared utilities (NOT business logic).

Usage:
    from gpxroute.shared import haversine, round_fixed
    from gpxroute.shared.formatters import slugify_route_name
"""
from .constants import DEFAULT_PACE_MIN_PER_KM
from .geo import (
    haversine,
    to_radians,
    EARTH_RADIUS_KM,
)
from .rounding import (
    round_fixed,
    round_half_up,
)
from .formatters import (
    slugify_route_name,
    format_distance_km,
    format_elevation,
    format_duration_minutes,
)

__all__ = [
    # constants
    "DEFAULT_PACE_MIN_PER_KM",
    # geo
    "haversine",
    "to_radians",
    "EARTH_RADIUS_KM",
    # rounding
    "round_fixed",
    "round_half_up",
    # formatters
    "slugify_route_name",
    "format_distance_km",
    "format_elevation",
    "format_duration_minutes",
]

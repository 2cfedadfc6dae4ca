"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def to_radians(degrees: float) -> float:
    """Convert degrees to radians as degrees * pi / 180."""
    # Operation order matters for bit-identical distances across exports.
    return degrees * math.pi / 180


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    delta_lat = to_radians(lat2 - lat1)
    delta_lon = to_radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) * math.sin(delta_lat / 2) +
        math.cos(to_radians(lat1)) * math.cos(to_radians(lat2)) *
        math.sin(delta_lon / 2) * math.sin(delta_lon / 2)
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c

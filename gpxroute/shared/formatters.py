"""
Formatting utilities for file names and display.
"""
import re

DEFAULT_SLUG = "route"

# Whitespace and path separators both become a single '-'
_SEPARATORS = re.compile(r"[\s/\\]+")


def slugify_route_name(name: str | None) -> str:
    """
    Turn a route name into a filesystem-safe identifier.

    Args:
        name: Route name as found in the track

    Returns:
        Lowercase identifier (e.g., 'Morning Run' -> 'morning-run')
    """
    if not name:
        return DEFAULT_SLUG

    slug = _SEPARATORS.sub("-", name.strip().lower()).strip("-")

    return slug or DEFAULT_SLUG


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.50km')
    """
    return f"{km:.2f}km"


def format_elevation(meters: float, signed: bool = False) -> str:
    """
    Format elevation.

    Args:
        meters: Elevation in meters
        signed: Prefix non-negative values with '+'

    Returns:
        Formatted string (e.g., '850m' or '+850m')
    """
    if signed and meters >= 0:
        return f"+{int(meters)}m"
    return f"{int(meters)}m"


def format_duration_minutes(minutes: int) -> str:
    """
    Format a duration given in minutes.

    Args:
        minutes: Whole minutes

    Returns:
        Formatted string (e.g., '667 minutes (11h 7min)')
    """
    if minutes < 60:
        return f"{minutes} minutes"

    h, m = divmod(minutes, 60)
    if m == 0:
        return f"{minutes} minutes ({h}h)"
    return f"{minutes} minutes ({h}h {m}min)"

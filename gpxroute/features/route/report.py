"""
Console report for a converted route.
"""

from typing import Optional

from gpxroute.shared.formatters import (
    format_distance_km,
    format_duration_minutes,
    format_elevation,
)
from .schemas import RouteStats
from .writer import WrittenFiles


def format_summary(stats: RouteStats, files: Optional[WrittenFiles] = None) -> str:
    """Generate the human-readable summary printed after a conversion."""
    lines = []

    if files is not None:
        lines.append("Files created:")
        lines.extend(f"  - {path}" for path in files.paths)
        lines.append("")

    lines.extend([
        "Stats:",
        f"  Distance:       {format_distance_km(stats.total_distance_km)}",
        f"  Elevation:      {format_elevation(stats.min_elevation_m)} - "
        f"{format_elevation(stats.max_elevation_m)}",
        f"  Gain/Loss:      {format_elevation(stats.elevation_gain_m, signed=True)} / "
        f"-{format_elevation(stats.elevation_loss_m)}",
        f"  Estimated time: {format_duration_minutes(stats.estimated_duration_minutes)}",
    ])

    return "\n".join(lines)

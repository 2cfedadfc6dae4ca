"""
Route documents module.

Usage:
    from gpxroute.features.route import process_track, RouteOutputWriter

Components:
- process_track: Single-pass track processor (geometry, profile, stats)
- RouteOutputWriter: Write the documents as <slug>-*.json files
- format_summary: Console summary of the stats
"""

from .processor import process_track
from .report import format_summary
from .schemas import (
    BoundingBox,
    ElevationPoint,
    ElevationProfile,
    RouteGeometry,
    RouteResult,
    RouteStats,
)
from .writer import RouteOutputWriter, WrittenFiles

__all__ = [
    # Processing
    "process_track",
    # Output
    "RouteOutputWriter",
    "WrittenFiles",
    "format_summary",
    # Schemas
    "BoundingBox",
    "ElevationPoint",
    "ElevationProfile",
    "RouteGeometry",
    "RouteResult",
    "RouteStats",
]

"""
GPX file handling module.

Usage:
    from gpxroute.features.gpx import GPXParserService, Track, TrackPoint

Components:
- GPXParserService: Parse GPX files into a typed Track
- Track / TrackPoint: Pydantic schemas for track data
"""

from .parser import GPXParserService
from .schemas import Track, TrackPoint

__all__ = [
    # Services
    "GPXParserService",
    # Schemas
    "Track",
    "TrackPoint",
]

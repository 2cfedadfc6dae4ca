"""
GPX Parser Service

Parses GPX files into typed Track entities.
Only the first track and its first segment are read.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import gpxpy
import gpxpy.gpx
from pydantic import ValidationError

from gpxroute.exceptions import FileReadError, InvalidTrackError, ParseError
from gpxroute.shared.formatters import DEFAULT_SLUG
from .schemas import Track, TrackPoint

logger = logging.getLogger(__name__)


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def parse_file(path: Union[str, Path]) -> Track:
        """
        Read and parse a GPX file.

        The file stem is used as route name when the GPX has none.

        Raises:
            FileReadError: If the file cannot be read or is not UTF-8
            ParseError: If the content is not a GPX track
            InvalidTrackError: If the track points are unusable
        """
        path = Path(path)
        try:
            content = path.read_bytes().decode('utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise FileReadError(f"Cannot read {path}: {e}") from e

        return GPXParserService.parse(content, fallback_name=path.stem)

    @staticmethod
    def parse(
        content: Union[bytes, str],
        fallback_name: Optional[str] = None
    ) -> Track:
        """
        Parse GPX content into a Track.

        Args:
            content: GPX document as bytes or text
            fallback_name: Route name to use when the GPX has none

        Returns:
            Track with the points of the first track segment

        Raises:
            FileReadError: If bytes content is not UTF-8
            ParseError: If GPX is invalid or has no track/segment
            InvalidTrackError: If the segment is empty or a point is invalid
        """
        if isinstance(content, bytes):
            try:
                content = content.decode('utf-8')
            except UnicodeDecodeError as e:
                raise FileReadError(f"GPX content is not UTF-8: {e}") from e

        try:
            gpx = gpxpy.parse(content)
        except (gpxpy.gpx.GPXException, ValueError) as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise ParseError(f"Invalid GPX file: {e}") from e

        if not gpx.tracks:
            raise ParseError("GPX file contains no track")
        track = gpx.tracks[0]

        if not track.segments:
            raise ParseError("GPX track contains no segment")
        segment = track.segments[0]

        if len(gpx.tracks) > 1 or len(track.segments) > 1:
            logger.warning(
                f"GPX has {len(gpx.tracks)} tracks and {len(track.segments)} "
                f"segments in the first track; only the first segment is used"
            )

        name = track.name or gpx.name or fallback_name or DEFAULT_SLUG
        points = GPXParserService._extract_points(segment)

        if not points:
            raise InvalidTrackError("GPX track segment contains no points")

        logger.debug(f"Parsed track '{name}' with {len(points)} points")
        return Track(name=name, points=tuple(points))

    @staticmethod
    def _extract_points(segment: gpxpy.gpx.GPXTrackSegment) -> List[TrackPoint]:
        """Validate segment points into TrackPoint models, in order."""
        points: List[TrackPoint] = []

        for index, point in enumerate(segment.points):
            if point.elevation is None:
                raise InvalidTrackError(f"Track point {index} has no elevation")
            try:
                points.append(TrackPoint(
                    latitude=point.latitude,
                    longitude=point.longitude,
                    elevation=point.elevation,
                    name=point.name,
                ))
            except ValidationError as e:
                error = e.errors()[0]
                field = ".".join(str(part) for part in error["loc"]) or "value"
                raise InvalidTrackError(
                    f"Track point {index} has invalid {field}: {error['msg']}"
                ) from e

        return points

"""
Track Processor

Turns a Track into its GeoJSON geometry, elevation profile and stats
in a single forward pass over the points.

Pure function of the track: no file or console side effects.
"""

import logging
import math
from numbers import Real
from typing import List

from gpxroute.shared.constants import DEFAULT_PACE_MIN_PER_KM
from gpxroute.exceptions import InvalidTrackError
from gpxroute.features.gpx.schemas import Track, TrackPoint
from gpxroute.shared.geo import haversine
from gpxroute.shared.rounding import round_fixed, round_half_up
from .schemas import (
    BoundingBox,
    ElevationPoint,
    ElevationProfile,
    Position,
    RouteGeometry,
    RouteResult,
    RouteStats,
)

logger = logging.getLogger(__name__)

# Decimal places kept in the documents
PROFILE_DISTANCE_DIGITS = 3
STATS_DISTANCE_DIGITS = 2


def _check_coordinate(value, label: str, index: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidTrackError(f"Track point {index} has non-numeric {label}: {value!r}")
    if not math.isfinite(value):
        raise InvalidTrackError(f"Track point {index} has non-finite {label}: {value!r}")


def _validate_points(track: Track) -> List[TrackPoint]:
    """Check coordinates even for tracks built without model validation."""
    points = list(track.points or ())
    if not points:
        raise InvalidTrackError("Track has no points")

    for index, point in enumerate(points):
        _check_coordinate(getattr(point, "latitude", None), "latitude", index)
        _check_coordinate(getattr(point, "longitude", None), "longitude", index)
        _check_coordinate(getattr(point, "elevation", None), "elevation", index)

    return points


def process_track(
    track: Track,
    pace_min_per_km: float = DEFAULT_PACE_MIN_PER_KM
) -> RouteResult:
    """
    Compute route documents for a track.

    Distances are haversine great-circle distances between consecutive
    points. Profile distances are rounded to 3 decimals at each step from
    the running (unrounded) total. The duration estimate uses the unrounded
    total distance and a fixed pace.

    Args:
        track: Track with at least one point
        pace_min_per_km: Pace for the duration estimate (minutes per km)

    Returns:
        RouteResult(geometry, elevation_profile, stats)

    Raises:
        InvalidTrackError: If the track has no points or a bad coordinate
    """
    points = _validate_points(track)

    coordinates: List[Position] = []
    profile: List[ElevationPoint] = []

    total_km = 0.0
    gain = 0.0
    loss = 0.0
    min_ele = math.inf
    max_ele = -math.inf
    min_lat, max_lat = math.inf, -math.inf
    min_lon, max_lon = math.inf, -math.inf

    for i, point in enumerate(points):
        lat, lon, ele = point.latitude, point.longitude, point.elevation

        coordinates.append((lon, lat))

        min_lat = min(min_lat, lat)
        max_lat = max(max_lat, lat)
        min_lon = min(min_lon, lon)
        max_lon = max(max_lon, lon)

        min_ele = min(min_ele, ele)
        max_ele = max(max_ele, ele)

        if i > 0:
            prev = points[i - 1]
            total_km += haversine(prev.latitude, prev.longitude, lat, lon)

            diff = ele - prev.elevation
            if diff > 0:
                gain += diff
            elif diff < 0:
                loss += abs(diff)

        profile.append(ElevationPoint(
            cumulative_distance_km=round_fixed(total_km, PROFILE_DISTANCE_DIGITS),
            elevation_m=ele,
        ))

    stats = RouteStats(
        total_distance_km=round_fixed(total_km, STATS_DISTANCE_DIGITS),
        min_elevation_m=round_half_up(min_ele),
        max_elevation_m=round_half_up(max_ele),
        elevation_gain_m=round_half_up(gain),
        elevation_loss_m=round_half_up(loss),
        estimated_duration_minutes=round_half_up(total_km * pace_min_per_km),
        bounding_box=BoundingBox(
            northeast=(max_lon, max_lat),
            southwest=(min_lon, min_lat),
        ),
    )

    logger.debug(
        f"Processed '{track.name}': {len(points)} points, "
        f"{total_km:.3f} km, +{gain:.0f}/-{loss:.0f} m"
    )

    return RouteResult(
        geometry=RouteGeometry.from_coordinates(track.name, coordinates),
        elevation_profile=ElevationProfile(profile),
        stats=stats,
    )

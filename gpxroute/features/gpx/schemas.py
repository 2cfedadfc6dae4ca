"""
GPX-related schemas.

Typed track entities produced by the GPX parser. Validation is strict:
coordinates must be real finite numbers within range, nothing is coerced
from strings.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple


class TrackPoint(BaseModel):
    """Single point in a GPX track."""

    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    elevation: float
    name: Optional[str] = None


class Track(BaseModel):
    """
    Ordered track points with the route name.

    Points keep source order; they are never merged or reordered.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    points: Tuple[TrackPoint, ...]

"""
Route output schemas.

Pydantic models for the three documents derived from a track:
GeoJSON geometry, elevation profile and stats.
"""

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel
from typing import List, Literal, NamedTuple, Tuple

# (longitude, latitude), GeoJSON order
Position = Tuple[float, float]


# =============================================================================
# Geometry (GeoJSON)
# =============================================================================

class LineString(BaseModel):
    """GeoJSON LineString geometry."""

    model_config = ConfigDict(frozen=True)

    type: Literal["LineString"] = "LineString"
    coordinates: List[Position]


class RouteProperties(BaseModel):
    """Properties of the route feature."""

    model_config = ConfigDict(frozen=True)

    name: str


class RouteFeature(BaseModel):
    """GeoJSON Feature wrapping the route path."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Feature"] = "Feature"
    properties: RouteProperties
    geometry: LineString


class RouteGeometry(BaseModel):
    """GeoJSON FeatureCollection holding a single route feature."""

    model_config = ConfigDict(frozen=True)

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[RouteFeature]

    @classmethod
    def from_coordinates(cls, name: str, coordinates: List[Position]) -> "RouteGeometry":
        """Build the collection for one named path."""
        return cls(features=[
            RouteFeature(
                properties=RouteProperties(name=name),
                geometry=LineString(coordinates=coordinates),
            )
        ])

    @property
    def name(self) -> str:
        return self.features[0].properties.name


# =============================================================================
# Elevation profile
# =============================================================================

class ElevationPoint(BaseModel):
    """Elevation at a cumulative distance along the route."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cumulative_distance_km: float = Field(alias="distance")
    elevation_m: float = Field(alias="elevation")


class ElevationProfile(RootModel[List[ElevationPoint]]):
    """One ElevationPoint per track point, non-decreasing in distance."""

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> ElevationPoint:
        return self.root[index]


# =============================================================================
# Stats
# =============================================================================

class BoundingBox(BaseModel):
    """Route bounds as [longitude, latitude] corners."""

    model_config = ConfigDict(frozen=True)

    northeast: Position
    southwest: Position


class RouteStats(BaseModel):
    """Summary statistics of a route (camelCase when serialized)."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_distance_km: float
    min_elevation_m: int
    max_elevation_m: int
    elevation_gain_m: int
    elevation_loss_m: int
    estimated_duration_minutes: int
    bounding_box: BoundingBox


class RouteResult(NamedTuple):
    """The three documents derived from one track."""

    geometry: RouteGeometry
    elevation_profile: ElevationProfile
    stats: RouteStats

    @property
    def route_name(self) -> str:
        return self.geometry.name

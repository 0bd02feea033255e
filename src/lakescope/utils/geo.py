"""Geographic utilities and constants."""

from dataclasses import dataclass
from math import asin, cos, radians, sin, sqrt


@dataclass(frozen=True)
class BoundingBox:
    """Geographic bounding box."""

    west: float
    south: float
    east: float
    north: float

    def contains(self, lat: float, lon: float) -> bool:
        """Check if a point is within this bounding box."""
        return (
            self.south <= lat <= self.north
            and self.west <= lon <= self.east
        )

    @classmethod
    def from_bounds(cls, bounds: tuple[float, float, float, float]) -> "BoundingBox":
        """Build from a shapely-style (minx, miny, maxx, maxy) tuple."""
        minx, miny, maxx, maxy = bounds
        return cls(west=minx, south=miny, east=maxx, north=maxy)

    def to_list(self) -> list[float]:
        """Return as [west, south, east, north], the GeoJSON bbox order."""
        return [self.west, self.south, self.east, self.north]


@dataclass(frozen=True)
class Point:
    """Geographic point with optional elevation (feet)."""

    lat: float
    lon: float
    elevation: float | None = None

    def distance_to(self, other: "Point") -> float:
        """Calculate distance in km to another point using Haversine formula."""
        return haversine(self.lat, self.lon, other.lat, other.lon)

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lon}


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the great circle distance in km between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    R = 6371  # Earth radius in km

    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    c = 2 * asin(sqrt(a))

    return R * c


def points_close(a: tuple[float, float], b: tuple[float, float], tolerance: float) -> bool:
    """True if both coordinates of a and b differ by less than tolerance degrees."""
    return abs(a[0] - b[0]) < tolerance and abs(a[1] - b[1]) < tolerance

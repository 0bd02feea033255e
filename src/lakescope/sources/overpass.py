"""Lake boundary lookup from OpenStreetMap via the Overpass API.

Water bodies are matched by tag (natural=water or water=reservoir), by a
case-insensitive name regex and by distance from the lake center. Ways become
polygons directly; multipolygon relations have their outer member ways
stitched into a single ring.
"""

import logging
from datetime import datetime, timezone
from typing import Any

import geojson
from shapely.geometry import shape
from shapely.ops import unary_union

from lakescope import config
from lakescope.sources.base import BaseSource
from lakescope.utils.geo import BoundingBox, Point, points_close
from lakescope.utils.result import FetchResult

logger = logging.getLogger(__name__)

# About 10 m at this latitude
RING_MERGE_TOLERANCE_DEG = 0.0001

APPROXIMATE_NOTE = "OpenStreetMap boundary not found, using approximate boundary"

# Hand-traced outline of Sardis Lake, [lon, lat]
SARDIS_APPROXIMATE_RING = [
    [-95.3620, 34.6956],
    [-95.3502, 34.6912],
    [-95.3415, 34.6845],
    [-95.3380, 34.6778],
    [-95.3395, 34.6695],
    [-95.3448, 34.6612],
    [-95.3532, 34.6545],
    [-95.3648, 34.6495],
    [-95.3785, 34.6462],
    [-95.3925, 34.6445],
    [-95.4068, 34.6462],
    [-95.4185, 34.6512],
    [-95.4262, 34.6595],
    [-95.4295, 34.6695],
    [-95.4278, 34.6795],
    [-95.4215, 34.6878],
    [-95.4112, 34.6945],
    [-95.3985, 34.6978],
    [-95.3848, 34.6978],
    [-95.3720, 34.6956],
    [-95.3620, 34.6956],
]


def name_pattern(lake_name: str) -> str:
    """Overpass name regex for a lake: its first word, quotes removed.

    Examples:
        >>> name_pattern("Sardis Lake")
        'Sardis'
        >>> name_pattern("")
        'Sardis'
    """
    words = lake_name.replace('"', "").split()
    return words[0] if words else config.DEFAULT_LAKE_NAME.split()[0]


def build_query(
    lake_name: str,
    lat: float,
    lng: float,
    radius_m: int = config.BOUNDARY_SEARCH_RADIUS_M,
    timeout_s: int = config.OVERPASS_TIMEOUT_S,
) -> str:
    """Overpass QL selecting named water ways and relations near a point."""
    pattern = name_pattern(lake_name)
    around = f"(around:{radius_m},{lat},{lng})"
    selectors = [
        f'way["natural"="water"]["name"~"{pattern}",i]{around};',
        f'relation["natural"="water"]["name"~"{pattern}",i]{around};',
        f'way["water"="reservoir"]["name"~"{pattern}",i]{around};',
        f'relation["water"="reservoir"]["name"~"{pattern}",i]{around};',
    ]
    body = "\n  ".join(selectors)
    return f"[out:json][timeout:{timeout_s}];\n(\n  {body}\n);\nout body geom;"


def close_ring(coords: list[list[float]]) -> list[list[float]]:
    """Return coords with the first point appended if the ring is open."""
    if coords and coords[0] != coords[-1]:
        return coords + [list(coords[0])]
    return coords


def merge_rings(
    rings: list[list[list[float]]], tolerance: float = RING_MERGE_TOLERANCE_DEG
) -> list[list[float]]:
    """Stitch way segments into one closed ring by endpoint proximity.

    Starting from the first segment, repeatedly attaches any remaining
    segment whose start or end lies within tolerance of the merged ring's
    start or end, reversing it where needed. Stops when a full pass attaches
    nothing; unattached segments are dropped.

    Example:
        >>> merge_rings([[[0, 0], [1, 0]], [[1, 1], [1, 0]], [[1, 1], [0, 0]]])
        [[0, 0], [1, 0], [1, 1], [0, 0]]
    """
    if not rings:
        return []

    merged = [list(p) for p in rings[0]]
    remaining = [[list(p) for p in r] for r in rings[1:]]

    changed = True
    while changed and remaining:
        changed = False
        for i, ring in enumerate(remaining):
            start, end = merged[0], merged[-1]
            ring_start, ring_end = ring[0], ring[-1]

            if points_close(end, ring_start, tolerance):
                merged.extend(ring[1:])
            elif points_close(start, ring_end, tolerance):
                merged[:0] = ring[:-1]
            elif points_close(end, ring_end, tolerance):
                merged.extend(ring[::-1][1:])
            elif points_close(start, ring_start, tolerance):
                merged[:0] = ring[::-1][:-1]
            else:
                continue

            del remaining[i]
            changed = True
            break

    if remaining:
        logger.debug(f"Dropped {len(remaining)} unconnected ring segments")
    return close_ring(merged)


def _way_coordinates(geometry: list[dict]) -> list[list[float]]:
    return [[node["lon"], node["lat"]] for node in geometry]


def _feature_properties(element: dict, lake_name: str) -> dict:
    tags = element.get("tags") or {}
    return {
        "name": tags.get("name") or lake_name,
        "type": tags.get("natural") or tags.get("water") or "water",
        "osm_id": element.get("id"),
        "source": "OpenStreetMap",
    }


def elements_to_features(elements: list[dict], lake_name: str) -> list[geojson.Feature]:
    """Convert Overpass elements to polygon features.

    Elements without geometry, and relations without outer way members,
    are skipped.
    """
    features = []
    for element in elements:
        if element.get("type") == "way" and element.get("geometry"):
            ring = close_ring(_way_coordinates(element["geometry"]))
        elif element.get("type") == "relation" and element.get("members"):
            outer = [
                _way_coordinates(m["geometry"])
                for m in element["members"]
                if m.get("type") == "way" and m.get("role") == "outer" and m.get("geometry")
            ]
            if not outer:
                continue
            ring = merge_rings(outer)
        else:
            continue

        features.append(
            geojson.Feature(
                geometry=geojson.Polygon([ring]),
                properties=_feature_properties(element, lake_name),
            )
        )
    return features


def approximate_boundary(lake_name: str = config.DEFAULT_LAKE_NAME) -> geojson.FeatureCollection:
    """Hard-coded outline used when OpenStreetMap has no match."""
    feature = geojson.Feature(
        geometry=geojson.Polygon([SARDIS_APPROXIMATE_RING]),
        properties={"name": lake_name, "source": "approximate", "note": APPROXIMATE_NOTE},
    )
    collection = geojson.FeatureCollection([feature])
    collection["meta"] = {
        "source": "fallback",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    return collection


def boundary_extent(collection: dict[str, Any]) -> tuple[Point, BoundingBox]:
    """Centroid and bounding box of all polygons in a feature collection.

    Raises:
        ValueError: If the collection has no features.
    """
    shapes = [shape(f["geometry"]) for f in collection.get("features", [])]
    if not shapes:
        raise ValueError("Feature collection has no geometries")
    union = unary_union(shapes)
    centroid = union.centroid
    return Point(lat=centroid.y, lon=centroid.x), BoundingBox.from_bounds(union.bounds)


class OverpassClient(BaseSource):
    """Fetches a lake outline as a GeoJSON FeatureCollection."""

    SOURCE_NAME = "Overpass"

    def __init__(self, base_url: str = config.OVERPASS_URL, **kwargs):
        super().__init__(**kwargs)
        self.base_url = base_url

    def fetch_boundary(
        self,
        lake_name: str = config.DEFAULT_LAKE_NAME,
        lat: float = config.DEFAULT_LAT,
        lng: float = config.DEFAULT_LNG,
    ) -> FetchResult[dict]:
        """Fetch the lake outline, or the approximate outline if OSM has none.

        Returns:
            FetchResult with a FeatureCollection carrying a "meta" block.
            Upstream failures are returned as errors, not as the fallback.
        """
        query = build_query(lake_name, lat, lng)
        result = self._request_json("POST", self.base_url, data={"data": query})
        if not result.ok:
            return result

        try:
            features = elements_to_features(result.value.get("elements", []), lake_name)
        except (KeyError, TypeError) as e:
            return FetchResult.failure(self.SOURCE_NAME, f"Unexpected Overpass response: {e}")

        if not features:
            logger.warning(f"No OpenStreetMap boundary for {lake_name}, using approximate outline")
            return FetchResult.success(approximate_boundary(lake_name))

        collection = geojson.FeatureCollection(features)
        collection["meta"] = {
            "source": "OpenStreetMap",
            "query": lake_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "count": len(features),
        }
        logger.info(f"Found {len(features)} OpenStreetMap features for {lake_name}")
        return FetchResult.success(collection)

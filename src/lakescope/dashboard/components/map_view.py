"""Interactive lake map component for the LakeScope dashboard.

Provides a PyDeck map with the lake outline tinted by simulated water level,
boat ramps colored by launch status and points of interest.

Example usage:
    >>> from lakescope.sources.overpass import approximate_boundary
    >>> from lakescope.metrics import summarize_ramps
    >>> from lakescope.lake import SARDIS_BOAT_RAMPS
    >>>
    >>> boundary = approximate_boundary("Sardis Lake")
    >>> summary = summarize_ramps(599, 599, SARDIS_BOAT_RAMPS)
    >>> deck = render_lake_map(boundary, summary, flood_level=599)
"""

from typing import Any, Optional

import pandas as pd
import pydeck as pdk

from lakescope.config import DEFAULT_LAT, DEFAULT_LNG
from lakescope.lake import POINTS_OF_INTEREST, SARDIS_LAKE, PointOfInterest
from lakescope.metrics.boat_ramps import RampSummary
from lakescope.sources.overpass import boundary_extent
from lakescope.utils.geo import Point
from lakescope.visualization import (
    POI_COLORS,
    hex_to_rgb,
    lake_fill_rgb,
    lake_outline_rgb,
    ramp_status_rgb,
)

MAP_STYLE = "https://basemaps.cartocdn.com/gl/positron-gl-style/style.json"


def distance_from_center(point: Point, center: Point = SARDIS_LAKE.coordinates) -> float:
    """Great-circle distance in km from the lake center, to 0.1 km."""
    return round(center.distance_to(point), 1)


def create_lake_layer(
    boundary: dict[str, Any],
    flood_level: float,
    normal_pool: float = SARDIS_LAKE.normal_pool_elevation,
) -> pdk.Layer:
    """Create GeoJsonLayer for the lake outline.

    Fill turns amber once the simulated level rises above normal pool.
    """
    return pdk.Layer(
        "GeoJsonLayer",
        data=boundary,
        stroked=True,
        filled=True,
        get_fill_color=lake_fill_rgb(flood_level, normal_pool),
        get_line_color=lake_outline_rgb(flood_level, normal_pool),
        line_width_min_pixels=2,
        pickable=False,
    )


def ramp_frame(summary: RampSummary) -> pd.DataFrame:
    """Flatten ramp statuses into the columns the layers and tooltip read."""
    return pd.DataFrame(
        [
            {
                "name": s.ramp.name,
                "detail": s.message,
                "latitude": s.ramp.coordinates.lat,
                "longitude": s.ramp.coordinates.lon,
                "distance_km": distance_from_center(s.ramp.coordinates),
                "color": ramp_status_rgb(s.status.value),
            }
            for s in summary.statuses
        ]
    )


def create_ramp_layer(summary: RampSummary) -> pdk.Layer:
    """Create ScatterplotLayer for boat ramps colored by status."""
    return pdk.Layer(
        "ScatterplotLayer",
        data=ramp_frame(summary),
        get_position=["longitude", "latitude"],
        get_fill_color="color",
        get_radius=250,
        radius_min_pixels=6,
        radius_max_pixels=20,
        pickable=True,
    )


def poi_frame(points: list[PointOfInterest]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "name": p.name,
                "detail": p.description,
                "latitude": p.coordinates.lat,
                "longitude": p.coordinates.lon,
                "distance_km": distance_from_center(p.coordinates),
                "color": list(hex_to_rgb(POI_COLORS.get(p.type, "#6b7280"))) + [200],
            }
            for p in points
        ]
    )


def create_poi_layer(points: Optional[list[PointOfInterest]] = None) -> pdk.Layer:
    """Create ScatterplotLayer for dam, marinas, inlets and wildlife areas."""
    return pdk.Layer(
        "ScatterplotLayer",
        data=poi_frame(points if points is not None else POINTS_OF_INTEREST),
        get_position=["longitude", "latitude"],
        get_fill_color="color",
        get_radius=180,
        radius_min_pixels=4,
        radius_max_pixels=14,
        pickable=True,
    )


def create_base_view(
    center_lat: float = None,
    center_lon: float = None,
    zoom: float = None,
) -> pdk.ViewState:
    """Create map view centered on the lake.

    Falls back to the configured default lake coordinates.
    """
    return pdk.ViewState(
        latitude=center_lat if center_lat is not None else DEFAULT_LAT,
        longitude=center_lon if center_lon is not None else DEFAULT_LNG,
        zoom=zoom if zoom is not None else 11,
        pitch=0,
    )


def render_lake_map(
    boundary: dict[str, Any],
    summary: RampSummary,
    flood_level: float,
    show_points: bool = True,
    zoom: float = None,
) -> pdk.Deck:
    """Render the full interactive lake map.

    Args:
        boundary: GeoJSON FeatureCollection of the lake outline
        summary: Ramp statuses for the current (or simulated) level
        flood_level: Water level used to tint the lake surface
        show_points: Include the points-of-interest layer
        zoom: Optional zoom level

    Returns:
        PyDeck Deck object ready for display with st.pydeck_chart()
    """
    try:
        center, _ = boundary_extent(boundary)
        center_lat, center_lon = center.lat, center.lon
    except ValueError:
        center_lat, center_lon = None, None

    layers = [create_lake_layer(boundary, flood_level), create_ramp_layer(summary)]
    if show_points:
        layers.append(create_poi_layer())

    tooltip = {
        "html": "<b>{name}</b><br/>{detail}<br/>{distance_km} km from lake center",
        "style": {
            "backgroundColor": "#1a1a2e",
            "color": "white",
            "padding": "8px",
            "borderRadius": "4px",
        },
    }

    return pdk.Deck(
        layers=layers,
        initial_view_state=create_base_view(center_lat, center_lon, zoom),
        tooltip=tooltip,
        map_style=MAP_STYLE,
    )

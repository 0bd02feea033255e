"""Tests for the interactive lake map component.

Tests the PyDeck map functions from lakescope.dashboard.components.map_view.
"""

import json

import pydeck as pdk
import pytest

from lakescope.config import DEFAULT_LAT, DEFAULT_LNG
from lakescope.dashboard.components.map_view import (
    create_base_view,
    create_lake_layer,
    create_poi_layer,
    create_ramp_layer,
    distance_from_center,
    poi_frame,
    ramp_frame,
    render_lake_map,
)
from lakescope.lake import POINTS_OF_INTEREST, SARDIS_BOAT_RAMPS
from lakescope.metrics import summarize_ramps
from lakescope.sources.overpass import approximate_boundary
from lakescope.utils.geo import Point


@pytest.fixture
def boundary() -> dict:
    return dict(approximate_boundary())


@pytest.fixture
def low_water_summary():
    """Ramps at 589 ft: one open, one limited, three closed."""
    return summarize_ramps(589, 599, SARDIS_BOAT_RAMPS)


class TestLakeLayer:
    def test_layer_type(self, boundary):
        layer = create_lake_layer(boundary, 599)
        assert isinstance(layer, pdk.Layer)
        assert layer.type == "GeoJsonLayer"

    def test_normal_pool_is_blue(self, boundary):
        layer = create_lake_layer(boundary, 599, normal_pool=599)
        assert layer.get_fill_color == [49, 130, 206, 77]

    def test_flood_is_amber(self, boundary):
        layer = create_lake_layer(boundary, 610, normal_pool=599)
        assert layer.get_fill_color[:3] == [255, 193, 7]


class TestRampLayer:
    """Tests for ramp markers."""

    def test_frame_columns(self, low_water_summary):
        df = ramp_frame(low_water_summary)
        assert list(df.columns) == ["name", "detail", "latitude", "longitude", "distance_km", "color"]
        assert len(df) == 5

    def test_colors_follow_status(self, low_water_summary):
        df = ramp_frame(low_water_summary)
        by_name = dict(zip(df["name"], df["color"]))
        assert by_name["Potato Hills North"] == [239, 68, 68, 220]  # closed
        assert by_name["Potato Hills South"] == [245, 158, 11, 220]  # limited
        assert by_name["Sardis Cove Marina"] == [34, 197, 94, 220]  # open

    def test_layer(self, low_water_summary):
        layer = create_ramp_layer(low_water_summary)
        assert layer.type == "ScatterplotLayer"
        assert layer.pickable is True
        assert all("color" in record for record in layer.data)


class TestPoiLayer:
    def test_defaults_to_lake_points(self):
        assert len(poi_frame(POINTS_OF_INTEREST)) == len(POINTS_OF_INTEREST)
        layer = create_poi_layer()
        assert len(layer.data) == len(POINTS_OF_INTEREST)

    def test_empty_points(self):
        layer = create_poi_layer([])
        assert len(layer.data) == 0

    def test_poi_colors_are_rgba(self):
        for color in poi_frame(POINTS_OF_INTEREST)["color"]:
            assert len(color) == 4
            assert all(0 <= c <= 255 for c in color)


class TestBaseView:
    def test_defaults(self):
        view = create_base_view()
        assert isinstance(view, pdk.ViewState)
        assert view.latitude == DEFAULT_LAT
        assert view.longitude == DEFAULT_LNG
        assert view.zoom == 11
        assert view.pitch == 0

    def test_custom_center(self):
        view = create_base_view(34.7, -95.4, zoom=9)
        assert view.latitude == 34.7
        assert view.zoom == 9


class TestRenderLakeMap:
    """Tests for the assembled Deck."""

    def test_layers(self, boundary, low_water_summary):
        deck = render_lake_map(boundary, low_water_summary, flood_level=599)
        assert isinstance(deck, pdk.Deck)
        assert len(deck.layers) == 3
        assert "cartocdn" in deck.map_style.lower()

    def test_without_points(self, boundary, low_water_summary):
        deck = render_lake_map(boundary, low_water_summary, 599, show_points=False)
        assert len(deck.layers) == 2

    def test_centered_on_boundary(self, boundary, low_water_summary):
        deck = render_lake_map(boundary, low_water_summary, 599)
        view = deck.initial_view_state
        assert 34.63 < view.latitude < 34.70
        assert -95.43 < view.longitude < -95.33

    def test_empty_boundary_uses_default_center(self, low_water_summary):
        empty = {"type": "FeatureCollection", "features": []}
        deck = render_lake_map(empty, low_water_summary, 599)
        assert deck.initial_view_state.latitude == DEFAULT_LAT

    def test_json_serializable(self, boundary, low_water_summary):
        deck = render_lake_map(boundary, low_water_summary, 605)
        parsed = json.loads(deck.to_json())
        assert isinstance(parsed, dict)
        assert "Potato Hills North" in deck.to_json()


class TestDistanceFromCenter:
    """Tests for distance_from_center() and the distance_km column."""

    def test_center_is_zero(self):
        assert distance_from_center(Point(34.6619, -95.3890)) == 0.0

    def test_dam_east_of_center(self):
        """0.051 degrees of longitude at 34.66N is about 4.7 km."""
        assert distance_from_center(Point(34.6619, -95.3380)) == pytest.approx(4.7, abs=0.1)

    def test_rounded_to_tenths(self):
        distance = distance_from_center(Point(34.6970, -95.3600))
        assert distance == round(distance, 1)

    def test_poi_frame_distances(self):
        df = poi_frame(POINTS_OF_INTEREST)
        by_name = dict(zip(df["name"], df["distance_km"]))
        assert by_name["Sardis Dam"] == pytest.approx(4.7, abs=0.1)
        assert (df["distance_km"] > 0).all()
        assert (df["distance_km"] < 15).all()

    def test_ramp_frame_distances(self, low_water_summary):
        df = ramp_frame(low_water_summary)
        assert df["distance_km"].notna().all()
        assert (df["distance_km"] < 20).all()

    def test_layers_carry_distance(self, low_water_summary):
        assert all("distance_km" in record for record in create_poi_layer().data)
        assert all("distance_km" in record for record in create_ramp_layer(low_water_summary).data)

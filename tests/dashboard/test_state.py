"""Tests for dashboard session state."""

from datetime import datetime, timedelta, timezone

import pytest

from lakescope.dashboard.state import (
    DATA_SOURCES,
    PANEL_TITLES,
    PANELS,
    STATE_KEY,
    TAB_IDS,
    TAB_LABELS,
    DashboardState,
    get_state,
    tab_for_label,
)


@pytest.fixture
def state() -> DashboardState:
    return DashboardState()


class TestDefaults:
    def test_initial_values(self, state):
        assert state.active_tab == "overview"
        assert state.flood_level == 599
        assert state.time_range == "30d"
        assert state.panels_expanded == {"info": True, "layers": False, "analysis": False}
        assert state.bookmarks == []

    def test_instances_do_not_share_mutables(self):
        a, b = DashboardState(), DashboardState()
        a.add_bookmark("x")
        a.toggle_panel("layers")
        assert b.bookmarks == []
        assert b.panels_expanded["layers"] is False


class TestNavigation:
    """Tests for tab, panel and range changes."""

    def test_set_tab(self, state):
        state.set_tab("water")
        assert state.active_tab == "water"

    def test_unknown_tab(self, state):
        with pytest.raises(ValueError):
            state.set_tab("weather")

    def test_six_tabs(self):
        assert TAB_IDS == ["overview", "elevation", "economic", "planning", "water", "analysis"]

    def test_toggle_panel(self, state):
        assert state.toggle_panel("analysis") is True
        assert state.toggle_panel("analysis") is False

    def test_unknown_panel(self, state):
        with pytest.raises(ValueError):
            state.toggle_panel("legend")

    def test_sync_panel_only_flips_on_change(self, state):
        assert state.sync_panel("info", True) is True
        assert state.panels_expanded["info"] is True
        assert state.sync_panel("layers", True) is True
        assert state.sync_panel("layers", False) is False

    def test_sync_unknown_panel(self, state):
        with pytest.raises(ValueError):
            state.sync_panel("legend", True)

    def test_panel_titles_cover_panels(self):
        assert set(PANEL_TITLES) == set(PANELS)

    def test_time_range(self, state):
        state.set_time_range("1y")
        assert state.time_range == "1y"
        with pytest.raises(ValueError):
            state.set_time_range("2w")


class TestFloodLevel:
    @pytest.mark.parametrize("level,stored", [(610, 610), (520, 530), (700, 631)])
    def test_clamped_to_streambed_and_dam(self, state, level, stored):
        assert state.set_flood_level(level) == stored
        assert state.flood_level == stored


class TestTabBar:
    """Tests for mapping the tab bar to state."""

    @pytest.mark.parametrize(
        "tab_id,label",
        [("overview", "Overview"), ("planning", "Land Planning"), ("analysis", "Analysis Tools")],
    )
    def test_label_round_trip(self, tab_id, label):
        assert tab_for_label(label) == tab_id
        assert TAB_LABELS[TAB_IDS.index(tab_id)] == label

    def test_unknown_label(self):
        with pytest.raises(ValueError):
            tab_for_label("Weather")

    def test_tab_index_follows_active_tab(self, state):
        assert state.tab_index == 0
        state.set_tab("water")
        assert state.tab_index == 4

    def test_bookmark_moves_tab_bar(self, state):
        state.set_tab("elevation")
        state.add_bookmark("flood view")
        state.set_tab(tab_for_label("Economic"))
        assert state.tab_index == 2

        state.apply_bookmark("flood view")
        assert TAB_LABELS[state.tab_index] == "Elevation"


class TestBookmarks:
    """Tests for saving and restoring views."""

    def test_add_and_apply(self, state):
        state.set_tab("elevation")
        state.set_flood_level(612)
        state.add_bookmark("spring flood")

        state.set_tab("overview")
        state.set_flood_level(599)

        assert state.apply_bookmark("spring flood") is True
        assert state.active_tab == "elevation"
        assert state.flood_level == 612

    def test_same_name_replaces(self, state):
        state.add_bookmark("view")
        state.set_flood_level(605)
        state.add_bookmark("view")
        assert len(state.bookmarks) == 1
        assert state.bookmarks[0].flood_level == 605

    def test_apply_missing(self, state):
        assert state.apply_bookmark("nope") is False
        assert state.active_tab == "overview"

    def test_remove(self, state):
        state.add_bookmark("a")
        assert state.remove_bookmark("a") is True
        assert state.remove_bookmark("a") is False


class TestRefresh:
    def test_never_fetched_is_due(self, state):
        assert state.is_refresh_due("usgs") is True

    def test_within_interval(self, state):
        now = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        state.mark_refreshed("usgs", now - timedelta(minutes=5))
        assert state.is_refresh_due("usgs", now) is False

    def test_interval_elapsed(self, state):
        now = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        state.mark_refreshed("usgs", now - timedelta(minutes=15))
        assert state.is_refresh_due("usgs", now) is True

    def test_due_sources(self, state):
        now = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        assert state.due_sources(now) == list(DATA_SOURCES)
        for source in DATA_SOURCES:
            state.mark_refreshed(source, now)
        state.mark_refreshed("usgs", now - timedelta(minutes=15))
        assert state.due_sources(now) == ["usgs"]


class TestGetState:
    def test_created_once_per_session(self):
        session = {}
        first = get_state(session)
        first.set_tab("economic")
        assert get_state(session) is first
        assert session[STATE_KEY].active_tab == "economic"

"""Explicit dashboard UI state.

One DashboardState per browser session, stored in st.session_state under
STATE_KEY. Streamlit reruns the script on every interaction; the state object
is the only thing that survives between reruns.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, MutableMapping, Optional

from lakescope.config import REFRESH_INTERVALS
from lakescope.lake.profile import SARDIS_LAKE
from lakescope.metrics.water_level import TIME_RANGES
from lakescope.utils.numbers import clamp

STATE_KEY = "lakescope_state"

# (tab id, label)
TABS = [
    ("overview", "Overview"),
    ("elevation", "Elevation"),
    ("economic", "Economic"),
    ("planning", "Land Planning"),
    ("water", "Water Data"),
    ("analysis", "Analysis Tools"),
]
TAB_IDS = [tab_id for tab_id, _ in TABS]
TAB_LABELS = [label for _, label in TABS]

PANELS = ("info", "layers", "analysis")
PANEL_TITLES = {"info": "Lake Info", "layers": "Map Layers", "analysis": "Quick Analysis"}

DATA_SOURCES = ("usgs", "weather", "fishing", "boundary")


def tab_for_label(label: str) -> str:
    """Tab id for a tab bar label.

    Examples:
        >>> tab_for_label("Land Planning")
        'planning'
    """
    for tab_id, tab_label in TABS:
        if tab_label == label:
            return tab_id
    raise ValueError(f"Unknown tab label: {label}")


@dataclass
class Bookmark:
    """A saved view: tab plus simulated water level."""

    name: str
    tab: str
    flood_level: float
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class DashboardState:
    """Everything the dashboard remembers between reruns.

    Attributes:
        active_tab: One of TAB_IDS
        panels_expanded: Expansion flag per side panel
        bookmarks: Saved views, oldest first
        flood_level: Flood-simulation slider value (ft)
        time_range: Water-level chart range, one of TIME_RANGES
        show_contours: Depth contour layer toggle
        show_zones: Land-use zone layer toggle
        last_refreshed: Last successful fetch time per data source
    """

    active_tab: str = "overview"
    panels_expanded: dict[str, bool] = field(
        default_factory=lambda: {"info": True, "layers": False, "analysis": False}
    )
    bookmarks: list[Bookmark] = field(default_factory=list)
    flood_level: float = SARDIS_LAKE.normal_pool_elevation
    time_range: str = "30d"
    show_contours: bool = True
    show_zones: bool = False
    last_refreshed: dict[str, datetime] = field(default_factory=dict)

    def set_tab(self, tab_id: str) -> None:
        if tab_id not in TAB_IDS:
            raise ValueError(f"Unknown tab: {tab_id}")
        self.active_tab = tab_id

    @property
    def tab_index(self) -> int:
        """Position of the active tab in TABS, for the tab bar default."""
        return TAB_IDS.index(self.active_tab)

    def toggle_panel(self, panel: str) -> bool:
        """Flip a panel's expansion and return the new value."""
        if panel not in PANELS:
            raise ValueError(f"Unknown panel: {panel}")
        self.panels_expanded[panel] = not self.panels_expanded.get(panel, False)
        return self.panels_expanded[panel]

    def sync_panel(self, panel: str, expanded: bool) -> bool:
        """Toggle the panel only if its stored flag differs from `expanded`."""
        if panel not in PANELS:
            raise ValueError(f"Unknown panel: {panel}")
        if self.panels_expanded.get(panel, False) != expanded:
            self.toggle_panel(panel)
        return self.panels_expanded[panel]

    def set_flood_level(self, level: float) -> float:
        """Set the slider, clamped to streambed..top of dam. Returns the stored value."""
        self.flood_level = clamp(
            level, SARDIS_LAKE.stream_bed_elevation, SARDIS_LAKE.top_of_dam_elevation
        )
        return self.flood_level

    def set_time_range(self, time_range: str) -> None:
        if time_range not in TIME_RANGES:
            raise ValueError(f"Unknown time range: {time_range}")
        self.time_range = time_range

    def add_bookmark(self, name: str) -> Bookmark:
        """Save the current view. A bookmark with the same name is replaced."""
        self.remove_bookmark(name)
        bookmark = Bookmark(name=name, tab=self.active_tab, flood_level=self.flood_level)
        self.bookmarks.append(bookmark)
        return bookmark

    def remove_bookmark(self, name: str) -> bool:
        before = len(self.bookmarks)
        self.bookmarks = [b for b in self.bookmarks if b.name != name]
        return len(self.bookmarks) < before

    def apply_bookmark(self, name: str) -> bool:
        """Restore a saved view. Returns False if no bookmark has that name."""
        for bookmark in self.bookmarks:
            if bookmark.name == name:
                self.active_tab = bookmark.tab
                self.flood_level = bookmark.flood_level
                return True
        return False

    def mark_refreshed(self, source: str, when: Optional[datetime] = None) -> None:
        self.last_refreshed[source] = when or datetime.now(timezone.utc)

    def is_refresh_due(self, source: str, now: Optional[datetime] = None) -> bool:
        """True if the source was never fetched or its refresh interval has passed."""
        last = self.last_refreshed.get(source)
        if last is None:
            return True
        now = now or datetime.now(timezone.utc)
        interval = timedelta(seconds=REFRESH_INTERVALS.get(source, 0))
        return now - last >= interval

    def due_sources(self, now: Optional[datetime] = None) -> list[str]:
        return [source for source in DATA_SOURCES if self.is_refresh_due(source, now)]


def get_state(session: MutableMapping[str, Any]) -> DashboardState:
    """Fetch the session's DashboardState, creating it on first use.

    Args:
        session: st.session_state, or any dict in tests
    """
    if STATE_KEY not in session:
        session[STATE_KEY] = DashboardState()
    return session[STATE_KEY]

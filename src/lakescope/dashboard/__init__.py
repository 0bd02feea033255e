"""Streamlit dashboard for LakeScope.

This module provides:

- DashboardState, get_state: per-session UI state
- components: reusable Streamlit renderers (map, ramps, fishing, recreation, water level)

The app itself lives in lakescope.dashboard.app and is started with
``lakescope dashboard`` or ``streamlit run``.
"""

from lakescope.dashboard.state import TABS, Bookmark, DashboardState, get_state

__all__ = ["TABS", "Bookmark", "DashboardState", "get_state"]

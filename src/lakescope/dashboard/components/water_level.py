"""Water level card and history chart."""

from typing import Optional

import streamlit as st

from lakescope.dashboard.components.data_status import render_fallback_notice
from lakescope.metrics.water_level import WaterLevelHistory, WaterLevelStatus
from lakescope.visualization.colors import LEVEL_STATUS_COLORS, UNKNOWN_COLOR

TREND_ARROWS = {"rising": "↑", "falling": "↓", "stable": "→"}


def format_change(change_ft: float) -> str:
    """Signed change with two decimals.

    Examples:
        >>> format_change(0.456)
        '+0.46 ft'
        >>> format_change(-1.2)
        '-1.20 ft'
    """
    return f"{change_ft:+.2f} ft"


def render_water_level_card(status: Optional[WaterLevelStatus], container=None) -> None:
    """Current elevation, capacity and trend."""
    target = container if container is not None else st

    if status is None:
        target.metric("Lake Level", "N/A")
        target.caption("No current USGS reading")
        return

    color = LEVEL_STATUS_COLORS.get(status.status, UNKNOWN_COLOR)
    cols = target.columns(3)
    cols[0].metric(
        "Lake Level",
        f"{status.value:.2f} ft",
        delta=f"{TREND_ARROWS[status.trend]} {format_change(status.change_24h)}",
    )
    cols[1].metric("Capacity", f"{status.percent_capacity:.1f}%")
    cols[2].markdown(
        f'<span style="color:{color};font-weight:600;">{status.status.title()}</span>',
        unsafe_allow_html=True,
    )
    if status.date_time:
        target.caption(f"Reading at {status.date_time}")


def render_level_chart(history: WaterLevelHistory, container=None) -> None:
    """Line chart of the sampled series with min/max/avg beneath."""
    target = container if container is not None else st

    if history.is_simulated:
        render_fallback_notice("USGS history unavailable, showing simulated levels", target)

    target.line_chart(history.points.set_index("date")["value"], height=260)

    if history.stats:
        cols = target.columns(3)
        cols[0].metric("Min", f"{history.stats['min']:.2f} ft")
        cols[1].metric("Max", f"{history.stats['max']:.2f} ft")
        cols[2].metric("Avg", f"{history.stats['avg']:.2f} ft")

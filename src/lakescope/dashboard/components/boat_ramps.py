"""Boat ramp status panel."""

import pandas as pd
import streamlit as st

from lakescope.metrics.boat_ramps import RampState, RampSummary
from lakescope.visualization import RAMP_STATUS_COLORS


def get_ramp_badge(state: RampState) -> tuple[str, str, str]:
    """Return (emoji, label, hex_color) for a ramp state.

    Examples:
        >>> get_ramp_badge(RampState.OPEN)
        ('✅', 'Open', '#22c55e')
    """
    badges = {
        RampState.OPEN: ("✅", "Open", RAMP_STATUS_COLORS["open"]),
        RampState.LIMITED: ("⚠️", "Limited", RAMP_STATUS_COLORS["limited"]),
        RampState.CLOSED: ("⛔", "Closed", RAMP_STATUS_COLORS["closed"]),
    }
    return badges[state]


def ramp_table(summary: RampSummary) -> pd.DataFrame:
    """One row per ramp for st.dataframe."""
    return pd.DataFrame(
        [
            {
                "Ramp": s.ramp.name,
                "Location": s.ramp.location,
                "Status": get_ramp_badge(s.status)[1],
                "Min (ft)": s.ramp.min_elevation,
                "Optimal (ft)": s.ramp.optimal_elevation,
                "Details": s.message,
                "Vessels": ", ".join(s.launchable_vessel_classes) or "None",
            }
            for s in summary.statuses
        ]
    )


def render_ramp_summary(summary: RampSummary, current_level: float, container=None) -> None:
    """Render counts, gauge, advisory and the per-ramp table.

    Args:
        summary: Output of summarize_ramps
        current_level: Lake elevation the summary was computed for
        container: Streamlit container. If None, uses st.
    """
    target = container if container is not None else st

    cols = target.columns(3)
    cols[0].metric("Open", summary.counts["open"])
    cols[1].metric("Limited", summary.counts["limited"])
    cols[2].metric("Closed", summary.counts["closed"])

    target.progress(
        int(summary.gauge_percent),
        text=f"Lake level {current_level:.1f} ft ({summary.level_band})",
    )

    if summary.advisory:
        target.warning(summary.advisory)

    target.dataframe(ramp_table(summary), use_container_width=True, hide_index=True)

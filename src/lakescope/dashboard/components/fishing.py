"""Fishing activity card.

Shows the overall index with a rating badge, the per-factor breakdown,
species activity, the best solunar window and tips.
"""

import pandas as pd
import streamlit as st

from lakescope.dashboard.components.data_status import render_fallback_notice
from lakescope.metrics.fishing import Activity, FishingConditions
from lakescope.visualization import rating_color

ACTIVITY_EMOJI = {
    Activity.HIGH: "🔥",
    Activity.MODERATE: "🎣",
    Activity.LOW: "💤",
}


def factor_table(conditions: FishingConditions) -> pd.DataFrame:
    """Per-factor breakdown as a DataFrame (empty for fallback conditions)."""
    return pd.DataFrame(
        [
            {"Factor": f.name, "Score": f.score, "Status": f.status.value, "Detail": f.detail}
            for f in conditions.factors
        ],
        columns=["Factor", "Score", "Status", "Detail"],
    )


def render_rating_badge(label: str, rating: str, container=None) -> None:
    """Render a colored pill such as 'Fishing: Good'."""
    target = container if container is not None else st

    color = rating_color(rating)
    target.markdown(
        f"""
        <div style="
            display: inline-flex;
            align-items: center;
            gap: 6px;
            background-color: {color}22;
            border: 1px solid {color};
            border-radius: 16px;
            padding: 4px 12px;
            font-size: 14px;
        ">
            <span style="color: {color}; font-weight: 600;">{label}: {rating}</span>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_fishing_card(conditions: FishingConditions, container=None) -> None:
    """Render the fishing activity card.

    Args:
        conditions: Scored or fallback conditions
        container: Streamlit container (st, column, etc.). If None, uses st.
    """
    target = container if container is not None else st

    if conditions.is_fallback:
        render_fallback_notice("Weather unavailable, showing typical conditions", target)

    col_score, col_time = target.columns(2)
    col_score.metric("Fish Activity", f"{conditions.overall_score}/100")
    col_time.metric("Best Time", conditions.best_time)
    render_rating_badge("Fishing", conditions.rating, target)

    if conditions.factors:
        target.dataframe(factor_table(conditions), use_container_width=True, hide_index=True)

    target.markdown("**Target Species**")
    for species in conditions.target_species:
        target.markdown(
            f"{ACTIVITY_EMOJI[species.activity]} {species.name}: {species.activity.value}"
        )

    target.markdown("**Tips**")
    for tip in conditions.tips:
        target.markdown(f"- {tip}")

"""Recreation planner strip: one column per forecast day."""

from datetime import date
from typing import Optional

import pandas as pd
import streamlit as st

from lakescope.metrics.recreation import DayForecast
from lakescope.visualization import rating_color

RATING_ORDER = {"Excellent": 3, "Good": 2, "Fair": 1, "Poor": 0}


def day_label(day: DayForecast, today: Optional[date] = None) -> str:
    """'Today' for the current date, else the short weekday.

    Examples:
        >>> d = DayForecast("2024-06-03", 80, 65, 1, 10, 8, 7, "Excellent")
        >>> day_label(d, date(2024, 6, 3))
        'Today'
        >>> day_label(d, date(2024, 6, 1))
        'Mon'
    """
    parsed = date.fromisoformat(day.date)
    today = today or date.today()
    if parsed == today:
        return "Today"
    return parsed.strftime("%a")


def best_day(days: list[DayForecast]) -> Optional[DayForecast]:
    """Highest-rated day; the earliest wins ties."""
    if not days:
        return None
    return max(days, key=lambda d: (RATING_ORDER.get(d.rating, -1), -days.index(d)))


def forecast_table(days: list[DayForecast]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "date": d.date,
                "high_f": d.temp_high,
                "low_f": d.temp_low,
                "conditions": d.category,
                "precip_pct": d.precip_probability,
                "wind_mph": d.wind_speed,
                "uv": d.uv_index,
                "rating": d.rating,
            }
            for d in days
        ]
    )


def render_recreation_strip(days: list[DayForecast], container=None) -> None:
    """Render the multi-day outlook with rating-colored cards.

    Args:
        days: Parsed daily forecast
        container: Streamlit container. If None, uses st.
    """
    target = container if container is not None else st

    if not days:
        target.caption("No forecast available")
        return

    cols = target.columns(len(days))
    for col, day in zip(cols, days):
        color = rating_color(day.rating)
        col.markdown(
            f'<div style="border:1px solid {color};border-radius:8px;padding:6px;text-align:center;">'
            f"<b>{day_label(day)}</b><br/>"
            f"{day.temp_high}° / {day.temp_low}°<br/>"
            f'<span style="font-size:11px;">{day.category}</span><br/>'
            f'<span style="color:{color};font-weight:600;">{day.rating}</span>'
            f"</div>",
            unsafe_allow_html=True,
        )

    top = best_day(days)
    if top.rating == "Poor":
        target.warning("Poor conditions all week. Consider indoor activities.")
    else:
        target.success(f"Best day: {day_label(top)} ({top.rating})")

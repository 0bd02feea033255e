"""Current conditions card with an hourly strip.

Metric columns for the current Open-Meteo snapshot, a boating advisory when
the wind is up, and the next few hours of temperature and rain chance.
"""

from datetime import datetime
from typing import Optional

import pandas as pd
import streamlit as st

from lakescope.metrics.weather import (
    HourlyForecast,
    WeatherSnapshot,
    uv_band,
    wind_advisory,
    wind_direction,
)
from lakescope.utils.numbers import round_half_up

UV_BAND_COLORS = {
    "Low": "#34d399",
    "Moderate": "#facc15",
    "High": "#fb923c",
    "Very High": "#f87171",
}

MISSING = "n/a"


def hour_label(hour: HourlyForecast, index: int) -> str:
    """'Now' for the first slot, else a 12-hour clock label like '3 PM'.

    Examples:
        >>> h = HourlyForecast("2024-06-03T15:00", 81.0)
        >>> hour_label(h, 0)
        'Now'
        >>> hour_label(h, 2)
        '3 PM'
    """
    if index == 0:
        return "Now"
    return datetime.fromisoformat(hour.time).strftime("%I %p").lstrip("0")


def _degrees(value: Optional[float]) -> str:
    return MISSING if value is None else f"{round_half_up(value)}°F"


def weather_metrics(snapshot: WeatherSnapshot) -> dict[str, str]:
    """Display values for each metric column, keyed by label."""
    wind = f"{round_half_up(snapshot.wind_speed)} mph"
    if snapshot.wind_direction is not None:
        wind = f"{wind} {wind_direction(snapshot.wind_direction)}"

    visibility = snapshot.visibility_miles
    return {
        "Temperature": _degrees(snapshot.temperature),
        "Feels Like": _degrees(snapshot.apparent_temperature),
        "Humidity": MISSING if snapshot.humidity is None else f"{round_half_up(snapshot.humidity)}%",
        "Wind": wind,
        "Gusts": MISSING if snapshot.wind_gusts is None else f"{round_half_up(snapshot.wind_gusts)} mph",
        "Visibility": MISSING if visibility is None else f"{visibility:.1f} mi",
        "Pressure": f"{snapshot.pressure_inhg:.2f} inHg",
        "UV Index": MISSING if snapshot.uv_index is None else f"{snapshot.uv_index:g} ({uv_band(snapshot.uv_index)})",
    }


def hourly_table(hourly: list[HourlyForecast]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "hour": hour_label(h, i),
                "temp_f": round_half_up(h.temperature),
                "conditions": h.description,
                "precip_pct": h.precipitation_probability,
            }
            for i, h in enumerate(hourly)
        ]
    )


def render_weather_card(
    snapshot: Optional[WeatherSnapshot],
    hourly: Optional[list[HourlyForecast]] = None,
    container=None,
) -> None:
    """Render current conditions in metric columns plus the hourly strip.

    Args:
        snapshot: Parsed current conditions, or None if unavailable
        hourly: Next hours from parse_hourly_forecast
        container: Streamlit container. If None, uses st.
    """
    target = container if container is not None else st

    if snapshot is None:
        target.info("Current conditions unavailable")
        return

    target.markdown(f"**Current Conditions:** {snapshot.description}")

    values = weather_metrics(snapshot)
    labels = list(values)
    for row in (labels[:4], labels[4:]):
        cols = target.columns(len(row))
        for col, label in zip(cols, row):
            col.metric(label, values[label])

    if snapshot.uv_index is not None:
        band = uv_band(snapshot.uv_index)
        target.markdown(
            f'<span style="color:{UV_BAND_COLORS[band]};font-size:12px;">● UV {band}</span>',
            unsafe_allow_html=True,
        )

    advisory = wind_advisory(snapshot)
    if advisory:
        target.warning(f"Boating Advisory: {advisory}")

    if not hourly:
        return

    target.markdown("**Next Hours**")
    cols = target.columns(len(hourly))
    for i, (col, hour) in enumerate(zip(cols, hourly)):
        rain = ""
        if hour.precipitation_probability:
            rain = f'<br/><span style="color:#22d3ee;font-size:11px;">{hour.precipitation_probability}%</span>'
        col.markdown(
            f'<div style="text-align:center;font-size:12px;">{hour_label(hour, i)}<br/>'
            f"<b>{round_half_up(hour.temperature)}°</b>{rain}</div>",
            unsafe_allow_html=True,
        )

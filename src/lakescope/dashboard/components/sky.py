"""Moon phase, solunar periods and golden/blue hours."""

from datetime import datetime, timezone
from typing import Any, Optional

import streamlit as st

from lakescope.metrics.astronomy import (
    MoonPhaseInfo,
    SolunarPeriod,
    SunWindows,
    moon_phase,
    solunar_periods,
    sun_windows,
)


def sky_summary(now: Optional[datetime] = None) -> tuple[datetime, MoonPhaseInfo, dict[str, list[SolunarPeriod]]]:
    """Moon and solunar periods for `now`, defaulting to the current UTC time.

    Naive datetimes are taken as UTC, so the default must not be local time.
    """
    now = now or datetime.now(timezone.utc)
    return now, moon_phase(now), solunar_periods(now)


def today_sun_windows(payload: dict[str, Any]) -> Optional[SunWindows]:
    """Golden/blue hours from the first daily sunrise/sunset, or None."""
    try:
        sunrise = datetime.fromisoformat(payload["daily"]["sunrise"][0])
        sunset = datetime.fromisoformat(payload["daily"]["sunset"][0])
    except (KeyError, IndexError, TypeError, ValueError):
        return None
    return sun_windows(sunrise, sunset)


def render_sky(payload: dict[str, Any], now: Optional[datetime] = None, container=None) -> None:
    target = container if container is not None else st

    _, moon, periods = sky_summary(now)
    cols = target.columns(3)
    cols[0].metric("Moon", f"{moon.icon} {moon.phase_name}", f"{moon.illumination_percent}% lit")
    cols[1].markdown(
        "**Major:** " + ", ".join(p.label for p in periods["major"])
        + "<br/>**Minor:** " + ", ".join(p.label for p in periods["minor"]),
        unsafe_allow_html=True,
    )

    windows = today_sun_windows(payload)
    if windows is None:
        cols[2].caption("Sun times unavailable")
        return
    cols[2].markdown(
        f"**Golden:** {windows.golden_hour_morning.start:%H:%M} / {windows.golden_hour_evening.start:%H:%M}<br/>"
        f"**Blue:** {windows.blue_hour_morning.start:%H:%M} / {windows.blue_hour_evening.start:%H:%M}<br/>"
        f"**Day length:** {windows.day_length_hours:.1f} h",
        unsafe_allow_html=True,
    )

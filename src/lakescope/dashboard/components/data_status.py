"""Data freshness and fallback notices for the dashboard.

Provides UI components telling users how old each upstream dataset is and
when a fallback (default or simulated data) is being shown instead.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import streamlit as st

from lakescope.config import REFRESH_INTERVALS

logger = logging.getLogger(__name__)

FRESHNESS_COLORS = {
    "fresh": "#22c55e",   # Green
    "due": "#3b82f6",     # Blue
    "stale": "#f59e0b",   # Amber
    "unknown": "#9ca3af", # Gray
}


def _age(last_updated: datetime, now: Optional[datetime] = None) -> timedelta:
    now = now or datetime.now(timezone.utc)
    if last_updated.tzinfo is None:
        last_updated = last_updated.replace(tzinfo=timezone.utc)
    return now - last_updated


def get_data_freshness(
    source: str, last_updated: Optional[datetime], now: Optional[datetime] = None
) -> tuple[str, str]:
    """Return (status_text, color) for a source's data age.

    Fresh within one refresh interval, due within two, stale beyond that.

    Example:
        >>> now = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        >>> get_data_freshness("weather", now - timedelta(minutes=10), now)
        ('Fresh', '#22c55e')
    """
    if last_updated is None:
        return ("Unknown", FRESHNESS_COLORS["unknown"])

    interval = timedelta(seconds=REFRESH_INTERVALS.get(source, 30 * 60))
    age = _age(last_updated, now)

    if age < interval:
        return ("Fresh", FRESHNESS_COLORS["fresh"])
    elif age < 2 * interval:
        return ("Refresh due", FRESHNESS_COLORS["due"])
    return ("Stale", FRESHNESS_COLORS["stale"])


def format_age(last_updated: Optional[datetime], now: Optional[datetime] = None) -> str:
    """Format data age as a human-readable string.

    Example:
        >>> now = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        >>> format_age(now - timedelta(minutes=5), now)
        '5 min ago'
    """
    if last_updated is None:
        return "Never"

    total_seconds = _age(last_updated, now).total_seconds()

    if total_seconds < 60:
        return "Just now"
    elif total_seconds < 3600:
        return f"{int(total_seconds / 60)} min ago"
    elif total_seconds < 86400:
        return f"{total_seconds / 3600:.1f} hrs ago"
    return f"{total_seconds / 86400:.1f} days ago"


def status_text(
    source: str,
    last_updated: Optional[datetime],
    refresh_due: bool = False,
    now: Optional[datetime] = None,
) -> str:
    """One-line freshness label, flagged when the next load will refetch.

    Example:
        >>> now = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        >>> status_text("usgs", now - timedelta(minutes=20), refresh_due=True, now=now)
        'usgs: Refresh due (20 min ago) · updating'
    """
    status, _ = get_data_freshness(source, last_updated, now)
    text = f"{source}: {status} ({format_age(last_updated, now)})"
    if refresh_due:
        text += " · updating"
    return text


def render_data_status(
    source: str,
    last_updated: Optional[datetime],
    refresh_due: bool = False,
    container=None,
) -> None:
    """Render a small colored freshness line for one source."""
    target = container if container is not None else st

    _, color = get_data_freshness(source, last_updated)
    target.markdown(
        f'<span style="color:{color};font-size:12px;">● {status_text(source, last_updated, refresh_due)}</span>',
        unsafe_allow_html=True,
    )


def render_fallback_notice(reason: str, container=None) -> None:
    """Show notice when fallback data is displayed.

    Example:
        >>> render_fallback_notice("Weather unavailable, showing typical conditions")
    """
    target = container if container is not None else st

    logger.debug(f"Fallback notice: {reason}")
    target.info(f"Showing fallback data: {reason}")


def render_upstream_error(source: str, message: str, container=None) -> None:
    """Show an upstream failure without fallback data."""
    target = container if container is not None else st

    target.warning(f"{source} unavailable: {message}")

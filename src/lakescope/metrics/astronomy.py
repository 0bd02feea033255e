"""Astronomical calculations for trip planning.

This module provides:
- Moon phase and illumination from a fixed reference new moon
- Simplified solunar (major/minor feeding) windows
- Golden/blue hour windows derived from sunrise and sunset

None of this is real ephemeris work. Phase is a linear function of elapsed
time since 2000-01-06 18:14 UTC, and solunar windows are anchored to the
illumination bucket rather than to moonrise/moonset.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from lakescope.utils.numbers import round_half_up

SYNODIC_MONTH_DAYS = 29.53058867
REFERENCE_NEW_MOON = datetime(2000, 1, 6, 18, 14, 0, tzinfo=timezone.utc)


class MoonPhase(Enum):
    """The eight named lunar phases."""

    NEW = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"


# (upper lunar-day bound, phase, fixed illumination %, icon)
_PHASE_BUCKETS = [
    (1.85, MoonPhase.NEW, 0, "🌑"),
    (5.53, MoonPhase.WAXING_CRESCENT, 25, "🌒"),
    (9.22, MoonPhase.FIRST_QUARTER, 50, "🌓"),
    (12.91, MoonPhase.WAXING_GIBBOUS, 75, "🌔"),
    (16.61, MoonPhase.FULL, 100, "🌕"),
    (20.30, MoonPhase.WANING_GIBBOUS, 75, "🌖"),
    (23.99, MoonPhase.LAST_QUARTER, 50, "🌗"),
    (27.68, MoonPhase.WANING_CRESCENT, 25, "🌘"),
]


@dataclass(frozen=True)
class MoonPhaseInfo:
    """Moon phase at an instant.

    Attributes:
        phase: Named phase
        illumination_percent: Approximate lit fraction, 0-100
        icon: Moon emoji for display
        lunar_day: Days since the last new moon, in [0, synodic month)
    """

    phase: MoonPhase
    illumination_percent: int
    icon: str
    lunar_day: float

    @property
    def phase_name(self) -> str:
        return self.phase.value


def _as_utc(when: datetime) -> datetime:
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when


def lunar_day(when: datetime) -> float:
    """Days elapsed since the most recent new moon.

    Naive datetimes are taken as UTC. The result is always in
    [0, SYNODIC_MONTH_DAYS), including for dates before the reference
    new moon.

    Examples:
        >>> lunar_day(datetime(2000, 1, 6, 18, 14))
        0.0
    """
    days = (_as_utc(when) - REFERENCE_NEW_MOON).total_seconds() / 86400
    # Python's % already follows the divisor's sign; the second pass guards
    # against a float remainder landing exactly on the period.
    return (days % SYNODIC_MONTH_DAYS) % SYNODIC_MONTH_DAYS


def _interpolated_illumination(phase: MoonPhase, day: float, fixed: int) -> int:
    if phase is MoonPhase.WAXING_CRESCENT:
        return round_half_up((day - 1.85) / 3.68 * 25)
    if phase is MoonPhase.WAXING_GIBBOUS:
        return 50 + round_half_up((day - 9.22) / 3.69 * 25)
    if phase is MoonPhase.WANING_GIBBOUS:
        return 100 - round_half_up((day - 16.61) / 3.69 * 25)
    if phase is MoonPhase.WANING_CRESCENT:
        return 50 - round_half_up((day - 23.99) / 3.69 * 25)
    return fixed


def moon_phase(when: datetime, interpolate: bool = True) -> MoonPhaseInfo:
    """Compute moon phase and illumination for a date.

    Args:
        when: Instant to evaluate (naive = UTC)
        interpolate: If True, crescent and gibbous illumination is linearly
            interpolated within its bucket. If False, every phase uses its
            fixed table value (0/25/50/75/100).

    Returns:
        MoonPhaseInfo

    Examples:
        >>> moon_phase(datetime(2000, 1, 6, 18, 14)).phase_name
        'New Moon'
        >>> moon_phase(datetime(2000, 1, 21, 12, 0)).phase_name
        'Full Moon'
    """
    day = lunar_day(when)

    for upper, phase, fixed, icon in _PHASE_BUCKETS:
        if day < upper:
            illumination = (
                _interpolated_illumination(phase, day, fixed) if interpolate else fixed
            )
            return MoonPhaseInfo(phase, illumination, icon, day)

    # Tail of the cycle wraps back to new moon
    return MoonPhaseInfo(MoonPhase.NEW, 0, "🌑", day)


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class SunWindows:
    """Photography and planning windows for one day."""

    sunrise: datetime
    sunset: datetime
    solar_noon: datetime
    day_length_hours: float
    golden_hour_morning: TimeWindow
    golden_hour_evening: TimeWindow
    blue_hour_morning: TimeWindow
    blue_hour_evening: TimeWindow


def sun_windows(sunrise: datetime, sunset: datetime) -> SunWindows:
    """Derive golden/blue hour windows from sunrise and sunset.

    Golden hour is the hour after sunrise and the hour before sunset. Blue
    hour runs 40 to 20 minutes before sunrise and 20 to 40 minutes after
    sunset. Solar noon is the midpoint of sunrise and sunset.

    Args:
        sunrise: Sunrise time
        sunset: Sunset time (same day)

    Returns:
        SunWindows
    """
    day_length = sunset - sunrise
    return SunWindows(
        sunrise=sunrise,
        sunset=sunset,
        solar_noon=sunrise + day_length / 2,
        day_length_hours=day_length.total_seconds() / 3600,
        golden_hour_morning=TimeWindow(sunrise, sunrise + timedelta(minutes=60)),
        golden_hour_evening=TimeWindow(sunset - timedelta(minutes=60), sunset),
        blue_hour_morning=TimeWindow(
            sunrise - timedelta(minutes=40), sunrise - timedelta(minutes=20)
        ),
        blue_hour_evening=TimeWindow(
            sunset + timedelta(minutes=20), sunset + timedelta(minutes=40)
        ),
    )


@dataclass(frozen=True)
class SolunarPeriod:
    """A feeding window. Hours are on a 24-hour clock and may wrap midnight."""

    kind: str  # "major" or "minor"
    start_hour: int
    end_hour: int

    @property
    def label(self) -> str:
        return f"{format_hour(self.start_hour)}-{format_hour(self.end_hour)}"


def format_hour(hour: int) -> str:
    """Format a 0-23 hour as a compact 12-hour label.

    Only hours past noon get "pm", so noon itself reads "12am".

    Examples:
        >>> format_hour(0)
        '12am'
        >>> format_hour(6)
        '6am'
        >>> format_hour(12)
        '12am'
        >>> format_hour(18)
        '6pm'
    """
    if hour > 12:
        return f"{hour - 12}pm"
    if hour == 0:
        return "12am"
    return f"{hour}am"


SOLUNAR_ANCHOR_HOUR = 6
SOLUNAR_WINDOW_HOURS = 2


def solunar_periods(when: datetime) -> dict[str, list[SolunarPeriod]]:
    """Simplified solunar windows for a day.

    The first major window starts at 6am plus one hour per 10% of (fixed
    table) moon illumination. The second major window is 12 hours later and
    the minor windows sit 6 hours after each major one. Every window is two
    hours long.

    Args:
        when: Day to evaluate

    Returns:
        Dict with "major" and "minor" lists of two SolunarPeriod each

    Examples:
        >>> periods = solunar_periods(datetime(2000, 1, 21, 12, 0))  # full moon
        >>> periods["major"][0].label
        '4pm-6pm'
    """
    illumination = moon_phase(when, interpolate=False).illumination_percent

    major1 = (SOLUNAR_ANCHOR_HOUR + math.floor(illumination / 10)) % 24
    major2 = (major1 + 12) % 24
    minor1 = (major1 + 6) % 24
    minor2 = (minor1 + 12) % 24

    def period(kind: str, start: int) -> SolunarPeriod:
        return SolunarPeriod(kind, start, (start + SOLUNAR_WINDOW_HOURS) % 24)

    return {
        "major": [period("major", major1), period("major", major2)],
        "minor": [period("minor", minor1), period("minor", minor2)],
    }

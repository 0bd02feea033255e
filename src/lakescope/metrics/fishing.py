"""Fishing activity index.

A heuristic score built from five independent factors: barometric pressure,
water temperature, wind, moon phase and cloud cover. Each factor maps to a
0-100 sub-score through a fixed threshold table; the overall index is their
unweighted mean.

Species activity and tips come from their own conditionals on the raw
inputs, so a tip can appear even when its factor did not move the score.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from lakescope.metrics.astronomy import MoonPhase, moon_phase, solunar_periods
from lakescope.metrics.weather import WeatherSnapshot
from lakescope.utils.numbers import round_half_up
from lakescope.utils.result import FetchResult

logger = logging.getLogger(__name__)

DEFAULT_WATER_TEMP_F = 68
MAX_TIPS = 3
NO_MATCH_TIP = "Fish structure and cover in deeper water"


class FactorStatus(Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class Activity(Enum):
    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"


@dataclass(frozen=True)
class FishingFactor:
    """One scored input to the activity index."""

    name: str
    score: int
    status: FactorStatus
    detail: str


@dataclass(frozen=True)
class SpeciesActivity:
    name: str
    activity: Activity


@dataclass(frozen=True)
class FishingConditions:
    """Scored fishing outlook.

    Attributes:
        overall_score: Mean of factor scores, 0-100
        rating: "Excellent", "Good", "Fair" or "Poor"
        factors: Per-factor breakdown (empty for the fallback)
        best_time: Label of the first major solunar window
        target_species: Activity level for each target species
        tips: At most three tips, in priority order
        is_fallback: True when these are the default conditions
    """

    overall_score: int
    rating: str
    factors: tuple[FishingFactor, ...] = field(default_factory=tuple)
    best_time: str = ""
    target_species: tuple[SpeciesActivity, ...] = field(default_factory=tuple)
    tips: tuple[str, ...] = field(default_factory=tuple)
    is_fallback: bool = False


DEFAULT_FISHING_CONDITIONS = FishingConditions(
    overall_score=60,
    rating="Fair",
    factors=(),
    best_time="6am-8am",
    target_species=(
        SpeciesActivity("Largemouth Bass", Activity.MODERATE),
        SpeciesActivity("Crappie", Activity.MODERATE),
    ),
    tips=("Check local conditions before heading out",),
    is_fallback=True,
)


def score_pressure(pressure_inhg: float) -> FishingFactor:
    """Score barometric pressure (inHg)."""
    if 30.0 <= pressure_inhg <= 30.2:
        score, status, detail = 90, FactorStatus.POSITIVE, "Stable high pressure - ideal"
    elif 29.8 <= pressure_inhg < 30.0:
        score, status, detail = 75, FactorStatus.POSITIVE, "Slightly falling - fish active"
    elif 30.2 < pressure_inhg <= 30.5:
        score, status, detail = 60, FactorStatus.NEUTRAL, "High pressure - slower fishing"
    elif pressure_inhg < 29.8:
        score, status, detail = 40, FactorStatus.NEGATIVE, "Low pressure - fish deep"
    else:
        score, status, detail = 50, FactorStatus.NEUTRAL, "Very high - challenging"

    return FishingFactor(
        "Barometric Pressure", score, status, f"{pressure_inhg:.2f} inHg - {detail}"
    )


def score_water_temperature(water_temp_f: float) -> FishingFactor:
    """Score water temperature (F)."""
    if 65 <= water_temp_f <= 75:
        score, status, detail = 95, FactorStatus.POSITIVE, "Optimal range for bass"
    elif 55 <= water_temp_f < 65:
        score, status, detail = 70, FactorStatus.NEUTRAL, "Pre-spawn activity increasing"
    elif 75 < water_temp_f <= 85:
        score, status, detail = 65, FactorStatus.NEUTRAL, "Fish seeking cooler depths"
    elif water_temp_f < 55:
        score, status, detail = 40, FactorStatus.NEGATIVE, "Cold - slow metabolism"
    else:
        score, status, detail = 35, FactorStatus.NEGATIVE, "Very warm - fish stressed"

    return FishingFactor(
        "Water Temperature", score, status, f"{water_temp_f:g}°F - {detail}"
    )


def score_wind(wind_mph: float) -> FishingFactor:
    """Score wind speed (mph)."""
    if 5 <= wind_mph <= 15:
        score, status, detail = 85, FactorStatus.POSITIVE, "Light chop - reduces visibility"
    elif wind_mph < 5:
        score, status, detail = 60, FactorStatus.NEUTRAL, "Calm - fish more cautious"
    elif 15 < wind_mph <= 25:
        score, status, detail = 55, FactorStatus.NEUTRAL, "Moderate - concentrate on windward"
    else:
        score, status, detail = 30, FactorStatus.NEGATIVE, "Too windy - difficult conditions"

    return FishingFactor("Wind", score, status, f"{round_half_up(wind_mph)} mph - {detail}")


def score_moon(phase: MoonPhase, icon: str = "") -> FishingFactor:
    """Score moon phase. New and full moons are the strongest."""
    if phase in (MoonPhase.NEW, MoonPhase.FULL):
        score, status = 90, FactorStatus.POSITIVE
    elif phase in (MoonPhase.FIRST_QUARTER, MoonPhase.LAST_QUARTER):
        score, status = 70, FactorStatus.NEUTRAL
    else:
        score, status = 55, FactorStatus.NEUTRAL

    detail = f"{icon} {phase.value}" if icon else phase.value
    return FishingFactor("Moon Phase", score, status, detail)


def score_cloud_cover(cloud_pct: float) -> FishingFactor:
    """Score cloud cover (%)."""
    if 40 <= cloud_pct <= 70:
        score, status, detail = 85, FactorStatus.POSITIVE, "Ideal overcast"
    elif cloud_pct > 70:
        score, status, detail = 70, FactorStatus.NEUTRAL, "Heavy clouds"
    else:
        score, status, detail = 55, FactorStatus.NEUTRAL, "Clear skies"

    return FishingFactor("Cloud Cover", score, status, f"{cloud_pct:g}% - {detail}")


def rate_score(score: int) -> str:
    """Bucket an overall score into a rating.

    Examples:
        >>> rate_score(80)
        'Excellent'
        >>> rate_score(64)
        'Fair'
    """
    if score >= 80:
        return "Excellent"
    elif score >= 65:
        return "Good"
    elif score >= 50:
        return "Fair"
    return "Poor"


def species_activity(
    water_temp_f: float, cloud_pct: float, overall_score: int
) -> tuple[SpeciesActivity, ...]:
    """Activity level for each target species."""

    def level(high: bool, moderate: bool) -> Activity:
        if high:
            return Activity.HIGH
        if moderate:
            return Activity.MODERATE
        return Activity.LOW

    t = water_temp_f
    return (
        SpeciesActivity(
            "Largemouth Bass",
            level(60 <= t <= 80 and overall_score >= 60, 50 <= t <= 85),
        ),
        SpeciesActivity("Crappie", level(55 <= t <= 70, 45 <= t <= 75)),
        SpeciesActivity("Catfish", level(t >= 70 and cloud_pct >= 50, t >= 60)),
        SpeciesActivity("Bluegill", level(65 <= t <= 80, t >= 55)),
    )


def fishing_tips(
    wind_mph: float,
    water_temp_f: float,
    pressure_inhg: float,
    phase: MoonPhase,
    cloud_pct: float,
) -> tuple[str, ...]:
    """Tips in priority order, capped at MAX_TIPS.

    Returns a single default tip when no condition matches.
    """
    tips = []
    if 5 <= wind_mph <= 15:
        tips.append("Fish the windward shoreline where baitfish concentrate")
    if 65 <= water_temp_f <= 75:
        tips.append("Topwater lures effective in early morning")
    if 29.8 <= pressure_inhg <= 30.0:
        tips.append("Falling pressure - fish feeding aggressively")
    if phase in (MoonPhase.FULL, MoonPhase.NEW):
        tips.append("Major solunar period - extended feeding windows")
    if cloud_pct >= 50:
        tips.append("Overcast conditions favor shallow water fishing")

    if not tips:
        return (NO_MATCH_TIP,)
    return tuple(tips[:MAX_TIPS])


def score_fishing_conditions(
    weather: WeatherSnapshot,
    water_temp_f: float = DEFAULT_WATER_TEMP_F,
    when: Optional[datetime] = None,
) -> FishingConditions:
    """Score fishing conditions from current weather.

    Args:
        weather: Current conditions (pressure in hPa)
        water_temp_f: Surface water temperature in F
        when: Instant used for moon phase and solunar windows. Defaults to now.

    Returns:
        FishingConditions with is_fallback False

    Example:
        >>> snap = WeatherSnapshot(temperature=72, pressure=1020, wind_speed=10, cloud_cover=55)
        >>> score_fishing_conditions(snap, 70, datetime(2000, 1, 21, 12)).rating
        'Excellent'
    """
    when = when or datetime.now(timezone.utc)
    moon = moon_phase(when, interpolate=False)
    pressure = weather.pressure_inhg

    factors = (
        score_pressure(pressure),
        score_water_temperature(water_temp_f),
        score_wind(weather.wind_speed),
        score_moon(moon.phase, moon.icon),
        score_cloud_cover(weather.cloud_cover),
    )
    overall = round_half_up(sum(f.score for f in factors) / len(factors))

    return FishingConditions(
        overall_score=overall,
        rating=rate_score(overall),
        factors=factors,
        best_time=solunar_periods(when)["major"][0].label,
        target_species=species_activity(water_temp_f, weather.cloud_cover, overall),
        tips=fishing_tips(
            weather.wind_speed, water_temp_f, pressure, moon.phase, weather.cloud_cover
        ),
    )


def assess_fishing(
    weather_result: FetchResult[WeatherSnapshot],
    water_temp_f: float = DEFAULT_WATER_TEMP_F,
    when: Optional[datetime] = None,
    default: FishingConditions = DEFAULT_FISHING_CONDITIONS,
) -> FishingConditions:
    """Score conditions, substituting the default when weather is unavailable.

    Args:
        weather_result: Outcome of the weather fetch
        water_temp_f: Surface water temperature in F
        when: Instant for moon phase and solunar windows
        default: Conditions to return when the fetch failed

    Returns:
        Scored conditions, or the default marked is_fallback=True
    """
    if not weather_result.ok:
        logger.warning(f"Weather unavailable, using default fishing conditions: {weather_result.error}")
        return default if default.is_fallback else replace(default, is_fallback=True)

    return score_fishing_conditions(weather_result.value, water_temp_f, when)

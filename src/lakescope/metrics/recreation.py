"""Recreation-day rating from a daily forecast.

Starts from 100 and applies every applicable adjustment for temperature,
precipitation chance, wind and weather category. The final score is
bucketed without clamping, so a perfect day can score above 100.
"""

from dataclasses import dataclass
from typing import Any

from lakescope.utils.numbers import round_half_up

RATING_THRESHOLDS = [(80, "Excellent"), (60, "Good"), (40, "Fair")]


def recreation_score(
    temp_high_f: float,
    precip_probability_pct: float,
    wind_speed_mph: float,
    weather_code: int,
) -> int:
    """Raw recreation score before bucketing.

    Examples:
        >>> recreation_score(78, 10, 8, 1)
        115
        >>> recreation_score(98, 80, 30, 95)
        -25
    """
    score = 100

    # Ideal high is 70-85F
    if temp_high_f < 50 or temp_high_f > 95:
        score -= 30
    elif temp_high_f < 60 or temp_high_f > 90:
        score -= 15
    elif 70 <= temp_high_f <= 85:
        score += 10

    if precip_probability_pct > 70:
        score -= 40
    elif precip_probability_pct > 40:
        score -= 20
    elif precip_probability_pct > 20:
        score -= 10

    if wind_speed_mph > 25:
        score -= 25
    elif wind_speed_mph > 15:
        score -= 10

    if weather_code >= 95:
        score -= 30  # thunderstorms
    elif weather_code >= 61:
        score -= 20  # rain
    elif weather_code <= 3:
        score += 5  # clear / partly cloudy

    return score


def rate_recreation_day(
    temp_high_f: float,
    precip_probability_pct: float,
    wind_speed_mph: float,
    weather_code: int,
) -> str:
    """Rate a day as Excellent, Good, Fair or Poor.

    Examples:
        >>> rate_recreation_day(78, 10, 8, 1)
        'Excellent'
        >>> rate_recreation_day(55, 50, 20, 63)
        'Poor'
    """
    score = recreation_score(temp_high_f, precip_probability_pct, wind_speed_mph, weather_code)
    for threshold, rating in RATING_THRESHOLDS:
        if score >= threshold:
            return rating
    return "Poor"


def describe_weather_category(code: int) -> str:
    """Coarse weather category for a WMO code.

    Examples:
        >>> describe_weather_category(2)
        'Partly Cloudy'
        >>> describe_weather_category(96)
        'Thunderstorms'
    """
    if code == 0:
        return "Clear"
    if code <= 3:
        return "Partly Cloudy"
    if code <= 48:
        return "Foggy"
    if code <= 57:
        return "Drizzle"
    if code <= 67:
        return "Rain"
    if code <= 77:
        return "Snow"
    if code <= 82:
        return "Showers"
    if code <= 99:
        return "Thunderstorms"
    return "Unknown"


@dataclass(frozen=True)
class DayForecast:
    """One day of the recreation outlook."""

    date: str
    temp_high: int
    temp_low: int
    weather_code: int
    precip_probability: float
    wind_speed: int
    uv_index: int
    rating: str

    @property
    def category(self) -> str:
        return describe_weather_category(self.weather_code)


def parse_daily_forecast(payload: dict[str, Any]) -> list[DayForecast]:
    """Build the daily outlook from an Open-Meteo forecast response.

    Temperatures, wind and UV are rounded half-up before rating.

    Raises:
        ValueError: If the payload has no usable "daily" block.
    """
    daily = payload.get("daily") if isinstance(payload, dict) else None
    if not daily or "time" not in daily:
        raise ValueError("Open-Meteo payload has no 'daily' block")

    days = []
    try:
        for idx, day in enumerate(daily["time"]):
            temp_high = round_half_up(daily["temperature_2m_max"][idx])
            precip = daily["precipitation_probability_max"][idx] or 0
            wind = round_half_up(daily["wind_speed_10m_max"][idx])
            code = int(daily["weather_code"][idx])

            days.append(
                DayForecast(
                    date=day,
                    temp_high=temp_high,
                    temp_low=round_half_up(daily["temperature_2m_min"][idx]),
                    weather_code=code,
                    precip_probability=precip,
                    wind_speed=wind,
                    uv_index=round_half_up(daily["uv_index_max"][idx] or 0),
                    rating=rate_recreation_day(temp_high, precip, wind, code),
                )
            )
    except (KeyError, IndexError, TypeError) as e:
        raise ValueError(f"Malformed Open-Meteo daily block: {e}") from e

    return days

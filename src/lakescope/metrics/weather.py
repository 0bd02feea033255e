"""Weather snapshot parsing and display helpers.

Open-Meteo returns WMO weather codes, wind direction in degrees and
sea-level pressure in hPa; these helpers turn them into the values the
metric functions and the dashboard use.
"""

from dataclasses import dataclass
from typing import Any, Optional

from lakescope.utils.numbers import round_half_up

HPA_TO_INHG = 0.02953
METERS_PER_MILE = 1609.34

# (lower bound, label), highest first
UV_BANDS = [
    (8, "Very High"),
    (6, "High"),
    (3, "Moderate"),
    (0, "Low"),
]

HOURLY_STRIP_HOURS = 8

WEATHER_CODE_DESCRIPTIONS = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Thunderstorm with heavy hail",
}

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

# Boating advisory thresholds
WIND_ADVISORY_MPH = 15
GUST_ADVISORY_MPH = 25


def describe_weather_code(code: int) -> str:
    """Human-readable description of a WMO weather code.

    Examples:
        >>> describe_weather_code(0)
        'Clear sky'
        >>> describe_weather_code(42)
        'Unknown'
    """
    return WEATHER_CODE_DESCRIPTIONS.get(code, "Unknown")


def wind_direction(degrees: float) -> str:
    """Convert a bearing in degrees to a 16-point compass label.

    Examples:
        >>> wind_direction(0)
        'N'
        >>> wind_direction(225)
        'SW'
        >>> wind_direction(355)
        'N'
    """
    index = round_half_up(degrees / 22.5) % 16
    return COMPASS_POINTS[index]


def hpa_to_inhg(pressure_hpa: float) -> float:
    """Convert hectopascals to inches of mercury."""
    return pressure_hpa * HPA_TO_INHG


def meters_to_miles(meters: float) -> float:
    return meters / METERS_PER_MILE


def uv_band(uv_index: float) -> str:
    """Exposure band for a UV index.

    Examples:
        >>> uv_band(2.9)
        'Low'
        >>> uv_band(6.1)
        'High'
        >>> uv_band(8)
        'Very High'
    """
    for lower, label in UV_BANDS:
        if uv_index >= lower:
            return label
    return "Low"


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions at the lake.

    Units follow the Open-Meteo request configuration: temperatures in F,
    wind in mph, precipitation in inches, pressure in hPa.
    """

    temperature: float
    pressure: float
    wind_speed: float
    cloud_cover: float
    precipitation_probability: Optional[float] = None
    uv_index: Optional[float] = None
    weather_code: int = 0
    is_day: bool = True
    apparent_temperature: Optional[float] = None
    humidity: Optional[float] = None
    wind_direction: Optional[float] = None
    wind_gusts: Optional[float] = None
    visibility: Optional[float] = None
    precipitation: Optional[float] = None

    @property
    def pressure_inhg(self) -> float:
        return hpa_to_inhg(self.pressure)

    @property
    def description(self) -> str:
        return describe_weather_code(self.weather_code)

    @property
    def visibility_miles(self) -> Optional[float]:
        """Visibility in miles; Open-Meteo reports meters."""
        if self.visibility is None:
            return None
        return meters_to_miles(self.visibility)

    @classmethod
    def from_open_meteo(cls, payload: dict[str, Any]) -> "WeatherSnapshot":
        """Build a snapshot from an Open-Meteo forecast response.

        Precipitation probability is taken from the first hourly value when
        the hourly block is present, since Open-Meteo has no current value
        for it.

        Raises:
            ValueError: If the payload lacks a usable "current" block.
        """
        current = payload.get("current") if isinstance(payload, dict) else None
        if not current:
            raise ValueError("Open-Meteo payload has no 'current' block")

        try:
            temperature = float(current["temperature_2m"])
            pressure = float(current["pressure_msl"])
            wind_speed = float(current["wind_speed_10m"])
            cloud_cover = float(current["cloud_cover"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"Open-Meteo current block missing field: {e}") from e

        precip_probability = None
        hourly_probs = (payload.get("hourly") or {}).get("precipitation_probability")
        if hourly_probs:
            precip_probability = hourly_probs[0]

        return cls(
            temperature=temperature,
            pressure=pressure,
            wind_speed=wind_speed,
            cloud_cover=cloud_cover,
            precipitation_probability=precip_probability,
            uv_index=current.get("uv_index"),
            weather_code=int(current.get("weather_code", 0)),
            is_day=bool(current.get("is_day", 1)),
            apparent_temperature=current.get("apparent_temperature"),
            humidity=current.get("relative_humidity_2m"),
            wind_direction=current.get("wind_direction_10m"),
            wind_gusts=current.get("wind_gusts_10m"),
            visibility=current.get("visibility"),
            precipitation=current.get("precipitation"),
        )


def wind_advisory(snapshot: WeatherSnapshot) -> Optional[str]:
    """Boating advisory line for the current wind, or None in light air.

    Examples:
        >>> wind_advisory(WeatherSnapshot(70, 1013, 8, 20, wind_gusts=30))
        'Strong wind gusts up to 30 mph. Small craft should use caution.'
        >>> wind_advisory(WeatherSnapshot(70, 1013, 8, 20, wind_gusts=12)) is None
        True
    """
    gusts = snapshot.wind_gusts or 0
    if gusts > GUST_ADVISORY_MPH:
        return f"Strong wind gusts up to {round_half_up(gusts)} mph. Small craft should use caution."
    if snapshot.wind_speed > WIND_ADVISORY_MPH:
        return f"Winds {round_half_up(snapshot.wind_speed)} mph. Check conditions before heading out."
    return None


@dataclass(frozen=True)
class HourlyForecast:
    """One hour of the Open-Meteo hourly block."""

    time: str
    temperature: float
    weather_code: int = 0
    precipitation_probability: Optional[float] = None

    @property
    def description(self) -> str:
        return describe_weather_code(self.weather_code)


def parse_hourly_forecast(payload: dict[str, Any], hours: int = HOURLY_STRIP_HOURS) -> list[HourlyForecast]:
    """Parse the next `hours` entries of an Open-Meteo hourly block.

    The strip starts at the hour containing current.time when the payload
    has one, otherwise at the first hourly entry. Open-Meteo times are local
    ISO strings without offset, so they compare correctly as text.

    Raises:
        KeyError: If the hourly block or its time/temperature arrays are missing.
    """
    hourly = payload["hourly"]
    times = hourly["time"]
    temperatures = hourly["temperature_2m"]
    codes = hourly.get("weather_code") or []
    probabilities = hourly.get("precipitation_probability") or []

    start = 0
    current_time = (payload.get("current") or {}).get("time")
    if current_time:
        hour_start = current_time[:13] + ":00"
        start = next((i for i, t in enumerate(times) if t >= hour_start), len(times))

    forecast = []
    for i in range(start, min(start + hours, len(times))):
        forecast.append(
            HourlyForecast(
                time=times[i],
                temperature=float(temperatures[i]),
                weather_code=int(codes[i]) if i < len(codes) and codes[i] is not None else 0,
                precipitation_probability=probabilities[i] if i < len(probabilities) else None,
            )
        )
    return forecast

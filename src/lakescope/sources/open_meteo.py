"""Open-Meteo forecast client. No API key required."""

import logging
from datetime import datetime, timezone

from lakescope import config
from lakescope.metrics.recreation import DayForecast, parse_daily_forecast
from lakescope.metrics.weather import WeatherSnapshot
from lakescope.sources.base import BaseSource
from lakescope.utils.result import FetchResult

logger = logging.getLogger(__name__)

CURRENT_FIELDS = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
    "visibility",
    "uv_index",
    "is_day",
]

HOURLY_FIELDS = [
    "temperature_2m",
    "weather_code",
    "precipitation_probability",
    "wind_speed_10m",
]

DAILY_FIELDS = [
    "sunrise",
    "sunset",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_probability_max",
    "weather_code",
    "wind_speed_10m_max",
    "uv_index_max",
]


def build_forecast_params(
    lat: float = config.DEFAULT_LAT,
    lng: float = config.DEFAULT_LNG,
    forecast_days: int = config.DEFAULT_FORECAST_DAYS,
) -> dict[str, str]:
    """Query parameters for a forecast in US units and lake-local time.

    Example:
        >>> build_forecast_params()["temperature_unit"]
        'fahrenheit'
    """
    return {
        "latitude": str(lat),
        "longitude": str(lng),
        "current": ",".join(CURRENT_FIELDS),
        "hourly": ",".join(HOURLY_FIELDS),
        "daily": ",".join(DAILY_FIELDS),
        "temperature_unit": "fahrenheit",
        "wind_speed_unit": "mph",
        "precipitation_unit": "inch",
        "timezone": config.TIMEZONE,
        "forecast_days": str(forecast_days),
    }


class OpenMeteoClient(BaseSource):
    """Current conditions and daily forecast for a location."""

    SOURCE_NAME = "Open-Meteo"

    def __init__(self, base_url: str = config.OPEN_METEO_URL, **kwargs):
        super().__init__(**kwargs)
        self.base_url = base_url

    def fetch_forecast(
        self,
        lat: float = config.DEFAULT_LAT,
        lng: float = config.DEFAULT_LNG,
        forecast_days: int = config.DEFAULT_FORECAST_DAYS,
    ) -> FetchResult[dict]:
        """Raw forecast payload annotated with a "meta" block."""
        logger.info(f"Fetching Open-Meteo forecast for ({lat}, {lng}), {forecast_days} days")
        result = self._request_json(
            "GET", self.base_url, params=build_forecast_params(lat, lng, forecast_days)
        )
        if not result.ok:
            return result

        return FetchResult.success(
            {
                **result.value,
                "meta": {
                    "source": "Open-Meteo",
                    "location": {"lat": lat, "lng": lng},
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                },
            }
        )

    def fetch_snapshot(
        self, lat: float = config.DEFAULT_LAT, lng: float = config.DEFAULT_LNG
    ) -> FetchResult[WeatherSnapshot]:
        """Current conditions as a WeatherSnapshot."""
        return self.fetch_forecast(lat, lng, 1).map(WeatherSnapshot.from_open_meteo)

    def fetch_daily(
        self,
        lat: float = config.DEFAULT_LAT,
        lng: float = config.DEFAULT_LNG,
        forecast_days: int = config.DEFAULT_FORECAST_DAYS,
    ) -> FetchResult[list[DayForecast]]:
        """Rated daily outlook for the recreation planner."""
        return self.fetch_forecast(lat, lng, forecast_days).map(parse_daily_forecast)

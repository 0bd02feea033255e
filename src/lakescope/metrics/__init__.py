"""Derived lake metrics.

Pure functions over lake elevation, weather and time:

- Flood: flood_impact, flood_impact_table
- Boat ramps: ramp_status, summarize_ramps, low_water_advisory
- Astronomy: moon_phase, lunar_day, sun_windows, solunar_periods
- Weather: WeatherSnapshot, describe_weather_code, wind_direction, wind_advisory,
  uv_band, parse_hourly_forecast
- Fishing: score_fishing_conditions, assess_fishing
- Recreation: rate_recreation_day, recreation_score, parse_daily_forecast
- Water level: latest_water_level, water_level_history, simulated_water_level_history
"""

from lakescope.metrics.astronomy import (
    MoonPhase,
    MoonPhaseInfo,
    SolunarPeriod,
    SunWindows,
    TimeWindow,
    format_hour,
    lunar_day,
    moon_phase,
    solunar_periods,
    sun_windows,
)
from lakescope.metrics.boat_ramps import (
    BoatRampStatus,
    RampState,
    RampSummary,
    low_water_advisory,
    ramp_status,
    summarize_ramps,
)
from lakescope.metrics.fishing import (
    DEFAULT_FISHING_CONDITIONS,
    Activity,
    FactorStatus,
    FishingConditions,
    FishingFactor,
    SpeciesActivity,
    assess_fishing,
    rate_score,
    score_fishing_conditions,
)
from lakescope.metrics.flood import FloodImpactResult, flood_impact, flood_impact_table
from lakescope.metrics.recreation import (
    DayForecast,
    describe_weather_category,
    parse_daily_forecast,
    rate_recreation_day,
    recreation_score,
)
from lakescope.metrics.water_level import (
    TIME_RANGES,
    ElevationReading,
    WaterLevelHistory,
    WaterLevelStatus,
    latest_water_level,
    simulated_water_level_history,
    water_level_history,
)
from lakescope.metrics.weather import (
    HourlyForecast,
    WeatherSnapshot,
    describe_weather_code,
    hpa_to_inhg,
    meters_to_miles,
    parse_hourly_forecast,
    uv_band,
    wind_advisory,
    wind_direction,
)

__all__ = [
    "Activity",
    "BoatRampStatus",
    "DEFAULT_FISHING_CONDITIONS",
    "DayForecast",
    "ElevationReading",
    "FactorStatus",
    "FishingConditions",
    "FishingFactor",
    "FloodImpactResult",
    "HourlyForecast",
    "MoonPhase",
    "MoonPhaseInfo",
    "RampState",
    "RampSummary",
    "SolunarPeriod",
    "SpeciesActivity",
    "SunWindows",
    "TIME_RANGES",
    "TimeWindow",
    "WaterLevelHistory",
    "WaterLevelStatus",
    "WeatherSnapshot",
    "assess_fishing",
    "describe_weather_category",
    "describe_weather_code",
    "flood_impact",
    "flood_impact_table",
    "format_hour",
    "hpa_to_inhg",
    "latest_water_level",
    "low_water_advisory",
    "meters_to_miles",
    "lunar_day",
    "moon_phase",
    "parse_daily_forecast",
    "parse_hourly_forecast",
    "ramp_status",
    "rate_recreation_day",
    "rate_score",
    "recreation_score",
    "score_fishing_conditions",
    "simulated_water_level_history",
    "solunar_periods",
    "summarize_ramps",
    "sun_windows",
    "uv_band",
    "water_level_history",
    "wind_advisory",
    "wind_direction",
]

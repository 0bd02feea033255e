"""Water level analytics from USGS instantaneous-values responses.

USGS returns readings under value.timeSeries[0].values[0].value as a list of
{"value": "599.12", "dateTime": "2024-06-01T10:15:00.000-05:00"} records.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import numpy as np
import pandas as pd

from lakescope.lake.profile import SARDIS_LAKE

logger = logging.getLogger(__name__)

# Dashboard time range -> (days, USGS ISO-8601 period)
TIME_RANGES = {
    "7d": (7, "P7D"),
    "30d": (30, "P30D"),
    "90d": (90, "P90D"),
    "1y": (365, "P365D"),
}

ELEVATED_MARGIN_FT = 5
LOW_MARGIN_FT = 10
TREND_THRESHOLD_FT = 0.1
MAX_CHART_POINTS = 100

# Simulated series
SIMULATED_BASE_LEVEL_FT = 598.5
SIMULATED_SEASONAL_AMPLITUDE_FT = 2.0
SIMULATED_NOISE_FT = 0.75


@dataclass(frozen=True)
class ElevationReading:
    """One USGS gauge reading: elevation in ft and its timestamp string."""

    value: float
    timestamp: str

    @classmethod
    def from_usgs(cls, record: dict[str, Any]) -> "ElevationReading":
        """Parse a {"value": "599.12", "dateTime": "..."} record.

        Raises:
            ValueError: If the value is missing or not numeric.
        """
        try:
            value = float(record["value"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"USGS reading has no numeric value: {record!r}") from e
        return cls(value=value, timestamp=record.get("dateTime", ""))


@dataclass(frozen=True)
class WaterLevelStatus:
    """Latest reading with status and short-term trend.

    Attributes:
        value: Latest elevation in ft
        date_time: Timestamp string of the latest reading
        status: "normal", "elevated" or "low"
        trend: "rising", "falling" or "stable"
        change_24h: Latest minus first reading in the window
        percent_capacity: Conservation-pool fill percentage
    """

    value: float
    date_time: str
    status: str
    trend: str
    change_24h: float
    percent_capacity: float

    @property
    def reading(self) -> ElevationReading:
        return ElevationReading(value=self.value, timestamp=self.date_time)


@dataclass
class WaterLevelHistory:
    """Sampled elevation series for charting."""

    points: pd.DataFrame
    stats: dict[str, float] = field(default_factory=dict)
    is_simulated: bool = False

    def to_records(self) -> list[dict]:
        return [
            {"date": row.date, "value": row.value}
            for row in self.points.itertuples(index=False)
        ]


def _series_values(usgs_payload: dict[str, Any]) -> list[dict]:
    try:
        values = usgs_payload["value"]["timeSeries"][0]["values"][0]["value"]
    except (KeyError, IndexError, TypeError) as e:
        raise ValueError(f"USGS payload has no time series values: {e}") from e
    if not values:
        raise ValueError("USGS payload has an empty time series")
    return values


def classify_level(value: float, normal_pool: float) -> str:
    """Classify an elevation against normal pool.

    Examples:
        >>> classify_level(605, 599)
        'elevated'
        >>> classify_level(588, 599)
        'low'
    """
    if value > normal_pool + ELEVATED_MARGIN_FT:
        return "elevated"
    if value < normal_pool - LOW_MARGIN_FT:
        return "low"
    return "normal"


def classify_trend(change: float) -> str:
    if change > TREND_THRESHOLD_FT:
        return "rising"
    if change < -TREND_THRESHOLD_FT:
        return "falling"
    return "stable"


def latest_water_level(
    usgs_payload: dict[str, Any],
    normal_pool: float = SARDIS_LAKE.normal_pool_elevation,
    streambed: float = SARDIS_LAKE.stream_bed_elevation,
) -> WaterLevelStatus:
    """Latest reading, status and trend from a USGS response.

    The latest reading is the last value and the comparison reading is the
    first, so the change spans whatever period was requested.

    Raises:
        ValueError: If the payload carries no readings.
    """
    values = _series_values(usgs_payload)
    latest = ElevationReading.from_usgs(values[-1])
    previous = ElevationReading.from_usgs(values[0]) if len(values) > 1 else latest

    current = latest.value
    change = current - previous.value

    return WaterLevelStatus(
        value=current,
        date_time=latest.timestamp,
        status=classify_level(current, normal_pool),
        trend=classify_trend(change),
        change_24h=change,
        percent_capacity=(current - streambed) / (normal_pool - streambed) * 100,
    )


def _history_stats(values: pd.Series) -> dict[str, float]:
    return {
        "min": float(values.min()),
        "max": float(values.max()),
        "avg": float(values.mean()),
        "current": float(values.iloc[-1]),
        "change": float(values.iloc[-1] - values.iloc[0]),
    }


def water_level_history(usgs_payload: dict[str, Any]) -> WaterLevelHistory:
    """Sample a USGS series down to about 100 points and compute stats.

    Raises:
        ValueError: If the payload carries no readings.
    """
    values = _series_values(usgs_payload)
    df = pd.DataFrame(
        {
            "date": [v.get("dateTime", "") for v in values],
            "value": pd.to_numeric([v.get("value") for v in values], errors="coerce"),
        }
    )

    sample_rate = max(1, len(df) // MAX_CHART_POINTS)
    sampled = df.iloc[::sample_rate].reset_index(drop=True)
    sampled = sampled.dropna(subset=["value"])
    if sampled.empty:
        raise ValueError("USGS series has no numeric readings")

    return WaterLevelHistory(points=sampled, stats=_history_stats(sampled["value"]))


def simulated_water_level_history(
    time_range: str = "30d",
    now: Optional[datetime] = None,
    seed: Optional[int] = None,
) -> WaterLevelHistory:
    """Synthetic daily series used when USGS history is unavailable.

    Each point is a base level plus a sinusoidal seasonal term keyed on the
    calendar month plus uniform noise, rounded to 2 decimals.

    Args:
        time_range: One of TIME_RANGES
        now: End of the series. Defaults to the current UTC time.
        seed: Seed for reproducible noise

    Returns:
        WaterLevelHistory with is_simulated=True

    Raises:
        ValueError: If time_range is not recognised
    """
    if time_range not in TIME_RANGES:
        raise ValueError(f"Unknown time range: {time_range}. Choose from {list(TIME_RANGES)}")

    days, _ = TIME_RANGES[time_range]
    now = now or datetime.now(timezone.utc)
    rng = np.random.default_rng(seed)

    dates = [now - timedelta(days=i) for i in range(days, -1, -1)]
    months = np.array([d.month - 1 for d in dates])
    seasonal = np.sin(months / 12 * 2 * np.pi) * SIMULATED_SEASONAL_AMPLITUDE_FT
    noise = rng.uniform(-SIMULATED_NOISE_FT, SIMULATED_NOISE_FT, size=len(dates))
    values = np.round(SIMULATED_BASE_LEVEL_FT + seasonal + noise, 2)

    points = pd.DataFrame({"date": [d.isoformat() for d in dates], "value": values})
    logger.info(f"Generated {len(points)} simulated water level points for {time_range}")

    return WaterLevelHistory(
        points=points, stats=_history_stats(points["value"]), is_simulated=True
    )

"""Tests for water level analytics."""

from datetime import datetime, timezone

import pandas as pd
import pytest

from lakescope.metrics.water_level import (
    TIME_RANGES,
    ElevationReading,
    classify_level,
    classify_trend,
    latest_water_level,
    simulated_water_level_history,
    water_level_history,
)


class TestClassify:
    """Tests for classify_level() and classify_trend()."""

    @pytest.mark.parametrize(
        "value,status",
        [(599, "normal"), (604, "normal"), (604.1, "elevated"), (589, "normal"), (588.9, "low")],
    )
    def test_level(self, value, status):
        assert classify_level(value, 599) == status

    @pytest.mark.parametrize(
        "change,trend", [(0.5, "rising"), (0.1, "stable"), (0.0, "stable"), (-0.1, "stable"), (-0.2, "falling")]
    )
    def test_trend(self, change, trend):
        assert classify_trend(change) == trend


class TestLatestWaterLevel:
    """Tests for latest_water_level()."""

    def test_latest_reading(self, usgs_payload):
        status = latest_water_level(usgs_payload)
        assert status.value == pytest.approx(599.41)
        assert status.date_time == "2024-06-05T12:00:00.000-05:00"
        assert status.status == "normal"
        assert status.trend == "rising"
        assert status.change_24h == pytest.approx(0.31)
        assert status.percent_capacity == pytest.approx((599.41 - 530) / 69 * 100)

    def test_single_reading_is_stable(self, usgs_payload):
        series = usgs_payload["value"]["timeSeries"][0]["values"][0]
        series["value"] = series["value"][-1:]
        status = latest_water_level(usgs_payload)
        assert status.change_24h == 0
        assert status.trend == "stable"

    def test_empty_payload_raises(self):
        with pytest.raises(ValueError):
            latest_water_level({"value": {"timeSeries": []}})

    def test_empty_series_raises(self, usgs_payload):
        usgs_payload["value"]["timeSeries"][0]["values"][0]["value"] = []
        with pytest.raises(ValueError):
            latest_water_level(usgs_payload)

    def test_reading(self, usgs_payload):
        reading = latest_water_level(usgs_payload).reading
        assert reading == ElevationReading(599.41, "2024-06-05T12:00:00.000-05:00")

    def test_reading_without_value_raises(self, usgs_payload):
        series = usgs_payload["value"]["timeSeries"][0]["values"][0]
        series["value"][-1] = {"dateTime": "2024-06-05T12:00:00.000-05:00"}
        with pytest.raises(ValueError):
            latest_water_level(usgs_payload)


class TestElevationReading:
    """Tests for ElevationReading.from_usgs()."""

    def test_parses_record(self):
        reading = ElevationReading.from_usgs({"value": "599.12", "dateTime": "2024-06-01T10:15:00.000-05:00"})
        assert reading.value == pytest.approx(599.12)
        assert reading.timestamp == "2024-06-01T10:15:00.000-05:00"

    def test_missing_timestamp_is_empty(self):
        assert ElevationReading.from_usgs({"value": 600}).timestamp == ""

    @pytest.mark.parametrize("record", [{}, {"value": None}, {"value": "n/a"}])
    def test_bad_value_raises(self, record):
        with pytest.raises(ValueError):
            ElevationReading.from_usgs(record)

    def test_frozen(self):
        reading = ElevationReading(599.0, "")
        with pytest.raises(AttributeError):
            reading.value = 600.0


class TestWaterLevelHistory:
    """Tests for water_level_history()."""

    def test_small_series_kept_whole(self, usgs_payload):
        history = water_level_history(usgs_payload)
        assert len(history.points) == 5
        assert history.is_simulated is False
        assert history.stats["min"] == pytest.approx(599.10)
        assert history.stats["max"] == pytest.approx(599.41)
        assert history.stats["current"] == pytest.approx(599.41)
        assert history.stats["change"] == pytest.approx(0.31)

    def test_large_series_sampled(self, usgs_payload):
        readings = [
            {"value": f"{599 + (i % 10) / 100:.2f}", "dateTime": f"t{i}"} for i in range(1000)
        ]
        usgs_payload["value"]["timeSeries"][0]["values"][0]["value"] = readings
        history = water_level_history(usgs_payload)
        assert len(history.points) == 100
        assert history.points["date"].iloc[1] == "t10"

    def test_non_numeric_readings_dropped(self, usgs_payload):
        series = usgs_payload["value"]["timeSeries"][0]["values"][0]["value"]
        series[1]["value"] = "Ice"
        history = water_level_history(usgs_payload)
        assert len(history.points) == 4

    def test_to_records(self, usgs_payload):
        records = water_level_history(usgs_payload).to_records()
        assert records[0]["date"] == "2024-06-01T12:00:00.000-05:00"
        assert records[0]["value"] == pytest.approx(599.10)


class TestSimulatedHistory:
    """Tests for simulated_water_level_history()."""

    @pytest.mark.parametrize("time_range", list(TIME_RANGES))
    def test_values_within_simulated_range(self, time_range):
        history = simulated_water_level_history(time_range)
        assert history.points["value"].between(595.75, 601.25).all()

    def test_one_point_per_day_inclusive(self):
        history = simulated_water_level_history("7d")
        assert len(history.points) == 8
        assert history.is_simulated is True

    def test_ends_at_now(self):
        now = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
        history = simulated_water_level_history("30d", now=now)
        assert history.points["date"].iloc[-1] == now.isoformat()
        assert pd.Timestamp(history.points["date"].iloc[0]) < pd.Timestamp(now)

    def test_seed_reproducible(self):
        now = datetime(2024, 6, 15, tzinfo=timezone.utc)
        a = simulated_water_level_history("30d", now=now, seed=7)
        b = simulated_water_level_history("30d", now=now, seed=7)
        pd.testing.assert_frame_equal(a.points, b.points)

    def test_stats_match_points(self):
        history = simulated_water_level_history("90d", seed=1)
        assert history.stats["min"] == history.points["value"].min()
        assert history.stats["max"] == history.points["value"].max()

    def test_unknown_range_raises(self):
        with pytest.raises(ValueError, match="Unknown time range"):
            simulated_water_level_history("2w")

"""Tests for weather parsing helpers."""

import pytest

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


class TestWeatherCodes:
    """Tests for describe_weather_code()."""

    @pytest.mark.parametrize(
        "code,text",
        [(0, "Clear sky"), (3, "Overcast"), (63, "Moderate rain"), (95, "Thunderstorm"), (7, "Unknown")],
    )
    def test_descriptions(self, code, text):
        assert describe_weather_code(code) == text


class TestWindDirection:
    """Tests for wind_direction()."""

    @pytest.mark.parametrize(
        "degrees,label",
        [(0, "N"), (11, "N"), (12, "NNE"), (90, "E"), (180, "S"), (270, "W"), (348.75, "N"), (360, "N")],
    )
    def test_compass(self, degrees, label):
        assert wind_direction(degrees) == label


class TestPressure:
    def test_standard_atmosphere(self):
        """1013.25 hPa is about 29.92 inHg."""
        assert hpa_to_inhg(1013.25) == pytest.approx(29.92, abs=0.01)


class TestWeatherSnapshot:
    """Tests for WeatherSnapshot.from_open_meteo()."""

    def test_parses_current_block(self, open_meteo_payload):
        snap = WeatherSnapshot.from_open_meteo(open_meteo_payload)
        assert snap.temperature == 74.2
        assert snap.pressure == 1020.0
        assert snap.wind_speed == 10.0
        assert snap.cloud_cover == 55
        assert snap.weather_code == 2
        assert snap.description == "Partly cloudy"
        assert snap.precipitation_probability == 15
        assert snap.is_day is True
        assert snap.pressure_inhg == pytest.approx(30.12, abs=0.01)

    def test_missing_current_raises(self):
        with pytest.raises(ValueError):
            WeatherSnapshot.from_open_meteo({"hourly": {}})

    def test_missing_field_raises(self, open_meteo_payload):
        del open_meteo_payload["current"]["pressure_msl"]
        with pytest.raises(ValueError):
            WeatherSnapshot.from_open_meteo(open_meteo_payload)

    def test_no_hourly_means_no_precip_probability(self, open_meteo_payload):
        del open_meteo_payload["hourly"]
        assert WeatherSnapshot.from_open_meteo(open_meteo_payload).precipitation_probability is None


class TestWindAdvisory:
    """Tests for wind_advisory()."""

    def test_gusts_take_priority(self):
        advisory = wind_advisory(WeatherSnapshot(70, 1013, 18, 20, wind_gusts=26))
        assert advisory.startswith("Strong wind gusts up to 26 mph")

    def test_sustained_wind(self):
        advisory = wind_advisory(WeatherSnapshot(70, 1013, 18, 20))
        assert advisory == "Winds 18 mph. Check conditions before heading out."

    def test_light_air(self):
        assert wind_advisory(WeatherSnapshot(70, 1013, 8, 20)) is None


class TestUvBand:
    """Tests for uv_band()."""

    @pytest.mark.parametrize(
        "uv,band",
        [
            (0, "Low"), (2.9, "Low"), (3, "Moderate"), (5.9, "Moderate"),
            (6, "High"), (7.9, "High"), (8, "Very High"), (11, "Very High"),
        ],
    )
    def test_bands(self, uv, band):
        assert uv_band(uv) == band


class TestVisibility:
    def test_meters_to_miles(self):
        assert meters_to_miles(1609.34) == pytest.approx(1.0)

    def test_snapshot_visibility_miles(self, open_meteo_payload):
        snap = WeatherSnapshot.from_open_meteo(open_meteo_payload)
        assert snap.visibility == 16000
        assert snap.visibility_miles == pytest.approx(9.94, abs=0.01)

    def test_missing_visibility(self):
        assert WeatherSnapshot(70, 1013, 8, 20).visibility_miles is None


class TestHourlyForecast:
    """Tests for parse_hourly_forecast()."""

    @pytest.fixture
    def day_of_hours(self, open_meteo_payload) -> dict:
        open_meteo_payload["hourly"] = {
            "time": [f"2024-06-03T{h:02d}:00" for h in range(24)],
            "temperature_2m": [60.0 + h for h in range(24)],
            "weather_code": [1] * 24,
            "precipitation_probability": [h * 2 for h in range(24)],
        }
        return open_meteo_payload

    def test_first_entries_without_current_time(self, open_meteo_payload):
        hours = parse_hourly_forecast(open_meteo_payload)
        assert hours == [
            HourlyForecast("2024-06-03T00:00", 70.1, 2, 15),
            HourlyForecast("2024-06-03T01:00", 69.5, 2, 20),
        ]
        assert hours[0].description == "Partly cloudy"

    def test_limited_to_eight_hours(self, day_of_hours):
        assert len(parse_hourly_forecast(day_of_hours)) == 8
        assert len(parse_hourly_forecast(day_of_hours, hours=3)) == 3

    def test_starts_at_current_hour(self, day_of_hours):
        day_of_hours["current"]["time"] = "2024-06-03T14:45"
        hours = parse_hourly_forecast(day_of_hours)
        assert hours[0].time == "2024-06-03T14:00"
        assert hours[0].temperature == 74.0
        assert hours[-1].time == "2024-06-03T21:00"

    def test_truncated_near_end_of_data(self, day_of_hours):
        day_of_hours["current"]["time"] = "2024-06-03T21:15"
        assert [h.time[11:13] for h in parse_hourly_forecast(day_of_hours)] == ["21", "22", "23"]

    def test_missing_optional_arrays(self, day_of_hours):
        del day_of_hours["hourly"]["weather_code"]
        del day_of_hours["hourly"]["precipitation_probability"]
        first = parse_hourly_forecast(day_of_hours)[0]
        assert first.weather_code == 0
        assert first.precipitation_probability is None

    def test_missing_hourly_raises(self, open_meteo_payload):
        del open_meteo_payload["hourly"]
        with pytest.raises(KeyError):
            parse_hourly_forecast(open_meteo_payload)

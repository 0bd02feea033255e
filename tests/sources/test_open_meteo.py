"""Tests for the Open-Meteo client."""

from unittest.mock import patch

import pytest

from lakescope.sources.open_meteo import OpenMeteoClient, build_forecast_params


@pytest.fixture
def client() -> OpenMeteoClient:
    return OpenMeteoClient(base_url="http://meteo.test/v1/forecast", max_retries=1, retry_delay=0)


class TestBuildForecastParams:
    def test_units_and_timezone(self):
        params = build_forecast_params(34.5, -95.5, 3)
        assert params["latitude"] == "34.5"
        assert params["longitude"] == "-95.5"
        assert params["forecast_days"] == "3"
        assert params["temperature_unit"] == "fahrenheit"
        assert params["wind_speed_unit"] == "mph"
        assert params["precipitation_unit"] == "inch"
        assert params["timezone"] == "America/Chicago"
        assert "sunrise" in params["daily"].split(",")
        assert "pressure_msl" in params["current"].split(",")


class TestOpenMeteoClient:
    """Tests for OpenMeteoClient fetches."""

    def test_fetch_forecast_adds_meta(self, client, mock_response, open_meteo_payload):
        with patch(
            "lakescope.sources.base.requests.get", return_value=mock_response(open_meteo_payload)
        ) as get:
            result = client.fetch_forecast(34.6619, -95.389, 7)

        assert result.ok
        meta = result.value["meta"]
        assert meta["source"] == "Open-Meteo"
        assert meta["location"] == {"lat": 34.6619, "lng": -95.389}
        assert result.value["current"]["temperature_2m"] == 74.2
        assert get.call_args.args[0] == "http://meteo.test/v1/forecast"

    def test_fetch_snapshot(self, client, mock_response, open_meteo_payload):
        with patch(
            "lakescope.sources.base.requests.get", return_value=mock_response(open_meteo_payload)
        ) as get:
            result = client.fetch_snapshot()

        assert result.ok
        assert result.value.wind_speed == 10.0
        assert get.call_args.kwargs["params"]["forecast_days"] == "1"

    def test_fetch_snapshot_bad_payload(self, client, mock_response):
        with patch("lakescope.sources.base.requests.get", return_value=mock_response({"daily": {}})):
            result = client.fetch_snapshot()

        assert not result.ok
        assert result.error.source == "parse"

    def test_fetch_daily(self, client, mock_response, open_meteo_payload):
        with patch(
            "lakescope.sources.base.requests.get", return_value=mock_response(open_meteo_payload)
        ):
            result = client.fetch_daily()

        assert result.ok
        assert [d.rating for d in result.value] == ["Excellent", "Good", "Poor"]

    def test_upstream_failure(self, client, mock_response):
        with patch("lakescope.sources.base.requests.get", return_value=mock_response(None, 500)):
            result = client.fetch_daily()

        assert not result.ok
        assert result.error.source == "Open-Meteo"
        assert result.error.status_code == 500

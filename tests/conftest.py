"""Shared pytest fixtures for lakescope tests.

Test Tiers:
- unit: Fast tests with fixtures, no network (default)
- integration: Tests wiring several components with mocked upstreams
- live: Real API tests, slow, requires network

Run live tests with: pytest -m live --run-live
"""

from unittest.mock import MagicMock

import pytest
import requests


def pytest_addoption(parser):
    """Add command line options for test configuration."""
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Run live API tests (slow, requires network)",
    )


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: fast unit tests using fixtures")
    config.addinivalue_line("markers", "integration: tests with mocked upstream responses")
    config.addinivalue_line("markers", "live: real API tests (slow, requires network)")


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless --run-live is specified."""
    if config.getoption("--run-live"):
        return

    skip_live = pytest.mark.skip(reason="need --run-live option to run")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


def _make_response(payload=None, status_code: int = 200) -> MagicMock:
    """Mock requests.Response returning payload from .json()."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def mock_response():
    """Factory for mock requests.Response objects."""
    return _make_response


@pytest.fixture
def usgs_payload() -> dict:
    """USGS instantaneous-values response with five readings."""
    readings = [599.10, 599.15, 599.22, 599.30, 599.41]
    return {
        "value": {
            "timeSeries": [
                {
                    "sourceInfo": {"siteName": "SARDIS LAKE NEAR CLAYTON, OK"},
                    "values": [
                        {
                            "value": [
                                {
                                    "value": f"{v:.2f}",
                                    "dateTime": f"2024-06-0{i + 1}T12:00:00.000-05:00",
                                }
                                for i, v in enumerate(readings)
                            ]
                        }
                    ],
                }
            ]
        }
    }


@pytest.fixture
def open_meteo_payload() -> dict:
    """Open-Meteo forecast with current, hourly and three daily entries."""
    return {
        "latitude": 34.66,
        "longitude": -95.39,
        "current": {
            "temperature_2m": 74.2,
            "relative_humidity_2m": 61,
            "apparent_temperature": 75.0,
            "precipitation": 0.0,
            "weather_code": 2,
            "cloud_cover": 55,
            "pressure_msl": 1020.0,
            "wind_speed_10m": 10.0,
            "wind_direction_10m": 180,
            "wind_gusts_10m": 14.0,
            "visibility": 16000,
            "uv_index": 6.1,
            "is_day": 1,
        },
        "hourly": {
            "time": ["2024-06-03T00:00", "2024-06-03T01:00"],
            "temperature_2m": [70.1, 69.5],
            "weather_code": [2, 2],
            "precipitation_probability": [15, 20],
            "wind_speed_10m": [9.0, 8.5],
        },
        "daily": {
            "time": ["2024-06-03", "2024-06-04", "2024-06-05"],
            "sunrise": ["2024-06-03T06:12", "2024-06-04T06:12", "2024-06-05T06:11"],
            "sunset": ["2024-06-03T20:31", "2024-06-04T20:32", "2024-06-05T20:32"],
            "temperature_2m_max": [78.4, 92.6, 66.0],
            "temperature_2m_min": [64.5, 70.2, 55.1],
            "precipitation_probability_max": [10, 30, 80],
            "weather_code": [1, 3, 95],
            "wind_speed_10m_max": [8.2, 16.5, 27.0],
            "uv_index_max": [7.5, 8.4, 3.2],
        },
    }


@pytest.fixture
def overpass_payload() -> dict:
    """Overpass response with one way and one two-segment relation."""
    return {
        "elements": [
            {
                "type": "way",
                "id": 111,
                "tags": {"natural": "water", "name": "Sardis Lake"},
                "geometry": [
                    {"lat": 34.65, "lon": -95.40},
                    {"lat": 34.65, "lon": -95.35},
                    {"lat": 34.69, "lon": -95.35},
                    {"lat": 34.69, "lon": -95.40},
                ],
            },
            {
                "type": "relation",
                "id": 222,
                "tags": {"water": "reservoir", "name": "Sardis Reservoir"},
                "members": [
                    {
                        "type": "way",
                        "role": "outer",
                        "geometry": [
                            {"lat": 34.60, "lon": -95.50},
                            {"lat": 34.60, "lon": -95.45},
                        ],
                    },
                    {
                        "type": "way",
                        "role": "outer",
                        "geometry": [
                            {"lat": 34.63, "lon": -95.45},
                            {"lat": 34.60, "lon": -95.45},
                        ],
                    },
                    {
                        "type": "way",
                        "role": "inner",
                        "geometry": [
                            {"lat": 34.61, "lon": -95.48},
                            {"lat": 34.62, "lon": -95.47},
                        ],
                    },
                ],
            },
            {"type": "node", "id": 333, "lat": 34.6, "lon": -95.4},
        ]
    }

"""Tests for the lakescope command line."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from lakescope import __version__
from lakescope.cli import main, print_conditions
from lakescope.metrics.weather import WeatherSnapshot
from lakescope.utils.result import FetchResult

FULL_MOON = datetime(2000, 1, 21, 12, 0, tzinfo=timezone.utc)


class TestPrintConditions:
    """Tests for print_conditions()."""

    def test_offline_flood_figures(self, capsys):
        print_conditions(610, 68, offline=True, when=FULL_MOON)
        out = capsys.readouterr().out

        assert "Sardis Lake at 610.0 ft (normal pool 599 ft)" in out
        assert "Additional acres: 1980" in out
        assert "Structures:       72" in out
        assert "Evacuation zone:  2 sq mi" in out

    def test_offline_uses_typical_fishing(self, capsys):
        print_conditions(599, 68, offline=True, when=FULL_MOON)
        out = capsys.readouterr().out

        assert "Score: 60/100 Fair (typical conditions)" in out
        assert "Full Moon" in out
        assert "Major: 4pm-6pm, 4am-6am" in out
        assert "Recreation" not in out

    def test_low_water_advisory(self, capsys):
        print_conditions(589, 68, offline=True, when=FULL_MOON)
        out = capsys.readouterr().out
        assert "! Water levels are 10.0 ft below normal." in out

    def test_online_scores_weather(self, capsys):
        snapshot = WeatherSnapshot(
            temperature=78, pressure=1020, wind_speed=8, cloud_cover=55,
            precipitation_probability=10, weather_code=1,
        )
        with patch("lakescope.cli.OpenMeteoClient") as client_cls:
            client_cls.return_value.fetch_snapshot.return_value = FetchResult.success(snapshot)
            print_conditions(599, 70, when=FULL_MOON)
        out = capsys.readouterr().out

        assert "(typical conditions)" not in out
        assert "Recreation:" in out
        assert "Score: 115 (Excellent)" in out

    def test_online_weather_down_falls_back(self, capsys):
        with patch("lakescope.cli.OpenMeteoClient") as client_cls:
            client_cls.return_value.fetch_snapshot.return_value = FetchResult.failure("Open-Meteo", "down")
            print_conditions(599, 70, when=FULL_MOON)
        out = capsys.readouterr().out

        assert "(typical conditions)" in out
        assert "Recreation:" not in out


class TestMain:
    def test_conditions_offline(self, capsys):
        assert main(["-q", "conditions", "--offline", "--elevation", "610"]) == 0
        assert "Structures:       72" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])

    def test_serve_runs_uvicorn(self):
        with patch("uvicorn.run") as run:
            assert main(["-q", "serve", "--port", "9000"]) == 0
        run.assert_called_once_with("lakescope.api.app:app", host="127.0.0.1", port=9000, reload=False)

    def test_dashboard_runs_streamlit(self):
        with patch("lakescope.cli.subprocess.call", return_value=0) as call:
            assert main(["-q", "dashboard"]) == 0
        command = call.call_args.args[0]
        assert command[1:4] == ["-m", "streamlit", "run"]
        assert command[4].endswith("app.py")

"""Tests for boat ramp accessibility."""

import pytest

from lakescope.lake import SARDIS_BOAT_RAMPS, BoatRamp
from lakescope.metrics.boat_ramps import (
    ALL_VESSELS,
    MOST_VESSELS,
    SMALL_CRAFT,
    RampState,
    low_water_advisory,
    ramp_status,
    summarize_ramps,
)
from lakescope.utils.geo import Point


@pytest.fixture
def ramp() -> BoatRamp:
    """Ramp usable from 590 ft, optimal at 595 ft."""
    return BoatRamp(
        id="test",
        name="Test Ramp",
        location="North shore",
        min_elevation=590,
        optimal_elevation=595,
        coordinates=Point(34.68, -95.40),
    )


class TestRampStatus:
    """Tests for ramp_status()."""

    def test_above_optimal_is_fully_open(self, ramp):
        """596 ft: open for all vessels."""
        status = ramp_status(596, ramp)
        assert status.status is RampState.OPEN
        assert status.message == "Fully operational - optimal conditions"
        assert status.launchable_vessel_classes == ALL_VESSELS

    def test_at_optimal_is_fully_open(self, ramp):
        assert ramp_status(595, ramp).launchable_vessel_classes == ALL_VESSELS

    def test_three_feet_above_min_is_good(self, ramp):
        """593 ft: open for most boats."""
        status = ramp_status(593, ramp)
        assert status.status is RampState.OPEN
        assert status.message == "Accessible - good conditions"
        assert status.launchable_vessel_classes == MOST_VESSELS

    def test_just_above_min_is_limited(self, ramp):
        """592 ft: small craft only."""
        status = ramp_status(592, ramp)
        assert status.status is RampState.LIMITED
        assert status.message == "Limited access - 2.0 ft above minimum"
        assert status.launchable_vessel_classes == SMALL_CRAFT

    def test_at_min_is_limited(self, ramp):
        assert ramp_status(590, ramp).status is RampState.LIMITED

    def test_below_min_is_closed(self, ramp):
        """588 ft: nothing launches."""
        status = ramp_status(588, ramp)
        assert status.status is RampState.CLOSED
        assert status.message == "Closed - water 2.0 ft below minimum"
        assert status.launchable_vessel_classes == ()


class TestLowWaterAdvisory:
    """Tests for low_water_advisory()."""

    def test_none_within_five_feet(self):
        assert low_water_advisory(594, 599) is None
        assert low_water_advisory(599, 599) is None

    def test_text_when_more_than_five_feet_low(self):
        advisory = low_water_advisory(592.5, 599)
        assert advisory.startswith("Water levels are 6.5 ft below normal.")


class TestSummarizeRamps:
    """Tests for summarize_ramps()."""

    def test_normal_pool_everything_open(self):
        """At normal pool every Sardis ramp is open."""
        summary = summarize_ramps(599, 599, SARDIS_BOAT_RAMPS)
        assert summary.counts == {"open": 5, "limited": 0, "closed": 0}
        assert summary.advisory is None
        assert summary.gauge_percent == 100
        assert summary.level_band == "normal"

    def test_low_water(self):
        """At 589 ft some ramps close and the advisory shows."""
        summary = summarize_ramps(589, 599, SARDIS_BOAT_RAMPS)
        assert sum(summary.counts.values()) == len(SARDIS_BOAT_RAMPS)
        assert summary.counts["closed"] == 3
        assert summary.advisory is not None
        assert summary.level_band == "low"
        assert summary.gauge_percent == pytest.approx(28.571, abs=0.01)

    def test_watch_band(self):
        assert summarize_ramps(597, 599, SARDIS_BOAT_RAMPS).level_band == "watch"

    def test_gauge_clamped(self):
        """Gauge stays within 0-100 outside the ramp range."""
        assert summarize_ramps(620, 599, SARDIS_BOAT_RAMPS).gauge_percent == 100
        assert summarize_ramps(570, 599, SARDIS_BOAT_RAMPS).gauge_percent == 0

    def test_statuses_keep_catalogue_order(self):
        summary = summarize_ramps(599, 599, SARDIS_BOAT_RAMPS)
        assert [s.ramp.id for s in summary.statuses] == [r.id for r in SARDIS_BOAT_RAMPS]

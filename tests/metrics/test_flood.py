"""Tests for flood impact estimation."""

import pytest

from lakescope.metrics.flood import FloodImpactResult, flood_impact, flood_impact_table

NORMAL_POOL = 599


class TestFloodImpact:
    """Tests for flood_impact()."""

    @pytest.mark.parametrize("elevation", [530, 585, 598.9, 599])
    def test_no_impact_at_or_below_normal_pool(self, elevation):
        """Nothing floods at or below normal pool."""
        result = flood_impact(elevation, NORMAL_POOL)
        assert result.additional_acres == 0
        assert result.impacted_structures == 0
        assert result.evacuation_zone_sq_mi == 0

    def test_negative_difference_reported(self):
        """Difference keeps its sign below normal pool."""
        assert flood_impact(590, NORMAL_POOL).difference_ft == -9

    def test_five_feet_above_is_at_structures_threshold(self):
        """Exactly 5 ft above normal: acres only, structures not yet affected."""
        result = flood_impact(604, NORMAL_POOL)
        assert result == FloodImpactResult(
            difference_ft=5,
            additional_acres=900,
            impacted_structures=0,
            evacuation_zone_sq_mi=0,
        )

    def test_eleven_feet_above(self):
        """11 ft above normal: all three impacts, evacuation rounds half up."""
        result = flood_impact(610, NORMAL_POOL)
        assert result.difference_ft == 11
        assert result.additional_acres == 1980
        assert result.impacted_structures == 72
        assert result.evacuation_zone_sq_mi == 2

    def test_evacuation_threshold_is_exclusive(self):
        """Exactly 8 ft above normal has no evacuation zone."""
        result = flood_impact(607, NORMAL_POOL)
        assert result.evacuation_zone_sq_mi == 0
        assert result.impacted_structures == 36

    def test_fractional_acres_round_half_up(self):
        """0.25 ft * 180 = 45 acres; 0.5 ft * 180 = 90."""
        assert flood_impact(599.25, NORMAL_POOL).additional_acres == 45
        assert flood_impact(599.5, NORMAL_POOL).additional_acres == 90

    def test_idempotent(self):
        """Same inputs give identical results."""
        assert flood_impact(612.3, NORMAL_POOL) == flood_impact(612.3, NORMAL_POOL)

    def test_to_dict(self):
        """to_dict exposes all fields."""
        data = flood_impact(610, NORMAL_POOL).to_dict()
        assert set(data) == {
            "difference_ft",
            "additional_acres",
            "impacted_structures",
            "evacuation_zone_sq_mi",
        }


class TestFloodImpactTable:
    """Tests for flood_impact_table()."""

    def test_rows_in_input_order(self):
        """Each elevation paired with its impact."""
        table = flood_impact_table(NORMAL_POOL, [610, 599, 604])
        assert [e for e, _ in table] == [610, 599, 604]
        assert table[0][1].impacted_structures == 72
        assert table[1][1].additional_acres == 0

    def test_acres_monotonic(self):
        """Flooded acreage never decreases as the lake rises."""
        table = flood_impact_table(NORMAL_POOL, range(595, 632))
        acres = [impact.additional_acres for _, impact in table]
        assert acres == sorted(acres)

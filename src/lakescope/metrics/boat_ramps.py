"""Boat ramp accessibility from lake elevation.

Each ramp has a minimum usable elevation and an optimal elevation. The
current lake level falls into one of four bands:

    current >= optimal       open     all vessels
    current >= min + 3       open     most boats
    current >= min           limited  small craft
    current <  min           closed   nothing launches
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from lakescope.lake.ramps import BoatRamp
from lakescope.utils.numbers import clamp

GOOD_CONDITIONS_MARGIN_FT = 3
LOW_WATER_ADVISORY_FT = 5
# Bottom of the dashboard's ramp gauge
GAUGE_FLOOR_FT = 585
WATCH_BAND_FT = 3

ALL_VESSELS = ("All vessels", "Large boats", "Pontoons", "PWC")
MOST_VESSELS = ("Most boats", "Medium vessels", "PWC")
SMALL_CRAFT = ("Small boats", "Kayaks", "Canoes", "PWC")


class RampState(Enum):
    OPEN = "open"
    LIMITED = "limited"
    CLOSED = "closed"


@dataclass(frozen=True)
class BoatRampStatus:
    """Accessibility of one ramp at one lake level."""

    ramp: BoatRamp
    status: RampState
    message: str
    launchable_vessel_classes: tuple[str, ...]


def ramp_status(current_elevation_ft: float, ramp: BoatRamp) -> BoatRampStatus:
    """Classify a ramp's accessibility.

    Args:
        current_elevation_ft: Lake surface elevation
        ramp: Ramp with min/optimal elevations

    Returns:
        BoatRampStatus
    """
    diff = current_elevation_ft - ramp.min_elevation

    if current_elevation_ft >= ramp.optimal_elevation:
        return BoatRampStatus(
            ramp, RampState.OPEN, "Fully operational - optimal conditions", ALL_VESSELS
        )
    elif current_elevation_ft >= ramp.min_elevation + GOOD_CONDITIONS_MARGIN_FT:
        return BoatRampStatus(
            ramp, RampState.OPEN, "Accessible - good conditions", MOST_VESSELS
        )
    elif current_elevation_ft >= ramp.min_elevation:
        return BoatRampStatus(
            ramp,
            RampState.LIMITED,
            f"Limited access - {diff:.1f} ft above minimum",
            SMALL_CRAFT,
        )
    return BoatRampStatus(
        ramp,
        RampState.CLOSED,
        f"Closed - water {abs(diff):.1f} ft below minimum",
        (),
    )


@dataclass(frozen=True)
class RampSummary:
    """Aggregate view over all ramps.

    Attributes:
        statuses: Per-ramp status, in catalogue order
        counts: Ramps per state ("open", "limited", "closed")
        advisory: Low-water advisory text, or None
        gauge_percent: Lake level on the ramp gauge, 0-100
        level_band: "normal", "watch" or "low" relative to normal pool
    """

    statuses: tuple[BoatRampStatus, ...]
    counts: dict[str, int]
    advisory: Optional[str]
    gauge_percent: float
    level_band: str


def low_water_advisory(current_elevation_ft: float, normal_pool_elevation_ft: float) -> Optional[str]:
    """Advisory text when the lake is more than 5 ft below normal pool."""
    if current_elevation_ft >= normal_pool_elevation_ft - LOW_WATER_ADVISORY_FT:
        return None
    deficit = normal_pool_elevation_ft - current_elevation_ft
    return (
        f"Water levels are {deficit:.1f} ft below normal. "
        "Some ramps may have limited access. "
        "Check conditions before trailering large vessels."
    )


def summarize_ramps(
    current_elevation_ft: float,
    normal_pool_elevation_ft: float,
    ramps: Iterable[BoatRamp],
) -> RampSummary:
    """Classify every ramp and build the aggregate view."""
    statuses = tuple(ramp_status(current_elevation_ft, r) for r in ramps)
    counts = {state.value: 0 for state in RampState}
    for s in statuses:
        counts[s.status.value] += 1

    gauge = clamp(
        (current_elevation_ft - GAUGE_FLOOR_FT)
        / (normal_pool_elevation_ft - GAUGE_FLOOR_FT)
        * 100,
        0,
        100,
    )

    if current_elevation_ft >= normal_pool_elevation_ft:
        band = "normal"
    elif current_elevation_ft >= normal_pool_elevation_ft - WATCH_BAND_FT:
        band = "watch"
    else:
        band = "low"

    return RampSummary(
        statuses=statuses,
        counts=counts,
        advisory=low_water_advisory(current_elevation_ft, normal_pool_elevation_ft),
        gauge_percent=gauge,
        level_band=band,
    )

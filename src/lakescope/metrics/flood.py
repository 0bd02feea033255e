"""Flood impact estimation from lake elevation.

Three independent step functions of the rise above normal pool:
- flooded acreage starts above 0 ft (180 acres per foot)
- impacted structures start above 5 ft (12 per foot beyond 5)
- evacuation zone starts above 8 ft (0.5 sq mi per foot beyond 8)

The per-foot constants are fixed planning approximations for Sardis Lake.
"""

from dataclasses import asdict, dataclass
from typing import Iterable

from lakescope.utils.numbers import round_half_up

ACRES_PER_FOOT = 180
STRUCTURES_THRESHOLD_FT = 5
STRUCTURES_PER_FOOT = 12
EVACUATION_THRESHOLD_FT = 8
EVACUATION_SQ_MI_PER_FOOT = 0.5


@dataclass(frozen=True)
class FloodImpactResult:
    """Estimated impact of a lake elevation relative to normal pool.

    Attributes:
        difference_ft: current - normal pool (negative below normal)
        additional_acres: Newly flooded acres
        impacted_structures: Structures affected
        evacuation_zone_sq_mi: Area to evacuate
    """

    difference_ft: float
    additional_acres: int
    impacted_structures: int
    evacuation_zone_sq_mi: int

    def to_dict(self) -> dict:
        return asdict(self)


def flood_impact(current_elevation_ft: float, normal_pool_elevation_ft: float) -> FloodImpactResult:
    """Estimate flood impact for a lake elevation.

    Args:
        current_elevation_ft: Lake surface elevation
        normal_pool_elevation_ft: Normal pool elevation

    Returns:
        FloodImpactResult; all impacts are zero at or below normal pool

    Examples:
        >>> flood_impact(604, 599)
        FloodImpactResult(difference_ft=5, additional_acres=900, impacted_structures=0, evacuation_zone_sq_mi=0)
        >>> flood_impact(610, 599).evacuation_zone_sq_mi
        2
    """
    difference = current_elevation_ft - normal_pool_elevation_ft

    additional_acres = round_half_up(difference * ACRES_PER_FOOT) if difference > 0 else 0

    impacted_structures = 0
    if difference > STRUCTURES_THRESHOLD_FT:
        impacted_structures = round_half_up(
            (difference - STRUCTURES_THRESHOLD_FT) * STRUCTURES_PER_FOOT
        )

    evacuation_zone = 0
    if difference > EVACUATION_THRESHOLD_FT:
        evacuation_zone = round_half_up(
            (difference - EVACUATION_THRESHOLD_FT) * EVACUATION_SQ_MI_PER_FOOT
        )

    return FloodImpactResult(
        difference_ft=difference,
        additional_acres=additional_acres,
        impacted_structures=impacted_structures,
        evacuation_zone_sq_mi=evacuation_zone,
    )


def flood_impact_table(
    normal_pool_elevation_ft: float, elevations: Iterable[float]
) -> list[tuple[float, FloodImpactResult]]:
    """Flood impact for each elevation, in input order."""
    return [(e, flood_impact(e, normal_pool_elevation_ft)) for e in elevations]

"""Static lake datasets.

- profile: LakeProfile, SARDIS_LAKE, contours, zones, points of interest, economic and water-quality data
- ramps: BoatRamp, SARDIS_BOAT_RAMPS
"""

from .profile import (
    ECONOMIC_DATA,
    ELEVATION_CONTOURS,
    LAND_USE_ZONES,
    SARDIS_LAKE,
    USGS_SITES,
    WATER_QUALITY,
    ElevationContour,
    LakeProfile,
    LandUseZone,
    POINTS_OF_INTEREST,
    PointOfInterest,
    average_depth,
    percent_capacity,
    quick_calculations,
    runoff_to_storage_ratio,
    shoreline_per_acre,
)
from .ramps import SARDIS_BOAT_RAMPS, BoatRamp

__all__ = [
    "LakeProfile",
    "SARDIS_LAKE",
    "ElevationContour",
    "ELEVATION_CONTOURS",
    "LandUseZone",
    "LAND_USE_ZONES",
    "PointOfInterest",
    "POINTS_OF_INTEREST",
    "ECONOMIC_DATA",
    "WATER_QUALITY",
    "USGS_SITES",
    "shoreline_per_acre",
    "average_depth",
    "runoff_to_storage_ratio",
    "percent_capacity",
    "quick_calculations",
    "BoatRamp",
    "SARDIS_BOAT_RAMPS",
]

"""Static descriptive data for Sardis Lake.

The lake profile, elevation contours, land-use zones, economic figures and
water-quality readings are fixed datasets loaded once at import. Quick
calculations derived from the profile live here too.
"""

from dataclasses import dataclass, field

from lakescope.utils.geo import Point


@dataclass(frozen=True)
class LakeProfile:
    """Descriptive record for a reservoir.

    Elevations are feet above sea level.

    Attributes:
        name: Lake name
        state: State name
        county: County or counties
        coordinates: Representative lake center
        normal_pool_elevation: Target water-surface elevation
        flood_stage_elevation: Elevation at which flooding begins
        stream_bed_elevation: Original streambed elevation
        top_of_dam_elevation: Dam crest elevation
        surface_area_acres: Surface area at normal pool
        shoreline_miles: Shoreline length at normal pool
        max_depth_ft: Maximum depth at normal pool
        volume_acre_ft: Storage at normal pool
        drainage_area_sq_mi: Upstream drainage area

    Raises:
        ValueError: If the elevations are not strictly increasing from
            streambed through normal pool and flood stage to top of dam.
    """

    name: str
    state: str
    county: str
    coordinates: Point
    normal_pool_elevation: float
    flood_stage_elevation: float
    stream_bed_elevation: float
    top_of_dam_elevation: float
    surface_area_acres: float
    shoreline_miles: float
    max_depth_ft: float
    volume_acre_ft: float
    drainage_area_sq_mi: float
    year_created: int = 0
    managed_by: str = ""
    primary_purpose: str = ""
    tributaries: tuple[str, ...] = field(default_factory=tuple)
    basin: str = ""

    def __post_init__(self):
        if not (
            self.stream_bed_elevation
            < self.normal_pool_elevation
            < self.flood_stage_elevation
            < self.top_of_dam_elevation
        ):
            raise ValueError(
                "Elevations must satisfy streambed < normal pool < flood stage < top of dam, "
                f"got {self.stream_bed_elevation} / {self.normal_pool_elevation} / "
                f"{self.flood_stage_elevation} / {self.top_of_dam_elevation}"
            )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "state": self.state,
            "county": self.county,
            "coordinates": self.coordinates.to_dict(),
            "normalPoolElevation": self.normal_pool_elevation,
            "floodStageElevation": self.flood_stage_elevation,
            "streamBedElevation": self.stream_bed_elevation,
            "topOfDamElevation": self.top_of_dam_elevation,
            "surfaceArea": self.surface_area_acres,
            "shorelineLength": self.shoreline_miles,
            "maxDepth": self.max_depth_ft,
            "volume": self.volume_acre_ft,
            "drainageArea": self.drainage_area_sq_mi,
            "yearCreated": self.year_created,
            "managedBy": self.managed_by,
            "primaryPurpose": self.primary_purpose,
            "tributaries": list(self.tributaries),
            "basin": self.basin,
        }


SARDIS_LAKE = LakeProfile(
    name="Sardis Lake",
    state="Oklahoma",
    county="Pushmataha/Latimer",
    coordinates=Point(lat=34.6619, lon=-95.3890),
    normal_pool_elevation=599,
    flood_stage_elevation=607,
    stream_bed_elevation=530,
    top_of_dam_elevation=631,
    surface_area_acres=14360,
    shoreline_miles=117,
    max_depth_ft=55.2,
    volume_acre_ft=274330,
    drainage_area_sq_mi=275,
    year_created=1982,
    managed_by="U.S. Army Corps of Engineers",
    primary_purpose="Water Supply",
    tributaries=("Jackfork Creek",),
    basin="Kiamichi Basin",
)


@dataclass(frozen=True)
class ElevationContour:
    """Bathymetry contour. Depth is relative to normal pool (negative above it)."""

    elevation: float
    label: str
    depth: float


# Simulated bathymetry
ELEVATION_CONTOURS = [
    ElevationContour(530, "Streambed", 69),
    ElevationContour(545, "Deep", 54),
    ElevationContour(560, "Mid-Deep", 39),
    ElevationContour(575, "Mid", 24),
    ElevationContour(585, "Shallow", 14),
    ElevationContour(595, "Very Shallow", 4),
    ElevationContour(599, "Normal Pool", 0),
    ElevationContour(607, "Flood Stage", -8),
    ElevationContour(620, "High Flood", -21),
    ElevationContour(631, "Dam Crest", -32),
]


@dataclass(frozen=True)
class LandUseZone:
    id: str
    name: str
    acres: int


LAND_USE_ZONES = [
    LandUseZone("conservation", "Conservation Area", 8435),
    LandUseZone("recreation", "Recreation Zone", 2100),
    LandUseZone("campground", "Campgrounds", 450),
    LandUseZone("wildlife", "Wildlife Habitat", 3500),
    LandUseZone("buffer", "Buffer Zone", 1200),
]

# Dollar figures in millions unless noted
ECONOMIC_DATA = {
    "annual_visitors": 425000,
    "economic_impact": 28.5,
    "direct_jobs": 145,
    "indirect_jobs": 380,
    "property_tax_revenue": 2.4,
    "water_contract_value": 12.8,  # per year
    "recreation_revenue": 4.2,
    "average_property_value": 185000,  # dollars
    "property_value_growth": 4.2,  # percent annually
}

WATER_QUALITY = {
    "ph": 7.4,
    "dissolved_oxygen": 8.2,  # mg/L
    "turbidity": 12,  # NTU
    "temperature": 68,  # F
    "conductivity": 245,  # uS/cm
    "chlorophyll": 4.8,  # ug/L
    "secchi_depth": 8.5,  # ft
    "rating": "Good",
}

# USGS monitoring sites near the lake
USGS_SITES = [
    {"id": "07335700", "name": "Sardis Lake near Clayton, OK"},
    {"id": "07335790", "name": "Jackfork Creek near Clayton, OK"},
]


def shoreline_per_acre(profile: LakeProfile = SARDIS_LAKE) -> float:
    """Shoreline feet per surface acre."""
    return profile.shoreline_miles * 5280 / profile.surface_area_acres


def average_depth(profile: LakeProfile = SARDIS_LAKE) -> float:
    """Mean depth in feet (volume over surface area)."""
    return profile.volume_acre_ft / profile.surface_area_acres


def runoff_to_storage_ratio(profile: LakeProfile = SARDIS_LAKE) -> float:
    """Drainage area (sq mi) per thousand acre-feet of storage."""
    return profile.drainage_area_sq_mi / (profile.volume_acre_ft / 1000)


def percent_capacity(elevation: float, profile: LakeProfile = SARDIS_LAKE) -> float:
    """Water column above streambed as a percentage of the normal-pool column.

    Not clamped: values above normal pool exceed 100.
    """
    column = profile.normal_pool_elevation - profile.stream_bed_elevation
    return (elevation - profile.stream_bed_elevation) / column * 100


def quick_calculations(profile: LakeProfile = SARDIS_LAKE) -> dict:
    """Rounded quick-calculation figures for display."""
    return {
        "shorelinePerAcreFt": round(shoreline_per_acre(profile), 1),
        "averageDepthFt": round(average_depth(profile), 1),
        "runoffToStorageRatio": round(runoff_to_storage_ratio(profile), 2),
    }


@dataclass(frozen=True)
class PointOfInterest:
    name: str
    coordinates: Point
    type: str  # dam, marina, campground, inlet, wildlife
    description: str = ""


POINTS_OF_INTEREST = [
    PointOfInterest("Sardis Dam", Point(34.6619, -95.3380), "dam", "Main dam structure, built 1982"),
    PointOfInterest(
        "Potato Hills Marina", Point(34.6850, -95.4100), "marina", "Full-service marina with boat rentals"
    ),
    PointOfInterest("Pine Creek Cove", Point(34.6450, -95.3950), "campground", "Camping and day-use area"),
    PointOfInterest("Jackfork Creek Inlet", Point(34.6970, -95.3600), "inlet", "Primary water source inlet"),
    PointOfInterest("Wildlife Area", Point(34.6750, -95.4200), "wildlife", "Protected wildlife observation zone"),
]

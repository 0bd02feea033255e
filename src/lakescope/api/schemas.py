"""Pydantic schemas for API responses.

Proxy endpoints pass upstream JSON through unchanged (plus a meta block);
the models here describe the derived-metric endpoints and error bodies.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

# Plausible lake-surface range for Sardis, used to validate elevation queries
ELEVATION_BOUNDS = {
    "min": 500.0,
    "max": 700.0,
}


class FloodImpactResponse(BaseModel):
    """Flood impact for a lake elevation.

    Attributes:
        elevation: Queried lake elevation (ft)
        normal_pool: Normal pool elevation (ft)
        difference_ft: Elevation minus normal pool
        additional_acres: Newly flooded acres
        impacted_structures: Structures affected
        evacuation_zone_sq_mi: Area to evacuate
    """

    elevation: float
    normal_pool: float
    difference_ft: float
    additional_acres: int = Field(..., ge=0)
    impacted_structures: int = Field(..., ge=0)
    evacuation_zone_sq_mi: int = Field(..., ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "elevation": 610,
                    "normal_pool": 599,
                    "difference_ft": 11,
                    "additional_acres": 1980,
                    "impacted_structures": 72,
                    "evacuation_zone_sq_mi": 2,
                }
            ]
        }
    }


class RampStatusModel(BaseModel):
    """One ramp's accessibility."""

    id: str
    name: str
    location: str
    min_elevation: float
    optimal_elevation: float
    status: str = Field(..., description="open, limited or closed")
    message: str
    launchable_vessel_classes: list[str]
    parking_spaces: int = 0
    phone: Optional[str] = None


class BoatRampsResponse(BaseModel):
    """Accessibility of every ramp at a lake elevation."""

    elevation: float
    normal_pool: float
    counts: dict[str, int]
    advisory: Optional[str] = None
    gauge_percent: float = Field(..., ge=0, le=100)
    level_band: str
    ramps: list[RampStatusModel]


class SolunarModel(BaseModel):
    major: list[str]
    minor: list[str]


class MoonResponse(BaseModel):
    """Moon phase and solunar windows for an instant."""

    date: datetime
    phase: str
    illumination_percent: int = Field(..., ge=0, le=100)
    icon: str
    lunar_day: float
    solunar: SolunarModel


class WindowModel(BaseModel):
    start: datetime
    end: datetime


class SunWindowsResponse(BaseModel):
    """Golden and blue hour windows for a day."""

    sunrise: datetime
    sunset: datetime
    solar_noon: datetime
    day_length_hours: float
    golden_hour_morning: WindowModel
    golden_hour_evening: WindowModel
    blue_hour_morning: WindowModel
    blue_hour_evening: WindowModel


class FishingFactorModel(BaseModel):
    name: str
    score: int
    status: str
    detail: str


class SpeciesActivityModel(BaseModel):
    name: str
    activity: str


class FishingResponse(BaseModel):
    """Fishing activity index.

    Attributes:
        overall_score: Mean factor score (0-100)
        rating: Excellent, Good, Fair or Poor
        factors: Per-factor breakdown
        best_time: First major solunar window
        target_species: Activity per species
        tips: Up to three tips
        is_fallback: True when weather was unavailable and defaults are shown
    """

    overall_score: int = Field(..., ge=0, le=100)
    rating: str
    factors: list[FishingFactorModel]
    best_time: str
    target_species: list[SpeciesActivityModel]
    tips: list[str]
    is_fallback: bool = False


class RecreationResponse(BaseModel):
    """Recreation rating for one day's forecast."""

    score: int
    rating: str
    category: str


class WaterLevelResponse(BaseModel):
    """Latest water level with a chart-ready history.

    Attributes:
        current: Latest reading with status and trend, None if USGS is unavailable
        history: Sampled (date, value) points
        stats: min, max, avg, current and change over the history
        is_simulated: True when the history is synthetic
        time_range: Requested range (7d, 30d, 90d, 1y)
    """

    current: Optional[dict] = None
    history: list[dict]
    stats: dict[str, float]
    is_simulated: bool = False
    time_range: str


class HealthResponse(BaseModel):
    """Health check response.

    Attributes:
        status: Service status ('healthy' or 'unhealthy')
        version: API version
    """

    status: str = Field(
        default="healthy",
        description="Service status",
    )
    version: str = Field(
        default="1.0.0",
        description="API version",
    )


class ErrorResponse(BaseModel):
    """Error response schema.

    Attributes:
        error: Error type/code
        message: Human-readable error message
        detail: Additional error details
    """

    error: str = Field(
        ...,
        description="Error type",
    )
    message: str = Field(
        ...,
        description="Error message",
    )
    detail: Optional[str] = Field(
        default=None,
        description="Additional details",
    )


class UpstreamErrorResponse(BaseModel):
    """Body returned with 502 when an upstream service fails."""

    error: str
    message: str
    suggestion: Optional[str] = None
    availableSites: Optional[list[dict]] = None

"""HTTP API for LakeScope.

This module provides:

- create_app: Factory function to create FastAPI application
- Response schemas for the derived-metric endpoints
- ErrorResponse / UpstreamErrorResponse: error bodies

Note: create_app is lazy-loaded to allow importing schemas without
FastAPI installed.
"""

# Schemas can be imported directly (only depend on pydantic)
from lakescope.api.schemas import (
    BoatRampsResponse,
    ErrorResponse,
    FishingResponse,
    FloodImpactResponse,
    HealthResponse,
    MoonResponse,
    RecreationResponse,
    SunWindowsResponse,
    UpstreamErrorResponse,
    WaterLevelResponse,
)


def __getattr__(name):
    """Lazy load FastAPI-dependent components."""
    if name == "create_app":
        from lakescope.api.app import create_app

        return create_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "create_app",
    "BoatRampsResponse",
    "ErrorResponse",
    "FishingResponse",
    "FloodImpactResponse",
    "HealthResponse",
    "MoonResponse",
    "RecreationResponse",
    "SunWindowsResponse",
    "UpstreamErrorResponse",
    "WaterLevelResponse",
]

"""FastAPI application for LakeScope.

Provides REST API endpoints for:
- Upstream proxies (USGS water data, Open-Meteo weather, OpenStreetMap lake boundary)
- Derived lake metrics (flood impact, boat ramps, moon, sun windows, fishing, recreation)
- Health checks and lake profile

Example:
    >>> from lakescope.api import create_app
    >>> app = create_app()
    >>> # Run with: uvicorn lakescope.api.app:app --reload
"""

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lakescope import __version__, config
from lakescope.api.schemas import (
    ELEVATION_BOUNDS,
    BoatRampsResponse,
    ErrorResponse,
    FishingFactorModel,
    FishingResponse,
    FloodImpactResponse,
    HealthResponse,
    MoonResponse,
    RampStatusModel,
    RecreationResponse,
    SolunarModel,
    SpeciesActivityModel,
    SunWindowsResponse,
    UpstreamErrorResponse,
    WaterLevelResponse,
    WindowModel,
)
from lakescope.lake import SARDIS_BOAT_RAMPS, SARDIS_LAKE, USGS_SITES, quick_calculations
from lakescope.metrics import (
    TIME_RANGES,
    FishingConditions,
    assess_fishing,
    describe_weather_category,
    flood_impact,
    latest_water_level,
    moon_phase,
    rate_recreation_day,
    recreation_score,
    simulated_water_level_history,
    solunar_periods,
    summarize_ramps,
    sun_windows,
    water_level_history,
)
from lakescope.sources import OpenMeteoClient, OverpassClient, USGSClient

logger = logging.getLogger(__name__)

API_VERSION = __version__

USGS_SUGGESTION = "The USGS site may be temporarily unavailable. Try again later."


def upstream_error(error: str, message: str, **extra) -> JSONResponse:
    """502 response with a structured upstream-failure body."""
    body = UpstreamErrorResponse(error=error, message=message, **extra)
    return JSONResponse(status_code=502, content=body.model_dump(exclude_none=True))


def fishing_response(conditions: FishingConditions) -> FishingResponse:
    return FishingResponse(
        overall_score=conditions.overall_score,
        rating=conditions.rating,
        factors=[
            FishingFactorModel(name=f.name, score=f.score, status=f.status.value, detail=f.detail)
            for f in conditions.factors
        ],
        best_time=conditions.best_time,
        target_species=[
            SpeciesActivityModel(name=s.name, activity=s.activity.value)
            for s in conditions.target_species
        ],
        tips=list(conditions.tips),
        is_fallback=conditions.is_fallback,
    )


def create_app(
    usgs_client: Optional[USGSClient] = None,
    weather_client: Optional[OpenMeteoClient] = None,
    boundary_client: Optional[OverpassClient] = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        usgs_client: USGS source. Defaults to a new USGSClient
        weather_client: Weather source. Defaults to a new OpenMeteoClient
        boundary_client: Boundary source. Defaults to a new OverpassClient

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="LakeScope API",
        description="Water level, weather and recreation metrics for Sardis Lake, Oklahoma",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    usgs = usgs_client or USGSClient()
    weather = weather_client or OpenMeteoClient()
    boundary = boundary_client or OverpassClient()

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with custom response."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=f"HTTP_{exc.status_code}",
                message=str(exc.detail),
            ).model_dump(),
        )

    @app.get("/", tags=["info"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "LakeScope API",
            "version": API_VERSION,
            "lake": SARDIS_LAKE.name,
            "docs": "/docs",
        }

    @app.get("/health", response_model=HealthResponse, tags=["info"])
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/api/lake", tags=["info"])
    async def lake_profile():
        """Lake profile and quick calculations."""
        return {
            "profile": SARDIS_LAKE.to_dict(),
            "quickCalculations": quick_calculations(SARDIS_LAKE),
        }

    # Upstream proxies. Plain def so blocking requests calls run in the threadpool.

    @app.get("/api/usgs", tags=["proxy"])
    def usgs_data(
        site: str = Query(config.DEFAULT_SITE_ID),
        period: str = Query(config.DEFAULT_PERIOD),
        parameter_cd: str = Query(config.DEFAULT_PARAMETER_CD, alias="parameterCd"),
    ):
        """USGS instantaneous values, with nearby-station fallback."""
        result = usgs.fetch_water_data(site, period, parameter_cd)
        if not result.ok:
            logger.error(f"USGS API error: {result.error}")
            return upstream_error(
                "Failed to fetch USGS data",
                result.error.message,
                suggestion=USGS_SUGGESTION,
                availableSites=USGS_SITES,
            )
        return result.value

    @app.get("/api/weather", tags=["proxy"])
    def weather_data(
        lat: float = Query(config.DEFAULT_LAT, ge=-90, le=90),
        lng: float = Query(config.DEFAULT_LNG, ge=-180, le=180),
        forecast: int = Query(config.DEFAULT_FORECAST_DAYS, ge=1, le=16),
    ):
        """Open-Meteo current conditions and forecast."""
        result = weather.fetch_forecast(lat, lng, forecast)
        if not result.ok:
            logger.error(f"Weather API error: {result.error}")
            return upstream_error("Failed to fetch weather data", result.error.message)
        return result.value

    @app.get("/api/lake-boundary", tags=["proxy"])
    def lake_boundary(
        name: str = Query(config.DEFAULT_LAKE_NAME),
        lat: float = Query(config.DEFAULT_LAT, ge=-90, le=90),
        lng: float = Query(config.DEFAULT_LNG, ge=-180, le=180),
    ):
        """Lake outline as GeoJSON, approximate if OpenStreetMap has no match."""
        result = boundary.fetch_boundary(name, lat, lng)
        if not result.ok:
            logger.error(f"Lake boundary API error: {result.error}")
            return upstream_error("Failed to fetch lake boundary", result.error.message)
        return result.value

    # Derived metrics

    @app.get("/api/metrics/flood-impact", response_model=FloodImpactResponse, tags=["metrics"])
    async def flood_impact_metric(
        elevation: float = Query(..., ge=ELEVATION_BOUNDS["min"], le=ELEVATION_BOUNDS["max"]),
    ):
        """Flooded acreage, structures and evacuation zone for an elevation."""
        impact = flood_impact(elevation, SARDIS_LAKE.normal_pool_elevation)
        return FloodImpactResponse(
            elevation=elevation,
            normal_pool=SARDIS_LAKE.normal_pool_elevation,
            **impact.to_dict(),
        )

    @app.get("/api/metrics/boat-ramps", response_model=BoatRampsResponse, tags=["metrics"])
    async def boat_ramps_metric(
        elevation: float = Query(..., ge=ELEVATION_BOUNDS["min"], le=ELEVATION_BOUNDS["max"]),
    ):
        """Accessibility of every public ramp at an elevation."""
        summary = summarize_ramps(elevation, SARDIS_LAKE.normal_pool_elevation, SARDIS_BOAT_RAMPS)
        return BoatRampsResponse(
            elevation=elevation,
            normal_pool=SARDIS_LAKE.normal_pool_elevation,
            counts=summary.counts,
            advisory=summary.advisory,
            gauge_percent=summary.gauge_percent,
            level_band=summary.level_band,
            ramps=[
                RampStatusModel(
                    id=s.ramp.id,
                    name=s.ramp.name,
                    location=s.ramp.location,
                    min_elevation=s.ramp.min_elevation,
                    optimal_elevation=s.ramp.optimal_elevation,
                    status=s.status.value,
                    message=s.message,
                    launchable_vessel_classes=list(s.launchable_vessel_classes),
                    parking_spaces=s.ramp.parking_spaces,
                    phone=s.ramp.phone,
                )
                for s in summary.statuses
            ],
        )

    @app.get("/api/metrics/moon", response_model=MoonResponse, tags=["metrics"])
    async def moon_metric(
        date: Optional[datetime] = Query(None, description="Instant to evaluate (default now, naive = UTC)"),
        interpolate: bool = Query(True, description="Interpolate crescent/gibbous illumination"),
    ):
        """Moon phase, illumination and solunar windows."""
        when = date or datetime.now(timezone.utc)
        info = moon_phase(when, interpolate=interpolate)
        periods = solunar_periods(when)
        return MoonResponse(
            date=when,
            phase=info.phase_name,
            illumination_percent=info.illumination_percent,
            icon=info.icon,
            lunar_day=info.lunar_day,
            solunar=SolunarModel(
                major=[p.label for p in periods["major"]],
                minor=[p.label for p in periods["minor"]],
            ),
        )

    @app.get("/api/metrics/sun-windows", response_model=SunWindowsResponse, tags=["metrics"])
    async def sun_windows_metric(sunrise: datetime = Query(...), sunset: datetime = Query(...)):
        """Golden and blue hour windows from sunrise and sunset."""
        if sunset <= sunrise:
            raise HTTPException(status_code=400, detail="sunset must be after sunrise")
        try:
            windows = sun_windows(sunrise, sunset)
        except TypeError:
            raise HTTPException(
                status_code=400,
                detail="sunrise and sunset must both be timezone-aware or both naive",
            )

        def window(w) -> WindowModel:
            return WindowModel(start=w.start, end=w.end)

        return SunWindowsResponse(
            sunrise=windows.sunrise,
            sunset=windows.sunset,
            solar_noon=windows.solar_noon,
            day_length_hours=windows.day_length_hours,
            golden_hour_morning=window(windows.golden_hour_morning),
            golden_hour_evening=window(windows.golden_hour_evening),
            blue_hour_morning=window(windows.blue_hour_morning),
            blue_hour_evening=window(windows.blue_hour_evening),
        )

    @app.get("/api/metrics/fishing", response_model=FishingResponse, tags=["metrics"])
    def fishing_metric(
        water_temp: float = Query(68.0, alias="waterTemp", ge=32, le=110),
        lat: float = Query(config.DEFAULT_LAT, ge=-90, le=90),
        lng: float = Query(config.DEFAULT_LNG, ge=-180, le=180),
    ):
        """Fishing activity index from current weather; defaults if weather is down."""
        conditions = assess_fishing(weather.fetch_snapshot(lat, lng), water_temp)
        return fishing_response(conditions)

    @app.get("/api/metrics/recreation", response_model=RecreationResponse, tags=["metrics"])
    async def recreation_metric(
        temp_high: float = Query(..., alias="tempHigh"),
        precip: float = Query(0, ge=0, le=100),
        wind: float = Query(0, ge=0),
        weather_code: int = Query(0, alias="weatherCode", ge=0),
    ):
        """Recreation rating for a day's forecast values."""
        return RecreationResponse(
            score=recreation_score(temp_high, precip, wind, weather_code),
            rating=rate_recreation_day(temp_high, precip, wind, weather_code),
            category=describe_weather_category(weather_code),
        )

    @app.get("/api/metrics/water-level", response_model=WaterLevelResponse, tags=["metrics"])
    def water_level_metric(
        site: str = Query(config.DEFAULT_SITE_ID),
        time_range: str = Query("30d", alias="range"),
    ):
        """Latest level and history; simulated history if USGS is unavailable."""
        if time_range not in TIME_RANGES:
            raise HTTPException(
                status_code=400,
                detail=f"range must be one of {', '.join(TIME_RANGES)}",
            )
        _, period = TIME_RANGES[time_range]
        fetched = usgs.fetch_water_data(site, period)

        current = fetched.map(latest_water_level)
        history = fetched.map(water_level_history)
        if history.ok:
            series = history.value
        else:
            logger.warning(f"USGS history unavailable, simulating: {history.error}")
            series = simulated_water_level_history(time_range)

        return WaterLevelResponse(
            current=asdict(current.value) if current.ok else None,
            history=series.to_records(),
            stats=series.stats,
            is_simulated=series.is_simulated,
            time_range=time_range,
        )

    return app


# Default app instance for uvicorn
app = create_app()

"""Upstream data sources.

- USGSClient: water levels from USGS Water Services, with nearby-station fallback
- OpenMeteoClient: current conditions and daily forecast
- OverpassClient: lake outline from OpenStreetMap, with approximate fallback

Every fetch returns a FetchResult rather than raising.
"""

from lakescope.sources.base import BaseSource
from lakescope.sources.open_meteo import OpenMeteoClient, build_forecast_params
from lakescope.sources.overpass import (
    OverpassClient,
    approximate_boundary,
    boundary_extent,
    build_query,
    elements_to_features,
    merge_rings,
)
from lakescope.sources.usgs import USGSClient

__all__ = [
    "BaseSource",
    "OpenMeteoClient",
    "OverpassClient",
    "USGSClient",
    "approximate_boundary",
    "boundary_extent",
    "build_forecast_params",
    "build_query",
    "elements_to_features",
    "merge_rings",
]

"""Dashboard UI components for LakeScope.

This module provides reusable Streamlit components:

- Map: render_lake_map, create_lake_layer, create_ramp_layer, create_poi_layer, create_base_view
- Boat Ramps: get_ramp_badge, ramp_table, render_ramp_summary
- Fishing: factor_table, render_rating_badge, render_fishing_card
- Recreation: day_label, best_day, forecast_table, render_recreation_strip
- Water Level: format_change, render_water_level_card, render_level_chart
- Data Status: get_data_freshness, format_age, status_text, render_data_status, render_fallback_notice
- Current Weather: weather_metrics, hour_label, hourly_table, render_weather_card
- Sky: sky_summary, today_sun_windows, render_sky
"""

from lakescope.dashboard.components.boat_ramps import (
    get_ramp_badge,
    ramp_table,
    render_ramp_summary,
)
from lakescope.dashboard.components.current_weather import (
    hour_label,
    hourly_table,
    render_weather_card,
    weather_metrics,
)
from lakescope.dashboard.components.data_status import (
    FRESHNESS_COLORS,
    format_age,
    get_data_freshness,
    render_data_status,
    render_fallback_notice,
    render_upstream_error,
    status_text,
)
from lakescope.dashboard.components.fishing import (
    factor_table,
    render_fishing_card,
    render_rating_badge,
)
from lakescope.dashboard.components.map_view import (
    create_base_view,
    create_lake_layer,
    create_poi_layer,
    create_ramp_layer,
    render_lake_map,
)
from lakescope.dashboard.components.recreation import (
    best_day,
    day_label,
    forecast_table,
    render_recreation_strip,
)
from lakescope.dashboard.components.sky import render_sky, sky_summary, today_sun_windows
from lakescope.dashboard.components.water_level import (
    format_change,
    render_level_chart,
    render_water_level_card,
)

__all__ = [
    # Map
    "render_lake_map",
    "create_lake_layer",
    "create_ramp_layer",
    "create_poi_layer",
    "create_base_view",
    # Boat ramps
    "get_ramp_badge",
    "ramp_table",
    "render_ramp_summary",
    # Fishing
    "factor_table",
    "render_rating_badge",
    "render_fishing_card",
    # Recreation
    "day_label",
    "best_day",
    "forecast_table",
    "render_recreation_strip",
    # Water level
    "format_change",
    "render_water_level_card",
    "render_level_chart",
    # Data status
    "FRESHNESS_COLORS",
    "get_data_freshness",
    "format_age",
    "render_data_status",
    "status_text",
    "render_fallback_notice",
    "render_upstream_error",
    # Current weather
    "weather_metrics",
    "hour_label",
    "hourly_table",
    "render_weather_card",
    # Sky
    "sky_summary",
    "today_sun_windows",
    "render_sky",
]

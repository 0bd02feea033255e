"""Streamlit dashboard for Sardis Lake.

Tabs: overview, elevation (flood simulation), economic, land planning,
water data and analysis tools. Run with:

    streamlit run src/lakescope/dashboard/app.py
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import pandas as pd

try:
    import streamlit as st
except ImportError:
    print("Streamlit not installed. Install with: pip install streamlit")
    sys.exit(1)

from lakescope import config
from lakescope.dashboard.components import (
    render_data_status,
    render_fallback_notice,
    render_fishing_card,
    render_lake_map,
    render_level_chart,
    render_ramp_summary,
    render_recreation_strip,
    render_sky,
    render_upstream_error,
    render_water_level_card,
    render_weather_card,
)
from lakescope.dashboard.state import (
    DATA_SOURCES,
    PANEL_TITLES,
    PANELS,
    TAB_LABELS,
    get_state,
    tab_for_label,
)
from lakescope.lake import (
    ECONOMIC_DATA,
    ELEVATION_CONTOURS,
    LAND_USE_ZONES,
    SARDIS_BOAT_RAMPS,
    SARDIS_LAKE,
    WATER_QUALITY,
    quick_calculations,
)
from lakescope.metrics import (
    WeatherSnapshot,
    assess_fishing,
    flood_impact,
    flood_impact_table,
    latest_water_level,
    parse_daily_forecast,
    parse_hourly_forecast,
    simulated_water_level_history,
    summarize_ramps,
    water_level_history,
)
from lakescope.metrics.water_level import TIME_RANGES
from lakescope.sources import OpenMeteoClient, OverpassClient, USGSClient
from lakescope.sources.overpass import approximate_boundary
from lakescope.utils.result import FetchResult
from lakescope.visualization import render_depth_legend

logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="LakeScope: Sardis Lake",
    page_icon="🌊",
    layout="wide",
    initial_sidebar_state="expanded",
)


@st.cache_resource
def get_clients() -> tuple[USGSClient, OpenMeteoClient, OverpassClient]:
    """Upstream clients, shared across sessions."""
    return USGSClient(), OpenMeteoClient(), OverpassClient()


@st.cache_data(ttl=config.REFRESH_INTERVALS["usgs"], max_entries=8, show_spinner="Loading USGS data...")
def fetch_usgs(period: str) -> FetchResult[dict]:
    usgs, _, _ = get_clients()
    return usgs.fetch_water_data(period=period)


@st.cache_data(ttl=config.REFRESH_INTERVALS["weather"], max_entries=2, show_spinner="Loading forecast...")
def fetch_weather() -> FetchResult[dict]:
    _, weather, _ = get_clients()
    return weather.fetch_forecast()


@st.cache_data(ttl=config.REFRESH_INTERVALS["fishing"], max_entries=2)
def fetch_fishing(water_temp_f: float):
    _, weather, _ = get_clients()
    return assess_fishing(weather.fetch_snapshot(), water_temp_f)


@st.cache_data(ttl=config.REFRESH_INTERVALS["boundary"], max_entries=1, show_spinner="Loading lake outline...")
def fetch_boundary() -> dict:
    _, _, overpass = get_clients()
    result = overpass.fetch_boundary()
    if not result.ok:
        logger.warning(f"Boundary fetch failed, using approximate outline: {result.error}")
        return dict(approximate_boundary())
    return result.value


def create_sidebar(state) -> None:
    """Side panels, bookmarks and refresh."""
    st.sidebar.header(SARDIS_LAKE.name)

    cols = st.sidebar.columns(len(PANELS))
    for col, panel in zip(cols, PANELS):
        shown = col.toggle(panel.title(), value=state.panels_expanded[panel], key=f"panel_{panel}")
        state.sync_panel(panel, shown)

    with st.sidebar.expander(PANEL_TITLES["info"], expanded=state.panels_expanded["info"]):
        st.markdown(f"📍 {config.DEFAULT_LAT:.4f}°N, {abs(config.DEFAULT_LNG):.4f}°W")
        st.markdown(f"Normal pool: {SARDIS_LAKE.normal_pool_elevation:.0f} ft")
        st.markdown(f"Flood stage: {SARDIS_LAKE.flood_stage_elevation:.0f} ft")

    with st.sidebar.expander(PANEL_TITLES["layers"], expanded=state.panels_expanded["layers"]):
        state.show_contours = st.checkbox("Depth contours", value=state.show_contours)
        state.show_zones = st.checkbox("Land-use zones", value=state.show_zones)

    with st.sidebar.expander(PANEL_TITLES["analysis"], expanded=state.panels_expanded["analysis"]):
        impact = flood_impact(state.flood_level, SARDIS_LAKE.normal_pool_elevation)
        st.metric("Simulated level", f"{state.flood_level:.1f} ft", f"{impact.difference_ft:+.1f} ft")
        st.metric("Added acres", f"{impact.additional_acres:,}")

    st.sidebar.markdown("---")
    st.sidebar.markdown("**Bookmarks**")
    name = st.sidebar.text_input("Bookmark name", key="bookmark_name")
    if st.sidebar.button("Save view") and name:
        state.add_bookmark(name)
    for bookmark in list(state.bookmarks):
        cols = st.sidebar.columns([3, 1])
        if cols[0].button(f"{bookmark.name} ({bookmark.flood_level:.0f} ft)", key=f"bm_{bookmark.name}"):
            state.apply_bookmark(bookmark.name)
        if cols[1].button("✕", key=f"rm_{bookmark.name}"):
            state.remove_bookmark(bookmark.name)

    st.sidebar.markdown("---")
    st.sidebar.markdown("**Data Sources**")
    due = state.due_sources()
    for source in DATA_SOURCES:
        render_data_status(
            source, state.last_refreshed.get(source), refresh_due=source in due, container=st.sidebar
        )

    if st.sidebar.button(f"🔄 Refresh Data ({len(due)} due)" if due else "🔄 Refresh Data"):
        st.cache_data.clear()
        state.last_refreshed.clear()
        st.rerun()


def render_overview(state, current_level: Optional[float]) -> None:
    level = current_level if current_level is not None else SARDIS_LAKE.normal_pool_elevation
    summary = summarize_ramps(level, SARDIS_LAKE.normal_pool_elevation, SARDIS_BOAT_RAMPS)

    col_map, col_side = st.columns([2, 1])
    with col_map:
        st.pydeck_chart(render_lake_map(fetch_boundary(), summary, state.flood_level))
        state.mark_refreshed("boundary")
    with col_side:
        st.subheader("Boat Ramps")
        render_ramp_summary(summary, level)

    st.subheader("Fishing")
    conditions = fetch_fishing(WATER_QUALITY["temperature"])
    if not conditions.is_fallback:
        state.mark_refreshed("fishing")
    render_fishing_card(conditions)

    st.subheader("Weather")
    weather = fetch_weather()
    if not weather.ok:
        render_upstream_error("Open-Meteo", weather.error.message)
        return

    state.mark_refreshed("weather")
    snapshot = weather.map(WeatherSnapshot.from_open_meteo)
    if not snapshot.ok:
        logger.warning(f"Open-Meteo current block unusable: {snapshot.error}")
    render_weather_card(snapshot.unwrap_or(None), weather.map(parse_hourly_forecast).unwrap_or([]))

    st.subheader("Recreation Outlook")
    render_recreation_strip(weather.map(parse_daily_forecast).unwrap_or([]))
    render_sky(weather.value)


def render_elevation(state) -> None:
    st.subheader("Flood Simulation")
    level = st.slider(
        "Simulated water level (ft)",
        min_value=float(SARDIS_LAKE.stream_bed_elevation),
        max_value=float(SARDIS_LAKE.top_of_dam_elevation),
        value=float(state.flood_level),
        step=0.5,
    )
    state.set_flood_level(level)

    impact = flood_impact(state.flood_level, SARDIS_LAKE.normal_pool_elevation)
    cols = st.columns(4)
    cols[0].metric("Above Normal", f"{impact.difference_ft:+.1f} ft")
    cols[1].metric("Added Acres", f"{impact.additional_acres:,}")
    cols[2].metric("Structures", impact.impacted_structures)
    cols[3].metric("Evacuation", f"{impact.evacuation_zone_sq_mi} sq mi")

    if state.flood_level >= SARDIS_LAKE.flood_stage_elevation:
        st.error("Above flood stage")

    summary = summarize_ramps(state.flood_level, SARDIS_LAKE.normal_pool_elevation, SARDIS_BOAT_RAMPS)
    st.pydeck_chart(render_lake_map(fetch_boundary(), summary, state.flood_level))

    if state.show_contours:
        st.markdown("**Depth Contours**")
        st.dataframe(
            pd.DataFrame(
                [{"Elevation (ft)": c.elevation, "Label": c.label, "Depth (ft)": c.depth} for c in ELEVATION_CONTOURS]
            ),
            hide_index=True,
        )
        render_depth_legend()


def render_economic() -> None:
    cols = st.columns(4)
    cols[0].metric("Annual Visitors", f"{ECONOMIC_DATA['annual_visitors']:,}")
    cols[1].metric("Economic Impact", f"${ECONOMIC_DATA['economic_impact']}M")
    cols[2].metric("Direct Jobs", ECONOMIC_DATA["direct_jobs"])
    cols[3].metric("Indirect Jobs", ECONOMIC_DATA["indirect_jobs"])

    revenue = pd.Series(
        {
            "Property Tax": ECONOMIC_DATA["property_tax_revenue"],
            "Water Contracts": ECONOMIC_DATA["water_contract_value"],
            "Recreation": ECONOMIC_DATA["recreation_revenue"],
        },
        name="$M / year",
    )
    st.bar_chart(revenue)


def render_planning(state) -> None:
    zones = pd.DataFrame([{"Zone": z.name, "Acres": z.acres} for z in LAND_USE_ZONES])
    st.dataframe(zones, hide_index=True)
    if state.show_zones:
        st.bar_chart(zones.set_index("Zone")["Acres"])


def render_water(state, usgs: FetchResult[dict]) -> Optional[float]:
    """Current reading and history chart. Returns the current level if known."""
    time_range = st.radio(
        "Range", list(TIME_RANGES), index=list(TIME_RANGES).index(state.time_range), horizontal=True
    )
    state.set_time_range(time_range)

    status = None
    if usgs.ok:
        try:
            status = latest_water_level(usgs.value)
        except ValueError as e:
            logger.warning(f"USGS payload has no current reading: {e}")
        if usgs.value.get("meta", {}).get("fallback"):
            render_fallback_notice(usgs.value["meta"].get("note", "alternate USGS site"))
    else:
        render_upstream_error("USGS", usgs.error.message)
    render_water_level_card(status)

    history = None
    history_result = fetch_usgs(TIME_RANGES[time_range][1])
    if history_result.ok:
        try:
            history = water_level_history(history_result.value)
        except ValueError as e:
            logger.warning(f"USGS history unusable: {e}")
    if history is None:
        history = simulated_water_level_history(time_range)
    render_level_chart(history)

    st.markdown("**Water Quality**")
    st.json(WATER_QUALITY)
    return status.value if status else None


def render_analysis() -> None:
    st.markdown("**Quick Calculations**")
    st.json(quick_calculations())

    st.markdown("**Flood Impact by Elevation**")
    elevations = list(range(int(SARDIS_LAKE.normal_pool_elevation), int(SARDIS_LAKE.top_of_dam_elevation) + 1, 2))
    rows = [
        {"elevation_ft": elevation, **impact.to_dict()}
        for elevation, impact in flood_impact_table(SARDIS_LAKE.normal_pool_elevation, elevations)
    ]
    st.dataframe(pd.DataFrame(rows), hide_index=True)


def main():
    """Main dashboard application."""
    state = get_state(st.session_state)
    create_sidebar(state)

    st.title(f"🌊 {SARDIS_LAKE.name}")
    st.caption(f"{SARDIS_LAKE.county}, {SARDIS_LAKE.state} · managed by {SARDIS_LAKE.managed_by}")

    usgs = fetch_usgs(config.DEFAULT_PERIOD)
    current_level = None
    if usgs.ok:
        state.mark_refreshed("usgs")
        try:
            current_level = latest_water_level(usgs.value).value
        except ValueError:
            current_level = None

    # Tab bar driven by state so bookmarks can switch tabs
    choice = st.radio("View", TAB_LABELS, index=state.tab_index, horizontal=True, label_visibility="collapsed")
    state.set_tab(tab_for_label(choice))

    renderers = {
        "overview": lambda: render_overview(state, current_level),
        "elevation": lambda: render_elevation(state),
        "economic": render_economic,
        "planning": lambda: render_planning(state),
        "water": lambda: render_water(state, usgs),
        "analysis": render_analysis,
    }
    renderers[state.active_tab]()

    st.markdown("---")
    st.caption(f"Last updated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M')} UTC")
    st.caption("Data: USGS Water Services, Open-Meteo, OpenStreetMap")


def run_dashboard():
    """Entry point for running dashboard."""
    main()


if __name__ == "__main__":
    main()

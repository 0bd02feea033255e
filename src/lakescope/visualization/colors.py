"""Color scale definitions for lake visualization.

This module provides consistent color scales used across the dashboard:
- Depth: Light blue to navy for deeper water
- Lake surface: Blue at or below normal pool, amber when flooding
- Ratings and ramp status: Badge colors for scores and accessibility

All colors are provided in multiple formats:
- Hex strings for CSS/HTML
- RGB lists for PyDeck layers
- Category names for legends
"""


# =============================================================================
# DEPTH COLOR SCALE
# =============================================================================

# (max depth_ft, hex_color, category_name), shallow to deep
DEPTH_SCALE = [
    (10, "#63b3ed", "Shallow"),
    (25, "#3182ce", "Mid"),
    (40, "#2c5282", "Deep"),
    (9999, "#1a365d", "Channel"),
]


def depth_to_hex(depth_ft: float) -> str:
    """Convert water depth to hex color string.

    Args:
        depth_ft: Depth below normal pool in feet

    Returns:
        Hex color string

    Examples:
        >>> depth_to_hex(4)
        '#63b3ed'
        >>> depth_to_hex(54)
        '#1a365d'
    """
    if depth_ft < 0:
        depth_ft = 0

    for threshold, color, _ in DEPTH_SCALE:
        if depth_ft <= threshold:
            return color

    return DEPTH_SCALE[-1][1]


def depth_to_rgb(depth_ft: float, alpha: int = 160) -> list[int]:
    """Convert water depth to RGBA list for PyDeck.

    Examples:
        >>> depth_to_rgb(20)
        [49, 130, 206, 160]
    """
    return list(hex_to_rgb(depth_to_hex(depth_ft))) + [alpha]


def depth_category(depth_ft: float) -> str:
    """Get category name for water depth.

    Examples:
        >>> depth_category(30)
        'Deep'
    """
    if depth_ft < 0:
        depth_ft = 0

    for threshold, _, category in DEPTH_SCALE:
        if depth_ft <= threshold:
            return category

    return DEPTH_SCALE[-1][2]


# =============================================================================
# LAKE SURFACE
# =============================================================================

LAKE_FILL_NORMAL = "#3182ce"
LAKE_FILL_FLOOD = "#ffc107"
LAKE_OUTLINE_NORMAL = "#1e40af"
LAKE_OUTLINE_FLOOD = "#ff9800"


def lake_fill_rgb(level_ft: float, normal_pool_ft: float, alpha: int = 77) -> list[int]:
    """Lake polygon fill; amber once the level is above normal pool.

    Examples:
        >>> lake_fill_rgb(599, 599)
        [49, 130, 206, 77]
        >>> lake_fill_rgb(605, 599)[:3]
        [255, 193, 7]
    """
    color = LAKE_FILL_FLOOD if level_ft > normal_pool_ft else LAKE_FILL_NORMAL
    return list(hex_to_rgb(color)) + [alpha]


def lake_outline_rgb(level_ft: float, normal_pool_ft: float) -> list[int]:
    color = LAKE_OUTLINE_FLOOD if level_ft > normal_pool_ft else LAKE_OUTLINE_NORMAL
    return list(hex_to_rgb(color)) + [255]


POI_COLORS = {
    "dam": "#6b7280",
    "marina": "#0ea5e9",
    "campground": "#22c55e",
    "inlet": "#3b82f6",
    "wildlife": "#84cc16",
}


# =============================================================================
# BADGES
# =============================================================================

RATING_COLORS = {
    "Excellent": "#34d399",  # Emerald
    "Good": "#22d3ee",  # Cyan
    "Fair": "#facc15",  # Yellow
    "Poor": "#f87171",  # Red
}

RAMP_STATUS_COLORS = {
    "open": "#22c55e",
    "limited": "#f59e0b",
    "closed": "#ef4444",
}

LEVEL_STATUS_COLORS = {
    "normal": "#34d399",
    "elevated": "#facc15",
    "low": "#fb923c",
}

UNKNOWN_COLOR = "#6b7280"


def rating_color(rating: str) -> str:
    """Badge color for a rating.

    Examples:
        >>> rating_color("Good")
        '#22d3ee'
        >>> rating_color("Stellar")
        '#6b7280'
    """
    return RATING_COLORS.get(rating, UNKNOWN_COLOR)


def ramp_status_rgb(status: str, alpha: int = 220) -> list[int]:
    """Ramp marker color for PyDeck."""
    return list(hex_to_rgb(RAMP_STATUS_COLORS.get(status, UNKNOWN_COLOR))) + [alpha]


# =============================================================================
# LEGEND RENDERING
# =============================================================================

def render_depth_legend(container=None) -> None:
    """Render water depth color legend in Streamlit.

    Args:
        container: Streamlit container (st, st.sidebar, st.columns()[0], etc.)
                   If None, uses st directly.
    """
    import streamlit as st

    target = container if container is not None else st

    target.markdown("**Depth**")

    lower = 0
    for threshold, color, category in DEPTH_SCALE:
        label = f"{lower}-{threshold} ft" if threshold < 9999 else f"&gt;{lower} ft"
        target.markdown(
            f'<div style="display:flex;align-items:center;gap:8px;margin:2px 0;">'
            f'<span style="background:{color};width:20px;height:14px;display:inline-block;'
            f'border:1px solid #ccc;border-radius:2px;"></span>'
            f'<span style="font-size:12px;">{category} ({label})</span>'
            f'</div>',
            unsafe_allow_html=True,
        )
        lower = threshold


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., "#3182ce")

    Returns:
        Tuple of (R, G, B) values (0-255)
    """
    hex_color = hex_color.lstrip("#")
    return (
        int(hex_color[0:2], 16),
        int(hex_color[2:4], 16),
        int(hex_color[4:6], 16),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB values to hex color string."""
    return f"#{r:02x}{g:02x}{b:02x}"

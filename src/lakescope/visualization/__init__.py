"""Visualization utilities for the LakeScope dashboard.

This module provides shared color scales and legend components
used across all visual components (maps, badges, charts).
"""

from .colors import (
    DEPTH_SCALE,
    POI_COLORS,
    RAMP_STATUS_COLORS,
    RATING_COLORS,
    depth_category,
    depth_to_hex,
    depth_to_rgb,
    hex_to_rgb,
    lake_fill_rgb,
    lake_outline_rgb,
    ramp_status_rgb,
    rating_color,
    render_depth_legend,
    rgb_to_hex,
)

__all__ = [
    "DEPTH_SCALE",
    "depth_to_hex",
    "depth_to_rgb",
    "depth_category",
    "lake_fill_rgb",
    "lake_outline_rgb",
    "POI_COLORS",
    "RATING_COLORS",
    "RAMP_STATUS_COLORS",
    "rating_color",
    "ramp_status_rgb",
    "render_depth_legend",
    "hex_to_rgb",
    "rgb_to_hex",
]

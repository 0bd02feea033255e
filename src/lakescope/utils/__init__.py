"""Shared utilities for LakeScope."""

from .geo import BoundingBox, Point, haversine, points_close
from .numbers import clamp, round_half_up
from .result import FetchError, FetchResult

__all__ = [
    "BoundingBox",
    "Point",
    "haversine",
    "points_close",
    "clamp",
    "round_half_up",
    "FetchError",
    "FetchResult",
]

from __future__ import annotations

DEFAULT_ZOOM = 10.0
ZOOM_STEP = 5.0
MIN_ZOOM = 5.0
MAX_ZOOM = 200.0


def clamp_zoom(level: float) -> float:
    return max(MIN_ZOOM, min(MAX_ZOOM, level))


def zoom_in(level: float) -> float:
    return clamp_zoom(level + ZOOM_STEP)


def zoom_out(level: float) -> float:
    return clamp_zoom(level - ZOOM_STEP)


def reset_zoom() -> float:
    return DEFAULT_ZOOM


def point_size(level: float) -> int:
    """Integer font point size for a zoom level."""
    return int(clamp_zoom(level))

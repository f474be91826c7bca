"""Entry points used by request handlers and the CLI."""

from __future__ import annotations

import math

from .layout import layout
from .models import DonationConfig, SceneLabels, Theme
from .progress import compute_completion, total_raised
from .raster import rasterize_png
from .scene import compose

SVG_MIME = "image/svg+xml"
PNG_MIME = "image/png"

DEFAULT_WIDTH = 800
DEFAULT_SCALE = 1.0
MIN_SCALE = 0.1
MAX_SCALE = 5.0


def clamp_scale(scale: float, min_scale: float = MIN_SCALE, max_scale: float = MAX_SCALE) -> float:
    if not math.isfinite(scale):
        return DEFAULT_SCALE
    return max(min_scale, min(max_scale, scale))


def clamp_width(width: int | None, default: int = DEFAULT_WIDTH) -> int:
    if width is None or width < 1:
        return default
    return int(width)


def render_scene(config: DonationConfig, width: int = DEFAULT_WIDTH, theme: Theme | str = Theme.LIGHT) -> str:
    theme = Theme.parse(theme)
    completion = compute_completion(config.goal, (t.total_raised for t in config.teams))
    geometry = layout(width, completion, theme)
    labels = SceneLabels(
        title=config.title,
        achieved_amount=total_raised(config.teams),
        goal_amount=config.goal,
    )
    return compose(geometry, theme, labels)


def render_raster(scene: str, scale: float) -> bytes:
    """PNG bytes for ``scene``; raises ``RasterizationError`` on failure."""
    return rasterize_png(scene, scale)

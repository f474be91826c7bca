"""Renderer package for the donation thermometer gauge."""

from .layout import layout
from .models import DonationConfig, GeometryRecord, Palette, PercentageMarker, RasterImage, SceneLabels, Team, Theme
from .pipeline import (
    DEFAULT_WIDTH,
    MAX_SCALE,
    MIN_SCALE,
    PNG_MIME,
    SVG_MIME,
    clamp_scale,
    clamp_width,
    render_raster,
    render_scene,
)
from .progress import ProgressSummary, compute_completion, summarize, total_raised
from .raster import BufferAllocationFailed, EncodeFailed, ParseFailed, RasterizationError, rasterize, rasterize_png
from .scene import PLACEHOLDER_SVG, compose
from .themes import DEFAULT_THEME, get_palette, list_themes

__all__ = [
    "BufferAllocationFailed",
    "DEFAULT_THEME",
    "DEFAULT_WIDTH",
    "DonationConfig",
    "EncodeFailed",
    "GeometryRecord",
    "MAX_SCALE",
    "MIN_SCALE",
    "PLACEHOLDER_SVG",
    "PNG_MIME",
    "Palette",
    "ParseFailed",
    "PercentageMarker",
    "ProgressSummary",
    "RasterImage",
    "RasterizationError",
    "SVG_MIME",
    "SceneLabels",
    "Team",
    "Theme",
    "clamp_scale",
    "clamp_width",
    "compose",
    "compute_completion",
    "get_palette",
    "layout",
    "list_themes",
    "rasterize",
    "rasterize_png",
    "render_raster",
    "render_scene",
    "summarize",
    "total_raised",
]

"""SVG scene composition from a laid-out geometry record."""

from __future__ import annotations

import logging
from functools import cache

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from .models import GeometryRecord, SceneLabels, Theme
from .themes import get_palette

TEMPLATE_NAME = "thermometer.svg.j2"
FONT_FAMILY = "DejaVu Sans, Liberation Sans, Arial, sans-serif"
PLACEHOLDER_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><text>Error rendering thermometer</text></svg>'

_LOGGER = logging.getLogger("thermometer.renderer")


def fmt(value: float) -> str:
    return f"{value:.2f}"


@cache
def build_template_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("thermometer_renderer", "templates"),
        autoescape=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.filters["fmt"] = fmt
    return env


def compose(geometry: GeometryRecord, theme: Theme | str | None = None, labels: SceneLabels | None = None) -> str:
    """Fill the SVG template; never raises for a bad template or value.

    On failure the error is logged and ``PLACEHOLDER_SVG`` is returned so an
    image response always has a valid document.
    """
    try:
        template = build_template_environment().get_template(TEMPLATE_NAME)
        return template.render(
            g=geometry,
            p=get_palette(theme if theme is not None else geometry.theme),
            labels=labels or SceneLabels(),
            font_family=FONT_FAMILY,
        )
    except (TemplateError, TypeError, ValueError) as exc:
        _LOGGER.error("failed to render thermometer template: %s", exc, extra={"event": "scene_fallback"})
        return PLACEHOLDER_SVG

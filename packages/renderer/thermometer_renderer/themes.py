"""Built-in thermometer color palettes."""

from __future__ import annotations

from .models import Palette, Theme

DEFAULT_THEME = Theme.LIGHT

# Christmas red fill on a neutral gauge.
LIGHT_PALETTE = Palette(
    background="white",
    title_text="#4A4A4A",
    text_primary="#4A4A4A",
    text_secondary="#888888",
    tube_fill="white",
    tube_stroke="#6B6B6B",
    fill_start="#DC143C",
    fill_end="#FF6B6B",
    achieved_text="#DC143C",
    marker_stroke="#888",
    marker_text="#888",
)

# Brighter reds so the fill keeps its contrast on a dark background.
DARK_PALETTE = Palette(
    background="#1a1a1a",
    title_text="#E0E0E0",
    text_primary="#E0E0E0",
    text_secondary="#AAAAAA",
    tube_fill="#2a2a2a",
    tube_stroke="#9B9B9B",
    fill_start="#FF4444",
    fill_end="#FF7777",
    achieved_text="#FF6B6B",
    marker_stroke="#AAAAAA",
    marker_text="#AAAAAA",
)

PALETTES: dict[Theme, Palette] = {
    Theme.LIGHT: LIGHT_PALETTE,
    Theme.DARK: DARK_PALETTE,
}


def list_themes() -> list[str]:
    return [theme.value for theme in PALETTES]


def get_palette(theme: Theme | str) -> Palette:
    return PALETTES[Theme.parse(theme)]

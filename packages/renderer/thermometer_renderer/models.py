"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: str | Theme) -> Theme:
        if isinstance(value, Theme):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown theme: {value!r}") from None


@dataclass(frozen=True)
class Palette:
    background: str
    title_text: str
    text_primary: str
    text_secondary: str
    tube_fill: str
    tube_stroke: str
    fill_start: str
    fill_end: str
    achieved_text: str
    marker_stroke: str
    marker_text: str


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Team:
    name: str
    image_url: str | None = None
    total_raised: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "image_url": self.image_url, "total_raised": self.total_raised}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Team:
        return cls(
            name=str(raw.get("name", "")),
            image_url=raw.get("image_url") or None,
            total_raised=float(raw.get("total_raised", 0.0)),
        )


@dataclass(frozen=True)
class DonationConfig:
    organization_name: str
    title: str
    goal: float
    teams: tuple[Team, ...] = ()
    last_updated: str = field(default_factory=_utc_now)

    @classmethod
    def default(cls) -> DonationConfig:
        return cls(
            organization_name="Community Animal Rescue Effort",
            title="Animal Shelter Donation Drive",
            goal=10000.0,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "organization_name": self.organization_name,
            "title": self.title,
            "goal": self.goal,
            "teams": [t.to_dict() for t in self.teams],
            "last_updated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> DonationConfig:
        defaults = cls.default()
        return cls(
            organization_name=str(raw.get("organization_name", defaults.organization_name)),
            title=str(raw.get("title", defaults.title)),
            goal=float(raw.get("goal", defaults.goal)),
            teams=tuple(Team.from_dict(t) for t in raw.get("teams") or []),
            last_updated=str(raw.get("last_updated") or defaults.last_updated),
        )


@dataclass(frozen=True)
class PercentageMarker:
    percentage: int
    line_x1: float
    line_x2: float
    y: float
    text_x: float
    text_y: float
    font_size: float


@dataclass(frozen=True)
class GeometryRecord:
    """Every coordinate and font size needed to draw one thermometer.

    Float fields are already rounded to two decimals; ``percent_text`` is the
    completion percentage with no decimals.
    """

    theme: Theme
    width: int
    height: int
    title_x: float
    title_y: float
    title_font_size: float
    tube_x: float
    tube_y: float
    tube_width: float
    tube_height: float
    fill_x: float
    fill_y: float
    fill_width: float
    fill_height: float
    bulb_center_x: float
    bulb_center_y: float
    bulb_radius: float
    bulb_fill_radius: float
    markers: tuple[PercentageMarker, ...]
    text_x: float
    achieved_y: float
    achieved_label_y: float
    goal_y: float
    goal_label_y: float
    percent_y: float
    percent_label_y: float
    amount_font_size: float
    label_font_size: float
    percent_font_size: float
    percent_label_font_size: float
    percent_text: str


@dataclass(frozen=True)
class SceneLabels:
    title: str = ""
    achieved_amount: float = 0.0
    goal_amount: float = 0.0


@dataclass(frozen=True)
class RasterImage:
    width: int
    height: int
    pixel_format: str
    pixels: bytes

    def encode_png(self) -> bytes:
        from .raster import encode_png

        return encode_png(self)

"""Resolution-independent thermometer geometry.

Every dimension is a fixed proportion of the output width, so a gauge laid
out at any width has the same relative proportions. The ratios below must not
be replaced with pixel values.
"""

from __future__ import annotations

from .models import GeometryRecord, PercentageMarker, Theme

HEIGHT_RATIO = 1.2

# Thermometer bounding box, relative to canvas width/height.
BOX_X_RATIO = 0.10
BOX_Y_RATIO = 0.15
BOX_WIDTH_RATIO = 0.35
BOX_HEIGHT_RATIO = 0.60

# Relative to the bounding box width.
BULB_RADIUS_RATIO = 0.4
TUBE_WIDTH_RATIO = 0.35
MARKER_LENGTH_RATIO = 0.25

FILL_INSET = 2.5
BULB_FILL_INSET = 3.0
MARKER_GAP = 5.0
MARKER_BASELINE_RATIO = 0.35
MARKER_LEVELS = (100, 80, 60, 40, 20, 0)

TEXT_X_RATIO = 0.55
TITLE_Y_RATIO = 0.10
ACHIEVED_Y_RATIO = 0.35
GOAL_Y_RATIO = 0.55
PERCENT_Y_RATIO = 0.75

# Font sizes and label offsets, relative to canvas width.
TITLE_FONT_RATIO = 0.035
AMOUNT_FONT_RATIO = 0.06
LABEL_FONT_RATIO = 0.025
PERCENT_FONT_RATIO = 0.09
PERCENT_LABEL_FONT_RATIO = 0.022
MARKER_FONT_RATIO = 0.02
AMOUNT_LABEL_OFFSET_RATIO = 0.03
PERCENT_LABEL_OFFSET_RATIO = 0.025


def _r(value: float) -> float:
    return round(value, 2)


def canvas_height(width: int) -> int:
    return int(width * HEIGHT_RATIO)


def _markers(tube_x: float, tube_y: float, tube_height: float, box_width: float, width: int) -> tuple[PercentageMarker, ...]:
    marker_length = box_width * MARKER_LENGTH_RATIO
    font_size = width * MARKER_FONT_RATIO
    line_x1 = tube_x - marker_length - MARKER_GAP
    out = []
    for p in MARKER_LEVELS:
        y = tube_y + tube_height * (1.0 - p / 100.0)
        out.append(
            PercentageMarker(
                percentage=p,
                line_x1=_r(line_x1),
                line_x2=_r(tube_x - MARKER_GAP),
                y=_r(y),
                text_x=_r(line_x1 - MARKER_GAP),
                text_y=_r(y + font_size * MARKER_BASELINE_RATIO),
                font_size=_r(font_size),
            )
        )
    return tuple(out)


def layout(width: int, completion: float, theme: Theme = Theme.LIGHT) -> GeometryRecord:
    """Derive the full geometry for a gauge ``width`` pixels wide.

    ``completion`` is the ratio returned by ``compute_completion``. The theme is
    carried through for the composer and never changes a coordinate.
    """
    if width <= 0:
        raise ValueError("width must be positive")

    height = canvas_height(width)
    box_x = width * BOX_X_RATIO
    box_y = height * BOX_Y_RATIO
    box_width = width * BOX_WIDTH_RATIO
    box_height = height * BOX_HEIGHT_RATIO

    bulb_radius = box_width * BULB_RADIUS_RATIO
    tube_width = box_width * TUBE_WIDTH_RATIO
    tube_height = box_height - bulb_radius
    tube_x = box_x + (box_width - tube_width) / 2.0
    tube_y = box_y

    # NaN compares false, so it draws an empty tube like a negative ratio.
    fill_height = tube_height * completion if completion > 0 else 0.0
    fill_y = tube_y + tube_height - fill_height

    achieved_y = height * ACHIEVED_Y_RATIO
    goal_y = height * GOAL_Y_RATIO
    percent_y = height * PERCENT_Y_RATIO

    return GeometryRecord(
        theme=Theme.parse(theme),
        width=width,
        height=height,
        title_x=_r(width / 2.0),
        title_y=_r(height * TITLE_Y_RATIO),
        title_font_size=_r(width * TITLE_FONT_RATIO),
        tube_x=_r(tube_x),
        tube_y=_r(tube_y),
        tube_width=_r(tube_width),
        tube_height=_r(tube_height),
        fill_x=_r(tube_x + FILL_INSET),
        fill_y=_r(fill_y),
        fill_width=_r(tube_width - 2 * FILL_INSET),
        fill_height=_r(fill_height),
        bulb_center_x=_r(box_x + box_width / 2.0),
        bulb_center_y=_r(tube_y + tube_height + bulb_radius),
        bulb_radius=_r(bulb_radius),
        bulb_fill_radius=_r(bulb_radius - BULB_FILL_INSET),
        markers=_markers(tube_x, tube_y, tube_height, box_width, width),
        text_x=_r(width * TEXT_X_RATIO),
        achieved_y=_r(achieved_y),
        achieved_label_y=_r(achieved_y + width * AMOUNT_LABEL_OFFSET_RATIO),
        goal_y=_r(goal_y),
        goal_label_y=_r(goal_y + width * AMOUNT_LABEL_OFFSET_RATIO),
        percent_y=_r(percent_y),
        percent_label_y=_r(percent_y + width * PERCENT_LABEL_OFFSET_RATIO),
        amount_font_size=_r(width * AMOUNT_FONT_RATIO),
        label_font_size=_r(width * LABEL_FONT_RATIO),
        percent_font_size=_r(width * PERCENT_FONT_RATIO),
        percent_label_font_size=_r(width * PERCENT_LABEL_FONT_RATIO),
        percent_text=f"{completion * 100.0:.0f}",
    )

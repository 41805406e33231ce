"""Geometry and retargeting helpers for border outlines.

All coordinates are box-local: origin at the widget's top-left corner, y
growing downwards. The renderer converts to surface coordinates.

Every outline is the closed loop ``[top-left, top-right, bottom-right,
bottom-left, top-left]``; the repeated first corner closes the stroke.
"""
from __future__ import annotations

from typing import List, Tuple

from expander.components.border_point import BorderPoint
from expander.components.border_shape import BorderShape
from expander.components.border_style import BorderStyle
from expander.components.widget_box import WidgetBox
from expander.constants import OUTLINE_POINT_COUNT

Corner = Tuple[float, float]


def _closed_rect(left: float, top: float, right: float, bottom: float) -> List[Corner]:
    return [
        (left, top),
        (right, top),
        (right, bottom),
        (left, bottom),
        (left, top),
    ]


def resting_corners(box: WidgetBox) -> List[Corner]:
    """The padded rectangle shown while the widget is untouched."""
    pad = box.padding
    inner_width = box.width - pad.left - pad.right
    inner_height = box.height - pad.top - pad.bottom
    return _closed_rect(pad.left, pad.top, pad.left + inner_width, pad.top + inner_height)


def expanded_corners(box: WidgetBox, outer_inset: float) -> List[Corner]:
    """The rectangle inset by ``outer_inset`` from the full widget bounds."""
    return _closed_rect(outer_inset, outer_inset, box.width - outer_inset, box.height - outer_inset)


def outer_inset(style: BorderStyle, shape: BorderShape) -> float:
    return style.stroke_width + shape.config.outer_extra


def compute_resting_outline(shape: BorderShape, box: WidgetBox, now: float) -> None:
    """(Re)build the shape at rest on the padded rectangle.

    Called at measurement time; any running motion is discarded.
    """
    corners = resting_corners(box)
    if len(shape.points) != OUTLINE_POINT_COUNT:
        shape.points = [BorderPoint.resting(x, y, now) for x, y in corners]
    for point, (x, y) in zip(shape.points, corners):
        shape.motion.place(point, x, y, now)
    shape.expanded = False


def _retarget(shape: BorderShape, corners: List[Corner], now: float) -> None:
    if not shape.points:
        # Not measured yet: nothing to move from, settle directly on the targets.
        shape.points = [BorderPoint.resting(x, y, now) for x, y in corners]
        for point, (x, y) in zip(shape.points, corners):
            shape.motion.place(point, x, y, now)
        return
    for point, (x, y) in zip(shape.points, corners):
        shape.motion.retarget(point, x, y, now)


def compute_expanded_target(shape: BorderShape, box: WidgetBox, inset: float, now: float) -> None:
    _retarget(shape, expanded_corners(box, inset), now)
    shape.expanded = True


def compute_contracted_target(shape: BorderShape, box: WidgetBox, now: float) -> None:
    _retarget(shape, resting_corners(box), now)
    shape.expanded = False


def current_outline_path(shape: BorderShape) -> List[Corner]:
    return [point.position() for point in shape.points]

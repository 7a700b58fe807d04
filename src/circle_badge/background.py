"""Circular badge background."""

from __future__ import annotations

from dataclasses import dataclass

from circle_badge.canvas import Canvas


@dataclass(frozen=True)
class BackgroundGeometry:
    circle_diameter: float
    center_x: float
    center_y: float
    circle_radius: float


def draw_background(size: float, scale: float, canvas: Canvas, color: str) -> BackgroundGeometry:
    """Fill a circle of diameter size*scale that touches the top edge of the canvas.

    The vertical center is the circle's own radius, not size/2, which leaves the
    bottom (1 - scale) of the canvas free for the text label.
    """
    circle_diameter = size * scale
    circle_radius = circle_diameter / 2
    center_x = size / 2
    center_y = circle_diameter / 2

    canvas.fill_style = color
    canvas.fill_circle(center_x, center_y, circle_radius)
    return BackgroundGeometry(
        circle_diameter=circle_diameter,
        center_x=center_x,
        center_y=center_y,
        circle_radius=circle_radius,
    )

"""Rounded text label drawn across the bottom of the badge circle."""

from __future__ import annotations

from circle_badge.canvas import Canvas

_LABEL_BG = "#FFFFFF"
_SHADOW = "#000000"
_SHADOW_ALPHA = 0.1


def draw_text_box(size: float, circle_diameter: float, canvas: Canvas, text: str, color: str) -> None:
    """Draw the white label box, its centered text, and a flat shadow over it."""
    box_width = size * 0.8
    box_height = size * 0.2
    box_x = (size - box_width) / 2
    box_y = circle_diameter - box_height * 0.3  # top 30% overlaps the circle

    canvas.fill_style = _LABEL_BG
    canvas.fill_rounded_rect(box_x, box_y, box_width, box_height, box_height * 0.3)

    canvas.set_font(box_height * 0.8)
    text_width = canvas.measure_text(text)
    text_x = box_x + (box_width - text_width) / 2
    text_y = box_y + box_height * 0.8
    canvas.fill_style = color
    canvas.fill_text(text, text_x, text_y)

    canvas.fill_style = _SHADOW
    canvas.global_alpha = _SHADOW_ALPHA
    canvas.fill_rect(box_x, box_y, box_width, box_height)
    canvas.global_alpha = 1.0

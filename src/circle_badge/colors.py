"""Badge color registry. Pure functions, no side effects."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Color name -> hex, in the order they are offered to users
COLORS: Mapping[str, str] = MappingProxyType({
    "primary": "#FF6B6B",
    "secondary": "#4ECDC4",
    "accent": "#45B7D1",
    "success": "#8AC46B",
    "warning": "#FFD66B",
    "info": "#6B88FF",
    "error": "#FF6B87",
})


class InvalidColorError(ValueError):
    """Raised when a color name is not in the registry."""

    def __init__(self, color: str) -> None:
        self.color = color
        super().__init__(f"Invalid color. Choose from: {', '.join(COLORS)}")


def is_valid_color(color: str) -> bool:
    """Return True if color is a registered color name."""
    return color in COLORS


def get_color_hex(color: str) -> str:
    """Resolve a color name to its '#RRGGBB' value."""
    if not is_valid_color(color):
        raise InvalidColorError(color)
    return COLORS[color]


def get_available_colors() -> list[str]:
    """Return all color names in declaration order."""
    return list(COLORS)

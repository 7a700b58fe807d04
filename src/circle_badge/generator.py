"""Badge generation: background, icon and text label composed onto one PNG."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from circle_badge.background import draw_background
from circle_badge.canvas import Canvas
from circle_badge.colors import InvalidColorError, get_color_hex, is_valid_color
from circle_badge.icon import draw_icon
from circle_badge.textbox import draw_text_box

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 200
CIRCLE_SCALE = 0.85


@dataclass(frozen=True)
class BadgeConfig:
    text: str
    color: str
    output: str | Path
    size: int | None = None
    icon: str | None = None


async def create_badge(
    config: BadgeConfig,
    icons_dir: Path | None = None,
    make_dirs: bool = False,
) -> str | None:
    """Render a badge and write it to config.output as PNG.

    Raises InvalidColorError for an unknown color and IconLoadError when the
    icon cannot be loaded. A failure to encode or write the file is logged
    and reported as a None return instead.
    """
    if not is_valid_color(config.color):
        raise InvalidColorError(config.color)
    color_hex = get_color_hex(config.color)

    size = config.size or DEFAULT_SIZE
    canvas = Canvas(size, size)

    geometry = draw_background(size, CIRCLE_SCALE, canvas, color_hex)

    if config.icon:
        await draw_icon(
            config.icon,
            geometry.circle_diameter,
            geometry.center_x,
            geometry.center_y,
            canvas,
            icons_dir=icons_dir,
        )

    draw_text_box(size, geometry.circle_diameter, canvas, config.text, color_hex)

    output = Path(config.output)
    try:
        png = canvas.to_png()
        if make_dirs:
            output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(png)
    except (OSError, ValueError) as exc:
        logger.error("Error saving badge to %s: %s", output, exc)
        return None
    logger.debug("Wrote %dx%d badge to %s", size, size, output)
    return str(config.output)


def generate_badge(
    config: BadgeConfig,
    icons_dir: Path | None = None,
    make_dirs: bool = False,
) -> str | None:
    """Synchronous wrapper around create_badge for callers without an event loop."""
    return asyncio.run(create_badge(config, icons_dir=icons_dir, make_dirs=make_dirs))

"""Local SVG icon library: listing and importing white-recolored icons."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_WHITE = "#FFFFFF"
_DARK_PAINT = re.compile(r'\b(fill|stroke)="(?:#000000|currentColor)"')


def recolor_svg(content: str) -> str:
    """Turn black and currentColor fills/strokes white so icons show on colored circles."""
    return _DARK_PAINT.sub(lambda m: f'{m.group(1)}="{_WHITE}"', content)


def list_icons(icons_dir: Path) -> list[str]:
    """Return sorted SVG filenames in icons_dir, or [] if it does not exist."""
    if not icons_dir.is_dir():
        return []
    return sorted(p.name for p in icons_dir.glob("*.svg") if p.is_file())


def import_icons(source_dir: Path, icons_dir: Path) -> list[str]:
    """Copy every SVG in source_dir into icons_dir, recolored white.

    Returns the names written. Raises FileNotFoundError if source_dir is missing.
    """
    if not source_dir.is_dir():
        raise FileNotFoundError(f"Icon source directory not found: {source_dir}")
    icons_dir.mkdir(parents=True, exist_ok=True)

    written: list[str] = []
    for svg_path in sorted(source_dir.glob("*.svg")):
        content = svg_path.read_text(encoding="utf-8")
        (icons_dir / svg_path.name).write_text(recolor_svg(content), encoding="utf-8")
        logger.debug("Processed %s", svg_path.name)
        written.append(svg_path.name)
    return written

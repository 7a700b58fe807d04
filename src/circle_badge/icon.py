"""SVG icon rendering for badges.

Loads an SVG from the icons directory, rescales it to 85% of the circle
diameter, rasterizes it and composites the bitmap centered on the circle.
Rasterizing happens in two awaited stages (SVG -> PNG bytes -> Pillow image),
so the icon is fully on the canvas when ``draw_icon`` returns.
"""

from __future__ import annotations

import asyncio
import io
import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from PIL import Image

from circle_badge.canvas import Canvas
from circle_badge.config import DEFAULT_ICONS_DIR

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

ICON_SCALE = 0.85
DEFAULT_LENGTH = "24"
DEFAULT_VIEWBOX = "0 0 24 24"

# Root attributes that the rescaled document sets itself
_MANUAL_ATTRIBUTES = frozenset({"xmlns", "viewBox", "width", "height"})

_LEADING_NUMBER = re.compile(r"\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)


class IconLoadError(Exception):
    """Raised when an icon cannot be read, parsed or rasterized."""

    def __init__(self, icon: str) -> None:
        self.icon = icon
        super().__init__(f"Failed to load SVG icon: {icon}")


def _parse_length(value: str) -> float:
    """Parse the leading number of an SVG length ('24', '24px', '1.5em')."""
    match = _LEADING_NUMBER.match(value)
    if not match:
        raise ValueError(f"Invalid SVG length: {value!r}")
    return float(match.group())


def _parse_viewbox(value: str) -> tuple[float, float, float, float]:
    parts = [float(p) for p in re.split(r"[\s,]+", value.strip())]
    if len(parts) != 4:
        raise ValueError(f"Invalid SVG viewBox: {value!r}")
    return parts[0], parts[1], parts[2], parts[3]


def _fmt(value: float) -> str:
    """Format a number for an SVG attribute: 170.0 -> '170', 144.5 -> '144.5'."""
    return f"{value:.6f}".rstrip("0").rstrip(".")


def _qualify(root: ET.Element) -> None:
    """Put un-namespaced elements into the SVG namespace."""
    for element in root.iter():
        if isinstance(element.tag, str) and not element.tag.startswith("{"):
            element.tag = f"{{{SVG_NS}}}{element.tag}"


def build_scaled_svg(svg_text: str, icon_size: float) -> tuple[str, float]:
    """Rebuild an SVG document so it renders at icon_size x icon_size.

    The viewBox keeps its origin and has its extent multiplied by the fit
    scale; the original children are wrapped in a ``scale()`` group. Other
    root attributes (fill, stroke, ...) are carried over.

    Returns (svg markup, scale factor).
    """
    root = ET.fromstring(svg_text)
    if root.tag.rsplit("}", 1)[-1] != "svg":
        raise ValueError("Root element is not <svg>")

    width = _parse_length(root.get("width") or DEFAULT_LENGTH)
    height = _parse_length(root.get("height") or DEFAULT_LENGTH)
    scale = min(icon_size / width, icon_size / height)
    vx, vy, vw, vh = _parse_viewbox(root.get("viewBox") or DEFAULT_VIEWBOX)

    _qualify(root)
    scaled = ET.Element(f"{{{SVG_NS}}}svg")
    scaled.set("viewBox", f"{_fmt(vx)} {_fmt(vy)} {_fmt(vw * scale)} {_fmt(vh * scale)}")
    scaled.set("width", _fmt(icon_size))
    scaled.set("height", _fmt(icon_size))
    for name, value in root.attrib.items():
        if name not in _MANUAL_ATTRIBUTES:
            scaled.set(name, value)

    group = ET.SubElement(scaled, f"{{{SVG_NS}}}g", transform=f"scale({_fmt(scale)})")
    group.extend(list(root))
    return ET.tostring(scaled, encoding="unicode"), scale


def _svg_to_png(svg: str, pixels: int) -> bytes:
    import cairosvg

    return cairosvg.svg2png(
        bytestring=svg.encode("utf-8"),
        output_width=pixels,
        output_height=pixels,
    )


def _png_to_image(png: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(png))
    image.load()
    return image.convert("RGBA")


async def rasterize_svg(svg: str, icon_size: float) -> bytes:
    """Render SVG markup onto a temporary icon_size square surface, as PNG bytes."""
    return await asyncio.to_thread(_svg_to_png, svg, max(1, int(icon_size)))


async def load_bitmap(png: bytes) -> Image.Image:
    """Decode rasterized PNG bytes into an image ready for compositing."""
    return await asyncio.to_thread(_png_to_image, png)


async def draw_icon(
    icon: str,
    circle_diameter: float,
    center_x: float,
    center_y: float,
    canvas: Canvas,
    icons_dir: Path | None = None,
) -> None:
    """Draw an SVG icon from icons_dir centered at (center_x, center_y).

    Raises IconLoadError naming the icon if it cannot be read, parsed or
    rasterized. Nothing is drawn on the canvas in that case.
    """
    icon_path = Path(icons_dir or DEFAULT_ICONS_DIR) / icon
    icon_size = circle_diameter * ICON_SCALE

    try:
        svg_text = await asyncio.to_thread(icon_path.read_text, encoding="utf-8")
        scaled_svg, scale = build_scaled_svg(svg_text, icon_size)
        logger.debug("Rescaled %s by %.4f to %.1fpx", icon, scale, icon_size)
        png = await rasterize_svg(scaled_svg, icon_size)
        bitmap = await load_bitmap(png)
    except Exception as exc:
        logger.error("Error loading SVG icon %s: %s", icon_path, exc)
        raise IconLoadError(icon) from exc

    x = center_x - icon_size / 2
    y = center_y - icon_size / 2
    canvas.draw_image(bitmap, x, y, icon_size, icon_size)

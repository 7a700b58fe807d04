"""Drawing surface for badge rendering.

A thin 2D context over a Pillow RGBA image. Every fill is painted on its own
transparent layer and alpha-composited, so ``global_alpha`` blends the way a
canvas context does.
"""

from __future__ import annotations

import io

from PIL import Image, ImageColor, ImageDraw, ImageFont

# Tried in order; Pillow searches the platform font directories for bare names
_BOLD_FONTS: tuple[str, ...] = (
    "DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "Arial Bold.ttf",
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
    "arialbd.ttf",
)


def load_bold_font(size: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a bold TrueType font at the given pixel size, falling back to Pillow's default.

    Sizes below one pixel are raised to one; FreeType rejects them.
    """
    size = max(1.0, size)
    for candidate in _BOLD_FONTS:
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


class Canvas:
    """Square-or-rectangular RGBA raster with a minimal drawing context."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self.fill_style = "#000000"
        self.global_alpha = 1.0
        self.font = load_bold_font(10)

    def _fill_rgba(self) -> tuple[int, int, int, int]:
        r, g, b = ImageColor.getrgb(self.fill_style)[:3]
        alpha = round(255 * max(0.0, min(self.global_alpha, 1.0)))
        return (r, g, b, alpha)

    def _layer(self) -> tuple[Image.Image, ImageDraw.ImageDraw]:
        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        return layer, ImageDraw.Draw(layer)

    def fill_circle(self, center_x: float, center_y: float, radius: float) -> None:
        layer, draw = self._layer()
        # Pillow includes both edges of the box, so the far edge is the last covered pixel
        left, top = center_x - radius, center_y - radius
        right = max(left, center_x + radius - 1)
        bottom = max(top, center_y + radius - 1)
        draw.ellipse(
            (left, top, right, bottom),
            fill=self._fill_rgba(),
        )
        self.image.alpha_composite(layer)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        layer, draw = self._layer()
        draw.rectangle((x, y, x + width, y + height), fill=self._fill_rgba())
        self.image.alpha_composite(layer)

    def fill_rounded_rect(
        self, x: float, y: float, width: float, height: float, radius: float
    ) -> None:
        layer, draw = self._layer()
        draw.rounded_rectangle(
            (x, y, x + width, y + height), radius=radius, fill=self._fill_rgba()
        )
        self.image.alpha_composite(layer)

    def set_font(self, size: float) -> None:
        """Select the bold label font at a pixel size."""
        self.font = load_bold_font(size)

    def measure_text(self, text: str) -> float:
        """Rendered advance width of text in the current font; the widest line for multiline text."""
        draw = ImageDraw.Draw(self.image)
        return max(draw.textlength(line, font=self.font) for line in text.split("\n"))

    def fill_text(self, text: str, x: float, y: float) -> None:
        """Draw text with its left edge at x and its baseline at y."""
        layer, draw = self._layer()
        draw.text((x, y), text, font=self.font, fill=self._fill_rgba(), anchor="ls")
        self.image.alpha_composite(layer)

    def draw_image(
        self, image: Image.Image, x: float, y: float, width: float, height: float
    ) -> None:
        """Composite image scaled to width x height with its top-left corner at (x, y)."""
        size = (max(1, round(width)), max(1, round(height)))
        source = image.convert("RGBA")
        if source.size != size:
            source = source.resize(size, Image.Resampling.LANCZOS)
        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        layer.paste(source, (round(x), round(y)))
        self.image.alpha_composite(layer)

    def to_png(self) -> bytes:
        buffer = io.BytesIO()
        self.image.save(buffer, "PNG")
        return buffer.getvalue()

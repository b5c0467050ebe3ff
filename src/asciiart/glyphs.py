from typing import Protocol

import numpy as np
from PIL import Image, ImageDraw, ImageFont

GLYPH_SIZE = 16
INK_THRESHOLD = 128


class GlyphRenderer(Protocol):
    size: int

    def render(self, char: str) -> np.ndarray:
        """Render a character to a (size, size) boolean ink mask. Must be deterministic."""
        ...


def ink_fraction(mask: np.ndarray) -> float:
    """Fraction of cells in a boolean mask that are set."""
    mask = np.asarray(mask, dtype=bool)
    if mask.size == 0:
        raise ValueError("Glyph mask is empty")
    return float(np.count_nonzero(mask)) / mask.size


def _load_font(font_path: str | None, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    if font_path is None:
        return ImageFont.load_default(size)
    return ImageFont.truetype(font_path, size)


class FontGlyphRenderer:
    """Renders characters into a square cell with a Pillow font."""

    def __init__(self, font_path: str | None = None, size: int = GLYPH_SIZE):
        self.font_path = font_path
        self.size = size
        self.font = _load_font(font_path, size)
        # Align the cap height of a reference character with the top of the cell
        bbox = self.font.getbbox("M")
        self.y_offset = -bbox[1]

    def render(self, char: str) -> np.ndarray:
        img = Image.new("L", (self.size, self.size), 0)
        draw = ImageDraw.Draw(img)
        draw.text((0, self.y_offset), char, fill=255, font=self.font)
        return np.asarray(img) >= INK_THRESHOLD

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from asciitile.brightness import glyph_brightness

GLYPH_SIZE = 16
# Pixels at or above this grey level count as background
BACKGROUND_THRESHOLD = 128


def _load_font(font_path: str | None, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    if font_path:
        return ImageFont.truetype(font_path, size)
    return ImageFont.load_default(size=size)


class GlyphRasterizer:
    """Render characters into square boolean bitmaps.

    A set cell marks background, so a blank glyph is fully set and has
    density 1.0, and dense glyphs approach 0.0. Densities are memoized per
    character since the font never changes.
    """

    def __init__(self, font_path: str | None = None, size: int = GLYPH_SIZE):
        self.font_path = font_path
        self.size = size
        self.font = _load_font(font_path, size)
        # Vertical placement follows a reference capital so all glyphs share a baseline
        bbox = self.font.getbbox("M")
        self._y_offset = (size - (bbox[3] - bbox[1])) // 2 - bbox[1]
        self._densities: dict[str, float] = {}

    def bitmap(self, char: str) -> np.ndarray:
        """Boolean array of shape (size, size); True where the glyph leaves background."""
        img = Image.new("L", (self.size, self.size), 255)
        draw = ImageDraw.Draw(img)
        gb = self.font.getbbox(char)
        x_offset = (self.size - (gb[2] - gb[0])) // 2 - gb[0]
        draw.text((x_offset, self._y_offset), char, fill=0, font=self.font)
        return np.asarray(img) >= BACKGROUND_THRESHOLD

    def density(self, char: str) -> float:
        if char not in self._densities:
            self._densities[char] = glyph_brightness(self.bitmap(char))
        return self._densities[char]

    __call__ = density

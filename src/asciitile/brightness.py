import numpy as np

from asciitile.image import Image
from asciitile.tiling import tile_side

# Rec. 709 luma weights
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722
LUMA_WEIGHTS = np.array([RED_WEIGHT, GREEN_WEIGHT, BLUE_WEIGHT])
MAX_CHANNEL = 255.0


def luma(pixels: np.ndarray) -> np.ndarray:
    """Per-pixel weighted grey value of an (..., 3) RGB array, in 0-255."""
    return pixels.astype(np.float64) @ LUMA_WEIGHTS


def tile_brightness(tile: Image) -> float:
    """Average luma of a tile, normalized to [0, 1]."""
    return float(luma(tile.pixels).mean() / MAX_CHANNEL)


def glyph_brightness(bitmap: np.ndarray) -> float:
    """Fraction of set cells in a boolean glyph bitmap."""
    bitmap = np.asarray(bitmap, dtype=bool)
    return float(np.count_nonzero(bitmap) / bitmap.size)


def brightness_grid(padded: Image, resolution: int) -> np.ndarray:
    """Brightness of every tile at once. Returns array of shape (rows, cols).

    Tiles are squares of side ``padded.width // resolution``; any remainder
    on the bottom or right edge is dropped, as in ``tiling.tile``.
    """
    side = tile_side(padded, resolution)
    rows = padded.height // side
    cols = padded.width // side

    grey = luma(padded.pixels)
    trimmed = grey[: rows * side, : cols * side]
    # (rows, side, cols, side) -> mean over each tile's pixels
    cells = trimmed.reshape(rows, side, cols, side)
    return cells.mean(axis=(1, 3)) / MAX_CHANNEL

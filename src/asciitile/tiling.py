import numpy as np

from asciitile.image import Image

WHITE = (255, 255, 255)


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    power = 1
    while power < n:
        power *= 2
    return power


def padding(width: int, height: int) -> tuple[int, int]:
    """Return (vertical, horizontal) offsets that center an image in its padded canvas.

    Odd residue goes to the bottom and right edges.
    """
    vertical = (next_power_of_two(height) - height) // 2
    horizontal = (next_power_of_two(width) - width) // 2
    return vertical, horizontal


def pad(image: Image) -> Image:
    """Center an image on a white canvas whose sides are powers of two.

    Width and height are rounded up independently.
    """
    new_width = next_power_of_two(image.width)
    new_height = next_power_of_two(image.height)
    if (new_width, new_height) == image.size:
        return image

    top, left = padding(image.width, image.height)
    canvas = np.full((new_height, new_width, 3), WHITE, dtype=np.uint8)
    canvas[top : top + image.height, left : left + image.width] = image.pixels
    return Image(canvas)


def tile_side(padded: Image, resolution: int) -> int:
    if resolution < 1:
        raise ValueError(f"Resolution must be positive, got {resolution}")
    side = padded.width // resolution
    if side == 0:
        raise ValueError(f"Resolution {resolution} exceeds image width {padded.width}")
    return side


def tile(padded: Image, resolution: int) -> list[list[Image]]:
    """Split a padded image into a grid of square tiles, `resolution` per row.

    The grid is (height // side) x (width // side); partial tiles are dropped.
    """
    side = tile_side(padded, resolution)
    rows = padded.height // side
    cols = padded.width // side
    return [[padded.crop(r * side, c * side, side, side) for c in range(cols)] for r in range(rows)]

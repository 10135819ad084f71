from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from asciitile.errors import ImageLoadError


@dataclass(frozen=True, eq=False)
class Image:
    """Immutable RGB pixel grid of shape (height, width, 3), dtype uint8."""

    pixels: np.ndarray

    def __post_init__(self):
        arr = np.asarray(self.pixels)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"Expected (height, width, 3) pixel array, got shape {arr.shape}")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValueError("Image must have at least one pixel")
        arr = np.array(arr, dtype=np.uint8, copy=True)
        arr.setflags(write=False)
        object.__setattr__(self, "pixels", arr)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def pixel(self, row: int, col: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[row, col]
        return (int(r), int(g), int(b))

    def crop(self, top: int, left: int, height: int, width: int) -> "Image":
        return Image(self.pixels[top : top + height, left : left + width])

    @classmethod
    def from_pil(cls, image: PILImage.Image) -> "Image":
        return cls(np.asarray(image.convert("RGB"), dtype=np.uint8))

    @classmethod
    def filled(cls, width: int, height: int, colour: tuple[int, int, int] = (255, 255, 255)) -> "Image":
        return cls(np.full((height, width, 3), colour, dtype=np.uint8))


def load_image(path: str | Path) -> Image:
    """Decode an image file into an RGB Image."""
    path = Path(path)
    try:
        with PILImage.open(path) as pil:
            return Image.from_pil(pil)
    except OSError as e:
        raise ImageLoadError(path, str(e)) from e

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from asciitile.brightness import brightness_grid
from asciitile.image import Image
from asciitile.index import CharBrightnessIndex
from asciitile.rounding import DEFAULT_POLICY, RoundingPolicy
from asciitile.tiling import pad


@dataclass(frozen=True, eq=False)
class CharGrid:
    rows: tuple[str, ...]  # one string per row
    brightness: np.ndarray  # (rows, cols) tile brightness the rows were mapped from

    def __post_init__(self):
        # cache hits hand out the same grid
        object.__setattr__(self, "rows", tuple(self.rows))
        self.brightness.setflags(write=False)

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self.rows), len(self.rows[0]) if self.rows else 0)

    def __str__(self) -> str:
        return "\n".join(self.rows)


class Renderer:
    """Maps image tiles to characters by brightness.

    Reads the index's current enrollment on every call and never mutates it.
    """

    def __init__(self, index: CharBrightnessIndex, policy: RoundingPolicy = DEFAULT_POLICY):
        self.index = index
        self.policy = policy

    def brightness(self, image: Image, resolution: int) -> np.ndarray:
        return brightness_grid(pad(image), resolution)

    def map_brightness(self, grid: np.ndarray) -> tuple[str, ...]:
        lookup = self.index.lookup
        policy = self.policy
        return tuple("".join(lookup(float(b), policy) for b in row) for row in grid)

    def render(self, image: Image, resolution: int) -> CharGrid:
        grid = self.brightness(image, resolution)
        return CharGrid(rows=self.map_brightness(grid), brightness=grid)


def render(
    image: Image,
    resolution: int,
    index: CharBrightnessIndex,
    policy: RoundingPolicy = DEFAULT_POLICY,
) -> CharGrid:
    return Renderer(index, policy).render(image, resolution)

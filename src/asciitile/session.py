from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from asciitile.cache import RenderCache
from asciitile.config import Settings
from asciitile.errors import BoundaryExceeded, EmptyIndex
from asciitile.glyphs import GlyphRasterizer
from asciitile.image import Image, load_image
from asciitile.index import CharBrightnessIndex, DensityFn
from asciitile.renderer import CharGrid, Renderer
from asciitile.rounding import RoundingPolicy
from asciitile.tiling import pad

logger = logging.getLogger(__name__)


class ResolutionStep(Enum):
    UP = "up"
    DOWN = "down"


class Session:
    """State for one rendering session: image, resolution, character set and render cache.

    Every character set change goes through `add_chars` / `remove_chars` so
    the cache sees it.
    """

    def __init__(self, image: Image, settings: Settings | None = None, density: DensityFn | None = None):
        self.settings = settings if settings is not None else Settings()
        self.image = pad(image)
        self.min_resolution = max(1, self.image.width // self.image.height)
        self.max_resolution = max(self.min_resolution, self.image.width // 2)
        self.resolution = self._initial_resolution(self.settings.resolution)

        if density is None:
            density = GlyphRasterizer(self.settings.font_path, self.settings.glyph_size).density
        self.index = CharBrightnessIndex(self.settings.charset, density=density)
        self.renderer = Renderer(self.index, RoundingPolicy(self.settings.rounding))
        self.cache = RenderCache()

    @classmethod
    def from_path(cls, path: str | Path, settings: Settings | None = None, density: DensityFn | None = None):
        return cls(load_image(path), settings, density)

    def _initial_resolution(self, resolution: int) -> int:
        clamped = min(max(resolution, self.min_resolution), self.max_resolution)
        if clamped != resolution:
            logger.warning(
                "Resolution %d is outside [%d, %d] for a %dx%d image, using %d",
                resolution,
                self.min_resolution,
                self.max_resolution,
                self.image.width,
                self.image.height,
                clamped,
            )
        return clamped

    @property
    def policy(self) -> RoundingPolicy:
        return self.renderer.policy

    def set_rounding_policy(self, policy: RoundingPolicy) -> None:
        self.renderer.policy = policy

    def set_resolution(self, step: ResolutionStep) -> int:
        """Double or halve the resolution; raises BoundaryExceeded past the image bounds."""
        if step is ResolutionStep.UP:
            if self.resolution * 2 > self.max_resolution:
                raise BoundaryExceeded()
            self.resolution *= 2
        else:
            if self.resolution // 2 < self.min_resolution:
                raise BoundaryExceeded()
            self.resolution //= 2
        logger.info("Resolution set to %d", self.resolution)
        return self.resolution

    def add_chars(self, chars: Iterable[str]) -> list[str]:
        """Enroll characters; returns the ones that were not already present."""
        added = []
        for c in chars:
            if self.index.enroll(c):
                self.cache.delta.record_added(c)
                added.append(c)
        return added

    def remove_chars(self, chars: Iterable[str]) -> list[str]:
        removed = []
        for c in chars:
            if self.index.unenroll(c):
                self.cache.delta.record_removed(c)
                removed.append(c)
        return removed

    def list_chars(self) -> list[str]:
        return self.index.chars()

    def render(self) -> CharGrid:
        if not len(self.index):
            raise EmptyIndex()
        return self.cache.render_or_reuse(self.image, self.resolution, self.renderer)

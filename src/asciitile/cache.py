"""Memo of the last render, reused while its inputs stay unchanged.

A render result stays valid while the image, resolution and rounding policy
match the last render and the character set has no net change since then.
The per-tile brightness matrix survives character set and policy changes,
since it only depends on the image and the resolution.
"""

from __future__ import annotations

import logging

import numpy as np

from asciitile.image import Image
from asciitile.renderer import CharGrid, Renderer
from asciitile.rounding import RoundingPolicy

logger = logging.getLogger(__name__)


class CharsetDelta:
    """Characters added or removed since the last render, net of cancellations."""

    def __init__(self):
        self.added: set[str] = set()
        self.removed: set[str] = set()

    def record_added(self, char: str) -> None:
        if char in self.removed:
            self.removed.discard(char)
        else:
            self.added.add(char)

    def record_removed(self, char: str) -> None:
        if char in self.added:
            self.added.discard(char)
        else:
            self.removed.add(char)

    def is_empty(self) -> bool:
        return not self.added and not self.removed

    def clear(self) -> None:
        self.added.clear()
        self.removed.clear()


class RenderCache:
    def __init__(self):
        self.delta = CharsetDelta()
        self.image: Image | None = None
        self.resolution: int | None = None
        self.policy: RoundingPolicy | None = None
        self.brightness: np.ndarray | None = None
        self.result: CharGrid | None = None

    @property
    def is_warm(self) -> bool:
        return self.result is not None

    def invalidate(self) -> None:
        """Drop the stored render; the next call recomputes everything."""
        self.image = None
        self.resolution = None
        self.policy = None
        self.brightness = None
        self.result = None

    def _same_geometry(self, image: Image, resolution: int) -> bool:
        return self.brightness is not None and image is self.image and resolution == self.resolution

    def render_or_reuse(self, image: Image, resolution: int, renderer: Renderer) -> CharGrid:
        same_geometry = self._same_geometry(image, resolution)
        if self.is_warm and same_geometry and renderer.policy is self.policy and self.delta.is_empty():
            logger.debug("Render cache hit at resolution %d", resolution)
            return self.result

        if same_geometry:
            logger.debug("Reusing tile brightness at resolution %d", resolution)
            brightness = self.brightness
        else:
            logger.debug("Computing tile brightness at resolution %d", resolution)
            brightness = renderer.brightness(image, resolution)

        result = CharGrid(rows=renderer.map_brightness(brightness), brightness=brightness)
        self.image = image
        self.resolution = resolution
        self.policy = renderer.policy
        self.brightness = brightness
        self.result = result
        self.delta.clear()
        return result

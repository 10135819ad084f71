import bisect
import logging
import math
from collections.abc import Callable, Iterable

from asciitile.errors import EmptyIndex
from asciitile.glyphs import GlyphRasterizer
from asciitile.rounding import DEFAULT_POLICY, RoundingPolicy

logger = logging.getLogger(__name__)

DensityFn = Callable[[str], float]

EMPTY_MIN = math.inf
EMPTY_MAX = -math.inf


class CharBrightnessIndex:
    """Characters ordered by density score, with floor/ceiling lookup.

    Scores live in a sorted list maintained with bisect; each score owns a
    sorted bucket of the characters sharing it, so the first entry of a
    bucket is always the smallest character code.
    """

    def __init__(self, chars: Iterable[str] = (), density: DensityFn | None = None):
        self._density = density if density is not None else GlyphRasterizer().density
        self._keys: list[float] = []
        self._buckets: dict[float, list[str]] = {}
        self._scores: dict[str, float] = {}
        self.min_score = EMPTY_MIN
        self.max_score = EMPTY_MAX
        for c in chars:
            self.enroll(c)

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, char: str) -> bool:
        return char in self._scores

    def chars(self) -> list[str]:
        """Enrolled characters in ascending code order."""
        return sorted(self._scores)

    def scores(self) -> dict[float, tuple[str, ...]]:
        return {key: tuple(self._buckets[key]) for key in self._keys}

    def score(self, char: str) -> float:
        return self._scores[char]

    def enroll(self, char: str) -> bool:
        """Add a character. Returns False if it was already enrolled."""
        if char in self._scores:
            return False
        score = float(self._density(char))
        self._scores[char] = score
        bucket = self._buckets.get(score)
        if bucket is None:
            self._buckets[score] = [char]
            bisect.insort(self._keys, score)
        else:
            bisect.insort(bucket, char)
        self.min_score = min(self.min_score, score)
        self.max_score = max(self.max_score, score)
        logger.debug("Enrolled %r with score %.4f", char, score)
        return True

    def unenroll(self, char: str) -> bool:
        """Remove a character. Returns False if it was not enrolled."""
        score = self._scores.pop(char, None)
        if score is None:
            return False
        bucket = self._buckets[score]
        bucket.remove(char)
        if not bucket:
            del self._buckets[score]
            del self._keys[bisect.bisect_left(self._keys, score)]
            if score == self.min_score or score == self.max_score:
                self._recompute_extrema()
        logger.debug("Unenrolled %r", char)
        return True

    def _recompute_extrema(self) -> None:
        if not self._keys:
            self.min_score = EMPTY_MIN
            self.max_score = EMPTY_MAX
            return
        self.min_score = self._keys[0]
        self.max_score = self._keys[-1]

    def floor_key(self, target: float) -> float | None:
        """Largest enrolled score <= target, or None."""
        i = bisect.bisect_right(self._keys, target)
        return self._keys[i - 1] if i else None

    def ceiling_key(self, target: float) -> float | None:
        """Smallest enrolled score >= target, or None."""
        i = bisect.bisect_left(self._keys, target)
        return self._keys[i] if i < len(self._keys) else None

    def target_score(self, brightness: float) -> float:
        """Rescale a [0, 1] brightness into the enrolled score range."""
        return self.min_score + brightness * (self.max_score - self.min_score)

    def lookup(self, brightness: float, policy: RoundingPolicy = DEFAULT_POLICY) -> str:
        """Character whose score best matches `brightness` under `policy`."""
        if not self._keys:
            raise EmptyIndex()
        target = self.target_score(brightness)
        bucket = self._buckets.get(target)
        if bucket is not None:
            return bucket[0]
        key = policy.choose(self.floor_key(target), self.ceiling_key(target), target)
        return self._buckets[key][0]

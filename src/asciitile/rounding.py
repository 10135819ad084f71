from enum import Enum


class RoundingPolicy(Enum):
    """How a target score between two enrolled scores picks its neighbor."""

    ABS = "abs"
    DOWN = "down"
    UP = "up"

    def choose(self, lower: float | None, upper: float | None, target: float) -> float:
        """Pick between the floor and ceiling keys of `target`.

        At least one of `lower` / `upper` must exist. When the neighbor a
        policy asks for is missing, the other one is used.
        """
        if lower is None:
            return upper
        if upper is None:
            return lower
        if self is RoundingPolicy.DOWN:
            return lower
        if self is RoundingPolicy.UP:
            return upper
        # ties favor the lower key
        return lower if target - lower <= upper - target else upper


DEFAULT_POLICY = RoundingPolicy.ABS

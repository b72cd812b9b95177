"""
Exception types raised by the layout algorithms.

Everything derives from ``ValueError``: invalid input is the only way a
layout call can fail.
"""

from typing import Any, Optional


class TreemapError(ValueError):
    """Base class for all layout input errors."""


class InvalidWeightError(TreemapError):
    """A weight is negative, NaN, infinite or not a number."""

    def __init__(self, index: int, weight: Any, reason: str = "invalid"):
        self.index = index
        self.weight = weight
        super().__init__(f"Weight at index {index} is {reason}: {weight!r}")


class UnsortedWeightsError(TreemapError):
    """Squarified input is not sorted in descending order."""

    def __init__(self, index: int, previous: Any, weight: Any):
        self.index = index
        super().__init__(
            f"Weights must be sorted descending: index {index} has "
            f"{weight!r} after {previous!r}"
        )


class InvalidRectError(TreemapError):
    """Container rectangle has a negative extent or a non-finite field."""


class UnknownAlgorithmError(TreemapError):
    """Algorithm or pivot strategy name is not recognised."""

    def __init__(self, name: Any, choices: Optional[list] = None):
        self.name = name
        msg = f"Unknown layout option: {name!r}"
        if choices:
            msg += f" (expected one of: {', '.join(choices)})"
        super().__init__(msg)

"""
Geometry Types

Rectangles and ratio helpers shared by all layout strategies.
"""

from __future__ import annotations
import math
from dataclasses import dataclass


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into the closed interval [low, high]."""
    return max(low, min(high, value))


def is_number(value) -> bool:
    """Whether value is an int or float (bools excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Rect:
    """Rectangle in screen coordinate space."""

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        """Whether no window can be placed in this rectangle."""
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class RatioBounds:
    """Closed interval and adjustment step for a screen-width ratio."""

    minimum: float
    maximum: float
    step: float = 0.05

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise ValueError(
                f"Invalid ratio bounds: minimum {self.minimum} > maximum {self.maximum}"
            )

    def clamp(self, value: float) -> float:
        return clamp(value, self.minimum, self.maximum)

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

"""Core data structures shared by the separation engine and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Tuple, Union

Scalar = Union[int, float]
Coords = Tuple[Scalar, Scalar]
Axis = Literal["v", "h"]

VERTICAL: Axis = "v"
HORIZONTAL: Axis = "h"

# Largest instance the engine accepts unless configured otherwise.
MAX_POINTS = 100


class SeparationError(RuntimeError):
    """Base class for errors that abort the separation of one instance."""


class CapacityExceededError(ValueError):
    """Raised when an instance holds more points than the configured capacity."""

    def __init__(self, count: int, capacity: int):
        super().__init__(f"{count} point(s) exceed the capacity of {capacity}")
        self.count = count
        self.capacity = capacity


@dataclass(frozen=True)
class Point:
    index: int
    x: Scalar
    y: Scalar

    def coord(self, axis: Axis) -> Scalar:
        return self.x if axis == VERTICAL else self.y


@dataclass(frozen=True)
class CandidateLine:
    """Axis-parallel line halfway between two sorted-adjacent points.

    ``rank`` is the position in the pool enumeration (vertical lines first) and
    decides ties between equally scored candidates.
    """

    axis: Axis
    coord: float
    rank: int

    @property
    def is_vertical(self) -> bool:
        return self.axis == VERTICAL


@dataclass
class SeparatorOptions:
    """Configuration knobs for the greedy separator."""

    capacity: int = MAX_POINTS


@dataclass
class SeparationResult:
    lines: List[CandidateLine] = field(default_factory=list)
    cut_counts: List[int] = field(default_factory=list)
    point_count: int = 0
    candidate_count: int = 0

    @property
    def iterations(self) -> int:
        return len(self.lines)

    @property
    def links_removed(self) -> int:
        return sum(self.cut_counts)


__all__ = [
    "Scalar",
    "Coords",
    "Axis",
    "VERTICAL",
    "HORIZONTAL",
    "MAX_POINTS",
    "SeparationError",
    "CapacityExceededError",
    "Point",
    "CandidateLine",
    "SeparatorOptions",
    "SeparationResult",
]

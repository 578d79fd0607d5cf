"""Point storage and the two coordinate orders used by the separator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .model import MAX_POINTS, Axis, CapacityExceededError, Coords, Point, VERTICAL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortedOrder:
    """Point indices sorted ascending by x and by y (both stable)."""

    by_x: Tuple[int, ...]
    by_y: Tuple[int, ...]

    def for_axis(self, axis: Axis) -> Tuple[int, ...]:
        return self.by_x if axis == VERTICAL else self.by_y


def _stable_order(values: np.ndarray) -> Tuple[int, ...]:
    return tuple(int(idx) for idx in np.argsort(values, kind="stable"))


class PointStore:
    """Immutable point set indexed ``0..n-1`` in input order."""

    def __init__(self, coords: Sequence[Coords], *, capacity: Optional[int] = MAX_POINTS):
        if capacity is not None and len(coords) > capacity:
            raise CapacityExceededError(len(coords), capacity)

        self._points: List[Point] = [Point(idx, x, y) for idx, (x, y) in enumerate(coords)]
        self._xs = np.array([p.x for p in self._points], dtype=float)
        self._ys = np.array([p.y for p in self._points], dtype=float)

        by_x = _stable_order(self._xs)
        if by_x != tuple(range(len(self._points))):
            logger.warning("Input points are not sorted by x; reordering %d point(s)", len(self._points))
        self.order = SortedOrder(by_x=by_x, by_y=_stable_order(self._ys))

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def coordinates(self, axis: Axis) -> np.ndarray:
        """Return coordinates along ``axis`` indexed by point identity."""

        return self._xs if axis == VERTICAL else self._ys

    def sorted_coordinates(self, axis: Axis) -> np.ndarray:
        """Return coordinates along ``axis`` in that axis's sorted order."""

        order = np.array(self.order.for_axis(axis), dtype=int)
        return self.coordinates(axis)[order]


__all__ = ["SortedOrder", "PointStore"]

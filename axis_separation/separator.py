"""Greedy selection of axis-parallel lines until every point pair is separated.

Each round scores every live candidate by the number of still-active links it
would cut, commits the best one (the earliest enumerated candidate wins ties),
removes the links it cuts and retires it from the pool.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Literal, Optional, Sequence, Tuple

import numpy as np

from .candidates import CandidateLinePool
from .config import get_separator_options
from .graph import ConnectivityGraph
from .logging_utils import debug_log_call
from .model import (
    HORIZONTAL,
    VERTICAL,
    Axis,
    CandidateLine,
    Coords,
    Scalar,
    SeparationError,
    SeparationResult,
    SeparatorOptions,
)
from .points import PointStore

logger = logging.getLogger(__name__)

SeparatorState = Literal["pending", "separating", "done", "aborted"]


class PoolExhaustionError(SeparationError):
    """Raised when no live candidate cuts a link while links remain."""

    def __init__(self, active: int, live: int):
        super().__init__(
            f"no positive-scoring candidate among {live} live line(s) with {active} directed link(s) left"
        )
        self.active = active
        self.live = live


def closest_split_index(line: CandidateLine, coordinates: Sequence[Scalar]) -> int:
    """Return the sorted position just before the first coordinate above ``line``.

    ``coordinates`` must be sorted ascending along the line's axis. The result
    is ``-1`` when the first coordinate already lies above the line and also
    when none does.
    """

    for position, value in enumerate(coordinates):
        if value > line.coord:
            return position - 1
    return -1


class GreedySeparator:
    """Per-instance separation context.

    Owns the connectivity graph, the candidate pool and the growing solution
    for one point set; build a new one for every instance.
    """

    def __init__(self, store: PointStore):
        self.store = store
        self.graph = ConnectivityGraph(len(store))
        self._orders: Dict[Axis, np.ndarray] = {
            axis: np.array(store.order.for_axis(axis), dtype=int) for axis in (VERTICAL, HORIZONTAL)
        }
        self._sorted: Dict[Axis, np.ndarray] = {
            axis: store.sorted_coordinates(axis) for axis in (VERTICAL, HORIZONTAL)
        }
        self.pool = CandidateLinePool.generate(self._sorted[VERTICAL], self._sorted[HORIZONTAL])
        self.solution: List[CandidateLine] = []
        self.cut_counts: List[int] = []
        self.state: SeparatorState = "pending"

    def split(self, line: CandidateLine) -> Tuple[np.ndarray, np.ndarray]:
        """Return the point indices below/left of ``line`` and those above/right."""

        order = self._orders[line.axis]
        split = closest_split_index(line, self._sorted[line.axis])
        return order[: split + 1], order[split + 1 :]

    def score(self, line: Optional[CandidateLine]) -> int:
        if line is None:
            return 0
        low, high = self.split(line)
        return self.graph.count_between(low, high)

    def select(self) -> Tuple[CandidateLine, int]:
        best: Optional[CandidateLine] = None
        best_score = 0
        for line in self.pool.live_candidates():
            score = self.score(line)
            if best is None or score > best_score:
                best, best_score = line, score

        if best is None or best_score == 0:
            raise PoolExhaustionError(self.graph.active_count(), len(self.pool))
        return best, best_score

    def commit(self, line: CandidateLine) -> int:
        """Cut every link across ``line``, record it and retire it from the pool."""

        low, high = self.split(line)
        removed = 0
        for i in low:
            for j in high:
                if self.graph.unlink(int(i), int(j)):
                    removed += 1

        self.solution.append(line)
        self.cut_counts.append(removed)
        self.pool.consume(line)
        logger.debug(
            "Committed %s %.1f: cut %d link(s), %d directed link(s) left",
            line.axis,
            line.coord,
            removed,
            self.graph.active_count(),
        )
        return removed

    def run(self) -> SeparationResult:
        if self.state != "pending":
            raise SeparationError(f"separator already {self.state}")

        self.state = "separating"
        try:
            while self.graph.active_count() > 0:
                line, _ = self.select()
                self.commit(line)
        except Exception:
            self.state = "aborted"
            raise

        self.state = "done"
        return self.result()

    def result(self) -> SeparationResult:
        return SeparationResult(
            lines=list(self.solution),
            cut_counts=list(self.cut_counts),
            point_count=len(self.store),
            candidate_count=self.pool.total,
        )

    def release(self) -> None:
        self.graph.release()
        self.pool.release()


@debug_log_call(logger, log_result=False)
def separate(points: Sequence[Coords], options: Optional[SeparatorOptions] = None) -> SeparationResult:
    """Separate ``points`` in a fresh context and return the committed lines."""

    options = options or get_separator_options()
    store = PointStore(points, capacity=options.capacity)
    separator = GreedySeparator(store)
    try:
        result = separator.run()
    finally:
        separator.release()

    logger.info(
        "Separated %d point(s) with %d of %d candidate line(s)",
        result.point_count,
        len(result.lines),
        result.candidate_count,
    )
    return result


__all__ = [
    "SeparatorState",
    "PoolExhaustionError",
    "closest_split_index",
    "GreedySeparator",
    "separate",
]

"""Candidate separating lines generated from sorted-adjacent point pairs."""

from __future__ import annotations

from typing import Dict, Iterator, List, Sequence

from .model import HORIZONTAL, VERTICAL, Axis, CandidateLine, Scalar


def _midpoints(axis: Axis, coords: Sequence[Scalar], start_rank: int) -> List[CandidateLine]:
    return [
        CandidateLine(axis, (float(coords[i]) + float(coords[i + 1])) / 2, start_rank + i)
        for i in range(len(coords) - 1)
    ]


class CandidateLinePool:
    """Ordered set of candidate lines; committed candidates leave it for good."""

    def __init__(self, candidates: Sequence[CandidateLine] = ()):
        self._candidates: List[CandidateLine] = list(candidates)
        self._live: Dict[int, CandidateLine] = {line.rank: line for line in self._candidates}

    @classmethod
    def generate(cls, x_sorted: Sequence[Scalar], y_sorted: Sequence[Scalar]) -> "CandidateLinePool":
        """Build the pool from coordinates listed in x-order and in y-order.

        All vertical candidates precede the horizontal ones; that enumeration
        order is the tie-break precedence used by the separator.
        """

        vertical = _midpoints(VERTICAL, x_sorted, 0)
        horizontal = _midpoints(HORIZONTAL, y_sorted, len(vertical))
        return cls(vertical + horizontal)

    @property
    def total(self) -> int:
        return len(self._candidates)

    def __len__(self) -> int:
        return len(self._live)

    def all_candidates(self) -> List[CandidateLine]:
        return list(self._candidates)

    def live_candidates(self) -> Iterator[CandidateLine]:
        # Must not be interleaved with consume().
        yield from self._live.values()

    def is_live(self, line: CandidateLine) -> bool:
        return line.rank in self._live

    def consume(self, line: CandidateLine) -> None:
        self._live.pop(line.rank, None)

    def release(self) -> None:
        self._live.clear()


__all__ = ["CandidateLinePool"]

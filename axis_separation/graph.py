"""Pairwise connectivity between points that are not yet separated."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .model import SeparationError

logger = logging.getLogger(__name__)


class GraphConstructionError(SeparationError):
    """Raised when the complete graph does not hold ``n * (n - 1)`` directed links."""

    def __init__(self, size: int, realized: int):
        expected = size * (size - 1)
        super().__init__(
            f"complete graph over {size} point(s) holds {realized} directed link(s), expected {expected}"
        )
        self.size = size
        self.realized = realized


def _count_links(links: np.ndarray) -> int:
    return int(np.count_nonzero(links))


class ConnectivityGraph:
    """Symmetric link relation over point indices, backed by a boolean matrix.

    Links start complete and are only ever removed.
    """

    def __init__(self, size: int):
        if size < 0:
            raise GraphConstructionError(size, 0)
        self.size = size
        self._links = np.ones((size, size), dtype=bool)
        np.fill_diagonal(self._links, False)

        realized = _count_links(self._links)
        if realized != size * (size - 1):
            raise GraphConstructionError(size, realized)
        self._active = realized
        logger.debug("Linked %d point(s) with %d directed link(s)", size, realized)

    def active_count(self) -> int:
        return self._active

    def is_linked(self, i: int, j: int) -> bool:
        return bool(self._links[i, j])

    def unlink(self, i: int, j: int) -> bool:
        """Remove the link between ``i`` and ``j``; returns ``False`` if already gone."""

        if not self._links[i, j]:
            return False
        self._links[i, j] = False
        self._links[j, i] = False
        self._active -= 2
        return True

    def count_between(self, low: Sequence[int], high: Sequence[int]) -> int:
        """Count active links with one endpoint in ``low`` and the other in ``high``."""

        if len(low) == 0 or len(high) == 0:
            return 0
        return _count_links(self._links[np.ix_(low, high)])

    def release(self) -> None:
        self._links = np.zeros((0, 0), dtype=bool)


__all__ = ["GraphConstructionError", "ConnectivityGraph"]

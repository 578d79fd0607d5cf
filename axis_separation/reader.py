"""Reading numbered point instances from disk.

An instance file holds the declared number of points followed by one ``x y``
pair per point, all whitespace separated::

    3
    0 0
    2 0
    4 4
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .model import MAX_POINTS, CapacityExceededError, Coords, Scalar

logger = logging.getLogger(__name__)


class InstanceError(Exception):
    """Base class for instances rejected before separation."""

    def __init__(self, path: Union[str, Path], message: str):
        super().__init__(f"{Path(path).name}: {message}")
        self.path = Path(path)


class InstanceNotFoundError(InstanceError):
    pass


class EmptyInstanceError(InstanceError):
    pass


class InstanceFormatError(InstanceError):
    pass


class PointCountMismatchError(InstanceError):
    def __init__(self, path: Union[str, Path], declared: int, found: int, dangling: bool = False):
        message = f"declares {declared} point(s) but holds {found}"
        if dangling:
            message += " and a dangling coordinate"
        super().__init__(path, message)
        self.declared = declared
        self.found = found


@dataclass
class Instance:
    path: Path
    points: List[Coords]
    index: Optional[int] = None

    def __len__(self) -> int:
        return len(self.points)


def _parse_scalar(token: str, path: Path) -> Scalar:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        value = float(token)
    except ValueError:
        raise InstanceFormatError(path, f"'{token}' is not a number") from None
    if not math.isfinite(value):
        raise InstanceFormatError(path, f"'{token}' is not a finite number")
    return value


def parse_instance(
    text: str,
    path: Union[str, Path] = "<string>",
    *,
    capacity: Optional[int] = MAX_POINTS,
) -> List[Coords]:
    """Parse instance ``text`` into a list of ``(x, y)`` pairs."""

    path = Path(path)
    tokens = text.split()
    if not tokens:
        raise EmptyInstanceError(path, "no points declared")

    declared = _parse_scalar(tokens[0], path)
    if not isinstance(declared, int) or declared < 0:
        raise InstanceFormatError(path, f"point count must be a non-negative integer, got '{tokens[0]}'")
    if capacity is not None and declared > capacity:
        raise CapacityExceededError(declared, capacity)

    values = [_parse_scalar(token, path) for token in tokens[1:]]
    found = len(values) // 2
    dangling = len(values) % 2 == 1
    if found != declared or dangling:
        raise PointCountMismatchError(path, declared, found, dangling)

    return [(values[k], values[k + 1]) for k in range(0, len(values), 2)]


def read_instance(
    path: Union[str, Path],
    *,
    index: Optional[int] = None,
    capacity: Optional[int] = MAX_POINTS,
) -> Instance:
    path = Path(path)
    if not path.is_file():
        raise InstanceNotFoundError(path, "no such instance")

    logger.debug("Reading instance from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InstanceFormatError(path, "not valid UTF-8 text") from exc
    points = parse_instance(text, path, capacity=capacity)
    return Instance(path=path, points=points, index=index)


__all__ = [
    "InstanceError",
    "InstanceNotFoundError",
    "EmptyInstanceError",
    "InstanceFormatError",
    "PointCountMismatchError",
    "Instance",
    "parse_instance",
    "read_instance",
]

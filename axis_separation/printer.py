from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence, Union

from .model import CandidateLine

logger = logging.getLogger(__name__)


def format_line(line: CandidateLine) -> str:
    return f"{line.axis} {line.coord:.1f}"


def format_solution(lines: Sequence[CandidateLine]) -> str:
    """Render the line count followed by one ``<axis> <coord>`` row per line."""

    rows = [str(len(lines))]
    rows.extend(format_line(line) for line in lines)
    return "\n".join(rows) + "\n"


def write_solution(path: Union[str, Path], lines: Iterable[CandidateLine]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_solution(list(lines)), encoding="utf-8")
    logger.debug("Wrote solution to %s", path)
    return path


__all__ = ["format_line", "format_solution", "write_solution"]

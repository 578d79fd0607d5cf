"""Separate every numbered instance found in a directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Literal, Optional

from .config import BatchOptions
from .model import CapacityExceededError, SeparationError
from .printer import write_solution
from .reader import (
    EmptyInstanceError,
    InstanceFormatError,
    InstanceNotFoundError,
    PointCountMismatchError,
    read_instance,
)
from .separator import separate

logger = logging.getLogger(__name__)

OutcomeStatus = Literal["solved", "missing", "empty", "mismatch", "invalid", "capacity", "aborted"]


@dataclass
class InstanceOutcome:
    index: int
    status: OutcomeStatus
    line_count: int = 0
    output_path: Optional[Path] = None
    message: str = ""

    @property
    def solved(self) -> bool:
        return self.status == "solved"


@dataclass
class BatchReport:
    outcomes: List[InstanceOutcome] = field(default_factory=list)

    @property
    def solved_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.solved)

    def by_status(self, status: OutcomeStatus) -> List[InstanceOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == status]


def process_instance(index: int, options: BatchOptions) -> InstanceOutcome:
    """Read, separate and write one instance; failures become outcomes."""

    input_path = options.input_path(index)
    capacity = options.separator.capacity
    try:
        instance = read_instance(input_path, index=index, capacity=capacity)
    except InstanceNotFoundError as exc:
        logger.debug("No %s found", input_path.name)
        return InstanceOutcome(index, "missing", message=str(exc))
    except EmptyInstanceError as exc:
        logger.warning("There are no points in %s", input_path.name)
        return InstanceOutcome(index, "empty", message=str(exc))
    except PointCountMismatchError as exc:
        logger.warning("%s has incorrect number of points: %s", input_path.name, exc)
        return InstanceOutcome(index, "mismatch", message=str(exc))
    except InstanceFormatError as exc:
        logger.warning("%s is malformed: %s", input_path.name, exc)
        return InstanceOutcome(index, "invalid", message=str(exc))
    except CapacityExceededError as exc:
        logger.warning("%s is too large: %s", input_path.name, exc)
        return InstanceOutcome(index, "capacity", message=str(exc))

    logger.info("Separating %s (%d point(s))", input_path.name, len(instance))
    try:
        result = separate(instance.points, options.separator)
    except SeparationError as exc:
        logger.error("Aborted %s: %s", input_path.name, exc)
        return InstanceOutcome(index, "aborted", message=str(exc))

    try:
        output_path = write_solution(options.output_path(index), result.lines)
    except OSError as exc:
        logger.error("Could not write solution for %s: %s", input_path.name, exc)
        return InstanceOutcome(index, "aborted", line_count=len(result.lines), message=str(exc))
    logger.info("Wrote %d line(s) for %s to %s", len(result.lines), input_path.name, output_path)
    return InstanceOutcome(index, "solved", line_count=len(result.lines), output_path=output_path)


def run_batch(options: Optional[BatchOptions] = None) -> BatchReport:
    options = options or BatchOptions()
    report = BatchReport()
    for index in options.indices():
        report.outcomes.append(process_instance(index, options))

    missing = len(report.by_status("missing"))
    aborted = len(report.by_status("aborted"))
    rejected = len(report.outcomes) - report.solved_count - missing - aborted
    logger.info(
        "Batch over %s finished: %d solved, %d missing, %d rejected, %d aborted",
        options.input_dir,
        report.solved_count,
        missing,
        rejected,
        aborted,
    )
    return report


__all__ = [
    "OutcomeStatus",
    "InstanceOutcome",
    "BatchReport",
    "process_instance",
    "run_batch",
]

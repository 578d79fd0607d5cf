"""Process-wide default options for the separator and the batch driver."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path

from .model import SeparatorOptions

_SEPARATOR_OPTIONS = SeparatorOptions()


def get_separator_options() -> SeparatorOptions:
    return copy.deepcopy(_SEPARATOR_OPTIONS)


def set_separator_options(options: SeparatorOptions) -> None:
    global _SEPARATOR_OPTIONS
    _SEPARATOR_OPTIONS = copy.deepcopy(options)


@dataclass
class BatchOptions:
    """Where instances are read from and where solutions go."""

    input_dir: Path = Path("input")
    output_dir: Path = Path("output_greedy")
    input_template: str = "instance{index:02d}.txt"
    output_template: str = "greedy_solution{index:02d}.txt"
    first_index: int = 1
    last_index: int = 99
    separator: SeparatorOptions = field(default_factory=get_separator_options)

    def indices(self) -> range:
        return range(self.first_index, self.last_index + 1)

    def input_path(self, index: int) -> Path:
        return Path(self.input_dir) / self.input_template.format(index=index)

    def output_path(self, index: int) -> Path:
        return Path(self.output_dir) / self.output_template.format(index=index)


__all__ = [
    "BatchOptions",
    "get_separator_options",
    "set_separator_options",
]

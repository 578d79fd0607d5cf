from .model import (
    Axis,
    VERTICAL,
    HORIZONTAL,
    MAX_POINTS,
    Point,
    CandidateLine,
    SeparatorOptions,
    SeparationResult,
    SeparationError,
    CapacityExceededError,
)
from .config import BatchOptions, get_separator_options, set_separator_options
from .points import PointStore, SortedOrder
from .graph import ConnectivityGraph, GraphConstructionError
from .candidates import CandidateLinePool
from .separator import GreedySeparator, PoolExhaustionError, closest_split_index, separate
from .reader import (
    Instance,
    InstanceError,
    InstanceNotFoundError,
    EmptyInstanceError,
    InstanceFormatError,
    PointCountMismatchError,
    parse_instance,
    read_instance,
)
from .printer import format_line, format_solution, write_solution
from .batch import BatchReport, InstanceOutcome, process_instance, run_batch

__all__ = [
    'Axis',
    'VERTICAL',
    'HORIZONTAL',
    'MAX_POINTS',
    'Point',
    'CandidateLine',
    'SeparatorOptions',
    'SeparationResult',
    'SeparationError',
    'CapacityExceededError',
    'BatchOptions',
    'get_separator_options',
    'set_separator_options',
    'PointStore',
    'SortedOrder',
    'ConnectivityGraph',
    'GraphConstructionError',
    'CandidateLinePool',
    'GreedySeparator',
    'PoolExhaustionError',
    'closest_split_index',
    'separate',
    'Instance',
    'InstanceError',
    'InstanceNotFoundError',
    'EmptyInstanceError',
    'InstanceFormatError',
    'PointCountMismatchError',
    'parse_instance',
    'read_instance',
    'format_line',
    'format_solution',
    'write_solution',
    'BatchReport',
    'InstanceOutcome',
    'process_instance',
    'run_batch',
]

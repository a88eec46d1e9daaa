"""
Shared utilities module.
"""
from .logging_utils import get_logger
from .timer import Timer
from .exceptions import (
    MetricsError,
    LengthMismatchError,
    EmptyInputError,
    InsufficientClustersError,
    InvalidDimensionError,
)
from .distance import (
    euclidean_distance,
    manhattan_distance,
    cosine_distance,
    pairwise_distances,
    get_distance,
)
from .validation import check_consistent_length, check_non_empty, check_paired, check_points

__all__ = [
    'get_logger',
    'Timer',
    'MetricsError',
    'LengthMismatchError',
    'EmptyInputError',
    'InsufficientClustersError',
    'InvalidDimensionError',
    'euclidean_distance',
    'manhattan_distance',
    'cosine_distance',
    'pairwise_distances',
    'get_distance',
    'check_consistent_length',
    'check_non_empty',
    'check_paired',
    'check_points',
]

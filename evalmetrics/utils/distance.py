"""
Vector distance functions.

Named metrics are vectorised with numpy. Euclidean distances use the
Gram identity and Manhattan distances are built in row blocks sized
from PAIRWISE_MEMORY_BUDGET, so neither allocates an (n, m, d) tensor.
Any callable taking two 1-D vectors and returning a float can be used
instead.
"""
import numpy as np
from typing import Callable, Dict, Optional, Union

from ..config import PAIRWISE_MEMORY_BUDGET
from .exceptions import InvalidDimensionError

DistanceFunc = Callable[[np.ndarray, np.ndarray], float]
Metric = Union[str, DistanceFunc]


def euclidean_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean (L2) distance between two vectors."""
    a, b = _pair(a, b)
    return float(np.sqrt(np.sum((a - b) ** 2)))


def manhattan_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Manhattan (L1) distance between two vectors."""
    a, b = _pair(a, b)
    return float(np.sum(np.abs(a - b)))


def cosine_distance(a: np.ndarray, b: np.ndarray) -> float:
    """
    Cosine distance, 1 - cos(a, b), in [0, 2].
    
    A zero vector has similarity 0 to everything, so its distance is 1.
    """
    a, b = _pair(a, b)
    norm = np.linalg.norm(a) * np.linalg.norm(b)
    if norm == 0:
        return 1.0
    return float(np.clip(1.0 - np.dot(a, b) / norm, 0.0, 2.0))


def _pair(a: np.ndarray, b: np.ndarray):
    a = np.asarray(a, dtype=np.float64).ravel()
    b = np.asarray(b, dtype=np.float64).ravel()
    if a.shape != b.shape:
        raise InvalidDimensionError(f"Vectors differ in dimension: {a.shape[0]} vs {b.shape[0]}")
    return a, b


def _row_block_size(n_cols: int, n_features: int, budget: int = PAIRWISE_MEMORY_BUDGET) -> int:
    """Rows of X whose (rows, n_cols, n_features) float64 difference tensor fits the budget."""
    return max(1, budget // (8 * max(1, n_cols) * max(1, n_features)))


def _pairwise_euclidean(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    # |x - y|^2 = |x|^2 + |y|^2 - 2 x.y, so memory is O(n * m) whatever d is
    X_sq = np.einsum('ij,ij->i', X, X)[:, np.newaxis]
    Y_sq = np.einsum('ij,ij->i', Y, Y)[np.newaxis, :]
    squared = X_sq + Y_sq - 2.0 * (X @ Y.T)
    np.maximum(squared, 0.0, out=squared)
    return np.sqrt(squared)


def _pairwise_manhattan(
    X: np.ndarray,
    Y: np.ndarray,
    budget: int = PAIRWISE_MEMORY_BUDGET
) -> np.ndarray:
    out = np.empty((X.shape[0], Y.shape[0]), dtype=np.float64)
    step = _row_block_size(Y.shape[0], X.shape[1], budget)
    for start in range(0, X.shape[0], step):
        diff = X[start:start + step, np.newaxis, :] - Y[np.newaxis, :, :]
        out[start:start + step] = np.sum(np.abs(diff), axis=-1)
    return out


def _pairwise_cosine(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    X_norm = np.linalg.norm(X, axis=1, keepdims=True)
    Y_norm = np.linalg.norm(Y, axis=1, keepdims=True)
    X_unit = np.divide(X, X_norm, out=np.zeros_like(X), where=X_norm > 0)
    Y_unit = np.divide(Y, Y_norm, out=np.zeros_like(Y), where=Y_norm > 0)
    return np.clip(1.0 - X_unit @ Y_unit.T, 0.0, 2.0)


DISTANCE_FUNCTIONS: Dict[str, DistanceFunc] = {
    'euclidean': euclidean_distance,
    'manhattan': manhattan_distance,
    'cosine': cosine_distance,
}

_PAIRWISE_FUNCTIONS: Dict[str, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    'euclidean': _pairwise_euclidean,
    'manhattan': _pairwise_manhattan,
    'cosine': _pairwise_cosine,
}


def get_distance(metric: Metric) -> DistanceFunc:
    """
    Resolve a metric name or callable to a vector distance function.
    
    Args:
        metric: 'euclidean', 'manhattan', 'cosine', or a callable
    
    Returns:
        Distance function taking two vectors
    """
    if callable(metric):
        return metric
    if metric not in DISTANCE_FUNCTIONS:
        raise ValueError(
            f"Unknown distance metric '{metric}'. "
            f"Expected one of {sorted(DISTANCE_FUNCTIONS)} or a callable"
        )
    return DISTANCE_FUNCTIONS[metric]


def pairwise_distances(
    X: np.ndarray,
    Y: Optional[np.ndarray] = None,
    metric: Metric = 'euclidean'
) -> np.ndarray:
    """
    Compute the distance between every row of X and every row of Y.
    
    Args:
        X: Array of shape (n, d)
        Y: Array of shape (m, d); defaults to X
        metric: Metric name or callable
    
    Returns:
        Array of shape (n, m)
    """
    X = np.asarray(X, dtype=np.float64)
    Y = X if Y is None else np.asarray(Y, dtype=np.float64)
    if X.ndim != 2 or Y.ndim != 2:
        raise InvalidDimensionError("pairwise_distances expects 2-D arrays")
    if X.shape[1] != Y.shape[1]:
        raise InvalidDimensionError(
            f"Inputs differ in dimension: {X.shape[1]} vs {Y.shape[1]}"
        )
    
    if callable(metric):
        return np.array(
            [[metric(x, y) for y in Y] for x in X],
            dtype=np.float64
        ).reshape(X.shape[0], Y.shape[0])
    
    get_distance(metric)
    distances = _PAIRWISE_FUNCTIONS[metric](X, Y)
    if Y is X:
        np.fill_diagonal(distances, 0.0)
    return distances

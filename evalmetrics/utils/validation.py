"""
Input checks run at the top of every metric.

Structural problems (mismatched lengths, empty inputs, ragged points)
raise before any computation starts.
"""
import numpy as np
from typing import Any, Tuple

from .exceptions import LengthMismatchError, EmptyInputError, InvalidDimensionError


def _length(x: Any) -> int:
    if isinstance(x, np.ndarray):
        return x.shape[0] if x.ndim > 0 else 1
    return len(x)


def check_consistent_length(*arrays: Any) -> None:
    """
    Check that all inputs have the same number of samples.
    
    Raises:
        LengthMismatchError: If any two inputs differ in length
    """
    lengths = [_length(a) for a in arrays]
    if len(set(lengths)) > 1:
        raise LengthMismatchError(f"Inputs have inconsistent lengths: {lengths}")


def check_non_empty(*arrays: Any) -> None:
    """
    Check that no input is empty.
    
    Raises:
        EmptyInputError: If any input has zero samples
    """
    for a in arrays:
        if _length(a) == 0:
            raise EmptyInputError("Metric inputs must contain at least one sample")


def check_paired(y_true: Any, y_pred: Any) -> Tuple[np.ndarray, np.ndarray]:
    """
    Validate and flatten a (y_true, y_pred) pair.
    
    Length is checked before emptiness, so a zero-length array paired
    with a non-empty one is a length mismatch.
    
    Args:
        y_true: Ground-truth values
        y_pred: Predicted values
    
    Returns:
        Tuple of 1-D arrays
    """
    y_true = np.asarray(y_true).ravel()
    y_pred = np.asarray(y_pred).ravel()
    check_consistent_length(y_true, y_pred)
    check_non_empty(y_true, y_pred)
    return y_true, y_pred


def check_numeric_pair(y_true: Any, y_pred: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Validate a regression pair and cast both sides to float64."""
    y_true, y_pred = check_paired(y_true, y_pred)
    return y_true.astype(np.float64), y_pred.astype(np.float64)


def check_points(points: Any) -> np.ndarray:
    """
    Validate an embedding matrix.
    
    A 1-D input is read as n points of dimension 1. Emptiness is left
    to check_non_empty so that length mismatches are reported first.
    
    Args:
        points: Sequence of equal-length vectors or an (n, d) array
    
    Returns:
        Float64 array of shape (n, d)
    
    Raises:
        InvalidDimensionError: If vectors differ in length, have zero
            dimensions, or the array is not 2-D
    """
    if isinstance(points, (list, tuple)):
        if points and all(np.ndim(p) == 1 for p in points):
            dims = {len(p) for p in points}
            if len(dims) > 1:
                raise InvalidDimensionError(
                    f"All points must share one dimensionality, got {sorted(dims)}"
                )
    try:
        X = np.asarray(points, dtype=np.float64)
    except ValueError as e:
        raise InvalidDimensionError(f"Points could not be read as a 2-D array: {e}") from e
    
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2:
        raise InvalidDimensionError(f"Points must be a 2-D array, got {X.ndim} dimensions")
    if X.shape[1] == 0:
        raise InvalidDimensionError("Points must have at least one dimension")
    return X

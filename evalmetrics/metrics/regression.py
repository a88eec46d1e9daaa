"""
Regression metrics.
"""
import numpy as np

from ..config import CONSTANT_TARGET_SCORE, MAPE_EPS
from ..utils.logging_utils import get_logger
from ..utils.validation import check_numeric_pair

logger = get_logger(__name__)


def mean_absolute_error(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate Mean Absolute Error.

    Args:
        y_true: True target values
        y_pred: Predicted values

    Returns:
        Mean absolute error
    """
    y_true, y_pred = check_numeric_pair(y_true, y_pred)
    return float(np.mean(np.abs(y_true - y_pred)))


def mean_squared_error(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate Mean Squared Error.

    Args:
        y_true: True target values
        y_pred: Predicted values

    Returns:
        Mean squared error
    """
    y_true, y_pred = check_numeric_pair(y_true, y_pred)
    return float(np.mean((y_true - y_pred) ** 2))


def root_mean_squared_error(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate Root Mean Squared Error.

    Zero only when every prediction equals its target exactly.

    Args:
        y_true: True target values
        y_pred: Predicted values

    Returns:
        Root mean squared error
    """
    return float(np.sqrt(mean_squared_error(y_true, y_pred)))


def _is_constant(values: np.ndarray) -> bool:
    """True when every value equals the first, compared exactly."""
    return bool(np.all(values == values[0]))


def _constant_target_score(exact: bool, metric_name: str) -> float:
    if exact:
        return 1.0
    logger.warning(
        f"{metric_name}: y_true is constant and predictions differ from it, "
        f"returning {CONSTANT_TARGET_SCORE}"
    )
    return CONSTANT_TARGET_SCORE


def r2_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate R-squared (coefficient of determination).

    For a constant y_true the total sum of squares is 0. The score is
    then 1.0 if every prediction is exact and -inf otherwise.

    Args:
        y_true: True target values
        y_pred: Predicted values

    Returns:
        R-squared score, at most 1.0
    """
    y_true, y_pred = check_numeric_pair(y_true, y_pred)

    # Checked on the values, not on ss_tot, which rounding can leave non-zero
    if _is_constant(y_true):
        return _constant_target_score(bool(np.all(y_pred == y_true)), 'r2_score')

    ss_res = np.sum((y_true - y_pred) ** 2)
    ss_tot = np.sum((y_true - np.mean(y_true)) ** 2)

    return float(1 - (ss_res / ss_tot))


def mean_absolute_percentage_error(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    eps: float = MAPE_EPS
) -> float:
    """
    Calculate Mean Absolute Percentage Error.

    Args:
        y_true: True target values
        y_pred: Predicted values
        eps: Added to |y_true| so zero targets do not divide by zero

    Returns:
        MAPE as a percentage
    """
    y_true, y_pred = check_numeric_pair(y_true, y_pred)
    return float(100 * np.mean(np.abs(y_true - y_pred) / (np.abs(y_true) + eps)))


def explained_variance_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate explained variance, 1 - Var(residuals) / Var(y_true).

    Unlike R-squared, a constant bias in the predictions is not penalised.
    A constant y_true follows the r2_score convention.
    """
    y_true, y_pred = check_numeric_pair(y_true, y_pred)

    residuals = y_true - y_pred
    if _is_constant(y_true):
        return _constant_target_score(_is_constant(residuals), 'explained_variance_score')

    residual_var = np.var(residuals)
    target_var = np.var(y_true)

    return float(1 - residual_var / target_var)


mae = mean_absolute_error
mse = mean_squared_error
rmse = root_mean_squared_error

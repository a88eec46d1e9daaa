"""
Tests for regression metrics.
"""
import pytest
import numpy as np

from evalmetrics.metrics.regression import (
    mean_absolute_error,
    mean_squared_error,
    root_mean_squared_error,
    r2_score,
    mean_absolute_percentage_error,
    explained_variance_score,
    mae,
    mse,
    rmse,
)
from evalmetrics.utils.exceptions import LengthMismatchError, EmptyInputError


class TestRegressionMetrics:
    """Tests for regression metric functions."""
    
    def test_mae(self):
        """Test Mean Absolute Error."""
        assert mean_absolute_error([1, 2, 3], [1.5, 2.5, 3.5]) == pytest.approx(0.5)
        
        y_true = np.array([1, 2, 3, 4])
        assert mae(y_true, y_true) == 0
        assert mae(y_true, y_true + 1) == 1
    
    def test_mse(self):
        """Test Mean Squared Error."""
        y_true = np.array([1, 2, 3, 4])
        y_pred = np.array([2, 3, 4, 5])
        
        assert mean_squared_error(y_true, y_true) == 0
        assert mse(y_true, y_pred) == 1
    
    def test_mse_close_predictions(self):
        """Close predictions give a small positive error."""
        value = mean_squared_error([1, 2, 3, 4, 5], [1.1, 2.1, 2.9, 4.2, 4.8])
        assert 0 < value < 0.1
    
    def test_rmse(self):
        """Test Root Mean Squared Error."""
        y_true = np.array([1, 2, 3, 4])
        y_pred = np.array([2, 3, 4, 5])
        
        assert root_mean_squared_error(y_true, y_pred) == 1
        assert rmse([0, 0], [3, 4]) == pytest.approx(np.sqrt(12.5))
    
    def test_rmse_zero_only_for_exact_match(self):
        """RMSE is exactly 0 for identical inputs and positive otherwise."""
        y = np.array([0.1, 2.5, -3.75, 1e6])
        assert root_mean_squared_error(y, y) == 0.0
        assert root_mean_squared_error(y, y + 1e-9) > 0.0
    
    def test_r2_perfect(self):
        """Perfect predictions score 1."""
        y = np.array([1, 2, 3, 4, 5])
        assert r2_score(y, y) == 1.0
    
    def test_r2_mean_prediction(self):
        """Predicting the mean everywhere scores 0."""
        assert r2_score([1, 2, 3, 4, 5], [3, 3, 3, 3, 3]) == pytest.approx(0.0)
    
    def test_r2_can_be_negative(self):
        """A prediction worse than the mean is negative."""
        assert r2_score([1, 2, 3], [3, 2, 1]) == pytest.approx(-3.0)
    
    def test_r2_constant_target_exact(self):
        """Constant target predicted exactly scores 1."""
        assert r2_score([2, 2, 2], [2, 2, 2]) == 1.0
    
    def test_r2_constant_target_missed(self):
        """Constant target predicted inexactly scores -inf, never NaN."""
        score = r2_score([2, 2, 2], [2, 2, 3])
        assert score == float('-inf')
        assert not np.isnan(score)
    
    def test_r2_inexact_float_constant(self):
        """A constant target whose mean is not representable still scores -inf."""
        assert r2_score([0.1] * 3, [0.2] * 3) == float('-inf')
        assert r2_score([0.1] * 3, [0.1] * 3) == 1.0
    
    def test_explained_variance_float_constant(self):
        """Explained variance follows the same constant-target rule."""
        assert explained_variance_score([0.1] * 3, [0.2, 0.2, 0.3]) == float('-inf')
        assert explained_variance_score([0.1] * 3, [0.2] * 3) == 1.0
    
    def test_mape(self):
        """Test Mean Absolute Percentage Error."""
        assert mean_absolute_percentage_error([100, 200], [110, 180]) == pytest.approx(10.0)
    
    def test_explained_variance(self):
        """A constant bias is not penalised by explained variance."""
        y_true = [1, 2, 3]
        y_pred = [2, 3, 4]
        
        assert explained_variance_score(y_true, y_pred) == pytest.approx(1.0)
        assert r2_score(y_true, y_pred) == pytest.approx(-0.5)
    
    def test_length_mismatch(self):
        """Mismatched lengths raise for every regression metric."""
        for metric in (mean_squared_error, root_mean_squared_error, mean_absolute_error, r2_score):
            with pytest.raises(LengthMismatchError):
                metric([1.0, 2.0, 3.0], [1.0, 2.0])
    
    def test_empty(self):
        """Empty inputs raise for every regression metric."""
        for metric in (mean_squared_error, root_mean_squared_error, mean_absolute_error, r2_score):
            with pytest.raises(EmptyInputError):
                metric([], [])
    
    def test_accepts_2d_columns(self):
        """Column vectors are flattened."""
        y_true = np.array([[1.0], [2.0], [3.0]])
        y_pred = np.array([1.0, 2.0, 4.0])
        assert mean_absolute_error(y_true, y_pred) == pytest.approx(1 / 3)

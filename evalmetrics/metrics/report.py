"""
Summaries that bundle several metrics for display or logging.
"""
import numpy as np
import pandas as pd
from typing import Any, Dict

from ..config import DEFAULT_DISTANCE_METRIC
from ..utils.distance import Metric
from ..preprocess.encoder import LabelEncoder
from .classification import accuracy, confusion_matrix, per_class_scores
from .clustering import davies_bouldin_score, silhouette_score
from .regression import (
    explained_variance_score,
    mean_absolute_error,
    mean_squared_error,
    r2_score,
    root_mean_squared_error,
)


def classification_report(y_true: np.ndarray, y_pred: np.ndarray) -> pd.DataFrame:
    """
    Build a per-class precision / recall / F1 table.

    Args:
        y_true: True class labels
        y_pred: Predicted class labels

    Returns:
        DataFrame indexed by class label with columns precision, recall,
        f1 and support, followed by 'macro avg' and 'weighted avg' rows
    """
    scores = per_class_scores(y_true, y_pred)
    support = scores['support']

    df = pd.DataFrame(
        {
            'precision': scores['precision'],
            'recall': scores['recall'],
            'f1': scores['f1'],
            'support': support,
        },
        index=pd.Index([str(label) for label in scores['labels']], name='label'),
    )

    averages = pd.DataFrame(
        {
            'precision': [scores['precision'].mean(), np.average(scores['precision'], weights=support)],
            'recall': [scores['recall'].mean(), np.average(scores['recall'], weights=support)],
            'f1': [scores['f1'].mean(), np.average(scores['f1'], weights=support)],
            'support': [support.sum(), support.sum()],
        },
        index=pd.Index(['macro avg', 'weighted avg'], name='label'),
    )

    return pd.concat([df, averages])


def confusion_matrix_frame(y_true: np.ndarray, y_pred: np.ndarray) -> pd.DataFrame:
    """
    Confusion matrix labelled with the original class values.

    Args:
        y_true: True class labels
        y_pred: Predicted class labels

    Returns:
        DataFrame with true labels as the index and predicted labels as columns
    """
    cm = confusion_matrix(y_true, y_pred)
    labels = LabelEncoder().fit(y_true, y_pred).classes_.tolist()
    return pd.DataFrame(
        cm,
        index=pd.Index(labels, name='true'),
        columns=pd.Index(labels, name='predicted'),
    )


def classification_summary(y_true: np.ndarray, y_pred: np.ndarray) -> Dict[str, float]:
    """Accuracy plus macro and weighted F1 in one dict."""
    report = classification_report(y_true, y_pred)
    return {
        'accuracy': accuracy(y_true, y_pred),
        'macro_precision': float(report.loc['macro avg', 'precision']),
        'macro_recall': float(report.loc['macro avg', 'recall']),
        'macro_f1': float(report.loc['macro avg', 'f1']),
        'weighted_f1': float(report.loc['weighted avg', 'f1']),
    }


def regression_summary(y_true: np.ndarray, y_pred: np.ndarray) -> Dict[str, float]:
    """
    Compute the standard regression metrics in one pass.

    Args:
        y_true: True target values
        y_pred: Predicted values

    Returns:
        Dict with mae, mse, rmse, r2 and explained_variance
    """
    return {
        'mae': mean_absolute_error(y_true, y_pred),
        'mse': mean_squared_error(y_true, y_pred),
        'rmse': root_mean_squared_error(y_true, y_pred),
        'r2': r2_score(y_true, y_pred),
        'explained_variance': explained_variance_score(y_true, y_pred),
    }


def clustering_summary(
    points: np.ndarray,
    labels: np.ndarray,
    metric: Metric = DEFAULT_DISTANCE_METRIC
) -> Dict[str, Any]:
    """Silhouette and Davies-Bouldin scores plus cluster sizes."""
    sizes = pd.Series(np.asarray(labels).ravel()).value_counts().sort_index()
    return {
        'silhouette': silhouette_score(points, labels, metric=metric),
        'davies_bouldin': davies_bouldin_score(points, labels),
        'n_clusters': int(len(sizes)),
        'cluster_sizes': {str(k): int(v) for k, v in sizes.items()},
    }

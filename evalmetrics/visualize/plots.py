"""
Plotting functions for metric results.
"""
import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from typing import List, Optional
import io
import base64

from ..config import DEFAULT_DISTANCE_METRIC
from ..metrics.classification import confusion_matrix
from ..metrics.clustering import silhouette_samples
from ..preprocess.encoder import LabelEncoder
from ..utils.distance import Metric
from ..utils.validation import check_numeric_pair


def _fig_to_base64(fig: plt.Figure) -> str:
    """Convert matplotlib figure to base64 string."""
    buf = io.BytesIO()
    fig.savefig(buf, format='png', bbox_inches='tight', dpi=100)
    buf.seek(0)
    img_str = base64.b64encode(buf.read()).decode('utf-8')
    plt.close(fig)
    return img_str


def plot_confusion_matrix(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    class_names: Optional[List[str]] = None,
    title: str = "Confusion Matrix",
    normalize: bool = False
) -> str:
    """
    Plot confusion matrix.

    Args:
        y_true: True labels
        y_pred: Predicted labels
        class_names: Names of classes, in sorted label order
        title: Plot title
        normalize: Whether to normalize each row to sum to 1

    Returns:
        Base64-encoded PNG image
    """
    cm = confusion_matrix(y_true, y_pred)
    n_classes = cm.shape[0]

    if class_names is None:
        classes = LabelEncoder().fit(y_true, y_pred).classes_
        class_names = [str(c) for c in classes]

    if normalize:
        row_sums = cm.sum(axis=1, keepdims=True)
        cm = np.divide(
            cm.astype(float), row_sums,
            out=np.zeros(cm.shape, dtype=float),
            where=row_sums > 0
        )

    fig, ax = plt.subplots(figsize=(8, 8))

    im = ax.imshow(cm, interpolation='nearest', cmap=plt.cm.Blues)
    ax.figure.colorbar(im, ax=ax)

    ax.set(
        xticks=np.arange(n_classes),
        yticks=np.arange(n_classes),
        xticklabels=class_names,
        yticklabels=class_names,
        title=title,
        ylabel='True label',
        xlabel='Predicted label'
    )

    # Rotate tick labels
    plt.setp(ax.get_xticklabels(), rotation=45, ha='right', rotation_mode='anchor')

    # Add text annotations
    fmt = '.2f' if normalize else 'd'
    thresh = cm.max() / 2.
    for i in range(n_classes):
        for j in range(n_classes):
            ax.text(j, i, format(cm[i, j], fmt),
                   ha='center', va='center',
                   color='white' if cm[i, j] > thresh else 'black')

    fig.tight_layout()
    return _fig_to_base64(fig)


def plot_prediction_vs_actual(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    title: str = "Predicted vs Actual"
) -> str:
    """
    Plot predicted vs actual values for regression.

    Args:
        y_true: True values
        y_pred: Predicted values
        title: Plot title

    Returns:
        Base64-encoded PNG image
    """
    y_true, y_pred = check_numeric_pair(y_true, y_pred)

    fig, ax = plt.subplots(figsize=(10, 8))

    ax.scatter(y_true, y_pred, alpha=0.5, color='steelblue')

    # Perfect prediction line
    min_val = min(y_true.min(), y_pred.min())
    max_val = max(y_true.max(), y_pred.max())
    ax.plot([min_val, max_val], [min_val, max_val], 'r--', lw=2, label='Perfect Prediction')

    ax.set_xlabel('Actual')
    ax.set_ylabel('Predicted')
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)

    return _fig_to_base64(fig)


def plot_residuals(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    title: str = "Residual Plot"
) -> str:
    """
    Plot residuals for regression.

    Args:
        y_true: True values
        y_pred: Predicted values
        title: Plot title

    Returns:
        Base64-encoded PNG image
    """
    y_true, y_pred = check_numeric_pair(y_true, y_pred)
    residuals = y_true - y_pred

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))

    # Residuals vs predicted
    axes[0].scatter(y_pred, residuals, alpha=0.5, color='steelblue')
    axes[0].axhline(y=0, color='r', linestyle='--')
    axes[0].set_xlabel('Predicted')
    axes[0].set_ylabel('Residual')
    axes[0].set_title('Residuals vs Predicted')
    axes[0].grid(True, alpha=0.3)

    # Histogram of residuals
    axes[1].hist(residuals, bins=30, edgecolor='black', alpha=0.7, color='steelblue')
    axes[1].set_xlabel('Residual')
    axes[1].set_ylabel('Frequency')
    axes[1].set_title('Distribution of Residuals')
    axes[1].grid(True, alpha=0.3)

    fig.suptitle(title)
    fig.tight_layout()

    return _fig_to_base64(fig)


def plot_silhouette(
    points: np.ndarray,
    labels: np.ndarray,
    metric: Metric = DEFAULT_DISTANCE_METRIC,
    title: str = "Silhouette Plot"
) -> str:
    """
    Plot per-sample silhouette values grouped by cluster.

    Args:
        points: Embedding vectors, shape (n, d)
        labels: Cluster label of each point
        metric: Distance metric name or callable
        title: Plot title

    Returns:
        Base64-encoded PNG image
    """
    values = silhouette_samples(points, labels, metric=metric)
    encoder = LabelEncoder()
    codes = encoder.fit_transform(labels)
    cmap = plt.get_cmap('tab10')

    fig, ax = plt.subplots(figsize=(10, 8))

    y_lower = 0
    for k, cluster in enumerate(encoder.classes_):
        cluster_values = np.sort(values[codes == k])
        y_upper = y_lower + len(cluster_values)
        ax.fill_betweenx(
            np.arange(y_lower, y_upper), 0, cluster_values,
            color=cmap(k % 10), alpha=0.7
        )
        ax.text(-0.05, y_lower + len(cluster_values) / 2, str(cluster), ha='right', va='center')
        y_lower = y_upper + 5

    # Mean silhouette
    ax.axvline(x=float(np.mean(values)), color='r', linestyle='--', label='Mean')

    ax.set_xlim(-1, 1)
    ax.set_yticks([])
    ax.set_xlabel('Silhouette coefficient')
    ax.set_ylabel('Cluster')
    ax.set_title(title)
    ax.legend()

    return _fig_to_base64(fig)

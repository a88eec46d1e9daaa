"""
evalmetrics
===========
Scores already-produced model predictions against ground truth.

    from evalmetrics import accuracy, confusion_matrix, silhouette_score

    accuracy([0, 1, 1], [0, 1, 0])
    confusion_matrix(['cat', 'dog'], ['dog', 'dog'])
    silhouette_score([[0, 0], [0, 1], [9, 9], [9, 8]], [0, 0, 1, 1])

Every function validates its inputs, computes and returns; nothing is
kept between calls. Plots live in evalmetrics.visualize.
"""
from .metrics import (
    PrecisionRecallF1,
    accuracy,
    confusion_matrix,
    precision_recall_f1,
    precision,
    recall,
    f1_score,
    roc_auc,
    log_loss,
    mean_squared_error,
    root_mean_squared_error,
    mean_absolute_error,
    r2_score,
    mean_absolute_percentage_error,
    explained_variance_score,
    silhouette_score,
    silhouette_samples,
    davies_bouldin_score,
    adjusted_rand_score,
    classification_report,
    confusion_matrix_frame,
)
from .preprocess import LabelEncoder
from .utils.exceptions import (
    MetricsError,
    LengthMismatchError,
    EmptyInputError,
    InsufficientClustersError,
    InvalidDimensionError,
)

__all__ = [
    'PrecisionRecallF1',
    'accuracy',
    'confusion_matrix',
    'precision_recall_f1',
    'precision',
    'recall',
    'f1_score',
    'roc_auc',
    'log_loss',
    'mean_squared_error',
    'root_mean_squared_error',
    'mean_absolute_error',
    'r2_score',
    'mean_absolute_percentage_error',
    'explained_variance_score',
    'silhouette_score',
    'silhouette_samples',
    'davies_bouldin_score',
    'adjusted_rand_score',
    'classification_report',
    'confusion_matrix_frame',
    'LabelEncoder',
    'MetricsError',
    'LengthMismatchError',
    'EmptyInputError',
    'InsufficientClustersError',
    'InvalidDimensionError',
]

__version__ = "0.1.0"

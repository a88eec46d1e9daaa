"""
Metrics module for the evaluation engine.
Contains evaluation metrics for classification, regression and clustering.
"""
from .classification import (
    PrecisionRecallF1,
    accuracy,
    confusion_matrix,
    precision_recall_f1,
    per_class_scores,
    precision,
    recall,
    f1_score,
    roc_auc,
    log_loss,
)
from .regression import (
    mean_squared_error,
    root_mean_squared_error,
    mean_absolute_error,
    r2_score,
    mean_absolute_percentage_error,
    explained_variance_score,
    mae,
    mse,
    rmse,
)
from .clustering import (
    silhouette_score,
    silhouette_samples,
    davies_bouldin_score,
    adjusted_rand_score,
)
from .report import (
    classification_report,
    confusion_matrix_frame,
    classification_summary,
    regression_summary,
    clustering_summary,
)

__all__ = [
    'PrecisionRecallF1',
    'accuracy',
    'confusion_matrix',
    'precision_recall_f1',
    'per_class_scores',
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
    'mae',
    'mse',
    'rmse',
    'silhouette_score',
    'silhouette_samples',
    'davies_bouldin_score',
    'adjusted_rand_score',
    'classification_report',
    'confusion_matrix_frame',
    'classification_summary',
    'regression_summary',
    'clustering_summary',
]

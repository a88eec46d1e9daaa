"""
Visualization module for the metrics engine.
Contains matplotlib renderings of metric results.
"""
from .plots import (
    plot_confusion_matrix,
    plot_prediction_vs_actual,
    plot_residuals,
    plot_silhouette,
)

__all__ = [
    'plot_confusion_matrix',
    'plot_prediction_vs_actual',
    'plot_residuals',
    'plot_silhouette',
]

"""
Classification metrics.

All per-class scores are read off one confusion matrix built over the
sorted union of labels in y_true and y_pred.
"""
import numpy as np
from typing import Any, Dict, NamedTuple, Optional, Tuple, Union

from ..config import AVERAGE_OPTIONS, DEFAULT_AVERAGE, DEGENERATE_ROC_AUC, LOG_LOSS_EPS
from ..preprocess.encoder import encode_labels
from ..utils.exceptions import InvalidDimensionError
from ..utils.logging_utils import get_logger
from ..utils.validation import check_consistent_length, check_non_empty, check_paired

logger = get_logger(__name__)

Score = Union[float, np.ndarray]


class PrecisionRecallF1(NamedTuple):
    """Precision, recall and F1, averaged or per class."""
    precision: Score
    recall: Score
    f1: Score


def accuracy(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate accuracy score.

    Args:
        y_true: True class labels
        y_pred: Predicted class labels

    Returns:
        Fraction of samples whose predicted label equals the true label

    Raises:
        LengthMismatchError: If the inputs differ in length
        EmptyInputError: If the inputs are empty
    """
    y_true, y_pred = check_paired(y_true, y_pred)
    _, true_idx, pred_idx = encode_labels(y_true, y_pred)
    return float(np.mean(true_idx == pred_idx))


def _confusion(y_true: np.ndarray, y_pred: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Return (classes, confusion matrix) for an already validated pair."""
    classes, true_idx, pred_idx = encode_labels(y_true, y_pred)
    k = len(classes)
    cm = np.bincount(true_idx * k + pred_idx, minlength=k * k).reshape(k, k)
    return classes, cm.astype(np.int64)


def confusion_matrix(y_true: np.ndarray, y_pred: np.ndarray) -> np.ndarray:
    """
    Compute the confusion matrix.

    Rows are true classes and columns predicted classes, both in sorted
    label order. A label that only appears in y_pred still gets a row
    (of zeros) and a column.

    Args:
        y_true: True class labels
        y_pred: Predicted class labels

    Returns:
        Integer array of shape (k, k) whose entries sum to len(y_true)
    """
    y_true, y_pred = check_paired(y_true, y_pred)
    _, cm = _confusion(y_true, y_pred)
    return cm


def _safe_divide(numerator: np.ndarray, denominator: np.ndarray) -> np.ndarray:
    """Element-wise division that yields 0 where the denominator is 0."""
    numerator = np.asarray(numerator, dtype=np.float64)
    denominator = np.asarray(denominator, dtype=np.float64)
    return np.divide(
        numerator, denominator,
        out=np.zeros_like(numerator),
        where=denominator != 0
    )


def _scores_from_counts(tp, fp, fn) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    precision = _safe_divide(tp, tp + fp)
    recall = _safe_divide(tp, tp + fn)
    f1 = _safe_divide(2 * precision * recall, precision + recall)
    return precision, recall, f1


def per_class_scores(y_true: np.ndarray, y_pred: np.ndarray) -> Dict[str, np.ndarray]:
    """
    Calculate precision, recall and F1 for every class.

    A class with no predicted samples has precision 0; a class with no
    true samples has recall 0.

    Args:
        y_true: True class labels
        y_pred: Predicted class labels

    Returns:
        Dict with 'labels', 'precision', 'recall', 'f1' and 'support'
        arrays, all in the confusion matrix's class order
    """
    y_true, y_pred = check_paired(y_true, y_pred)
    classes, cm = _confusion(y_true, y_pred)

    tp = np.diag(cm)
    fp = cm.sum(axis=0) - tp
    fn = cm.sum(axis=1) - tp
    precision, recall, f1 = _scores_from_counts(tp, fp, fn)

    return {
        'labels': classes,
        'precision': precision,
        'recall': recall,
        'f1': f1,
        'support': cm.sum(axis=1),
        'tp': tp,
        'fp': fp,
        'fn': fn,
    }


def precision_recall_f1(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    average: Optional[str] = DEFAULT_AVERAGE,
    pos_label: Any = 1
) -> PrecisionRecallF1:
    """
    Calculate precision, recall and F1 score together.

    Args:
        y_true: True class labels
        y_pred: Predicted class labels
        average: 'macro' (unweighted mean over every class in y_true or
                 y_pred), 'micro', 'weighted', 'binary', or None for
                 per-class arrays
        pos_label: Positive class label when average='binary'

    Returns:
        PrecisionRecallF1 named tuple
    """
    if average not in AVERAGE_OPTIONS:
        raise ValueError(f"average must be one of {AVERAGE_OPTIONS}, got {average!r}")

    scores = per_class_scores(y_true, y_pred)
    logger.debug(
        f"precision_recall_f1: {len(scores['labels'])} classes, "
        f"{int(scores['support'].sum())} samples, average={average}"
    )

    if average is None:
        return PrecisionRecallF1(scores['precision'], scores['recall'], scores['f1'])

    if average == 'binary':
        classes = scores['labels']
        pos = str(pos_label) if classes.dtype.kind in 'US' else pos_label
        matches = np.flatnonzero(classes == pos)
        if len(matches) == 0:
            logger.warning(f"pos_label {pos_label!r} not present in labels; scores are 0")
            return PrecisionRecallF1(0.0, 0.0, 0.0)
        i = matches[0]
        return PrecisionRecallF1(
            float(scores['precision'][i]),
            float(scores['recall'][i]),
            float(scores['f1'][i]),
        )

    if average == 'micro':
        precision, recall, f1 = _scores_from_counts(
            scores['tp'].sum(), scores['fp'].sum(), scores['fn'].sum()
        )
        return PrecisionRecallF1(float(precision), float(recall), float(f1))

    if average == 'weighted':
        weights = scores['support']
        return PrecisionRecallF1(
            float(np.average(scores['precision'], weights=weights)),
            float(np.average(scores['recall'], weights=weights)),
            float(np.average(scores['f1'], weights=weights)),
        )

    return PrecisionRecallF1(
        float(np.mean(scores['precision'])),
        float(np.mean(scores['recall'])),
        float(np.mean(scores['f1'])),
    )


def precision(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    average: Optional[str] = DEFAULT_AVERAGE,
    pos_label: Any = 1
) -> Score:
    """
    Calculate precision score.

    Args:
        y_true: True class labels
        y_pred: Predicted class labels
        average: 'macro', 'micro', 'weighted', 'binary', or None
        pos_label: Positive class label for binary classification

    Returns:
        Precision score
    """
    return precision_recall_f1(y_true, y_pred, average, pos_label).precision


def recall(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    average: Optional[str] = DEFAULT_AVERAGE,
    pos_label: Any = 1
) -> Score:
    """
    Calculate recall score.

    Args:
        y_true: True class labels
        y_pred: Predicted class labels
        average: 'macro', 'micro', 'weighted', 'binary', or None
        pos_label: Positive class label for binary classification

    Returns:
        Recall score
    """
    return precision_recall_f1(y_true, y_pred, average, pos_label).recall


def f1_score(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    average: Optional[str] = DEFAULT_AVERAGE,
    pos_label: Any = 1
) -> Score:
    """
    Calculate F1 score (harmonic mean of precision and recall).

    Averaged F1 is the average of the per-class F1 values, not the
    harmonic mean of averaged precision and recall.

    Args:
        y_true: True class labels
        y_pred: Predicted class labels
        average: 'macro', 'micro', 'weighted', 'binary', or None
        pos_label: Positive class label for binary classification

    Returns:
        F1 score
    """
    return precision_recall_f1(y_true, y_pred, average, pos_label).f1


def roc_auc(
    y_true: np.ndarray,
    y_score: np.ndarray,
    pos_label: Any = 1
) -> float:
    """
    Calculate ROC AUC (Area Under the Receiver Operating Characteristic Curve).

    Uses the trapezoidal rule to compute the area under the ROC curve.
    Samples with equal scores share one threshold.

    Args:
        y_true: True binary labels
        y_score: Target scores (probability estimates or decision function)
        pos_label: Positive class label

    Returns:
        ROC AUC score, or 0.5 if y_true holds a single class
    """
    y_true, y_score = check_paired(y_true, y_score)
    y_score = y_score.astype(np.float64)

    _, true_idx, pos_idx = encode_labels(y_true, [pos_label])
    y_binary = (true_idx == pos_idx[0]).astype(np.int64)

    n_pos = int(np.sum(y_binary))
    n_neg = len(y_binary) - n_pos

    if n_pos == 0 or n_neg == 0:
        logger.warning("roc_auc: only one class present in y_true, returning 0.5")
        return DEGENERATE_ROC_AUC

    # Sort by score descending
    desc_score_indices = np.argsort(y_score, kind='mergesort')[::-1]
    y_score = y_score[desc_score_indices]
    y_binary = y_binary[desc_score_indices]

    # Last index of each run of equal scores
    distinct_indices = np.where(np.diff(y_score))[0]
    threshold_indices = np.r_[distinct_indices, len(y_binary) - 1]

    tps = np.cumsum(y_binary)[threshold_indices]
    fps = 1 + threshold_indices - tps

    tpr = np.r_[0.0, tps / n_pos]
    fpr = np.r_[0.0, fps / n_neg]

    return float(np.sum(np.diff(fpr) * (tpr[1:] + tpr[:-1]) / 2))


def log_loss(
    y_true: np.ndarray,
    y_proba: np.ndarray,
    eps: float = LOG_LOSS_EPS
) -> float:
    """
    Calculate log loss (cross-entropy).

    Args:
        y_true: True class indices, each a column of y_proba
        y_proba: Predicted probabilities of shape (n, k); a 1-D array is
                 read as the positive-class probability of a binary task
        eps: Probabilities are clipped to [eps, 1 - eps]

    Returns:
        Mean negative log-likelihood of the true classes
    """
    y_true = np.asarray(y_true).ravel()
    y_proba = np.asarray(y_proba, dtype=np.float64)

    if y_proba.ndim == 1:
        y_proba = np.column_stack([1.0 - y_proba, y_proba])
    if y_proba.ndim != 2:
        raise InvalidDimensionError(
            f"y_proba must be 1-D or 2-D, got {y_proba.ndim} dimensions"
        )

    check_consistent_length(y_true, y_proba)
    check_non_empty(y_true, y_proba)

    y_idx = y_true.astype(np.intp)
    if np.any(y_idx != y_true) or np.any(y_idx < 0) or np.any(y_idx >= y_proba.shape[1]):
        raise ValueError(
            f"y_true must hold class indices in [0, {y_proba.shape[1] - 1}]"
        )

    proba = np.clip(y_proba[np.arange(len(y_idx)), y_idx], eps, 1 - eps)
    return float(-np.mean(np.log(proba)))

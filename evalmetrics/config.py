"""
Defaults and numeric constants shared by the metric modules.

Everything here is a plain constant. Metric functions take their
behaviour from arguments; these values are only the argument defaults.
"""

# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

DEFAULT_AVERAGE = 'macro'
AVERAGE_OPTIONS = ('macro', 'micro', 'weighted', 'binary', None)

# Probabilities are clipped to [eps, 1 - eps] before taking the log
LOG_LOSS_EPS = 1e-15

# ROC AUC when only one class is present in y_true
DEGENERATE_ROC_AUC = 0.5


# ---------------------------------------------------------------------------
# Regression
# ---------------------------------------------------------------------------

# Added to |y_true| in the MAPE denominator
MAPE_EPS = 1e-10

# R² / explained variance for a constant target that is not predicted exactly
CONSTANT_TARGET_SCORE = float('-inf')


# ---------------------------------------------------------------------------
# Clustering
# ---------------------------------------------------------------------------

DEFAULT_DISTANCE_METRIC = 'euclidean'

# Rows of the pairwise distance matrix held in memory at once
SILHOUETTE_CHUNK_SIZE = 256

# Bytes of temporary memory a Manhattan distance block may use
PAIRWISE_MEMORY_BUDGET = 64 * 1024 * 1024

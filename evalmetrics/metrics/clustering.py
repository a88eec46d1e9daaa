"""
Clustering metrics.

Points are held in one read-only (n, d) array and cluster membership
is an index array into it. The silhouette computation walks the rows
in independent blocks: each block computes its distances to every
point, reduces them to per-cluster sums and yields s(i) for its rows.
"""
import logging

import numpy as np
from typing import Any, Optional, Tuple

from ..config import DEFAULT_DISTANCE_METRIC, SILHOUETTE_CHUNK_SIZE
from ..preprocess.encoder import LabelEncoder
from ..utils.distance import Metric, get_distance, pairwise_distances
from ..utils.exceptions import InsufficientClustersError
from ..utils.logging_utils import get_logger
from ..utils.timer import Timer
from ..utils.validation import (
    check_consistent_length,
    check_non_empty,
    check_paired,
    check_points,
)

logger = get_logger(__name__)


def _check_clustering_inputs(points: Any, labels: Any) -> Tuple[np.ndarray, np.ndarray, int]:
    """Validate points and labels; return (X, cluster indices, n_clusters)."""
    X = check_points(points)
    labels = np.asarray(labels).ravel()
    check_consistent_length(X, labels)
    check_non_empty(X, labels)

    codes = LabelEncoder().fit_transform(labels)
    n_clusters = int(codes.max()) + 1
    if n_clusters < 2:
        raise InsufficientClustersError(
            f"At least 2 distinct cluster labels are required, got {n_clusters}"
        )
    return X, codes, n_clusters


def _membership_matrix(codes: np.ndarray, n_clusters: int) -> np.ndarray:
    membership = np.zeros((len(codes), n_clusters), dtype=np.float64)
    membership[np.arange(len(codes)), codes] = 1.0
    return membership


def _silhouette_block(
    X: np.ndarray,
    codes: np.ndarray,
    membership: np.ndarray,
    counts: np.ndarray,
    start: int,
    stop: int,
    metric: Metric
) -> np.ndarray:
    """Silhouette values for rows start..stop-1."""
    rows = np.arange(stop - start)
    distances = pairwise_distances(X[start:stop], X, metric)
    distances[rows, rows + start] = 0.0

    cluster_sums = distances @ membership
    own = codes[start:stop]
    own_counts = counts[own]

    # a(i): mean distance to the other members of the sample's own cluster
    a = np.divide(
        cluster_sums[rows, own], own_counts - 1,
        out=np.zeros(len(rows)),
        where=own_counts > 1
    )

    # b(i): smallest mean distance to any other cluster
    cluster_means = cluster_sums / counts
    cluster_means[rows, own] = np.inf
    b = cluster_means.min(axis=1)

    denom = np.maximum(a, b)
    s = np.divide(b - a, denom, out=np.zeros(len(rows)), where=denom > 0)

    # Singleton clusters score 0 and stay in the mean
    s[own_counts == 1] = 0.0
    return np.clip(s, -1.0, 1.0)


def silhouette_samples(
    points: np.ndarray,
    labels: np.ndarray,
    metric: Metric = DEFAULT_DISTANCE_METRIC,
    chunk_size: Optional[int] = None
) -> np.ndarray:
    """
    Compute the silhouette coefficient of every sample.

    Args:
        points: Embedding vectors, shape (n, d)
        labels: Cluster label of each point
        metric: 'euclidean', 'manhattan', 'cosine', or a callable
                taking two vectors and returning a distance
        chunk_size: Rows of the distance matrix computed at once

    Returns:
        Array of n values in [-1, 1]

    Raises:
        LengthMismatchError: If points and labels differ in length
        EmptyInputError: If there are no points
        InvalidDimensionError: If points are ragged or not 2-D
        InsufficientClustersError: If fewer than 2 clusters are present
    """
    X, codes, n_clusters = _check_clustering_inputs(points, labels)
    get_distance(metric)

    chunk_size = SILHOUETTE_CHUNK_SIZE if chunk_size is None else int(chunk_size)
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    n_samples = X.shape[0]
    membership = _membership_matrix(codes, n_clusters)
    counts = membership.sum(axis=0)

    logger.debug(
        f"silhouette: {n_samples} points, dimension {X.shape[1]}, "
        f"{n_clusters} clusters, chunk_size {chunk_size}"
    )

    with Timer(f"silhouette over {n_samples} points", level=logging.DEBUG):
        blocks = [
            _silhouette_block(
                X, codes, membership, counts,
                start, min(start + chunk_size, n_samples), metric
            )
            for start in range(0, n_samples, chunk_size)
        ]

    return np.concatenate(blocks)


def silhouette_score(
    points: np.ndarray,
    labels: np.ndarray,
    metric: Metric = DEFAULT_DISTANCE_METRIC,
    chunk_size: Optional[int] = None
) -> float:
    """
    Calculate the mean silhouette coefficient over all samples.

    For sample i, a(i) is its mean distance to the rest of its cluster
    and b(i) its smallest mean distance to another cluster; the sample
    scores (b - a) / max(a, b), or 0 when both are 0. Samples alone in
    their cluster score 0 and are included in the mean.

    Args:
        points: Embedding vectors, shape (n, d)
        labels: Cluster label of each point
        metric: Distance metric name or callable
        chunk_size: Rows of the distance matrix computed at once

    Returns:
        Silhouette score in [-1, 1]
    """
    return float(np.mean(silhouette_samples(points, labels, metric, chunk_size)))


def davies_bouldin_score(points: np.ndarray, labels: np.ndarray) -> float:
    """
    Calculate the Davies-Bouldin index (lower is better).

    Each cluster's scatter is the mean Euclidean distance of its points
    to the centroid. A pair of clusters with coincident centroids is
    left out of the maximum.

    Args:
        points: Embedding vectors, shape (n, d)
        labels: Cluster label of each point

    Returns:
        Davies-Bouldin index, >= 0
    """
    X, codes, n_clusters = _check_clustering_inputs(points, labels)
    membership = _membership_matrix(codes, n_clusters)
    counts = membership.sum(axis=0)

    centroids = (membership.T @ X) / counts[:, np.newaxis]
    to_centroid = np.linalg.norm(X - centroids[codes], axis=1)
    scatter = np.bincount(codes, weights=to_centroid, minlength=n_clusters) / counts

    centroid_distances = pairwise_distances(centroids, centroids, 'euclidean')
    ratios = np.divide(
        scatter[:, np.newaxis] + scatter[np.newaxis, :],
        centroid_distances,
        out=np.zeros_like(centroid_distances),
        where=centroid_distances > 0
    )
    np.fill_diagonal(ratios, 0.0)

    return float(np.mean(ratios.max(axis=1)))


def _pairs(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x, dtype=np.int64)
    return (x * (x - 1) // 2).astype(np.float64)


def adjusted_rand_score(labels_true: np.ndarray, labels_pred: np.ndarray) -> float:
    """
    Calculate the Adjusted Rand Index between two labelings.

    Args:
        labels_true: Reference cluster labels
        labels_pred: Cluster labels to compare

    Returns:
        ARI, 1.0 for identical partitions and around 0 for random ones
    """
    labels_true, labels_pred = check_paired(labels_true, labels_pred)

    true_codes = LabelEncoder().fit_transform(labels_true)
    pred_codes = LabelEncoder().fit_transform(labels_pred)
    n_true = int(true_codes.max()) + 1
    n_pred = int(pred_codes.max()) + 1

    contingency = np.bincount(
        true_codes * n_pred + pred_codes, minlength=n_true * n_pred
    ).reshape(n_true, n_pred)

    sum_comb = _pairs(contingency).sum()
    sum_comb_true = _pairs(contingency.sum(axis=1)).sum()
    sum_comb_pred = _pairs(contingency.sum(axis=0)).sum()
    total_pairs = float(_pairs(len(labels_true)))

    expected_index = sum_comb_true * sum_comb_pred / total_pairs if total_pairs > 0 else 0.0
    max_index = (sum_comb_true + sum_comb_pred) / 2

    if max_index == expected_index:
        return 1.0

    return float((sum_comb - expected_index) / (max_index - expected_index))

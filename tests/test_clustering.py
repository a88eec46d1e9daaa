"""
Tests for clustering metrics.
"""
import pytest
import numpy as np

from evalmetrics.metrics.clustering import (
    silhouette_score,
    silhouette_samples,
    davies_bouldin_score,
    adjusted_rand_score,
)
from evalmetrics.utils.distance import euclidean_distance
from evalmetrics.utils.exceptions import (
    LengthMismatchError,
    EmptyInputError,
    InsufficientClustersError,
    InvalidDimensionError,
)


@pytest.fixture
def separated_clusters():
    """Two well-separated 2-D clusters."""
    points = np.array([
        [0, 0], [0.5, 0.5], [1, 0],
        [10, 10], [10.5, 10.5], [11, 10],
    ])
    labels = np.array([0, 0, 0, 1, 1, 1])
    return points, labels


@pytest.fixture
def random_clusters():
    """Three noisy Gaussian blobs."""
    rng = np.random.default_rng(42)
    centers = np.array([[0, 0, 0], [4, 4, 0], [0, 4, 4]])
    labels = np.repeat([0, 1, 2], 20)
    points = centers[labels] + rng.normal(scale=1.5, size=(60, 3))
    return points, labels


class TestSilhouette:
    """Tests for silhouette_score and silhouette_samples."""
    
    def test_well_separated(self, separated_clusters):
        """Well-separated clusters score above 0.5."""
        points, labels = separated_clusters
        assert silhouette_score(points, labels) > 0.5
    
    def test_known_value(self):
        """Test exact per-sample values on a 1-D example."""
        points = [[0], [1], [4], [5]]
        labels = [0, 0, 1, 1]
        
        samples = silhouette_samples(points, labels)
        assert np.allclose(samples, [7 / 9, 5 / 7, 5 / 7, 7 / 9])
        assert silhouette_score(points, labels) == pytest.approx(47 / 63)
    
    def test_singleton_cluster_scores_zero(self):
        """A point alone in its cluster contributes 0 to the mean."""
        points = [[0], [1], [10]]
        labels = [0, 0, 1]
        
        samples = silhouette_samples(points, labels)
        assert np.allclose(samples, [0.9, 8 / 9, 0.0])
        assert silhouette_score(points, labels) == pytest.approx((0.9 + 8 / 9) / 3)
    
    def test_coincident_points(self):
        """Zero cohesion and separation gives 0, not NaN."""
        points = [[1, 1], [1, 1], [1, 1], [1, 1]]
        assert silhouette_score(points, [0, 0, 1, 1]) == 0.0
    
    def test_bounds(self, random_clusters):
        """Scores stay in [-1, 1] even for random assignments."""
        points, _ = random_clusters
        rng = np.random.default_rng(1)
        for _ in range(5):
            labels = rng.integers(0, 4, size=len(points))
            samples = silhouette_samples(points, labels)
            assert np.all(samples >= -1.0) and np.all(samples <= 1.0)
    
    def test_chunking_does_not_change_result(self, random_clusters):
        """Block size only affects memory use."""
        points, labels = random_clusters
        full = silhouette_samples(points, labels)
        
        assert np.allclose(silhouette_samples(points, labels, chunk_size=1), full)
        assert np.allclose(silhouette_samples(points, labels, chunk_size=7), full)
    
    def test_label_values_are_arbitrary(self, separated_clusters):
        """Cluster ids need not be dense or numeric."""
        points, labels = separated_clusters
        expected = silhouette_score(points, labels)
        
        assert silhouette_score(points, labels * 10 + 3) == pytest.approx(expected)
        assert silhouette_score(points, np.where(labels == 0, 'a', 'b')) == pytest.approx(expected)
    
    def test_callable_metric(self, random_clusters):
        """A distance callable gives the same result as the named metric."""
        points, labels = random_clusters
        named = silhouette_score(points, labels, metric='euclidean')
        custom = silhouette_score(points, labels, metric=euclidean_distance)
        
        assert custom == pytest.approx(named)
    
    def test_manhattan_matches_euclidean_in_1d(self):
        """L1 and L2 agree for one-dimensional points."""
        points = np.array([0.0, 1.0, 4.0, 5.0, 9.0])
        labels = [0, 0, 1, 1, 1]
        
        assert silhouette_score(points, labels, metric='manhattan') == pytest.approx(
            silhouette_score(points, labels, metric='euclidean')
        )
    
    def test_cosine_metric(self):
        """Clusters along orthogonal directions score 1 under cosine distance."""
        points = [[1, 0], [2, 0], [0, 1], [0, 3]]
        assert silhouette_score(points, [0, 0, 1, 1], metric='cosine') == pytest.approx(1.0)
    
    def test_unknown_metric(self, separated_clusters):
        """Unknown metric names raise ValueError."""
        points, labels = separated_clusters
        with pytest.raises(ValueError):
            silhouette_score(points, labels, metric='chebyshev')
    
    def test_bad_chunk_size(self, separated_clusters):
        """chunk_size must be positive."""
        points, labels = separated_clusters
        with pytest.raises(ValueError):
            silhouette_score(points, labels, chunk_size=0)
    
    def test_single_cluster(self, separated_clusters):
        """All-identical labels raise InsufficientClustersError."""
        points, _ = separated_clusters
        with pytest.raises(InsufficientClustersError):
            silhouette_score(points, [0] * len(points))
    
    def test_length_mismatch(self, separated_clusters):
        """Points and labels must be the same length."""
        points, labels = separated_clusters
        with pytest.raises(LengthMismatchError):
            silhouette_score(points, labels[:-1])
    
    def test_empty(self):
        """No points raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            silhouette_score([], [])
    
    def test_ragged_points(self):
        """Points of different dimensionality raise InvalidDimensionError."""
        with pytest.raises(InvalidDimensionError):
            silhouette_score([[0, 0], [1, 1], [5]], [0, 0, 1])
    
    def test_3d_array(self):
        """A 3-D points array is rejected."""
        with pytest.raises(InvalidDimensionError):
            silhouette_score(np.zeros((4, 2, 2)), [0, 0, 1, 1])


class TestDaviesBouldin:
    """Tests for davies_bouldin_score."""
    
    def test_known_value(self):
        """Two clusters with scatter 1 and centroids 10 apart score 0.2."""
        points = [[0], [2], [10], [12]]
        assert davies_bouldin_score(points, [0, 0, 1, 1]) == pytest.approx(0.2)
    
    def test_separation_lowers_index(self, separated_clusters):
        """Moving clusters apart lowers the index."""
        points, labels = separated_clusters
        far = points.astype(float).copy()
        far[labels == 1] += 100
        
        assert davies_bouldin_score(far, labels) < davies_bouldin_score(points, labels)
    
    def test_single_cluster(self):
        """A single cluster raises InsufficientClustersError."""
        with pytest.raises(InsufficientClustersError):
            davies_bouldin_score([[0], [1]], [3, 3])


class TestAdjustedRand:
    """Tests for adjusted_rand_score."""
    
    def test_identical(self):
        """Identical labelings score 1."""
        assert adjusted_rand_score([0, 0, 1, 1, 2], [0, 0, 1, 1, 2]) == pytest.approx(1.0)
    
    def test_permuted_labels(self):
        """Renaming clusters does not change the score."""
        assert adjusted_rand_score([0, 0, 1, 1], [1, 1, 0, 0]) == pytest.approx(1.0)
    
    def test_crossed_labels(self):
        """Fully crossed partitions score below chance."""
        assert adjusted_rand_score([0, 0, 1, 1], [0, 1, 0, 1]) == pytest.approx(-0.5)
    
    def test_both_single_cluster(self):
        """Two trivial partitions are identical."""
        assert adjusted_rand_score([5, 5, 5], ['a', 'a', 'a']) == 1.0
    
    def test_length_mismatch(self):
        """Labelings must be the same length."""
        with pytest.raises(LengthMismatchError):
            adjusted_rand_score([0, 1], [0])

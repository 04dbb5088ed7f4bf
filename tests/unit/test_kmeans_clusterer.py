"""Unit tests for K-Means clustering."""

import numpy as np
import pytest
from sklearn.exceptions import ConvergenceWarning

from topiccluster.clustering.base import Cluster
from topiccluster.clustering.kmeans import (
    KMeansClusterer,
    SphericalKMeansClusterer,
    kmeans_cluster,
    spherical_kmeans_cluster,
    lloyd_iterations,
    nearest_cluster
)
from topiccluster.core.corpus import SampleCorpus
from topiccluster.core.dense import DenseVector
from topiccluster.core.sparse import SparseTermVector
from topiccluster.exceptions import (
    DegenerateNormalizationError,
    EmptyClusterError,
    InvalidParameterError
)


def two_topic_corpus():
    """Two groups of topics over disjoint vocabularies."""
    return SampleCorpus([
        SparseTermVector(0, {"rose": 1.0, "lily": 0.9}),
        SparseTermVector(1, {"rose": 0.9, "lily": 1.0}),
        SparseTermVector(2, {"rose": 1.1, "lily": 1.0, "tulip": 0.1}),
        SparseTermVector(3, {"game": 10.0, "anime": 10.0}),
        SparseTermVector(4, {"game": 9.0, "anime": 11.0}),
        SparseTermVector(5, {"game": 10.0, "anime": 8.0, "comic": 1.0}),
    ])


def partition(result):
    return sorted(sorted(c.member_ids()) for c in result.clusters)


def assert_partition(result, corpus):
    ids = [m.id for c in result.clusters for m in c.members]
    assert sorted(ids) == sorted(s.id for s in corpus)


class TestKMeansCluster:
    """Test cases for Euclidean k-means."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.corpus = two_topic_corpus()
    
    def test_separated_groups(self):
        """Test that well separated groups are recovered."""
        result = kmeans_cluster(self.corpus, 2, rng=np.random.default_rng(42))
        
        assert result.converged
        assert not result.spherical
        assert partition(result) == [[0, 1, 2], [3, 4, 5]]
    
    def test_partition_invariant(self):
        """Test that every sample belongs to exactly one cluster."""
        for k in range(1, self.corpus.size() + 1):
            result = kmeans_cluster(self.corpus, k, rng=np.random.default_rng(k))
            
            assert len(result.clusters) == k
            assert_partition(result, self.corpus)
    
    def test_single_cluster(self):
        """Test that k=1 puts every sample in one cluster."""
        result = kmeans_cluster(self.corpus, 1, rng=np.random.default_rng(0))
        
        assert result.converged
        assert result.n_iter == 2
        assert len(result.clusters) == 1
        assert sorted(result.clusters[0].member_ids()) == [0, 1, 2, 3, 4, 5]
        
        # Centroid is the mean of all samples
        centroid = result.clusters[0].centroid
        assert centroid.weight("game") == pytest.approx(29.0 / 6)
        assert centroid.weight("tulip") == pytest.approx(0.1 / 6)
    
    def test_k_equals_corpus_size(self):
        """Test that every sample becomes its own cluster."""
        result = kmeans_cluster(self.corpus, 6, rng=np.random.default_rng(3))
        
        assert result.converged
        assert all(len(c.members) == 1 for c in result.clusters)
    
    def test_centroids_do_not_alias_corpus(self):
        """Test that updated centroids are fresh instances."""
        result = kmeans_cluster(self.corpus, 2, rng=np.random.default_rng(1))
        samples = list(self.corpus)
        
        for c in result.clusters:
            assert all(c.centroid is not s for s in samples)
        # Corpus weights untouched in Euclidean mode
        assert self.corpus.sample_at(3).terms == {"game": 10.0, "anime": 10.0}
    
    def test_empty_cluster_centroid_does_not_alias_corpus(self):
        """Test that a cluster left empty by duplicate samples owns its centroid."""
        corpus = SampleCorpus([SparseTermVector(i, {"x": 1.0}) for i in range(3)])
        samples = list(corpus)
        
        result = kmeans_cluster(corpus, 2, rng=np.random.default_rng(0))
        
        assert sorted(len(c.members) for c in result.clusters) == [0, 3]
        for c in result.clusters:
            assert all(c.centroid is not s for s in samples)
            assert c.centroid.terms == pytest.approx({"x": 1.0})
    
    def test_dense_vectors(self):
        """Test the same loop over dense vectors."""
        rng = np.random.default_rng(42)
        points = np.vstack([
            rng.normal(size=(10, 2)) * 0.1 + [0, 0],
            rng.normal(size=(10, 2)) * 0.1 + [5, 5],
            rng.normal(size=(10, 2)) * 0.1 + [-5, 5],
        ])
        corpus = SampleCorpus([DenseVector(i, p) for i, p in enumerate(points)])
        
        result = kmeans_cluster(corpus, 3, rng=np.random.default_rng(7))
        
        assert result.converged
        assert_partition(result, corpus)
        assert partition(result) == [list(range(0, 10)), list(range(10, 20)), list(range(20, 30))]
    
    def test_iteration_cap(self):
        """Test that hitting max_iter is reported as non-convergence."""
        with pytest.warns(ConvergenceWarning):
            result = kmeans_cluster(self.corpus, 2, rng=np.random.default_rng(0), max_iter=1)
        
        assert not result.converged
        assert result.n_iter == 1
        assert_partition(result, self.corpus)
    
    @pytest.mark.parametrize("k", [0, -3, 7])
    def test_invalid_k(self, k):
        """Test invalid cluster counts."""
        with pytest.raises(InvalidParameterError):
            kmeans_cluster(self.corpus, k)
    
    def test_empty_corpus(self):
        """Test clustering an empty corpus."""
        with pytest.raises(InvalidParameterError):
            kmeans_cluster(SampleCorpus([]), 1)
    
    def test_invalid_max_iter(self):
        """Test that a non-positive iteration cap is rejected."""
        with pytest.raises(InvalidParameterError):
            kmeans_cluster(self.corpus, 2, max_iter=0)
    
    def test_invalid_empty_cluster_policy(self):
        """Test that unknown policies are rejected."""
        with pytest.raises(InvalidParameterError):
            kmeans_cluster(self.corpus, 2, empty_cluster_policy='reseed')


class TestSphericalKMeansCluster:
    """Test cases for spherical k-means."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.corpus = two_topic_corpus()
    
    def test_separated_groups(self):
        """Test that groups over disjoint vocabularies are recovered."""
        result = spherical_kmeans_cluster(self.corpus, 2, rng=np.random.default_rng(42))
        
        assert result.converged
        assert result.spherical
        assert partition(result) == [[0, 1, 2], [3, 4, 5]]
    
    def test_unit_norms(self):
        """Test that samples and centroids are normalized."""
        result = spherical_kmeans_cluster(self.corpus, 2, rng=np.random.default_rng(5))
        
        for sample in self.corpus:
            assert sample.norm() == pytest.approx(1.0)
        for c in result.clusters:
            assert c.centroid.norm() == pytest.approx(1.0)
    
    def test_zero_sample_rejected(self):
        """Test that a zero vector cannot be clustered spherically."""
        corpus = SampleCorpus([
            SparseTermVector(0, {"a": 1.0}),
            SparseTermVector(1, {}),
        ])
        
        with pytest.raises(DegenerateNormalizationError):
            spherical_kmeans_cluster(corpus, 1)
    
    def test_invalid_k_checked_before_normalizing(self):
        """Test that parameters are validated before the corpus is mutated."""
        with pytest.raises(InvalidParameterError):
            spherical_kmeans_cluster(self.corpus, 10)
        
        assert self.corpus.sample_at(3).terms == {"game": 10.0, "anime": 10.0}


class TestLloydIterations:
    """Test cases for the assignment/update loop."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.corpus = SampleCorpus([
            SparseTermVector(0, {"x": 1.0}),
            SparseTermVector(1, {"x": 1.1}),
        ])
    
    def seeded(self):
        return [
            Cluster(1, SparseTermVector(-1, {"x": 1.0})),
            Cluster(2, SparseTermVector(-1, {"x": 100.0})),
        ]
    
    def test_empty_cluster_keeps_centroid(self):
        """Test the default policy for clusters without members."""
        seeded = self.seeded()
        result = lloyd_iterations(self.corpus, seeded)
        
        assert result.converged
        assert result.n_iter == 2
        assert sorted(result.clusters[0].member_ids()) == [0, 1]
        assert result.clusters[1].members == []
        assert result.clusters[1].centroid.terms == {"x": 100.0}
        assert result.clusters[1].centroid is not seeded[1].centroid
        assert result.clusters[0].centroid.weight("x") == pytest.approx(1.05)
    
    def test_empty_cluster_fails(self):
        """Test the fail policy for clusters without members."""
        with pytest.raises(EmptyClusterError) as exc_info:
            lloyd_iterations(self.corpus, self.seeded(), empty_cluster_policy='fail')
        
        assert exc_info.value.cluster_id == 2
        assert exc_info.value.iteration == 1
    
    def test_previous_generation_untouched(self):
        """Test that each iteration builds a new generation."""
        seeded = self.seeded()
        lloyd_iterations(self.corpus, seeded)
        
        assert all(c.members == [] for c in seeded)
    
    def test_no_clusters(self):
        """Test that an empty cluster list is rejected."""
        with pytest.raises(InvalidParameterError):
            lloyd_iterations(self.corpus, [])


class TestNearestCluster:
    """Test cases for nearest centroid selection."""
    
    def test_ties_keep_first_cluster(self):
        """Test that ties resolve to the earlier cluster."""
        sample = DenseVector(0, [1.0, 0.0])
        clusters = [
            Cluster(1, DenseVector(-1, [0.0, 1.0])),
            Cluster(2, DenseVector(-1, [0.0, -1.0])),
        ]
        
        assert nearest_cluster(sample, clusters) == 0
        assert nearest_cluster(sample, clusters, spherical=True) == 0
    
    def test_spherical_negative_similarities(self):
        """Test that the most similar cluster wins even when all are negative."""
        sample = DenseVector(0, [1.0, 0.0])
        clusters = [
            Cluster(1, DenseVector(-1, [-1.0, 0.0])),
            Cluster(2, DenseVector(-1, [-1.0, 1.0])),
        ]
        
        assert nearest_cluster(sample, clusters, spherical=True) == 1
    
    def test_euclidean(self):
        """Test minimum squared distance selection."""
        sample = DenseVector(0, [4.0, 0.0])
        clusters = [
            Cluster(1, DenseVector(-1, [0.0, 0.0])),
            Cluster(2, DenseVector(-1, [5.0, 0.0])),
            Cluster(3, DenseVector(-1, [3.0, 0.0])),
        ]
        
        assert nearest_cluster(sample, clusters) == 1
    
    def test_no_clusters(self):
        """Test that there is nothing to choose from without clusters."""
        with pytest.raises(InvalidParameterError):
            nearest_cluster(DenseVector(0, [1.0, 0.0]), [])


class TestKMeansClusterer:
    """Test cases for the clusterer classes."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.corpus = two_topic_corpus()
    
    def test_cluster_and_params(self):
        """Test clustering through the class interface."""
        clusterer = KMeansClusterer(n_clusters=2, random_state=42)
        result = clusterer.cluster(self.corpus)
        
        params = clusterer.get_params()
        
        assert params['algorithm'] == 'kmeans'
        assert params['n_clusters'] == 2
        assert params['converged'] is True
        assert params['n_iter'] == result.n_iter
        assert params['n_empty_clusters'] == 0
    
    def test_spherical_params(self):
        """Test the spherical clusterer."""
        clusterer = SphericalKMeansClusterer(n_clusters=2, random_state=42)
        result = clusterer.cluster(self.corpus)
        
        assert result.spherical
        assert clusterer.get_params()['algorithm'] == 'spherical'
    
    def test_reproducibility_with_random_state(self):
        """Test reproducibility with fixed random state."""
        result1 = KMeansClusterer(n_clusters=3, random_state=7).cluster(two_topic_corpus())
        result2 = KMeansClusterer(n_clusters=3, random_state=7).cluster(two_topic_corpus())
        
        assert [sorted(c.member_ids()) for c in result1] == [sorted(c.member_ids()) for c in result2]
    
    def test_injected_rng(self):
        """Test that an injected random source is used."""
        rng = np.random.default_rng(0)
        clusterer = KMeansClusterer(n_clusters=2, rng=rng)
        
        assert clusterer.rng is rng
    
    def test_as_index_dict(self):
        """Test conversion to corpus indices."""
        result = KMeansClusterer(n_clusters=1, random_state=0).cluster(self.corpus)
        
        assert result.as_index_dict(self.corpus) == {1: [0, 1, 2, 3, 4, 5]}


if __name__ == '__main__':
    pytest.main([__file__])

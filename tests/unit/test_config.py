"""Unit tests for configuration and factories."""

import pytest
from topiccluster.config import ClusteringConfig, ALGORITHM_KMEANS, ALGORITHM_SPHERICAL
from topiccluster.clustering import Clusterer, KMeansClusterer, SphericalKMeansClusterer
from topiccluster.exceptions import InvalidParameterError
from topiccluster.factories import get_clusterer, register_clusterer, CLUSTERERS


class TestClusteringConfig:
    """Test cases for ClusteringConfig."""
    
    def test_defaults(self):
        """Test default configuration."""
        config = ClusteringConfig.default()
        
        assert config.n_clusters == 100
        assert config.algorithm == ALGORITHM_SPHERICAL
        assert config.max_iter == 300
        assert config.empty_cluster_policy == 'keep'
        config.validate()
    
    def test_from_dict(self):
        """Test building configuration from a mapping."""
        config = ClusteringConfig.from_dict({'n_clusters': 5, 'algorithm': 'kmeans'})
        
        assert config.n_clusters == 5
        assert config.algorithm == ALGORITHM_KMEANS
        assert config.to_dict()['n_clusters'] == 5
    
    def test_from_dict_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(InvalidParameterError):
            ClusteringConfig.from_dict({'clusters': 5})
    
    @pytest.mark.parametrize("overrides", [
        {'n_clusters': 0},
        {'max_iter': -1},
        {'algorithm': 'dbscan'},
        {'empty_cluster_policy': 'ignore'},
        {'top_terms': -2},
    ])
    def test_validation(self, overrides):
        """Test out-of-range parameters."""
        with pytest.raises(InvalidParameterError):
            ClusteringConfig.default().update(**overrides)
    
    def test_update_skips_none(self):
        """Test that None overrides keep current values."""
        config = ClusteringConfig.default().update(n_clusters=None, max_iter=10)
        
        assert config.n_clusters == 100
        assert config.max_iter == 10


class TestFactories:
    """Test cases for the clusterer registry."""
    
    def test_get_clusterer(self):
        """Test creating registered clusterers."""
        assert isinstance(get_clusterer('kmeans', n_clusters=2), KMeansClusterer)
        assert isinstance(get_clusterer('spherical', n_clusters=2), SphericalKMeansClusterer)
    
    def test_unknown_algorithm(self):
        """Test that unknown names raise."""
        with pytest.raises(InvalidParameterError):
            get_clusterer('dbscan', n_clusters=2)
    
    def test_register_clusterer(self):
        """Test registering a new algorithm."""
        class SeededOnly(KMeansClusterer):
            pass
        
        register_clusterer('seeded', SeededOnly)
        try:
            assert isinstance(get_clusterer('seeded', n_clusters=1), SeededOnly)
        finally:
            CLUSTERERS.pop('seeded')
    
    def test_register_requires_clusterer(self):
        """Test that only Clusterer subclasses can be registered."""
        with pytest.raises(TypeError):
            register_clusterer('bogus', dict)
        assert issubclass(KMeansClusterer, Clusterer)


if __name__ == '__main__':
    pytest.main([__file__])

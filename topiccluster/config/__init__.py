"""Configuration module for the clustering engine."""

from .settings import ClusteringConfig

from .constants import (
    # Algorithms
    ALGORITHM_KMEANS,
    ALGORITHM_SPHERICAL,
    SUPPORTED_ALGORITHMS,
    # Empty cluster handling
    EMPTY_CLUSTER_KEEP,
    EMPTY_CLUSTER_FAIL,
    SUPPORTED_EMPTY_CLUSTER_POLICIES,
    # Defaults
    DEFAULT_N_CLUSTERS,
    DEFAULT_MAX_ITER,
    DEFAULT_RANDOM_STATE,
    DEFAULT_TOP_TERMS,
    # Other constants
    CENTROID_ID,
    FLOAT_TOLERANCE,
    MAX_DENSE_METRIC_CELLS
)

__all__ = [
    'ClusteringConfig',
    'ALGORITHM_KMEANS',
    'ALGORITHM_SPHERICAL',
    'SUPPORTED_ALGORITHMS',
    'EMPTY_CLUSTER_KEEP',
    'EMPTY_CLUSTER_FAIL',
    'SUPPORTED_EMPTY_CLUSTER_POLICIES',
    'DEFAULT_N_CLUSTERS',
    'DEFAULT_MAX_ITER',
    'DEFAULT_RANDOM_STATE',
    'DEFAULT_TOP_TERMS',
    'CENTROID_ID',
    'FLOAT_TOLERANCE',
    'MAX_DENSE_METRIC_CELLS'
]

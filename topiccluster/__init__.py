"""k-means++ and spherical k-means clustering of sparse term-weight vectors."""

from .exceptions import (
    TopicClusterError,
    InvalidParameterError,
    SampleIndexError,
    DegenerateNormalizationError,
    EmptyClusterError,
    VectorTypeError
)
from .core import VectorLike, SparseTermVector, DenseVector, Corpus, SampleCorpus
from .clustering import (
    Cluster,
    ClusteringResult,
    KMeansClusterer,
    SphericalKMeansClusterer,
    kmeans_cluster,
    spherical_kmeans_cluster,
    pairwise_cosine_stats,
    inter_cluster_cosine_stats
)
from .config import ClusteringConfig

__version__ = '1.0.0'

__all__ = [
    'TopicClusterError',
    'InvalidParameterError',
    'SampleIndexError',
    'DegenerateNormalizationError',
    'EmptyClusterError',
    'VectorTypeError',
    'VectorLike',
    'SparseTermVector',
    'DenseVector',
    'Corpus',
    'SampleCorpus',
    'Cluster',
    'ClusteringResult',
    'KMeansClusterer',
    'SphericalKMeansClusterer',
    'kmeans_cluster',
    'spherical_kmeans_cluster',
    'pairwise_cosine_stats',
    'inter_cluster_cosine_stats',
    'ClusteringConfig'
]

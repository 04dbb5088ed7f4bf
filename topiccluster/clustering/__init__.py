"""Clustering algorithms and utilities."""

from .base import Clusterer, Cluster, ClusteringResult
from .seeding import kmeans_plus_plus
from .kmeans import (
    KMeansClusterer,
    SphericalKMeansClusterer,
    kmeans_cluster,
    spherical_kmeans_cluster,
    lloyd_iterations,
    nearest_cluster
)
from .metrics import (
    pairwise_cosine_stats,
    inter_cluster_cosine_stats,
    cluster_quality,
    summarize_clusters,
    evaluate_clustering
)

__all__ = [
    'Clusterer',
    'Cluster',
    'ClusteringResult',
    'kmeans_plus_plus',
    'KMeansClusterer',
    'SphericalKMeansClusterer',
    'kmeans_cluster',
    'spherical_kmeans_cluster',
    'lloyd_iterations',
    'nearest_cluster',
    'pairwise_cosine_stats',
    'inter_cluster_cosine_stats',
    'cluster_quality',
    'summarize_clusters',
    'evaluate_clustering'
]

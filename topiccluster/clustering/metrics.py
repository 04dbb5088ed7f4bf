"""Cluster statistics and quality scores."""

from itertools import combinations
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from sklearn.metrics import silhouette_score, calinski_harabasz_score, davies_bouldin_score

from .base import Cluster, ClusteringResult
from ..config.constants import MAX_DENSE_METRIC_CELLS
from ..core.corpus import to_sparse_matrix
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _mean_std(values: List[float]) -> Tuple[float, float]:
    if not values:
        return 0.0, 0.0
    arr = np.asarray(values, dtype=np.float64)
    return float(np.mean(arr)), float(np.std(arr))


def pairwise_cosine_stats(cluster: Cluster) -> Tuple[float, float]:
    """
    Intra-cluster cohesion.

    Mean and standard deviation of the cosine similarity over every pair of
    distinct members, n * (n - 1) / 2 pairs in total.

    Args:
        cluster: Cluster to measure

    Returns:
        Tuple of (mean, std); (0.0, 0.0) for fewer than two members
    """
    similarities = [
        a.cosine_similarity(b)
        for a, b in combinations(cluster.members, 2)
    ]
    return _mean_std(similarities)


def inter_cluster_cosine_stats(cluster1: Cluster, cluster2: Cluster) -> Tuple[float, float]:
    """
    Separation between two clusters.

    Mean and standard deviation of the cosine similarity over the full cross
    product of both memberships.

    Args:
        cluster1: First cluster
        cluster2: Second cluster

    Returns:
        Tuple of (mean, std); (0.0, 0.0) when either cluster is empty
    """
    similarities = [
        a.cosine_similarity(b)
        for a in cluster1.members
        for b in cluster2.members
    ]
    return _mean_std(similarities)


def cluster_quality(cluster: Cluster) -> float:
    """
    Average cosine similarity between the centroid and the members.

    Returns:
        Quality in [-1, 1] (higher is better), 0.0 for an empty cluster
    """
    if not cluster.members:
        return 0.0
    return float(np.mean([cluster.centroid.cosine_similarity(m) for m in cluster.members]))


def summarize_clusters(clusters: Sequence[Cluster]) -> Dict[str, Any]:
    """
    Cohesion and separation report for a finished clustering.

    Args:
        clusters: Final clusters

    Returns:
        Dict with per-cluster statistics, every inter-cluster pair and the
        mean inter-cluster similarity
    """
    per_cluster = []
    for cluster in clusters:
        avg, std = pairwise_cosine_stats(cluster)
        per_cluster.append({
            'cluster_id': cluster.id,
            'size': len(cluster.members),
            'avg_pairwise_similarity': avg,
            'std_pairwise_similarity': std,
            'quality': cluster_quality(cluster)
        })

    pairs = []
    for a, b in combinations(clusters, 2):
        if not a.members or not b.members:
            continue
        avg, std = inter_cluster_cosine_stats(a, b)
        pairs.append({
            'cluster_a': a.id,
            'cluster_b': b.id,
            'avg_similarity': avg,
            'std_similarity': std
        })

    inter_avg = float(np.mean([p['avg_similarity'] for p in pairs])) if pairs else 0.0

    return {
        'clusters': per_cluster,
        'inter_cluster': pairs,
        'inter_cluster_avg_similarity': inter_avg
    }


def evaluate_clustering(result: ClusteringResult,
                        max_dense_cells: Optional[int] = MAX_DENSE_METRIC_CELLS) -> Dict[str, float]:
    """
    Evaluate clustering quality using scikit-learn metrics.

    Samples are converted to a sparse matrix over their features. Silhouette
    uses the cosine metric; Calinski-Harabasz and Davies-Bouldin need a dense
    matrix and Euclidean geometry, so they are skipped when the matrix
    would exceed max_dense_cells.

    Args:
        result: Finished clustering
        max_dense_cells: Densification limit in cells (None for no limit)

    Returns:
        Dictionary of metric scores
    """
    samples = []
    labels = []
    for cluster in result.clusters:
        for member in cluster.members:
            samples.append(member)
            labels.append(cluster.id)

    labels = np.asarray(labels)
    n_clusters = len(set(labels.tolist()))
    metrics: Dict[str, float] = {
        'n_clusters': n_clusters,
        'n_samples': len(samples)
    }

    # Metrics are defined for 2 <= n_clusters <= n_samples - 1
    if n_clusters < 2 or n_clusters >= len(samples):
        return metrics

    matrix, _ = to_sparse_matrix(samples)
    metrics['silhouette'] = float(silhouette_score(matrix, labels, metric='cosine'))

    n_cells = matrix.shape[0] * matrix.shape[1]
    if max_dense_cells is not None and n_cells > max_dense_cells:
        logger.info(
            f"Skipping Calinski-Harabasz and Davies-Bouldin: {matrix.shape} matrix "
            f"exceeds {max_dense_cells} cells"
        )
        return metrics

    dense = matrix.toarray()
    metrics['calinski_harabasz'] = float(calinski_harabasz_score(dense, labels))
    metrics['davies_bouldin'] = float(davies_bouldin_score(dense, labels))

    return metrics

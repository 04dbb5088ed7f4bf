"""JSON report writers for clustering results."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..clustering.base import Cluster, ClusteringResult
from ..core.sparse import SparseTermVector
from ..utils.io import write_json


def cluster_to_record(cluster: Cluster, top_terms: Optional[int] = None) -> Dict[str, Any]:
    """
    Convert a cluster to a JSON-serializable record.

    Args:
        cluster: Cluster to convert
        top_terms: Keep only the heaviest centroid terms (None for all)

    Returns:
        Dict with cluster_id, size, centroid and member ids
    """
    centroid = cluster.centroid
    if isinstance(centroid, SparseTermVector) and top_terms is not None:
        centroid_data = dict(centroid.top_terms(top_terms))
    else:
        centroid_data = {str(k): v for k, v in centroid.to_dict().items()}

    return {
        'cluster_id': cluster.id,
        'size': len(cluster.members),
        'centroid': centroid_data,
        'members': [m.id for m in cluster.members]
    }


def clusters_to_records(clusters: List[Cluster],
                        top_terms: Optional[int] = None) -> List[Dict[str, Any]]:
    """Convert every cluster to a record."""
    return [cluster_to_record(c, top_terms) for c in clusters]


def save_clusters(result: ClusteringResult,
                  filepath: Union[str, Path],
                  metadata: Optional[Dict[str, Any]] = None,
                  top_terms: Optional[int] = None,
                  indent: int = 2) -> None:
    """
    Save clustering results to JSON file.

    Args:
        result: Clustering result
        filepath: Path to output file
        metadata: Optional metadata about clustering
        top_terms: Number of centroid terms kept per cluster
        indent: JSON indentation
    """
    data = {
        'clusters': clusters_to_records(result.clusters, top_terms),
        'converged': result.converged,
        'n_iter': result.n_iter,
        'spherical': result.spherical,
        'metadata': metadata or {}
    }
    write_json(data, filepath, indent)

"""CSV output utilities for cluster reports."""

import csv
from typing import List, Dict, Union, Any, Optional
from pathlib import Path

from ..clustering.base import Cluster
from ..core.sparse import SparseTermVector


def write_cluster_summary_csv(
    clusters: List[Cluster],
    cluster_stats: List[Dict[str, Any]],
    filepath: Union[str, Path],
    top_terms: Optional[int] = 10,
    delimiter: str = ','
) -> None:
    """
    Write one row per cluster with its statistics and members.

    Args:
        clusters: Final clusters
        cluster_stats: Per-cluster entries of ``summarize_clusters``
        filepath: Path to output CSV file
        top_terms: Number of centroid terms listed per cluster
        delimiter: CSV delimiter
    """
    stats_by_id = {s['cluster_id']: s for s in cluster_stats}

    fieldnames = [
        'cluster_id',
        'size',
        'avg_pairwise_similarity',
        'std_pairwise_similarity',
        'quality',
        'top_terms',
        'members'
    ]

    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, delimiter=delimiter)
        writer.writeheader()

        for cluster in clusters:
            stats = stats_by_id.get(cluster.id, {})
            centroid = cluster.centroid
            terms = centroid.top_terms(top_terms) if isinstance(centroid, SparseTermVector) else []

            writer.writerow({
                'cluster_id': cluster.id,
                'size': len(cluster.members),
                'avg_pairwise_similarity': f"{stats.get('avg_pairwise_similarity', 0):.4f}",
                'std_pairwise_similarity': f"{stats.get('std_pairwise_similarity', 0):.4f}",
                'quality': f"{stats.get('quality', 0):.4f}",
                'top_terms': '; '.join(f"{t}({w:.4f})" for t, w in terms),
                'members': '; '.join(str(m.id) for m in cluster.members)
            })


def write_inter_cluster_csv(
    pairs: List[Dict[str, Any]],
    filepath: Union[str, Path],
    delimiter: str = ','
) -> None:
    """
    Write inter-cluster similarity pairs to CSV.

    Args:
        pairs: Inter-cluster entries of ``summarize_clusters``
        filepath: Path to output CSV file
        delimiter: CSV delimiter
    """
    if not pairs:
        # Create empty file
        Path(filepath).touch()
        return

    fieldnames = ['cluster_a', 'cluster_b', 'avg_similarity', 'std_similarity']

    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, delimiter=delimiter)
        writer.writeheader()

        for pair in pairs:
            writer.writerow({
                'cluster_a': pair['cluster_a'],
                'cluster_b': pair['cluster_b'],
                'avg_similarity': f"{pair['avg_similarity']:.4f}",
                'std_similarity': f"{pair['std_similarity']:.4f}"
            })


def write_metrics_csv(
    metrics: Dict[str, Any],
    filepath: Union[str, Path]
) -> None:
    """
    Write clustering metrics to CSV.
    
    Args:
        metrics: Dictionary of metrics
        filepath: Path to output CSV file
    """
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['Metric', 'Value'])
        
        for metric_name, value in metrics.items():
            if isinstance(value, float):
                formatted_value = f"{value:.4f}"
            else:
                formatted_value = str(value)
            
            writer.writerow([metric_name, formatted_value])

"""I/O utilities for corpora and cluster reports."""

from .corpus_loader import (
    parse_topic_line,
    iter_topic_samples,
    load_topic_corpus
)

from .json_handler import (
    cluster_to_record,
    clusters_to_records,
    save_clusters
)

from .csv_handler import (
    write_cluster_summary_csv,
    write_inter_cluster_csv,
    write_metrics_csv
)

__all__ = [
    'parse_topic_line',
    'iter_topic_samples',
    'load_topic_corpus',
    'cluster_to_record',
    'clusters_to_records',
    'save_clusters',
    'write_cluster_summary_csv',
    'write_inter_cluster_csv',
    'write_metrics_csv'
]

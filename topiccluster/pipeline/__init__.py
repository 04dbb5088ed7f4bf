"""Clustering pipeline."""

from .topic_pipeline import TopicClusteringPipeline
from .results import ResultManager

__all__ = [
    'TopicClusteringPipeline',
    'ResultManager'
]

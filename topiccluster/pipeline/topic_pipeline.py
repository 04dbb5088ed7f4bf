"""Topic clustering pipeline: load, cluster, measure."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .results import ResultManager
from ..clustering import summarize_clusters, evaluate_clustering
from ..config import ClusteringConfig
from ..core.corpus import Corpus
from ..factories import get_clusterer
from ..io import load_topic_corpus
from ..utils.logging import get_logger

logger = get_logger(__name__)


class TopicClusteringPipeline:
    """Runs a clustering algorithm over a topic corpus and collects statistics."""
    
    def __init__(self, config: Optional[ClusteringConfig] = None):
        """
        Initialize pipeline.
        
        Args:
            config: Clustering configuration (defaults when None)
        """
        self.config = config or ClusteringConfig.default()
        self.config.validate()
        self.result_manager = ResultManager()
    
    def create_clusterer(self):
        """Create and configure the clusterer named by the configuration."""
        return get_clusterer(
            self.config.algorithm,
            n_clusters=self.config.n_clusters,
            max_iter=self.config.max_iter,
            empty_cluster_policy=self.config.empty_cluster_policy,
            random_state=self.config.random_state
        )
    
    def run(self,
            corpus: Optional[Corpus] = None,
            corpus_file: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """
        Run the complete pipeline.
        
        Args:
            corpus: Samples to cluster
            corpus_file: Path to a topic-term corpus file, used when corpus is None
            
        Returns:
            Pipeline results dictionary
        """
        logger.info(f"Starting {self.config.algorithm} pipeline")
        
        if corpus is None and corpus_file:
            corpus = load_topic_corpus(corpus_file)
        if corpus is None:
            raise ValueError("No corpus provided. Expected a Corpus or a corpus file path.")
        
        # Step 1: Clustering
        clusterer = self.create_clusterer()
        result = clusterer.cluster(corpus)
        
        # Step 2: Cohesion and separation
        statistics = summarize_clusters(result.clusters)
        
        # Step 3: Global quality scores
        metrics = evaluate_clustering(result)
        
        results = {
            'algorithm': self.config.algorithm,
            'sample_count': corpus.size(),
            'result': result,
            'converged': result.converged,
            'n_iter': result.n_iter,
            'clustering_params': clusterer.get_params(),
            'config': self.config.to_dict(),
            'statistics': statistics,
            'metrics': metrics
        }
        
        if not result.converged:
            logger.warning(f"Results are from a run that stopped after {result.n_iter} iterations")
        
        self.result_manager.set_results(results)
        return results
    
    def save_results(self, output_dir: Union[str, Path], **kwargs) -> Path:
        """Save pipeline results."""
        kwargs.setdefault('top_terms', self.config.top_terms)
        return self.result_manager.save(output_dir, **kwargs)
    
    def get_summary(self) -> Dict[str, Any]:
        """Get results summary."""
        return self.result_manager.get_summary()

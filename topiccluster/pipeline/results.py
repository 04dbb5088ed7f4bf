"""Result management for pipeline."""

from typing import Dict, Any, Union
from pathlib import Path

from ..io import save_clusters, write_cluster_summary_csv, write_inter_cluster_csv, write_metrics_csv
from ..utils.io import write_json, ensure_directory
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ResultManager:
    """Manages pipeline results and output."""
    
    def __init__(self):
        self.results: Dict[str, Any] = {}
    
    def set_results(self, results: Dict[str, Any]) -> None:
        """Set pipeline results."""
        self.results = results
    
    def save(self, 
             output_dir: Union[str, Path],
             save_csv: bool = True,
             top_terms: int = 10) -> Path:
        """
        Save pipeline results to files.
        
        Args:
            output_dir: Directory to save results
            save_csv: Whether to save CSV reports
            top_terms: Number of centroid terms kept per cluster

        Returns:
            Output directory
        """
        if not self.results:
            raise ValueError("No results to save. Run the pipeline first.")

        output_dir = ensure_directory(output_dir)
        logger.info(f"Saving results to {output_dir}")
        
        result = self.results['result']
        save_clusters(
            result,
            output_dir / 'clusters.json',
            metadata=self.results.get('clustering_params'),
            top_terms=top_terms
        )
        
        statistics = self.results['statistics']
        if save_csv:
            write_cluster_summary_csv(
                result.clusters,
                statistics['clusters'],
                output_dir / 'cluster_summary.csv',
                top_terms=top_terms
            )
            write_inter_cluster_csv(
                statistics['inter_cluster'],
                output_dir / 'inter_cluster.csv'
            )
            if self.results.get('metrics'):
                write_metrics_csv(self.results['metrics'], output_dir / 'metrics.csv')
        
        # Complete results without the live cluster objects
        serializable = {k: v for k, v in self.results.items() if k != 'result'}
        write_json(serializable, output_dir / 'results.json')
        return output_dir
    
    def get_summary(self) -> Dict[str, Any]:
        """Get results summary."""
        statistics = self.results.get('statistics', {})
        return {
            'sample_count': self.results.get('sample_count', 0),
            'cluster_count': len(statistics.get('clusters', [])),
            'algorithm': self.results.get('algorithm', 'unknown'),
            'converged': self.results.get('converged'),
            'n_iter': self.results.get('n_iter'),
            'inter_cluster_avg_similarity': statistics.get('inter_cluster_avg_similarity')
        }

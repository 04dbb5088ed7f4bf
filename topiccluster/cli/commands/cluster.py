"""Cluster command implementation."""

from ...pipeline import TopicClusteringPipeline
from ...config import ClusteringConfig
from ..base import BaseCommand


class ClusterCommand(BaseCommand):
    """Command to cluster a topic corpus."""
    
    def build_config(self) -> ClusteringConfig:
        """Merge config file and command line arguments."""
        config = ClusteringConfig.default()
        
        # Load config file if provided
        if getattr(self.args, 'config_file', None):
            config = ClusteringConfig.from_dict(self.load_input(self.args.config_file))
        
        # Explicit arguments win over the config file
        return config.update(
            n_clusters=self.args.num_clusters,
            algorithm=self.args.algorithm,
            max_iter=self.args.max_iter,
            empty_cluster_policy=self.args.empty_cluster,
            random_state=self.args.random_state,
            top_terms=self.args.top_terms
        )
    
    def execute(self) -> None:
        """Execute clustering pipeline."""
        config = self.build_config()
        pipeline = TopicClusteringPipeline(config)
        
        self.logger.info(f"Running clustering with {config.algorithm} algorithm")
        results = pipeline.run(corpus_file=self.args.corpus)
        
        # Save results
        output_dir = self.ensure_output_dir(self.args.output)
        pipeline.save_results(output_dir)
        
        # Log summary
        summary = pipeline.get_summary()
        self.logger.info(f"Results saved to: {output_dir}")
        self.logger.info(f"Total samples: {summary['sample_count']}")
        self.logger.info(f"Clusters found: {summary['cluster_count']}")
        self.logger.info(f"Converged: {summary['converged']} after {summary['n_iter']} iterations")
        self.logger.info(
            f"Inter cluster avg similarity: {summary['inter_cluster_avg_similarity']:.4f}"
        )
        if 'silhouette' in results['metrics']:
            self.logger.info(f"Silhouette (cosine): {results['metrics']['silhouette']:.3f}")

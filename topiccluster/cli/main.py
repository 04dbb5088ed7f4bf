"""Main CLI entry point."""

import argparse
import logging
import sys

from ..config import SUPPORTED_ALGORITHMS, SUPPORTED_EMPTY_CLUSTER_POLICIES
from ..utils.logging import configure_logging
from .base import add_common_arguments
from .commands import ClusterCommand


def create_parser():
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description='k-means++ clustering of sparse topic-term vectors'
    )
    
    add_common_arguments(parser)
    
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )
    
    # Cluster command
    cluster_parser = subparsers.add_parser(
        'cluster',
        help='Cluster a topic-term corpus'
    )
    cluster_parser.add_argument(
        '--corpus', '-i',
        required=True,
        help='Corpus file: "topic_id topic_weight term weight ..." per line'
    )
    cluster_parser.add_argument(
        '--output', '-o',
        required=True,
        help='Output directory for results'
    )
    cluster_parser.add_argument(
        '--num-clusters', '-k',
        type=int,
        help='Number of clusters (default 100)'
    )
    cluster_parser.add_argument(
        '--algorithm', '-a',
        choices=SUPPORTED_ALGORITHMS,
        help='Clustering algorithm (default spherical)'
    )
    cluster_parser.add_argument(
        '--max-iter',
        type=int,
        help='Maximum number of Lloyd iterations'
    )
    cluster_parser.add_argument(
        '--random-state',
        type=int,
        help='Random seed for k-means++ seeding'
    )
    cluster_parser.add_argument(
        '--empty-cluster',
        choices=SUPPORTED_EMPTY_CLUSTER_POLICIES,
        help='What to do when a cluster loses all members'
    )
    cluster_parser.add_argument(
        '--top-terms',
        type=int,
        help='Number of centroid terms written per cluster'
    )
    cluster_parser.add_argument(
        '--config-file',
        help='JSON file with clustering configuration'
    )
    
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    configure_logging(args.log_level, quiet=args.quiet)
    
    # Execute command
    if args.command == 'cluster':
        command = ClusterCommand(args)
    else:
        parser.print_help()
        sys.exit(1)
    
    try:
        command.execute()
    except Exception as e:
        logging.error(f"Command failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()

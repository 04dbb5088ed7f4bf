"""CLI command modules."""

from .cluster import ClusterCommand

__all__ = [
    'ClusterCommand'
]

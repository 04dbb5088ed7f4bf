"""Utility modules for the clustering engine."""

from .io import read_json, write_json, ensure_directory, to_serializable
from .logging import get_logger, configure_logging
from .validation import validate_file_exists, validate_cluster_count, validate_max_iter

__all__ = [
    'read_json',
    'write_json',
    'ensure_directory',
    'to_serializable',
    'get_logger',
    'configure_logging',
    'validate_file_exists',
    'validate_cluster_count',
    'validate_max_iter'
]

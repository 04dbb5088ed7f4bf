"""Input validation utilities."""

from pathlib import Path
from typing import Union

from ..exceptions import InvalidParameterError


def validate_file_exists(path: Union[str, Path]) -> Path:
    """
    Validate that file exists.
    
    Args:
        path: File path
        
    Returns:
        Path object
        
    Raises:
        FileNotFoundError: If file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path


def validate_cluster_count(k: int, n_samples: int) -> None:
    """
    Validate the requested number of clusters against the corpus size.

    Args:
        k: Requested number of clusters
        n_samples: Number of samples in the corpus

    Raises:
        InvalidParameterError: If the corpus is empty or k is not in [1, n_samples]
    """
    if n_samples <= 0:
        raise InvalidParameterError("Cannot cluster an empty corpus")
    if k <= 0:
        raise InvalidParameterError(f"Number of clusters must be positive, got {k}")
    if k > n_samples:
        raise InvalidParameterError(
            f"Number of clusters ({k}) exceeds number of samples ({n_samples})"
        )


def validate_max_iter(max_iter: int) -> None:
    """
    Validate the iteration cap.

    Raises:
        InvalidParameterError: If max_iter is not positive
    """
    if max_iter <= 0:
        raise InvalidParameterError(f"max_iter must be positive, got {max_iter}")

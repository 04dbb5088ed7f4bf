"""Configuration for clustering runs."""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from .constants import (
    ALGORITHM_SPHERICAL,
    SUPPORTED_ALGORITHMS,
    EMPTY_CLUSTER_KEEP,
    SUPPORTED_EMPTY_CLUSTER_POLICIES,
    DEFAULT_N_CLUSTERS,
    DEFAULT_MAX_ITER,
    DEFAULT_RANDOM_STATE,
    DEFAULT_TOP_TERMS
)
from ..exceptions import InvalidParameterError


@dataclass
class ClusteringConfig:
    """Parameters of a clustering run."""
    n_clusters: int = DEFAULT_N_CLUSTERS
    algorithm: str = ALGORITHM_SPHERICAL
    max_iter: int = DEFAULT_MAX_ITER
    empty_cluster_policy: str = EMPTY_CLUSTER_KEEP
    random_state: Optional[int] = DEFAULT_RANDOM_STATE

    # Reporting
    top_terms: int = DEFAULT_TOP_TERMS

    @classmethod
    def default(cls) -> 'ClusteringConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClusteringConfig':
        """
        Create configuration from a dictionary.

        Unknown keys are rejected so that typos in config files surface
        instead of being silently ignored.

        Args:
            data: Mapping of field names to values

        Returns:
            Validated configuration
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidParameterError(f"Unknown configuration keys: {sorted(unknown)}")

        config = cls(**data)
        config.validate()
        return config

    def update(self, **overrides: Any) -> 'ClusteringConfig':
        """Apply non-None overrides in place and revalidate."""
        for key, value in overrides.items():
            if value is None:
                continue
            if not hasattr(self, key):
                raise InvalidParameterError(f"Unknown configuration key: {key}")
            setattr(self, key, value)
        self.validate()
        return self

    def validate(self) -> None:
        """Check parameter ranges."""
        if self.n_clusters <= 0:
            raise InvalidParameterError(f"n_clusters must be positive, got {self.n_clusters}")
        if self.max_iter <= 0:
            raise InvalidParameterError(f"max_iter must be positive, got {self.max_iter}")
        if self.algorithm not in SUPPORTED_ALGORITHMS:
            raise InvalidParameterError(
                f"Unknown clustering algorithm: {self.algorithm}. "
                f"Available: {SUPPORTED_ALGORITHMS}"
            )
        if self.empty_cluster_policy not in SUPPORTED_EMPTY_CLUSTER_POLICIES:
            raise InvalidParameterError(
                f"Unknown empty cluster policy: {self.empty_cluster_policy}. "
                f"Available: {SUPPORTED_EMPTY_CLUSTER_POLICIES}"
            )
        if self.top_terms < 0:
            raise InvalidParameterError(f"top_terms must be non-negative, got {self.top_terms}")

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return asdict(self)

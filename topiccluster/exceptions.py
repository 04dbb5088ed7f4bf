"""Exception types raised by the clustering engine."""


class TopicClusterError(Exception):
    """Base class for all topiccluster errors."""


class InvalidParameterError(TopicClusterError, ValueError):
    """Raised when a clustering parameter is out of its valid range."""


class SampleIndexError(TopicClusterError, IndexError):
    """Raised when a corpus is accessed outside ``[0, size())``."""


class DegenerateNormalizationError(TopicClusterError, ZeroDivisionError):
    """Raised when normalizing a vector whose norm is zero."""


class EmptyClusterError(TopicClusterError, RuntimeError):
    """Raised when a cluster ends an assignment pass without members."""

    def __init__(self, cluster_id: int, iteration: int):
        self.cluster_id = cluster_id
        self.iteration = iteration
        super().__init__(
            f"Cluster {cluster_id} has no members after iteration {iteration}"
        )


class VectorTypeError(TopicClusterError, TypeError):
    """Raised when vectors of different concrete types are combined."""

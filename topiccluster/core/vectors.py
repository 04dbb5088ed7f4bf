"""Base interface for vectors that can be clustered."""

from abc import ABC, abstractmethod
from typing import Dict, Any

from ..exceptions import DegenerateNormalizationError, VectorTypeError


class VectorLike(ABC):
    """
    Abstract base class for clusterable samples.

    A sample has a stable integer identity. Equality and hashing go through
    that identity only, so two samples with identical weights but different
    ids are different samples. Numeric comparisons use ``distance_from`` and
    ``cosine_similarity`` instead.

    Subclasses cache their norm; every in-place mutation must call
    ``_invalidate_norm``.
    """

    def __init__(self, sample_id: int):
        self._id = int(sample_id)
        self._norm = None

    @property
    def id(self) -> int:
        """Identity of the sample."""
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorLike):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def _check_compatible(self, other: 'VectorLike') -> None:
        """Reject arithmetic between different concrete vector types."""
        if type(other) is not type(self):
            raise VectorTypeError(
                f"{type(self).__name__} cannot be combined with {type(other).__name__}"
            )

    def _invalidate_norm(self) -> None:
        self._norm = None

    def norm(self) -> float:
        """Euclidean norm, computed lazily and cached until the next mutation."""
        if self._norm is None:
            self._norm = self._compute_norm()
        return self._norm

    def normalize(self) -> None:
        """
        Scale in place to unit norm.

        Raises:
            DegenerateNormalizationError: If the vector is all zeros
        """
        n = self.norm()
        if n == 0:
            raise DegenerateNormalizationError(
                f"Cannot normalize zero vector (sample {self._id})"
            )
        self.scalar_multiply(1.0 / n)

    @abstractmethod
    def _compute_norm(self) -> float:
        """Compute the Euclidean norm without caching."""
        pass

    @abstractmethod
    def distance_from(self, other: 'VectorLike') -> float:
        """
        Squared Euclidean distance to another vector.

        Args:
            other: Vector of the same concrete type

        Returns:
            Sum of squared coordinate differences
        """
        pass

    @abstractmethod
    def cosine_similarity(self, other: 'VectorLike') -> float:
        """
        Cosine similarity with another vector.

        Args:
            other: Vector of the same concrete type

        Returns:
            Inner product divided by the product of norms
        """
        pass

    @abstractmethod
    def zero(self) -> 'VectorLike':
        """Create a new additive identity of the same concrete type."""
        pass

    @abstractmethod
    def add(self, other: 'VectorLike') -> None:
        """Accumulate another vector into this one in place."""
        pass

    @abstractmethod
    def scalar_multiply(self, factor: float) -> None:
        """Scale every coordinate in place."""
        pass

    @abstractmethod
    def copy(self) -> 'VectorLike':
        """Create a distinct instance with the same identity and weights."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[Any, float]:
        """Return the non-zero coordinates as a ``{feature: weight}`` mapping."""
        pass

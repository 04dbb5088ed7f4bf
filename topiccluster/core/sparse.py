"""Sparse term-weight vectors."""

import math
from typing import Dict, List, Mapping, Optional, Tuple

from .vectors import VectorLike
from ..config.constants import CENTROID_ID


class SparseTermVector(VectorLike):
    """
    Vector represented as a mapping from term to weight.

    Terms that are absent have weight 0. Distances are computed over the
    union of both key sets while the cosine inner product only visits keys
    present in both operands.
    """

    def __init__(self,
                 sample_id: int,
                 terms: Optional[Mapping[str, float]] = None):
        """
        Initialize sparse vector.

        Args:
            sample_id: Stable identity of the sample
            terms: Mapping of term to weight (copied)
        """
        super().__init__(sample_id)
        self.terms: Dict[str, float] = dict(terms) if terms else {}

    def __len__(self) -> int:
        return len(self.terms)

    def __repr__(self) -> str:
        return f"SparseTermVector(id={self.id}, terms={len(self.terms)})"

    def __str__(self) -> str:
        rendered = ' '.join(f"{term}({weight:f})" for term, weight in self.top_terms())
        return f"TopicId: {self.id}, Terms: {rendered}"

    def weight(self, term: str) -> float:
        """Weight of a term, 0.0 when absent."""
        return self.terms.get(term, 0.0)

    def top_terms(self, n: Optional[int] = None) -> List[Tuple[str, float]]:
        """
        Terms sorted by descending weight.

        Args:
            n: Maximum number of terms (None for all)

        Returns:
            List of (term, weight) pairs
        """
        ranked = sorted(self.terms.items(), key=lambda item: (-item[1], item[0]))
        return ranked if n is None else ranked[:n]

    def _compute_norm(self) -> float:
        return math.sqrt(sum(v * v for v in self.terms.values()))

    def distance_from(self, other: VectorLike) -> float:
        self._check_compatible(other)
        dist = 0.0
        for term, v in self.terms.items():
            u = other.terms.get(term)
            if u is None:
                dist += v * v
            else:
                dist += (v - u) * (v - u)
        # Terms only in other
        for term, u in other.terms.items():
            if term not in self.terms:
                dist += u * u
        return dist

    def cosine_similarity(self, other: VectorLike) -> float:
        self._check_compatible(other)
        norm_product = self.norm() * other.norm()
        if norm_product == 0:
            return 0.0

        # Iterate over the smaller support
        small, large = (self.terms, other.terms) if len(self.terms) <= len(other.terms) \
            else (other.terms, self.terms)
        dot = 0.0
        for term, v in small.items():
            u = large.get(term)
            if u is not None:
                dot += v * u
        return dot / norm_product

    def zero(self) -> 'SparseTermVector':
        return SparseTermVector(CENTROID_ID)

    def add(self, other: VectorLike) -> None:
        self._check_compatible(other)
        for term, u in other.terms.items():
            self.terms[term] = self.terms.get(term, 0.0) + u
        self._invalidate_norm()

    def scalar_multiply(self, factor: float) -> None:
        for term in self.terms:
            self.terms[term] *= factor
        self._invalidate_norm()

    def copy(self) -> 'SparseTermVector':
        return SparseTermVector(self.id, self.terms)

    def to_dict(self) -> Dict[str, float]:
        return dict(self.terms)

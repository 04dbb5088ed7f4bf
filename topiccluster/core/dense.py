"""Dense vectors backed by numpy arrays."""

from typing import Dict, Union, List

import numpy as np

from .vectors import VectorLike
from ..config.constants import CENTROID_ID
from ..exceptions import InvalidParameterError


class DenseVector(VectorLike):
    """Fixed-dimension vector stored as a float64 numpy array."""

    def __init__(self, sample_id: int, values: Union[List[float], np.ndarray]):
        super().__init__(sample_id)
        self.values = np.array(values, dtype=np.float64).flatten()

    def __len__(self) -> int:
        return self.values.shape[0]

    def __repr__(self) -> str:
        return f"DenseVector(id={self.id}, dim={len(self)})"

    def _check_compatible(self, other: VectorLike) -> None:
        super()._check_compatible(other)
        if other.values.shape != self.values.shape:
            raise InvalidParameterError(
                f"Dimension mismatch: {self.values.shape[0]} vs {other.values.shape[0]}"
            )

    def _compute_norm(self) -> float:
        return float(np.linalg.norm(self.values))

    def distance_from(self, other: VectorLike) -> float:
        self._check_compatible(other)
        diff = self.values - other.values
        return float(np.dot(diff, diff))

    def cosine_similarity(self, other: VectorLike) -> float:
        self._check_compatible(other)
        norm_product = self.norm() * other.norm()
        if norm_product == 0:
            return 0.0
        return float(np.dot(self.values, other.values) / norm_product)

    def zero(self) -> 'DenseVector':
        return DenseVector(CENTROID_ID, np.zeros_like(self.values))

    def add(self, other: VectorLike) -> None:
        self._check_compatible(other)
        self.values += other.values
        self._invalidate_norm()

    def scalar_multiply(self, factor: float) -> None:
        self.values *= factor
        self._invalidate_norm()

    def copy(self) -> 'DenseVector':
        return DenseVector(self.id, self.values)

    def to_dict(self) -> Dict[int, float]:
        nonzero = np.flatnonzero(self.values)
        return {int(i): float(self.values[i]) for i in nonzero}

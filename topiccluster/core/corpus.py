"""Corpus accessors consumed by the clustering engine."""

from abc import ABC, abstractmethod
from typing import Iterator, List, Sequence, Tuple, Any

from scipy.sparse import csr_matrix
from sklearn.feature_extraction import DictVectorizer

from .vectors import VectorLike
from ..exceptions import SampleIndexError


class Corpus(ABC):
    """
    Read-only, 0-indexed sequence of samples.

    ``sample_at`` must return the same object for repeated calls with the
    same index; the engine relies on identity across assignment passes.
    """

    @abstractmethod
    def size(self) -> int:
        """Number of samples, fixed for the duration of a run."""
        pass

    @abstractmethod
    def sample_at(self, index: int) -> VectorLike:
        """
        Sample at a 0-based index.

        Raises:
            SampleIndexError: If index < 0 or index >= size()
        """
        pass

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[VectorLike]:
        for i in range(self.size()):
            yield self.sample_at(i)


class SampleCorpus(Corpus):
    """Corpus backed by an in-memory list."""

    def __init__(self, samples: Sequence[VectorLike]):
        self._samples: List[VectorLike] = list(samples)

    def size(self) -> int:
        return len(self._samples)

    def sample_at(self, index: int) -> VectorLike:
        # Negative indices are rejected rather than wrapped
        if index < 0 or index >= len(self._samples):
            raise SampleIndexError(
                f"Sample index {index} out of range [0, {len(self._samples)})"
            )
        return self._samples[index]


def to_sparse_matrix(samples: Sequence[VectorLike]) -> Tuple[csr_matrix, List[Any]]:
    """
    Convert samples to a sparse feature matrix.

    Args:
        samples: Vectors to convert, one row each

    Returns:
        Tuple of (CSR matrix (n_samples, n_features), feature_names)
    """
    vectorizer = DictVectorizer(sparse=True)
    # DictVectorizer needs string feature names
    rows = [{str(k): v for k, v in sample.to_dict().items()} for sample in samples]
    matrix = vectorizer.fit_transform(rows)
    return csr_matrix(matrix), list(vectorizer.get_feature_names_out())

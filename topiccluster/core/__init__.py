"""Vector types and corpus accessors."""

from .vectors import VectorLike
from .sparse import SparseTermVector
from .dense import DenseVector
from .corpus import Corpus, SampleCorpus, to_sparse_matrix

__all__ = [
    'VectorLike',
    'SparseTermVector',
    'DenseVector',
    'Corpus',
    'SampleCorpus',
    'to_sparse_matrix'
]

"""Base interface and data types for clustering algorithms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Any, FrozenSet

from ..core.corpus import Corpus
from ..core.vectors import VectorLike


@dataclass
class Cluster:
    """
    A cluster of samples.

    The centroid is owned by the cluster and replaced wholesale on every
    update. Members are references into the corpus.
    """
    id: int
    centroid: VectorLike
    members: List[VectorLike] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.members)

    def __str__(self) -> str:
        ids = ' '.join(str(m.id) for m in self.members)
        return f"Id: {self.id}, Members: {ids}"

    def add(self, sample: VectorLike) -> None:
        """Append a sample to the membership."""
        self.members.append(sample)

    def member_ids(self) -> FrozenSet[int]:
        """Identities of the members as an unordered set."""
        return frozenset(m.id for m in self.members)

    def same_members(self, other: 'Cluster') -> bool:
        """Whether both clusters hold the same set of sample identities."""
        return self.member_ids() == other.member_ids()

    def clone_centroid(self) -> 'Cluster':
        """New cluster with the same id and centroid and no members."""
        return Cluster(self.id, self.centroid)

    def detach_centroid(self) -> None:
        """Replace the centroid with an equal-valued instance owned by this cluster."""
        centroid = self.centroid.zero()
        centroid.add(self.centroid)
        self.centroid = centroid

    def recalc_centroid(self, spherical: bool = False) -> None:
        """
        Replace the centroid with the mean of the members.

        Args:
            spherical: Renormalize the mean to unit norm

        Raises:
            ValueError: If the cluster has no members
        """
        if not self.members:
            raise ValueError(f"Cannot compute centroid of empty cluster {self.id}")

        centroid = self.centroid.zero()
        for member in self.members:
            centroid.add(member)
        centroid.scalar_multiply(1.0 / len(self.members))
        if spherical:
            centroid.normalize()
        self.centroid = centroid


@dataclass
class ClusteringResult:
    """Outcome of a clustering run."""
    clusters: List[Cluster]
    converged: bool
    n_iter: int
    spherical: bool = False

    def __len__(self) -> int:
        return len(self.clusters)

    def __iter__(self):
        return iter(self.clusters)

    def as_index_dict(self, corpus: Corpus) -> Dict[int, List[int]]:
        """
        Map cluster ids to corpus indices of their members.

        Args:
            corpus: Corpus the result was computed on

        Returns:
            Dict mapping cluster IDs to sorted lists of sample indices
        """
        position = {corpus.sample_at(i).id: i for i in range(corpus.size())}
        return {
            c.id: sorted(position[m.id] for m in c.members)
            for c in self.clusters
        }


class Clusterer(ABC):
    """Abstract base class for clustering algorithms."""

    @abstractmethod
    def cluster(self,
                corpus: Corpus,
                **kwargs) -> ClusteringResult:
        """
        Perform clustering on a corpus.

        Args:
            corpus: Samples to cluster
            **kwargs: Algorithm-specific parameters

        Returns:
            Clustering result with final clusters and convergence info
        """
        pass

    @abstractmethod
    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        pass

"""K-Means and spherical K-Means clustering over VectorLike samples."""

import math
import warnings
from typing import Dict, List, Optional, Any

import numpy as np
from sklearn.exceptions import ConvergenceWarning

from .base import Clusterer, Cluster, ClusteringResult
from .seeding import kmeans_plus_plus
from ..config.constants import (
    DEFAULT_MAX_ITER,
    EMPTY_CLUSTER_KEEP,
    EMPTY_CLUSTER_FAIL,
    SUPPORTED_EMPTY_CLUSTER_POLICIES
)
from ..core.corpus import Corpus
from ..core.vectors import VectorLike
from ..exceptions import EmptyClusterError, InvalidParameterError
from ..utils.logging import get_logger
from ..utils.validation import validate_cluster_count, validate_max_iter

logger = get_logger(__name__)


def nearest_cluster(sample: VectorLike,
                    clusters: List[Cluster],
                    spherical: bool = False) -> int:
    """
    Index of the cluster whose centroid is nearest to a sample.

    Euclidean mode minimizes squared distance, spherical mode maximizes
    cosine similarity. Ties keep the earlier cluster.

    Args:
        sample: Sample to place
        clusters: Candidate clusters (non-empty)
        spherical: Use cosine similarity instead of distance

    Returns:
        Position of the nearest cluster in ``clusters``
    """
    if not clusters:
        raise InvalidParameterError("No clusters to choose from")
    index = 0
    if spherical:
        best = -math.inf
        for j, c in enumerate(clusters):
            sim = sample.cosine_similarity(c.centroid)
            if sim > best:
                best = sim
                index = j
    else:
        best = math.inf
        for j, c in enumerate(clusters):
            dist = sample.distance_from(c.centroid)
            if dist < best:
                best = dist
                index = j
    return index


def assign_samples(corpus: Corpus,
                   clusters: List[Cluster],
                   spherical: bool = False) -> List[Cluster]:
    """
    Build a new generation of clusters and assign every sample to it.

    Args:
        corpus: Samples to assign
        clusters: Current generation (left untouched)
        spherical: Geometry flag

    Returns:
        New clusters with the same ids and centroids and fresh membership
    """
    new_clusters = [c.clone_centroid() for c in clusters]
    for i in range(corpus.size()):
        sample = corpus.sample_at(i)
        new_clusters[nearest_cluster(sample, clusters, spherical)].add(sample)
    return new_clusters


def update_centroids(clusters: List[Cluster],
                     spherical: bool = False,
                     empty_cluster_policy: str = EMPTY_CLUSTER_KEEP,
                     iteration: int = 0) -> int:
    """
    Recompute every centroid as the mean of its members.

    Args:
        clusters: Clusters to update in place
        spherical: Renormalize centroids to unit norm
        empty_cluster_policy: 'keep' retains the previous centroid of an
            empty cluster, 'fail' raises
        iteration: Current iteration, for error reporting

    Returns:
        Number of empty clusters encountered

    Raises:
        EmptyClusterError: If a cluster is empty under the 'fail' policy
    """
    n_empty = 0
    for cluster in clusters:
        if not cluster.members:
            if empty_cluster_policy == EMPTY_CLUSTER_FAIL:
                raise EmptyClusterError(cluster.id, iteration)
            n_empty += 1
            logger.warning(f"Cluster {cluster.id} is empty at iteration {iteration}, keeping centroid")
            cluster.detach_centroid()
            continue
        cluster.recalc_centroid(spherical)
    return n_empty


def memberships_equal(previous: List[Cluster], current: List[Cluster]) -> bool:
    """Whether both generations hold identical membership, cluster by cluster."""
    if len(previous) != len(current):
        return False
    return all(
        p.id == c.id and p.same_members(c)
        for p, c in zip(previous, current)
    )


def lloyd_iterations(corpus: Corpus,
                     clusters: List[Cluster],
                     spherical: bool = False,
                     max_iter: int = DEFAULT_MAX_ITER,
                     empty_cluster_policy: str = EMPTY_CLUSTER_KEEP) -> ClusteringResult:
    """
    Refine seeded clusters until membership stops changing.

    Each iteration assigns every sample to a new generation of clusters,
    recomputes the centroids of that generation and compares its membership
    with the previous generation. The freshly seeded generation has no
    members, so at least two iterations run unless the cap is hit.

    Args:
        corpus: Samples to cluster (unit norm in spherical mode)
        clusters: Seeded clusters
        spherical: Geometry flag
        max_iter: Maximum number of assignment passes
        empty_cluster_policy: See ``update_centroids``

    Returns:
        ClusteringResult; ``converged`` is False when max_iter was reached
    """
    if not clusters:
        raise InvalidParameterError("Cannot iterate without seeded clusters")
    validate_max_iter(max_iter)
    if empty_cluster_policy not in SUPPORTED_EMPTY_CLUSTER_POLICIES:
        raise InvalidParameterError(
            f"Unknown empty cluster policy: {empty_cluster_policy}. "
            f"Available: {SUPPORTED_EMPTY_CLUSTER_POLICIES}"
        )

    for iteration in range(1, max_iter + 1):
        new_clusters = assign_samples(corpus, clusters, spherical)
        update_centroids(new_clusters, spherical, empty_cluster_policy, iteration)

        logger.debug(f"Iteration {iteration}: sizes={[len(c) for c in new_clusters]}")

        if memberships_equal(clusters, new_clusters):
            logger.info(f"Converged after {iteration} iterations")
            return ClusteringResult(new_clusters, True, iteration, spherical)
        clusters = new_clusters

    message = f"Clustering did not converge within {max_iter} iterations"
    logger.warning(message)
    warnings.warn(message, ConvergenceWarning)
    return ClusteringResult(clusters, False, max_iter, spherical)


def normalize_corpus(corpus: Corpus) -> None:
    """
    Normalize every sample of a corpus to unit norm in place.

    Raises:
        DegenerateNormalizationError: If a sample is the zero vector
    """
    for i in range(corpus.size()):
        corpus.sample_at(i).normalize()


def kmeans_cluster(corpus: Corpus,
                   k: int,
                   rng: Optional[np.random.Generator] = None,
                   max_iter: int = DEFAULT_MAX_ITER,
                   empty_cluster_policy: str = EMPTY_CLUSTER_KEEP) -> ClusteringResult:
    """
    Cluster a corpus into k groups with k-means++ and Lloyd iteration.

    Args:
        corpus: Samples to cluster
        k: Number of clusters
        rng: Random source for seeding
        max_iter: Maximum number of iterations
        empty_cluster_policy: 'keep' or 'fail'

    Returns:
        Clustering result
    """
    validate_cluster_count(k, corpus.size())
    validate_max_iter(max_iter)
    clusters = kmeans_plus_plus(corpus, k, rng)
    return lloyd_iterations(corpus, clusters, False, max_iter, empty_cluster_policy)


def spherical_kmeans_cluster(corpus: Corpus,
                             k: int,
                             rng: Optional[np.random.Generator] = None,
                             max_iter: int = DEFAULT_MAX_ITER,
                             empty_cluster_policy: str = EMPTY_CLUSTER_KEEP) -> ClusteringResult:
    """
    Cluster a corpus into k groups with spherical k-means.

    Every corpus sample is normalized to unit norm in place before seeding.

    Args:
        corpus: Samples to cluster (mutated)
        k: Number of clusters
        rng: Random source for seeding
        max_iter: Maximum number of iterations
        empty_cluster_policy: 'keep' or 'fail'

    Returns:
        Clustering result
    """
    validate_cluster_count(k, corpus.size())
    validate_max_iter(max_iter)
    normalize_corpus(corpus)
    clusters = kmeans_plus_plus(corpus, k, rng)
    return lloyd_iterations(corpus, clusters, True, max_iter, empty_cluster_policy)


class KMeansClusterer(Clusterer):
    """K-Means clustering with k-means++ seeding."""

    spherical = False

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = DEFAULT_MAX_ITER,
                 empty_cluster_policy: str = EMPTY_CLUSTER_KEEP,
                 random_state: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize K-Means clusterer.

        Args:
            n_clusters: Number of clusters
            max_iter: Maximum iterations
            empty_cluster_policy: 'keep' or 'fail'
            random_state: Random seed, ignored when rng is given
            rng: Random source shared with the caller
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.empty_cluster_policy = empty_cluster_policy
        self.random_state = random_state
        self.rng = rng if rng is not None else np.random.default_rng(random_state)

        self.n_iter_: Optional[int] = None
        self.converged_: Optional[bool] = None
        self.n_empty_clusters_: Optional[int] = None

    def cluster(self,
                corpus: Corpus,
                **kwargs) -> ClusteringResult:
        """
        Perform clustering.

        Args:
            corpus: Samples to cluster
            **kwargs: Unused

        Returns:
            Clustering result
        """
        run = spherical_kmeans_cluster if self.spherical else kmeans_cluster
        logger.info(
            f"Clustering {corpus.size()} samples into {self.n_clusters} clusters "
            f"({'spherical' if self.spherical else 'euclidean'})"
        )
        result = run(
            corpus,
            self.n_clusters,
            rng=self.rng,
            max_iter=self.max_iter,
            empty_cluster_policy=self.empty_cluster_policy
        )

        self.n_iter_ = result.n_iter
        self.converged_ = result.converged
        self.n_empty_clusters_ = sum(1 for c in result.clusters if not c.members)
        return result

    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        return {
            'algorithm': 'spherical' if self.spherical else 'kmeans',
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'empty_cluster_policy': self.empty_cluster_policy,
            'random_state': self.random_state,
            'n_iter': self.n_iter_,
            'converged': self.converged_,
            'n_empty_clusters': self.n_empty_clusters_
        }


class SphericalKMeansClusterer(KMeansClusterer):
    """Spherical K-Means: cosine similarity over unit-norm samples and centroids."""

    spherical = True

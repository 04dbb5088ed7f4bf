"""k-means++ seeding."""

from typing import List, Optional

import numpy as np

from .base import Cluster
from ..core.corpus import Corpus
from ..exceptions import InvalidParameterError
from ..utils.logging import get_logger
from ..utils.validation import validate_cluster_count

logger = get_logger(__name__)


def kmeans_plus_plus(corpus: Corpus,
                     k: int,
                     rng: Optional[np.random.Generator] = None) -> List[Cluster]:
    """
    Choose k initial centroids with k-means++.

    The first centroid is drawn uniformly. Each further centroid is drawn
    among the samples not chosen yet with probability proportional to the
    squared distance to their nearest chosen centroid.

    Args:
        corpus: Samples to seed from
        k: Number of clusters (1 <= k <= corpus.size())
        rng: Random source (fresh default generator when None)

    Returns:
        k clusters with ids 1..k whose centroids are corpus samples and
        whose membership is empty

    Raises:
        InvalidParameterError: If the corpus is empty or k is out of range
    """
    n_samples = corpus.size()
    validate_cluster_count(k, n_samples)
    if rng is None:
        rng = np.random.default_rng()

    clusters: List[Cluster] = []
    chosen = set()
    # Squared distance of every sample to its nearest chosen centroid
    nearest = np.full(n_samples, np.inf)

    index = int(rng.integers(n_samples))
    for cluster_id in range(1, k + 1):
        if cluster_id > 1:
            index = _draw_candidate(corpus, chosen, nearest, clusters[-1], rng)

        clusters.append(Cluster(cluster_id, corpus.sample_at(index)))
        chosen.add(index)
        logger.debug(f"kmeans++: centroid {cluster_id} is sample index {index}")

    logger.debug(f"Initial centroids: {[c.centroid.id for c in clusters]}")
    return clusters


def _draw_candidate(corpus: Corpus,
                    chosen: set,
                    nearest: np.ndarray,
                    newest: Cluster,
                    rng: np.random.Generator) -> int:
    """Draw the next centroid index from the unchosen samples."""
    candidates = [i for i in range(corpus.size()) if i not in chosen]
    if not candidates:
        raise InvalidParameterError("No samples left to choose a centroid from")

    # Only the newest centroid can lower a cached nearest distance
    for i in candidates:
        d = corpus.sample_at(i).distance_from(newest.centroid)
        if d < nearest[i]:
            nearest[i] = d

    weights = nearest[candidates]
    cumulative = np.cumsum(weights)
    total = cumulative[-1]
    if total <= 0 or not np.isfinite(total):
        # Every remaining sample duplicates a centroid
        logger.warning("All remaining samples coincide with chosen centroids, drawing uniformly")
        return candidates[int(rng.integers(len(candidates)))]

    cumulative /= total
    draw = rng.random()
    # First candidate whose cumulative probability exceeds the draw
    pos = int(np.searchsorted(cumulative, draw, side='right'))
    return candidates[min(pos, len(candidates) - 1)]

"""Shared constants for the clustering engine."""

# Clustering algorithms
ALGORITHM_KMEANS = 'kmeans'
ALGORITHM_SPHERICAL = 'spherical'

SUPPORTED_ALGORITHMS = [
    ALGORITHM_KMEANS,
    ALGORITHM_SPHERICAL
]

# Empty cluster policies
EMPTY_CLUSTER_KEEP = 'keep'   # Retain previous centroid
EMPTY_CLUSTER_FAIL = 'fail'   # Raise EmptyClusterError

SUPPORTED_EMPTY_CLUSTER_POLICIES = [
    EMPTY_CLUSTER_KEEP,
    EMPTY_CLUSTER_FAIL
]

# Default parameters
DEFAULT_N_CLUSTERS = 100
DEFAULT_MAX_ITER = 300
DEFAULT_RANDOM_STATE = 42
DEFAULT_TOP_TERMS = 10

# Identity carried by centroids built from zero()
CENTROID_ID = -1

# Largest samples x features matrix densified for Calinski-Harabasz
# and Davies-Bouldin scores
MAX_DENSE_METRIC_CELLS = 10_000_000

# Absolute tolerance for float comparisons
FLOAT_TOLERANCE = 1e-9

# Logging levels
LOG_DEBUG = 'DEBUG'
LOG_INFO = 'INFO'
LOG_WARNING = 'WARNING'
LOG_ERROR = 'ERROR'

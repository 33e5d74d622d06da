"""
Central configuration for the feature selection analysis library.
"""

# --- Entropy Parameters ---

# Logarithm base for entropy and PMI. 2.0 reports scores in bits.
ENTROPY_LOG_BASE: float = 2.0

# Tolerance for deciding that a distribution "already sums to one" when
# entropy() runs in auto mode. Within this tolerance the values are used as
# probabilities; otherwise they are normalized as counts.
PROBABILITY_SUM_TOLERANCE: float = 1e-9

# --- Information Gain Parameters ---

# Which classes enter the feature-absent distribution H(C | Xw = 0).
# Options:
#   "cooccurring": only classes that co-occur with the feature (reference behaviour)
#   "all": every class in the corpus (IG equals I(Xw; C))
IG_OFF_CLASS_SCOPE: str = "cooccurring"

# Backend used for information gain.
# Options:
#   "native": closed-form entropy differences
#   "sklearn": sklearn.metrics.mutual_info_score on a 2xK contingency table
#              (requires IG_OFF_CLASS_SCOPE == "all" and integral counts)
IG_BACKEND: str = "native"

# --- Feature Selection Parameters ---

# Quantile threshold for score filtering (keep features above this quantile)
FEATURE_FILTER_QUANTILE: float = 0.5

# Minimum fraction of features to retain
FEATURE_FILTER_MIN_FRACTION: float = 0.1

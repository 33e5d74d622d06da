"""Feature/class association statistics.

This subpackage provides:
- Marginal and joint count aggregation for frequency tables
- Pairwise Mutual Information (PMI) per feature and class
- Information Gain (IG) per feature, with NumPy and scikit-learn backends
"""

from .aggregation import MarginalCounts, aggregate_counts
from .information_gain import IG_BACKENDS, OFF_CLASS_SCOPES, information_gain
from .pmi import pairwise_mutual_information

__all__ = [
    "MarginalCounts",
    "aggregate_counts",
    "IG_BACKENDS",
    "OFF_CLASS_SCOPES",
    "information_gain",
    "pairwise_mutual_information",
]

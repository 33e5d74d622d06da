"""Information-theoretic metrics and utilities.

This package provides various information-theoretic calculations including:
- Shannon entropy for count and probability distributions
- Pairwise Mutual Information and Information Gain for feature/class tables
"""

from .entropy import (
    entropy,
    entropy_from_counts,
    entropy_from_probabilities,
)
from .feature_class import (
    MarginalCounts,
    aggregate_counts,
    information_gain,
    pairwise_mutual_information,
)

__all__ = [
    # Entropy functions
    "entropy",
    "entropy_from_counts",
    "entropy_from_probabilities",
    # Feature/class functions
    "MarginalCounts",
    "aggregate_counts",
    "information_gain",
    "pairwise_mutual_information",
]

"""Feature selection statistics for text classification.

Computes Pairwise Mutual Information and Information Gain from a
``{feature: {class: count}}`` co-occurrence table.
"""

from feature_selection_analysis.core_utils.data_utils import InvalidInputError
from feature_selection_analysis.information_metrics import (
    MarginalCounts,
    aggregate_counts,
    entropy,
    entropy_from_counts,
    entropy_from_probabilities,
    information_gain,
    pairwise_mutual_information,
)
from feature_selection_analysis.selection import (
    max_pmi_per_feature,
    rank_features,
    select_informative_features,
)
from feature_selection_analysis.selector import FeatureSelector

# Short names
calc_entropy = entropy
calc_pmi = pmi = pairwise_mutual_information
calc_ig = ig = information_gain

__all__ = [
    "FeatureSelector",
    "InvalidInputError",
    "MarginalCounts",
    "aggregate_counts",
    "calc_entropy",
    "calc_ig",
    "calc_pmi",
    "entropy",
    "entropy_from_counts",
    "entropy_from_probabilities",
    "ig",
    "information_gain",
    "max_pmi_per_feature",
    "pairwise_mutual_information",
    "pmi",
    "rank_features",
    "select_informative_features",
]

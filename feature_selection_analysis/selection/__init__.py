"""Feature ranking and selection from per-feature scores."""

from .feature_ranking import (
    max_pmi_per_feature,
    rank_features,
    select_informative_features,
)

__all__ = [
    "max_pmi_per_feature",
    "rank_features",
    "select_informative_features",
]

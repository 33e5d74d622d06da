"""Pairwise Mutual Information between features and classes.

PMI(w, c) = log( P(Xw = 1, C = c) / (P(Xw = 1) * P(C = c)) )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np

from feature_selection_analysis import config

from .aggregation import aggregate_counts


def pairwise_mutual_information(
    features: Mapping[str, Mapping[str, Any]], base: float | None = None
) -> dict[str, dict[str, float]]:
    """
    PMI score for every observed (feature, class) pair.

    Parameters
    ----------
    features
        ``{feature: {class: count}}`` frequency table.
    base
        Logarithm base. Defaults to ``config.ENTROPY_LOG_BASE``.

    Returns
    -------
    dict[str, dict[str, float]]
        ``{feature: {class: pmi}}``. Only pairs with a nonzero joint count
        are scored; features without any such pair are absent.

    Raises
    ------
    InvalidInputError
        If the table contains invalid keys or counts.
    """
    log_base = config.ENTROPY_LOG_BASE if base is None else float(base)
    counts = aggregate_counts(features)
    if counts.grand_total <= 0.0:
        return {}

    n = counts.grand_total
    observed = counts.observed
    feature_index = observed.index.get_level_values("feature")
    class_index = observed.index.get_level_values("class")

    p_joint = observed.to_numpy() / n
    p_feature = counts.feature_totals.reindex(feature_index).to_numpy() / n
    p_class = counts.class_totals.reindex(class_index).to_numpy() / n
    # Marginals are positive wherever the joint count is.
    scores = np.log(p_joint / (p_feature * p_class)) / np.log(log_base)

    result: dict[str, dict[str, float]] = {}
    for feature, cls, score in zip(feature_index, class_index, scores):
        result.setdefault(feature, {})[cls] = float(score)
    return result


__all__ = ["pairwise_mutual_information"]

"""Scikit-learn based Information Gain via mutual information of a contingency table."""

from __future__ import annotations

import logging

import numpy as np
from sklearn.metrics import mutual_info_score

from feature_selection_analysis.core_utils.data_utils import require_integral_counts

from .aggregation import MarginalCounts

logger = logging.getLogger(__name__)


def _information_gain_sklearn(counts: MarginalCounts, base: float) -> dict[str, float]:
    """
    Calculate Information Gain using scikit-learn's mutual_info_score.

    For each feature w the 2xK contingency table has rows
    [count(w, c)] and [class_total(c) - count(w, c)]. Its mutual information
    equals IG(w) when the absent distribution spans every class.

    Parameters
    ----------
    counts
        Aggregated joint and marginal counts. Counts must be whole numbers,
        since sklearn casts contingency tables to integers.
    base
        Logarithm base for the returned scores (sklearn reports nats).

    Returns
    -------
    dict[str, float]
        ``{feature: ig}``. Features with a zero total are skipped.
    """
    if counts.grand_total <= 0.0:
        return {}

    require_integral_counts(counts.pairs)

    class_index = counts.class_totals.index
    class_totals = np.rint(counts.class_totals.to_numpy()).astype(np.int64)
    log_base = np.log(base)

    result: dict[str, float] = {}
    for feature, feature_total, row in counts.iter_feature_rows():
        if feature_total <= 0.0:
            logger.warning("Skipping feature %r with zero total count.", feature)
            continue
        present = np.zeros_like(class_totals)
        present[class_index.get_indexer(row.index)] = np.rint(row.to_numpy()).astype(np.int64)
        contingency = np.vstack([present, class_totals - present])
        mi_nats = mutual_info_score(None, None, contingency=contingency)
        result[feature] = float(mi_nats / log_base)
    return result


__all__ = ["_information_gain_sklearn"]

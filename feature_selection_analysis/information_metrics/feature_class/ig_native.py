"""Closed-form Information Gain from marginal counts."""

from __future__ import annotations

import logging

import numpy as np

from feature_selection_analysis.information_metrics.entropy import entropy_from_counts

from .aggregation import MarginalCounts

logger = logging.getLogger(__name__)


def _information_gain_native(
    counts: MarginalCounts, off_class_scope: str, base: float
) -> dict[str, float]:
    """
    Information Gain per feature from entropy differences.

    IG(w) = H(C) - ( P(Xw=1) H(C|Xw=1) + P(Xw=0) H(C|Xw=0) )

    Parameters
    ----------
    counts
        Aggregated joint and marginal counts.
    off_class_scope
        ``"cooccurring"`` restricts H(C|Xw=0) to classes seen with the feature;
        ``"all"`` uses every class.
    base
        Logarithm base.

    Returns
    -------
    dict[str, float]
        ``{feature: ig}``. Features with a zero total are skipped.

    Notes
    -----
    When a feature accounts for every count, P(Xw=0) = 0 and the absent term
    is defined as 0. An all-zero absent distribution also has entropy 0.
    """
    n = counts.grand_total
    if n <= 0.0:
        return {}

    class_totals = counts.class_totals
    class_entropy = entropy_from_counts(class_totals.to_numpy(), base=base)

    result: dict[str, float] = {}
    for feature, feature_total, row in counts.iter_feature_rows():
        if feature_total <= 0.0:
            logger.warning("Skipping feature %r with zero total count.", feature)
            continue

        # H(C | Xw = 1)
        on_entropy = entropy_from_counts(row.to_numpy(), base=base)

        # H(C | Xw = 0)
        off_total = n - feature_total
        if off_total > 0.0:
            if off_class_scope == "cooccurring":
                off_counts = class_totals.reindex(row.index).to_numpy() - row.to_numpy()
            else:
                off_counts = class_totals.sub(row, fill_value=0.0).to_numpy()
            off_entropy = entropy_from_counts(np.clip(off_counts, 0.0, None), base=base)
        else:
            off_entropy = 0.0

        p_on = feature_total / n
        p_off = off_total / n
        result[feature] = class_entropy - (p_on * on_entropy + p_off * off_entropy)

    return result


__all__ = ["_information_gain_native"]

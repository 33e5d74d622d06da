"""Score-based feature ranking and selection.

Turns per-feature scores (Information Gain, or PMI reduced per feature) into
a ranked list and filters out low-information features.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from feature_selection_analysis import config

logger = logging.getLogger(__name__)


def rank_features(scores: Mapping[str, float]) -> pd.Series:
    """Sort feature scores in descending order.

    Ties keep their input order.

    Parameters
    ----------
    scores : Mapping[str, float]
        ``{feature: score}``.

    Returns
    -------
    pd.Series
        Scores indexed by feature, highest first.
    """
    series = pd.Series(dict(scores), dtype=float)
    series.index.name = "feature"
    return series.sort_values(ascending=False, kind="stable")


def max_pmi_per_feature(pmi_scores: Mapping[str, Mapping[str, float]]) -> dict[str, float]:
    """Reduce ``{feature: {class: pmi}}`` to each feature's strongest class association."""
    return {
        feature: max(by_class.values())
        for feature, by_class in pmi_scores.items()
        if by_class
    }


def select_informative_features(
    scores: Mapping[str, float],
    quantile_threshold: Optional[float] = None,
    min_fraction: Optional[float] = None,
    top_k: Optional[int] = None,
) -> Tuple[List[str], pd.Series]:
    """Select features with high scores.

    Uses two criteria:
    1. Keep features with score > quantile(score) of positive-score features
    2. Always keep at least min_fraction of features

    Parameters
    ----------
    scores : Mapping[str, float]
        ``{feature: score}``, e.g. the output of ``information_gain``.
    quantile_threshold : float, optional
        Keep features above this quantile of positive scores. Defaults to
        ``config.FEATURE_FILTER_QUANTILE``.
    min_fraction : float, optional
        Minimum fraction of features to keep. Defaults to
        ``config.FEATURE_FILTER_MIN_FRACTION``.
    top_k : int, optional
        If given, keep exactly the ``top_k`` best features instead.

    Returns
    -------
    Tuple[List[str], pd.Series]
        (selected_features, ranked_scores)
        - selected_features: names in descending score order
        - ranked_scores: all scores, highest first

    Raises
    ------
    ValueError
        If a threshold is outside its valid range.
    """
    quantile = config.FEATURE_FILTER_QUANTILE if quantile_threshold is None else quantile_threshold
    fraction = config.FEATURE_FILTER_MIN_FRACTION if min_fraction is None else min_fraction

    if not 0.0 <= quantile <= 1.0:
        raise ValueError(f"quantile_threshold must be in [0, 1], got {quantile}.")
    if not 0.0 <= fraction <= 1.0:
        raise ValueError(f"min_fraction must be in [0, 1], got {fraction}.")
    if top_k is not None and top_k < 0:
        raise ValueError(f"top_k must be non-negative, got {top_k}.")

    ranked = rank_features(scores)
    d = len(ranked)
    if d == 0:
        return [], ranked

    if top_k is not None:
        selected = list(ranked.index[:top_k])
        logger.info("Selected top %d of %d features.", len(selected), d)
        return selected, ranked

    values = ranked.to_numpy()

    # Compute threshold from positive-score features
    positive = values[values > 1e-10]
    if len(positive) > 0:
        threshold = float(np.quantile(positive, quantile))
    else:
        threshold = 0.0

    mask = values > threshold
    n_selected = int(mask.sum())

    # Ensure minimum number of features; ranked is sorted so the head is the top
    min_features = max(1, int(fraction * d))
    if n_selected < min_features:
        n_selected = min_features

    selected = list(ranked.index[:n_selected])
    logger.info(
        "Selected %d of %d features (threshold %.6g).", len(selected), d, threshold
    )
    return selected, ranked


__all__ = [
    "max_pmi_per_feature",
    "rank_features",
    "select_informative_features",
]

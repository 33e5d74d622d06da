"""Information Gain of features with respect to class labels.

IG(w) = H(C) - ( P(Xw = 1) H(C|Xw = 1) + P(Xw = 0) H(C|Xw = 0) )

Two backends are available: a closed-form NumPy implementation and a
scikit-learn implementation based on contingency-table mutual information.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from feature_selection_analysis import config

from .aggregation import aggregate_counts
from .ig_native import _information_gain_native
from .ig_sklearn import _information_gain_sklearn

logger = logging.getLogger(__name__)

OFF_CLASS_SCOPES = ("cooccurring", "all")
IG_BACKENDS = ("native", "sklearn")


def information_gain(
    features: Mapping[str, Mapping[str, Any]],
    off_class_scope: str | None = None,
    backend: str | None = None,
    base: float | None = None,
) -> dict[str, float]:
    """
    Primary Information Gain dispatcher exposed to callers.

    Parameters
    ----------
    features
        ``{feature: {class: count}}`` frequency table.
    off_class_scope
        Classes used for H(C | Xw = 0). ``"cooccurring"`` only uses classes
        that appear with the feature, ``"all"`` uses every class. Defaults to
        ``config.IG_OFF_CLASS_SCOPE``.
    backend
        ``"native"`` or ``"sklearn"``. Defaults to ``config.IG_BACKEND``.
        The sklearn backend requires ``off_class_scope="all"``.
    base
        Logarithm base. Defaults to ``config.ENTROPY_LOG_BASE``.

    Returns
    -------
    dict[str, float]
        ``{feature: ig}``. Features whose total count is zero are skipped.

    Raises
    ------
    ValueError
        If the scope or backend is unknown, or the combination is unsupported.
    InvalidInputError
        If the table contains invalid keys or counts.
    """
    scope = config.IG_OFF_CLASS_SCOPE if off_class_scope is None else off_class_scope
    method = config.IG_BACKEND if backend is None else backend
    log_base = config.ENTROPY_LOG_BASE if base is None else float(base)

    if scope not in OFF_CLASS_SCOPES:
        raise ValueError(f"Unknown off-class scope: {scope!r}. Expected one of {OFF_CLASS_SCOPES}.")
    if method not in IG_BACKENDS:
        raise ValueError(f"Unknown information gain backend: {method!r}. Expected one of {IG_BACKENDS}.")
    if method == "sklearn" and scope != "all":
        raise ValueError("The sklearn backend only supports off_class_scope='all'.")

    counts = aggregate_counts(features)
    logger.debug("Computing information gain (backend=%s, scope=%s).", method, scope)

    if method == "sklearn":
        return _information_gain_sklearn(counts, log_base)
    return _information_gain_native(counts, scope, log_base)


__all__ = ["IG_BACKENDS", "OFF_CLASS_SCOPES", "information_gain"]

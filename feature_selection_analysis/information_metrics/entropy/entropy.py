"""Shannon entropy of count and probability distributions.

Zero entries contribute nothing, following the limit p * log(p) -> 0 as p -> 0
(``scipy.special.entr`` defines ``entr(0) = 0``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np
from scipy.special import entr

from feature_selection_analysis import config
from feature_selection_analysis.core_utils.data_utils import (
    InvalidInputError,
    validate_distribution,
)

ENTROPY_MODES = ("auto", "counts", "probabilities")


def _resolve_base(base: float | None) -> float:
    return config.ENTROPY_LOG_BASE if base is None else float(base)


def _entropy_of_probabilities(p: np.ndarray, base: float) -> float:
    if p.size == 0:
        return 0.0
    return float(np.sum(entr(p)) / np.log(base))


def entropy_from_probabilities(probabilities: Any, base: float | None = None) -> float:
    """
    Entropy of a distribution that is already normalized.

    The values are used as given; no renormalization is applied.

    Parameters
    ----------
    probabilities
        Non-negative probabilities (sequence, array, Series or mapping).
    base
        Logarithm base. Defaults to ``config.ENTROPY_LOG_BASE``.

    Returns
    -------
    float
        H = -sum_i p_i * log_b(p_i). 0.0 for an empty distribution.

    Raises
    ------
    InvalidInputError
        If an entry is invalid, or if the values sum to more than 1 beyond
        ``config.PROBABILITY_SUM_TOLERANCE``.
    """
    p = validate_distribution(probabilities)
    total = float(p.sum())
    if total > 1.0 + config.PROBABILITY_SUM_TOLERANCE:
        raise InvalidInputError(
            f"Probabilities must sum to at most 1; got sum {total:.6g}."
        )
    return _entropy_of_probabilities(p, _resolve_base(base))


def entropy_from_counts(counts: Any, base: float | None = None) -> float:
    """
    Entropy of a distribution given as raw counts.

    Counts are divided by their sum before the entropy is taken, so the
    result is invariant to scaling. An empty distribution, or one that sums
    to zero, has entropy 0.0.
    """
    c = validate_distribution(counts)
    total = float(c.sum())
    if total <= 0.0:
        return 0.0
    return _entropy_of_probabilities(c / total, _resolve_base(base))


def entropy(distribution: Any, mode: str = "auto", base: float | None = None) -> float:
    """
    Shannon entropy of a count or probability distribution.

    Parameters
    ----------
    distribution
        Sequence, array, Series or mapping of non-negative numbers.
    mode
        ``"counts"`` normalizes by the sum, ``"probabilities"`` uses the values
        directly. ``"auto"`` treats mappings as counts, and treats any other
        input as probabilities when it sums to 1 within
        ``config.PROBABILITY_SUM_TOLERANCE`` and as counts otherwise.
    base
        Logarithm base. Defaults to ``config.ENTROPY_LOG_BASE`` (bits).

    Returns
    -------
    float
        Finite, non-negative entropy.

    Raises
    ------
    ValueError
        If ``mode`` is unknown.
    InvalidInputError
        If an entry is negative, non-finite or non-numeric.
    """
    if mode not in ENTROPY_MODES:
        raise ValueError(f"Unknown entropy mode: {mode!r}. Expected one of {ENTROPY_MODES}.")

    if mode == "counts":
        return entropy_from_counts(distribution, base=base)
    if mode == "probabilities":
        return entropy_from_probabilities(distribution, base=base)

    values = validate_distribution(distribution)
    if isinstance(distribution, Mapping):
        return entropy_from_counts(values, base=base)
    if abs(float(values.sum()) - 1.0) <= config.PROBABILITY_SUM_TOLERANCE:
        return entropy_from_probabilities(values, base=base)
    return entropy_from_counts(values, base=base)


__all__ = [
    "ENTROPY_MODES",
    "entropy",
    "entropy_from_counts",
    "entropy_from_probabilities",
]

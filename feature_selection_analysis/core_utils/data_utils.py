from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when counts or distributions contain values that cannot be scored."""


def _preview(items: list[Any]) -> str:
    return ", ".join(map(repr, items[:5]))


def _is_valid_count(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    value = float(value)
    return math.isfinite(value) and value >= 0.0


def validate_distribution(distribution: Any) -> np.ndarray:
    """Convert a distribution to a 1-D float64 array of non-negative values.

    Parameters
    ----------
    distribution
        Sequence, array, Series or mapping of counts or probabilities.
        For mappings only the values are used.

    Returns
    -------
    np.ndarray
        Shape (n,), float64.

    Raises
    ------
    InvalidInputError
        If the input is a scalar, a string or a multi-dimensional array, or if
        any entry is negative, non-finite or not a real number.
    """
    if isinstance(distribution, Mapping):
        values = list(distribution.values())
    elif isinstance(distribution, (pd.Series, np.ndarray)):
        array = np.asarray(distribution)
        if array.ndim != 1:
            raise InvalidInputError(
                f"Distribution must be one-dimensional, got shape {array.shape}."
            )
        values = list(array)
    elif isinstance(distribution, (str, bytes)) or not isinstance(distribution, Iterable):
        raise InvalidInputError(
            f"Distribution must be a sequence or mapping of numbers, got {type(distribution).__name__}."
        )
    else:
        values = list(distribution)

    invalid = [v for v in values if not _is_valid_count(v)]
    if invalid:
        raise InvalidInputError(
            f"Distribution entries must be finite non-negative numbers; got {_preview(invalid)}."
        )

    return np.asarray(values, dtype=np.float64)


def frequency_table_to_pairs(features: Mapping[str, Mapping[str, Any]]) -> pd.Series:
    """Validate a feature -> class -> count table and flatten it to long form.

    Only the pairs present in the table are stored, so memory grows with the
    number of (feature, class) entries rather than features x classes.
    Features and classes keep their first-seen order. Explicit zero counts
    are kept; features with an empty class mapping contribute no pairs.

    Parameters
    ----------
    features
        ``{feature: {class: count}}``.

    Returns
    -------
    pd.Series
        float64 counts indexed by a ``(feature, class)`` MultiIndex.

    Raises
    ------
    InvalidInputError
        If the table is not a mapping of mappings keyed by strings, or if any
        count is negative, non-finite or not a real number.
    """
    if not isinstance(features, Mapping):
        raise InvalidInputError(
            f"Frequency table must be a mapping, got {type(features).__name__}."
        )

    bad_keys: list[Any] = []
    bad_rows: list[Any] = []
    bad_counts: list[tuple[Any, Any, Any]] = []
    for feature, row in features.items():
        if not isinstance(feature, str):
            bad_keys.append(feature)
        if not isinstance(row, Mapping):
            bad_rows.append(feature)
            continue
        for cls, count in row.items():
            if not isinstance(cls, str):
                bad_keys.append(cls)
            if not _is_valid_count(count):
                bad_counts.append((feature, cls, count))

    if bad_keys:
        raise InvalidInputError(
            f"Feature and class identifiers must be strings; got {_preview(bad_keys)}."
        )
    if bad_rows:
        raise InvalidInputError(
            f"Class counts must be mappings for features: {_preview(bad_rows)}."
        )
    if bad_counts:
        raise InvalidInputError(
            f"Counts must be finite non-negative numbers; got {_preview(bad_counts)}."
        )

    feature_col: list[str] = []
    class_col: list[str] = []
    values: list[float] = []
    for feature, row in features.items():
        for cls, count in row.items():
            feature_col.append(feature)
            class_col.append(cls)
            values.append(float(count))

    pairs = pd.Series(
        np.asarray(values, dtype=np.float64),
        index=pd.MultiIndex.from_arrays([feature_col, class_col], names=["feature", "class"]),
        name="count",
    )
    logger.debug("Flattened frequency table into %d (feature, class) pairs.", pairs.size)
    return pairs


def require_integral_counts(pairs: pd.Series) -> None:
    """Raise if any count in ``pairs`` has a fractional part.

    Raises
    ------
    InvalidInputError
        If a count is not a whole number.
    """
    values = pairs.to_numpy()
    fractional = ~np.isclose(values, np.round(values))
    if fractional.any():
        offending = [
            (*pairs.index[i], float(values[i])) for i in np.flatnonzero(fractional)
        ]
        raise InvalidInputError(
            f"Integral counts are required; got {_preview(offending)}."
        )

"""Marginal and joint count aggregation for feature/class frequency tables."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from feature_selection_analysis.core_utils.data_utils import frequency_table_to_pairs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarginalCounts:
    """Counts derived from a single pass over a frequency table.

    Attributes
    ----------
    pairs
        Joint counts in long form, indexed by ``(feature, class)``. Only the
        pairs present in the input table are stored.
    feature_totals
        Per-feature totals (sum over classes), including zero-total features.
    class_totals
        Per-class totals (sum over features).
    grand_total
        Sum of all counts.
    """

    pairs: pd.Series
    feature_totals: pd.Series
    class_totals: pd.Series
    grand_total: float

    @property
    def features(self) -> list[str]:
        return list(self.feature_totals.index)

    @property
    def classes(self) -> list[str]:
        return list(self.class_totals.index)

    @property
    def observed(self) -> pd.Series:
        """Pairs with a nonzero joint count."""
        return self.pairs[self.pairs.to_numpy() > 0.0]

    def iter_feature_rows(self) -> Iterator[tuple[str, float, pd.Series]]:
        """Yield ``(feature, total, counts)`` in feature order.

        ``counts`` holds the nonzero joint counts of the feature, indexed by
        class. It is empty for zero-total features.
        """
        observed = self.observed
        rows = {
            feature: group.droplevel("feature")
            for feature, group in observed.groupby(level="feature", sort=False)
        }
        empty = pd.Series(dtype=np.float64)
        for feature, total in self.feature_totals.items():
            yield feature, float(total), rows.get(feature, empty)


def aggregate_counts(features: Mapping[str, Mapping[str, Any]]) -> MarginalCounts:
    """
    Aggregate a ``{feature: {class: count}}`` table into marginal and joint counts.

    Work and memory are proportional to the number of (feature, class)
    entries in the table.

    Parameters
    ----------
    features
        Frequency table. Missing pairs count as 0.

    Returns
    -------
    MarginalCounts
        Long-form joint counts plus feature, class and grand totals.

    Raises
    ------
    InvalidInputError
        If the table contains invalid keys or counts.
    """
    pairs = frequency_table_to_pairs(features)
    feature_index = pd.Index(list(features), name="feature", dtype=object)

    if pairs.empty:
        feature_totals = pd.Series(0.0, index=feature_index, dtype=np.float64)
        class_totals = pd.Series(
            dtype=np.float64, index=pd.Index([], name="class", dtype=object)
        )
    else:
        feature_totals = (
            pairs.groupby(level="feature", sort=False).sum().reindex(feature_index, fill_value=0.0)
        )
        class_totals = pairs.groupby(level="class", sort=False).sum()
    grand_total = float(pairs.sum())

    logger.debug(
        "Aggregated %d pairs over %d features and %d classes (grand total %.6g).",
        pairs.size,
        feature_totals.size,
        class_totals.size,
        grand_total,
    )
    return MarginalCounts(
        pairs=pairs,
        feature_totals=feature_totals,
        class_totals=class_totals,
        grand_total=grand_total,
    )


__all__ = ["MarginalCounts", "aggregate_counts"]

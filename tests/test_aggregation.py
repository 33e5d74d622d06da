from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from feature_selection_analysis.core_utils.data_utils import frequency_table_to_pairs
from feature_selection_analysis.information_metrics.feature_class import (
    MarginalCounts,
    aggregate_counts,
    information_gain,
    pairwise_mutual_information,
)


def test_marginal_totals(two_feature_table):
    counts = aggregate_counts(two_feature_table)

    assert isinstance(counts, MarginalCounts)
    assert counts.grand_total == pytest.approx(8.0)
    assert counts.feature_totals.to_dict() == {"f1": 4.0, "f2": 4.0}
    assert counts.class_totals.to_dict() == {"A": 6.0, "B": 2.0}


def test_only_present_pairs_are_stored(two_feature_table):
    counts = aggregate_counts(two_feature_table)

    assert counts.pairs.to_dict() == {("f1", "A"): 2.0, ("f1", "B"): 2.0, ("f2", "A"): 4.0}
    assert ("f2", "B") not in counts.pairs.index


def test_order_follows_first_appearance():
    counts = aggregate_counts({"z": {"C": 1, "A": 1}, "a": {"B": 2, "A": 3}})

    assert counts.features == ["z", "a"]
    assert counts.classes == ["C", "A", "B"]


def test_feature_rows_exclude_explicit_zeros():
    counts = aggregate_counts({"f": {"A": 0, "B": 3}, "g": {"A": 1}, "ghost": {"A": 0}})
    rows = {feature: (total, row.to_dict()) for feature, total, row in counts.iter_feature_rows()}

    assert list(rows) == ["f", "g", "ghost"]
    assert rows["f"] == (3.0, {"B": 3.0})
    assert rows["g"] == (1.0, {"A": 1.0})
    assert rows["ghost"] == (0.0, {})
    assert ("f", "A") in counts.pairs.index
    assert ("f", "A") not in counts.observed.index


def test_insertion_order_does_not_change_totals(blog_table):
    forward = aggregate_counts(blog_table)
    reverse = aggregate_counts(dict(reversed(list(blog_table.items()))))

    assert forward.grand_total == reverse.grand_total
    assert forward.class_totals.sort_index().equals(reverse.class_totals.sort_index())
    assert forward.feature_totals.sort_index().equals(reverse.feature_totals.sort_index())


def test_empty_rows_and_empty_table():
    counts = aggregate_counts({"ghost": {}, "f": {"A": 2}})
    assert counts.features == ["ghost", "f"]
    assert counts.feature_totals["ghost"] == 0.0

    empty = aggregate_counts({})
    assert empty.grand_total == 0.0
    assert empty.features == []
    assert empty.classes == []
    assert list(empty.iter_feature_rows()) == []


def test_pairs_layout(two_feature_table):
    pairs = frequency_table_to_pairs(two_feature_table)

    assert isinstance(pairs.index, pd.MultiIndex)
    assert pairs.index.names == ["feature", "class"]
    assert pairs.dtype == np.dtype("float64")
    assert pairs.index.tolist() == [("f1", "A"), ("f1", "B"), ("f2", "A")]
    np.testing.assert_array_equal(pairs.to_numpy(), [2.0, 2.0, 4.0])


def test_float_counts_are_accepted():
    counts = aggregate_counts({"f": {"A": 0.5, "B": 1.5}})
    assert counts.grand_total == pytest.approx(2.0)


class TestSparseTables:
    N = 3000

    @pytest.fixture
    def diagonal_table(self):
        """Every feature co-occurs with its own class only."""
        return {f"w{i}": {f"c{i}": 1} for i in range(self.N)}

    def test_storage_grows_with_pairs_not_features_times_classes(self, diagonal_table):
        counts = aggregate_counts(diagonal_table)

        assert counts.pairs.size == self.N
        assert counts.feature_totals.size == self.N
        assert counts.class_totals.size == self.N

    def test_diagonal_scores(self, diagonal_table):
        pmi = pairwise_mutual_information(diagonal_table)
        ig = information_gain(diagonal_table)

        assert len(pmi) == self.N
        assert pmi["w7"] == {"c7": pytest.approx(math.log2(self.N))}
        # The feature fixes the class, so the gain is the whole class entropy.
        assert ig["w7"] == pytest.approx(math.log2(self.N))

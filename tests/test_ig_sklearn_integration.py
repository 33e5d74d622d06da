import numpy as np
import pytest

from feature_selection_analysis.core_utils.data_utils import InvalidInputError
from feature_selection_analysis.information_metrics.feature_class import (
    aggregate_counts,
    information_gain,
)
from feature_selection_analysis.information_metrics.feature_class.ig_native import (
    _information_gain_native,
)
from feature_selection_analysis.information_metrics.feature_class.ig_sklearn import (
    _information_gain_sklearn,
)


def _random_table(seed: int, n_features: int = 30, n_classes: int = 5) -> dict:
    rng = np.random.default_rng(seed)
    counts = rng.integers(0, 9, size=(n_features, n_classes))
    return {
        f"w{i}": {f"c{j}": int(v) for j, v in enumerate(row) if v}
        for i, row in enumerate(counts)
    }


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_sklearn_backend_matches_native_all_scope(seed):
    table = _random_table(seed)

    native = information_gain(table, off_class_scope="all", backend="native")
    via_sklearn = information_gain(table, off_class_scope="all", backend="sklearn")

    assert list(native) == list(via_sklearn)
    np.testing.assert_allclose(
        list(via_sklearn.values()), list(native.values()), rtol=1e-9, atol=1e-12
    )


def test_private_backends_agree_in_nats(blog_table):
    counts = aggregate_counts(blog_table)

    native = _information_gain_native(counts, "all", np.e)
    via_sklearn = _information_gain_sklearn(counts, np.e)

    for feature, value in native.items():
        assert via_sklearn[feature] == pytest.approx(value, abs=1e-12)


def test_sklearn_backend_requires_all_scope(two_feature_table):
    with pytest.raises(ValueError, match="off_class_scope='all'"):
        information_gain(two_feature_table, backend="sklearn")


def test_sklearn_backend_rejects_fractional_counts():
    with pytest.raises(InvalidInputError):
        information_gain(
            {"f": {"A": 1.5, "B": 1}, "g": {"A": 2}},
            off_class_scope="all",
            backend="sklearn",
        )


def test_sklearn_backend_accepts_whole_float_counts():
    ig = information_gain(
        {"f": {"A": 2.0, "B": 2.0}, "g": {"A": 4.0}},
        off_class_scope="all",
        backend="sklearn",
    )
    assert set(ig) == {"f", "g"}
    assert ig["f"] == pytest.approx(ig["g"])


def test_sklearn_backend_feature_in_every_count():
    ig = information_gain({"only": {"A": 3, "B": 1}}, off_class_scope="all", backend="sklearn")
    assert ig["only"] == pytest.approx(0.0, abs=1e-12)

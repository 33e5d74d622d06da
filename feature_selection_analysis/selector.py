from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from feature_selection_analysis import config
from feature_selection_analysis.information_metrics.entropy import entropy
from feature_selection_analysis.information_metrics.feature_class import (
    information_gain,
    pairwise_mutual_information,
)


class FeatureSelector:
    """Compute feature selection statistics with fixed per-instance defaults.

    This is a lightweight, stateless-after-init object. It holds the log base,
    the Information Gain off-class scope and the IG backend, and forwards to
    the module-level functions.

    Parameters
    ----------
    base
        Logarithm base. Defaults to ``config.ENTROPY_LOG_BASE``.
    off_class_scope
        ``"cooccurring"`` or ``"all"``. Defaults to ``config.IG_OFF_CLASS_SCOPE``.
    ig_backend
        ``"native"`` or ``"sklearn"``. Defaults to ``config.IG_BACKEND``.
    """

    def __init__(
        self,
        base: float | None = None,
        off_class_scope: str | None = None,
        ig_backend: str | None = None,
    ) -> None:
        self.base = config.ENTROPY_LOG_BASE if base is None else float(base)
        self.off_class_scope = (
            config.IG_OFF_CLASS_SCOPE if off_class_scope is None else off_class_scope
        )
        self.ig_backend = config.IG_BACKEND if ig_backend is None else ig_backend

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base={self.base!r}, "
            f"off_class_scope={self.off_class_scope!r}, ig_backend={self.ig_backend!r})"
        )

    def entropy(self, distribution: Any, mode: str = "auto") -> float:
        return entropy(distribution, mode=mode, base=self.base)

    def pairwise_mutual_information(
        self, features: Mapping[str, Mapping[str, Any]]
    ) -> dict[str, dict[str, float]]:
        return pairwise_mutual_information(features, base=self.base)

    def information_gain(self, features: Mapping[str, Mapping[str, Any]]) -> dict[str, float]:
        return information_gain(
            features,
            off_class_scope=self.off_class_scope,
            backend=self.ig_backend,
            base=self.base,
        )

    # Short names
    calc_entropy = entropy
    calc_pairwise_mutual_information = pairwise_mutual_information
    calc_pmi = pairwise_mutual_information
    calc_information_gain = information_gain
    calc_ig = information_gain

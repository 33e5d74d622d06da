"""Shannon entropy calculations.

This subpackage provides:
- Entropy of raw count distributions
- Entropy of already-normalized probability distributions
- An auto-detecting dispatcher compatible with both
"""

from .entropy import (
    ENTROPY_MODES,
    entropy,
    entropy_from_counts,
    entropy_from_probabilities,
)

__all__ = [
    "ENTROPY_MODES",
    "entropy",
    "entropy_from_counts",
    "entropy_from_probabilities",
]

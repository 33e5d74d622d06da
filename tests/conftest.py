import os
import sys

import pytest

# Ensure the project root is on sys.path so tests can import
# ``feature_selection_analysis`` without installing the package.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def two_feature_table():
    """Eight counts over classes A (6) and B (2)."""
    return {
        "f1": {"A": 2, "B": 2},
        "f2": {"A": 4},
    }


@pytest.fixture
def blog_table():
    """Blog-source features counted against reader gender."""
    return {
        "blog_A": {"Female": 30, "Male": 2},
        "blog_B": {"Female": 5, "Male": 20},
        "blog_C": {"Female": 6, "Male": 7},
        "blog_D": {"Male": 4},
        "blog_E": {"Female": 1, "Male": 1},
    }

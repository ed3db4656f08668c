"""Pytest configuration for repository-relative imports."""

import os
import sys
from decimal import Decimal

import numpy as np
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from platemath.config import make_context


def dec(*values):
    """Shorthand for a list of Decimals built from their string form."""
    return [Decimal(str(v)) for v in values]


@pytest.fixture()
def ctx():
    return make_context(34)


@pytest.fixture()
def rng():
    return np.random.default_rng(20240611)

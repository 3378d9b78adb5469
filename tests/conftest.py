"""Shared fixtures for termpipes tests."""

import numpy as np
import pytest


class ScriptedRng:
    """Stands in for numpy's Generator, replaying fixed integers() results."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high=None, size=None):
        self.calls.append((low, high, size))
        return self.values.pop(0)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng

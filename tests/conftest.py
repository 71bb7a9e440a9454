"""Shared fixtures for blas1 tests."""

import numpy as np
import pytest

from blas1 import level1
from blas1.core import get_registry, reset_registry


BACKENDS = ['reference', 'numpy']


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from user config and from backend switches in other tests."""
    monkeypatch.delenv('BLAS1_BACKEND', raising=False)
    monkeypatch.delenv('BLAS1_CONFIG', raising=False)
    monkeypatch.setattr(level1, '_backend', None)
    yield
    reset_registry()


@pytest.fixture(params=BACKENDS)
def backend(request):
    """Each registered backend in turn."""
    return get_registry().get(request.param)


@pytest.fixture
def rng():
    return np.random.default_rng(42)

import numpy as np
import pytest

from huekit import seed_default_rng


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


@pytest.fixture(autouse=True)
def _reset_default_rng():
    yield
    seed_default_rng(None)

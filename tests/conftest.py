import numpy as np
import pytest


@pytest.fixture(params=[True, False], ids=["numba", "numpy"])
def use_numba(request):
    return request.param


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)

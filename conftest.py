import numpy as np
import pytest


@pytest.fixture
def rng():
    # fixed seed so the property checks are reproducible
    return np.random.default_rng(42)

import numpy as np
import pytest

from backgen.geometry import Frame

@pytest.fixture
def rng(): return np.random.default_rng(0)

@pytest.fixture
def frame(): return Frame(0, 0, 120, 80)

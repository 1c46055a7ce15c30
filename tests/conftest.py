import matplotlib

matplotlib.use("Agg")

import pytest

from teacooling.model.container import Mug


@pytest.fixture
def mug():
    """The reference mug: 364 ml of water in a 282 g porcelain mug."""
    return Mug(height=0.095, radius=0.04, weight=0.282, volume=364.0)

import math

import pytest

from teacooling.model.container import Mug
from teacooling.model.materials import PORCELAIN, ThermalMaterial


class TestMug:

    def test_surface_areas(self, mug):
        assert mug.top_surface_area == pytest.approx(math.pi * 0.04 ** 2)
        assert mug.side_surface_area == pytest.approx(2 * math.pi * 0.04 * 0.095)
        assert mug.radiative_area == pytest.approx(mug.top_surface_area + mug.side_surface_area)

    def test_volume_in_litres(self, mug):
        assert mug.volume_litres == pytest.approx(0.364)

    def test_default_material_is_porcelain(self, mug):
        assert mug.material is PORCELAIN
        assert mug.material.specific_heat == 1085.0

    def test_immutable(self, mug):
        with pytest.raises(AttributeError):
            mug.radius = 0.05

    @pytest.mark.parametrize("field", ["height", "radius", "weight", "volume"])
    @pytest.mark.parametrize("value", [0.0, -1.0, float("nan")])
    def test_rejects_non_positive_dimensions(self, field, value):
        kwargs = dict(height=0.095, radius=0.04, weight=0.282, volume=364.0)
        kwargs[field] = value
        with pytest.raises(ValueError, match=field):
            Mug(**kwargs)


class TestThermalMaterial:

    def test_rejects_non_positive_specific_heat(self):
        with pytest.raises(ValueError):
            ThermalMaterial(name="Vacuum", specific_heat=0.0)

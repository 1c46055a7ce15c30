from teacooling.utils import KELVIN_OFFSET, celsius_to_kelvin


def test_celsius_to_kelvin_uses_rounded_offset():
    assert KELVIN_OFFSET == 273.0
    assert celsius_to_kelvin(25.0) == 298.0
    assert celsius_to_kelvin(-273.0) == 0.0

"""
Material Library
================
Specific heat capacities of the bodies that take part in a tea experiment.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThermalMaterial:
    """
    A body material characterised by a single, temperature independent
    specific heat capacity.
    """
    name: str
    specific_heat: float

    def __post_init__(self) -> None:
        if self.specific_heat <= 0:
            raise ValueError(f"Specific heat of '{self.name}' must be positive.")


WATER = ThermalMaterial(name="Water", specific_heat=4200.0)
# Milk is mostly water; the model does not distinguish the two
MILK = ThermalMaterial(name="Milk", specific_heat=4200.0)
PORCELAIN = ThermalMaterial(name="Porcelain", specific_heat=1085.0)

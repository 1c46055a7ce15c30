from __future__ import annotations

from dataclasses import dataclass
import math

from teacooling.model.materials import PORCELAIN, ThermalMaterial


@dataclass(frozen=True)
class Mug:
    """
    A cylindrical mug filled with liquid.

    Attributes:
        height: Height of the mug in meters.
        radius: Inner radius of the mug in meters.
        weight: Mass of the empty mug in kilograms.
        volume: Volume of the contained liquid in millilitres.
        material: Material of the mug wall.
    """
    height: float
    radius: float
    weight: float
    volume: float
    material: ThermalMaterial = PORCELAIN

    def __post_init__(self) -> None:
        for name in ("height", "radius", "weight", "volume"):
            value = getattr(self, name)
            # NaN fails this comparison as well
            if not value > 0:
                raise ValueError(f"Mug {name} must be positive, got {value}.")

    @property
    def top_surface_area(self) -> float:
        """Area of the open liquid surface in m²."""
        return math.pi * self.radius * self.radius

    @property
    def side_surface_area(self) -> float:
        """Area of the mug wall in m²."""
        return 2.0 * math.pi * self.radius * self.height

    @property
    def radiative_area(self) -> float:
        """Total area radiating heat to the room in m²."""
        return self.side_surface_area + self.top_surface_area

    @property
    def volume_litres(self) -> float:
        """Liquid volume in litres (equal to its mass in kg for water)."""
        return self.volume / 1000.0

KELVIN_OFFSET = 273.0  # rounded, the model does not use 273.15

def celsius_to_kelvin(celsius: float) -> float:
    """Convert Celsius to Kelvin."""
    return celsius + KELVIN_OFFSET

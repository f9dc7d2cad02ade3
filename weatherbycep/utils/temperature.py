def c_to_f(celsius: float) -> float:
    """Convert Celsius → Fahrenheit."""
    return celsius * 9 / 5 + 32


def c_to_k(celsius: float) -> float:
    """Convert Celsius → Kelvin."""
    return celsius + 273.15

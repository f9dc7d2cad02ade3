"""
weatherbycep package – a tiny HTTP service that turns a Brazilian CEP
into the current temperature in °C, °F and K.

Public entry points
-------------------
* `weatherbycep.create_app` – the Flask application factory
* `weatherbycep.main` – the command‑line driver (`python -m weatherbycep.main`)
* Service classes:
    - `CEPLookupService`
    - `WttrWeatherService`
* The `WeatherByCEP` pipeline tying both services together

    >>> from weatherbycep import create_app, is_valid_cep
"""

__all__ = [
    "VERSION",
    "create_app",
    "WeatherByCEP",
    # Services
    "CEPLookupService",
    "WttrWeatherService",
    # Utilities
    "format_cep",
    "is_valid_cep",
]

# Semantic version of the library
VERSION = "0.1.0"


from .services import CEPLookupService, WttrWeatherService  # noqa: F401
from .pipeline import WeatherByCEP  # noqa: F401
from .app import create_app  # noqa: F401
from .utils import format_cep, is_valid_cep  # noqa: F401

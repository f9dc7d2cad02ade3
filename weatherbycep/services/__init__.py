"""
services package – wrappers around external APIs.

Export the two service classes so callers can do:

    from weatherbycep.services import CEPLookupService, WttrWeatherService
"""

from .cep_lookup import CEPLookupService    # noqa: F401
from .wttr       import WttrWeatherService  # noqa: F401

__all__ = [
    "CEPLookupService",
    "WttrWeatherService",
]

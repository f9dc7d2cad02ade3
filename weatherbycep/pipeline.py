from __future__ import annotations

import logging
from typing import Optional

from .errors import CEPNotFoundError, InvalidCEPError
from .models import NotFound, PostalLocation, Temperature
from .services import CEPLookupService, WttrWeatherService
from .utils.cep import format_cep, is_valid_cep


class WeatherByCEP:
    """CEP → location → current temperature.

    Each step either returns its value or raises a ``WeatherByCEPError``;
    the first failure ends the run and is what the caller reports.
    """

    def __init__(
        self,
        cep_service: CEPLookupService,
        weather_service: WttrWeatherService,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.cep_service = cep_service
        self.weather_service = weather_service
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def __call__(self, raw_cep: str) -> Temperature:
        return self.run(raw_cep)[1]

    def run(self, raw_cep: str) -> tuple[PostalLocation, Temperature]:
        cep = self.validate(raw_cep)
        location = self.resolve_location(cep)
        return location, self.resolve_weather(location)

    # Steps --------------------------------------------------------------
    def validate(self, raw_cep: str) -> str:
        if not is_valid_cep(raw_cep):
            self._log.info("Rejected invalid CEP %r", raw_cep)
            raise InvalidCEPError(f"invalid cep {raw_cep!r}")
        return format_cep(raw_cep)

    def resolve_location(self, cep: str) -> PostalLocation:
        self._log.info("Resolving location for CEP %s", cep)
        result = self.cep_service.lookup(cep)
        if isinstance(result, NotFound):
            raise CEPNotFoundError(f"cep {result.cep} not found")
        return result.location

    def resolve_weather(self, location: PostalLocation) -> Temperature:
        self._log.info("Fetching current weather for %s/%s", location.city, location.state)
        return self.weather_service.current_temperature(location.city, location.state)


__all__ = ["WeatherByCEP"]

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorResult:
    """HTTP status plus the short message sent back to the client."""

    status_code: int
    message: str

    def to_dict(self) -> dict:
        return {"message": self.message}


class WeatherByCEPError(Exception):
    """Base error; subclasses fix the status code and client message."""

    status_code = 500
    message = "internal server error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail

    @property
    def result(self) -> ErrorResult:
        return ErrorResult(self.status_code, self.message)


class InvalidCEPError(WeatherByCEPError):
    status_code = 422
    message = "invalid zipcode"


class CEPNotFoundError(WeatherByCEPError):
    status_code = 404
    message = "can not find zipcode"


class UpstreamError(WeatherByCEPError):
    """Raised when an upstream API fails: transport, status, or payload."""


class WeatherUnavailableError(WeatherByCEPError):
    message = "weather data not available"


METHOD_NOT_ALLOWED = ErrorResult(405, "method not allowed")
ENDPOINT_NOT_FOUND = ErrorResult(404, "endpoint not found")
CEP_REQUIRED = ErrorResult(400, "cep parameter is required")
INTERNAL_ERROR = ErrorResult(500, "internal server error")


__all__ = [
    "ErrorResult",
    "WeatherByCEPError",
    "InvalidCEPError",
    "CEPNotFoundError",
    "UpstreamError",
    "WeatherUnavailableError",
    "METHOD_NOT_ALLOWED",
    "ENDPOINT_NOT_FOUND",
    "CEP_REQUIRED",
    "INTERNAL_ERROR",
]

from __future__ import annotations

import io
import time

import pytest
from requests_mock import Mocker
from urllib3.exceptions import ProtocolError

from weatherbycep import create_app
from weatherbycep.models import Found, PostalLocation, Temperature


def make_location(cep: str = "01310100", city: str = "São Paulo", state: str = "SP") -> PostalLocation:
    return PostalLocation(
        raw_cep=cep,
        cep=cep,
        formatted_cep=f"{cep[:5]}-{cep[5:]}",
        street="Avenida Paulista",
        complement="de 612 a 1510 - lado par",
        district="Bela Vista",
        city=city,
        state=state,
        ibge="3550308",
        gia="1004",
        ddd="11",
        siafi="7107",
    )


class FakeCEPService:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result if result is not None else Found(make_location())
        self.error = error
        self.calls: list[str] = []

    def lookup(self, raw_cep: str):
        self.calls.append(raw_cep)
        if self.error is not None:
            raise self.error
        return self.result


class FakeWeatherService:
    def __init__(self, celsius: float = 21.5, error: Exception | None = None) -> None:
        self.celsius = celsius
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def current_temperature(self, city: str, state: str) -> Temperature:
        self.calls.append((city, state))
        if self.error is not None:
            raise self.error
        return Temperature.from_celsius(self.celsius)


class DripBody(io.BytesIO):
    """Response body handing out one byte per read, pausing before each."""

    def __init__(self, payload: bytes, delay: float) -> None:
        super().__init__(payload)
        self.delay = delay

    def read(self, size=-1):
        if self.closed or size == 0:
            return b""
        time.sleep(self.delay)
        chunk = super().read(1)
        if not chunk:
            self.close()
        return chunk


class BrokenBody(io.BytesIO):
    """Response body whose connection drops on the first read."""

    def read(self, size=-1):
        raise ProtocolError("Connection broken: connection reset by peer")


def slow_json(delay: float, payload: dict):
    """requests-mock callback that holds back the response headers."""

    def callback(request, context):
        time.sleep(delay)
        return payload

    return callback


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def cep_service() -> FakeCEPService:
    return FakeCEPService()


@pytest.fixture
def weather_service() -> FakeWeatherService:
    return FakeWeatherService()


@pytest.fixture
def app(cep_service, weather_service):
    app = create_app({"TESTING": True}, cep_service=cep_service, weather_service=weather_service)
    return app


@pytest.fixture
def client(app):
    return app.test_client()

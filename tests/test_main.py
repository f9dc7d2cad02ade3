from __future__ import annotations

import pytest

from weatherbycep.errors import UpstreamError
from weatherbycep.main import colourize, main
from weatherbycep.models import NotFound
from weatherbycep.pipeline import WeatherByCEP

from .conftest import FakeCEPService, FakeWeatherService


def test_main_prints_location_and_temperatures(capsys):
    pipeline = WeatherByCEP(FakeCEPService(), FakeWeatherService(celsius=25.0))

    main(["01310-100"], pipeline=pipeline)

    out = capsys.readouterr().out
    assert "São Paulo/SP (01310-100)" in out
    assert "Avenida Paulista, Bela Vista" in out
    assert "25.0°C" in out
    assert "77.0°F" in out
    assert "298.15 K" in out


def test_main_prompts_when_no_argument(monkeypatch, capsys):
    cep_service = FakeCEPService()
    monkeypatch.setattr("builtins.input", lambda prompt: " 01310100 ")

    main([], pipeline=WeatherByCEP(cep_service, FakeWeatherService()))

    assert cep_service.calls == ["01310100"]


@pytest.mark.parametrize(
    "cep_service, cep, message",
    [
        (FakeCEPService(), "123", "invalid zipcode"),
        (FakeCEPService(result=NotFound("00000000")), "00000000", "can not find zipcode"),
        (FakeCEPService(error=UpstreamError()), "01310100", "internal server error"),
    ],
)
def test_main_exits_with_error_message(cep_service, cep, message):
    with pytest.raises(SystemExit) as excinfo:
        main([cep], pipeline=WeatherByCEP(cep_service, FakeWeatherService()))

    assert excinfo.value.code == message


def test_main_requires_a_cep(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "   ")

    with pytest.raises(SystemExit) as excinfo:
        main([], pipeline=WeatherByCEP(FakeCEPService(), FakeWeatherService()))

    assert excinfo.value.code == "cep parameter is required"


def test_colourize_keeps_one_decimal():
    assert "31.2°C" in colourize(31.24)
    assert "-2.0°C" in colourize(-2.0)

import pytest

from weatherbycep.models import Temperature
from weatherbycep.utils import c_to_f, c_to_k, format_cep, is_valid_cep


@pytest.mark.parametrize(
    "cep, expected",
    [
        ("01310100", True),
        ("01310-100", True),
        ("01310 100", True),
        ("12345678", True),
        ("123", False),
        ("1234567890", False),
        ("abcd1234", False),
        ("", False),
        ("123-456", False),
        ("12.345.678", False),
        ("０１３１０１００", False),  # full-width digits
        ("01310100\n", False),
    ],
)
def test_is_valid_cep(cep, expected):
    assert is_valid_cep(cep) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("01310-100", "01310100"),
        ("01310 100", "01310100"),
        ("01310100", "01310100"),
        ("123-45-678", "12345678"),
        ("12 34 56 78", "12345678"),
        ("12.345.678", "12.345.678"),
    ],
)
def test_format_cep_strips_separators(raw, expected):
    assert format_cep(raw) == expected


@pytest.mark.parametrize("raw", ["01310-100", " - 0 1-3 ", "abc", "", "12.345-678"])
def test_format_cep_is_idempotent(raw):
    assert format_cep(format_cep(raw)) == format_cep(raw)


@pytest.mark.parametrize("celsius", [-40.0, -17.5, 0.0, 21.0, 21.5, 36.6, 100.0])
def test_temperature_conversions_are_exact(celsius):
    temp = Temperature.from_celsius(celsius)

    assert temp.celsius == celsius
    assert temp.fahrenheit == celsius * 9 / 5 + 32
    assert temp.kelvin == celsius + 273.15
    assert temp.fahrenheit == c_to_f(celsius)
    assert temp.kelvin == c_to_k(celsius)


def test_temperature_known_points():
    assert c_to_f(100.0) == 212.0
    assert c_to_f(-40.0) == -40.0
    assert c_to_k(0.0) == 273.15


def test_temperature_to_dict_uses_wire_names():
    assert Temperature.from_celsius(10.0).to_dict() == {
        "temp_C": 10.0,
        "temp_F": 50.0,
        "temp_K": 283.15,
    }

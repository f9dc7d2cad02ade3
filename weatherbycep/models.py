from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .utils.temperature import c_to_f, c_to_k


@dataclass(frozen=True)
class PostalLocation:
    """Address data resolved for a CEP.

    ``cep`` is the normalized 8-digit code used for the lookup,
    ``formatted_cep`` is the code as the lookup service printed it
    (usually ``NNNNN-NNN``). ``state`` is the two-letter UF.
    """

    raw_cep: str
    cep: str
    formatted_cep: str
    street: str
    complement: str
    district: str
    city: str
    state: str
    ibge: str
    gia: str
    ddd: str
    siafi: str

    @classmethod
    def from_viacep(cls, raw_cep: str, cep: str, payload: dict) -> "PostalLocation":
        def field(name: str) -> str:
            value = payload.get(name)
            return "" if value is None else str(value)

        return cls(
            raw_cep=raw_cep,
            cep=cep,
            formatted_cep=field("cep"),
            street=field("logradouro"),
            complement=field("complemento"),
            district=field("bairro"),
            city=field("localidade"),
            state=field("uf"),
            ibge=field("ibge"),
            gia=field("gia"),
            ddd=field("ddd"),
            siafi=field("siafi"),
        )


@dataclass(frozen=True)
class Found:
    location: PostalLocation


@dataclass(frozen=True)
class NotFound:
    cep: str


CEPLookupResult = Union[Found, NotFound]


@dataclass(frozen=True)
class Temperature:
    """Current temperature; Fahrenheit and Kelvin always derive from Celsius."""

    celsius: float
    fahrenheit: float
    kelvin: float

    @classmethod
    def from_celsius(cls, celsius: float) -> "Temperature":
        return cls(celsius=celsius, fahrenheit=c_to_f(celsius), kelvin=c_to_k(celsius))

    def to_dict(self) -> dict:
        return {
            "temp_C": self.celsius,
            "temp_F": self.fahrenheit,
            "temp_K": self.kelvin,
        }


__all__ = [
    "PostalLocation",
    "Found",
    "NotFound",
    "CEPLookupResult",
    "Temperature",
]

import re

_CEP_RE = re.compile(r"[0-9]{8}")


def format_cep(cep: str) -> str:
    """Strip hyphens and spaces from a CEP."""
    return cep.replace("-", "").replace(" ", "")


def is_valid_cep(cep: str) -> bool:
    """True when the CEP, once formatted, is exactly 8 ASCII digits."""
    return _CEP_RE.fullmatch(format_cep(cep)) is not None

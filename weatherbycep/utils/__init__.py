"""
utils package – small, pure‑function helpers.

We expose the CEP and temperature helpers that are used throughout the app.
"""

# Re‑export the helpers for a clean import path
from .cep import format_cep, is_valid_cep      # noqa: F401
from .temperature import c_to_f, c_to_k        # noqa: F401

__all__ = [
    "format_cep",
    "is_valid_cep",
    "c_to_f",
    "c_to_k",
]

import logging
import math
import re
from typing import Optional
from urllib.parse import quote_plus

import requests

from .. import http_client
from ..errors import UpstreamError, WeatherUnavailableError
from ..models import Temperature

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def location_query(city: str, state: str) -> str:
    """Percent-encoded ``city,state,Brazil`` path segment for wttr.in."""
    location = f"{city.replace(' ', '+')},{state.replace(' ', '+')},Brazil"
    return quote_plus(location)


def parse_celsius(value) -> float:
    """Parse wttr.in's string ``temp_C``; raises ``UpstreamError`` if unusable."""
    if not isinstance(value, str) or not _DECIMAL_RE.fullmatch(value):
        raise UpstreamError(f"invalid temperature {value!r}")
    celsius = float(value)
    if not math.isfinite(celsius):
        raise UpstreamError(f"invalid temperature {value!r}")
    return celsius


class WttrWeatherService:
    """Wraps the wttr.in JSON (``format=j1``) API."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        host: str = "wttr.in",
        timeout: float = 30,
    ):
        self.session = session or requests.Session()
        self.host = host
        self.timeout = timeout

    def url_for(self, city: str, state: str) -> str:
        return f"https://{self.host}/{location_query(city, state)}?format=j1"

    # ------------------------------------------------------------------
    # 1️⃣ Pull the j1 payload
    # ------------------------------------------------------------------
    def _payload(self, city: str, state: str) -> dict:
        try:
            resp = http_client.get(self.session, self.url_for(city, state), self.timeout)
        except requests.RequestException as exc:
            logger.error("wttr.in request failed for %s/%s: %s", city, state, exc)
            raise UpstreamError(f"wttr.in request failed: {exc}") from exc

        if resp.status_code != 200:
            logger.error("wttr.in returned HTTP %s for %s/%s", resp.status_code, city, state)
            raise UpstreamError(f"wttr.in returned HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error("wttr.in returned invalid JSON: %s", exc)
            raise UpstreamError("wttr.in returned invalid json") from exc
        if not isinstance(data, dict):
            raise UpstreamError("wttr.in returned unexpected payload")
        return data

    # ------------------------------------------------------------------
    # 2️⃣ Public façade
    # ------------------------------------------------------------------
    def current_temperature(self, city: str, state: str) -> Temperature:
        """
        Current temperature for a Brazilian city, taken from the first
        ``current_condition`` entry and converted to °F and K.
        """
        conditions = self._payload(city, state).get("current_condition")
        if conditions is not None and not isinstance(conditions, list):
            raise UpstreamError("wttr.in returned unexpected current_condition")
        if not conditions:
            logger.warning("No current conditions for %s/%s", city, state)
            raise WeatherUnavailableError(f"no current conditions for {city}/{state}")
        if not isinstance(conditions[0], dict):
            raise UpstreamError("wttr.in returned unexpected current_condition")

        celsius = parse_celsius(conditions[0].get("temp_C"))
        return Temperature.from_celsius(celsius)

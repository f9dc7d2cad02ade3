import logging
from typing import Optional

import requests

from .. import http_client
from ..errors import InvalidCEPError, UpstreamError
from ..models import CEPLookupResult, Found, NotFound, PostalLocation
from ..utils.cep import format_cep, is_valid_cep

logger = logging.getLogger(__name__)


class CEPLookupService:
    """Resolve a Brazilian CEP to an address using ViaCEP."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        host: str = "viacep.com.br",
        timeout: float = 30,
        allow_http_fallback: bool = True,
    ):
        self.session = session or requests.Session()
        self.host = host
        self.timeout = timeout
        self.allow_http_fallback = allow_http_fallback

    def url_for(self, cep: str, scheme: str = "https") -> str:
        return f"{scheme}://{self.host}/ws/{cep}/json/"

    # ------------------------------------------------------------------
    # 1️⃣ Transport (HTTPS first, one plain HTTP attempt if no response came back)
    # ------------------------------------------------------------------
    def _get(self, cep: str) -> requests.Response:
        try:
            return http_client.get(self.session, self.url_for(cep), self.timeout)
        except http_client.BodyReadError as exc:
            logger.error("ViaCEP response for %s was cut short: %s", cep, exc)
            raise UpstreamError(f"viacep response unreadable: {exc}") from exc
        except requests.RequestException as exc:
            if not self.allow_http_fallback:
                logger.error("ViaCEP request failed for %s: %s", cep, exc)
                raise UpstreamError(f"viacep request failed: {exc}") from exc
            logger.warning("ViaCEP HTTPS request failed, retrying over HTTP: %s", exc)

        try:
            return http_client.get(self.session, self.url_for(cep, scheme="http"), self.timeout)
        except requests.RequestException as exc:
            logger.error("ViaCEP request failed for %s: %s", cep, exc)
            raise UpstreamError(f"viacep request failed: {exc}") from exc

    # ------------------------------------------------------------------
    # 2️⃣ Public façade
    # ------------------------------------------------------------------
    def lookup(self, raw_cep: str) -> CEPLookupResult:
        """
        Return ``Found(PostalLocation)`` for a known CEP or ``NotFound`` when
        ViaCEP flags it with ``"erro"``. Upstream trouble raises
        ``UpstreamError``; a malformed CEP raises ``InvalidCEPError``.
        """
        if not is_valid_cep(raw_cep):
            raise InvalidCEPError(f"invalid cep {raw_cep!r}")
        cep = format_cep(raw_cep)

        resp = self._get(cep)
        if resp.status_code != 200:
            logger.error("ViaCEP returned HTTP %s for %s", resp.status_code, cep)
            raise UpstreamError(f"viacep returned HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error("ViaCEP returned invalid JSON for %s: %s", cep, exc)
            raise UpstreamError("viacep returned invalid json") from exc
        if not isinstance(data, dict):
            logger.error("ViaCEP returned unexpected payload for %s: %r", cep, data)
            raise UpstreamError("viacep returned unexpected payload")

        if data.get("erro"):
            logger.info("CEP not found: %s", cep)
            return NotFound(cep)

        return Found(PostalLocation.from_viacep(raw_cep, cep, data))

"""Shared outbound HTTP session.

Built once per process (see ``weatherbycep.app.create_app``) and handed to the
services, so tests can swap in a mocked transport or a fake service.
"""

from __future__ import annotations

import ssl
import threading

import requests
from requests.adapters import HTTPAdapter
from requests.utils import DEFAULT_CA_BUNDLE_PATH
from urllib3.util.ssl_ import create_urllib3_context

USER_AGENT = "weatherbycep/1.0"


class TLS12Adapter(HTTPAdapter):
    """HTTPAdapter that refuses anything older than TLS 1.2."""

    def init_poolmanager(self, *args, **kwargs):
        context = create_urllib3_context()
        context.minimum_version = ssl.TLSVersion.TLSv1_2
        context.load_verify_locations(DEFAULT_CA_BUNDLE_PATH)
        kwargs["ssl_context"] = context
        return super().init_poolmanager(*args, **kwargs)


def build_session(max_idle_connections: int = 10) -> requests.Session:
    """Create the `requests.Session` every outbound call goes through.

    - keeps at most ``max_idle_connections`` pooled connections per host
    - no automatic retries
    - TLS 1.2 minimum, certificate verification left on
    """
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    session.mount(
        "https://",
        TLS12Adapter(pool_connections=max_idle_connections, pool_maxsize=max_idle_connections, max_retries=0),
    )
    session.mount(
        "http://",
        HTTPAdapter(pool_connections=max_idle_connections, pool_maxsize=max_idle_connections, max_retries=0),
    )
    return session

class BodyReadError(requests.RequestException):
    """The response arrived but its body could not be read in full."""


class _DeadlineCall(threading.Thread):
    """Runs one streamed GET and reads its body off the caller's thread."""

    def __init__(self, session: requests.Session, url: str, timeout: float) -> None:
        super().__init__(name="weatherbycep-http", daemon=True)
        self.session = session
        self.url = url
        self.timeout = timeout
        self.response: requests.Response | None = None
        self.error: Exception | None = None

    def run(self) -> None:
        try:
            response = self.session.get(self.url, timeout=self.timeout, stream=True)
        except Exception as exc:
            self.error = exc
            return

        self.response = response
        try:
            response.content  # read and cache the whole body
        except requests.RequestException as exc:
            self.error = BodyReadError(f"reading {self.url} failed: {exc}")
        except Exception as exc:
            self.error = exc
        finally:
            response.close()


def get(session: requests.Session, url: str, timeout: float) -> requests.Response:
    """GET ``url`` with ``timeout`` seconds for the whole call, body included.

    Failures before the response arrives (connect, TLS, waiting for headers,
    running out of time) raise the usual ``requests`` exceptions. Once the
    status line is in, any failure to finish the body raises
    ``BodyReadError``.
    """
    call = _DeadlineCall(session, url, timeout)
    call.start()
    call.join(timeout)

    if call.is_alive():
        if call.response is None:
            raise requests.Timeout(f"no response from {url} within {timeout}s")
        raise BodyReadError(f"body of {url} not received within {timeout}s")
    if call.error is not None:
        raise call.error
    return call.response


__all__ = ["TLS12Adapter", "BodyReadError", "build_session", "get", "USER_AGENT"]

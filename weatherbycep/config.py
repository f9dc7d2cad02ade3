import os

from dotenv import load_dotenv

# Pick up a project-root .env before reading any setting
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Colours:
    """ANSI escape codes for terminal output."""

    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"


class Config:
    # Listening port for the development server
    PORT = int(os.environ.get("PORT", 8080))

    # Upstream hosts
    CEP_LOOKUP_HOST = os.environ.get("CEP_LOOKUP_HOST", "viacep.com.br")
    WEATHER_HOST = os.environ.get("WEATHER_HOST", "wttr.in")

    # Outbound HTTP session
    HTTP_TIMEOUT = float(os.environ.get("HTTP_TIMEOUT", 30))
    HTTP_MAX_IDLE_CONNECTIONS = int(os.environ.get("HTTP_MAX_IDLE_CONNECTIONS", 10))

    # Retry a failed HTTPS lookup once over plain HTTP
    CEP_HTTP_FALLBACK = _env_bool("CEP_HTTP_FALLBACK", True)

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

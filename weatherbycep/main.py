import sys
from typing import List, Optional

from .config import Colours, Config
from .errors import WeatherByCEPError
from .http_client import build_session
from .pipeline import WeatherByCEP
from .services import CEPLookupService, WttrWeatherService


def colourize(celsius: float) -> str:
    """Wrap a Celsius reading with a colour matching how warm it is."""
    if celsius >= 30:
        colour = Colours.RED
    elif celsius >= 18:
        colour = Colours.YELLOW
    elif celsius >= 10:
        colour = Colours.GREEN
    else:
        colour = Colours.CYAN
    return f"{colour}{celsius:.1f}°C{Colours.RESET}"


def build_pipeline() -> WeatherByCEP:
    session = build_session(Config.HTTP_MAX_IDLE_CONNECTIONS)
    return WeatherByCEP(
        CEPLookupService(
            session,
            host=Config.CEP_LOOKUP_HOST,
            timeout=Config.HTTP_TIMEOUT,
            allow_http_fallback=Config.CEP_HTTP_FALLBACK,
        ),
        WttrWeatherService(session, host=Config.WEATHER_HOST, timeout=Config.HTTP_TIMEOUT),
    )


def main(argv: Optional[List[str]] = None, pipeline: Optional[WeatherByCEP] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    pipeline = pipeline or build_pipeline()

    # ------------------------------------------------------------------
    # 1️⃣ Gather the CEP (argument or prompt)
    # ------------------------------------------------------------------
    cep = argv[0] if argv else input("Enter CEP: ").strip()
    if not cep:
        sys.exit("cep parameter is required")

    # ------------------------------------------------------------------
    # 2️⃣ CEP → location → current temperature
    # ------------------------------------------------------------------
    try:
        location, temperature = pipeline.run(cep)
    except WeatherByCEPError as exc:
        sys.exit(exc.message)

    print(f"Location: {location.city}/{location.state} ({location.formatted_cep or location.cep})")
    if location.street:
        print(f"\t{location.street}, {location.district}")
    print(
        f"Current Temperature: {colourize(temperature.celsius)} "
        f"({temperature.fahrenheit:.1f}°F, {temperature.kelvin:.2f} K)"
    )


if __name__ == "__main__":
    main()

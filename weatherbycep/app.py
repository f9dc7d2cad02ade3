import logging
from typing import Mapping, Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import (
    CEP_REQUIRED,
    ENDPOINT_NOT_FOUND,
    INTERNAL_ERROR,
    METHOD_NOT_ALLOWED,
    ErrorResult,
    WeatherByCEPError,
)
from .http_client import build_session
from .pipeline import WeatherByCEP
from .services import CEPLookupService, WttrWeatherService

ROUTE_PREFIX = "/weatherbycep/"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def error_response(error: ErrorResult):
    """JSON body + status for a failed request."""
    return jsonify(error.to_dict()), error.status_code


def create_app(
    config: Optional[Mapping] = None,
    cep_service: Optional[CEPLookupService] = None,
    weather_service: Optional[WttrWeatherService] = None,
) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    log_level = getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO)
    app.logger.setLevel(log_level)
    logging.getLogger("weatherbycep").setLevel(log_level)

    # ------------------------------------------------------------------
    # One outbound session for the whole process, shared by both services
    # ------------------------------------------------------------------
    if cep_service is None or weather_service is None:
        session = build_session(app.config["HTTP_MAX_IDLE_CONNECTIONS"])
        if cep_service is None:
            cep_service = CEPLookupService(
                session,
                host=app.config["CEP_LOOKUP_HOST"],
                timeout=app.config["HTTP_TIMEOUT"],
                allow_http_fallback=app.config["CEP_HTTP_FALLBACK"],
            )
        if weather_service is None:
            weather_service = WttrWeatherService(
                session,
                host=app.config["WEATHER_HOST"],
                timeout=app.config["HTTP_TIMEOUT"],
            )

    app.extensions["weatherbycep"] = WeatherByCEP(cep_service, weather_service, logger=app.logger)

    @app.route("/", defaults={"path": ""}, methods=ALL_METHODS)
    @app.route("/<path:path>", methods=ALL_METHODS)
    def weather_by_cep(path):
        if request.method != "GET":
            return error_response(METHOD_NOT_ALLOWED)

        if not request.path.startswith(ROUTE_PREFIX):
            return error_response(ENDPOINT_NOT_FOUND)

        raw_cep = request.path[len(ROUTE_PREFIX):]
        if not raw_cep:
            return error_response(CEP_REQUIRED)

        pipeline: WeatherByCEP = current_app.extensions["weatherbycep"]
        try:
            temperature = pipeline(raw_cep)
        except WeatherByCEPError as exc:
            app.logger.info("Request for CEP %r failed: %s", raw_cep, exc)
            return error_response(exc.result)

        return jsonify(temperature.to_dict()), 200

    # ------------------------------------------------------------------
    # Everything else still answers in JSON
    # ------------------------------------------------------------------
    @app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        if exc.code == 404:
            return error_response(ENDPOINT_NOT_FOUND)
        return error_response(ErrorResult(exc.code or 500, exc.name.lower()))

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        app.logger.exception("Unhandled error while serving %s", request.path)
        return error_response(INTERNAL_ERROR)

    return app

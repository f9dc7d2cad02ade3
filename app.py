import logging

from weatherbycep import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    port = app.config["PORT"]
    app.logger.info("Server listening on port %s", port)
    app.logger.info("Endpoint: GET /weatherbycep/{cep}")
    app.logger.info("Example: GET /weatherbycep/01310100")
    app.run(host="0.0.0.0", port=port)

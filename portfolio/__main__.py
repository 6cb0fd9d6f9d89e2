"""Run the API with werkzeug's threaded server: ``python -m portfolio``."""
from portfolio import create_app


def main():
    app = create_app()
    host = app.config.get("HOST", "0.0.0.0")
    port = int(app.config.get("PORT", 8080))
    app.logger.info("Listening on http://%s:%s", host, port)
    app.run(host=host, port=port, threaded=True, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    main()

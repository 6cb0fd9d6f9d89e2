"""
Portfolio Generator Application Factory
"""
import time
from datetime import datetime, timezone

from flask import Flask, Response, g, jsonify, request
from flask_cors import CORS

from portfolio.config import get_config
from portfolio.errors import register_error_handlers

__version__ = "0.1.0"


def now_utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def create_app(config_name=None, **overrides):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.config.update(overrides)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        send_wildcard=True,
        methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    register_error_handlers(app)
    register_request_logging(app)

    from portfolio.api import api_bp
    app.register_blueprint(api_bp)

    @app.route("/", methods=["GET", "OPTIONS"])
    def index():
        if request.method == "OPTIONS":
            return Response(status=204)
        return Response("OK", status=200, mimetype="text/plain")

    @app.route("/healthz")
    def healthz():
        """Health check for load balancers and monitoring"""
        from portfolio.services.gemini_service import client_ready
        ok, msg = client_ready(app.config.get("GEMINI_API_KEY", ""))
        return jsonify({
            "ok": True,
            "app_version": app.config.get("APP_VERSION") or __version__,
            "time_utc": now_utc_iso(),
            "gemini_ready": ok,
            "gemini_message": msg,
            "model": app.config.get("GEMINI_MODEL"),
        })

    @app.route("/version")
    def version():
        """Version and build info"""
        return jsonify({
            "version": app.config.get("APP_VERSION") or __version__,
            "build_time": app.config.get("BUILD_TIME", ""),
            "git_commit": app.config.get("GIT_COMMIT", ""),
        })

    return app


def register_request_logging(app):
    """Log remote address, method, path, status and duration of every request"""

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop("request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        app.logger.info(
            "%s %s %s %s %.1fms",
            request.remote_addr,
            request.method,
            request.path,
            response.status_code,
            elapsed_ms,
        )
        return response

"""
Error taxonomy for the generate pipeline.

Every failure is terminal for the request: views raise one of these and the
handlers registered in ``register_error_handlers`` turn it into a plain-text
response carrying the message.
"""
from flask import Response, current_app
from werkzeug.exceptions import HTTPException


class PortfolioError(Exception):
    """Base error; ``status_code`` is the HTTP status reported to the caller."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(PortfolioError):
    """Bad upload, unsupported type, or no extractable text."""
    status_code = 400


class ServerConfigError(PortfolioError):
    status_code = 500


class LocalIOError(PortfolioError):
    """Temp file staging failed, or a local read of upstream data failed."""
    status_code = 500


class UpstreamError(PortfolioError):
    """Transport failure or non-2xx from the LLM API."""
    status_code = 502


def plain_text_error(message: str, status: int) -> Response:
    return Response(message + "\n", status=status, mimetype="text/plain")


def register_error_handlers(app):
    """Render pipeline and HTTP errors as plain text"""

    @app.errorhandler(PortfolioError)
    def handle_portfolio_error(err: PortfolioError):
        return plain_text_error(err.message, err.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        if err.code == 413:
            limit_mib = (current_app.config.get("MAX_CONTENT_LENGTH") or 0) // (1024 * 1024)
            message = f"Uploaded file exceeds the {limit_mib} MiB limit"
        else:
            message = err.name
        response = plain_text_error(message, err.code or 500)
        if getattr(err, "valid_methods", None):
            response.headers["Allow"] = ", ".join(err.valid_methods)
        return response

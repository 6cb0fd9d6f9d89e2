"""Gemini generateContent client.

One POST per call, no retries. The raw response body is returned untouched so
the caller can relay it verbatim.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

import requests

from portfolio.errors import LocalIOError, ServerConfigError, UpstreamError

logger = logging.getLogger(__name__)

# Raised by requests while preparing the request, before anything is sent.
_REQUEST_BUILD_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)


def client_ready(api_key: str) -> Tuple[bool, str]:
    if not (api_key or "").strip():
        return False, "GEMINI_API_KEY is missing"
    return True, ""


def generate_content_body(prompt: str) -> Dict[str, Any]:
    return {
        "contents": [
            {"parts": [{"text": prompt}]},
        ],
        "generationConfig": {"response_mime_type": "application/json"},
    }


class GeminiClient:
    def __init__(self, api_key: str, model: str, base_url: str, timeout: float = 60):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, cfg) -> "GeminiClient":
        ok, _ = client_ready(cfg.get("GEMINI_API_KEY", ""))
        if not ok:
            raise ServerConfigError("Server misconfigured: missing GEMINI_API_KEY")
        return cls(
            api_key=cfg["GEMINI_API_KEY"].strip(),
            model=cfg["GEMINI_MODEL"],
            base_url=cfg["GEMINI_API_BASE"],
            timeout=cfg.get("UPSTREAM_TIMEOUT", 60),
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str) -> bytes:
        """Send ``prompt`` and return the raw 2xx response body.

        Raises ServerConfigError if the request cannot be built, UpstreamError
        on transport failure or a non-2xx status, and LocalIOError if the
        body of a successful response cannot be read.
        """
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        try:
            resp = requests.post(
                self.endpoint,
                json=generate_content_body(prompt),
                headers=headers,
                timeout=self.timeout,
                stream=True,
            )
        except _REQUEST_BUILD_ERRORS as e:
            logger.error("Could not build upstream request for %s: %s", self.endpoint, e)
            raise ServerConfigError("Failed to create upstream request") from e
        except requests.RequestException as e:
            logger.warning("Upstream transport failure: %s: %s", type(e).__name__, e)
            raise UpstreamError(f"Upstream error: {e}") from e

        with resp:
            if not 200 <= resp.status_code < 300:
                try:
                    body = resp.text
                except requests.RequestException:
                    body = ""
                logger.warning("Upstream returned %s %s", resp.status_code, resp.reason)
                raise UpstreamError(f"Upstream {resp.status_code} {resp.reason}: {body}")

            try:
                return resp.content
            except requests.RequestException as e:
                logger.warning("Reading upstream body failed: %s: %s", type(e).__name__, e)
                raise LocalIOError("Failed to read upstream response") from e

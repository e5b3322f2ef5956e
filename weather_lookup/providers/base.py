from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response


logger = logging.getLogger(__name__)


class ProviderError(RuntimeError):
    """Base provider error."""


class TransportError(ProviderError):
    """Raised when the upstream service cannot be reached or answers with an error status."""


class QuotaExceeded(TransportError):
    """Raised when a provider reports a quota/usage limit issue."""


class MalformedResponse(ProviderError):
    """Raised when the upstream payload does not have the expected shape."""


@dataclass
class RequestConfig:
    timeout: float = 5.0


class WeatherProvider:
    """Base class that adds timeouts and error mapping for HTTP providers.

    Every call is a single attempt: failures are raised immediately and it is
    up to the caller to decide what to show the user.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._testing_mode = os.environ.get("TESTING_MODE", "0") == "1"
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded("quota exceeded")
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise TransportError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise TransportError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise TransportError("request failed") from exc
        self._log_response(response)
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise MalformedResponse("invalid json") from exc

    def _log_response(self, response: Response) -> None:
        if not self._testing_mode:
            return
        logger.info(
            "Upstream request",
            extra={"url": response.url, "status": response.status_code, "body": response.text[:500]},
        )


__all__ = [
    "MalformedResponse",
    "ProviderError",
    "QuotaExceeded",
    "RequestConfig",
    "TransportError",
    "WeatherProvider",
]

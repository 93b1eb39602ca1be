from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests


class ProviderError(RuntimeError):
    """The upstream service failed or returned no usable payload."""


class QuotaExceeded(RuntimeError):
    """The local daily call ceiling was reached; nothing was sent upstream."""


class RetrievalFailed(RuntimeError):
    """The only error callers see when a rain report cannot be produced."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass
class RequestConfig:
    timeout: float = 5.0


class WeatherProvider:
    """Base class for HTTP forecast providers.

    Without an injected ``session`` every request goes through
    ``requests.request``, which opens and closes its own session, so one
    provider instance can serve concurrent request threads.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session
        self._log = logging.getLogger(self.__class__.__name__)

    def _get_json(self, url: str, **kwargs) -> Any:
        """GET ``url`` and decode the body; every upstream failure is a ``ProviderError``."""
        client = self.session if self.session is not None else requests
        try:
            response = client.request("GET", url, timeout=self.request_config.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "error"
            self._log.error("Forecast service answered HTTP %s", status)
            raise ProviderError(f"HTTP {status}") from exc
        except requests.Timeout as exc:
            self._log.error("Forecast service timed out after %ss", self.request_config.timeout)
            raise ProviderError("timeout") from exc
        except requests.JSONDecodeError as exc:
            self._log.error("Forecast body is not valid JSON: %s", exc)
            raise ProviderError("invalid json") from exc
        except requests.RequestException as exc:
            self._log.error("Forecast request failed", exc_info=exc)
            raise ProviderError(f"request failed: {exc}") from exc


__all__ = ["ProviderError", "QuotaExceeded", "RequestConfig", "RetrievalFailed", "WeatherProvider"]

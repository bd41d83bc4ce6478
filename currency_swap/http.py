"""HTTP client helpers used to fetch the price feed."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, MutableMapping, Optional

import requests

from .errors import CurrencySwapError

HttpRequestor = Callable[[str, Mapping[str, Any]], requests.Response]


@dataclass
class HttpClient:
    """Small convenience wrapper around :mod:`requests` with package defaults."""

    requestor: Optional[HttpRequestor] = None
    user_agent: str = "currency-swap/0.1"
    timeout: float = 30

    def __post_init__(self) -> None:
        if self.requestor is None:
            session = requests.Session()

            def _requestor(url: str, kwargs: Mapping[str, Any]) -> requests.Response:
                return session.request(url=url, **dict(kwargs))

            self.requestor = _requestor

    def send_get_request(self, url: str, params: Optional[Mapping[str, str]] = None) -> Any:
        headers: MutableMapping[str, str] = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        kwargs: MutableMapping[str, Any] = {
            "method": "GET",
            "headers": headers,
            "timeout": self.timeout,
        }
        if params:
            kwargs["params"] = params

        assert self.requestor is not None
        try:
            response = self.requestor(url, kwargs)
        except requests.RequestException as exc:
            raise CurrencySwapError.fetch_failed_error(url, exc) from exc

        if not response.ok:
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            raise CurrencySwapError.from_http_response(url, response.status_code, payload)

        try:
            return response.json()
        except ValueError as exc:
            raise CurrencySwapError.fetch_failed_error(url, "response body is not JSON") from exc

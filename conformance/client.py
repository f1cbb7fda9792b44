"""
HTTP client for the company resource.

Wraps a ``requests.Session`` bound to one service root. Every method
returns the raw ``requests.Response`` so callers can assert on status
codes and bodies themselves; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from config import ConformanceConfig

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


class CompanyApiClient:
    """Thin client for the ``/company`` endpoints of one service."""

    def __init__(
        self,
        base_url: str = ConformanceConfig.API_BASE_URL,
        timeout: float = ConformanceConfig.REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)

    @property
    def resource_url(self) -> str:
        """URL of the company collection."""
        return f"{self.base_url}/company"

    def company_url(self, company_id: int | str) -> str:
        """URL of a single company; the id is interpolated as given."""
        return f"{self.resource_url}/{company_id}"

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        logger.debug("%s %s", method, url)
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def create(self, payload: dict[str, Any]) -> requests.Response:
        return self._request("POST", self.resource_url, json=payload)

    def list(self) -> requests.Response:
        return self._request("GET", self.resource_url)

    def get(self, company_id: int | str) -> requests.Response:
        return self._request("GET", self.company_url(company_id))

    def update(self, company_id: int | str, payload: dict[str, Any]) -> requests.Response:
        return self._request("PUT", self.company_url(company_id), json=payload)

    def delete(self, company_id: int | str) -> requests.Response:
        return self._request("DELETE", self.company_url(company_id))

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> CompanyApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

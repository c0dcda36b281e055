"""REST API data source.

GETs a URL expected to return the canonical dashboard object as JSON. The body
is passed through as-is; only the donations section is checked.
"""

from __future__ import annotations

import requests

from config.settings import DEFAULT_API_URL
from extractors.base_extractor import BaseExtractor
from utils.errors import NetworkError, ParseError, ValidationError
from utils.http_client import DashboardSession


class ApiExtractor(BaseExtractor):
    name = "api"

    def __init__(
        self,
        url: str = DEFAULT_API_URL,
        api_key: str = "",
        headers: dict[str, str] | None = None,
        session: DashboardSession | None = None,
    ):
        super().__init__()
        self.url = (url or "").strip()
        self.api_key = api_key
        self.headers = headers or {}
        self.http = session

    def extract(self):
        if not self.url:
            raise ValidationError("Please enter an API endpoint URL.")

        if self.http is not None:
            return self._fetch(self.http)
        with DashboardSession(api_key=self.api_key, headers=self.headers) as http:
            return self._fetch(http)

    def _fetch(self, http: DashboardSession):
        self.logger.info(f"Fetching {self.url}")
        try:
            resp = http.get(self.url)
        except requests.RequestException as e:
            raise NetworkError(f"Request to {self.url} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise NetworkError(f"HTTP {resp.status_code}", status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise ParseError(f"Response from {self.url} is not valid JSON") from e

"""requests.Session wrapper for the API data source: headers, retry policy, timeout."""

from __future__ import annotations

import json
import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config.settings import API_TIMEOUT, DEFAULT_RETRIES, USER_AGENT
from utils.errors import ValidationError

logger = logging.getLogger(__name__)


def parse_custom_headers(raw: str | None) -> dict[str, str]:
    """Parse the advanced-settings header box (a JSON object) into a dict."""
    if raw is None or not raw.strip():
        return {}
    try:
        headers = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Custom headers must be valid JSON: {e.msg}") from e
    if not isinstance(headers, dict):
        raise ValidationError("Custom headers must be a JSON object")
    return {str(k): str(v) for k, v in headers.items()}


class DashboardSession:
    """HTTP session for dashboard fetches with optional bearer key and custom headers."""

    def __init__(
        self,
        api_key: str = "",
        headers: dict[str, str] | None = None,
        retries: int = DEFAULT_RETRIES,
        timeout: float | None = API_TIMEOUT,
    ):
        self.timeout = timeout

        self.session = requests.Session()
        retry_strategy = Retry(
            total=retries,
            connect=retries,
            read=retries,
            status=retries,
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.headers.update({
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        })
        if api_key:
            self.session.headers["Authorization"] = f"Bearer {api_key}"
        if headers:
            self.session.headers.update(headers)

    def get(self, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        logger.debug(f"GET {url}")
        return self.session.get(url, **kwargs)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

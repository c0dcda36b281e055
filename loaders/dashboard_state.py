"""Session state for the dashboard and the controller that replaces it on each fetch.

The canonical object, its fetch timestamp and the last error live together in
one immutable DashboardState. The controller swaps in a new state per fetch, so
a reader always sees a complete, consistent snapshot; the fetch that finishes
last wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from config.sample_data import default_dataset
from extractors.registry import fetch_from_source
from utils.errors import DashboardDataError
from utils.http_client import DashboardSession

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DashboardState:
    """What the views render from.

    Attributes:
        data: Current canonical object.
        last_fetched: When ``data`` was last replaced.
        error: Message from the most recent failed fetch, else None.
        source: Source id that produced ``data``.
    """

    data: dict
    last_fetched: datetime
    error: str | None = None
    source: str = "mock"


@dataclass(frozen=True)
class FetchResult:
    ok: bool
    source: str
    error: str | None = None


class DashboardController:
    """Owns the DashboardState and applies fetch outcomes to it."""

    def __init__(self, clock: Callable[[], datetime] = _utc_now):
        self._clock = clock
        self.state = DashboardState(data=default_dataset(), last_fetched=clock())

    @property
    def data(self) -> dict:
        return self.state.data

    @property
    def error(self) -> str | None:
        return self.state.error

    @property
    def last_fetched(self) -> datetime:
        return self.state.last_fetched

    def fetch(
        self,
        source: str,
        params: str | None = None,
        *,
        api_key: str = "",
        headers: dict[str, str] | None = None,
        session: DashboardSession | None = None,
    ) -> FetchResult:
        """Fetch from a source and replace the current state.

        On failure the error message is kept on the state and the sample
        dataset is served in place of whatever was shown before.
        """
        try:
            data = fetch_from_source(
                source, params, api_key=api_key, headers=headers, session=session
            )
        except DashboardDataError as e:
            return self.fail(source, e)

        self.state = DashboardState(data=data, last_fetched=self._clock(), source=source)
        logger.info(f"Dashboard data replaced from {source}")
        return FetchResult(ok=True, source=source)

    def fail(self, source: str, error: DashboardDataError) -> FetchResult:
        """Surface an ingestion error and fall back to the sample dataset.

        Also used for errors raised before a fetch starts, such as invalid
        custom headers or an unreadable upload.
        """
        message = str(error)
        logger.warning(f"Fetch from {source} failed ({type(error).__name__}): {message}")
        self.state = DashboardState(
            data=default_dataset(),
            last_fetched=self._clock(),
            error=message,
            source="mock",
        )
        return FetchResult(ok=False, source=source, error=message)

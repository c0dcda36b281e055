"""Source catalogue and the single entry point for fetching dashboard data."""

from __future__ import annotations

import logging

from extractors.api import ApiExtractor
from extractors.base_extractor import BaseExtractor
from extractors.csv_upload import CsvExtractor
from extractors.mock import AirtableExtractor, GoogleSheetsExtractor, MockExtractor
from utils.errors import ValidationError
from utils.http_client import DashboardSession

logger = logging.getLogger(__name__)

# (id, display name, description) in selector order
DATA_SOURCES = [
    ("mock", "Mock Data", "Use built-in sample data"),
    ("api", "API Endpoint", "Fetch from REST API"),
    ("csv", "CSV Upload", "Upload CSV files"),
    ("airtable", "Airtable", "Demo (mock fallback)"),
    ("googleSheets", "Google Sheets", "Demo (mock fallback)"),
]

SOURCE_IDS = [s[0] for s in DATA_SOURCES]
SOURCE_LABELS = {s[0]: s[1] for s in DATA_SOURCES}
SOURCE_DESCRIPTIONS = {s[0]: s[2] for s in DATA_SOURCES}


def build_extractor(
    source: str,
    params: str | None = None,
    *,
    api_key: str = "",
    headers: dict[str, str] | None = None,
    session: DashboardSession | None = None,
) -> BaseExtractor:
    """Pick the extractor for a source id.

    ``params`` is the endpoint URL for ``api`` and the raw CSV text for ``csv``;
    the other sources ignore it.
    """
    if source == "mock":
        return MockExtractor()
    if source == "airtable":
        return AirtableExtractor()
    if source == "googleSheets":
        return GoogleSheetsExtractor()
    if source == "api":
        return ApiExtractor(url=params or "", api_key=api_key, headers=headers, session=session)
    if source == "csv":
        return CsvExtractor(params)
    raise ValidationError(f"Unknown data source: {source!r}")


def fetch_from_source(
    source: str,
    params: str | None = None,
    *,
    api_key: str = "",
    headers: dict[str, str] | None = None,
    session: DashboardSession | None = None,
) -> dict:
    """Fetch and normalize data from one source.

    Returns a fresh canonical object. Raises a DashboardDataError subclass on
    failure; falling back to the sample data is the caller's job.
    """
    extractor = build_extractor(
        source, params, api_key=api_key, headers=headers, session=session
    )
    return extractor.run()

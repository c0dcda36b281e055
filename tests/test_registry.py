"""Tests for source selection and fetch_from_source."""

import pytest

from config.sample_data import DEFAULT_DATA
from conftest import FakeResponse, FakeSession
from extractors.api import ApiExtractor
from extractors.csv_upload import CsvExtractor
from extractors.mock import MockExtractor
from extractors.registry import (
    DATA_SOURCES,
    SOURCE_IDS,
    build_extractor,
    fetch_from_source,
)
from utils.errors import NetworkError, ValidationError


@pytest.mark.parametrize("source", ["mock", "airtable", "googleSheets"])
def test_sample_sources_return_default_dataset(source):
    assert fetch_from_source(source) == DEFAULT_DATA


def test_sample_data_is_an_independent_copy():
    first = fetch_from_source("mock")
    first["donationsByYear"].clear()

    assert fetch_from_source("mock") == DEFAULT_DATA
    assert len(DEFAULT_DATA["donationsByYear"]) == 6


def test_mock_ignores_params():
    assert fetch_from_source("mock", "year,donations\n1999,1\n") == DEFAULT_DATA


def test_csv_source_uses_params_as_text():
    data = fetch_from_source("csv", "year,donations\n2023,100\n2022,50\n")
    assert data["donationsByYear"] == [
        {"year": 2022, "amount": 50},
        {"year": 2023, "amount": 100},
    ]


def test_api_source_uses_params_as_url(ok_session, api_payload):
    data = fetch_from_source("api", "https://example.org/data", session=ok_session)

    assert data == api_payload
    assert ok_session.urls == ["https://example.org/data"]


def test_api_errors_propagate():
    session = FakeSession(FakeResponse(503, {}))
    with pytest.raises(NetworkError):
        fetch_from_source("api", "https://example.org/data", session=session)


def test_unknown_source_is_validation_error():
    with pytest.raises(ValidationError):
        fetch_from_source("dropbox")


def test_build_extractor_types():
    assert isinstance(build_extractor("mock"), MockExtractor)
    assert isinstance(build_extractor("csv", "x"), CsvExtractor)
    assert isinstance(build_extractor("api", "https://example.org"), ApiExtractor)


def test_catalogue_lists_all_sources_in_order():
    assert SOURCE_IDS == ["mock", "api", "csv", "airtable", "googleSheets"]
    assert all(name and description for _, name, description in DATA_SOURCES)


def test_repeated_fetch_is_idempotent(api_payload):
    first = fetch_from_source("api", "https://example.org", session=FakeSession(FakeResponse(200, api_payload)))
    second = fetch_from_source("api", "https://example.org", session=FakeSession(FakeResponse(200, api_payload)))
    assert first == second

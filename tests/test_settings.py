"""Tests for environment-driven settings parsing."""

import pytest

from config.settings import _parse_timeout


@pytest.mark.parametrize("raw,expected", [
    (None, None),
    ("", None),
    ("  ", None),
    ("0", None),
    ("-3", None),
    ("12.5", 12.5),
])
def test_parse_timeout(raw, expected):
    assert _parse_timeout(raw) == expected


def test_parse_timeout_rejects_garbage():
    with pytest.raises(ValueError, match="DASHBOARD_API_TIMEOUT"):
        _parse_timeout("soon")

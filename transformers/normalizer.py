"""Value normalization for CSV donation rows: headers, years, amounts."""

from __future__ import annotations

import logging
import math
import re

import pandas as pd

from config.settings import (
    CSV_DONATIONS_COLUMN,
    CSV_YEAR_COLUMN,
    PLACEHOLDER_START_YEAR,
)

logger = logging.getLogger(__name__)


def normalize_header(name) -> str:
    """Trim and lower-case a CSV header so ' Year ' matches 'year'."""
    return str(name).strip().lower()


# numeric prefixes: "2023-01-01" reads as 2023, "100 USD" as 100
_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_number(value, pattern: re.Pattern) -> float | None:
    """Parse the numeric prefix of a cell. None if blank, non-numeric or infinite."""
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        return None
    match = pattern.match(str(value).strip())
    if match is None:
        return None
    number = float(match.group())
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def normalize_year(value) -> int | None:
    """Parse a year cell from its leading digits; '2022.9' and '2023-01-01' give 2022 and 2023."""
    number = _leading_number(value, _INT_PREFIX)
    if number is None:
        return None
    return int(number)


def normalize_amount(value) -> float | None:
    """Parse a donations cell from its leading number. None if blank or not numeric."""
    return _leading_number(value, _FLOAT_PREFIX)


def placeholder_donations(start_year: int = PLACEHOLDER_START_YEAR) -> list[dict]:
    """Two zero-amount years so charts never receive an empty series."""
    return [
        {"year": start_year, "amount": 0.0},
        {"year": start_year + 1, "amount": 0.0},
    ]


def normalize_donation_rows(df: pd.DataFrame) -> list[dict]:
    """Turn parsed CSV rows into DonationRecords sorted by year.

    Rows missing a usable year or donations value are dropped. Other columns
    are ignored. Duplicate years are kept in input order.
    """
    if CSV_YEAR_COLUMN not in df.columns or CSV_DONATIONS_COLUMN not in df.columns:
        logger.info(
            f"CSV lacks '{CSV_YEAR_COLUMN}'/'{CSV_DONATIONS_COLUMN}' columns; "
            f"found {list(df.columns)}"
        )
        return []

    records = []
    for year_cell, amount_cell in zip(df[CSV_YEAR_COLUMN], df[CSV_DONATIONS_COLUMN]):
        year = normalize_year(year_cell)
        amount = normalize_amount(amount_cell)
        if year is None or amount is None:
            continue
        records.append({"year": year, "amount": amount})

    dropped = len(df) - len(records)
    if dropped:
        logger.info(f"Dropped {dropped:,} CSV rows missing year or donations")

    # sorted() is stable, so duplicate years keep their input order
    return sorted(records, key=lambda r: r["year"])

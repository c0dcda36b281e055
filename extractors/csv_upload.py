"""CSV data source: pasted text or an uploaded file with year/donations columns.

Only the donations series comes from the CSV. Every other section is filled
with the fixed placeholder shape.
"""

from __future__ import annotations

import io

import pandas as pd

from config.schema import empty_shape
from extractors.base_extractor import BaseExtractor
from transformers.normalizer import (
    normalize_donation_rows,
    normalize_header,
    placeholder_donations,
)
from utils.errors import ParseError, ValidationError


def decode_upload(payload: bytes) -> str:
    """Decode an uploaded CSV file, tolerating a UTF-8 byte-order mark."""
    try:
        return payload.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"CSV file is not UTF-8 text: {e.reason}") from e


class CsvExtractor(BaseExtractor):
    name = "csv"

    def __init__(self, text: str | None):
        super().__init__()
        self.text = text or ""

    def extract(self) -> pd.DataFrame:
        """Parse the text into a frame keyed by normalized header names.

        A row with more or fewer fields than the header fails the whole parse.
        Empty fields are kept as "" so they only drop their own row later.
        """
        text = self.text.lstrip("\ufeff")
        if not text.strip():
            raise ValidationError("Please paste CSV data or upload a file.")

        try:
            grid = pd.read_csv(
                io.StringIO(text),
                header=None,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except pd.errors.EmptyDataError as e:
            raise ParseError("CSV parsing error: no header row found") from e
        except pd.errors.ParserError as e:
            raise ParseError(f"CSV parsing error: {e}") from e

        # read_csv pads short rows with NaN; explicit empty fields stay ""
        short = grid.iloc[1:].isna().any(axis=1)
        if short.any():
            row = int(short.idxmax())
            raise ParseError(f"CSV parsing error: row {row} has too few fields")

        header = [normalize_header(h) for h in grid.iloc[0]]
        df = grid.iloc[1:].copy()
        df.columns = header
        df = df.loc[:, ~df.columns.duplicated()].reset_index(drop=True)
        self.logger.info(f"Parsed {len(df):,} CSV rows with columns {list(df.columns)}")
        return df

    def transform(self, df: pd.DataFrame) -> dict:
        data = empty_shape()
        donations = normalize_donation_rows(df)
        if not donations:
            self.logger.warning("No valid year/donations rows; using placeholder years")
            donations = placeholder_donations()
        data["donationsByYear"] = donations
        return data

"""Tests for the CSV data source."""

import pytest

from config.schema import SECTION_NAMES, empty_shape
from extractors.csv_upload import CsvExtractor, decode_upload
from utils.errors import ParseError, ValidationError


def run_csv(text):
    return CsvExtractor(text).run()


class TestCsvExtractor:
    def test_rows_sorted_by_year(self):
        data = run_csv("year,donations\n2023,100\n2022,50\n")
        assert data["donationsByYear"] == [
            {"year": 2022, "amount": 50},
            {"year": 2023, "amount": 100},
        ]

    def test_types_are_int_year_and_float_amount(self):
        data = run_csv("year,donations\n2021,250.75\n")
        record = data["donationsByYear"][0]
        assert isinstance(record["year"], int)
        assert isinstance(record["amount"], float)
        assert record["amount"] == 250.75

    def test_rows_missing_a_value_are_dropped(self):
        text = "year,donations\n2020,10\n,20\n2021,\n2022,30\n"
        data = run_csv(text)
        assert [r["year"] for r in data["donationsByYear"]] == [2020, 2022]

    def test_non_numeric_values_are_dropped(self):
        text = "year,donations\nabc,10\n2021,lots\n2019,5\n"
        data = run_csv(text)
        assert data["donationsByYear"] == [{"year": 2019, "amount": 5.0}]

    def test_date_shaped_year_and_suffixed_amount_use_leading_number(self):
        text = "year,donations\n2023-06-30,100 USD\n2022-06-30,80\n"
        data = run_csv(text)
        assert data["donationsByYear"] == [
            {"year": 2022, "amount": 80.0},
            {"year": 2023, "amount": 100.0},
        ]

    def test_extra_columns_ignored(self):
        text = "region,year,donations,notes\nNE,2024,900,strong\nNE,2023,800,ok\n"
        data = run_csv(text)
        assert data["donationsByYear"] == [
            {"year": 2023, "amount": 800.0},
            {"year": 2024, "amount": 900.0},
        ]

    def test_headers_matched_case_and_space_insensitive(self):
        data = run_csv(" Year , Donations \n2020,1\n")
        assert data["donationsByYear"] == [{"year": 2020, "amount": 1.0}]

    def test_duplicate_years_kept_in_input_order(self):
        data = run_csv("year,donations\n2021,1\n2020,2\n2021,3\n")
        assert data["donationsByYear"] == [
            {"year": 2020, "amount": 2.0},
            {"year": 2021, "amount": 1.0},
            {"year": 2021, "amount": 3.0},
        ]

    def test_zero_valid_rows_gives_two_placeholders(self):
        data = run_csv("year,donations\n,\nfoo,bar\n")
        records = data["donationsByYear"]
        assert len(records) == 2
        assert all(r["amount"] == 0 for r in records)
        assert records[1]["year"] == records[0]["year"] + 1

    def test_header_only_gives_placeholders(self):
        data = run_csv("year,donations\n")
        assert data["donationsByYear"] == [
            {"year": 2023, "amount": 0.0},
            {"year": 2024, "amount": 0.0},
        ]

    def test_missing_columns_gives_placeholders(self):
        data = run_csv("date,total\n2020-01-01,5\n")
        assert len(data["donationsByYear"]) == 2

    def test_other_sections_use_placeholder_shape(self):
        data = run_csv("year,donations\n2023,100\n")
        placeholder = empty_shape()
        assert set(data) == set(SECTION_NAMES)
        for section in SECTION_NAMES:
            if section != "donationsByYear":
                assert data[section] == placeholder[section]

    def test_empty_text_is_validation_error(self):
        with pytest.raises(ValidationError):
            run_csv("")

    def test_none_is_validation_error(self):
        with pytest.raises(ValidationError):
            run_csv(None)

    def test_whitespace_only_is_validation_error(self):
        with pytest.raises(ValidationError):
            run_csv("   \n\n")

    def test_row_with_extra_fields_is_parse_error(self):
        with pytest.raises(ParseError):
            run_csv("year,donations\n2023,100\n2022,50,999\n")

    def test_row_with_too_few_fields_is_parse_error(self):
        with pytest.raises(ParseError, match="row 2 has too few fields"):
            run_csv("year,donations\n2023,100\n2022\n")

    def test_explicit_empty_field_is_not_parse_error(self):
        data = run_csv("year,donations\n2023,100\n2022,\n")
        assert data["donationsByYear"] == [{"year": 2023, "amount": 100.0}]

    def test_byte_order_mark_is_ignored(self):
        data = run_csv("\ufeffyear,donations\n2020,7\n")
        assert data["donationsByYear"] == [{"year": 2020, "amount": 7.0}]

    def test_windows_line_endings(self):
        data = run_csv("year,donations\r\n2023,100\r\n2022,50\r\n")
        assert [r["year"] for r in data["donationsByYear"]] == [2022, 2023]

    def test_same_input_gives_equal_output(self):
        text = "year,donations\n2023,100\n2022,50\n"
        assert run_csv(text) == run_csv(text)


class TestDecodeUpload:
    def test_utf8_with_bom(self):
        assert decode_upload("\ufeffyear,donations\n".encode("utf-8")) == "year,donations\n"

    def test_invalid_bytes_raise_parse_error(self):
        with pytest.raises(ParseError):
            decode_upload(b"\xff\xfe\xfa")

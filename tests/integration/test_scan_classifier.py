"""
End-to-end tests for GS1 parsing and scan classification.

Tests cover:
- Complete DataMatrix strings from French medicine packs
- Symbology prefixes and bare GTINs
- Plain CIP13 barcodes
- Rejection of unrelated scans without exceptions
"""

import pytest
from medscan import (
    parse_gs1,
    classify,
    is_plain_product_code,
    Gs1ParseResult,
    ScanOptions,
    ScanResult,
    ScanSource,
)


class TestParseGs1:
    """Tests for parse_gs1()."""

    def test_complete_datamatrix(self):
        """AI 01 + AI 17 + AI 10."""
        result = parse_gs1("01034009340123081723063010ABC123")

        assert result.is_gs1_structured
        assert result.trade_item_code == "03400934012308"
        assert result.product_code == "3400934012308"
        assert result.expiry_date == "2023-06-30"
        assert result.batch_number == "ABC123"
        assert result.serial_number is None
        assert not result.truncated

    def test_datamatrix_prefix(self):
        result = parse_gs1("]d201034009340123081723063010LOT1")

        assert result.is_gs1_structured
        assert result.product_code == "3400934012308"
        assert result.expiry_date == "2023-06-30"
        assert result.batch_number == "LOT1"
        assert result.symbology_identifier == "GS1 DataMatrix"

    def test_impossible_day_keeps_other_fields(self):
        """June has 30 days: expiry is dropped, the rest stays usable."""
        result = parse_gs1("]d201034009340123081723063110LOT1")

        assert result.product_code == "3400934012308"
        assert result.expiry_date is None
        assert result.batch_number == "LOT1"

    @pytest.mark.parametrize("prefix", ["]d2", "]Q3", "]C1"])
    def test_prefix_does_not_change_result(self, prefix):
        payload = "01034009340123081723063110BATCH\x1d2112345"
        plain = parse_gs1(payload)
        prefixed = parse_gs1(prefix + payload)

        assert prefixed.product_code == plain.product_code
        assert prefixed.trade_item_code == plain.trade_item_code
        assert prefixed.expiry_date == plain.expiry_date
        assert prefixed.batch_number == plain.batch_number
        assert prefixed.serial_number == plain.serial_number
        assert prefixed.fields == plain.fields

    def test_bare_gtin_without_ai01(self):
        result = parse_gs1("034009340123081723063110LOT")

        assert result.is_gs1_structured
        assert result.product_code == "3400934012308"
        assert result.batch_number == "LOT"

    def test_batch_and_serial_split_by_gs(self):
        result = parse_gs1("01034009340123081723063110BATCH\x1d2112345")

        assert result.batch_number == "BATCH"
        assert result.serial_number == "12345"

    def test_serial_before_batch(self):
        result = parse_gs1("010340093401230821SN0042\x1d1723063010B7")

        assert result.serial_number == "SN0042"
        assert result.expiry_date == "2023-06-30"
        assert result.batch_number == "B7"

    def test_day_zero_last_day_of_month(self):
        result = parse_gs1("01034009340123081727020010LOT")
        assert result.expiry_date == "2027-02-28"

    def test_year_at_or_above_pivot(self):
        """YY >= 50 resolves to 19YY; trailing '0LOT' is not an AI."""
        result = parse_gs1("0103400934012308179912310LOT")

        assert result.expiry_date == "1999-12-31"
        assert result.batch_number is None
        assert result.truncated

    def test_invalid_month(self):
        result = parse_gs1("0103400934012308171315010LOT")

        assert result.is_gs1_structured
        assert result.expiry_date is None

    def test_unknown_ai_flags_truncation(self):
        result = parse_gs1("01034009340123081723063099INTERNAL")

        assert result.product_code == "3400934012308"
        assert result.expiry_date == "2023-06-30"
        assert result.truncated
        assert "99" not in result.fields

    def test_unused_ais_in_fields_only(self):
        result = parse_gs1("010340093401230811230101\x1d1723063010LOT")

        assert result.fields["11"] == "230101"
        assert result.expiry_date == "2023-06-30"

    def test_check_digit_is_informational(self):
        result = parse_gs1("0103400930000014172306301012")
        assert result.check_digit_valid is True

        result = parse_gs1("01034009340123081723063010ABC123")
        assert result.check_digit_valid is False
        assert result.product_code == "3400934012308"

    def test_short_input_not_structured(self):
        assert parse_gs1("0103400").is_gs1_structured is False
        assert parse_gs1("") == Gs1ParseResult()

    def test_not_structured_implies_empty(self):
        result = parse_gs1("this is not a barcode at all")

        assert result == Gs1ParseResult()
        assert result.product_code is None
        assert result.fields == {}

    def test_truncated_gtin_has_no_product_code(self):
        """AI(01) without 14 characters of data."""
        result = parse_gs1("01ABCDEFGHIJKLM")
        assert not result.is_gs1_structured

        result = parse_gs1("010340093401X308172306")
        assert result.is_gs1_structured
        assert result.trade_item_code == "0340093401X308"
        assert result.product_code is None

    def test_to_dict(self):
        data = parse_gs1("01034009340123081723063010ABC123").to_dict()

        assert data["productCode"] == "3400934012308"
        assert data["tradeItemCode"] == "03400934012308"
        assert data["isGs1Structured"] is True
        assert data["fields"] == {
            "01": "03400934012308",
            "17": "230630",
            "10": "ABC123",
        }

    def test_min_length_option(self):
        options = ScanOptions(min_structured_length=40)
        result = parse_gs1("01034009340123081723063010ABC123", options=options)
        assert not result.is_gs1_structured


class TestIsPlainProductCode:
    """Tests for plain CIP13 detection."""

    def test_accepts_340_codes(self):
        assert is_plain_product_code("3400930000001")
        assert is_plain_product_code("3400934012308")

    def test_rejects_other_prefix(self):
        assert not is_plain_product_code("1234567890123")

    def test_rejects_wrong_length(self):
        assert not is_plain_product_code("340093000")
        assert not is_plain_product_code("34009300000010")

    def test_rejects_non_numeric(self):
        assert not is_plain_product_code("340abc0000001")


class TestClassify:
    """Tests for classify()."""

    def test_datamatrix_is_structured(self):
        result = classify("01034009340123081723063010LOT1")

        assert result == ScanResult(
            product_code="3400934012308",
            expiry_date="2023-06-30",
            batch_number="LOT1",
            source=ScanSource.STRUCTURED,
        )

    def test_bare_gtin_is_structured(self):
        result = classify("034009340123081723063110LOT")

        assert result.source == ScanSource.STRUCTURED
        assert result.product_code == "3400934012308"

    def test_plain_cip13(self):
        result = classify("3400930000001")

        assert result == ScanResult(
            product_code="3400930000001",
            expiry_date=None,
            batch_number=None,
            source=ScanSource.PLAIN,
        )

    def test_plain_cip13_trimmed(self):
        result = classify("  3400930000001  ")

        assert result is not None
        assert result.product_code == "3400930000001"
        assert result.source == ScanSource.PLAIN

    def test_plain_code_with_other_prefix_rejected(self):
        assert classify("1234567890123") is None

    @pytest.mark.parametrize("raw", [
        "",
        "   ",
        "hello world",
        "12345",
        "0103400",
        "]d2",
        "01ABCDEFGHIJKLMNOP",
        "99999999999999999999",
    ])
    def test_unrecognized(self, raw):
        assert classify(raw) is None

    def test_gs1_without_product_code_falls_back(self):
        """Structured but no usable GTIN, and not a plain code either."""
        assert classify("010340093401X308172306") is None

    def test_gs1_result_matches_last_13_of_gtin(self):
        for gtin in ("03400934012308", "03400930000014", "13400930000011"):
            with_ai = classify("01" + gtin + "17230630")
            assert with_ai.product_code == gtin[1:]

    def test_bare_and_prefixed_gtin_agree(self):
        bare = classify("03400934012308" + "17230630")
        with_ai = classify("01" + "03400934012308" + "17230630")
        assert bare == with_ai

    def test_non_string_is_programming_error(self):
        with pytest.raises(TypeError):
            classify(None)

    def test_to_dict(self):
        data = classify("3400930000001").to_dict()
        assert data == {
            "productCode": "3400930000001",
            "expiryDate": None,
            "batchNumber": None,
            "source": "plain",
        }

    def test_custom_plain_prefix(self):
        options = ScanOptions(plain_code_prefix="341")
        assert classify("3410930000001", options=options).source == ScanSource.PLAIN
        assert classify("3400930000001", options=options) is None

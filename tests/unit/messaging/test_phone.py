"""Tests for Moroccan phone number normalization and validation."""

from __future__ import annotations

import pytest

from campreg.messaging import COUNTRY_PREFIX, is_valid_moroccan_phone, normalize_phone


class TestNormalizePhone:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0612345678", "212612345678"),
            ("+212 6 12 34 56 78", "212612345678"),
            ("212612345678", "212612345678"),
            ("612345678", "212612345678"),
            ("06-12-34-56-78", "212612345678"),
            ("(0)5 39 12 34 56", "212539123456"),
        ],
    )
    def test_normalized_to_international_digits(self, raw: str, expected: str):
        assert normalize_phone(raw) == expected

    def test_result_always_prefixed(self):
        for raw in ("0700000000", "+212700000000", "700000000"):
            normalized = normalize_phone(raw)
            assert normalized.startswith(COUNTRY_PREFIX)
            assert normalized.isdigit()


class TestIsValidMoroccanPhone:
    @pytest.mark.parametrize(
        "raw",
        ["0612345678", "+212612345678", "212712345678", "612345678", "+212 6 12 34 56 78", "0539123456"],
    )
    def test_accepts(self, raw: str):
        assert is_valid_moroccan_phone(raw)

    @pytest.mark.parametrize("raw", ["", "12345", "0812345678", "+33612345678", "06123456789"])
    def test_rejects(self, raw: str):
        assert not is_valid_moroccan_phone(raw)

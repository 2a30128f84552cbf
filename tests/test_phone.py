"""Tests for the phone input mask."""

from __future__ import annotations

import pytest

from signup_form.core.phone import PHONE_MASK_LENGTH, format_phone, is_complete_phone, phone_digits


class TestFormatPhone:
    """Masking of raw keystrokes."""

    def test_full_number(self):
        assert format_phone("11987654321") == "(11) 98765-4321"

    def test_non_digits_are_dropped_before_masking(self):
        assert format_phone("1a1b9c8d7") == "(11) 987"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("", ""),
            ("1", "1"),
            ("11", "11"),
            ("119", "(11) 9"),
            ("1198765", "(11) 98765"),
            ("11987654", "(11) 98765-4"),
            ("1198765432", "(11) 98765-432"),
        ],
    )
    def test_partial_input(self, raw, expected):
        assert format_phone(raw) == expected

    def test_truncated_to_mask_length(self):
        masked = format_phone("119876543210999")
        assert masked == "(11) 98765-4321"
        assert len(masked) == PHONE_MASK_LENGTH

    def test_none_is_empty(self):
        assert format_phone(None) == ""

    def test_non_ascii_digits_are_dropped(self):
        assert format_phone("١١987") == "(98) 7"

    @pytest.mark.parametrize(
        "raw",
        ["", "1", "11", "(11) 9", "11987654321", "+55 (11) 98765-4321", "abc", "1198765432100"],
    )
    def test_idempotent(self, raw):
        once = format_phone(raw)
        assert format_phone(once) == once


class TestPhoneHelpers:
    def test_phone_digits(self):
        assert phone_digits("(11) 98765-4321") == "11987654321"
        assert phone_digits(None) == ""

    def test_is_complete_phone(self):
        assert is_complete_phone("(11) 98765-4321")
        assert is_complete_phone("11987654321")
        assert not is_complete_phone("(11) 98765-432")
        assert not is_complete_phone("")

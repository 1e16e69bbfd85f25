"""Tests for filename sanitization of untrusted identity strings."""

from __future__ import annotations

import pytest

from kiro_auth.sanitize import sanitize_email_for_filename


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", ""),
        ("user@example.com", "user@example.com"),
        ("user name@example.com", "user_name@example.com"),
        ("user:name@example.com", "user_name@example.com"),
        ("user/name:test@example.com", "user_name_test@example.com"),
        ("../../../etc/passwd", "_.__.__._etc_passwd"),
        ("..\\..\\..\\..\\windows\\system32", "_.__.__.__._windows_system32"),
        ("user\x00@evil.com", "user_@evil.com"),
    ],
    ids=[
        "empty",
        "simple",
        "space",
        "colon",
        "multiple-special-chars",
        "path-traversal",
        "path-traversal-backslash",
        "null-byte",
    ],
)
def test_literal_inputs(value, expected):
    assert sanitize_email_for_filename(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("user%2Fpath@example.com", "user_path@example.com"),
        ("user%5Cpath@example.com", "user_path@example.com"),
        ("%2E%2E%2Fetc%2Fpasswd", "___etc_passwd"),
        ("user%00@evil.com", "user_@evil.com"),
        ("%252F%252E%252E", "_252F_252E_252E"),
        ("%2f%2F%5c%5C", "____"),
        ("100%", "100_"),
        ("%zz@example.com", "_zz@example.com"),
    ],
    ids=[
        "encoded-slash",
        "encoded-backslash",
        "encoded-dot",
        "encoded-null",
        "double-encoding",
        "mixed-case-encoding",
        "trailing-percent",
        "malformed-triplet",
    ],
)
def test_percent_encoded_inputs(value, expected):
    assert sanitize_email_for_filename(value) == expected


class TestDotHandling:
    """Dots are kept unless they form a run of two or more."""

    def test_single_dots_preserved(self):
        assert sanitize_email_for_filename("first.last@mail.example.com") == "first.last@mail.example.com"

    def test_double_dot(self):
        assert sanitize_email_for_filename("a..b") == "a_.b"

    def test_three_dots(self):
        assert sanitize_email_for_filename("...") == "__."

    def test_four_dots(self):
        assert sanitize_email_for_filename("x....y") == "x___.y"

    def test_trailing_dot_kept(self):
        assert sanitize_email_for_filename("user.") == "user."


class TestCharacterClasses:
    """Preserved and replaced character classes."""

    def test_plus_at_hyphen_underscore_preserved(self):
        assert sanitize_email_for_filename("a+b-c_d@e") == "a+b-c_d@e"

    def test_non_ascii_letters_preserved(self):
        assert sanitize_email_for_filename("jürgen@exämple.de") == "jürgen@exämple.de"

    @pytest.mark.parametrize("char", list('/\\:*?"<>|%') + ["\t", "\n", "\r", "\x01", "\x7f", " "])
    def test_unsafe_chars_replaced_one_to_one(self, char):
        assert sanitize_email_for_filename(f"a{char}b") == "a_b"


ADVERSARIAL_INPUTS = [
    "../../../etc/passwd",
    "..\\..\\windows",
    "%2E%2E%2F%2E%2E%2F",
    "%252E%252E%252F",
    "....//....//",
    "user\x00\x00@evil.com",
    "%%2F2F",
    ". . / . .",
    "%2e.%2e.",
    "a/./b/../c",
]


@pytest.mark.parametrize("value", ADVERSARIAL_INPUTS)
def test_output_has_no_unsafe_sequences(value):
    result = sanitize_email_for_filename(value)
    for forbidden in ("/", "\\", "\x00", "%", ".."):
        assert forbidden not in result


@pytest.mark.parametrize("value", ADVERSARIAL_INPUTS + ["user.name+tag@sub.example.com", "plain"])
def test_idempotent(value):
    once = sanitize_email_for_filename(value)
    assert sanitize_email_for_filename(once) == once


def test_literal_and_encoded_separators_agree():
    assert sanitize_email_for_filename("a%2Fb%5Cc") == sanitize_email_for_filename("a/b\\c")

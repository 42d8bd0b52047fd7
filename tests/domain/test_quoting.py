"""Tests for context-dependent quoting of domains and values."""

from __future__ import annotations

import logging

import pytest

from labeledname.domain.errors import LabeledNameError, UnquotableValueError
from labeledname.domain.objectname import ObjectName, unquote
from labeledname.domain.quoting import quote_domain_if_needed, quote_value_if_needed

# Characters the destination grammar treats as structural or wildcard.
SPECIAL_VALUE_CHARS = [":", ",", "=", '"', "*", "?", "\n"]
PLAIN_VALUE_CHARS = ["-", "_", ".", "/", " ", "\\", "[", "]", "#", "@"]


class TestQuoteValue:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("value1", "value1"),
            ("before?after", '"before\\?after"'),
            ("*", '"\\*"'),
            ("a,b", '"a,b"'),
            ("a=b", '"a=b"'),
            ("a:b", '"a:b"'),
            ('a"b', '"a\\"b"'),
            ('"', '"\\""'),
            ("", '""'),
            ("line\nbreak", '"line\\nbreak"'),
        ],
    )
    def test_quotes_when_needed(self, raw: str, expected: str) -> None:
        assert quote_value_if_needed(raw) == expected

    @pytest.mark.parametrize("raw", ["value1", "a\\b", " padded ", '"already quoted"'])
    def test_literal_values_unchanged(self, raw: str) -> None:
        assert quote_value_if_needed(raw) == raw

    @pytest.mark.parametrize("char", SPECIAL_VALUE_CHARS)
    def test_every_special_char_forces_quoting(self, char: str) -> None:
        raw = f"x{char}y"
        quoted = quote_value_if_needed(raw)
        assert quoted != raw
        assert unquote(quoted) == raw

    @pytest.mark.parametrize("char", PLAIN_VALUE_CHARS)
    def test_plain_chars_left_alone(self, char: str) -> None:
        raw = f"x{char}y"
        assert quote_value_if_needed(raw) == raw

    @pytest.mark.parametrize("raw", ["*", "?", "a*", '"*"', '"', "\\", 'x"*,=:\n?'])
    def test_result_is_always_a_literal(self, raw: str) -> None:
        quoted = quote_value_if_needed(raw)
        assert ObjectName("d", (("k", quoted),)).is_pattern is False

    def test_logs_when_quoting(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="labeledname"):
            quote_value_if_needed("before?after")
        assert any("Quoted value" in rec.getMessage() for rec in caplog.records)


class TestQuoteDomain:
    def test_plain_domain_unchanged(self) -> None:
        assert quote_domain_if_needed("TestDomain") == "TestDomain"

    def test_empty_domain_unchanged(self) -> None:
        assert quote_domain_if_needed("") == ""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("metrics*", '"metrics\\*"'),
            ("a?b", '"a\\?b"'),
            ("line\nbreak", '"line\\nbreak"'),
        ],
    )
    def test_quotes_patterns_and_newlines(self, raw: str, expected: str) -> None:
        quoted = quote_domain_if_needed(raw)
        assert quoted == expected
        assert ObjectName(quoted, (("k", "v"),)).is_domain_pattern is False

    @pytest.mark.parametrize("raw", ["a:b", ":", "my:metrics*"])
    def test_colon_cannot_be_rescued(self, raw: str) -> None:
        with pytest.raises(UnquotableValueError) as exc_info:
            quote_domain_if_needed(raw)
        assert exc_info.value.field == "domain"
        assert exc_info.value.value == raw

    def test_error_family(self) -> None:
        with pytest.raises(LabeledNameError):
            quote_domain_if_needed("a:b")

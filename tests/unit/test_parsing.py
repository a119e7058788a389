"""Unit tests for document parsing and parse errors."""

import pytest
from bs4 import BeautifulSoup

from table_extract import ParseError, find_tables, parse_document
from tests.samples import TABLE_TH_TD


class TestParseDocument:
    """Tests for parse_document."""

    def test_parses_string(self):
        root = parse_document(TABLE_TH_TD)

        assert isinstance(root, BeautifulSoup)
        assert root.find("table") is not None

    def test_returns_parsed_tree_unchanged(self):
        soup = BeautifulSoup(TABLE_TH_TD, "html.parser")

        assert parse_document(soup) is soup

    def test_attributes_are_plain_strings(self):
        root = parse_document('<table class="a b"></table>')

        assert root.find("table")["class"] == "a b"

    def test_explicit_parser_overrides_settings(self, monkeypatch):
        monkeypatch.setenv("TABLE_EXTRACT_PARSER_BACKEND", "lxml")

        root = parse_document("<table><tr><td>x</td></tr></table>", parser="html.parser")

        # html.parser does not wrap fragments in <html><body>
        assert root.find("html") is None

    def test_configured_backend_is_used(self, monkeypatch):
        monkeypatch.setenv("TABLE_EXTRACT_PARSER_BACKEND", "html.parser")

        root = parse_document("<table></table>")

        assert root.find("html") is None


class TestParseErrors:
    """Tests for ParseError reporting."""

    @pytest.mark.parametrize("source", [42, None, ["<table></table>"], 3.5])
    def test_unsupported_input_type(self, source):
        with pytest.raises(ParseError):
            parse_document(source)

    def test_unknown_parser_backend(self):
        with pytest.raises(ParseError) as exc_info:
            find_tables(TABLE_TH_TD, parser="no-such-parser")

        assert exc_info.value.parser == "no-such-parser"
        assert exc_info.value.__cause__ is not None

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            find_tables(b"<table></table>", parser="no-such-parser")

    def test_lone_surrogate_with_lxml(self):
        """Text lxml cannot encode is reported as a ParseError."""
        with pytest.raises(ParseError) as exc_info:
            find_tables("<table><tr><td>\ud800</td></tr></table>", parser="lxml")

        assert exc_info.value.parser == "lxml"
        assert isinstance(exc_info.value.__cause__, UnicodeError)

    def test_rejected_markup(self, monkeypatch):
        """A parser rejecting the markup surfaces as a chained ParseError."""
        from bs4.builder import ParserRejectedMarkup

        from table_extract.parsing import document

        def reject(*args, **kwargs):
            raise ParserRejectedMarkup("markup rejected")

        monkeypatch.setattr(document, "BeautifulSoup", reject)

        with pytest.raises(ParseError) as exc_info:
            parse_document("<table></table>", parser="lxml")

        assert isinstance(exc_info.value.__cause__, ParserRejectedMarkup)

"""HTML document parsing."""

from table_extract.parsing.document import HtmlSource, parse_document

__all__ = [
    "HtmlSource",
    "parse_document",
]

"""Extract data from HTML tables.

Parse an HTML document, locate its ``<table>`` elements and read their
header and body cells as text::

    from table_extract import find_first

    table = find_first(html)
    for row in table:
        print(row.get("Name"), row.get("Age"))

Tables can be selected with :class:`HeaderMatch` or :class:`AttributeMatch`
filters passed to :func:`find_tables`, or through the :func:`find_by_id` and
:func:`find_by_headers` shortcuts.
"""

from table_extract.errors import NotFoundError, ParseError, TableExtractError
from table_extract.extraction import (
    find_by_headers,
    find_by_id,
    find_first,
    find_tables,
    iter_tables,
)
from table_extract.log_config import configure_logging
from table_extract.models import (
    AttributeMatch,
    HeaderMatch,
    NoFilter,
    Row,
    Table,
    TableFilter,
)
from table_extract.parsing import parse_document

__version__ = "0.1.0"

__all__ = [
    "Table",
    "Row",
    "TableFilter",
    "NoFilter",
    "HeaderMatch",
    "AttributeMatch",
    "find_tables",
    "iter_tables",
    "find_first",
    "find_by_id",
    "find_by_headers",
    "parse_document",
    "configure_logging",
    "TableExtractError",
    "ParseError",
    "NotFoundError",
]

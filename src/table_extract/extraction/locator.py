"""Locate ``<table>`` elements in an HTML tree and extract their cells.

Traversal is a single depth-first pass in document order. Tables nested in
another table's cells are reported on their own; their rows and text never
leak into the enclosing table.
"""

from collections.abc import Iterator, Sequence

from bs4 import CData, NavigableString, Tag

from table_extract.config.settings import get_settings
from table_extract.models import AttributeMatch, HeaderMatch, NoFilter, Table, TableFilter
from table_extract.parsing.document import HtmlSource, parse_document

# Comments, doctypes and script/style strings are NavigableString subclasses
_TEXT_TYPES = (NavigableString, CData)
_CELL_TAGS = ["td", "th"]


def iter_tables(
    document: HtmlSource,
    table_filter: TableFilter | None = None,
    *,
    parser: str | None = None,
) -> Iterator[Table]:
    """Lazily yield the tables in ``document`` that satisfy ``table_filter``.

    Args:
        document: HTML markup or an already-parsed BeautifulSoup tree.
        table_filter: Optional filter. ``None`` and ``NoFilter()`` select every table.
        parser: BeautifulSoup tree builder for markup input.

    Yields:
        Extracted tables in document order.

    Raises:
        ParseError: If ``document`` cannot be parsed.
        TypeError: If ``table_filter`` is not a known filter type.
    """
    table_filter = table_filter or NoFilter()
    if not isinstance(table_filter, (NoFilter, HeaderMatch, AttributeMatch)):
        raise TypeError(f"Unsupported table filter: {table_filter!r}")

    root = parse_document(document, parser=parser)
    normalize = get_settings().extraction.normalize_whitespace

    for element in _table_elements(root):
        if isinstance(table_filter, AttributeMatch) and not _attribute_matches(
            element, table_filter
        ):
            continue

        table = _extract_table(element, normalize)

        if isinstance(table_filter, HeaderMatch) and not _headers_match(
            table.headers, table_filter.headers
        ):
            continue

        yield table


def find_tables(
    document: HtmlSource,
    table_filter: TableFilter | None = None,
    *,
    parser: str | None = None,
) -> list[Table]:
    """Extract every table in ``document`` that satisfies ``table_filter``.

    Returns an empty list when nothing matches.
    """
    return list(iter_tables(document, table_filter, parser=parser))


def find_first(document: HtmlSource, *, parser: str | None = None) -> Table | None:
    """Find the first table in ``document``."""
    return next(iter_tables(document, parser=parser), None)


def find_by_id(document: HtmlSource, table_id: str, *, parser: str | None = None) -> Table | None:
    """Find the first table whose ``id`` attribute equals ``table_id``."""
    return next(iter_tables(document, AttributeMatch("id", table_id), parser=parser), None)


def find_by_headers(
    document: HtmlSource,
    headers: Sequence[str],
    *,
    parser: str | None = None,
) -> Table | None:
    """Find the first table whose header row contains all of ``headers``.

    The order does not matter. An empty ``headers`` behaves like :func:`find_first`.
    """
    return next(iter_tables(document, HeaderMatch(headers), parser=parser), None)


def _table_elements(root: Tag) -> Iterator[Tag]:
    if root.name == "table":
        yield root
    yield from root.find_all("table")


def _attribute_matches(element: Tag, table_filter: AttributeMatch) -> bool:
    value = element.get(table_filter.key)
    if value is None:
        return False
    # Trees parsed outside parse_document may still split class into a list
    if isinstance(value, list):
        value = " ".join(value)
    return value == table_filter.value


def _headers_match(headers: list[str], wanted: Sequence[str]) -> bool:
    return all(header in headers for header in wanted)


def _extract_table(element: Tag, normalize: bool) -> Table:
    rows = _own_rows(element)

    headers: list[str] = []
    if rows:
        # A <thead> row wins even when a <tfoot> precedes it in the markup
        header_row = next((tr for tr in rows if tr.parent.name == "thead"), rows[0])
        header_cells = header_row.find_all("th", recursive=False)
        headers = [_cell_text(th, normalize) for th in header_cells]
        if headers:
            rows = [tr for tr in rows if tr is not header_row]

    body = [
        [_cell_text(cell, normalize) for cell in row.find_all(_CELL_TAGS, recursive=False)]
        for row in rows
    ]

    attrs = {
        key: " ".join(value) if isinstance(value, list) else value
        for key, value in element.attrs.items()
    }
    return Table(headers=headers, rows=body, attrs=attrs)


def _own_rows(element: Tag) -> list[Tag]:
    """Rows belonging to ``element`` itself, not to tables nested in it."""
    return [tr for tr in element.find_all("tr") if tr.find_parent("table") is element]


def _cell_text(cell: Tag, normalize: bool) -> str:
    parts: list[str] = []
    stack = list(reversed(cell.contents))
    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            if node.name != "table":
                stack.extend(reversed(node.contents))
        elif type(node) in _TEXT_TYPES:
            parts.append(str(node))

    text = "".join(parts)
    if normalize:
        return " ".join(text.split())
    return text.strip()

"""Table location and cell extraction."""

from table_extract.extraction.locator import (
    find_by_headers,
    find_by_id,
    find_first,
    find_tables,
    iter_tables,
)

__all__ = [
    "find_tables",
    "iter_tables",
    "find_first",
    "find_by_id",
    "find_by_headers",
]

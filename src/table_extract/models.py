"""Data models for extracted HTML tables and table filters."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

import pandas as pd

from table_extract.errors import NotFoundError


@dataclass(frozen=True)
class NoFilter:
    """Select every table."""


@dataclass(frozen=True)
class HeaderMatch:
    """Select tables whose header row contains all of ``headers``.

    Order does not matter. An empty ``headers`` matches every table.
    """

    headers: Sequence[str] = ()

    def __post_init__(self) -> None:
        headers = (self.headers,) if isinstance(self.headers, str) else tuple(self.headers)
        object.__setattr__(self, "headers", headers)


@dataclass(frozen=True)
class AttributeMatch:
    """Select tables carrying attribute ``key`` with exactly ``value``."""

    key: str
    value: str


TableFilter = NoFilter | HeaderMatch | AttributeMatch


def _build_header_index(headers: Sequence[str]) -> dict[str, int]:
    index: dict[str, int] = {}
    for position, label in enumerate(headers):
        index.setdefault(label, position)
    return index


class Row:
    """A body row of a :class:`Table`.

    A row holds its cells as strings. If it has as many cells as the table's
    header row, cells can be looked up by header label with :meth:`get`;
    otherwise positional access through :attr:`cells` is the reliable way in.
    """

    __slots__ = ("_header_index", "_cells")

    def __init__(self, cells: list[str], header_index: dict[str, int]):
        self._cells = cells
        self._header_index = header_index

    @property
    def cells(self) -> list[str]:
        """All cells of the row, in document order."""
        return list(self._cells)

    def is_empty(self) -> bool:
        return not self._cells

    def get(self, header: str, default: str | None = None) -> str | None:
        """Return the cell underneath ``header``.

        Returns ``default`` when there is no such header or the row has no
        cell at that position.
        """
        position = self._header_index.get(header)
        if position is None or position >= len(self._cells):
            return default
        return self._cells[position]

    def to_dict(self) -> dict[str, str]:
        """Map header labels to this row's cells, skipping missing cells."""
        return {
            label: self._cells[position]
            for label, position in self._header_index.items()
            if position < len(self._cells)
        }

    def __getitem__(self, key: int | str) -> str:
        if isinstance(key, str):
            value = self.get(key)
            if value is None:
                raise NotFoundError(f"No cell under header {key!r}", key=key)
            return value
        if key < 0 or key >= len(self._cells):
            raise NotFoundError(
                f"Column {key} out of range for row with {len(self._cells)} cells", key=key
            )
        return self._cells[key]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Row):
            return self._cells == other._cells and self._header_index == other._header_index
        return NotImplemented

    def __repr__(self) -> str:
        return f"Row({self._cells!r})"


@dataclass
class Table:
    """A parsed HTML table.

    ``headers`` is empty when the table's first row had no ``<th>`` cells.
    ``rows`` never includes the header row and keeps ragged rows as they are.
    """

    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def header_index(self) -> dict[str, int]:
        """Header label to zero-based position. First occurrence wins."""
        return _build_header_index(self.headers)

    def get(self, row_index: int, column: int | str) -> str:
        """Return one cell of the table.

        Args:
            row_index: Zero-based body row index.
            column: Zero-based column index, or a header label.

        Returns:
            The cell text.

        Raises:
            NotFoundError: If the row, the column or the header label does not exist.
        """
        return self[row_index][column]

    def column(self, column: int | str) -> list[str]:
        """Return every cell in a column, skipping rows too short to have one."""
        if isinstance(column, str):
            position = self.header_index.get(column)
            if position is None:
                raise NotFoundError(f"No header labelled {column!r}", key=column)
        else:
            position = column
            if position < 0:
                raise NotFoundError(f"Column {column} out of range", key=column)
        return [cells[position] for cells in self.rows if position < len(cells)]

    def to_records(self) -> list[dict[str, str]]:
        """Return body rows as dicts keyed by header label."""
        return [row.to_dict() for row in self]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert the table to a DataFrame.

        Columns are named after the headers when there are any. Cells beyond
        the header row get positional column names, and short rows are
        padded with missing values.
        """
        width = max([len(self.headers)] + [len(cells) for cells in self.rows])
        columns: list[str | int] = list(self.headers)
        columns.extend(range(len(columns), width))
        records = [list(cells) + [None] * (width - len(cells)) for cells in self.rows]
        return pd.DataFrame(records, columns=columns)

    def __getitem__(self, row_index: int) -> Row:
        if row_index < 0 or row_index >= len(self.rows):
            raise NotFoundError(
                f"Row {row_index} out of range for table with {len(self.rows)} rows",
                key=row_index,
            )
        return Row(self.rows[row_index], self.header_index)

    def __iter__(self) -> Iterator[Row]:
        header_index = self.header_index
        return (Row(cells, header_index) for cells in self.rows)

    def __len__(self) -> int:
        return len(self.rows)

"""Exceptions raised by table extraction."""


class TableExtractError(Exception):
    """Base class for all table extraction errors."""


class ParseError(TableExtractError, ValueError):
    """Input could not be turned into an HTML element tree."""

    def __init__(self, message: str, parser: str | None = None):
        super().__init__(message)
        self.parser = parser


class NotFoundError(TableExtractError, LookupError):
    """A requested row, column or header label does not exist in a table."""

    def __init__(self, message: str, key: int | str | None = None):
        super().__init__(message)
        self.key = key

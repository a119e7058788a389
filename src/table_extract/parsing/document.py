"""Turn HTML input into a BeautifulSoup element tree."""

import structlog
from bs4 import BeautifulSoup, FeatureNotFound, Tag
from bs4.builder import ParserRejectedMarkup

from table_extract.config.settings import get_settings
from table_extract.errors import ParseError

logger = structlog.get_logger(__name__)

HtmlSource = str | bytes | Tag


def parse_document(source: HtmlSource, *, parser: str | None = None) -> Tag:
    """Parse HTML into an element tree.

    An already-parsed tree (any ``bs4.Tag``, including ``BeautifulSoup``) is
    returned unchanged so callers can reuse one parse for several lookups.

    Args:
        source: HTML markup as ``str`` or ``bytes``, or a parsed tree.
        parser: BeautifulSoup tree builder name. Defaults to the configured backend.

    Returns:
        Root of the element tree.

    Raises:
        ParseError: If the input type is unsupported, the parser backend is not
            installed, or the parser rejects the markup.
    """
    if isinstance(source, Tag):
        return source

    backend = parser or get_settings().parser.backend

    if not isinstance(source, (str, bytes)):
        logger.error(
            "Unsupported HTML input",
            input_type=type(source).__name__,
            parser=backend,
        )
        raise ParseError(
            f"Cannot parse input of type {type(source).__name__}; expected str, bytes or a bs4 Tag",
            parser=backend,
        )

    try:
        # Attribute values stay plain strings so class="a b" compares as one value
        return BeautifulSoup(source, backend, multi_valued_attributes=None)
    except FeatureNotFound as e:
        logger.error("HTML parser backend unavailable", parser=backend, error=str(e))
        raise ParseError(f"HTML parser backend {backend!r} is not available", parser=backend) from e
    except ParserRejectedMarkup as e:
        logger.error("HTML parser rejected markup", parser=backend, error=str(e))
        raise ParseError(f"Could not parse HTML: {e}", parser=backend) from e
    except (UnicodeError, ValueError) as e:
        # lxml cannot encode lone surrogates in str input
        logger.error("HTML parser failed on input text", parser=backend, error=str(e))
        raise ParseError(f"Could not parse HTML: {e}", parser=backend) from e

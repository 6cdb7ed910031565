"""
Reads a page from disk and parses it into a BeautifulSoup tag tree.
"""

from bs4 import BeautifulSoup
from bs4 import FeatureNotFound

from csp_headers.errors import ParseError


def parse_markup(markup, parser="html.parser"):
    try:
        return BeautifulSoup(markup, parser)
    except FeatureNotFound as e:
        raise ParseError(f"HTML parser {parser!r} is not installed") from e


def parse_page(path, parser="html.parser"):
    """
    Reads `path` as UTF-8 and returns the parsed tree.
    Unreadable or undecodable files raise ParseError.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            markup = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"Page is not valid UTF-8: {e.reason}", path=path) from e
    except OSError as e:
        raise ParseError(f"Unable to read page: {e.strerror or e}", path=path) from e

    try:
        return parse_markup(markup, parser)
    except ParseError as e:
        raise ParseError(e.message, path=path) from e

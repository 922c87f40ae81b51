# uriparser

from .assembler import DEFAULT_PATH, assemble
from .errors import EmptyInput, InvalidArgument, MalformedUrl, UriParserError
from .grammar import UrlParts, split_url
from .options import ALL, AUTH, FRAGMENT, HOST, PATH, PORT, PROTOCOL, QUERY, Option, coerce_options
from .query import BRACKETS, ENCODED_BRACKETS, decode_query, encode_query
from .result import Auth, ParsedUrl

__version__ = '1.0.0'

__all__ = [
    "parse", "split_url", "decode_query", "encode_query",
    "ParsedUrl", "Auth", "UrlParts", "Option",
    "PROTOCOL", "AUTH", "HOST", "PORT", "QUERY", "FRAGMENT", "PATH", "ALL",
    "UriParserError", "InvalidArgument", "EmptyInput", "MalformedUrl",
    "BRACKETS", "ENCODED_BRACKETS", "DEFAULT_PATH",
]


def parse(url=None, options=ALL) -> ParsedUrl:
    """Parse ``url`` into a ParsedUrl holding the components ``options`` selects.

    ``options`` is an Option mask (or plain int); anything non-numeric means
    ALL. Raises InvalidArgument if ``url`` is not a string, EmptyInput if it
    is empty and MalformedUrl if it cannot be split.
    """
    if not isinstance(url, str):
        raise InvalidArgument()
    if len(url) == 0:
        raise EmptyInput()

    parts = split_url(url)
    if parts is None:
        raise MalformedUrl(url)

    return assemble(url, parts, coerce_options(options))

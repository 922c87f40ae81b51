# uriparser/assembler.py

from .errors import MalformedUrl
from .grammar import first_segment
from .options import Option
from .query import decode_query
from .result import Auth, ParsedUrl

__all__ = ["DEFAULT_PATH", "assemble"]

DEFAULT_PATH = '/'


def assemble(url: str, parts, options: Option) -> ParsedUrl:
    """Build the ParsedUrl for ``parts`` keeping only what ``options`` selects."""
    data = {}

    if options & Option.PROTOCOL:
        if parts.scheme:
            data['protocol'] = parts.scheme
        elif ':' in first_segment(url):
            # the splitter dropped a scheme the text clearly has
            raise MalformedUrl(url)

    # credentials come in pairs or not at all
    if options & Option.AUTH and parts.user and parts.password:
        data['auth'] = Auth(parts.user, parts.password)

    if options & Option.HOST and parts.host:
        data['host'] = parts.host

    if options & Option.PORT and parts.port:
        data['port'] = parts.port

    if options & Option.QUERY and parts.query:
        query, suffix = decode_query(parts.query)
        if query:
            data['query'] = query
            if suffix:
                data['querySuffix'] = suffix

    if options & Option.FRAGMENT and parts.fragment:
        data['fragment'] = parts.fragment

    if options & Option.PATH and parts.path:
        data['path'] = parts.path
    else:
        data['path'] = DEFAULT_PATH

    return ParsedUrl(data)

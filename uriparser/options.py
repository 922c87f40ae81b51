# uriparser/options.py

from enum import IntFlag

__all__ = [
    "Option", "coerce_options", "option_for", "FIELD_NAMES",
    "PROTOCOL", "AUTH", "HOST", "PORT", "QUERY", "FRAGMENT", "PATH", "ALL",
]


class Option(IntFlag):
    PROTOCOL = 1
    AUTH = 1 << 1
    HOST = 1 << 2
    PORT = 1 << 3
    QUERY = 1 << 4
    FRAGMENT = 1 << 5
    PATH = 1 << 6
    ALL = PROTOCOL | AUTH | HOST | PORT | QUERY | FRAGMENT | PATH


PROTOCOL = Option.PROTOCOL
AUTH = Option.AUTH
HOST = Option.HOST
PORT = Option.PORT
QUERY = Option.QUERY
FRAGMENT = Option.FRAGMENT
PATH = Option.PATH
ALL = Option.ALL

# names accepted by the command line, in emission order
FIELD_NAMES = ('protocol', 'auth', 'host', 'port', 'query', 'fragment', 'path')


def coerce_options(options) -> Option:
    """Turn whatever the caller passed as ``options`` into an Option mask.

    Anything that is not a number (None, strings, bools) means ALL. Floats
    are truncated, and only the low seven bits are kept, so -1 selects
    everything just like a 32-bit mask would.
    """
    if isinstance(options, bool) or not isinstance(options, (int, float)):
        return Option.ALL
    if isinstance(options, float):
        if options != options or options in (float('inf'), float('-inf')):
            return Option(0)
        options = int(options)
    return Option(options & Option.ALL)


def option_for(name: str) -> Option:
    try:
        return Option[name.upper()]
    except KeyError:
        raise ValueError('unknown field: %r' % (name,)) from None

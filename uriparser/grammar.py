# uriparser/grammar.py

import logging
from urllib.parse import urlsplit

__all__ = ["UrlParts", "split_url", "netlocsplit"]

logger = logging.getLogger(__name__)

_SCHEME_CHARS = frozenset('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789+-.')


class UrlParts(tuple):
    """The eight raw substrings of a URL, each '' when absent."""

    def __new__(cls, scheme='', user='', password='', host='', port='', path='', query='', fragment=''):
        return super().__new__(cls, (scheme, user, password, host, port, path, query, fragment))

    @property
    def scheme(self): return self[0]

    @property
    def user(self): return self[1]

    @property
    def password(self): return self[2]

    @property
    def host(self): return self[3]

    @property
    def port(self): return self[4]

    @property
    def path(self): return self[5]

    @property
    def query(self): return self[6]

    @property
    def fragment(self): return self[7]


def first_segment(url: str) -> str:
    # everything before the first '/', '?' or '#'
    end = len(url)
    for c in '/?#':
        if 0 <= (x := url.find(c, 0, end)) < end:
            end = x
    return url[:end]


def _valid_scheme(scheme: str) -> bool:
    return bool(scheme) and scheme[0].isascii() and scheme[0].isalpha() \
        and all(c in _SCHEME_CHARS for c in scheme)


def _reject(url, reason):
    logger.debug('unparsable url %r: %s', url, reason)
    return None


def netlocsplit(netloc: str) -> tuple:
    """Split an authority into (user, password, host, port), all strings.

    Returns None when the host or port is not well formed. Nothing is
    case-folded; IPv6 hosts come back without their brackets.
    """
    userinfo, sep, hostport = netloc.rpartition('@')
    if sep:
        user, _, password = userinfo.partition(':')
    else:
        user = password = ''

    if hostport.startswith('['):
        close_bracket = hostport.find(']')
        if close_bracket < 0:
            return None
        host, rest = hostport[1:close_bracket], hostport[close_bracket+1:]
        if rest and rest[0] != ':':
            return None
        port = rest[1:]
    else:
        host, _, port = hostport.partition(':')
        if '[' in host or ']' in host:
            return None

    if port and not (port.isascii() and port.isdigit()):
        return None

    return (user, password, host, port)


def split_url(url: str):
    """Split ``url`` into UrlParts, or return None if it cannot be parsed."""
    for c in url:
        if c <= ' ' or c == '\x7f':
            return _reject(url, 'control character or space')

    head = first_segment(url)
    colon = head.find(':')
    if colon >= 0 and not _valid_scheme(head[:colon]):
        return _reject(url, 'bad scheme %r' % head[:colon])

    try:
        scheme, netloc, path, query, fragment = urlsplit(url)
    except ValueError as e:
        return _reject(url, e)
    if scheme:
        # urlsplit lower-cases the scheme, keep it as written
        scheme = url[:len(scheme)]

    if netloc:
        loc = netlocsplit(netloc)
        if loc is None:
            return _reject(url, 'bad authority %r' % netloc)
        user, password, host, port = loc
    else:
        user = password = host = port = ''

    return UrlParts(scheme, user, password, host, port, path, query, fragment)

# uriparser/query.py

import logging

__all__ = ["ENCODED_BRACKETS", "BRACKETS", "decode_query", "encode_query"]

logger = logging.getLogger(__name__)

ENCODED_BRACKETS = '%5B%5D'
BRACKETS = '[]'

# checked in this order
_MARKERS = (ENCODED_BRACKETS, BRACKETS)


def _pairs_generator(qs: str):
    j = -1
    n = len(qs)

    while (j + 1) < n:
        i = j + 1
        j = qs.find('&', i)
        if j == -1:
            j = n

        if i == j:
            continue # '&&' or a trailing '&'
        if qs[i] == '=':
            logger.debug('dropping query field without a key: %r', qs[i:j])
            continue

        eq = qs.find('=', i, j)
        if eq >= 0:
            yield qs[i:eq], qs[eq+1:j]
        else:
            yield qs[i:j], ''


def _split_marker(key: str) -> tuple:
    for marker in _MARKERS:
        # a key made of nothing but the marker keeps it
        if len(key) > len(marker) and key.endswith(marker):
            return key[:-len(marker)], marker
    return key, None


def decode_query(qs: str) -> tuple:
    """Decode a raw query string into ``(query, suffix)``.

    ``query`` maps each key, in first-seen order, to its value, or to the
    list of its values when the key repeats or carries an array marker
    (``[]`` or ``%5B%5D``). ``suffix`` records which marker each such key
    used; the last one seen wins. Nothing is percent-decoded.

    An empty ``query`` means the string held no usable fields.
    """
    values = {}
    suffix = {}

    for key, val in _pairs_generator(qs):
        key, marker = _split_marker(key)
        if marker is not None:
            suffix[key] = marker
        if key in values:
            values[key].append(val)
        else:
            values[key] = [val]

    query = {}
    for key, vals in values.items():
        if len(vals) == 1 and key not in suffix:
            query[key] = vals[0]
        else:
            query[key] = vals
    return query, suffix


def _encode_generator(query, suffix):
    for key, val in query.items():
        name = key + suffix.get(key, '')
        if isinstance(val, str):
            yield name + '=' + val
        else:
            for v in val:
                yield name + '=' + v


def encode_query(query, suffix=None) -> str:
    """Inverse of decode_query: build the canonical query string."""
    return '&'.join(_encode_generator(query, suffix or {}))

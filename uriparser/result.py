# uriparser/result.py

from collections.abc import Mapping

__all__ = ["Auth", "ParsedUrl"]

# mapping keys in the order they are emitted
_FIELDS = ('protocol', 'auth', 'host', 'port', 'query', 'querySuffix', 'fragment', 'path')


class Auth(tuple):

    def __new__(cls, user, password):
        return super().__new__(cls, (user, password))

    @property
    def user(self): return self[0]

    @property
    def password(self): return self[1]

    def as_dict(self) -> dict:
        return {'user': self[0], 'password': self[1]}

    def __repr__(self):
        # never echo the password
        return 'Auth(user=%r, password=***)' % (self[0],)


class ParsedUrl(Mapping):
    """Read-only mapping of the URL components that were selected and present.

    Absent components are missing from the mapping; the attribute accessors
    return None for them. ``path`` is always present.
    """

    __slots__ = ('_fields',)

    def __init__(self, fields):
        unknown = set(fields) - set(_FIELDS)
        if unknown:
            raise ValueError('unknown fields: %s' % ', '.join(sorted(unknown)))
        if 'path' not in fields:
            raise ValueError('path is always required')
        object.__setattr__(self, '_fields', {k: fields[k] for k in _FIELDS if k in fields})

    def __setattr__(self, name, value):
        raise AttributeError('ParsedUrl is read-only')

    def __getitem__(self, key):
        return self._fields[key]

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        return len(self._fields)

    def __repr__(self):
        return 'ParsedUrl(%s)' % ', '.join('%s=%r' % item for item in self._fields.items())

    @property
    def protocol(self): return self._fields.get('protocol')

    @property
    def auth(self): return self._fields.get('auth')

    @property
    def host(self): return self._fields.get('host')

    @property
    def port(self): return self._fields.get('port')

    @property
    def path(self): return self._fields['path']

    @property
    def query(self): return self._fields.get('query')

    @property
    def query_suffix(self): return self._fields.get('querySuffix')

    @property
    def fragment(self): return self._fields.get('fragment')

    def as_dict(self) -> dict:
        """Plain, JSON-ready copy (auth as a dict, query values copied)."""
        res = {}
        for key, val in self._fields.items():
            if key == 'auth':
                val = val.as_dict()
            elif key == 'query':
                val = {k: (v if isinstance(v, str) else list(v)) for k, v in val.items()}
            elif key == 'querySuffix':
                val = dict(val)
            res[key] = val
        return res

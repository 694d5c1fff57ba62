"""
URI and Authority objects produced by the parser

    foo://example.com:8042/over/there?name=ferret#nose
    \\_/   \\______________/\\_________/ \\_________/ \\__/
     |           |            |            |        |
  scheme     authority       path        query   fragment
"""
from typing import Mapping
from typing import Optional
from typing import Tuple
from typing import Union

from .hosts import Host
from .hosts import parse_host
from .query import QueryMap


class Authority:
    __slots__ = ("_userinfo", "_host", "_port")

    def __init__(
        self,
        host: str,
        userinfo: Optional[str] = None,
        port: Optional[int] = None,
    ):
        self._host = host
        self._userinfo = userinfo
        self._port = port

    @property
    def host(self) -> str:
        return self._host

    @property
    def userinfo(self) -> Optional[str]:
        return self._userinfo

    @property
    def port(self) -> Optional[int]:
        return self._port

    @property
    def username(self) -> Optional[str]:
        if self._userinfo is None:
            return None
        return self._userinfo.partition(":")[0]

    @property
    def password(self) -> Optional[str]:
        if self._userinfo is None or ":" not in self._userinfo:
            return None
        return self._userinfo.partition(":")[2]

    @property
    def host_info(self) -> Host:
        return parse_host(self._host)

    def to_text(self) -> str:
        userinfo = f"{self._userinfo}@" if self._userinfo is not None else ""
        port = f":{self._port}" if self._port is not None else ""
        return f"{userinfo}{self._host}{port}"

    def _key(self) -> Tuple:
        return (self._userinfo, self._host, self._port)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Authority):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self):
        return f"<Authority {self.to_text()}>"


class URI:
    """
    Parsed absolute URI.

    Every optional component distinguishes absent (``None``) from empty:
    ``scheme://host/path`` has no query while ``scheme://host/path?`` has an
    empty ``QueryMap``.

    :Example:

    >>> from auris import parse
    >>> uri = parse("foo://example.com:8042/over/there?name=ferret#nose")
    >>> uri.scheme, uri.authority.host, uri.authority.port
    ('foo', 'example.com', 8042)
    >>> uri.path, uri.query["name"], uri.fragment
    ('/over/there', 'ferret', 'nose')
    >>> str(uri)
    'foo://example.com:8042/over/there?name=ferret#nose'
    """

    __slots__ = ("_scheme", "_authority", "_path", "_query", "_fragment")

    def __init__(
        self,
        scheme: str,
        authority: Optional[Authority] = None,
        path: str = "",
        query: Optional[Union[QueryMap, Mapping[str, str]]] = None,
        fragment: Optional[str] = None,
    ):
        self._scheme = scheme
        self._authority = authority
        self._path = path
        self._query = QueryMap(query) if query is not None else None
        self._fragment = fragment

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def authority(self) -> Optional[Authority]:
        return self._authority

    @property
    def path(self) -> str:
        return self._path

    @property
    def query(self) -> Optional[QueryMap]:
        return self._query

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    @property
    def host(self) -> Optional[str]:
        return self._authority.host if self._authority is not None else None

    @property
    def port(self) -> Optional[int]:
        return self._authority.port if self._authority is not None else None

    @property
    def segments(self) -> Tuple[str, ...]:
        path = self._path
        if not path:
            return ()
        if path.startswith("/"):
            path = path[1:]
        return tuple(path.split("/"))

    def path_and_query(self) -> str:
        path = self._path if self._path else "/"
        query = f"?{self._query.to_text()}" if self._query is not None else ""
        return path + query

    def to_text(self) -> str:
        authority = (
            f"//{self._authority.to_text()}" if self._authority is not None else ""
        )
        query = f"?{self._query.to_text()}" if self._query is not None else ""
        fragment = f"#{self._fragment}" if self._fragment is not None else ""
        return f"{self._scheme}:{authority}{self._path}{query}{fragment}"

    def _key(self) -> Tuple:
        return (
            self._scheme,
            self._authority,
            self._path,
            self._query,
            self._fragment,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, URI):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self):
        return f"<URI {self.to_text()}>"


def render(uri: URI) -> str:
    return uri.to_text()

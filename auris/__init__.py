__version__ = "0.1.0"

from .errors.base import AurisError
from .errors.hosts import InvalidHostName
from .errors.parser import EmptyHost
from .errors.parser import InvalidPort
from .errors.parser import MissingScheme
from .errors.parser import ParseError
from .errors.parser import ParseErrorKind
from .hosts import Host
from .hosts import HostKind
from .hosts import parse_host
from .parser.authority_parser import parse_authority
from .parser.query_parser import parse_query
from .parser.uri_parser import UriParser3986
from .parser.uri_parser import parse_uri
from .query import QueryMap
from .urls import URI
from .urls import Authority
from .urls import render

parse = parse_uri

__all__ = [
    "AurisError",
    "Authority",
    "EmptyHost",
    "Host",
    "HostKind",
    "InvalidHostName",
    "InvalidPort",
    "MissingScheme",
    "ParseError",
    "ParseErrorKind",
    "QueryMap",
    "URI",
    "UriParser3986",
    "parse",
    "parse_authority",
    "parse_host",
    "parse_query",
    "parse_uri",
    "render",
]

import logging
import re
from typing import Optional
from typing import Pattern
from typing import Tuple

from lark import Lark
from lark.exceptions import UnexpectedInput

from ..errors.parser import MissingScheme
from ..query import QueryMap
from ..settings import LOGGER_NAME
from ..urls import URI
from ..urls import Authority
from .authority_parser import AuthorityParser
from .query_parser import QueryParser

log = logging.getLogger(LOGGER_NAME)


def parse_uri(uri: str) -> URI:
    return UriParser3986().parse(uri)


class UriParser3986:
    """
    Single left-to-right scanner over an absolute URI.

    Each component ends at the first occurrence of its delimiters:
    the authority at ``/``, ``?`` or ``#``, the path at ``?`` or ``#``
    and the query at ``#``. The fragment is the rest of the text.
    A URI without an authority must have a non-empty path.
    """

    # RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
    scheme_parser = Lark(
        r"""
            scheme:     SCHEME
            SCHEME:     /[A-Za-z][A-Za-z0-9+\-.]*/
            """,
        parser="lalr",
        start="scheme",
    )

    authority_end_regex = re.compile(r"[/?#]")
    path_end_regex = re.compile(r"[?#]")
    query_end_regex = re.compile(r"#")

    def __init__(
        self,
        authority_parser: Optional[AuthorityParser] = None,
        query_parser: Optional[QueryParser] = None,
    ):
        self.authority_parser = authority_parser or AuthorityParser()
        self.query_parser = query_parser or QueryParser()

    def parse(self, value: str) -> URI:
        try:
            return self._parse(value)
        except ValueError as exc:
            log.debug(f"Failed to parse {value!r}: {exc}")
            raise

    def _parse(self, value: str) -> URI:
        scheme, position = self.parse_scheme(value)

        authority: Optional[Authority] = None
        if value.startswith("//", position):
            start = position + 2
            position = self.find_first(value, self.authority_end_regex, start)
            authority = self.authority_parser.parse(value[start:position])

        end = self.find_first(value, self.path_end_regex, position)
        path = value[position:end]
        position = end

        if authority is None and not path:
            raise MissingScheme(
                value, f"URI {value!r} has neither an authority nor a path"
            )

        query: Optional[QueryMap] = None
        if value.startswith("?", position):
            end = self.find_first(value, self.query_end_regex, position + 1)
            query = self.query_parser.parse(value[position + 1 : end])
            position = end

        fragment: Optional[str] = None
        if value.startswith("#", position):
            fragment = value[position + 1 :]

        log.trace(  # type: ignore
            f"{value!r} -> scheme={scheme!r} authority={authority!r} "
            f"path={path!r} query={query!r} fragment={fragment!r}"
        )
        return URI(
            scheme=scheme,
            authority=authority,
            path=path,
            query=query,
            fragment=fragment,
        )

    def parse_scheme(self, value: str) -> Tuple[str, int]:
        """
        Returns the scheme and the position right after its ``:``.
        """
        sep_ind = value.find(":")
        if sep_ind < 1:
            raise MissingScheme(value)

        scheme = value[:sep_ind]
        try:
            self.scheme_parser.parse(scheme)
        except UnexpectedInput as exc:
            raise MissingScheme(value) from exc
        return scheme, sep_ind + 1

    @staticmethod
    def find_first(value: str, regex: Pattern, start: int) -> int:
        match = regex.search(value, start)
        return match.start() if match else len(value)

import logging

from ..query import QueryMap
from ..settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


def parse_query(query: str) -> QueryMap:
    return QueryParser().parse(query)


class QueryParser:
    """
    Splits ``k=v&k1=v1`` into a QueryMap.

    Any text is accepted: empty pairs (``&&``) are skipped, a pair without
    ``=`` maps to an empty value and only the first ``=`` of a pair separates
    the key from the value.

    :Example:

    >>> from auris.parser.query_parser import QueryParser
    >>> QueryParser().parse("a=1&a=2&b")
    <QueryMap {'a': '2', 'b': ''}>
    >>> QueryParser().parse("expr=x=y")
    <QueryMap {'expr': 'x=y'}>
    """

    pair_separator = "&"
    key_separator = "="

    def parse(self, value: str) -> QueryMap:
        pairs = []
        for pair in value.split(self.pair_separator):
            if not pair:
                continue
            key, _, item = pair.partition(self.key_separator)
            pairs.append((key, item))

        log.trace(f"query {value!r} split into {len(pairs)} pairs")  # type: ignore
        return QueryMap(pairs)

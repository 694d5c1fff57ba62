"""
Contains the ordered, read-only mapping used for parsed query strings
"""
from abc import ABCMeta
from collections.abc import Mapping
from typing import Dict
from typing import Iterable
from typing import Iterator
from typing import Optional
from typing import Tuple
from typing import Union

QueryInit = Union["QueryMap", Mapping, Iterable[Tuple[str, str]]]


class MetaQueryMap(ABCMeta):
    def __call__(cls, initial_pairs=None):
        """
        If 'initial pairs' passed through 'QueryMap' is already an instance of 'QueryMap',
        return it rather than creating a new one.
        """
        if isinstance(initial_pairs, QueryMap):
            return initial_pairs
        return super(MetaQueryMap, cls).__call__(initial_pairs)


class QueryMap(Mapping, metaclass=MetaQueryMap):
    """
    Keys are unique, a repeated key overwrites the previous value
    but keeps the position where the key was first seen.

    :Example:

    >>> from auris.query import QueryMap
    >>> QueryMap([("a", "1"), ("b", "2"), ("a", "3")])
    <QueryMap {'a': '3', 'b': '2'}>
    >>> QueryMap({"name": "ferret"}).to_text()
    'name=ferret'
    """

    __slots__ = ("_pairs", "_text")

    def __init__(self, initial_pairs: Optional[QueryInit] = None):
        self._pairs: Dict[str, str] = {}
        self._text: Optional[str] = None

        if initial_pairs:
            if isinstance(initial_pairs, Mapping):
                initial_pairs = initial_pairs.items()
            for key, value in initial_pairs:
                # dict assignment keeps the original insertion position
                self._pairs[key] = value

    def __getitem__(self, key: str) -> str:
        return self._pairs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key) -> bool:
        return key in self._pairs

    def __hash__(self) -> int:
        return hash(frozenset(self._pairs.items()))

    def dict(self) -> Dict[str, str]:
        return dict(self._pairs)

    def to_text(self) -> str:
        if self._text is None:
            self._text = "&".join(
                f"{key}={value}" for key, value in self._pairs.items()
            )
        return self._text

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"<QueryMap {self._pairs}>"

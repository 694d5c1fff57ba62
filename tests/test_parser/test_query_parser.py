import pytest

from auris.parser.query_parser import QueryParser
from auris.parser.query_parser import parse_query
from auris.query import QueryMap


class TestQueryParser:
    @pytest.mark.parametrize(
        argnames=["query", "expected"],
        argvalues=[
            ("", {}),
            ("a=1", {"a": "1"}),
            ("a=1&a=2", {"a": "2"}),
            ("page=42&limit=100", {"page": "42", "limit": "100"}),
            ("&&a=1&&", {"a": "1"}),
            ("&", {}),
            ("flag", {"flag": ""}),
            ("empty=", {"empty": ""}),
            ("=value", {"": "value"}),
            ("expr=x=y=z", {"expr": "x=y=z"}),
            ("q=%20x+y", {"q": "%20x+y"}),
            ("objectClass?one", {"objectClass?one": ""}),
        ]
    )
    def test_query_parsing(self, query_parser, query, expected):
        parsed = query_parser.parse(query)

        assert isinstance(parsed, QueryMap)
        assert parsed == expected
        assert len(parsed) == len(expected)

    def test_duplicate_key_keeps_first_position(self, query_parser):
        parsed = query_parser.parse("a=1&b=2&a=3&c=4")

        assert list(parsed) == ["a", "b", "c"]
        assert list(parsed.items()) == [("a", "3"), ("b", "2"), ("c", "4")]

    def test_duplicate_key_law(self, query_parser):
        parsed = query_parser.parse("a=1&a=2")

        assert len(parsed) == 1
        assert parsed["a"] == "2"

    def test_lookup(self, query_parser):
        parsed = query_parser.parse("name=ferret")

        assert parsed.get("name") == "ferret"
        assert parsed.get("missing") is None
        assert "name" in parsed
        assert "missing" not in parsed
        with pytest.raises(KeyError):
            parsed["missing"]

    def test_never_fails(self, query_parser):
        for query in ("=", "==", "&=&", "#", "?", "a=b&&=&c"):
            assert isinstance(query_parser.parse(query), QueryMap)

    def test_module_function(self):
        assert parse_query("a=1&b=2") == QueryParser().parse("a=1&b=2")

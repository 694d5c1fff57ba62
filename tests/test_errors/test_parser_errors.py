import pytest

import auris
from auris.errors.base import AurisError
from auris.errors.parser import EmptyHost
from auris.errors.parser import InvalidPort
from auris.errors.parser import MissingScheme
from auris.errors.parser import ParseError
from auris.errors.parser import ParseErrorKind


def test_missing_colon_error():
    (text,) = MissingScheme("relative/path").args
    assert text == "Missing or invalid scheme in URI 'relative/path', no `:` found"


def test_scheme_start_error():
    (text,) = MissingScheme("1abc://host").args
    assert text == "Missing or invalid scheme in URI '1abc://host', scheme should start with a letter"


def test_empty_scheme_error():
    (text,) = MissingScheme("://host").args
    assert text == "Missing or invalid scheme in URI '://host', scheme is empty"


def test_scheme_character_error():
    (text,) = MissingScheme("sch eme://host").args
    assert text == "Missing or invalid scheme in URI 'sch eme://host', unexpected character in scheme 'sch eme'"


def test_empty_host_error():
    (text,) = EmptyHost(":8042").args
    assert text == "Authority ':8042' has an empty host"


def test_port_errors():
    (text,) = InvalidPort("abc").args
    assert text == "Port 'abc' should contain only decimal digits"

    (text,) = InvalidPort("70000").args
    assert text == "Port 70000 is out of range (0-65535)"

    (text,) = InvalidPort("").args
    assert text == "Port is empty"


def test_explicit_message():
    error = EmptyHost(":1", "custom text")
    assert error.args == ("custom text",)
    assert error.value == ":1"


@pytest.mark.parametrize(
    "error, kind",
    [
        (MissingScheme, ParseErrorKind.MISSING_SCHEME),
        (EmptyHost, ParseErrorKind.EMPTY_HOST),
        (InvalidPort, ParseErrorKind.INVALID_PORT),
    ],
)
def test_error_kinds(error, kind):
    exc = error("value")

    assert exc.kind is kind
    assert isinstance(exc, ParseError)
    assert isinstance(exc, AurisError)
    assert isinstance(exc, ValueError)


@pytest.mark.parametrize(
    "url, kind",
    [
        ("relative/path", ParseErrorKind.MISSING_SCHEME),
        ("scheme://:8042/path", ParseErrorKind.EMPTY_HOST),
        ("scheme://host:abc/path", ParseErrorKind.INVALID_PORT),
    ],
)
def test_parse_error_kind(url, kind):
    with pytest.raises(ParseError) as exc_info:
        auris.parse(url)
    assert exc_info.value.kind is kind


def test_first_failing_check_wins():
    # scheme is checked before the authority
    with pytest.raises(MissingScheme):
        auris.parse("1bad://:abc")
    # port is checked before the host
    with pytest.raises(InvalidPort):
        auris.parse("scheme://:abc")

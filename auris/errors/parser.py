from enum import Enum
from typing import Optional

from .base import AurisError


class ParseErrorKind(Enum):
    MISSING_SCHEME = "MissingScheme"
    EMPTY_HOST = "EmptyHost"
    INVALID_PORT = "InvalidPort"


class ParseError(AurisError, ValueError):
    """
    Raised when a text can't be parsed as an absolute URI.

    ``value`` is the text the failing check looked at: the whole URI for
    scheme errors, the authority for host errors and the port text for
    port errors.
    """

    kind: Optional[ParseErrorKind] = None

    def __init__(self, value: str, text: Optional[str] = None):
        self.value = value
        if text is None:
            text = self.describe(value)
        super(ParseError, self).__init__(text)

    @classmethod
    def describe(cls, value: str) -> str:
        return f"Can't parse {value!r} as URI"


class MissingScheme(ParseError):
    kind = ParseErrorKind.MISSING_SCHEME

    @classmethod
    def describe(cls, value: str) -> str:
        text = f"Missing or invalid scheme in URI {value!r}"

        colon = value.find(":")
        if colon == -1:
            return f"{text}, no `:` found"

        candidate = value[:colon]
        if not candidate:
            return f"{text}, scheme is empty"
        if not candidate[0].isascii() or not candidate[0].isalpha():
            return f"{text}, scheme should start with a letter"
        return f"{text}, unexpected character in scheme {candidate!r}"


class EmptyHost(ParseError):
    kind = ParseErrorKind.EMPTY_HOST

    @classmethod
    def describe(cls, value: str) -> str:
        return f"Authority {value!r} has an empty host"


class InvalidPort(ParseError):
    kind = ParseErrorKind.INVALID_PORT

    @classmethod
    def describe(cls, value: str) -> str:
        if not value:
            return "Port is empty"
        if all(char in "0123456789" for char in value):
            return f"Port {value} is out of range (0-65535)"
        return f"Port {value!r} should contain only decimal digits"

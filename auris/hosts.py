import ipaddress
import logging
from enum import Enum
from typing import Optional
from typing import Union

import dns.exception
import dns.name

from .errors.hosts import InvalidHostName
from .settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class HostKind(Enum):
    DOMAIN = "domain"
    IPV4 = "ipv4"
    IPV6 = "ipv6"


class Host:
    """
    Classified host of an authority.

    ``text`` is the host exactly as it appeared in the URI, IPv6 literals keep
    their brackets. ``address`` is set for IP hosts only.
    """

    __slots__ = ("_text", "_kind", "_address")

    def __init__(
        self, text: str, kind: HostKind, address: Optional[IPAddress] = None
    ):
        self._text = text
        self._kind = kind
        self._address = address

    @property
    def text(self) -> str:
        return self._text

    @property
    def kind(self) -> HostKind:
        return self._kind

    @property
    def address(self) -> Optional[IPAddress]:
        return self._address

    @property
    def is_ip(self) -> bool:
        return self._address is not None

    @property
    def dns_name(self) -> dns.name.Name:
        if self._kind is not HostKind.DOMAIN:
            raise InvalidHostName(
                self._text, f"{self._kind.value} address is not a domain name"
            )
        try:
            return dns.name.from_text(self._text)
        except dns.exception.DNSException as exc:
            raise InvalidHostName(self._text, str(exc)) from exc

    def __eq__(self, other) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return (self._text, self._kind) == (other._text, other._kind)

    def __hash__(self) -> int:
        return hash((self._text, self._kind))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"<Host {self._kind.value} {self._text}>"


def parse_host(text: str) -> Host:
    """
    :Example:

    >>> from auris.hosts import parse_host
    >>> parse_host("192.168.1.1")
    <Host ipv4 192.168.1.1>
    >>> parse_host("[::1]")
    <Host ipv6 [::1]>
    >>> parse_host("example.com")
    <Host domain example.com>
    """
    if text.startswith("[") and text.endswith("]"):
        try:
            address: IPAddress = ipaddress.IPv6Address(text[1:-1])
            return Host(text, HostKind.IPV6, address)
        except ValueError:
            log.debug(f"{text} is bracketed but not an IPv6 address")

    try:
        address = ipaddress.IPv4Address(text)
        return Host(text, HostKind.IPV4, address)
    except ValueError:
        ...

    return Host(text, HostKind.DOMAIN)

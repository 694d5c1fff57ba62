import logging
import re
from typing import Optional
from typing import Tuple

from ..errors.parser import EmptyHost
from ..errors.parser import InvalidPort
from ..settings import LOGGER_NAME
from ..urls import Authority

log = logging.getLogger(LOGGER_NAME)

MAX_PORT = 65535


def parse_authority(authority: str) -> Authority:
    return AuthorityParser().parse(authority)


class AuthorityParser:
    """
    Splits ``userinfo@host:port`` into its parts.

    Userinfo ends at the last ``@``. The port starts after the last ``:``
    unless the host is a bracketed IP literal, in which case the port
    separator has to follow the closing ``]``. Hosts with several colons
    outside brackets are split at the last one.
    """

    port_regex = re.compile(r"[0-9]+")

    def parse(self, value: str) -> Authority:
        userinfo: Optional[str] = None
        host_port = value

        at = value.rfind("@")
        if at != -1:
            userinfo = value[:at]
            host_port = value[at + 1 :]

        host, port_text = self.split_host_port(host_port)
        port = self.parse_port(port_text) if port_text is not None else None

        if not host:
            raise EmptyHost(value)

        log.trace(  # type: ignore
            f"authority {value!r}: userinfo={userinfo!r} host={host!r} port={port}"
        )
        return Authority(host=host, userinfo=userinfo, port=port)

    @staticmethod
    def split_host_port(value: str) -> Tuple[str, Optional[str]]:
        if value.startswith("["):
            closing = value.find("]")
            if closing != -1:
                rest = value[closing + 1 :]
                if not rest:
                    return value, None
                if rest.startswith(":"):
                    return value[: closing + 1], rest[1:]

        sep_ind = value.rfind(":")
        if sep_ind == -1:
            return value, None
        return value[:sep_ind], value[sep_ind + 1 :]

    @classmethod
    def parse_port(cls, value: str) -> int:
        if not cls.port_regex.fullmatch(value):
            raise InvalidPort(value)

        port = int(value)
        if port > MAX_PORT:
            raise InvalidPort(value)
        return port

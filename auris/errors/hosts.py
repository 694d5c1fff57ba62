from .base import AurisError


class InvalidHostName(AurisError, ValueError):
    def __init__(self, host: str, reason: str = ""):
        self.host = host
        text = f"Host {host!r} is not a valid DNS name"
        if reason:
            text += f": {reason}"
        super(InvalidHostName, self).__init__(text)

class AurisError(Exception):
    ...

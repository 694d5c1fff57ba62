import logging
from functools import wraps
from time import perf_counter

from ..settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


def timer(fnc):
    """
    Accumulates the time spent in ``fnc`` and exposes it
    as ``fnc.total`` and ``fnc.calls``.
    """

    @wraps(fnc)
    def inner(*args, **kwargs):
        t1 = perf_counter()
        try:
            return fnc(*args, **kwargs)
        finally:
            inner.total += perf_counter() - t1
            inner.calls += 1
            log.debug(f"{fnc.__name__} take summary {inner.total}")
            log.debug(f"{fnc.__name__} calls count is {inner.calls}")

    inner.total = 0.0  # type: ignore
    inner.calls = 0  # type: ignore
    return inner

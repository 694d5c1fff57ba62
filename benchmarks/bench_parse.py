import sys
import urllib.parse

import rfc3986

import auris
from auris.settings import BENCHMARK_ITERATIONS
from auris.settings import BENCHMARK_SAMPLE_URI
from auris.utils.debug import timer


@timer
def auris_parse(uri):
    return auris.parse(uri)


@timer
def urllib_parse(uri):
    parts = urllib.parse.urlsplit(uri)
    return parts, urllib.parse.parse_qs(parts.query)


@timer
def rfc3986_parse(uri):
    return rfc3986.uri_reference(uri)


def run(function, uri, count):
    for _ in range(count):
        function(uri)
    per_second = count / function.total if function.total else float("inf")
    text = (
        f"{function.__name__:<14} | Uri: {uri} | Parses: {count} | "
        f"Time spent: {function.total:.4f}s | {per_second:,.0f} parses/s"
    )
    print(text)


if __name__ == "__main__":
    uri = sys.argv[1] if len(sys.argv) > 1 else BENCHMARK_SAMPLE_URI
    count = int(sys.argv[2]) if len(sys.argv) > 2 else BENCHMARK_ITERATIONS

    for function in (auris_parse, urllib_parse, rfc3986_parse):
        run(function, uri, count)

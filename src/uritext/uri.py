"""Query-string and path helpers for loosely structured URL text.

Nothing here validates a URL. Inputs are treated as plain text: blank
arguments fall back to a fixed value instead of raising.
"""

from __future__ import annotations

import re
from typing import TypeVar
from urllib.parse import quote

from uritext.utils.text import ascii_lower, is_blank

T = TypeVar("T")

# Unreserved marks kept as-is in URI components, beyond quote()'s always-safe set.
_COMPONENT_SAFE = "!*'()"

_DECIMAL_INT = re.compile(r"\s*[+-]?[0-9]+\s*")


def add_parameter(url: str | None, name: str | None, value: str | None) -> str:
    """Add or replace a query parameter; the value is percent-encoded.

    A replaced parameter moves to the end of the query string. A blank value
    removes the parameter instead.
    """
    new_url = "" if is_blank(url) else url

    if is_blank(name):
        return new_url

    new_url = remove_parameter(new_url, name)
    if is_blank(value):
        return new_url

    separator = "&" if "?" in new_url else "?"
    return f"{new_url}{separator}{name}={quote(value, safe=_COMPONENT_SAFE)}"


def append_forward_slash(value: str | None) -> str:
    """Ensure the value ends with a forward slash."""
    if is_blank(value):
        return "/"
    if value.endswith("/"):
        return value
    return f"{value}/"


def combine(value1: str | None, value2: str | None) -> str | None:
    """Join two URL parts with exactly one slash between them."""
    if is_blank(value1) and is_blank(value2):
        return None

    head = value1[:-1] if value1 and value1.endswith("/") else value1
    tail = value2[1:] if value2 and value2.startswith("/") else value2

    parts = [part for part in (head, tail) if not is_blank(part)]
    return "/".join(parts)


def get_domain_name(url: str | None) -> str | None:
    """Return the last two labels of the host, e.g. any.org for https://www.hello.any.org:80/x.

    A single-label host such as localhost is returned as-is.
    """
    if is_blank(url):
        return None

    host = url.split("?", 1)[0]
    host = host.removeprefix("http://").removeprefix("https://").replace("www.", "", 1)
    host = host.split("/", 1)[0]
    # Drop the port
    host = host.split(":", 1)[0]

    labels = host.split(".")
    if len(labels) == 1:
        return labels[0]
    return ".".join(labels[-2:])


def parse_int_parameter(value: str | None, min_value: int, max_value: int, default: int) -> int:
    """Parse a base-10 integer within [min_value, max_value], falling back to default."""
    if is_blank(value) or not _DECIMAL_INT.fullmatch(value):
        return default

    try:
        result = int(value)
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        return default
    if result < min_value or result > max_value:
        return default
    return result


def parse_string_parameter(value: T | None, default: T) -> T:
    """Return value unless it is None, empty, or whitespace."""
    if is_blank(value):
        return default
    return value


def remove_parameter(url: str | None, parameter_name: str | None) -> str | None:
    """Remove every occurrence of a query parameter, matching names case-insensitively.

    Blank input is returned exactly as given, None included.
    """
    if is_blank(url) or is_blank(parameter_name):
        return url

    path, sep, query = url.partition("?")
    if not sep:
        return url

    target = ascii_lower(parameter_name)
    pairs = query.split("&")
    for i in range(len(pairs) - 1, -1, -1):
        if ascii_lower(pairs[i].split("=", 1)[0]) == target:
            del pairs[i]

    remaining = "&".join(pairs)
    if not remaining:
        return path
    return f"{path}?{remaining}"


class UriTextUtil:
    """Static namespace over the module-level URL helpers."""

    add_parameter = staticmethod(add_parameter)
    append_forward_slash = staticmethod(append_forward_slash)
    combine = staticmethod(combine)
    get_domain_name = staticmethod(get_domain_name)
    parse_int_parameter = staticmethod(parse_int_parameter)
    parse_string_parameter = staticmethod(parse_string_parameter)
    remove_parameter = staticmethod(remove_parameter)

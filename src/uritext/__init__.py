"""uritext: query-string and path helpers for URL text."""

from uritext.uri import (
    UriTextUtil,
    add_parameter,
    append_forward_slash,
    combine,
    get_domain_name,
    parse_int_parameter,
    parse_string_parameter,
    remove_parameter,
)

__all__ = [
    "UriTextUtil",
    "add_parameter",
    "append_forward_slash",
    "combine",
    "get_domain_name",
    "parse_int_parameter",
    "parse_string_parameter",
    "remove_parameter",
]

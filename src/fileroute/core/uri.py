"""Splitting of endpoint URIs into scheme, path part and query options."""

import logging
from dataclasses import dataclass
from typing import Dict
from urllib.parse import parse_qsl, unquote

from ..errors import InvalidUriError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EndpointUri:
    """The raw pieces of ``scheme:[//]path[?query]``."""

    scheme: str
    path_part: str
    query: str = ''
    has_authority_marker: bool = False


def split_uri(uri: str) -> EndpointUri:
    """
    Split an endpoint URI without interpreting its path.

    The ``//`` authority marker is removed from the returned path part and
    reported through ``has_authority_marker``; percent escapes in the path
    are decoded.

    Args:
        uri: Endpoint address, e.g. ``file://inbox/orders?recursive=true``.

    Returns:
        EndpointUri holding the scheme, path part and raw query string.

    Raises:
        InvalidUriError: If the URI is empty or has no scheme.
    """
    if not uri or not uri.strip():
        raise InvalidUriError(uri or '', "URI is empty")

    uri = uri.strip()
    scheme, sep, rest = uri.partition(':')
    if not sep or not scheme:
        raise InvalidUriError(uri, "missing scheme (expected 'scheme:path')")
    if not (scheme[0].isalpha() and all(c.isalnum() or c in '+-.' for c in scheme)):
        raise InvalidUriError(uri, f"invalid scheme '{scheme}'")

    path_part, _, query = rest.partition('?')

    has_authority_marker = path_part.startswith('//')
    if has_authority_marker:
        path_part = path_part[2:]

    return EndpointUri(
        scheme=scheme.lower(),
        path_part=unquote(path_part),
        query=query,
        has_authority_marker=has_authority_marker,
    )


def parse_query(query: str) -> Dict[str, str]:
    """
    Parse a query string into a single-valued option map.

    Blank values are kept so the binder can reject them; when a key is
    repeated the last value wins.

    Args:
        query: Text after the '?' of an endpoint URI.

    Returns:
        Dict of option name to raw string value.
    """
    options: Dict[str, str] = {}
    if not query:
        return options

    for key, value in parse_qsl(query, keep_blank_values=True):
        if key in options:
            logger.debug(f"Option '{key}' given more than once, using last value '{value}'")
        options[key] = value
    return options

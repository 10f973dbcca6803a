"""
Endpoint path helpers.
"""

from urllib.parse import quote

# Segments URL normalization would drop or resolve against the parent path.
# Escaping them does not help: "%2E" is unreserved and gets decoded back.
_UNSAFE_SEGMENTS = {"", ".", ".."}


def escape_path_segment(value: str) -> str:
    """
    Percent-escape a value for use as exactly one URL path segment.

    Characters meaningful to URL parsing (``/``, ``?``, ``#``, ``%`` ...) are
    escaped so an identifier can never change the target path or add a query.

    Raises:
        ValueError: If the value is empty, ``.`` or ``..``

    Examples:
        >>> escape_path_segment("payment/id?test")
        'payment%2Fid%3Ftest'
    """
    value = str(value)
    if value in _UNSAFE_SEGMENTS:
        raise ValueError(f"invalid resource id: {value!r}")
    return quote(value, safe="")


def item_path(endpoint: str, resource_id: str, *suffix: str) -> str:
    """
    Build ``{endpoint}/{escaped id}[/{suffix}...]``.

    Suffixes are static action names and are not escaped.
    """
    parts = [endpoint, escape_path_segment(resource_id)]
    parts.extend(suffix)
    return "/".join(parts)

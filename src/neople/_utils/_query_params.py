"""Query string helpers shared by the transport adapters and URL builders.

Every adapter encodes ``RequestConfig.params`` through :func:`append_query_params`
so the URL sent on the wire is identical whichever HTTP library is used, and
identical to what the URL builders return for the same inputs.
"""

from typing import Any, Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .constants import API_KEY_PARAM


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_params(params: Optional[Mapping[str, Any]]) -> list[tuple[str, str]]:
    """Flatten a parameter mapping into ordered ``(key, value)`` pairs.

    ``None`` values are dropped, lists and tuples become repeated keys in
    their original order and everything else is stringified.
    """
    pairs: list[tuple[str, str]] = []
    if not params:
        return pairs

    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _stringify(item)) for item in value if item is not None)
        else:
            pairs.append((key, _stringify(value)))
    return pairs


def _urlencode(params: Optional[Mapping[str, Any]]) -> str:
    # same character set as the WHATWG form encoder: "*" stays literal, spaces become "+"
    return urlencode(encode_params(params), safe="*")


def build_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """Encode ``params`` as a query string including the leading ``?``.

    Returns an empty string when nothing is left to encode.
    """
    query = _urlencode(params)
    return f"?{query}" if query else ""


def append_query_params(url: str, params: Optional[Mapping[str, Any]]) -> str:
    """Append ``params`` to ``url``, keeping any query the URL already has."""
    query = _urlencode(params)
    if not query:
        return url

    parts = urlsplit(url)
    if parts.query:
        query = f"{parts.query}&{query}"
    return urlunsplit(parts._replace(query=query))


def parse_query_params(url: str) -> dict[str, str]:
    """Decode the query string of ``url`` into a dict.

    Repeated keys keep their last value. Unparsable URLs yield an empty dict.
    """
    try:
        query = urlsplit(url).query
    except ValueError:
        return {}
    return dict(parse_qsl(query, keep_blank_values=True))


def with_api_key(params: Optional[Mapping[str, Any]], api_key: str) -> dict[str, Any]:
    """Return a copy of ``params`` with the API key appended as the last entry."""
    merged = {
        key: value for key, value in (params or {}).items() if key != API_KEY_PARAM
    }
    merged[API_KEY_PARAM] = api_key
    return merged

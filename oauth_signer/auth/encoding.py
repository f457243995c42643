"""
Percent-encoding and canonical query string construction for OAuth 1.0a.

Encoding follows RFC 5849 section 3.6: only the unreserved characters
``A-Z a-z 0-9 - . _ ~`` are left as-is, every other UTF-8 byte becomes
``%XX`` with uppercase hex digits.
"""
from collections.abc import Sequence
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union
from urllib.parse import parse_qs, quote


def percent_encode(value: Any) -> str:
    """
    Percent-encode a value per OAuth 1.0a.

    Unlike a generic URI component encoder this also escapes ``!*'()``.
    Non-string values (e.g. an integer timestamp) are converted with str().

    Args:
        value: Value to encode

    Returns:
        Encoded string
    """
    if not isinstance(value, str):
        value = str(value)
    return quote(value.encode('utf-8'), safe='~')


def to_sorted_items(params: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """
    Return the (key, value) pairs of a mapping sorted by key.

    Args:
        params: Parameter mapping

    Returns:
        List of (key, value) tuples in lexicographic key order
    """
    return sorted(params.items(), key=lambda item: (str(item[0]), percent_encode(item[0])))


def _as_sorted_values(value: Any) -> List[Any]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        values = list(value)
    else:
        values = [value]
    return sorted(values, key=str)


def stringify_query_map(
    params: Mapping[str, Any],
    sep: str = '&',
    eq: str = '=',
    encoder: Callable[[Any], str] = percent_encode
) -> str:
    """
    Build the canonical query string for a parameter mapping.

    Keys are sorted, values of repeated keys are sorted, and each
    (key, value) pair is emitted once, so the output is deterministic
    for any given mapping.

    Args:
        params: Mapping of key to a value or a list of values
        sep: Separator between pairs (default: "&")
        eq: Separator between key and value (default: "=")
        encoder: Escaping function for keys and values

    Returns:
        Canonical query string ("" for an empty mapping)
    """
    out = []

    for key, value in to_sorted_items(params):
        encoded_key = encoder(key)
        # Repeated keys are emitted once per value
        for item in _as_sorted_values(value):
            out.append(f"{encoded_key}{eq}{encoder(item)}")

    return sep.join(out)


def build_query_string(data: Mapping[str, Any]) -> str:
    """
    Build a form-encoded query string escaped the OAuth way.

    Useful for sending OAuth parameters in a POST body or query string.

    Args:
        data: Parameters to encode

    Returns:
        Canonical query string
    """
    return stringify_query_map(data or {})


def parse_query_string(query: str) -> Dict[str, Union[str, List[str]]]:
    """
    Parse a form-encoded string, such as a provider's token response.

    Keys appearing once map to a string, repeated keys map to a list.
    Blank values are kept.

    Args:
        query: Form-encoded string (a leading "?" is ignored)

    Returns:
        Dictionary of parsed parameters
    """
    if query.startswith('?'):
        query = query[1:]

    parsed = parse_qs(query, keep_blank_values=True, separator='&')
    return {
        key: values[0] if len(values) == 1 else values
        for key, values in parsed.items()
    }

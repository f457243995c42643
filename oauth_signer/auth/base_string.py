"""
Signature base string construction (RFC 5849 section 3.4.1).
"""
from typing import Any, Dict, List, Mapping, Union
from urllib.parse import parse_qs

from ..models.request import SigningRequest
from .encoding import percent_encode, stringify_query_map


def get_base_url(url: str) -> str:
    """
    Strip the query component from a URL.

    Args:
        url: Request URL

    Returns:
        Everything before the first "?"
    """
    return url.split('?', 1)[0]


def get_url_query_params(url: str) -> Dict[str, Union[str, List[str]]]:
    """
    Parse the query component of a URL into a parameter mapping.

    Blank values are kept and repeated keys become lists.

    Args:
        url: Request URL

    Returns:
        Dictionary of query parameters (empty if the URL has no query)
    """
    if '?' not in url:
        return {}

    query = url.split('?', 1)[1]
    # A fragment is not part of the request target
    query = query.split('#', 1)[0]

    parsed = parse_qs(query, keep_blank_values=True, separator='&')
    return {
        key: values[0] if len(values) == 1 else values
        for key, values in parsed.items()
    }


def get_parameter_string(request: SigningRequest, oauth_params: Mapping[str, Any]) -> str:
    """
    Build the normalized parameter string of the base string.

    Parameters are merged in this order, later sources replacing earlier
    ones on the same key: URL query, request data, OAuth parameters.

    Args:
        request: Request being signed
        oauth_params: OAuth protocol parameters (without oauth_signature)

    Returns:
        Canonical parameter string
    """
    params: Dict[str, Any] = {}
    params.update(get_url_query_params(request.url))
    params.update(request.data or {})
    params.update(oauth_params)

    return stringify_query_map(params)


def build_base_string(request: SigningRequest, oauth_params: Mapping[str, Any]) -> str:
    """
    Build the signature base string.

    Format: METHOD&encoded-base-url&encoded-parameter-string

    Args:
        request: Request being signed
        oauth_params: OAuth protocol parameters (without oauth_signature)

    Returns:
        String to be handed to the signer
    """
    parts = [
        request.method.upper(),
        get_base_url(request.url),
        get_parameter_string(request, oauth_params)
    ]
    return '&'.join(percent_encode(part) for part in parts)

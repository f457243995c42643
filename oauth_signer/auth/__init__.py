"""
OAuth 1.0a signing components.
"""
from .encoding import (
    percent_encode,
    stringify_query_map,
    to_sorted_items,
    build_query_string,
    parse_query_string,
)
from .base_string import build_base_string, get_base_url, get_parameter_string
from .signing_key import build_signing_key
from .signers import SIGNERS, get_signer, supported_methods
from .nonce import generate_nonce
from .authorizer import Authorizer

__all__ = [
    'percent_encode',
    'stringify_query_map',
    'to_sorted_items',
    'build_query_string',
    'parse_query_string',
    'build_base_string',
    'get_base_url',
    'get_parameter_string',
    'build_signing_key',
    'SIGNERS',
    'get_signer',
    'supported_methods',
    'generate_nonce',
    'Authorizer',
]

"""
OAuth 1.0a request signing.
"""
from .auth import Authorizer, percent_encode, build_query_string, parse_query_string
from .config import OAuthConfig, load_config_from_env
from .exceptions import OAuthSignerError, ConfigurationError, UnsupportedAlgorithmError
from .models import Consumer, Token, SigningRequest, SignatureMethod

__all__ = [
    'Authorizer',
    'percent_encode',
    'build_query_string',
    'parse_query_string',
    'OAuthConfig',
    'load_config_from_env',
    'OAuthSignerError',
    'ConfigurationError',
    'UnsupportedAlgorithmError',
    'Consumer',
    'Token',
    'SigningRequest',
    'SignatureMethod',
]

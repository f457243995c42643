"""
Signer configuration and environment loading.
"""
import os
from typing import Optional, Mapping
from dataclasses import dataclass
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .models.credentials import Consumer
from .models.signature_method import SignatureMethod

DEFAULT_NONCE_LENGTH = 32
DEFAULT_SIGNATURE_METHOD = SignatureMethod.HMAC_SHA1.value
DEFAULT_VERSION = '1.0'
DEFAULT_HEADER_SEPARATOR = ', '


@dataclass(frozen=True)
class OAuthConfig:
    """
    Per-Authorizer configuration, fixed at construction.

    Attributes:
        consumer: Consumer credential (required)
        nonce_length: Length of generated oauth_nonce values (default: 32)
        signature_method: Signature method name (default: "HMAC-SHA1")
        version: oauth_version value (default: "1.0")
        trailing_ampersand: Keep the "&" in the signing key when there is
                            no token secret (default: True)
        header_separator: Separator between Authorization header pairs (default: ", ")
    """
    consumer: Consumer
    nonce_length: int = DEFAULT_NONCE_LENGTH
    signature_method: str = DEFAULT_SIGNATURE_METHOD
    version: str = DEFAULT_VERSION
    trailing_ampersand: bool = True
    header_separator: str = DEFAULT_HEADER_SEPARATOR

    def __post_init__(self) -> None:
        if not isinstance(self.consumer, Consumer):
            object.__setattr__(self, 'consumer', Consumer.coerce(self.consumer))
        if isinstance(self.signature_method, SignatureMethod):
            object.__setattr__(self, 'signature_method', self.signature_method.value)
        if isinstance(self.nonce_length, bool) or not isinstance(self.nonce_length, int) or self.nonce_length <= 0:
            raise ConfigurationError("nonce_length must be a positive integer")
        if not isinstance(self.version, str):
            raise ConfigurationError("version must be a string")
        if not isinstance(self.trailing_ampersand, bool):
            raise ConfigurationError("trailing_ampersand must be a boolean")
        if not isinstance(self.header_separator, str):
            raise ConfigurationError("header_separator must be a string")

    @classmethod
    def from_dict(cls, data: Mapping) -> 'OAuthConfig':
        """
        Create an OAuthConfig from a dictionary of options.

        Unset options fall back to their defaults.

        Args:
            data: Dictionary with ``consumer`` and optional settings

        Returns:
            OAuthConfig instance

        Raises:
            ConfigurationError: If the consumer is missing or invalid
        """
        return cls(
            consumer=Consumer.coerce(data.get('consumer')),
            nonce_length=data.get('nonce_length', DEFAULT_NONCE_LENGTH),
            signature_method=data.get('signature_method', DEFAULT_SIGNATURE_METHOD),
            version=data.get('version', DEFAULT_VERSION),
            trailing_ampersand=data.get('trailing_ampersand', True),
            header_separator=data.get('header_separator', DEFAULT_HEADER_SEPARATOR)
        )

    def to_dict(self) -> dict:
        """
        Convert to a dictionary. The consumer secret is omitted.

        Returns:
            Dictionary representation suitable for logging
        """
        return {
            'consumer_key': self.consumer.key,
            'nonce_length': self.nonce_length,
            'signature_method': self.signature_method,
            'version': self.version,
            'trailing_ampersand': self.trailing_ampersand,
            'header_separator': self.header_separator
        }


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ('1', 'true', 'yes', 'on'):
        return True
    if lowered in ('0', 'false', 'no', 'off'):
        return False
    raise ConfigurationError(f"{name} must be true or false, got {value!r}")


def load_config_from_env(environ: Optional[Mapping[str, str]] = None) -> OAuthConfig:
    """
    Create an OAuthConfig from environment variables.

    Variables from a .env file are loaded first.

    Environment variables:
        OAUTH_CONSUMER_KEY: Consumer key (required)
        OAUTH_CONSUMER_SECRET: Consumer secret (required)
        OAUTH_NONCE_LENGTH: Nonce length (default: 32)
        OAUTH_SIGNATURE_METHOD: Signature method (default: HMAC-SHA1)
        OAUTH_VERSION: OAuth version (default: 1.0)
        OAUTH_TRAILING_AMPERSAND: true/false (default: true)
        OAUTH_HEADER_SEPARATOR: Header pair separator (default: ", ")

    Args:
        environ: Mapping to read instead of os.environ (for testing)

    Returns:
        OAuthConfig instance

    Raises:
        ConfigurationError: If a required variable is missing or a value is malformed
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    consumer_key = environ.get('OAUTH_CONSUMER_KEY')
    consumer_secret = environ.get('OAUTH_CONSUMER_SECRET')

    if not consumer_key:
        raise ConfigurationError("OAUTH_CONSUMER_KEY environment variable is required")
    if consumer_secret is None:
        raise ConfigurationError("OAUTH_CONSUMER_SECRET environment variable is required")

    nonce_length_raw = environ.get('OAUTH_NONCE_LENGTH', str(DEFAULT_NONCE_LENGTH))
    try:
        nonce_length = int(nonce_length_raw)
    except ValueError:
        raise ConfigurationError(f"OAUTH_NONCE_LENGTH must be an integer, got {nonce_length_raw!r}") from None

    trailing_ampersand = _parse_bool(
        'OAUTH_TRAILING_AMPERSAND',
        environ.get('OAUTH_TRAILING_AMPERSAND', 'true')
    )

    return OAuthConfig(
        consumer=Consumer(key=consumer_key, secret=consumer_secret),
        nonce_length=nonce_length,
        signature_method=environ.get('OAUTH_SIGNATURE_METHOD', DEFAULT_SIGNATURE_METHOD),
        version=environ.get('OAUTH_VERSION', DEFAULT_VERSION),
        trailing_ampersand=trailing_ampersand,
        header_separator=environ.get('OAUTH_HEADER_SEPARATOR', DEFAULT_HEADER_SEPARATOR)
    )

"""
Exception types raised by the OAuth signer.
"""
from typing import Iterable, Optional


class OAuthSignerError(Exception):
    """Base class for all signer errors."""


class ConfigurationError(OAuthSignerError, ValueError):
    """
    Raised when required configuration is missing or malformed.

    Covers the consumer credential, request and token shapes, and values
    loaded from the environment.
    """


class UnsupportedAlgorithmError(OAuthSignerError, ValueError):
    """
    Raised when a signature method is not present in the signer registry.

    Attributes:
        method: The requested signature method name
        supported: Names of the supported signature methods
    """

    def __init__(self, method: str, supported: Iterable[str], message: Optional[str] = None):
        self.method = method
        self.supported = list(supported)
        if message is None:
            message = f"Hash type {method} not supported. Supported: {self.supported}"
        super().__init__(message)

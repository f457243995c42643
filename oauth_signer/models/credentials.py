"""
Consumer and token credential models.
"""
from typing import Optional, Union, Mapping
from dataclasses import dataclass

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class Consumer:
    """
    Consumer credential issued by the service provider.

    Attributes:
        key: Consumer key (sent as oauth_consumer_key)
        secret: Consumer secret (first half of the signing key)
    """
    key: str
    secret: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise ConfigurationError("consumer key is required")
        if not isinstance(self.secret, str):
            raise ConfigurationError("consumer secret must be a string")

    @classmethod
    def from_dict(cls, data: Mapping) -> 'Consumer':
        """
        Create a Consumer from a dictionary.

        Accepts either ``key`` or the legacy ``public`` name for the consumer key.

        Args:
            data: Dictionary containing consumer credential data

        Returns:
            Consumer instance
        """
        key = data.get('key')
        if key is None:
            key = data.get('public')
        return cls(key=key, secret=data.get('secret'))

    @classmethod
    def coerce(cls, value: Union['Consumer', Mapping, None]) -> 'Consumer':
        """
        Normalize a consumer given as a Consumer or a mapping.

        Raises:
            ConfigurationError: If no consumer was supplied
        """
        if value is None:
            raise ConfigurationError("consumer option is required")
        if isinstance(value, Consumer):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise ConfigurationError(f"consumer must be a Consumer or a mapping, got {type(value).__name__}")

    def to_dict(self) -> dict:
        return {
            'key': self.key,
            'secret': self.secret
        }

    def __repr__(self) -> str:
        return f"Consumer(key={self.key!r}, secret='***')"


@dataclass(frozen=True)
class Token:
    """
    User token, supplied per signing call.

    Attributes:
        key: Token key (sent as oauth_token), if any
        secret: Token secret (second half of the signing key), if any
    """
    key: Optional[str] = None
    secret: Optional[str] = None

    def __post_init__(self) -> None:
        if self.key is not None and not isinstance(self.key, str):
            raise ConfigurationError("token key must be a string")
        if self.secret is not None and not isinstance(self.secret, str):
            raise ConfigurationError("token secret must be a string")

    @classmethod
    def from_dict(cls, data: Mapping) -> 'Token':
        """
        Create a Token from a dictionary.

        Accepts either ``key`` or the legacy ``public`` name for the token key.

        Args:
            data: Dictionary containing token data

        Returns:
            Token instance
        """
        key = data.get('key')
        if key is None:
            key = data.get('public')
        return cls(key=key, secret=data.get('secret'))

    @classmethod
    def coerce(cls, value: Union['Token', Mapping, None]) -> 'Token':
        """Normalize an optional token given as a Token, a mapping, or None."""
        if value is None:
            return cls()
        if isinstance(value, Token):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise ConfigurationError(f"token must be a Token or a mapping, got {type(value).__name__}")

    def to_dict(self) -> dict:
        return {
            'key': self.key,
            'secret': self.secret
        }

    def __repr__(self) -> str:
        secret = None if self.secret is None else '***'
        return f"Token(key={self.key!r}, secret={secret!r})"

"""
SigningRequest model describing the HTTP request to be signed.
"""
from typing import Optional, Union, Mapping, Sequence
from dataclasses import dataclass

from ..exceptions import ConfigurationError

ParamValue = Union[str, Sequence[str]]


@dataclass(frozen=True)
class SigningRequest:
    """
    HTTP request description consumed by the signing pipeline.

    Attributes:
        method: HTTP method (GET, POST, ...); case-insensitive
        url: Request URL, optionally carrying a query string
        data: Body or additional parameters. Values are strings or
              sequences of strings for repeated keys.
    """
    method: str
    url: str
    data: Optional[Mapping[str, ParamValue]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.method, str) or not self.method:
            raise ConfigurationError("request method is required")
        if not isinstance(self.url, str) or not self.url:
            raise ConfigurationError("request url is required")
        if self.data is not None and not isinstance(self.data, Mapping):
            raise ConfigurationError("request data must be a mapping")

    @classmethod
    def from_dict(cls, data: Mapping) -> 'SigningRequest':
        """
        Create a SigningRequest from a dictionary.

        Args:
            data: Dictionary with ``method``, ``url`` and optional ``data``

        Returns:
            SigningRequest instance
        """
        return cls(
            method=data.get('method'),
            url=data.get('url'),
            data=data.get('data')
        )

    @classmethod
    def coerce(cls, value: Union['SigningRequest', Mapping]) -> 'SigningRequest':
        """Normalize a request given as a SigningRequest or a mapping."""
        if isinstance(value, SigningRequest):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise ConfigurationError(f"request must be a SigningRequest or a mapping, got {type(value).__name__}")

    def to_dict(self) -> dict:
        return {
            'method': self.method,
            'url': self.url,
            'data': dict(self.data) if self.data is not None else None
        }

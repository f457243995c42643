"""
OAuth 1.0a request authorizer.
"""
import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional, Union

from ..config import (
    OAuthConfig,
    DEFAULT_NONCE_LENGTH,
    DEFAULT_SIGNATURE_METHOD,
    DEFAULT_VERSION,
    DEFAULT_HEADER_SEPARATOR,
)
from ..exceptions import ConfigurationError
from ..models.credentials import Consumer, Token
from ..models.request import SigningRequest
from ..monitoring import track_signing
from .base_string import build_base_string, get_base_url
from .encoding import build_query_string, percent_encode, to_sorted_items
from .nonce import generate_nonce
from .signers import get_signer
from .signing_key import build_signing_key

logger = logging.getLogger(__name__)

RequestLike = Union[SigningRequest, Mapping[str, Any]]
TokenLike = Union[Token, Mapping[str, Any], None]


class Authorizer:
    """
    OAuth 1.0a signature generator.

    Handles the complete signing flow:
    1. Build OAuth metadata (consumer key, nonce, timestamp, method, version, token)
    2. Build the signature base string from the request and metadata
    3. Derive the signing key from the consumer and token secrets
    4. Sign with the configured algorithm
    5. Return the metadata with oauth_signature, or render it as a header

    The signer is resolved at construction and nothing else is stored, so
    one instance can sign concurrently from several threads.
    """

    def __init__(
        self,
        config: Optional[OAuthConfig] = None,
        *,
        consumer: Union[Consumer, Mapping[str, str], None] = None,
        nonce_length: int = DEFAULT_NONCE_LENGTH,
        signature_method: str = DEFAULT_SIGNATURE_METHOD,
        version: str = DEFAULT_VERSION,
        trailing_ampersand: bool = True,
        header_separator: str = DEFAULT_HEADER_SEPARATOR,
        clock: Optional[Callable[[], float]] = None,
        nonce_generator: Optional[Callable[[int], str]] = None
    ):
        """
        Initialize the authorizer.

        Either pass a complete OAuthConfig, or a consumer plus keyword options.

        Args:
            config: Complete configuration. Cannot be combined with consumer or
                    non-default keyword options.
            consumer: Consumer credential, as a Consumer or {'key', 'secret'} mapping
            nonce_length: Length of oauth_nonce (default: 32)
            signature_method: "HMAC-SHA1", "HMAC-SHA256" or "PLAINTEXT" (default: "HMAC-SHA1")
            version: oauth_version value (default: "1.0")
            trailing_ampersand: Keep trailing "&" in the signing key without a token secret
            header_separator: Separator between header pairs (default: ", ")
            clock: Returns the current Unix time in seconds (default: time.time)
            nonce_generator: Returns a nonce of the given length (default: generate_nonce)

        Raises:
            ConfigurationError: If no consumer credential is supplied, or if
                config is combined with consumer or keyword options
            UnsupportedAlgorithmError: If the signature method is not supported
        """
        if config is not None:
            overrides = {
                'consumer': consumer is not None,
                'nonce_length': nonce_length != DEFAULT_NONCE_LENGTH,
                'signature_method': signature_method != DEFAULT_SIGNATURE_METHOD,
                'version': version != DEFAULT_VERSION,
                'trailing_ampersand': trailing_ampersand is not True,
                'header_separator': header_separator != DEFAULT_HEADER_SEPARATOR,
            }
            conflicting = [name for name, given in overrides.items() if given]
            if conflicting:
                raise ConfigurationError(
                    f"config cannot be combined with keyword options: {', '.join(conflicting)}"
                )
        else:
            if consumer is None:
                raise ConfigurationError("consumer option is required")
            config = OAuthConfig(
                consumer=Consumer.coerce(consumer),
                nonce_length=nonce_length,
                signature_method=signature_method,
                version=version,
                trailing_ampersand=trailing_ampersand,
                header_separator=header_separator
            )

        self.config = config
        self._signer = get_signer(config.signature_method)
        self._clock = clock or time.time
        self._nonce_generator = nonce_generator or generate_nonce

        logger.info("OAuth authorizer initialized", extra={
            'consumer_key': config.consumer.key,
            'signature_method': config.signature_method
        })

    @track_signing
    def authorize(self, request: RequestLike, token: TokenLike = None) -> Dict[str, Any]:
        """
        Create OAuth signing data for a request.

        Args:
            request: Request to sign (SigningRequest or {'method', 'url', 'data'} mapping)
            token: Optional user token (Token or {'key', 'secret'} mapping)

        Returns:
            OAuth parameters including oauth_signature, in this order:
            oauth_consumer_key, oauth_nonce, oauth_signature_method,
            oauth_timestamp, oauth_version, [oauth_token], oauth_signature
        """
        request = SigningRequest.coerce(request)
        token = Token.coerce(token)

        oauth_data = self._get_oauth_data(token)
        oauth_data['oauth_signature'] = self.get_signature(request, token.secret, oauth_data)

        logger.debug("Signed OAuth request", extra={
            'method': request.method.upper(),
            'base_url': get_base_url(request.url),
            'signature_method': self.config.signature_method,
            'oauth_nonce': oauth_data['oauth_nonce']
        })

        return oauth_data

    def get_signature(
        self,
        request: RequestLike,
        token_secret: Optional[str],
        oauth_data: Mapping[str, Any]
    ) -> str:
        """
        Create oauth_signature for a request.

        Usually you want authorize() instead. This is for callers that build
        their own OAuth metadata. The signature is always computed with this
        instance's signer, whatever oauth_signature_method says.

        Args:
            request: Request to sign
            token_secret: Token secret, if any
            oauth_data: OAuth parameters, without oauth_signature

        Returns:
            Value for oauth_signature
        """
        request = SigningRequest.coerce(request)
        return self._signer(
            self.get_base_string(request, oauth_data),
            self.get_signing_key(token_secret)
        )

    def get_base_string(self, request: RequestLike, oauth_data: Mapping[str, Any]) -> str:
        """
        Build the signature base string for a request.

        Args:
            request: Request to sign
            oauth_data: OAuth parameters, without oauth_signature

        Returns:
            Signature base string
        """
        return build_base_string(SigningRequest.coerce(request), oauth_data)

    def get_signing_key(self, token_secret: Optional[str] = None) -> str:
        """
        Build the signing key from the consumer secret and a token secret.

        Args:
            token_secret: Token secret, if any

        Returns:
            Signing key
        """
        return build_signing_key(
            self.config.consumer.secret,
            token_secret,
            trailing_ampersand=self.config.trailing_ampersand
        )

    def get_header(self, request: RequestLike, token: TokenLike = None) -> str:
        """
        Sign a request and render the Authorization header value.

        Args:
            request: Request to sign
            token: Optional user token

        Returns:
            Authorization header value
        """
        return self.to_header_value(self.authorize(request, token))

    def to_header_value(self, oauth_data: Mapping[str, Any]) -> str:
        """
        Render OAuth parameters as an Authorization header value.

        Format: OAuth k1="v1", k2="v2", ... with keys sorted and keys and
        values percent-encoded.

        Args:
            oauth_data: OAuth parameters as returned by authorize()

        Returns:
            Authorization header value
        """
        params = [
            f'{percent_encode(key)}="{percent_encode(value)}"'
            for key, value in to_sorted_items(oauth_data)
        ]
        return f"OAuth {self.config.header_separator.join(params)}"

    def to_header(self, oauth_data: Mapping[str, Any]) -> Dict[str, str]:
        """
        Render OAuth parameters as a headers dictionary.

        Args:
            oauth_data: OAuth parameters as returned by authorize()

        Returns:
            {'Authorization': header value}
        """
        return {'Authorization': self.to_header_value(oauth_data)}

    def build_query_string(self, data: Mapping[str, Any]) -> str:
        """
        Build a query string escaped per OAuth, e.g. for a POST body.

        Args:
            data: Parameters to encode

        Returns:
            Canonical query string
        """
        return build_query_string(data)

    def _get_oauth_data(self, token: Token) -> Dict[str, Any]:
        """
        Create new OAuth metadata without a signature.

        Args:
            token: User token (oauth_token is only added if it has a key)

        Returns:
            OAuth parameters dictionary
        """
        oauth_data = {
            'oauth_consumer_key': self.config.consumer.key,
            'oauth_nonce': self._get_nonce(),
            'oauth_signature_method': self.config.signature_method,
            'oauth_timestamp': self._get_timestamp(),
            'oauth_version': self.config.version,
        }

        if token.key:
            oauth_data['oauth_token'] = token.key

        return oauth_data

    def _get_nonce(self) -> str:
        return self._nonce_generator(self.config.nonce_length)

    def _get_timestamp(self) -> int:
        """Current time in whole seconds."""
        return int(self._clock())

"""
Signing key derivation from the consumer and token secrets.
"""
from typing import Optional

from .encoding import percent_encode


def build_signing_key(
    consumer_secret: str,
    token_secret: Optional[str] = None,
    trailing_ampersand: bool = True
) -> str:
    """
    Build the key used by the HMAC and PLAINTEXT signers.

    The key is ``consumer_secret&token_secret``. When there is no token
    secret the trailing "&" is still added unless ``trailing_ampersand``
    is disabled, for providers that reject it.

    Args:
        consumer_secret: Consumer secret
        token_secret: Optional token secret
        trailing_ampersand: Whether to keep the "&" without a token secret

    Returns:
        Signing key
    """
    parts = [consumer_secret]

    if trailing_ampersand or token_secret:
        parts.append(token_secret or '')

    return '&'.join(percent_encode(part) for part in parts)

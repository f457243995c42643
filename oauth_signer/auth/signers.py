"""
Registry of OAuth signature algorithms.

Each signer is a pure function ``(base_string, key) -> signature``.
"""
import base64
import hashlib
import hmac
from types import MappingProxyType
from typing import Callable, List, Mapping, Union

from ..exceptions import UnsupportedAlgorithmError
from ..models.signature_method import SignatureMethod

SignerFunc = Callable[[str, str], str]


def _hmac_base64(base_string: str, key: str, digestmod) -> str:
    digest = hmac.new(
        key.encode('utf-8'),
        base_string.encode('utf-8'),
        digestmod
    ).digest()
    return base64.b64encode(digest).decode('ascii')


def sign_hmac_sha1(base_string: str, key: str) -> str:
    """Sign with HMAC-SHA1, base64-encoded."""
    return _hmac_base64(base_string, key, hashlib.sha1)


def sign_hmac_sha256(base_string: str, key: str) -> str:
    """Sign with HMAC-SHA256, base64-encoded."""
    return _hmac_base64(base_string, key, hashlib.sha256)


def sign_plaintext(base_string: str, key: str) -> str:
    """
    PLAINTEXT signature: the signing key itself.

    Only safe over a TLS-protected transport.
    """
    return key


SIGNERS: Mapping[SignatureMethod, SignerFunc] = MappingProxyType({
    SignatureMethod.HMAC_SHA1: sign_hmac_sha1,
    SignatureMethod.HMAC_SHA256: sign_hmac_sha256,
    SignatureMethod.PLAINTEXT: sign_plaintext,
})


def supported_methods() -> List[str]:
    """Names of the registered signature methods, in registry order."""
    return [method.value for method in SIGNERS]


def get_signer(method: Union[str, SignatureMethod]) -> SignerFunc:
    """
    Look up a signer by signature method name.

    Args:
        method: Signature method name (e.g. "HMAC-SHA1") or SignatureMethod

    Returns:
        Signing function

    Raises:
        UnsupportedAlgorithmError: If the method is not registered
    """
    try:
        return SIGNERS[SignatureMethod(method)]
    except (ValueError, KeyError):
        raise UnsupportedAlgorithmError(str(method), supported_methods()) from None

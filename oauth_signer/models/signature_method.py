"""
SignatureMethod enum for the supported OAuth signing algorithms.
"""
from enum import Enum


class SignatureMethod(Enum):
    """
    Signature methods understood by the signer registry.

    HMAC-SHA256 is not part of RFC 5849 but is accepted by some providers.
    """
    HMAC_SHA1 = "HMAC-SHA1"
    HMAC_SHA256 = "HMAC-SHA256"
    PLAINTEXT = "PLAINTEXT"

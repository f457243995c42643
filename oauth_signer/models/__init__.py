"""
Data models for the OAuth signer.
"""
from .signature_method import SignatureMethod
from .credentials import Consumer, Token
from .request import SigningRequest, ParamValue

__all__ = [
    'SignatureMethod',
    'Consumer',
    'Token',
    'SigningRequest',
    'ParamValue',
]

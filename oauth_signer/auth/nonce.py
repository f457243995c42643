"""
Nonce generation for oauth_nonce.
"""
import secrets
import string

NONCE_ALPHABET = string.ascii_letters + string.digits


def generate_nonce(length: int = 32) -> str:
    """
    Generate a random alphanumeric nonce.

    Args:
        length: Number of characters (default: 32)

    Returns:
        Nonce string
    """
    return ''.join(secrets.choice(NONCE_ALPHABET) for _ in range(length))

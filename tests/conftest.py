"""
Pytest configuration and fixtures for OAuth signer tests.
Uses the Twitter "Authorizing a request" sample so signatures can be checked
against published values.
"""
import pytest

from oauth_signer import Authorizer, Consumer, Token, SigningRequest


TWITTER_CONSUMER_KEY = 'xvz1evFS4wEEPTGEFPHBog'
TWITTER_CONSUMER_SECRET = 'kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw'
TWITTER_TOKEN_KEY = '370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb'
TWITTER_TOKEN_SECRET = 'LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE'
TWITTER_NONCE = 'kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg'
TWITTER_TIMESTAMP = 1318622958


def make_authorizer(**options) -> Authorizer:
    """
    Build an Authorizer with the Twitter consumer and a fixed clock and nonce.
    """
    options.setdefault('consumer', Consumer(
        key=TWITTER_CONSUMER_KEY,
        secret=TWITTER_CONSUMER_SECRET
    ))
    return Authorizer(
        clock=lambda: TWITTER_TIMESTAMP,
        nonce_generator=lambda length: TWITTER_NONCE,
        **options
    )


@pytest.fixture
def twitter_authorizer():
    """Authorizer with fixed nonce and timestamp, HMAC-SHA1."""
    return make_authorizer()


@pytest.fixture
def twitter_token():
    """User token from the Twitter sample."""
    return Token(key=TWITTER_TOKEN_KEY, secret=TWITTER_TOKEN_SECRET)


@pytest.fixture
def twitter_request():
    """Status update request from the Twitter sample."""
    return SigningRequest(
        method='POST',
        url='https://api.twitter.com/1/statuses/update.json?include_entities=true',
        data={'status': 'Hello Ladies + Gentlemen, a signed OAuth request!'}
    )


TWITTER_BASE_STRING = (
    'POST&https%3A%2F%2Fapi.twitter.com%2F1%2Fstatuses%2Fupdate.json&'
    'include_entities%3Dtrue%26'
    'oauth_consumer_key%3Dxvz1evFS4wEEPTGEFPHBog%26'
    'oauth_nonce%3DkYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg%26'
    'oauth_signature_method%3DHMAC-SHA1%26'
    'oauth_timestamp%3D1318622958%26'
    'oauth_token%3D370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb%26'
    'oauth_version%3D1.0%26'
    'status%3DHello%2520Ladies%2520%252B%2520Gentlemen%252C%2520a%2520signed%2520OAuth%2520request%2521'
)

TWITTER_SIGNATURE = 'tnnArxj06cWHq44gCs1OSKk/jLY='

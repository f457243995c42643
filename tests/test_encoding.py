"""
Unit tests for percent-encoding and canonical query strings.
"""
from oauth_signer.auth import (
    percent_encode,
    stringify_query_map,
    to_sorted_items,
    build_query_string,
    parse_query_string,
)


class TestPercentEncode:
    """Test OAuth percent-encoding."""

    def test_reserved_sub_delims_are_escaped(self):
        """Test that !*'() are escaped even though URI encoders keep them."""
        assert percent_encode("!*'()") == '%21%2A%27%28%29'

    def test_unreserved_characters_untouched(self):
        """Test that A-Z a-z 0-9 - . _ ~ are never escaped."""
        unreserved = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~'

        assert percent_encode(unreserved) == unreserved

    def test_space_and_plus(self):
        """Test that space becomes %20 and plus becomes %2B."""
        assert percent_encode('Ladies + Gentlemen') == 'Ladies%20%2B%20Gentlemen'

    def test_url_delimiters_escaped(self):
        """Test that URL delimiters are escaped with uppercase hex."""
        assert percent_encode('https://a.b/c?d=e&f') == 'https%3A%2F%2Fa.b%2Fc%3Fd%3De%26f'

    def test_non_ascii_utf8(self):
        """Test that non-ASCII text is UTF-8 encoded then escaped byte-wise."""
        assert percent_encode('é') == '%C3%A9'
        assert percent_encode('☃') == '%E2%98%83'

    def test_empty_string(self):
        """Test encoding of an empty string."""
        assert percent_encode('') == ''

    def test_integer_value(self):
        """Test that non-string values are stringified first."""
        assert percent_encode(1318622958) == '1318622958'


class TestStringifyQueryMap:
    """Test canonical query string construction."""

    def test_empty_mapping(self):
        """Test that an empty mapping yields an empty string."""
        assert stringify_query_map({}) == ''

    def test_keys_sorted(self):
        """Test that keys are emitted in lexicographic order."""
        result = stringify_query_map({'b': '2', 'a': '1', 'c': '3'})

        assert result == 'a=1&b=2&c=3'

    def test_repeated_key_values_sorted(self):
        """Test that repeated keys appear once per value, values sorted."""
        result = stringify_query_map({'z': 'last', 'a': ['3', '1', '2']})

        assert result == 'a=1&a=2&a=3&z=last'

    def test_tuple_values(self):
        """Test that tuples are treated like lists."""
        assert stringify_query_map({'k': ('y', 'x')}) == 'k=x&k=y'

    def test_other_sequence_values(self):
        """Test that any non-string sequence is expanded into repeated keys."""
        assert stringify_query_map({'k': range(2)}) == 'k=0&k=1'

    def test_string_value_not_expanded(self):
        """Test that a string value is a single value, not a sequence of characters."""
        assert stringify_query_map({'k': 'ab'}) == 'k=ab'

    def test_keys_and_values_encoded(self):
        """Test that keys and values are percent-encoded."""
        result = stringify_query_map({'a b': 'c&d'})

        assert result == 'a%20b=c%26d'

    def test_uppercase_sorts_before_lowercase(self):
        """Test that sorting is by code point, not case-insensitive."""
        result = stringify_query_map({'b': '1', 'B': '2', 'a': '3'})

        assert result == 'B=2&a=3&b=1'

    def test_custom_separators(self):
        """Test custom pair and key/value separators."""
        result = stringify_query_map({'b': '2', 'a': '1'}, sep=';', eq=':')

        assert result == 'a:1;b:2'

    def test_deterministic_for_insertion_order(self):
        """Test that output does not depend on mapping insertion order."""
        first = stringify_query_map({'x': ['b', 'a'], 'y': '1', 'w': '0'})
        second = stringify_query_map({'w': '0', 'y': '1', 'x': ['a', 'b']})

        assert first == second

    def test_input_not_mutated(self):
        """Test that sorting values does not reorder the caller's list."""
        values = ['c', 'a', 'b']
        stringify_query_map({'k': values})

        assert values == ['c', 'a', 'b']

    def test_sorted_items(self):
        """Test that to_sorted_items returns key-sorted pairs."""
        assert to_sorted_items({'b': 1, 'a': 2}) == [('a', 2), ('b', 1)]


class TestBuildQueryString:
    """Test query string helpers for request bodies and responses."""

    def test_build_query_string(self):
        """Test building an OAuth-escaped form body."""
        result = build_query_string({
            'status': 'Hello Ladies + Gentlemen, a signed OAuth request!',
            'include_entities': 'true'
        })

        assert result == (
            'include_entities=true&'
            'status=Hello%20Ladies%20%2B%20Gentlemen%2C%20a%20signed%20OAuth%20request%21'
        )

    def test_build_query_string_none(self):
        """Test that None is treated as empty."""
        assert build_query_string(None) == ''

    def test_parse_token_response(self):
        """Test parsing a provider's token response body."""
        body = 'oauth_token=abc&oauth_token_secret=def&oauth_callback_confirmed=true'

        result = parse_query_string(body)

        assert result == {
            'oauth_token': 'abc',
            'oauth_token_secret': 'def',
            'oauth_callback_confirmed': 'true'
        }

    def test_parse_repeated_and_blank(self):
        """Test that repeated keys become lists and blank values are kept."""
        result = parse_query_string('?a=1&a=2&b=&c=x%20y')

        assert result == {'a': ['1', '2'], 'b': '', 'c': 'x y'}

"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from linscan import tokenize
from linscan.errors import InvalidNumber, LexError
from linscan.serialization import detokenize
from linscan.tokens import Token, TokenType

INT_MAX = 2**63 - 1
DIGIT_TEXT = st.text(alphabet="0123456789", max_size=12)

# Characters allowed after the first character of a word or symbol
NAME_CHARS = "".join(
    chr(c) for c in range(0x21, 0x7F) if chr(c) not in "'{}"
)
# Characters that start a word rather than a number, string or symbol
WORD_START_CHARS = "".join(c for c in NAME_CHARS if c not in '0123456789."')


def _tokenize_or_none(source: str) -> list[Token] | None:
    try:
        return tokenize(source)
    except LexError:
        return None


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_never_raises_anything_but_lex_error(self, source: str) -> None:
        """Every input yields a token list or a LexError, never a crash."""
        tokens = _tokenize_or_none(source)
        if tokens is not None:
            assert tokens[-1].type == TokenType.EOF

    @given(st.text(alphabet=" {}'\".0123456789abc\n\t", max_size=200))
    @settings(max_examples=200)
    def test_always_ends_with_single_eof(self, source: str) -> None:
        tokens = _tokenize_or_none(source)
        if tokens is None:
            return
        assert len(tokens) >= 1, "Must have at least EOF token"
        assert tokens[-1].type == TokenType.EOF, "Last token must be EOF"
        eof_count = sum(1 for t in tokens if t.type == TokenType.EOF)
        assert eof_count == 1, "Must have exactly one EOF token"

    @given(st.text(alphabet=" \t\n\r\f", max_size=100))
    def test_whitespace_only_is_eof(self, source: str) -> None:
        assert tokenize(source) == [Token(TokenType.EOF)]

    @given(st.text(alphabet=" {}'\".0123456789ab\n", max_size=200))
    @settings(max_examples=100)
    def test_locations_are_ordered(self, source: str) -> None:
        """Token positions are 1-based and strictly increasing in offset."""
        tokens = _tokenize_or_none(source)
        if tokens is None:
            return
        for token in tokens:
            assert token.location.lineno >= 1
            assert token.location.col_offset >= 1
        offsets = [t.location.offset for t in tokens[:-1]]
        assert offsets == sorted(set(offsets))

    @given(st.text(alphabet=" {}'.0123456789ab\n", max_size=200))
    @settings(max_examples=100)
    def test_names_never_contain_terminators(self, source: str) -> None:
        tokens = _tokenize_or_none(source)
        if tokens is None:
            return
        for token in tokens:
            if token.type in (TokenType.SYMBOL, TokenType.FUNCTION):
                assert not set(token.value) & set(" \t\n\r\f'{}")


class TestNumbers:
    """Numeric literal properties."""

    @given(st.integers(min_value=0, max_value=INT_MAX))
    def test_integers_in_range(self, value: int) -> None:
        assert tokenize(str(value)) == [Token(TokenType.INT, value), Token(TokenType.EOF)]

    @given(st.integers(min_value=INT_MAX + 1, max_value=10**40))
    def test_integers_out_of_range(self, value: int) -> None:
        with pytest.raises(InvalidNumber):
            tokenize(str(value))

    @given(DIGIT_TEXT, DIGIT_TEXT)
    def test_single_dot_floats(self, whole: str, fraction: str) -> None:
        text = f"{whole}.{fraction}"
        if not (whole or fraction):
            with pytest.raises(InvalidNumber):
                tokenize(text)
            return
        assert tokenize(text) == [Token(TokenType.FLOAT, float(text)), Token(TokenType.EOF)]

    @given(DIGIT_TEXT, DIGIT_TEXT, DIGIT_TEXT)
    def test_two_dots_rejected(self, a: str, b: str, c: str) -> None:
        with pytest.raises(InvalidNumber):
            tokenize(f"{a}.{b}.{c}")


# Tokens with a canonical source form
_round_trip_tokens = st.one_of(
    st.integers(min_value=0, max_value=INT_MAX).map(lambda v: Token(TokenType.INT, v)),
    st.floats(min_value=0.0, allow_nan=False, allow_infinity=False).map(
        lambda v: Token(TokenType.FLOAT, abs(v))
    ),
    st.text(alphabet=NAME_CHARS, max_size=10).map(lambda v: Token(TokenType.SYMBOL, v)),
    st.builds(
        lambda first, rest: Token(TokenType.FUNCTION, first + rest),
        st.sampled_from(WORD_START_CHARS),
        st.text(alphabet=NAME_CHARS, max_size=10),
    ),
    st.just(Token(TokenType.OPENING_BRACE)),
    st.just(Token(TokenType.CLOSING_BRACE)),
)


class TestRoundTrip:
    """Re-serialized token lists scan back to the same tokens."""

    @given(st.lists(_round_trip_tokens, max_size=30))
    @settings(max_examples=200)
    def test_detokenize_then_tokenize(self, tokens: list[Token]) -> None:
        assert tokenize(detokenize(tokens)) == [*tokens, Token(TokenType.EOF)]


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        first = _tokenize_or_none(source)
        second = _tokenize_or_none(source)
        assert first == second

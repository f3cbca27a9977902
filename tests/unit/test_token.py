"""Token model: rendering, keyword lookup and kind construction."""

import pytest

from esh.token import (
    ASSIGN, EOF, FUNCTION, IDENT, ILLEGAL, KEYWORDS, KINDS, LET, NOT_EQ, NUMBER,
    TOKEN_TYPES, Token, TokenKind, classify_word, lookup_ident, render,
)


@pytest.mark.parametrize("word, token_type", [
    ("fn", "FUNCTION"),
    ("let", "LET"),
    ("true", "TRUE"),
    ("false", "FALSE"),
    ("if", "IF"),
    ("else", "ELSE"),
    ("return", "RETURN"),
])
def test_classify_word_keywords(word, token_type):
    assert classify_word(word) == KINDS[token_type]


@pytest.mark.parametrize("word", ["iffy", "Let", "FN", "returns", "_", "five", "x1"])
def test_classify_word_falls_back_to_identifier(word):
    kind = classify_word(word)
    assert kind == TokenKind.identifier(word)
    assert kind.value == word


def test_lookup_ident_is_classify_word():
    assert lookup_ident("let") is KEYWORDS["let"]


def test_keywords_render_as_their_own_word():
    for word, kind in KEYWORDS.items():
        assert render(kind) == word


def test_render_fixed_symbols():
    expected = {
        "ASSIGN": "=", "PLUS": "+", "MINUS": "-", "BANG": "!", "ASTERISK": "*",
        "SLASH": "/", "EQ": "==", "NOT_EQ": "!=", "LT": "<", "GT": ">",
        "COMMA": ",", "SEMICOLON": ";", "LPAREN": "(", "RPAREN": ")",
        "LBRACE": "{", "RBRACE": "}", "ILLEGAL": "Illegal", "EOF": "Eof",
    }
    for token_type, text in expected.items():
        assert render(KINDS[token_type]) == text


def test_render_payload_kinds():
    assert render(TokenKind.identifier("foobar")) == "foobar"
    assert render(TokenKind.number(5)) == "5.0"
    assert render(TokenKind.number(3.14)) == "3.14"


def test_every_unit_type_has_a_ready_kind():
    assert set(KINDS) == TOKEN_TYPES - {IDENT, NUMBER}


def test_kind_rejects_unknown_type():
    with pytest.raises(ValueError):
        TokenKind("STRING", "hello")


def test_kind_payload_rules():
    with pytest.raises(ValueError):
        TokenKind(IDENT)
    with pytest.raises(ValueError):
        TokenKind(NUMBER)
    with pytest.raises(ValueError):
        TokenKind(LET, "let")


def test_kind_equality_is_structural():
    assert TokenKind.number(5) == TokenKind(NUMBER, 5.0)
    assert TokenKind.identifier("a") != TokenKind.identifier("b")
    assert KINDS[ASSIGN] != KINDS[NOT_EQ]
    assert len({TokenKind.identifier("x"), TokenKind.identifier("x")}) == 1


def test_kind_repr():
    assert repr(TokenKind.identifier("five")) == "Identifier('five')"
    assert repr(TokenKind.number(5)) == "Number(5.0)"
    assert repr(KINDS[LET]) == "Let"
    assert repr(KINDS[NOT_EQ]) == "NotEqual"
    assert repr(KINDS[EOF]) == "Eof"


def test_kind_categories():
    assert KINDS[FUNCTION].is_keyword()
    assert KINDS[ASSIGN].is_operator()
    assert KINDS["SEMICOLON"].is_delimiter()
    assert TokenKind.number(1).is_literal()
    assert not KINDS[ILLEGAL].is_literal()
    assert not KINDS[EOF].is_operator()


def test_token_from_kind_uses_rendering():
    token = Token.from_kind(KINDS[FUNCTION])
    assert token.literal == "fn"
    assert token.type == FUNCTION
    assert token.value is None
    assert token.position is None


def test_token_is_immutable():
    token = Token(TokenKind.identifier("x"), "x", 0)
    with pytest.raises(AttributeError):
        token.literal = "y"

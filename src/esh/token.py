# token.py
"""
Token model for the esh scanner.

Token types are plain string tags. A ``TokenKind`` pairs a tag with its payload
(identifier text or numeric value), and a ``Token`` pairs a kind with the literal
text it was scanned from.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Special
ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers + literals
IDENT = "IDENT"
NUMBER = "NUMBER"

# Operators
ASSIGN = "ASSIGN"
PLUS = "PLUS"
MINUS = "MINUS"
BANG = "BANG"
ASTERISK = "ASTERISK"
SLASH = "SLASH"
EQ = "EQ"
NOT_EQ = "NOT_EQ"
LT = "LT"
GT = "GT"

# Delimiters
COMMA = "COMMA"
SEMICOLON = "SEMICOLON"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
LBRACE = "LBRACE"
RBRACE = "RBRACE"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

_OPERATORS = frozenset({ASSIGN, PLUS, MINUS, BANG, ASTERISK, SLASH, EQ, NOT_EQ, LT, GT})
_DELIMITERS = frozenset({COMMA, SEMICOLON, LPAREN, RPAREN, LBRACE, RBRACE})
_KEYWORD_TYPES = frozenset({FUNCTION, LET, TRUE, FALSE, IF, ELSE, RETURN})
_PAYLOAD_TYPES = frozenset({IDENT, NUMBER})

TOKEN_TYPES = frozenset(
    {ILLEGAL, EOF} | _PAYLOAD_TYPES | _OPERATORS | _DELIMITERS | _KEYWORD_TYPES
)

# Fixed display text for every kind without a payload
_FIXED_TEXT = {
    ILLEGAL: "Illegal",
    EOF: "Eof",
    ASSIGN: "=",
    PLUS: "+",
    MINUS: "-",
    BANG: "!",
    ASTERISK: "*",
    SLASH: "/",
    EQ: "==",
    NOT_EQ: "!=",
    LT: "<",
    GT: ">",
    COMMA: ",",
    SEMICOLON: ";",
    LPAREN: "(",
    RPAREN: ")",
    LBRACE: "{",
    RBRACE: "}",
    FUNCTION: "fn",
    LET: "let",
    TRUE: "true",
    FALSE: "false",
    IF: "if",
    ELSE: "else",
    RETURN: "return",
}

# Names used by repr(), e.g. Identifier('x'), NotEqual
_DISPLAY_NAMES = {
    ILLEGAL: "Illegal",
    EOF: "Eof",
    IDENT: "Identifier",
    NUMBER: "Number",
    ASSIGN: "Assign",
    PLUS: "Plus",
    MINUS: "Minus",
    BANG: "Bang",
    ASTERISK: "Asterisk",
    SLASH: "Slash",
    EQ: "Equal",
    NOT_EQ: "NotEqual",
    LT: "LessThan",
    GT: "GreaterThan",
    COMMA: "Comma",
    SEMICOLON: "Semicolon",
    LPAREN: "LParen",
    RPAREN: "RParen",
    LBRACE: "LBrace",
    RBRACE: "RBrace",
    FUNCTION: "Function",
    LET: "Let",
    TRUE: "True",
    FALSE: "False",
    IF: "If",
    ELSE: "Else",
    RETURN: "Return",
}


@dataclass(frozen=True)
class TokenKind:
    """A token type tag plus its payload.

    Only ``IDENT`` (str) and ``NUMBER`` (float) carry a value; every other kind
    is a unit case whose ``value`` is ``None``.
    """

    type: str
    value: Any = None

    def __post_init__(self):
        if self.type not in TOKEN_TYPES:
            raise ValueError(f"Unknown token type: {self.type!r}")
        if self.type in _PAYLOAD_TYPES:
            if self.value is None:
                raise ValueError(f"{self.type} requires a payload")
        elif self.value is not None:
            raise ValueError(f"{self.type} does not carry a payload")

    @classmethod
    def identifier(cls, text: str) -> "TokenKind":
        return cls(IDENT, str(text))

    @classmethod
    def number(cls, value: float) -> "TokenKind":
        return cls(NUMBER, float(value))

    def is_keyword(self) -> bool:
        return self.type in _KEYWORD_TYPES

    def is_operator(self) -> bool:
        return self.type in _OPERATORS

    def is_delimiter(self) -> bool:
        return self.type in _DELIMITERS

    def is_literal(self) -> bool:
        return self.type in _PAYLOAD_TYPES

    def __repr__(self):
        name = _DISPLAY_NAMES[self.type]
        if self.type in _PAYLOAD_TYPES:
            return f"{name}({self.value!r})"
        return name


# Ready-made unit kinds, keyed by type tag
KINDS: Dict[str, TokenKind] = {
    token_type: TokenKind(token_type)
    for token_type in TOKEN_TYPES - _PAYLOAD_TYPES
}

KEYWORDS: Dict[str, TokenKind] = {
    "fn": KINDS[FUNCTION],
    "let": KINDS[LET],
    "true": KINDS[TRUE],
    "false": KINDS[FALSE],
    "if": KINDS[IF],
    "else": KINDS[ELSE],
    "return": KINDS[RETURN],
}


def render(kind: TokenKind) -> str:
    """Return the canonical display text of *kind*.

    Identifiers render as their own text and numbers use the default ``str()``
    of the float (``5.0``, ``3.14``). Everything else maps to a fixed symbol or
    word.

    Known difference: whole numbers keep their ``.0`` here, while the first
    esh scanner printed ``5`` for ``5.0``. Token literals are unaffected since
    they hold the raw lexeme.
    """
    if kind.type == IDENT:
        return kind.value
    if kind.type == NUMBER:
        return str(kind.value)
    return _FIXED_TEXT[kind.type]


def classify_word(word: str) -> TokenKind:
    """Map a scanned word to its keyword kind, or to ``Identifier(word)``."""
    keyword = KEYWORDS.get(word)
    if keyword is not None:
        return keyword
    return TokenKind.identifier(word)


lookup_ident = classify_word


@dataclass(frozen=True)
class Token:
    """A scanned token: its kind, literal text and starting character offset."""

    kind: TokenKind
    literal: str
    position: Optional[int] = None

    @classmethod
    def from_kind(cls, kind: TokenKind, position: Optional[int] = None) -> "Token":
        """Build a token whose literal is the canonical rendering of *kind*."""
        return cls(kind, render(kind), position)

    @property
    def type(self) -> str:
        return self.kind.type

    @property
    def value(self) -> Any:
        return self.kind.value

    def __str__(self):
        return f"Token({self.kind!r}, {self.literal!r})"

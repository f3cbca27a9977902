"""
esh - lexical scanner for the esh scripting language.

Version: 0.1.0
"""

__version__ = "0.1.0"

from .lexer import Lexer
from .token import Token, TokenKind, render, classify_word, KEYWORDS
from .errors import Diagnostic, EshError

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "render",
    "classify_word",
    "KEYWORDS",
    "Diagnostic",
    "EshError",
    "tokenize",
]


def tokenize(source_code: str) -> list:
    """Scan *source_code* completely and return its tokens, EOF included."""
    return Lexer(source_code).tokenize()

# lexer.py
import logging

import regex

from .config import config
from .errors import malformed_number, unexpected_character
from .token import (
    ASSIGN, ASTERISK, BANG, COMMA, EOF, EQ, GT, ILLEGAL, KINDS, LBRACE, LPAREN, LT,
    MINUS, NOT_EQ, PLUS, RBRACE, RPAREN, SEMICOLON, SLASH,
    Token, TokenKind, classify_word,
)

logger = logging.getLogger("esh.lexer")

# Unicode property classes: White_Space, Alphabetic, Alphabetic or Numeric
_WHITESPACE = regex.compile(r"\p{White_Space}")
_WORD_START = regex.compile(r"[\p{Alphabetic}_]")
_WORD_PART = regex.compile(r"[\p{Alphabetic}\p{N}_]")

# Characters that always form a token on their own
_SINGLE_CHAR_TOKENS = {
    '+': KINDS[PLUS],
    '-': KINDS[MINUS],
    '*': KINDS[ASTERISK],
    '/': KINDS[SLASH],
    '<': KINDS[LT],
    '>': KINDS[GT],
    ';': KINDS[SEMICOLON],
    ',': KINDS[COMMA],
    '(': KINDS[LPAREN],
    ')': KINDS[RPAREN],
    '{': KINDS[LBRACE],
    '}': KINDS[RBRACE],
}


class Lexer:
    """Turns esh source text into tokens, one per ``next_token()`` call.

    The source is split into characters once; ``position`` only ever moves
    forward and never passes ``len(self.source)``. Malformed input never
    raises: unknown characters become ``ILLEGAL`` tokens and unparsable
    numbers become ``Number(0.0)``, each noted in ``self.diagnostics``.
    """

    def __init__(self, source_code):
        self.source = list(source_code)
        self.position = 0
        self.diagnostics = []

    @property
    def at_end(self):
        return self.position >= len(self.source)

    def current_char(self):
        if self.position < len(self.source):
            return self.source[self.position]
        return None

    def peek_char(self):
        if self.position + 1 < len(self.source):
            return self.source[self.position + 1]
        return None

    def advance(self):
        if self.position < len(self.source):
            self.position += 1

    def next_token(self):
        self.skip_whitespace()

        start = self.position
        ch = self.current_char()

        if ch is None:
            tok = Token.from_kind(KINDS[EOF], start)
        elif ch == '=':
            if self.peek_char() == '=':
                self.advance()
                tok = Token(KINDS[EQ], "==", start)
            else:
                tok = Token(KINDS[ASSIGN], ch, start)
        elif ch == '!':
            if self.peek_char() == '=':
                self.advance()
                tok = Token(KINDS[NOT_EQ], "!=", start)
            else:
                tok = Token(KINDS[BANG], ch, start)
        elif ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[ch], ch, start)
        elif self.is_letter(ch):
            # read_identifier already moved past the word
            word = self.read_identifier()
            tok = Token(classify_word(word), word, start)
            self._trace(tok)
            return tok
        elif self.is_digit(ch):
            lexeme = self.read_number()
            tok = Token(TokenKind.number(self._parse_number(lexeme, start)), lexeme, start)
            self._trace(tok)
            return tok
        else:
            self.diagnostics.append(unexpected_character(ch, start))
            tok = Token(KINDS[ILLEGAL], ch, start)

        self.advance()
        self._trace(tok)
        return tok

    def tokenize(self):
        """Scan to the end and return every token, the final EOF included."""
        tokens = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.type == EOF:
                return tokens

    def __iter__(self):
        while True:
            tok = self.next_token()
            if tok.type == EOF:
                return
            yield tok

    def read_identifier(self):
        start_position = self.position
        while True:
            ch = self.current_char()
            if ch is None or not _WORD_PART.match(ch):
                break
            self.advance()
        return "".join(self.source[start_position:self.position])

    def read_number(self):
        start_position = self.position
        while True:
            ch = self.current_char()
            if ch is None or not (self.is_digit(ch) or ch == '.'):
                break
            self.advance()
        return "".join(self.source[start_position:self.position])

    def skip_whitespace(self):
        while True:
            ch = self.current_char()
            if ch is None or not _WHITESPACE.match(ch):
                return
            self.advance()

    def is_letter(self, char):
        return _WORD_START.match(char) is not None

    def is_digit(self, char):
        return '0' <= char <= '9'

    def _parse_number(self, lexeme, position):
        try:
            return float(lexeme)
        except ValueError:
            # Kept for compatibility: malformed numerals read as 0.0
            logger.warning("Malformed number literal %r at position %d, using 0.0", lexeme, position)
            self.diagnostics.append(malformed_number(lexeme, position))
            return 0.0

    def _trace(self, tok):
        if config.enable_debug_logs:
            logger.debug("token %r literal=%r at %s", tok.kind, tok.literal, tok.position)

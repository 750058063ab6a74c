"""
Lexer for the bitwise-assignment language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms one line of text into a stream of `Token` objects defined in
    `tokens.py`.
- It recognizes variables (an ASCII letter followed by ASCII letters or
    digits), decimal constants, and the single-character operators
    `= | ^ & ~ ( )`. Spaces and tabs are skipped; any other character is a
    `LexError`.

Examples:
    Input:  "b = ~a & 12"
    Tokens: [VARIABLE('b'), ASSIGN, NOT, VARIABLE('a'), AND, CONSTANT('12'), EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- Constants keep their literal text; converting it to an integer (and
    detecting overflow) is the evaluator's job.
- Letters and digits are ASCII only.
"""

from __future__ import annotations
import string
from typing import Iterator, List
from tokens import SINGLE_CHAR_TOKENS, Token, TokenType
from errors import LexError

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
ALNUM = LETTERS | DIGITS
BLANKS = frozenset(" \t")


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

    @property
    def column(self) -> int:
        return self.pos + 1

    def error(self) -> LexError:
        return LexError(self.current_char, self.column)

    def advance(self) -> None:
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def skip_blanks(self) -> None:
        """Skip spaces and tabs."""
        while self.current_char is not None and self.current_char in BLANKS:
            self.advance()

    def run_of(self, allowed: frozenset) -> str:
        """Consume the maximal run of characters from `allowed`."""
        result = []
        while self.current_char is not None and self.current_char in allowed:
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_blanks()
        if self.current_char is None:
            return Token(TokenType.EOF, None)

        if self.current_char in LETTERS:
            return Token(TokenType.VARIABLE, self.run_of(ALNUM))

        if self.current_char in DIGITS:
            return Token(TokenType.CONSTANT, self.run_of(DIGITS))

        token_type = SINGLE_CHAR_TOKENS.get(self.current_char)
        if token_type is not None:
            char = self.current_char
            self.advance()
            return Token(token_type, char)

        raise self.error()

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input line, ending with EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens

    def __iter__(self) -> Iterator[Token]:
        # Lazy variant of tokenize(); the EOF sentinel is not yielded.
        while True:
            token = self.get_next_token()
            if token.type == TokenType.EOF:
                return
            yield token

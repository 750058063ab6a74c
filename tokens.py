"""Token definitions for the lexer.

This module defines the `TokenType` enum for every token kind of the
bitwise-assignment language and a small `Token` dataclass holding a token
type and its raw text. Tokens are produced by the lexer and consumed by the
parser; they carry no position information beyond their order.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Operands
    VARIABLE = auto()
    CONSTANT = auto()

    # Operators
    ASSIGN = auto()
    OR = auto()
    XOR = auto()
    AND = auto()
    NOT = auto()

    # Grouping
    LPAREN = auto()
    RPAREN = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


# Single-character tokens, keyed by their source character.
SINGLE_CHAR_TOKENS = {
    "=": TokenType.ASSIGN,
    "|": TokenType.OR,
    "^": TokenType.XOR,
    "&": TokenType.AND,
    "~": TokenType.NOT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


@dataclass
class Token:
    type: TokenType
    value: Optional[str] = None

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return self.value

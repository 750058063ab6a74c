"""Error types raised while lexing, parsing and evaluating statements.

Every error derives from `BitOpsError` so a driver can stop a session with a
single `except` clause, while still telling the kinds apart. Each error keeps
the context a caller needs to build its own diagnostic (the offending
character, the expected token, the variable name, the bad literal).
"""

from __future__ import annotations
from typing import Optional
from tokens import Token


class BitOpsError(Exception):
    """Base class for all evaluation errors."""


class LexError(BitOpsError):
    def __init__(self, char: str, column: int):
        self.char = char
        self.column = column
        super().__init__(f"Invalid character '{char}' at column {column}")


class ParseError(BitOpsError):
    """A required token was absent or of the wrong kind."""

    def __init__(self, expected: str, found: Optional[Token] = None):
        self.expected = expected
        self.found = found
        msg = f"expected {expected}"
        if found is not None:
            msg += f", got {found.lexeme}"
        super().__init__(msg)


class UndefinedVariableError(BitOpsError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined variable '{name}'")


class NumericParseError(BitOpsError):
    def __init__(self, literal: str, int_bits: int):
        self.literal = literal
        self.int_bits = int_bits
        super().__init__(
            f"Constant '{literal}' is not a valid {int_bits}-bit signed integer"
        )

"""Session driver: feeds lines through the lexer, parser and evaluator.

A `Session` owns one `Environment` for its whole lifetime. Each non-blank
line is an independent assignment statement; statements run strictly in
order because later lines may read variables set by earlier ones. The first
error aborts `run()` and propagates to the caller, which decides whether to
stop (file mode) or keep going (interactive mode).

Example:
    >>> Session().run(["a = 5", "b = a & 3"]).value
    1
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional
from lexer import Lexer
from parser import Parser
from ast_nodes import AssignmentNode
from tokens import Token
from ast_interpreter import DEFAULT_INT_BITS, execute_assignment
from environment import Environment


@dataclass
class SessionResult:
    variable: Optional[str] = None
    value: Optional[int] = None
    statements: int = 0


class Session:
    def __init__(self, int_bits: int = DEFAULT_INT_BITS):
        self.int_bits = int_bits
        self.env = Environment()
        self.last_variable: Optional[str] = None
        self.line_number = 0

    def parse_line(
        self, line: str, tokens: Optional[List[Token]] = None
    ) -> Optional[AssignmentNode]:
        """Lex and parse one line; blank lines yield None.

        `tokens` may be passed when the caller has already lexed `line`.
        Variables and constants are checked against the session as they
        are parsed.
        """
        self.line_number += 1
        if not line.strip(" \t"):
            return None
        if tokens is None:
            tokens = Lexer(line).tokenize()
        parser = Parser(
            tokens, line=self.line_number, env=self.env, int_bits=self.int_bits
        )
        return parser.parse()

    def execute(self, stmt: AssignmentNode) -> str:
        """Evaluate a parsed statement against the session environment."""
        self.last_variable = execute_assignment(stmt, self.env, self.int_bits)
        return self.last_variable

    def reset(self) -> None:
        """Forget every variable, keeping the line counter."""
        self.env.clear()
        self.last_variable = None

    def run_line(self, line: str) -> Optional[str]:
        stmt = self.parse_line(line)
        if stmt is None:
            return None
        return self.execute(stmt)

    @property
    def value(self) -> Optional[int]:
        """Value of the variable assigned by the last executed statement."""
        if self.last_variable is None:
            return None
        return self.env.lookup(self.last_variable)

    def run(
        self, lines: Iterable[str], echo: Optional[Callable[[str], None]] = None
    ) -> SessionResult:
        """Run `lines` in order, calling `echo(line)` before each one."""
        count = 0
        for line in lines:
            if echo is not None:
                echo(line)
            if self.run_line(line) is not None:
                count += 1
        return SessionResult(
            variable=self.last_variable, value=self.value, statements=count
        )


def evaluate_lines(
    lines: Iterable[str], int_bits: int = DEFAULT_INT_BITS
) -> Optional[int]:
    """Run `lines` in a fresh session and return the last assigned value."""
    return Session(int_bits=int_bits).run(lines).value

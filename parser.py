"""
Parser for the bitwise-assignment language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser. Each grammar
    rule is one method, and each binary precedence level parses one unit of
    the next level and then greedily folds `(operator, unit)` pairs to the
    left.

Grammar (lowest to highest binding):

    assignment  := Variable '=' expression
    expression  := term   { '|' term   }*
    term        := factor { '^' factor }*
    factor      := unary  { '&' unary  }*
    unary       := '~' unary | Variable | Constant | '(' expression ')'

Note that AND binds tightest and OR loosest, so `1|2&3` parses as
`1|(2&3)` and `1|2^3&4` as `1|(2^(3&4))`.

Notes:
- A line holds exactly one assignment: `parse()` rejects any tokens left
    after the expression.
- Given an `Environment`, the parser checks each variable and constant at
    the point it is parsed, so `a = b &` with `b` unset fails on `b` before
    the missing operand is seen. The tree it returns is then evaluated by
    `ast_interpreter`.
"""

from __future__ import annotations
from typing import Callable, List, Optional
from tokens import Token, TokenType
from ast_nodes import *
from errors import ParseError
from environment import Environment
from ast_interpreter import DEFAULT_INT_BITS, parse_constant


class Parser:
    def __init__(
        self,
        tokens: List[Token],
        line: int = 0,
        env: Optional[Environment] = None,
        int_bits: int = DEFAULT_INT_BITS,
    ):
        self.tokens = tokens
        self.pos = 0
        self.current = tokens[0] if tokens else Token(TokenType.EOF, None)
        self.line = line
        self.env = env
        self.int_bits = int_bits

    def advance(self) -> Token:
        """Move to next token."""
        self.pos += 1
        if self.pos < len(self.tokens):
            self.current = self.tokens[self.pos]
        else:
            self.current = Token(TokenType.EOF, None)
        return self.current

    def expect(self, expected_type: TokenType, expected: str) -> Token:
        """Expect and consume token of given type."""
        if self.current.type == expected_type:
            token = self.current
            self.advance()
            return token
        raise ParseError(expected, self._found())

    def match(self, token_type: TokenType) -> bool:
        """Check if current token matches type, consume if true."""
        if self.current.type == token_type:
            self.advance()
            return True
        return False

    def _found(self) -> Optional[Token]:
        return None if self.current.type == TokenType.EOF else self.current

    def parse_binary_level(
        self, operator_type: TokenType, operator: str, operand: Callable[[], ASTNode]
    ) -> ASTNode:
        """Parse `operand { operator operand }*`, folding to the left."""
        left = operand()
        while self.match(operator_type):
            right = operand()
            left = BinaryOpNode(
                left=left, operator=operator, right=right, line=self.line
            )
        return left

    def parse_assignment(self) -> AssignmentNode:
        """Parse `Variable '=' expression`."""
        target = self.expect(TokenType.VARIABLE, "Variable")
        self.expect(TokenType.ASSIGN, "'='")
        value = self.parse_expression()
        return AssignmentNode(target=target.value, value=value, line=self.line)

    def parse_expression(self) -> ASTNode:
        """Parse terms joined by bitwise OR."""
        return self.parse_binary_level(TokenType.OR, "|", self.parse_term)

    def parse_term(self) -> ASTNode:
        """Parse factors joined by bitwise XOR."""
        return self.parse_binary_level(TokenType.XOR, "^", self.parse_factor)

    def parse_factor(self) -> ASTNode:
        """Parse unary expressions joined by bitwise AND."""
        return self.parse_binary_level(TokenType.AND, "&", self.parse_unary)

    def parse_unary(self) -> ASTNode:
        """Parse `~` prefixes, variables, constants and parenthesized expressions."""
        token = self.current

        match token.type:
            case TokenType.NOT:
                self.advance()
                # Right-recursive, so `~~x` nests without limit.
                operand = self.parse_unary()
                return UnaryOpNode(operator="~", operand=operand, line=self.line)

            case TokenType.VARIABLE:
                if self.env is not None:
                    self.env.lookup(token.value)
                self.advance()
                return VariableNode(name=token.value, line=self.line)

            case TokenType.CONSTANT:
                parse_constant(token.value, self.int_bits)
                self.advance()
                return ConstantNode(text=token.value, line=self.line)

            case TokenType.LPAREN:
                self.advance()  # Consume '('
                expr = self.parse_expression()
                self.expect(TokenType.RPAREN, "')'")
                return expr

            case _:
                raise ParseError("Variable, Constant, '(' or '~'", self._found())

    def parse(self) -> AssignmentNode:
        """Parse exactly one assignment; leftover tokens are an error."""
        stmt = self.parse_assignment()
        if self.current.type != TokenType.EOF:
            raise ParseError("end of line", self.current)
        return stmt

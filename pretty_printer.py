"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line tree, and `PrettyPrinter.print_source(node)`
which renders it back into the surface syntax with every binary operation
parenthesized, making the parsed precedence visible. Both are meant for
debugging and tests.

Examples:
    PrettyPrinter.print_ast(statement)
    PrettyPrinter.print_source(statement)   # "a = 1 | (2 & 3)"
"""

from __future__ import annotations
from typing import List
from ast_nodes import *
from tokens import Token


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: List[Token], limit: int = 50) -> str:
        """Render a numbered token listing, truncated after `limit` entries."""
        lines = [f"Tokens ({len(tokens)}):"]
        for i, token in enumerate(tokens[:limit]):
            lines.append(f"  {i:3}: {token}")
        if len(tokens) > limit:
            lines.append(f"  ... and {len(tokens) - limit} more")
        return "\n".join(lines)

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case ConstantNode(text=t):
                lines.append(f"{indent_str}{prefix}Constant({t})")

            case VariableNode(name=n):
                lines.append(f"{indent_str}{prefix}Variable({n})")

            case BinaryOpNode(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}BinaryOp({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case UnaryOpNode(operator=op, operand=operand):
                lines.append(f"{indent_str}{prefix}UnaryOp({op})")
                lines.append(PrettyPrinter.print_ast(operand, indent + 2))

            case AssignmentNode(target=target, value=value):
                lines.append(f"{indent_str}{prefix}Assignment({target})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for stmt in stmts:
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 2))

            case _:
                lines.append(f"{indent_str}{prefix}{node}")

        return "\n".join(lines)

    @staticmethod
    def print_source(node: ASTNode, top: bool = True) -> str:
        """Render `node` as source text with explicit grouping."""
        match node:
            case ConstantNode(text=t):
                return t
            case VariableNode(name=n):
                return n
            case UnaryOpNode(operator=op, operand=operand):
                return f"{op}{PrettyPrinter.print_source(operand, top=False)}"
            case BinaryOpNode(left=left, operator=op, right=right):
                left_s = PrettyPrinter.print_source(left, top=False)
                right_s = PrettyPrinter.print_source(right, top=False)
                text = f"{left_s} {op} {right_s}"
                return text if top else f"({text})"
            case AssignmentNode(target=target, value=value):
                return f"{target} = {PrettyPrinter.print_source(value)}"
            case ProgramNode(statements=stmts):
                return "\n".join(PrettyPrinter.print_source(s) for s in stmts)
            case _:
                return str(node)

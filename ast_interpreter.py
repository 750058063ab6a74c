"""Evaluator for bitwise-assignment ASTs.

Expressions are evaluated strictly left to right over Python integers. All
values are fixed-width signed integers (`int_bits` wide, 64 by default):
constants are range-checked when they are converted, and `&`, `|`, `^` and
two's-complement `~` never leave the signed range of their operands, so no
wrapping is needed afterwards.
"""

from typing import Optional
from ast_nodes import *
from environment import Environment
from errors import NumericParseError

DEFAULT_INT_BITS = 64


def int_range(int_bits: int = DEFAULT_INT_BITS) -> tuple[int, int]:
    """Return the inclusive (min, max) of a signed integer of `int_bits` bits."""
    return -(1 << (int_bits - 1)), (1 << (int_bits - 1)) - 1


def parse_constant(text: str, int_bits: int = DEFAULT_INT_BITS) -> int:
    """Convert a decimal literal to an int that fits in `int_bits` signed bits."""
    if not text or not all("0" <= c <= "9" for c in text):
        raise NumericParseError(text, int_bits)
    value = int(text)
    low, high = int_range(int_bits)
    if not low <= value <= high:
        raise NumericParseError(text, int_bits)
    return value


def evaluate(node: ASTNode, env: Environment, int_bits: int = DEFAULT_INT_BITS) -> int:
    match node:
        case ConstantNode(text=text):
            return parse_constant(text, int_bits)
        case VariableNode(name=n):
            return env.lookup(n)
        case UnaryOpNode(operator="~", operand=operand):
            return ~evaluate(operand, env, int_bits)
        case BinaryOpNode(left=l, operator=op, right=r):
            lv = evaluate(l, env, int_bits)
            rv = evaluate(r, env, int_bits)
            match op:
                case "&":
                    return lv & rv
                case "^":
                    return lv ^ rv
                case "|":
                    return lv | rv
                case _:
                    raise RuntimeError(f"Unsupported binary operator: {op}")
        case _:
            raise RuntimeError(f"Unhandled expression node type: {node}")


def execute_assignment(
    stmt: AssignmentNode, env: Environment, int_bits: int = DEFAULT_INT_BITS
) -> str:
    """Evaluate the right-hand side, store it and return the target name."""
    value = evaluate(stmt.value, env, int_bits)
    env.assign(stmt.target, value)
    return stmt.target


def interpret_program(
    prog: ProgramNode,
    env: Optional[Environment] = None,
    int_bits: int = DEFAULT_INT_BITS,
) -> Environment:
    """Run every statement of `prog` in order and return the environment."""
    if env is None:
        env = Environment()
    for stmt in prog.statements:
        execute_assignment(stmt, env, int_bits)
    return env

"""AST node definitions for the bitwise-assignment language.

This module defines the dataclasses the parser produces and the evaluator,
pretty-printer, JSON dumper and Graphviz renderer consume. The `NodeType`
enum identifies node kinds.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and the 1-based session `line` the node came from
    (0 when unknown).
- Constants keep the literal text from the source; the evaluator converts
    it so that overflow is reported at evaluation time.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class NodeType(Enum):
    CONSTANT = auto()
    VARIABLE = auto()
    BINARY_OP = auto()
    UNARY_OP = auto()
    ASSIGNMENT = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    line: int = 0


# Expression Nodes
@dataclass
class ConstantNode(ASTNode):
    type: NodeType = NodeType.CONSTANT
    text: str = "0"


@dataclass
class VariableNode(ASTNode):
    type: NodeType = NodeType.VARIABLE
    name: str = ""


@dataclass
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=lambda: ConstantNode())
    operator: str = ""
    right: ASTNode = field(default_factory=lambda: ConstantNode())


@dataclass
class UnaryOpNode(ASTNode):
    type: NodeType = NodeType.UNARY_OP
    operator: str = "~"
    operand: ASTNode = field(default_factory=lambda: ConstantNode())


# Statement Nodes
@dataclass
class AssignmentNode(ASTNode):
    type: NodeType = NodeType.ASSIGNMENT
    target: str = ""
    value: ASTNode = field(default_factory=lambda: ConstantNode())


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: List[AssignmentNode] = field(default_factory=list)

"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node, and `session_to_json`
which bundles a session's statements with its final variables for the
`--dump-ast` option.
"""

from typing import Any, Dict, Optional
from ast_nodes import *
from environment import Environment


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    if t == NodeType.CONSTANT and isinstance(node, ConstantNode):
        return {"node_type": "Constant", "text": node.text}
    if t == NodeType.VARIABLE and isinstance(node, VariableNode):
        return {"node_type": "Variable", "name": node.name}
    if t == NodeType.BINARY_OP and isinstance(node, BinaryOpNode):
        return {
            "node_type": "BinaryOp",
            "operator": node.operator,
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
        }
    if t == NodeType.UNARY_OP and isinstance(node, UnaryOpNode):
        return {
            "node_type": "UnaryOp",
            "operator": node.operator,
            "operand": ast_to_json(node.operand),
        }
    if t == NodeType.ASSIGNMENT and isinstance(node, AssignmentNode):
        return {
            "node_type": "Assignment",
            "line": node.line,
            "target": node.target,
            "value": ast_to_json(node.value),
        }
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "statements": [ast_to_json(s) for s in node.statements],
        }
    raise TypeError(f"Cannot serialize AST node: {node!r}")


def session_to_json(prog: ProgramNode, env: Environment) -> Dict[str, Any]:
    """Return the statements of `prog` together with the final bindings."""
    return {
        "statements": [ast_to_json(s) for s in prog.statements],
        "variables": env.snapshot(),
    }

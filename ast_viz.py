"""Graphviz visualization helpers for syntax trees.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object (not
rendered). `write_and_render` writes the file to disk, which needs the
Graphviz binaries; `write_dot_source` only writes the DOT text.

Layout: every statement becomes its own cluster labelled with its session
line. Operators are drawn as circles, variables as boxes and constants as
plain text, with edges running from an operator to its operands in
left-to-right evaluation order.
"""

from typing import Iterator
from ast_nodes import *
from pretty_printer import PrettyPrinter
from graphviz import Digraph


def _ids() -> Iterator[str]:
    n = 0
    while True:
        n += 1
        yield f"n{n}"


def _add_expr(graph: Digraph, node: ASTNode, ids: Iterator[str]) -> str:
    """Add `node` and its operands to `graph`; return the node id."""
    node_id = next(ids)
    match node:
        case ConstantNode(text=t):
            graph.node(node_id, label=t, shape="plaintext")
        case VariableNode(name=n):
            graph.node(node_id, label=n, shape="box")
        case UnaryOpNode(operator=op, operand=operand):
            graph.node(node_id, label=op, shape="circle")
            graph.edge(node_id, _add_expr(graph, operand, ids))
        case BinaryOpNode(left=left, operator=op, right=right):
            graph.node(node_id, label=op, shape="circle")
            graph.edge(node_id, _add_expr(graph, left, ids), label="L")
            graph.edge(node_id, _add_expr(graph, right, ids), label="R")
        case _:
            raise TypeError(f"Unhandled expression node type: {node}")
    return node_id


def _add_statement(
    graph: Digraph, stmt: AssignmentNode, ids: Iterator[str], index: int
) -> None:
    with graph.subgraph(name=f"cluster_{index}") as c:
        title = f"line {stmt.line}" if stmt.line else f"statement {index}"
        c.attr(label=f"{title}: {PrettyPrinter.print_source(stmt)}")
        root = next(ids)
        c.node(root, label=f"{stmt.target} =", shape="box", style="rounded")
        c.edge(root, _add_expr(c, stmt.value, ids))


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for a statement or a whole program.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    ids = _ids()

    if isinstance(node, ProgramNode):
        for i, stmt in enumerate(node.statements, start=1):
            _add_statement(dot, stmt, ids, i)
    elif isinstance(node, AssignmentNode):
        _add_statement(dot, node, ids, 1)
    else:
        _add_expr(dot, node, ids)
    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> str:
    """Write and render the tree to `out_path` (without extension).

    Example: write_and_render(prog, 'out/tree', fmt='png') creates out/tree.png
    (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)


def write_dot_source(node: ASTNode, out_path: str) -> str:
    """Write the DOT text for `node` to `out_path` + '.dot' and return that path."""
    path = f"{out_path}.dot"
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(render_ast_dot(node).source)
    return path

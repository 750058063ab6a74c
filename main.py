from __future__ import annotations
import argparse
import json
import sys
from subprocess import CalledProcessError
from typing import List, Optional, Sequence
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from ast_interpreter import DEFAULT_INT_BITS
from ast_json import session_to_json
from ast_viz import write_and_render, write_dot_source
from graphviz import FORMATS, ExecutableNotFound
from errors import BitOpsError
from pretty_printer import PrettyPrinter
from session import Session


def lex(text: str) -> List[Token]:
    """Tokenize one line."""
    lexer = Lexer(text)
    return lexer.tokenize()


def report_error(e: BitOpsError) -> None:
    print(f"{type(e).__name__}: {e}", file=sys.stderr)


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    int_bits: int = DEFAULT_INT_BITS,
) -> int:
    """Run every line of `text` as one session and print the last value.

    Each line is echoed before it runs. The first error stops the session:
    it is reported on stderr, no value is printed and 1 is returned.
    """
    session = Session(int_bits=int_bits)
    program = ProgramNode()

    print("The read expressions are:")
    try:
        for line in text.splitlines():
            print(line)
            tokens = None
            if print_tokens and line.strip(" \t"):
                tokens = lex(line)
                print(PrettyPrinter.print_tokens(tokens))
            stmt = session.parse_line(line, tokens)
            if stmt is None:
                continue
            if print_ast:
                print(PrettyPrinter.print_ast(stmt))
            session.execute(stmt)
            program.statements.append(stmt)
    except BitOpsError as e:
        report_error(e)
        return 1

    if session.value is not None:
        print(session.value)

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(session_to_json(program, session.env), fh, indent=2)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(program, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except (ExecutableNotFound, CalledProcessError, ValueError) as e:
            # fallback: write dot source
            try:
                dot_path = write_dot_source(program, viz_path)
                print(f"Wrote DOT to {dot_path} (render failed: {e})")
            except OSError as err:
                print(f"Failed to write AST visualization to {viz_path}: {err}")

    return 0


def interactive_mode(
    print_tokens: bool = False,
    print_ast: bool = False,
    int_bits: int = DEFAULT_INT_BITS,
) -> None:
    """Run a REPL that keeps one environment across inputs."""
    print("\nInteractive BitOps Mode (type 'quit' to exit)")
    print("=" * 80)
    session = Session(int_bits=int_bits)

    while True:
        try:
            text = input("\n> ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            if text == ":vars":
                for name, value in sorted(session.env.snapshot().items()):
                    print(f"{name} = {value}")
                continue

            if text == ":reset":
                session.reset()
                print("Variables cleared")
                continue

            tokens = lex(text)
            if print_tokens:
                print(PrettyPrinter.print_tokens(tokens))
            stmt = session.parse_line(text, tokens)
            if print_ast:
                print(PrettyPrinter.print_ast(stmt))
            name = session.execute(stmt)
            print(f"{name} = {session.env.lookup(name)}")

        except BitOpsError as e:
            report_error(e)
        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate bitwise assignment statements from a file or interactively"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to a file with one statement per line"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print each AST"
    )
    parser.add_argument(
        "--int-bits",
        dest="int_bits",
        type=int,
        choices=[8, 16, 32, 64],
        default=DEFAULT_INT_BITS,
        help="Width of the signed integers constants must fit in",
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write statements+variables JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the ASTs",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        choices=sorted(FORMATS),
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            int_bits=args.int_bits,
        )
        return 0

    if not args.file:
        parser.print_help()
        return 0

    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            text = fh.read()
    except OSError as e:
        print(f"Failed to read file {args.file}: {e}", file=sys.stderr)
        return 1

    return process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
        int_bits=args.int_bits,
    )


if __name__ == "__main__":
    sys.exit(main())

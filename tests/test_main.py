"""End-to-end tests for the command-line driver."""

import json
import pytest
import main as main_module
from graphviz import ExecutableNotFound
from main import main, process_program


def test_process_program_echoes_and_prints_last_value(capsys):
    status = process_program("a=5\nb=a&3\n")
    out = capsys.readouterr().out
    assert status == 0
    assert out.splitlines() == ["The read expressions are:", "a=5", "b=a&3", "1"]


def test_process_program_error_prints_no_value(capsys):
    status = process_program("a=b\nc=1\n")
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out.splitlines() == ["The read expressions are:", "a=b"]
    assert captured.err.strip() == "UndefinedVariableError: Undefined variable 'b'"


def test_process_program_lex_error(capsys):
    assert process_program("a=1 $ 2") == 1
    assert capsys.readouterr().err.startswith("LexError: Invalid character '$'")


def test_process_program_handles_crlf(capsys):
    assert process_program("a=1\r\nb=a|6\r\n") == 0
    assert capsys.readouterr().out.splitlines()[-1] == "7"


def test_main_reads_file_and_dumps_json(tmp_path, capsys):
    src = tmp_path / "input.txt"
    src.write_text("x = 12\ny = x ^ 10\n", encoding="utf-8")
    dump = tmp_path / "ast.json"
    status = main(["--file", str(src), "--dump-ast", str(dump)])
    out = capsys.readouterr().out
    assert status == 0
    assert "6" in out.splitlines()
    data = json.loads(dump.read_text(encoding="utf-8"))
    assert data["variables"] == {"x": 12, "y": 6}


def test_main_int_bits(tmp_path, capsys):
    src = tmp_path / "input.txt"
    src.write_text("a = 200\n", encoding="utf-8")
    assert main(["-f", str(src), "--int-bits", "8"]) == 1
    assert "NumericParseError" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.txt")]) == 1
    assert "Failed to read file" in capsys.readouterr().err


def test_interactive_mode(monkeypatch, capsys):
    inputs = iter(["a = 5", "b = a & 3", "c = zz", ":vars", ":reset", ":vars", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    assert main(["--interactive"]) == 0
    captured = capsys.readouterr()
    assert "a = 5" in captured.out
    assert "b = 1" in captured.out
    assert "Variables cleared" in captured.out
    assert "UndefinedVariableError" in captured.err


def test_print_tokens_and_ast(capsys):
    assert process_program("a = ~1 & 3\n", print_tokens=True, print_ast=True) == 0
    out = capsys.readouterr().out.splitlines()
    assert "Tokens (7):" in out
    assert "    0: Token(VARIABLE, 'a')" in out
    assert "Assignment(a)" in out
    assert "  value: BinaryOp(&)" in out
    assert out[-1] == "2"


def test_viz_ast_renders_program(monkeypatch, capsys):
    calls = []

    def fake_render(program, path, fmt="svg"):
        calls.append((program, path, fmt))
        return f"{path}.{fmt}"

    monkeypatch.setattr(main_module, "write_and_render", fake_render)
    assert process_program("a=1\nb=a|2\n", viz_path="out/tree", viz_format="png") == 0
    program, path, fmt = calls[0]
    assert [s.target for s in program.statements] == ["a", "b"]
    assert (path, fmt) == ("out/tree", "png")
    assert "Wrote AST visualization to out/tree.png" in capsys.readouterr().out


def test_viz_ast_falls_back_to_dot_source(tmp_path, monkeypatch, capsys):
    def no_graphviz(*args, **kwargs):
        raise ExecutableNotFound(["dot"])

    monkeypatch.setattr(main_module, "write_and_render", no_graphviz)
    viz = tmp_path / "tree"
    assert process_program("a=1\n", viz_path=str(viz)) == 0
    dot = tmp_path / "tree.dot"
    assert dot.read_text(encoding="utf-8").startswith("digraph")
    assert f"Wrote DOT to {dot}" in capsys.readouterr().out


def test_viz_fallback_reports_unwritable_path(tmp_path, monkeypatch, capsys):
    def no_graphviz(*args, **kwargs):
        raise ExecutableNotFound(["dot"])

    monkeypatch.setattr(main_module, "write_and_render", no_graphviz)
    viz = tmp_path / "missing_dir" / "tree"
    assert process_program("a=1\n", viz_path=str(viz)) == 0
    assert "Failed to write AST visualization" in capsys.readouterr().out


def test_unknown_viz_format_is_rejected_by_cli(tmp_path, capsys):
    src = tmp_path / "input.txt"
    src.write_text("a=1\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["-f", str(src), "--viz-ast", str(tmp_path / "t"), "--viz-format", "bogus"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_unknown_viz_format_falls_back_to_dot(tmp_path, capsys):
    viz = tmp_path / "tree"
    assert process_program("a=1\n", viz_path=str(viz), viz_format="bogus") == 0
    assert (tmp_path / "tree.dot").exists()
    assert capsys.readouterr().out.splitlines()[2] == "1"


def test_interactive_print_options(monkeypatch, capsys):
    inputs = iter(["x = 6 ^ 3", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    assert main(["-i", "--print-tokens", "--print-ast"]) == 0
    out = capsys.readouterr().out
    assert "Tokens (6):" in out
    assert "Assignment(x)" in out
    assert "x = 5" in out

from lexer import Lexer
from parser import Parser
from environment import Environment
from ast_interpreter import execute_assignment


def lex(text: str):
    """Return a list of tokens for the given source line."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source line into an AST."""
    return Parser(Lexer(text).tokenize()).parse()


def run_lines(*lines: str) -> Environment:
    """Execute each line in order against one fresh environment."""
    env = Environment()
    for line in lines:
        execute_assignment(parse_text(line), env)
    return env

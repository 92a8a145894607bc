"""
Interactive read-parse-print loop for Ael.

Each entry is parsed as a complete program and its tree is printed. An entry
that obviously continues (a trailing operator, `=`, keyword, or an open
parenthesis) keeps reading with a `... ` prompt. A blank line at the
`... ` prompt ends the entry as typed so far.

Commands:
    exit, quit     Leave the REPL.
    verbose-mode   Toggle echoing of the token stream before each parse.
"""

from ael.ael_errors import AelError
from ael.ael_format import format_ast
from ael.ael_lexer import CharacterStream, Lexer, Token
from ael.ael_parser import parse

CONTINUATION_TOKENS = {
    "LET",
    "PRINT",
    "ABS",
    "SQRT",
    "ASSIGN",
    "EQ",
    "PLUS",
    "SUB",
    "MULT",
    "DIV",
    "MOD",
    "POW",
    "LPAREN",
}


def needs_more_input(tokens: list[Token]) -> bool:
    """True when `tokens` end mid-statement and the next line should be appended."""
    body = [t for t in tokens if t.type != "EOF"]
    if not body or any(t.type == "ERROR" for t in body):
        return False
    depth = sum(
        1 if t.type == "LPAREN" else -1 if t.type == "RPAREN" else 0 for t in body
    )
    return depth > 0 or body[-1].type in CONTINUATION_TOKENS


def format_tokens(tokens: list[Token]) -> str:
    return " ".join(f"{t.type}({t.value})" for t in tokens if t.type != "EOF")


def start_repl(verbose: bool = False) -> None:
    print("Ael REPL. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            src_lines: list[str] = []
            while True:
                prompt = ">>> " if not src_lines else "... "
                line = input(prompt)
                if line.strip() in ("exit", "quit") and not src_lines:
                    print("Exiting Ael REPL.")
                    return
                if src_lines and not line.strip():
                    # a blank line submits the entry as typed
                    break
                src_lines.append(line)
                tokens = Lexer(CharacterStream("\n".join(src_lines))).tokens()
                if not needs_more_input(tokens):
                    break
            src = "\n".join(src_lines).strip()
            if not src or src.startswith("//"):
                continue
            if src.lower() == "verbose-mode":
                verbose = not verbose
                print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
                continue

            if verbose:
                print(f"[tokens] >>> {format_tokens(tokens)}")

            try:
                program = parse(src)
            except AelError as e:
                print(f"[error] >>> {e}")
                continue

            print(format_ast(program))

        except (KeyboardInterrupt, EOFError):
            print("\nExiting Ael REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()

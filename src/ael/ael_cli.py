"""
Ael CLI Entrypoint.

This module provides the command-line interface for the Ael parser.
It supports parsing files or inline strings and an interactive REPL mode.

Features:
    - Read source from `.ael` files or inline strings.
    - Lex and parse the code, then render the tree, its JSON form, or the token stream.
    - Output to console or file.
    - Launch an interactive REPL with optional verbosity.

Example usage:
    ael program.ael
    ael -s "print 1 + 2"
    ael program.ael -f json -o program.json
    ael --repl --verbose

Functions:
    render(source: str, output: str = "tree") -> str:
        Lexes and parses `source` and returns the requested rendering.

    run_ael(source: str, is_string: bool = False, output: str = "tree", out: Optional[str] = None,
            pretty: bool = False) -> None:
        Executes the full Ael pipeline (read → lex → parse → render → output).

    main() -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or parse).
"""

import argparse
import json
import sys

from ael.ael_errors import AelError
from ael.ael_format import format_ast
from ael.ael_lexer import tokenize
from ael.ael_parser import parse

OUTPUT_FORMATS = ("tree", "json", "tokens")


def render(source: str, output: str = "tree") -> str:
    """Lex and parse `source`, returning the chosen text rendering.

    Args:
        source (str): Ael source code.
        output (str): One of "tree", "json" or "tokens".

    Raises:
        ValueError: If `output` is not a known format.
        AelError: If the source does not lex or parse.
    """
    if output == "tokens":
        return "\n".join(
            f"{tok.line}:{tok.col}\t{tok.type}\t{tok.value}" for tok in tokenize(source)
        )
    if output == "json":
        return json.dumps(parse(source).to_dict(), indent=2)
    if output == "tree":
        return format_ast(parse(source))
    raise ValueError(f"Unknown output format: {output!r}")


def run_ael(
    source: str,
    is_string: bool = False,
    output: str = "tree",
    out: str | None = None,
    pretty: bool = False,
) -> None:
    """
    Run the Ael toolchain: read, lex, parse, and print or write the result.

    Args:
        source (str): The Ael source code or path to a `.ael` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path. Defaults to False.
        output (str): Rendering to produce ('tree', 'json' or 'tokens'). Defaults to 'tree'.
        out (str | None): Optional path to write the rendering to. If None, prints to stdout.
        pretty (bool): If True, prints formatted banners around the output. Defaults to False.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.ael'.
        AelError: If the source does not lex or parse.
    """
    if not is_string and not source.endswith(".ael"):
        raise ValueError("Only .ael files are supported.")
    # 1. Read source
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    # 2. Lex, parse, render
    text = render(source, output)

    # 3. Output result
    if pretty and not out:
        banner = "=" * 20
        print(f"{banner}\nAel {output}\n{banner}\n{text}\n{banner}\n")
    elif not out:
        print(text)

    # 4. Optional write to file
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        if pretty:
            print(f"(wrote to {out})")


def main() -> None:
    """
    Entry point for the Ael CLI.

    Parses command-line arguments and dispatches to the appropriate mode:
    - Launches the REPL if no arguments are passed or `--repl` is specified.
    - Otherwise, runs the full Ael pipeline (read → lex → parse → output).

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-f`, `--format`: Output rendering ('tree', 'json' or 'tokens'), default is 'tree'.
        - `-o`, `--out`: Write the rendering to a file.
        - `-p`, `--pretty`: Show pretty-printed banners.
        - `--repl`: Launch the interactive REPL.
        - `--verbose`: Echo tokens before each parse (REPL only).

    Lexing and parsing failures are reported on stderr and exit with status 1.
    """
    if len(sys.argv) == 1:
        # No args passed: open REPL instead
        from ael.ael_repl import start_repl

        start_repl()
        return
    parser = argparse.ArgumentParser(prog="ael")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="output",
        choices=OUTPUT_FORMATS,
        default="tree",
        help="Output rendering (default: tree)",
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "-p", "--pretty", action="store_true", help="Show output with banners"
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL instead of parsing a source",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Verbose REPL mode (if --repl)"
    )

    args = parser.parse_args()

    if args.repl or args.source is None:
        from ael.ael_repl import start_repl

        start_repl(verbose=args.verbose)
        return

    try:
        run_ael(
            source=args.source,
            is_string=args.string,
            output=args.output,
            out=args.out,
            pretty=args.pretty,
        )
    except AelError as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

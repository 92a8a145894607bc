"""
Error types raised by the Ael lexer and parser.

Classes:
    AelError: Base class for every positioned failure in the Ael front end.
    LexError: A character that cannot start any token.
    ParseError: A token that matches no grammar alternative at its position.

All three derive from the built-in ``SyntaxError``, so callers that only know
about Python's own error type can still catch them. The message always starts
with ``Line <n>, col <m>:`` so tooling can point at the failing position.

Example:
    try:
        parse("x * 5")
    except ParseError as e:
        print(e.line, e.col)  # 1 3
"""


class AelError(SyntaxError):
    """Base class for Ael front-end errors.

    Attributes:
        description (str): The message without the position prefix.
        line (int): 1-based line of the offending character or token.
        col (int): 1-based column of the offending character or token.
    """

    def __init__(self, description: str, line: int, col: int) -> None:
        super().__init__(f"Line {line}, col {col}: {description}")
        self.description = description
        self.line = line
        self.col = col


class LexError(AelError):
    """Raised for a character that cannot start a valid token."""


class ParseError(AelError):
    """Raised when the token stream does not match the Ael grammar."""

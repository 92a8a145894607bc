"""
Lexical analyzer for the Ael language.

This module provides core components for converting raw source code into token streams:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Represents a single token with type, value, and source location.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Functions:
    tokenize(source): Lex a whole source string, raising on the first bad character.

Features:
    - Skips whitespace and single-line comments (`//`)
    - Supports longest-match recognition of operators (`==` before `=`, `**` before `*`)
    - Keywords use maximal munch: `lets` is an identifier, not `let` + `s`
    - Recognizes:
        * Identifiers and keywords (`let`, `print`, `abs`, `sqrt`)
        * Numbers (`digit+ ('.' digit+)?`, no exponent, no leading or trailing dot)
        * Operators and parentheses

Raises:
    LexError: From `tokenize` when a character cannot start any token.

Example:
    >>> stream = CharacterStream("print 42")
    >>> lexer = Lexer(stream)
    >>> token = lexer.next_token()
    >>> print(token)
    Token(PRINT, print)

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
"""

from typing import Any

from ael.ael_constants import (
    DIGITS,
    MAX_OPERATOR_LENGTH,
    keyword_hashmap,
    operator_hashmap,
)
from ael.ael_errors import LexError


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            Exception: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise Exception(
                f"CharacterStreamError: Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character `offset` places ahead, or an empty string if out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token in the Ael language.

    Attributes:
        type (str): The canonical token type (e.g. 'IDENT', 'NUMBER', 'EOF').
        value (str): The exact source text of the token.
        line (int): The 1-based line number where the token appears.
        col (int): The 1-based column number where the token starts.
    """

    def __init__(self, type_: str, value: str, line: int = 0, col: int = 0):
        self.type = type_
        self.value = value
        self.line = line
        self.col = col

    @property
    def kind(self) -> str:
        return self.type

    @property
    def text(self) -> str:
        return self.value

    @property
    def column(self) -> int:
        return self.col

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value, self.line, self.col))


def is_letter(ch: str) -> bool:
    return ch != "" and ch.isalpha()


def is_alnum(ch: str) -> bool:
    return ch != "" and (ch.isalpha() or ch in DIGITS)


def is_space(ch: str) -> bool:
    """Control characters and the ASCII space; other Unicode spaces are not whitespace."""
    return ch != "" and ch <= " "


class Lexer:
    """Lexical analyzer for the Ael language.

    The Lexer takes a CharacterStream and converts it into a stream of Token objects.
    A character that cannot start a token comes back as an ``ERROR`` token instead
    of raising, so a parser pulling tokens can report whichever problem it reaches
    first in source order.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self, offset: int = 0) -> str:
        return self.stream.peek(offset)

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        """Skips all whitespace and `//` comments in the stream."""
        while not self.stream.end_of_file():
            if is_space(self.peek()):
                self.advance()
            elif self.peek() == "/" and self.peek(1) == "/":
                self.skip_comment()
            else:
                break

    def skip_comment(self) -> None:
        """Advances through the stream until the end of a comment line."""
        while not self.stream.end_of_file() and self.peek() != "\n":
            self.advance()

    def match_operator(self) -> Token | None:
        """Attempts to match the longest valid operator from the current position.

        Returns:
            Token | None: A Token if a match is found, otherwise None.
        """
        line, col = self.stream.line, self.stream.column
        max_token = None
        match_len = 0
        candidate = ""

        for i in range(MAX_OPERATOR_LENGTH):
            ch = self.stream.peek(i)
            if ch == "":
                break
            candidate += ch
            if candidate in operator_hashmap:
                max_token = candidate
                match_len = i + 1

        if max_token:
            for _ in range(match_len):
                self.advance()
            return Token(operator_hashmap[max_token], max_token, line, col)

        return None

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token, an ``ERROR`` token for an unrecognized
            character, or ``EOF`` once the input is exhausted.
        """
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token("EOF", "EOF", line, col)

        ch = self.peek()

        # 1. Identifier or keyword
        if is_letter(ch):
            ident = ""
            while is_alnum(self.peek()):
                ident += self.advance()
            if ident in keyword_hashmap:
                return Token(keyword_hashmap[ident], ident, line, col)
            return Token("IDENT", ident, line, col)

        # 2. Number, with an optional fraction only when a digit follows the dot
        if ch in DIGITS:
            num = ""
            while self.peek() != "" and self.peek() in DIGITS:
                num += self.advance()
            if self.peek() == "." and self.peek(1) != "" and self.peek(1) in DIGITS:
                num += self.advance()
                while self.peek() != "" and self.peek() in DIGITS:
                    num += self.advance()
            return Token("NUMBER", num, line, col)

        # 3. Compound or symbolic operator
        token = self.match_operator()
        if token:
            return token

        # 4. Unknown character → error
        return Token("ERROR", self.advance(), line, col)

    def tokens(self) -> list[Token]:
        """Drains the stream, returning every token up to and including ``EOF``."""
        tokens = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.type == "EOF":
                return tokens


def tokenize(source: str) -> list[Token]:
    """Lex a complete source string.

    Args:
        source (str): Ael source code.

    Returns:
        list[Token]: All tokens in source order, ending with an ``EOF`` token.

    Raises:
        LexError: At the first character that cannot start a token.
    """
    tokens = Lexer(CharacterStream(source)).tokens()
    for tok in tokens:
        if tok.type == "ERROR":
            raise LexError(f"Unexpected character {tok.value!r}", tok.line, tok.col)
    return tokens


__all__ = ["CharacterStream", "Lexer", "Token", "tokenize"]

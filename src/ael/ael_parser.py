"""
Ael Language Parser

Parses Ael source tokens into an immutable abstract syntax tree (AST).

This module implements a hand-written recursive-descent parser. Every grammar
rule is one method; left-associative tiers loop while the next token is one of
their operators, right-associative `**` and the unary prefixes recurse.

Grammar
-------
    Program    := Statement+ EOF
    Statement  := "let" id "=" Expr
                | id "=" Expr
                | "print" Expr
    Expr       := Expr1 ("==" Expr1)?
    Expr1      := Term (("+" | "-") Term)*
    Term       := ("-")? Factor
    Factor     := Power (("*" | "/" | "%") Power)*
    Power      := Primary ("**" Power)?
    Primary    := id | number | "(" Expr ")" | ("abs" | "sqrt") Power

Binding strength, tightest first: primaries, `abs`/`sqrt`, `**`, `* / %`,
unary `-`, `+ -`, `==`. A comparison holds exactly one `==`; `a == b == c`
is rejected at the second `==`.

Parser Behavior
---------------
- Fails fast: the first token that fits no alternative raises `ParseError`
  carrying that token's line and column. No partial tree is returned.
- An unrecognized character reaches the parser as an `ERROR` token and is
  reported as a `LexError` only when the parser gets to it.
- An empty program and any input left after the last statement are errors.
- Nesting deeper than `Parser.max_nesting` levels (parentheses, `abs`/`sqrt`
  operands, `**` exponents) raises `ParseError` at the token that goes one
  level too deep.

Entry Points
------------
- `parse()`: Parse source text into a `Program`.
- `Parser(tokens).parse()`: Parse an already-lexed token list.

Raises
------
LexError
    For a character that cannot start a token.
ParseError
    For a token sequence that does not match the grammar.
"""

from __future__ import annotations

from ael.ael_ast import (
    Assignment,
    BinaryExpression,
    Declaration,
    Expression,
    IdentifierExpression,
    LiteralExpression,
    PrintStatement,
    Program,
    Statement,
    UnaryExpression,
)
from ael.ael_errors import AelError, LexError, ParseError
from ael.ael_lexer import CharacterStream, Lexer, Token

TOKEN_DESCRIPTIONS: dict[str, str] = {
    "EOF": "end of input",
    "IDENT": "identifier",
    "NUMBER": "number",
}


def describe(tok: Token) -> str:
    if tok.type == "EOF":
        return TOKEN_DESCRIPTIONS["EOF"]
    if tok.type in TOKEN_DESCRIPTIONS:
        return f"{TOKEN_DESCRIPTIONS[tok.type]} {tok.value!r}"
    return repr(tok.value)


class Parser:
    """
    Ael Parser Class

    Transforms a list of lexical tokens into a `Program` tree.

    Attributes
    ----------
    tokens : list[Token]
        The input token stream, normally ending in an `EOF` token.
    position : int
        Current index into the token stream.

    Raises
    ------
    ParseError
        When an invalid construct or malformed syntax is encountered.
    LexError
        When the parser reaches an `ERROR` token.
    """

    additive_ops: tuple[str, ...] = ("PLUS", "SUB")
    multiplicative_ops: tuple[str, ...] = ("MULT", "DIV", "MOD")
    builtin_ops: tuple[str, ...] = ("ABS", "SQRT")
    max_nesting: int = 100

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens: list[Token] = tokens
        self.position: int = 0
        self.depth: int = 0

    def current(self) -> Token:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        if self.tokens:
            last = self.tokens[-1]
            return Token("EOF", "EOF", last.line, last.col + len(last.value))
        return Token("EOF", "EOF", 1, 1)

    def advance(self) -> Token:
        tok = self.current()
        self.position += 1
        return tok

    def check(self, *types: str) -> bool:
        return self.current().type in types

    def fail(self, expected: str) -> AelError:
        """Builds the error for the current token; an `ERROR` token is a lexical failure."""
        tok = self.current()
        if tok.type == "ERROR":
            return LexError(f"Unexpected character {tok.value!r}", tok.line, tok.col)
        return ParseError(f"Expected {expected}, got {describe(tok)}", tok.line, tok.col)

    def match(self, *types: str, expected: str | None = None) -> Token:
        tok = self.current()
        if tok.type in types:
            self.position += 1
            return tok
        raise self.fail(expected or " or ".join(types))

    def parse(self) -> Program:
        """Parse a full Ael program: one or more statements, then end of input."""
        first = self.current()
        statements: list[Statement] = [self.parse_statement()]
        while not self.check("EOF"):
            statements.append(self.parse_statement())
        return Program(statements, line=first.line, col=first.col)

    def parse_statement(self) -> Statement:
        tok = self.current()

        if tok.type == "LET":
            self.advance()
            name_tok = self.match("IDENT", expected="identifier")
            self.match("ASSIGN", expected="'='")
            return Declaration(
                name_tok.value, self.parse_expr(), line=tok.line, col=tok.col
            )

        if tok.type == "IDENT":
            self.advance()
            self.match("ASSIGN", expected="'='")
            target = IdentifierExpression(tok.value, line=tok.line, col=tok.col)
            return Assignment(target, self.parse_expr(), line=tok.line, col=tok.col)

        if tok.type == "PRINT":
            self.advance()
            return PrintStatement(self.parse_expr(), line=tok.line, col=tok.col)

        raise self.fail("a statement ('let', 'print' or an assignment)")

    def parse_expr(self) -> Expression:
        """Expr := Expr1 ("==" Expr1)?"""
        left = self.parse_expr1()
        if self.check("EQ"):
            op_tok = self.advance()
            right = self.parse_expr1()
            return BinaryExpression(
                op_tok.value, left, right, line=left.line, col=left.col
            )
        return left

    def parse_expr1(self) -> Expression:
        """Expr1 := Term (("+" | "-") Term)*"""
        node = self.parse_term()
        while self.check(*self.additive_ops):
            op_tok = self.advance()
            right = self.parse_term()
            node = BinaryExpression(
                op_tok.value, node, right, line=node.line, col=node.col
            )
        return node

    def parse_term(self) -> Expression:
        """Term := ("-")? Factor"""
        if self.check("SUB"):
            op_tok = self.advance()
            operand = self.parse_factor()
            return UnaryExpression(
                op_tok.value, operand, line=op_tok.line, col=op_tok.col
            )
        return self.parse_factor()

    def parse_factor(self) -> Expression:
        """Factor := Power (("*" | "/" | "%") Power)*"""
        node = self.parse_power()
        while self.check(*self.multiplicative_ops):
            op_tok = self.advance()
            right = self.parse_power()
            node = BinaryExpression(
                op_tok.value, node, right, line=node.line, col=node.col
            )
        return node

    def parse_power(self) -> Expression:
        """Power := Primary ("**" Power)?

        Every nesting path (parentheses, `abs`/`sqrt`, `**`) re-enters here, so
        the depth limit is enforced in this one place.
        """
        tok = self.current()
        if self.depth >= self.max_nesting:
            if tok.type == "ERROR":
                raise self.fail("an expression")
            raise ParseError("Expression nested too deeply", tok.line, tok.col)
        self.depth += 1
        try:
            base = self.parse_primary()
            if self.check("POW"):
                op_tok = self.advance()
                exponent = self.parse_power()
                return BinaryExpression(
                    op_tok.value, base, exponent, line=base.line, col=base.col
                )
            return base
        finally:
            self.depth -= 1

    def parse_primary(self) -> Expression:
        tok = self.current()

        if tok.type == "IDENT":
            self.advance()
            return IdentifierExpression(tok.value, line=tok.line, col=tok.col)

        if tok.type == "NUMBER":
            self.advance()
            return LiteralExpression(float(tok.value), line=tok.line, col=tok.col)

        if tok.type == "LPAREN":
            self.advance()
            inner = self.parse_expr()
            self.match("RPAREN", expected="')'")
            return inner

        if tok.type in self.builtin_ops:
            self.advance()
            operand = self.parse_power()
            return UnaryExpression(tok.value, operand, line=tok.line, col=tok.col)

        raise self.fail("an expression")


def parse(source: str) -> Program:
    """Parse Ael source code into a `Program`.

    Args:
        source (str): The complete program text.

    Returns:
        Program: The root of a freshly built, immutable syntax tree.

    Raises:
        LexError: If the first problem in the source is an unrecognized character.
        ParseError: If the first problem is a grammar violation.
    """
    tokens = Lexer(CharacterStream(source)).tokens()
    return Parser(tokens).parse()


__all__ = ["Parser", "parse"]

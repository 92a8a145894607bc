"""
Defines the abstract syntax tree (AST) node structure for the Ael language.

The tree is a closed set of immutable node variants:

    Program
    Statement:  Declaration | Assignment | PrintStatement
    Expression: LiteralExpression | IdentifierExpression
                | BinaryExpression | UnaryExpression

Each node tracks:
    line (int): 1-based line of the token that starts the node.
    col (int): 1-based column of the token that starts the node.

Positions are metadata only: they are left out of equality and ``repr`` so a
hand-built expected tree compares equal to a parsed one.

Operator tags are checked when a node is constructed; anything outside the
fixed operator sets raises ``ValueError``.

Example:
    node = BinaryExpression("-", LiteralExpression(2.0), LiteralExpression(0.0))
"""

from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from typing import Any

from ael.ael_constants import binary_operators, unary_operators

ASTDict = dict[str, Any]
"""Plain-dictionary form of a node, as produced by ``ASTNode.to_dict``."""


@dataclass(frozen=True, kw_only=True)
class ASTNode:
    """Base class of every Ael syntax tree node."""

    line: int = field(default=0, compare=False, repr=False)
    col: int = field(default=0, compare=False, repr=False)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def child_nodes(self) -> Iterator["ASTNode"]:
        """Yields the direct children of this node in field order."""
        for f in fields(self):
            val = getattr(self, f.name)
            if isinstance(val, ASTNode):
                yield val
            elif isinstance(val, tuple):
                yield from (v for v in val if isinstance(v, ASTNode))

    def walk(self) -> Iterator["ASTNode"]:
        """Yields this node and all of its descendants, pre-order."""
        yield self
        for child in self.child_nodes():
            yield from child.walk()

    def to_dict(self) -> ASTDict:
        result: ASTDict = {"kind": self.kind}
        for f in fields(self):
            if f.name in ("line", "col"):
                continue
            val = getattr(self, f.name)
            if isinstance(val, ASTNode):
                val = val.to_dict()
            elif isinstance(val, tuple):
                val = [v.to_dict() if isinstance(v, ASTNode) else v for v in val]
            result[f.name] = val
        result["line"] = self.line
        result["col"] = self.col
        return result


@dataclass(frozen=True)
class Expression(ASTNode):
    """Base class for expression variants."""


@dataclass(frozen=True)
class Statement(ASTNode):
    """Base class for statement variants."""


@dataclass(frozen=True)
class LiteralExpression(Expression):
    value: float

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(
                f"Literal values are non-negative, got {self.value!r}; "
                "use UnaryExpression('-', ...) for negation"
            )


@dataclass(frozen=True)
class IdentifierExpression(Expression):
    name: str


@dataclass(frozen=True)
class BinaryExpression(Expression):
    op: str
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        if self.op not in binary_operators:
            raise ValueError(f"Unknown binary operator: {self.op!r}")


@dataclass(frozen=True)
class UnaryExpression(Expression):
    op: str
    operand: Expression

    def __post_init__(self) -> None:
        if self.op not in unary_operators:
            raise ValueError(f"Unknown unary operator: {self.op!r}")


@dataclass(frozen=True)
class Declaration(Statement):
    """``let name = initializer``: introduces a new binding."""

    name: str
    initializer: Expression


@dataclass(frozen=True)
class Assignment(Statement):
    """``target = source``: rebinds an existing name."""

    target: IdentifierExpression
    source: Expression


@dataclass(frozen=True)
class PrintStatement(Statement):
    expression: Expression


@dataclass(frozen=True)
class Program(ASTNode):
    """Root of the tree. ``statements`` keeps source order."""

    statements: tuple[Statement, ...]

    def __post_init__(self) -> None:
        # Accept any iterable but always store an immutable tuple
        object.__setattr__(self, "statements", tuple(self.statements))


__all__ = [
    "ASTDict",
    "ASTNode",
    "Assignment",
    "BinaryExpression",
    "Declaration",
    "Expression",
    "IdentifierExpression",
    "LiteralExpression",
    "PrintStatement",
    "Program",
    "Statement",
    "UnaryExpression",
]

"""
Numbered, indented text rendering of an Ael syntax tree.

Example:
    >>> print(format_ast(parse("print 1 * two")))
       1 | program: Program
       2 |   statements[0]: PrintStatement
       3 |     expression: BinaryExpression op='*'
       4 |       left: LiteralExpression value=1
       5 |       right: IdentifierExpression name='two'

Each line shows the field name that holds the node, the node's class, and its
scalar fields. Child nodes follow on their own lines, two spaces deeper;
sequence items are labelled ``field[i]``.
"""

from dataclasses import fields
from typing import Any

from ael.ael_ast import ASTNode


def format_scalar(value: Any) -> str:
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_ast(node: ASTNode, label: str = "program") -> str:
    """Renders `node` and its descendants, one numbered line per node."""
    lines: list[str] = []

    def visit(current: ASTNode, name: str, depth: int) -> None:
        scalars: list[str] = []
        children: list[tuple[str, ASTNode]] = []
        for f in fields(current):
            if f.name in ("line", "col"):
                continue
            val = getattr(current, f.name)
            if isinstance(val, ASTNode):
                children.append((f.name, val))
            elif isinstance(val, tuple):
                children.extend(
                    (f"{f.name}[{i}]", item) for i, item in enumerate(val)
                )
            else:
                scalars.append(f"{f.name}={format_scalar(val)}")

        text = f"{'  ' * depth}{name}: {current.kind}"
        if scalars:
            text += " " + " ".join(scalars)
        lines.append(text)

        for child_name, child in children:
            visit(child, child_name, depth + 1)

    visit(node, label, 0)
    return "\n".join(f"{i:>4} | {text}" for i, text in enumerate(lines, 1))


__all__ = ["format_ast"]

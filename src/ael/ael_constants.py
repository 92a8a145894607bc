"""
Token tables shared by the Ael lexer and parser.

Exports:
    keyword_hashmap: Reserved words mapped to their token type.
    operator_hashmap: Operator and punctuation spellings mapped to their token type.
    binary_operators: Operator spellings allowed in a ``BinaryExpression``.
    unary_operators: Operator spellings allowed in a ``UnaryExpression``.
"""

keyword_hashmap: dict[str, str] = {
    "let": "LET",
    "print": "PRINT",
    "abs": "ABS",
    "sqrt": "SQRT",
}

operator_hashmap: dict[str, str] = {
    "==": "EQ",
    "**": "POW",
    "=": "ASSIGN",
    "+": "PLUS",
    "-": "SUB",
    "*": "MULT",
    "/": "DIV",
    "%": "MOD",
    "(": "LPAREN",
    ")": "RPAREN",
}

MAX_OPERATOR_LENGTH = max(len(op) for op in operator_hashmap)

DIGITS = "0123456789"

binary_operators: frozenset[str] = frozenset({"==", "+", "-", "*", "/", "%", "**"})

unary_operators: frozenset[str] = frozenset({"-", "abs", "sqrt"})

"""Mappings from language types and operators to LLVM IR spellings."""

from __future__ import annotations

from typing import Optional

from melpc.nodes import Node, TypeSpec
from melpc.tokens import TokenType

_MAX_IDENTIFIER = 255
_IDENTIFIER_STOPS = frozenset(" \n();\0")

_LLVM_TYPES = {
    "numeric": "i64",
    "int": "i64",
    "boolean": "i1",
    "bool": "i1",
    "void": "void",
}

_AST_TYPES = {
    TokenType.NUMERIC: "i64",
    TokenType.BOOLEAN: "i1",
}

_BINARY_OPS = {
    "+": "add",
    "-": "sub",
    "*": "mul",
    "/": "sdiv",
    "%": "srem",
    "and": "and",
    "&&": "and",
    "or": "or",
    "||": "or",
}

_OP_STRINGS = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.MOD: "%",
    TokenType.AND: "and",
    TokenType.OR: "or",
    TokenType.EQUAL_EQUAL: "==",
    TokenType.NOT_EQUAL: "!=",
    TokenType.LESS: "<",
    TokenType.GREATER: ">",
    TokenType.LESS_EQUAL: "<=",
    TokenType.GREATER_EQUAL: ">=",
    TokenType.NOT: "!",
}

_ICMP_PREDICATES = {
    "<": "slt",
    ">": "sgt",
    "<=": "sle",
    ">=": "sge",
    "==": "eq",
    "!=": "ne",
}


def clean_identifier(raw_name: str) -> str:
    """Return the leading word of a name, cut at a space, newline, paren or ';'.

    At most 255 characters are kept.
    """
    for index, char in enumerate(raw_name[:_MAX_IDENTIFIER]):
        if char in _IDENTIFIER_STOPS:
            return raw_name[:index]
    return raw_name[:_MAX_IDENTIFIER]


def get_llvm_type(melp_type: str) -> str:
    """Map a type name to its LLVM type; unknown names fall back to ``i64``."""
    return _LLVM_TYPES.get(melp_type, "i64")


def get_llvm_type_from_ast(type_node: Optional[Node]) -> str:
    """Map a type specifier node to its LLVM type, defaulting to ``i64``."""
    if not isinstance(type_node, TypeSpec):
        return "i64"
    return _AST_TYPES.get(type_node.type_token, "i64")


def get_llvm_binary_op(op: str, type: Optional[str] = None) -> str:
    """Map an arithmetic or logical operator to its LLVM instruction.

    ``type`` is accepted for type-specific selection but does not change
    the result. Unknown operators fall back to ``add``.
    """
    del type
    return _BINARY_OPS.get(op, "add")


def token_type_to_op_string(op: TokenType) -> str:
    """Return the operator spelling for a token kind, defaulting to ``+``."""
    return _OP_STRINGS.get(op, "+")


def get_llvm_icmp_pred(op: str) -> str:
    """Map a comparison operator to its signed ``icmp`` predicate.

    Unknown operators fall back to ``eq``.
    """
    return _ICMP_PREDICATES.get(op, "eq")
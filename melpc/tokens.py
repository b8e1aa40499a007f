"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class TokenType(Enum):
    """Every kind of token the lexer can produce."""

    # Literals
    NUMBER = auto()
    IDENTIFIER = auto()
    TRUE = auto()
    FALSE = auto()
    STRING = auto()

    # Keywords
    FUNCTION = auto()
    END_FUNCTION = auto()
    AS = auto()
    RETURN = auto()
    IF = auto()
    THEN = auto()
    ELSE = auto()
    ELSE_IF = auto()
    END_IF = auto()
    WHILE = auto()
    END_WHILE = auto()
    VAR = auto()
    NUMERIC = auto()
    BOOLEAN = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    MOD = auto()

    # Assignment
    EQUAL = auto()

    # Comparison operators
    EQUAL_EQUAL = auto()
    NOT_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()

    # Logical operators
    AND = auto()
    OR = auto()
    NOT = auto()

    # Delimiters
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    SEMICOLON = auto()
    COMMA = auto()

    # Special
    NEWLINE = auto()
    COMMENT = auto()
    EOF = auto()
    ERROR = auto()


_DISPLAY_NAMES = {
    TokenType.NUMBER: "NUMBER",
    TokenType.IDENTIFIER: "IDENTIFIER",
    TokenType.TRUE: "TRUE",
    TokenType.FALSE: "FALSE",
    TokenType.STRING: "STRING",
    TokenType.FUNCTION: "FUNCTION",
    TokenType.END_FUNCTION: "END_FUNCTION",
    TokenType.AS: "AS",
    TokenType.RETURN: "RETURN",
    TokenType.IF: "IF",
    TokenType.THEN: "THEN",
    TokenType.ELSE: "ELSE",
    TokenType.ELSE_IF: "ELSE_IF",
    TokenType.END_IF: "END_IF",
    TokenType.WHILE: "WHILE",
    TokenType.END_WHILE: "END_WHILE",
    TokenType.VAR: "VAR",
    TokenType.NUMERIC: "NUMERIC",
    TokenType.BOOLEAN: "BOOLEAN",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.MOD: "MOD",
    TokenType.EQUAL: "=",
    TokenType.EQUAL_EQUAL: "==",
    TokenType.NOT_EQUAL: "!=",
    TokenType.LESS: "<",
    TokenType.LESS_EQUAL: "<=",
    TokenType.GREATER: ">",
    TokenType.GREATER_EQUAL: ">=",
    TokenType.AND: "AND",
    TokenType.OR: "OR",
    TokenType.NOT: "NOT",
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_BRACKET: "[",
    TokenType.RIGHT_BRACKET: "]",
    TokenType.SEMICOLON: ";",
    TokenType.COMMA: ",",
    TokenType.NEWLINE: "NEWLINE",
    TokenType.COMMENT: "COMMENT",
    TokenType.EOF: "EOF",
    TokenType.ERROR: "ERROR",
}


def token_type_name(token_type: TokenType) -> str:
    """Return the human-readable name of a token kind, or "UNKNOWN"."""
    return _DISPLAY_NAMES.get(token_type, "UNKNOWN")


@dataclass(frozen=True)
class Token:
    """A single lexical token with its source text and position.

    ``value`` holds the parsed integer for numbers, the unquoted text for
    strings and the message for errors; it is ``None`` otherwise.
    """

    type: TokenType
    lexeme: str
    line: int
    column: int
    value: Union[int, str, None] = None
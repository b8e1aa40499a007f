"""Lexical analysis: turns source text into a list of tokens."""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

from melpc.tokens import Token, TokenType

_LLONG_MAX = 2**63 - 1

_KEYWORDS = {
    "as": TokenType.AS,
    "and": TokenType.AND,
    "boolean": TokenType.BOOLEAN,
    "else": TokenType.ELSE,
    "end_if": TokenType.END_IF,
    "else_if": TokenType.ELSE_IF,
    "end_while": TokenType.END_WHILE,
    "end_function": TokenType.END_FUNCTION,
    "false": TokenType.FALSE,
    "function": TokenType.FUNCTION,
    "if": TokenType.IF,
    "mod": TokenType.MOD,
    "not": TokenType.NOT,
    "numeric": TokenType.NUMERIC,
    "or": TokenType.OR,
    "return": TokenType.RETURN,
    "then": TokenType.THEN,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}

# Characters that form a two-character token when followed by '='.
_WITH_EQUAL = {
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def is_digit(c: str) -> bool:
    """True for an ASCII decimal digit."""
    return len(c) == 1 and "0" <= c <= "9"


def is_alpha(c: str) -> bool:
    """True for an ASCII letter or an underscore."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z" or c == "_")


def is_alphanumeric(c: str) -> bool:
    """True for a character that may continue an identifier."""
    return is_alpha(c) or is_digit(c)


def is_whitespace(c: str) -> bool:
    """True for space, tab or carriage return; newlines are significant."""
    return c in (" ", "\t", "\r") and len(c) == 1


class _Scanner:
    """Walks the source one character at a time, tracking line and column."""

    def __init__(self, source: str) -> None:
        # A NUL character ends the input.
        self.source = source.split("\0", 1)[0]
        self.start = 0
        self.current = 0
        self.line = 1
        self.column = 1

    def at_end(self) -> bool:
        return self.current >= len(self.source)

    def peek(self) -> str:
        return "" if self.at_end() else self.source[self.current]

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        self.column += 1
        return c

    def match(self, expected: str) -> bool:
        if self.at_end() or self.peek() != expected:
            return False
        self.advance()
        return True

    def skip_whitespace(self) -> None:
        while is_whitespace(self.peek()):
            self.advance()

    def make(self, token_type: TokenType, value: Union[int, str, None] = None) -> Token:
        lexeme = self.source[self.start:self.current]
        return Token(token_type, lexeme, self.line, self.column - len(lexeme), value)

    def error(self, message: str, column: int) -> Token:
        return Token(TokenType.ERROR, message, self.line, column, message)

    def scan_number(self) -> Token:
        while is_digit(self.peek()):
            self.advance()
        lexeme = self.source[self.start:self.current]
        return self.make(TokenType.NUMBER, min(int(lexeme), _LLONG_MAX))

    def scan_identifier(self) -> Token:
        while is_alphanumeric(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        return self.make(_KEYWORDS.get(text, TokenType.IDENTIFIER))

    def scan_string(self) -> Token:
        while not self.at_end() and self.peek() not in ('"', "\n"):
            self.advance()
        if self.at_end() or self.peek() == "\n":
            return self.error("Unterminated string literal", self.column)
        self.advance()
        token = self.make(TokenType.STRING)
        return Token(token.type, token.lexeme, token.line, token.column, token.lexeme[1:-1])

    def scan_comment(self) -> Token:
        while not self.at_end() and self.peek() != "\n":
            self.advance()
        return self.make(TokenType.COMMENT)

    def scan_token(self) -> Token:
        self.skip_whitespace()
        self.start = self.current
        if self.at_end():
            return self.make(TokenType.EOF)

        c = self.advance()
        if is_alpha(c):
            return self.scan_identifier()
        if is_digit(c):
            return self.scan_number()

        if c == "\n":
            token = self.make(TokenType.NEWLINE)
            self.line += 1
            self.column = 1
            return token
        if c in _SINGLE_CHAR:
            return self.make(_SINGLE_CHAR[c])
        if c == "-":
            if self.match("-"):
                return self.scan_comment()
            return self.make(TokenType.MINUS)
        if c in _WITH_EQUAL:
            double, single = _WITH_EQUAL[c]
            return self.make(double if self.match("=") else single)
        if c == "!":
            if self.match("="):
                return self.make(TokenType.NOT_EQUAL)
            return self.error(
                "Unexpected character '!' (use 'not' for logical NOT)", self.column - 1
            )
        if c == '"':
            return self.scan_string()
        return self.error(
            f"Unexpected character '{c}' (ASCII {ord(c)})", self.column - 1
        )

    def __iter__(self) -> Iterator[Token]:
        while not self.at_end():
            token = self.scan_token()
            if token.type is TokenType.COMMENT:
                continue
            yield token
            if token.type is TokenType.EOF:
                return
        yield Token(TokenType.EOF, "", self.line, self.column)


def tokenize(source: str) -> List[Token]:
    """Split source text into tokens, always ending with an EOF token.

    Comments are dropped; invalid input yields ERROR tokens whose lexeme
    and value hold the message, and scanning carries on after them.
    """
    return list(_Scanner(source))


def _first_error(tokens: List[Token]) -> Optional[Token]:
    return next((t for t in tokens if t.type is TokenType.ERROR), None)
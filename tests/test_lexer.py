import pytest

from melpc.lexer import is_alpha, is_alphanumeric, is_digit, is_whitespace, tokenize
from melpc.tokens import TokenType as T


def summary(tokens):
    return [(t.type, t.lexeme, t.line, t.column) for t in tokens]


def test_numbers():
    tokens = tokenize("42 100 999 0")
    assert summary(tokens) == [
        (T.NUMBER, "42", 1, 1),
        (T.NUMBER, "100", 1, 4),
        (T.NUMBER, "999", 1, 8),
        (T.NUMBER, "0", 1, 12),
        (T.EOF, "", 1, 13),
    ]
    assert [t.value for t in tokens[:4]] == [42, 100, 999, 0]


def test_booleans():
    assert summary(tokenize("true false")) == [
        (T.TRUE, "true", 1, 1),
        (T.FALSE, "false", 1, 6),
        (T.EOF, "", 1, 11),
    ]


def test_identifiers():
    assert summary(tokenize("x my_var result123 _test")) == [
        (T.IDENTIFIER, "x", 1, 1),
        (T.IDENTIFIER, "my_var", 1, 3),
        (T.IDENTIFIER, "result123", 1, 10),
        (T.IDENTIFIER, "_test", 1, 20),
        (T.EOF, "", 1, 25),
    ]


def test_function_keywords():
    assert summary(tokenize("function end_function return as")) == [
        (T.FUNCTION, "function", 1, 1),
        (T.END_FUNCTION, "end_function", 1, 10),
        (T.RETURN, "return", 1, 23),
        (T.AS, "as", 1, 30),
        (T.EOF, "", 1, 32),
    ]


def test_control_flow_keywords():
    assert summary(tokenize("if then else else_if end_if while end_while")) == [
        (T.IF, "if", 1, 1),
        (T.THEN, "then", 1, 4),
        (T.ELSE, "else", 1, 9),
        (T.ELSE_IF, "else_if", 1, 14),
        (T.END_IF, "end_if", 1, 22),
        (T.WHILE, "while", 1, 29),
        (T.END_WHILE, "end_while", 1, 35),
        (T.EOF, "", 1, 44),
    ]


def test_type_keywords():
    assert summary(tokenize("numeric boolean var")) == [
        (T.NUMERIC, "numeric", 1, 1),
        (T.BOOLEAN, "boolean", 1, 9),
        (T.VAR, "var", 1, 17),
        (T.EOF, "", 1, 20),
    ]


def test_arithmetic_operators():
    assert summary(tokenize("+ - * / mod")) == [
        (T.PLUS, "+", 1, 1),
        (T.MINUS, "-", 1, 3),
        (T.STAR, "*", 1, 5),
        (T.SLASH, "/", 1, 7),
        (T.MOD, "mod", 1, 9),
        (T.EOF, "", 1, 12),
    ]


def test_comparison_operators():
    assert summary(tokenize("== != < <= > >=")) == [
        (T.EQUAL_EQUAL, "==", 1, 1),
        (T.NOT_EQUAL, "!=", 1, 4),
        (T.LESS, "<", 1, 7),
        (T.LESS_EQUAL, "<=", 1, 9),
        (T.GREATER, ">", 1, 12),
        (T.GREATER_EQUAL, ">=", 1, 14),
        (T.EOF, "", 1, 16),
    ]


def test_logical_operators():
    assert summary(tokenize("and or not")) == [
        (T.AND, "and", 1, 1),
        (T.OR, "or", 1, 5),
        (T.NOT, "not", 1, 8),
        (T.EOF, "", 1, 11),
    ]


def test_delimiters():
    assert summary(tokenize("( ) [ ] ; ,")) == [
        (T.LEFT_PAREN, "(", 1, 1),
        (T.RIGHT_PAREN, ")", 1, 3),
        (T.LEFT_BRACKET, "[", 1, 5),
        (T.RIGHT_BRACKET, "]", 1, 7),
        (T.SEMICOLON, ";", 1, 9),
        (T.COMMA, ",", 1, 11),
        (T.EOF, "", 1, 12),
    ]


def test_complex_expression():
    tokens = tokenize("x = y + 10")
    assert summary(tokens) == [
        (T.IDENTIFIER, "x", 1, 1),
        (T.EQUAL, "=", 1, 3),
        (T.IDENTIFIER, "y", 1, 5),
        (T.PLUS, "+", 1, 7),
        (T.NUMBER, "10", 1, 9),
        (T.EOF, "", 1, 11),
    ]
    assert tokens[4].value == 10


def test_function_declaration():
    assert summary(tokenize("function main() as numeric")) == [
        (T.FUNCTION, "function", 1, 1),
        (T.IDENTIFIER, "main", 1, 10),
        (T.LEFT_PAREN, "(", 1, 14),
        (T.RIGHT_PAREN, ")", 1, 15),
        (T.AS, "as", 1, 17),
        (T.NUMERIC, "numeric", 1, 20),
        (T.EOF, "", 1, 27),
    ]


def test_multiline():
    assert summary(tokenize("x\ny\nz")) == [
        (T.IDENTIFIER, "x", 1, 1),
        (T.NEWLINE, "\n", 1, 2),
        (T.IDENTIFIER, "y", 2, 1),
        (T.NEWLINE, "\n", 2, 2),
        (T.IDENTIFIER, "z", 3, 1),
        (T.EOF, "", 3, 2),
    ]


def test_comments():
    assert summary(tokenize("x -- this is a comment\ny")) == [
        (T.IDENTIFIER, "x", 1, 1),
        (T.NEWLINE, "\n", 1, 23),
        (T.IDENTIFIER, "y", 2, 1),
        (T.EOF, "", 2, 2),
    ]


def test_strings():
    tokens = tokenize('"hello" "world"')
    assert summary(tokens) == [
        (T.STRING, '"hello"', 1, 1),
        (T.STRING, '"world"', 1, 9),
        (T.EOF, "", 1, 16),
    ]
    assert tokens[0].value == "hello"
    assert tokens[1].value == "world"


def test_error_invalid_character():
    tokens = tokenize("x @ y")
    assert [(t.type, t.line, t.column) for t in tokens] == [
        (T.IDENTIFIER, 1, 1),
        (T.ERROR, 1, 3),
        (T.IDENTIFIER, 1, 5),
        (T.EOF, 1, 6),
    ]
    assert tokens[1].value == "Unexpected character '@' (ASCII 64)"
    assert tokens[1].lexeme == tokens[1].value


def test_error_unterminated_string():
    tokens = tokenize('"unclosed')
    assert [(t.type, t.line, t.column) for t in tokens] == [
        (T.ERROR, 1, 10),
        (T.EOF, 1, 10),
    ]
    assert tokens[0].value == "Unterminated string literal"


def test_full_program():
    source = "function main() as numeric\n  return 42\nend_function"
    assert summary(tokenize(source)) == [
        (T.FUNCTION, "function", 1, 1),
        (T.IDENTIFIER, "main", 1, 10),
        (T.LEFT_PAREN, "(", 1, 14),
        (T.RIGHT_PAREN, ")", 1, 15),
        (T.AS, "as", 1, 17),
        (T.NUMERIC, "numeric", 1, 20),
        (T.NEWLINE, "\n", 1, 27),
        (T.RETURN, "return", 2, 3),
        (T.NUMBER, "42", 2, 10),
        (T.NEWLINE, "\n", 2, 12),
        (T.END_FUNCTION, "end_function", 3, 1),
        (T.EOF, "", 3, 13),
    ]


def test_empty_source_has_only_eof():
    assert summary(tokenize("")) == [(T.EOF, "", 1, 1)]


def test_trailing_whitespace_eof_position():
    assert summary(tokenize("x   ")) == [(T.IDENTIFIER, "x", 1, 1), (T.EOF, "", 1, 5)]


def test_comment_at_end_of_input():
    assert summary(tokenize("x -- c")) == [(T.IDENTIFIER, "x", 1, 1), (T.EOF, "", 1, 7)]


def test_bang_alone_is_error():
    tokens = tokenize("!")
    assert tokens[0].type is T.ERROR
    assert (tokens[0].line, tokens[0].column) == (1, 1)
    assert tokens[0].value == "Unexpected character '!' (use 'not' for logical NOT)"
    assert tokens[-1].type is T.EOF


def test_string_broken_by_newline():
    assert [(t.type, t.line, t.column) for t in tokenize('"ab\nc')] == [
        (T.ERROR, 1, 4),
        (T.NEWLINE, 1, 4),
        (T.IDENTIFIER, 2, 1),
        (T.EOF, 2, 2),
    ]


def test_large_number_is_clamped():
    assert tokenize("99999999999999999999")[0].value == 2**63 - 1


def test_keywords_are_case_sensitive():
    assert [t.type for t in tokenize("If TRUE")] == [T.IDENTIFIER, T.IDENTIFIER, T.EOF]


def test_nul_ends_input():
    assert summary(tokenize("a\0b")) == [(T.IDENTIFIER, "a", 1, 1), (T.EOF, "", 1, 2)]


def test_tabs_and_carriage_returns_are_skipped():
    assert summary(tokenize("\tx\r")) == [(T.IDENTIFIER, "x", 1, 2), (T.EOF, "", 1, 4)]


@pytest.mark.parametrize(
    "char, digit, alpha, alnum, space",
    [
        ("5", True, False, True, False),
        ("a", False, True, True, False),
        ("Z", False, True, True, False),
        ("_", False, True, True, False),
        (" ", False, False, False, True),
        ("\t", False, False, False, True),
        ("\r", False, False, False, True),
        ("\n", False, False, False, False),
        ("@", False, False, False, False),
        ("é", False, False, False, False),
        ("", False, False, False, False),
    ],
)
def test_character_classes(char, digit, alpha, alnum, space):
    assert is_digit(char) is digit
    assert is_alpha(char) is alpha
    assert is_alphanumeric(char) is alnum
    assert is_whitespace(char) is space
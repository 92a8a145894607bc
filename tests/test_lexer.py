import pytest
from hypothesis import given
from hypothesis import strategies as st

from ael.ael_errors import LexError
from ael.ael_lexer import CharacterStream, Lexer, Token, tokenize


def types(source: str) -> list[str]:
    return [tok.type for tok in tokenize(source)]


def test_single_char_tokens() -> None:
    code = "= + - * / % ( )"
    assert types(code) == [
        "ASSIGN",
        "PLUS",
        "SUB",
        "MULT",
        "DIV",
        "MOD",
        "LPAREN",
        "RPAREN",
        "EOF",
    ]


def test_two_char_operators_use_longest_match() -> None:
    assert types("== ** = *") == ["EQ", "POW", "ASSIGN", "MULT", "EOF"]
    assert types("===") == ["EQ", "ASSIGN", "EOF"]
    assert types("***") == ["POW", "MULT", "EOF"]


def test_number_token() -> None:
    tok = tokenize("123")[0]
    assert tok.type == "NUMBER"
    assert tok.value == "123"


def test_float_token() -> None:
    tok = tokenize("101.3")[0]
    assert tok.type == "NUMBER"
    assert tok.value == "101.3"


def test_identifier_token() -> None:
    tok = tokenize("myVar2")[0]
    assert tok.type == "IDENT"
    assert tok.value == "myVar2"


@pytest.mark.parametrize(
    "word,expected", [("let", "LET"), ("print", "PRINT"), ("abs", "ABS"), ("sqrt", "SQRT")]
)  # type: ignore[misc]
def test_keyword_tokens(word: str, expected: str) -> None:
    tok = tokenize(word)[0]
    assert tok.type == expected
    assert tok.value == word


@pytest.mark.parametrize("word", ["lets", "printer", "abs1", "sqrtx", "Let", "PRINT"])  # type: ignore[misc]
def test_keyword_prefix_is_identifier(word: str) -> None:
    assert tokenize(word)[0] == Token("IDENT", word, 1, 1)


def test_keyword_followed_by_paren_is_keyword() -> None:
    assert types("print(1)") == ["PRINT", "LPAREN", "NUMBER", "RPAREN", "EOF"]


def test_number_then_identifier_splits() -> None:
    assert [(t.type, t.value) for t in tokenize("5x")][:2] == [
        ("NUMBER", "5"),
        ("IDENT", "x"),
    ]


def test_line_and_column_tracking() -> None:
    tokens = tokenize("let x = 1\n  y = 2")
    y = tokens[4]
    assert y.value == "y"
    assert (y.line, y.col) == (2, 3)


def test_token_aliases() -> None:
    tok = tokenize("\n  abc")[0]
    assert tok.kind == "IDENT"
    assert tok.text == "abc"
    assert (tok.line, tok.column) == (2, 3)


def test_skip_whitespace_and_comments() -> None:
    tokens = tokenize("   \n  // a comment\n123 // trailing")
    assert tokens[0] == Token("NUMBER", "123", 3, 1)
    assert tokens[1].type == "EOF"


def test_comment_at_end_of_input_without_newline() -> None:
    assert types("print 1 //") == ["PRINT", "NUMBER", "EOF"]


def test_single_slash_is_division() -> None:
    assert types("4 / 2") == ["NUMBER", "DIV", "NUMBER", "EOF"]


def test_eof_position_follows_trailing_whitespace() -> None:
    eof = tokenize("print 5 -")[-1]
    assert (eof.line, eof.col) == (1, 10)
    eof = tokenize("x\n")[-1]
    assert (eof.line, eof.col) == (2, 1)


def test_empty_source_yields_only_eof() -> None:
    assert tokenize("") == [Token("EOF", "EOF", 1, 1)]


@pytest.mark.parametrize(
    "source,line,col",
    [
        ("2 _ 3", 1, 3),
        ("x = 1\n  y = $", 2, 7),
        (".5", 1, 1),
        ("5.", 1, 2),
        ("5.x", 1, 2),
    ],
)  # type: ignore[misc]
def test_invalid_character_raises_lex_error(source: str, line: int, col: int) -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize(source)
    assert (exc_info.value.line, exc_info.value.col) == (line, col)
    assert f"Line {line}, col {col}:" in str(exc_info.value)


def test_no_exponent_notation() -> None:
    # `1e5` is a number followed by the identifier `e5`
    assert types("1e5") == ["NUMBER", "IDENT", "EOF"]


def test_lexer_emits_error_token_instead_of_raising() -> None:
    tokens = Lexer(CharacterStream("a _ b")).tokens()
    assert [t.type for t in tokens] == ["IDENT", "ERROR", "IDENT", "EOF"]
    assert tokens[1] == Token("ERROR", "_", 1, 3)


def test_underscore_is_not_an_identifier_character() -> None:
    tokens = Lexer(CharacterStream("a_b")).tokens()
    assert [t.type for t in tokens] == ["IDENT", "ERROR", "IDENT", "EOF"]


@pytest.mark.parametrize("space", ["\t", "\r", "\x00", "\x08", "\x0b", "\x1f"])  # type: ignore[misc]
def test_control_characters_are_whitespace(space: str) -> None:
    assert tokenize(f"print{space}1") == [
        Token("PRINT", "print", 1, 1),
        Token("NUMBER", "1", 1, 7),
        Token("EOF", "EOF", 1, 8),
    ]


@pytest.mark.parametrize("space", ["\u00a0", "\u2028", "\u3000", "\x85"])  # type: ignore[misc]
def test_unicode_spaces_are_not_whitespace(space: str) -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize(f"print{space}1")
    assert (exc_info.value.line, exc_info.value.col) == (1, 6)


def test_character_stream_methods() -> None:
    stream = CharacterStream("ab\nc")
    assert stream.peek() == "a"
    assert stream.next() == "a"
    assert stream.peek(1) == "\n"
    assert not stream.end_of_file()
    stream.next()
    stream.next()
    assert (stream.line, stream.column) == (2, 1)
    stream.next()
    assert stream.end_of_file()
    assert stream.peek() == ""


def test_character_stream_next_past_eof_raises() -> None:
    stream = CharacterStream("")
    with pytest.raises(
        Exception, match="CharacterStreamError: Attempted to read past end of source"
    ):
        stream.next()


def test_token_repr_and_eq() -> None:
    t1 = Token("NUMBER", "42", 1, 2)
    t2 = Token("NUMBER", "42", 1, 2)
    t3 = Token("IDENT", "x")

    assert repr(t1) == "Token(NUMBER, 42)"
    assert t1 == t2
    assert t1 != t3
    assert len({t1, t2, t3}) == 2


@given(st.text(alphabet=st.characters(blacklist_categories=["Cs"]), max_size=100))  # type: ignore[misc]
def test_lexer_does_not_crash_on_random_input(text: str) -> None:
    try:
        tokens = tokenize(text)
    except LexError as e:
        assert e.line >= 1 and e.col >= 1
    else:
        assert tokens[-1].type == "EOF"
        assert all(t.type != "ERROR" for t in tokens)


@given(
    st.lists(
        st.sampled_from(["let", "x", "12", "3.5", "==", "**", "+", "(", ")", "sqrt"]),
        min_size=1,
        max_size=20,
    )
)  # type: ignore[misc]
def test_space_separated_words_round_trip(words: list[str]) -> None:
    tokens = tokenize(" ".join(words))
    assert [t.value for t in tokens[:-1]] == words

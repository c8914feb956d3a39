import io

import pytest

from vscc.lexer import Lexer, tokenize
from vscc.tokens import TokenType

SAMPLE1 = "int main() {\n    return 0;\n}\n"
SAMPLE5 = "int main() {\n    return 0 + 1 + 2 + 3 - 4 + 5 - 6 + 7 - 8 + 9 + 10; // 19\n}\n"


def kinds(source):
    return [token.type for token in tokenize(source)]


def lexemes(source):
    return [token.lexeme for token in tokenize(source)]


def test_sample1_token_types():
    assert kinds(SAMPLE1) == [
        TokenType.KEYWORD_INT,
        TokenType.IDENTIFIER,
        TokenType.OPEN_PAREN,
        TokenType.CLOSE_PAREN,
        TokenType.OPEN_BRACE,
        TokenType.KEYWORD_RETURN,
        TokenType.NUMBER,
        TokenType.SEMICOLON,
        TokenType.CLOSE_BRACE,
        TokenType.END_OF_FILE,
    ]


def test_sample1_lexemes():
    assert lexemes(SAMPLE1) == ["int", "main", "(", ")", "{", "return", "0", ";", "}", ""]


def test_first_token_position():
    first = tokenize(SAMPLE1)[0]
    assert (first.line, first.column) == (1, 1)


@pytest.mark.parametrize("source", [SAMPLE1, SAMPLE5, "int x = 2;\n\tint y=3;\nreturn x+y;"])
def test_tokens_point_at_their_lexeme(source):
    lines = source.split("\n")
    for token in tokenize(source)[:-1]:
        text = lines[token.line - 1][token.column - 1 :]
        assert text.startswith(token.lexeme)


def test_end_of_file_is_always_last_and_unique():
    tokens = tokenize(SAMPLE5)
    assert tokens[-1].type is TokenType.END_OF_FILE
    assert [t.type for t in tokens].count(TokenType.END_OF_FILE) == 1


def test_empty_source_gives_only_end_of_file():
    tokens = tokenize("")
    assert len(tokens) == 1
    assert tokens[0].type is TokenType.END_OF_FILE
    assert (tokens[0].line, tokens[0].column) == (1, 1)


def test_end_of_file_line_counts_newlines():
    source = "int\n\nreturn\n"
    assert tokenize(source)[-1].line == source.count("\n") + 1


def test_comment_is_skipped():
    assert "19" not in lexemes(SAMPLE5)
    assert lexemes(SAMPLE5)[-3:] == [";", "}", ""]


def test_comment_at_end_without_newline():
    assert kinds("return 1; // done") == [
        TokenType.KEYWORD_RETURN,
        TokenType.NUMBER,
        TokenType.SEMICOLON,
        TokenType.END_OF_FILE,
    ]


def test_whitespace_after_comment_becomes_unknown():
    tokens = tokenize("// note\n x")
    assert [t.type for t in tokens] == [
        TokenType.UNKNOWN,
        TokenType.IDENTIFIER,
        TokenType.END_OF_FILE,
    ]
    assert tokens[0].lexeme == " "


def test_single_slash_is_division():
    assert kinds("a/b") == [
        TokenType.IDENTIFIER,
        TokenType.SLASH,
        TokenType.IDENTIFIER,
        TokenType.END_OF_FILE,
    ]


@pytest.mark.parametrize(
    ("source", "kind"),
    [
        (";", TokenType.SEMICOLON),
        ("(", TokenType.OPEN_PAREN),
        (")", TokenType.CLOSE_PAREN),
        ("{", TokenType.OPEN_BRACE),
        ("}", TokenType.CLOSE_BRACE),
        ("=", TokenType.EQUAL),
        ("+", TokenType.PLUS),
        ("-", TokenType.MINUS),
        ("*", TokenType.STAR),
        ("/", TokenType.SLASH),
    ],
)
def test_single_character_tokens(source, kind):
    assert kinds(source) == [kind, TokenType.END_OF_FILE]


@pytest.mark.parametrize("word", ["integer", "int_", "returned", "_int", "int2"])
def test_keyword_prefix_is_identifier(word):
    tokens = tokenize(word)
    assert tokens[0].type is TokenType.IDENTIFIER
    assert tokens[0].lexeme == word


def test_keyword_followed_by_punctuation():
    assert kinds("int(") == [TokenType.KEYWORD_INT, TokenType.OPEN_PAREN, TokenType.END_OF_FILE]


def test_number_then_identifier():
    tokens = tokenize("123abc")
    assert [(t.type, t.lexeme) for t in tokens[:2]] == [
        (TokenType.NUMBER, "123"),
        (TokenType.IDENTIFIER, "abc"),
    ]


def test_string_literal_with_escape():
    source = '"a\\"b"'
    tokens = tokenize(source)
    assert tokens[0].type is TokenType.STRING
    assert tokens[0].lexeme == source


def test_unterminated_string_is_unknown_quote():
    tokens = tokenize('"abc')
    assert tokens[0].type is TokenType.UNKNOWN
    assert tokens[0].lexeme == '"'
    assert tokens[1].type is TokenType.IDENTIFIER


def test_unknown_characters():
    tokens = tokenize("@#")
    assert [(t.type, t.lexeme) for t in tokens[:2]] == [
        (TokenType.UNKNOWN, "@"),
        (TokenType.UNKNOWN, "#"),
    ]
    assert tokens[1].column == tokens[0].column + 1


def test_next_token_walks_all_then_repeats_end():
    lexer = Lexer(SAMPLE1)
    seen = [lexer.next_token() for _ in range(len(lexer.tokens))]
    assert seen == list(lexer.tokens)
    assert lexer.next_token().type is TokenType.END_OF_FILE
    assert lexer.next_token().type is TokenType.END_OF_FILE


def test_peek_does_not_advance():
    lexer = Lexer(SAMPLE1)
    assert lexer.peek_token() == lexer.tokens[0]
    assert lexer.peek_token(2) == lexer.tokens[2]
    assert lexer.next_token() == lexer.tokens[0]
    assert lexer.peek_token() == lexer.tokens[1]


def test_peek_past_end_gives_end_of_file():
    lexer = Lexer("int")
    assert lexer.peek_token(50).type is TokenType.END_OF_FILE


def test_format_tokens_lists_each_token():
    lexer = Lexer(SAMPLE1)
    lines = lexer.format_tokens().splitlines()
    assert lines == [str(token) for token in lexer.tokens]


def test_print_tokens_writes_to_file():
    lexer = Lexer("return 0;")
    buffer = io.StringIO()
    lexer.print_tokens(buffer)
    assert buffer.getvalue() == lexer.format_tokens()


def test_print_tokens_defaults_to_stdout(capsys):
    lexer = Lexer("int main")
    lexer.print_tokens()
    assert capsys.readouterr().out == lexer.format_tokens()
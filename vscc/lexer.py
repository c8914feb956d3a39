"""Lexer turning source text into a list of tokens."""

from __future__ import annotations

import re
import sys
from typing import Iterator, TextIO

from vscc.tokens import Token, TokenType

_WHITESPACE = frozenset(" \t\n\v\f\r")

_SINGLE_CHAR_TOKENS = {
    ";": TokenType.SEMICOLON,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    "=": TokenType.EQUAL,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}

_KEYWORDS = {
    "int": TokenType.KEYWORD_INT,
    "return": TokenType.KEYWORD_RETURN,
}

_NUMBER = re.compile(r"[0-9]+")
_STRING = re.compile(r'"(?:\\.|[^"\\])*"', re.DOTALL)
_WORD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class _Scanner:
    """Walks the source once, keeping the read position and line/column."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _char(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else ""

    def _skip_whitespace(self) -> None:
        while not self.at_end() and self._char() in _WHITESPACE:
            if self._char() == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _skip_comment(self) -> None:
        if not (self._char() == "/" and self._char(1) == "/"):
            return
        self.pos += 2
        self.column += 2
        end = self.source.find("\n", self.pos)
        if end == -1:
            self.column += len(self.source) - self.pos
            self.pos = len(self.source)
            return
        self.pos = end + 1
        self.line += 1
        self.column = 1

    def _match(self) -> tuple[TokenType, str] | None:
        char = self._char()
        if char in _SINGLE_CHAR_TOKENS:
            return _SINGLE_CHAR_TOKENS[char], char
        for pattern, kind in ((_NUMBER, TokenType.NUMBER), (_STRING, TokenType.STRING)):
            found = pattern.match(self.source, self.pos)
            if found:
                return kind, found.group()
        found = _WORD.match(self.source, self.pos)
        if found:
            word = found.group()
            return _KEYWORDS.get(word, TokenType.IDENTIFIER), word
        return None

    def _advance_over(self, lexeme: str) -> None:
        self.pos += len(lexeme)
        newlines = lexeme.count("\n")
        if newlines:
            self.line += newlines
            self.column = 1 + len(lexeme) - lexeme.rfind("\n") - 1
        else:
            self.column += len(lexeme)

    def scan(self) -> Iterator[Token]:
        while not self.at_end():
            self._skip_whitespace()
            self._skip_comment()
            if self.at_end():
                break
            matched = self._match()
            if matched is None:
                yield Token(TokenType.UNKNOWN, self._char(), self.line, self.column)
                self.pos += 1
                self.column += 1
            else:
                kind, lexeme = matched
                yield Token(kind, lexeme, self.line, self.column)
                self._advance_over(lexeme)
        yield Token(TokenType.END_OF_FILE, "", self.line, self.column)


def tokenize(source: str) -> list[Token]:
    """Split source text into tokens, always ending with an end-of-file token."""
    return list(_Scanner(source).scan())


class Lexer:
    """Token stream over a source text with one-way reading and look-ahead."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: tuple[Token, ...] = tuple(tokenize(source))
        self._index = 0

    def next_token(self) -> Token:
        """Return the next token and advance; keeps returning end-of-file at the end."""
        if self._index < len(self.tokens):
            token = self.tokens[self._index]
            self._index += 1
            return token
        return self.tokens[-1]

    def peek_token(self, index: int = 0) -> Token:
        """Look ahead without advancing; index 0 is the token next_token would return."""
        position = self._index + index
        if 0 <= position < len(self.tokens):
            return self.tokens[position]
        return self.tokens[-1]

    def format_tokens(self) -> str:
        """Return every token on its own line."""
        return "".join(f"{token}\n" for token in self.tokens)

    def print_tokens(self, file: TextIO | None = None) -> None:
        """Write every token on its own line to file, standard output by default."""
        (file or sys.stdout).write(self.format_tokens())
"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_RED = "\033[31m"
_RESET = "\033[0m"


class TokenType(Enum):
    """Every kind of token the lexer can produce."""

    # Special tokens
    UNKNOWN = "Unknown"
    END_OF_FILE = "EndOfFile"

    # Keywords
    KEYWORD_INT = "Keyword_int"
    KEYWORD_RETURN = "Keyword_return"

    # Identifiers and literals
    IDENTIFIER = "Identifier"
    STRING = "String"
    NUMBER = "Number"

    # Punctuation and delimiters
    SEMICOLON = "Semicolon"
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"
    OPEN_BRACE = "OpenBrace"
    CLOSE_BRACE = "CloseBrace"

    # Operators
    EQUAL = "Equal"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"


def token_type_name(token_type: TokenType) -> str:
    """Return the display name of a token type; unknown tokens are shown in red."""
    if token_type is TokenType.UNKNOWN:
        return f"{_RED}{token_type.value}{_RESET}"
    return token_type.value


@dataclass(frozen=True, slots=True)
class Token:
    """A lexeme of the source with its kind and 1-based position."""

    type: TokenType
    lexeme: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"[{self.line}:{self.column}] {token_type_name(self.type)} '{self.lexeme}'"
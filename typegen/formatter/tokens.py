"""
Token definitions for the declaration lexer.

This module contains the TokenType enum, Token dataclass, and
constant mappings for keywords and punctuation.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types recognized by the declaration lexer."""

    # Keywords
    DECLARE = auto()
    EXPORT = auto()
    DEFAULT = auto()
    TYPE = auto()
    INTERFACE = auto()
    CLASS = auto()
    LET = auto()
    CONST = auto()
    VAR = auto()
    READONLY = auto()

    # Literals
    IDENTIFIER = auto()
    STRING_LITERAL = auto()
    NUMBER = auto()

    # Trivia kept for the printer
    COMMENT = auto()

    # Punctuation
    LBRACE = auto()
    RBRACE = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    SEMICOLON = auto()
    COLON = auto()
    COMMA = auto()
    QUESTION = auto()
    EQ = auto()
    PIPE = auto()
    AMPERSAND = auto()
    DOT = auto()

    # Special
    EOF = auto()


@dataclass
class Token:
    """Represents a single token from the lexer."""
    type: TokenType
    value: str
    line: int
    column: int
    end_line: int = 0  # Last line spanned; differs from line for block comments


# Keyword mapping
KEYWORDS = {
    'declare': TokenType.DECLARE,
    'export': TokenType.EXPORT,
    'default': TokenType.DEFAULT,
    'type': TokenType.TYPE,
    'interface': TokenType.INTERFACE,
    'class': TokenType.CLASS,
    'let': TokenType.LET,
    'const': TokenType.CONST,
    'var': TokenType.VAR,
    'readonly': TokenType.READONLY,
}

# Single-character punctuation
SINGLE_CHAR_OPS = {
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ';': TokenType.SEMICOLON,
    ':': TokenType.COLON,
    ',': TokenType.COMMA,
    '?': TokenType.QUESTION,
    '=': TokenType.EQ,
    '|': TokenType.PIPE,
    '&': TokenType.AMPERSAND,
    '.': TokenType.DOT,
}

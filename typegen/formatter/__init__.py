"""
Formatter module for the declaration generator.

This module provides tokenization, parsing and canonical printing of
TypeScript declaration source, plus an adapter for the external prettier
formatter.
"""

from .tokens import TokenType, Token, KEYWORDS, SINGLE_CHAR_OPS
from .lexer import DeclarationLexer, DeclarationSyntaxError
from .parser import DeclarationParser
from .printer import DeclarationPrinter, FormatterConfig, requote
from .formatter import (
    Formatter,
    FormatterUnavailableError,
    DeclarationFormatter,
    PrettierFormatter,
    format_declarations,
)

__all__ = [
    'TokenType',
    'Token',
    'KEYWORDS',
    'SINGLE_CHAR_OPS',
    'DeclarationLexer',
    'DeclarationSyntaxError',
    'DeclarationParser',
    'DeclarationPrinter',
    'FormatterConfig',
    'requote',
    'Formatter',
    'FormatterUnavailableError',
    'DeclarationFormatter',
    'PrettierFormatter',
    'format_declarations',
]

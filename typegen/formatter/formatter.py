"""
Canonical formatters for generated declaration text.

A formatter takes syntactically valid declaration source and returns an
equivalent, canonically laid out string. Input that does not parse raises
DeclarationSyntaxError.
"""

import subprocess
from typing import Optional, Protocol, Sequence

from .lexer import DeclarationLexer, DeclarationSyntaxError
from .parser import DeclarationParser
from .printer import DeclarationPrinter, FormatterConfig


class FormatterUnavailableError(RuntimeError):
    """The external formatter process could not be started."""


class Formatter(Protocol):
    """The collaborator contract used by the declaration generator."""

    def format(self, source: str) -> str:
        ...


class DeclarationFormatter:
    """Built-in formatter for the declaration subset the generator emits."""

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()

    def format(self, source: str) -> str:
        tokens = DeclarationLexer(source).tokenize()
        ast = DeclarationParser(tokens).parse()
        return DeclarationPrinter(self.config).print(ast)


class PrettierFormatter:
    """
    Formats through an external prettier process.

    Requires node and prettier on the PATH; the command can be overridden,
    e.g. ['npx', '--no-install', 'prettier'].
    """

    def __init__(
        self,
        command: Sequence[str] = ('prettier',),
        config: Optional[FormatterConfig] = None,
    ):
        self.command = list(command)
        self.config = config or FormatterConfig()

    def build_command(self) -> list:
        cmd = self.command + ['--parser', 'typescript',
                              '--tab-width', str(self.config.indent_width)]
        if self.config.single_quote:
            cmd.append('--single-quote')
        return cmd

    def format(self, source: str) -> str:
        cmd = self.build_command()
        try:
            result = subprocess.run(
                cmd,
                input=source,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise FormatterUnavailableError(
                f'Could not run formatter command {" ".join(cmd)!r}: {e}'
            ) from e
        if result.returncode != 0:
            raise DeclarationSyntaxError(f'prettier failed: {result.stderr.strip()}')
        return result.stdout


def format_declarations(source: str, config: Optional[FormatterConfig] = None) -> str:
    """Format declaration source with the built-in formatter."""
    return DeclarationFormatter(config).format(source)

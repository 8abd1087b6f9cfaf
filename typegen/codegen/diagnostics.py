"""
Diagnostic/warning system for the declaration generator.

Collects and reports warnings about type tree shapes that were accepted
but degraded during generation, so upstream builders can tighten the
trees they produce.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List


class MalformedTreeError(ValueError):
    """Raised in strict mode for tree shapes that would otherwise be degraded."""


class DiagnosticSeverity(Enum):
    """Severity levels for generator diagnostics."""
    WARNING = 'warning'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    node: str = ''
    construct: str = ''  # e.g., 'state', 'declaration', 'member'

    def __str__(self) -> str:
        if self.node:
            return f'[{self.severity.value}] {self.node}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class GeneratorDiagnostics:
    """
    Collects generator warnings/diagnostics during code generation.

    Usage:
        diag = GeneratorDiagnostics()
        diag.warn_empty_states("Root", "size")
        # ... after generation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def count(self) -> int:
        """Get total diagnostic count."""
        return len(self._diagnostics)

    def clear(self) -> None:
        """Clear all diagnostics."""
        self._diagnostics.clear()

    # =========================================================================
    # SPECIFIC WARNING METHODS
    # =========================================================================

    def warn_empty_states(self, node: str, member: str = '') -> None:
        """Warn that an empty state list was emitted as a boolean toggle."""
        target = f'"{member}"' if member else 'call signature'
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'State list for {target} is empty; emitted as a boolean toggle.',
            node=node,
            construct='state',
        ))

    def warn_duplicate_declaration(self, node: str, name: str) -> None:
        """Warn that two children of one node declare the same name."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'Declaration "{name}" appears more than once among its children.',
            node=node,
            construct='declaration',
        ))

    def warn_member_collision(self, node: str, key: str) -> None:
        """Warn that a property and a method share a key without an overlay."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W003',
            message=f'Property and method both named "{key}"; '
                    f'the declaration will not type-check.',
            node=node,
            construct='member',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        warnings = self.warnings
        if not warnings:
            return

        print(f'\nGenerator warnings ({len(warnings)}):', file=file)
        by_construct: dict = {}
        for w in warnings:
            by_construct.setdefault(w.construct or 'other', []).append(w)

        for construct, diags in sorted(by_construct.items()):
            print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
            if self._verbose:
                for d in diags:
                    print(f'    {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all diagnostics."""
        if not self.warnings:
            return 'No generator warnings.'

        by_construct: dict = {}
        for w in self.warnings:
            key = w.construct or 'other'
            by_construct[key] = by_construct.get(key, 0) + 1

        parts = [f'{count} {construct}' for construct, count in sorted(by_construct.items())]
        return f'Generator warnings: {", ".join(parts)}'

"""
Code generation context for the declaration generator.

This module provides a context class that holds all state needed during
one generation run, separating state management from the generation logic.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..type_system import STYLE_TYPE, EXPORT_NAME, HEADER_TITLE
from .diagnostics import GeneratorDiagnostics


@dataclass
class EmittedBlock:
    """One node's own declaration text, kept for failure location."""
    stage: str  # 'preamble', 'interface', 'class', 'export'
    node_name: str
    text: str


@dataclass
class CodeGenerationContext:
    """
    Holds all state needed during declaration generation.

    A fresh context is created for every generate() call, so the
    generators themselves hold no state across runs.
    """

    # Indentation state
    indent_level: int = 0
    indent_str: str = '  '

    # Output naming
    style_type: str = STYLE_TYPE
    export_name: str = EXPORT_NAME
    header_title: str = HEADER_TITLE

    # Policy
    strict: bool = False
    verbose: bool = False

    # Blocks emitted so far, in output order
    blocks: List[EmittedBlock] = field(default_factory=list)

    # Diagnostics collector
    _diagnostics: Optional[GeneratorDiagnostics] = None

    @property
    def diagnostics(self) -> GeneratorDiagnostics:
        """Get the diagnostics collector, creating one if needed."""
        if self._diagnostics is None:
            self._diagnostics = GeneratorDiagnostics(verbose=self.verbose)
        return self._diagnostics

    def indent(self) -> str:
        """Return the current indentation string."""
        return self.indent_str * self.indent_level

    def record_block(self, stage: str, node_name: str, text: str) -> None:
        """Remember a node's declaration text for error reporting."""
        self.blocks.append(EmittedBlock(stage, node_name, text))

"""
Style Type Tree to TypeScript Declaration Generator

This package turns the type tree built from style definitions into a
TypeScript declaration file (.d.ts) that gives authors typed access to
their classes and states.

Module Structure:
- type_tree/: Node types handed over by the style builder (ObjType, FuncType)
- type_system/: Shared declaration fragments and identifier safety helpers
- codegen/: Declaration generation (MethodSignatureGenerator, ObjectGenerator,
  TypeScriptDeclarationGenerator) and diagnostics
- formatter/: Canonical formatting (DeclarationLexer, DeclarationParser,
  DeclarationPrinter, PrettierFormatter)

Usage:
    from typegen import ObjType, format_typescript

    root = ObjType('Root')
    root.add_method('size', ['small', 'large'])
    text = format_typescript(root)
"""

from .type_tree import TypeNode, ObjType, FuncType
from .codegen import (
    TypeScriptDeclarationGenerator,
    EmissionError,
    MalformedTreeError,
    format_typescript,
)
from .formatter import DeclarationFormatter, PrettierFormatter, DeclarationSyntaxError

__all__ = [
    'TypeNode',
    'ObjType',
    'FuncType',
    'TypeScriptDeclarationGenerator',
    'EmissionError',
    'MalformedTreeError',
    'format_typescript',
    'DeclarationFormatter',
    'PrettierFormatter',
    'DeclarationSyntaxError',
]

"""
Code generation module for the declaration generator.

This module provides TypeScript declaration generation from type tree nodes.
"""

from .context import CodeGenerationContext, EmittedBlock
from .base import BaseGenerator, TypeNodeVisitor
from .method import MethodSignatureGenerator
from .object import ObjectGenerator
from .generator import TypeScriptDeclarationGenerator, EmissionError, format_typescript
from .diagnostics import (
    GeneratorDiagnostics,
    Diagnostic,
    DiagnosticSeverity,
    MalformedTreeError,
)

__all__ = [
    'CodeGenerationContext',
    'EmittedBlock',
    'BaseGenerator',
    'TypeNodeVisitor',
    'MethodSignatureGenerator',
    'ObjectGenerator',
    'TypeScriptDeclarationGenerator',
    'EmissionError',
    'format_typescript',
    'GeneratorDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
    'MalformedTreeError',
]

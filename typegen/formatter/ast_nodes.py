"""
AST node definitions for declaration formatting.

This module contains the dataclasses representing the subset of
TypeScript declaration syntax that the formatter understands.
"""

from dataclasses import dataclass, field
from typing import List, Optional


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass
class DeclNode:
    """Base class for all declaration AST nodes."""
    pass


# =============================================================================
# TYPE EXPRESSIONS
# =============================================================================

@dataclass
class TypeExpr(DeclNode):
    """Base class for type expressions."""
    pass


@dataclass
class TypeReference(TypeExpr):
    """A named type, possibly dotted (e.g., Style, Foo.Bar)."""
    name: str


@dataclass
class LiteralType(TypeExpr):
    """A string or numeric literal type; raw keeps the source spelling."""
    raw: str


@dataclass
class UnionType(TypeExpr):
    members: List[TypeExpr] = field(default_factory=list)


@dataclass
class IntersectionType(TypeExpr):
    members: List[TypeExpr] = field(default_factory=list)


@dataclass
class ArrayType(TypeExpr):
    element: TypeExpr


@dataclass
class ObjectLiteralType(TypeExpr):
    """An inline object type such as { [str: string]: boolean }."""
    members: List['Member'] = field(default_factory=list)


# =============================================================================
# MEMBERS
# =============================================================================

@dataclass
class Parameter(DeclNode):
    name: str
    type: TypeExpr
    optional: bool = False


@dataclass
class Member(DeclNode):
    """Base class for interface, class and object literal members."""
    pass


@dataclass
class PropertyMember(Member):
    key: str  # Bare identifier or raw string literal
    type: TypeExpr
    readonly: bool = False
    optional: bool = False


@dataclass
class MethodMember(Member):
    key: str
    parameters: List[Parameter]
    return_type: TypeExpr
    optional: bool = False


@dataclass
class CallSignature(Member):
    parameters: List[Parameter]
    return_type: TypeExpr


@dataclass
class IndexSignature(Member):
    parameter: Parameter
    type: TypeExpr


@dataclass
class CommentMember(Member):
    text: str


# =============================================================================
# STATEMENTS
# =============================================================================

@dataclass
class Statement(DeclNode):
    """Base class for top-level statements."""
    pass


@dataclass
class Comment(Statement):
    text: str
    attached: bool = False  # Next statement starts on the following line


@dataclass
class TypeAlias(Statement):
    name: str
    type: TypeExpr
    modifiers: List[str] = field(default_factory=list)  # 'export', 'declare'


@dataclass
class InterfaceDeclaration(Statement):
    name: str
    members: List[Member] = field(default_factory=list)
    modifiers: List[str] = field(default_factory=list)


@dataclass
class ClassDeclaration(Statement):
    name: str
    members: List[Member] = field(default_factory=list)
    modifiers: List[str] = field(default_factory=list)


@dataclass
class VariableDeclaration(Statement):
    kind: str  # 'let', 'const', 'var'
    name: str
    type: Optional[TypeExpr] = None
    modifiers: List[str] = field(default_factory=list)


@dataclass
class ExportDefault(Statement):
    name: str


@dataclass
class SourceFile(DeclNode):
    """Root node representing an entire declaration file."""
    statements: List[Statement] = field(default_factory=list)

"""
Type tree node definitions.

This module contains the dataclasses representing the in-memory type tree
handed to the declaration generator by the upstream style builder.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..codegen.base import TypeNodeVisitor


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass
class TypeNode:
    """Base class for all type tree nodes."""
    name: str

    def accept(self, visitor: 'TypeNodeVisitor') -> str:
        raise NotImplementedError


# =============================================================================
# CALLABLE OVERLAY
# =============================================================================

@dataclass
class FuncType(TypeNode):
    """
    Callable overlay for a property and a method sharing one key.

    The first argument slot, when present, holds the allowed state values.
    An absent (or None) slot means the method is a boolean-like toggle.
    """
    args: List[Optional[List[str]]] = field(default_factory=list)

    @property
    def states(self) -> Optional[List[str]]:
        """Return the state values of the first argument slot, if any."""
        if not self.args:
            return None
        return self.args[0]

    def accept(self, visitor: 'TypeNodeVisitor') -> str:
        return visitor.visit_func_type(self)


# =============================================================================
# COMPOSITE TYPE
# =============================================================================

@dataclass
class ObjType(TypeNode):
    """Declarable composite type, emitted as a class declaration."""
    properties: Dict[str, List[str]] = field(default_factory=dict)
    methods: Dict[str, Optional[List[str]]] = field(default_factory=dict)
    children: List[TypeNode] = field(default_factory=list)

    def accept(self, visitor: 'TypeNodeVisitor') -> str:
        return visitor.visit_obj_type(self)

    def add_property(self, name: str, *type_refs: str) -> None:
        """Declare a property whose type intersects the given type names."""
        self.properties.setdefault(name, []).extend(type_refs)

    def add_method(self, name: str, states: Optional[List[str]] = None) -> None:
        """Declare a state method; without states it is a boolean toggle."""
        self.methods[name] = list(states) if states is not None else None

    def add_child(self, node: TypeNode) -> TypeNode:
        """Append a nested declaration and return it."""
        self.children.append(node)
        return node

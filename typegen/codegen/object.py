"""
Object declaration generation for style type trees.

This module handles the recursive generation of class declarations for
ObjType nodes: the root block and any block classes with sub-blocks,
like states.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from ..type_tree import ObjType, FuncType

from .base import BaseGenerator, TypeNodeVisitor
from .method import MethodSignatureGenerator
from ..type_system.mappings import safe_key


class ObjectGenerator(BaseGenerator, TypeNodeVisitor):
    """
    Generates TypeScript class declarations from ObjType nodes.

    This class handles:
    - Child declarations, in tree order, ahead of the class itself
    - Readonly properties intersected with the shared style type
    - State methods and boolean toggles
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        method_generator: MethodSignatureGenerator,
    ):
        """
        Initialize the object generator.

        Args:
            ctx: The code generation context
            method_generator: Generator used for FuncType children
        """
        super().__init__(ctx)
        self._method = method_generator

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def visit_obj_type(self, node: 'ObjType') -> str:
        return self.generate(node)

    def visit_func_type(self, node: 'FuncType') -> str:
        return self._method.generate(node)

    # =========================================================================
    # CLASSES
    # =========================================================================

    def generate(self, obj: 'ObjType') -> str:
        """Generate declarations for a node and all of its descendants.

        Args:
            obj: The ObjType node

        Returns:
            Child declarations followed by the node's class declaration
        """
        self._check_children(obj)
        definitions = [child.accept(self) for child in obj.children]

        members = self.generate_properties(obj) + self.generate_methods(obj)
        declaration = self._block(f'declare class {obj.name}', members)
        self._ctx.record_block('class', obj.name, declaration)

        return '\n'.join(definitions + [declaration])

    def generate_properties(self, obj: 'ObjType') -> List[str]:
        """Generate property members like `readonly title: TitleClass & Style;`."""
        members = []
        for key in sorted(obj.properties):
            # Copy before appending: the node's own list is never touched
            type_refs = list(obj.properties[key]) + [self._ctx.style_type]
            members.append(f'readonly {safe_key(key)}: {" & ".join(type_refs)};')
        return members

    def generate_methods(self, obj: 'ObjType') -> List[str]:
        """Generate method members like `size(substate: 'large' | 'small'): Style;`."""
        members = []
        for key in sorted(obj.methods):
            states = self._resolve_states(obj.name, obj.methods[key], member=key)
            members.extend(self._signatures(safe_key(key), states))
        return members

    def _check_children(self, obj: 'ObjType') -> None:
        """Record diagnostics for name clashes the emitter cannot resolve."""
        seen = set()
        for child in obj.children:
            if child.name in seen:
                self._ctx.diagnostics.warn_duplicate_declaration(obj.name, child.name)
            seen.add(child.name)
        for key in sorted(set(obj.properties) & set(obj.methods)):
            self._ctx.diagnostics.warn_member_collision(obj.name, key)

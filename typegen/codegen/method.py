"""
Method signature generation for style type trees.

This module handles the generation of standalone interface declarations
for FuncType nodes. These are only needed when a class and a state occupy
the same property name and their types have to be intersected.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from ..type_tree import FuncType

from .base import BaseGenerator


class MethodSignatureGenerator(BaseGenerator):
    """
    Generates TypeScript interfaces with call signatures.

    A toggle gets one optional-argument signature; a state method gets a
    literal-union overload followed by a plain string fallback.
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        super().__init__(ctx)

    def generate(self, func: 'FuncType') -> str:
        """Generate the interface declaration for a FuncType node.

        Args:
            func: The FuncType node

        Returns:
            TypeScript interface code
        """
        states = self._resolve_states(func.name, func.states)
        text = self._block(f'interface {func.name}', self._signatures('', states))
        self._ctx.record_block('interface', func.name, text)
        return text

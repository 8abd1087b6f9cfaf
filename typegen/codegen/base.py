"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that contains common utilities
used across the specialized generator classes in the code generation pipeline.
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from ..type_tree import ObjType, FuncType

from ..type_system.mappings import (
    literal_union,
    TOGGLE_PARAM,
    STATE_PARAM,
    STATE_FALLBACK_TYPE,
)
from .diagnostics import MalformedTreeError


class TypeNodeVisitor:
    """Double-dispatch target for TypeNode.accept()."""

    def visit_obj_type(self, node: 'ObjType') -> str:
        raise NotImplementedError

    def visit_func_type(self, node: 'FuncType') -> str:
        raise NotImplementedError


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared utilities for:
    - Indentation management
    - State list validation
    - Call signature rendering
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        """
        Initialize the base generator.

        Args:
            ctx: The code generation context containing all state
        """
        self._ctx = ctx

    # =========================================================================
    # INDENTATION
    # =========================================================================

    def indent(self) -> str:
        """Return the current indentation string."""
        return self._ctx.indent()

    @property
    def indent_level(self) -> int:
        """Get the current indentation level."""
        return self._ctx.indent_level

    @indent_level.setter
    def indent_level(self, value: int):
        """Set the current indentation level."""
        self._ctx.indent_level = value

    # =========================================================================
    # STATES
    # =========================================================================

    def _resolve_states(
        self,
        node_name: str,
        states: Optional[List[str]],
        member: str = '',
    ) -> Optional[List[str]]:
        """Return the state list to union, or None for a boolean toggle.

        An empty list is degraded to a toggle with a W001 warning, or
        rejected in strict mode.
        """
        if states is None:
            return None
        if not states:
            if self._ctx.strict:
                target = f'member "{member}"' if member else 'call signature'
                raise MalformedTreeError(
                    f'Empty state list for {target} of "{node_name}"'
                )
            self._ctx.diagnostics.warn_empty_states(node_name, member)
            return None
        return states

    # =========================================================================
    # SIGNATURES
    # =========================================================================

    def _signatures(self, prefix: str, states: Optional[List[str]]) -> List[str]:
        """Render the call signatures for a toggle or a state method.

        The prefix is the member key for class methods and empty for
        interface call signatures.
        """
        style = self._ctx.style_type
        if states is None:
            return [f'{prefix}({TOGGLE_PARAM}): {style};']
        return [
            f'{prefix}({STATE_PARAM}: {literal_union(states)}): {style};',
            f'{prefix}({STATE_PARAM}: {STATE_FALLBACK_TYPE}): {style};',
        ]

    def _block(self, opener: str, members: List[str]) -> str:
        """Wrap member lines in a braced declaration at the current indent."""
        lines = [f'{self.indent()}{opener} {{']
        self.indent_level += 1
        for member in members:
            lines.append(f'{self.indent()}{member}')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}}')
        return '\n'.join(lines) + '\n'

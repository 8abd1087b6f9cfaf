"""
Type tree module for the declaration generator.

This module provides the node types the upstream builder assembles.
"""

from .nodes import TypeNode, ObjType, FuncType

__all__ = [
    'TypeNode',
    'ObjType',
    'FuncType',
]

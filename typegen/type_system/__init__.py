"""
Types module for the declaration generator.

This module provides the shared declaration fragments and identifier
safety utilities.
"""

from .mappings import (
    is_valid_identifier,
    quote_literal,
    safe_key,
    literal_union,
    header_comment,
    STYLE_TYPE,
    STYLE_TYPE_BODY,
    EXPORT_NAME,
    HEADER_TITLE,
)

__all__ = [
    'is_valid_identifier',
    'quote_literal',
    'safe_key',
    'literal_union',
    'header_comment',
    'STYLE_TYPE',
    'STYLE_TYPE_BODY',
    'EXPORT_NAME',
    'HEADER_TITLE',
]

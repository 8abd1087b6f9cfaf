"""
Type mappings and naming utilities for declaration output.

This module contains the fixed TypeScript fragments shared by every
generated file, and the helpers that turn style names into safe
declaration keys and literal types.
"""

import re
from typing import Iterable


# =============================================================================
# SHARED DECLARATION FRAGMENTS
# =============================================================================

# Name of the shared style type intersected into properties and returned by methods
STYLE_TYPE = 'Style'

# Branded boolean map: plain objects cannot satisfy it
STYLE_TYPE_BODY = '{ [str: string]: boolean } & symbol'

# Name of the default-exported singleton
EXPORT_NAME = 'out'

HEADER_TITLE = 'Autogenerated type declarations. DO NOT MODIFY.'

# Parameter used by boolean-like toggles
TOGGLE_PARAM = 'enabled?: any'

# Parameter name used by state methods
STATE_PARAM = 'substate'

# Fallback parameter type for state methods called with non-literal strings
STATE_FALLBACK_TYPE = 'string'


# =============================================================================
# IDENTIFIERS
# =============================================================================

_IDENTIFIER_RE = re.compile(r'[A-Za-z_$][A-Za-z0-9_$]*')


def is_valid_identifier(key: str) -> bool:
    """Check if key can be used as a bare TypeScript member name."""
    return _IDENTIFIER_RE.fullmatch(key) is not None


def quote_literal(value: str) -> str:
    """Render value as a single-quoted TypeScript string literal."""
    escaped = value.replace('\\', '\\\\').replace("'", "\\'")
    escaped = escaped.replace('\n', '\\n').replace('\r', '\\r')
    return f"'{escaped}'"


def safe_key(key: str) -> str:
    """Return key bare if it is an identifier, otherwise quoted."""
    if is_valid_identifier(key):
        return key
    return quote_literal(key)


def literal_union(states: Iterable[str]) -> str:
    """Join state values into a sorted union of string literal types.

    Example: ['medium', 'small', 'large'] -> 'large' | 'medium' | 'small'
    """
    return ' | '.join(quote_literal(s) for s in sorted(states))


def header_comment(title: str = HEADER_TITLE) -> str:
    """Build the boxed comment that marks a file as generated."""
    border = '/' + '*' * (len(title) + 8) + '/'
    return '\n'.join([
        border,
        f'/*   {title}   */',
        border,
    ])

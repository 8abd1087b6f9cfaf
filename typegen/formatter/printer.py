"""
Canonical printer for declaration ASTs.

Renders one statement per line with a blank line between top-level
statements, members indented one per line, and inline object literal
types. Printing the result of a parse of printed output reproduces it.
"""

from dataclasses import dataclass
from typing import List

from .ast_nodes import (
    TypeExpr,
    TypeReference,
    LiteralType,
    UnionType,
    IntersectionType,
    ArrayType,
    ObjectLiteralType,
    Parameter,
    Member,
    PropertyMember,
    MethodMember,
    CallSignature,
    IndexSignature,
    CommentMember,
    Statement,
    Comment,
    TypeAlias,
    InterfaceDeclaration,
    ClassDeclaration,
    VariableDeclaration,
    ExportDefault,
    SourceFile,
)


@dataclass(frozen=True)
class FormatterConfig:
    """Layout options; the defaults match prettier's."""
    indent_width: int = 2
    single_quote: bool = False


def requote(raw: str, single_quote: bool = False) -> str:
    """Re-quote a raw string literal with the preferred quote character.

    The alternate quote is kept when the preferred one would need more
    escapes, as prettier does.
    """
    body = raw[1:-1]
    chars = []
    i = 0
    while i < len(body):
        if body[i] == '\\' and i + 1 < len(body):
            nxt = body[i + 1]
            # Quote escapes are dropped here and re-added for the chosen quote
            chars.append(nxt if nxt in '"\'' else body[i:i + 2])
            i += 2
            continue
        chars.append(body[i])
        i += 1

    preferred, alternate = ("'", '"') if single_quote else ('"', "'")
    quote = preferred
    if chars.count(preferred) > chars.count(alternate):
        quote = alternate
    return quote + ''.join('\\' + c if c == quote else c for c in chars) + quote


class DeclarationPrinter:
    """Prints a SourceFile in canonical layout."""

    def __init__(self, config: FormatterConfig = FormatterConfig()):
        self._config = config
        self._unit = ' ' * config.indent_width

    def print(self, source: SourceFile) -> str:
        lines: List[str] = []
        previous = None
        for statement in source.statements:
            if previous is not None and not (isinstance(previous, Comment) and previous.attached):
                lines.append('')
            lines.extend(self.print_statement(statement))
            previous = statement
        if not lines:
            return ''
        return '\n'.join(lines) + '\n'

    # =========================================================================
    # STATEMENTS
    # =========================================================================

    def print_statement(self, statement: Statement) -> List[str]:
        if isinstance(statement, Comment):
            return self._comment_lines(statement.text, '')
        if isinstance(statement, ExportDefault):
            return [f'export default {statement.name};']

        prefix = ''.join(f'{m} ' for m in statement.modifiers)
        if isinstance(statement, TypeAlias):
            return [f'{prefix}type {statement.name} = {self.print_type(statement.type)};']
        if isinstance(statement, VariableDeclaration):
            annotation = ''
            if statement.type is not None:
                annotation = f': {self.print_type(statement.type)}'
            return [f'{prefix}{statement.kind} {statement.name}{annotation};']

        keyword = 'interface' if isinstance(statement, InterfaceDeclaration) else 'class'
        opener = f'{prefix}{keyword} {statement.name}'
        if not statement.members:
            return [f'{opener} {{}}']
        lines = [f'{opener} {{']
        for member in statement.members:
            if isinstance(member, CommentMember):
                lines.extend(self._comment_lines(member.text, self._unit))
            else:
                lines.append(f'{self._unit}{self.print_member(member)};')
        lines.append('}')
        return lines

    def _comment_lines(self, text: str, indent: str) -> List[str]:
        lines = []
        for i, line in enumerate(text.split('\n')):
            line = line.strip()
            if i > 0 and line.startswith('*'):
                line = ' ' + line
            lines.append(f'{indent}{line}')
        return lines

    # =========================================================================
    # MEMBERS
    # =========================================================================

    def print_member(self, member: Member) -> str:
        """Print a member without its terminating semicolon."""
        if isinstance(member, PropertyMember):
            readonly = 'readonly ' if member.readonly else ''
            optional = '?' if member.optional else ''
            return f'{readonly}{self._key(member.key)}{optional}: {self.print_type(member.type)}'
        if isinstance(member, MethodMember):
            optional = '?' if member.optional else ''
            return (f'{self._key(member.key)}{optional}({self._parameters(member.parameters)}): '
                    f'{self.print_type(member.return_type)}')
        if isinstance(member, CallSignature):
            return (f'({self._parameters(member.parameters)}): '
                    f'{self.print_type(member.return_type)}')
        if isinstance(member, IndexSignature):
            param = member.parameter
            return f'[{param.name}: {self.print_type(param.type)}]: {self.print_type(member.type)}'
        raise TypeError(f'Cannot print member {member!r}')

    def _key(self, key: str) -> str:
        if key[0] in '"\'':
            return requote(key, self._config.single_quote)
        return key

    def _parameters(self, parameters: List[Parameter]) -> str:
        return ', '.join(
            f'{p.name}{"?" if p.optional else ""}: {self.print_type(p.type)}'
            for p in parameters
        )

    # =========================================================================
    # TYPES
    # =========================================================================

    def print_type(self, type_expr: TypeExpr) -> str:
        if isinstance(type_expr, TypeReference):
            return type_expr.name
        if isinstance(type_expr, LiteralType):
            if type_expr.raw[0] in '"\'':
                return requote(type_expr.raw, self._config.single_quote)
            return type_expr.raw
        if isinstance(type_expr, UnionType):
            return ' | '.join(self._operand(m, UnionType) for m in type_expr.members)
        if isinstance(type_expr, IntersectionType):
            return ' & '.join(
                self._operand(m, (UnionType, IntersectionType)) for m in type_expr.members
            )
        if isinstance(type_expr, ArrayType):
            return f'{self._operand(type_expr.element, (UnionType, IntersectionType))}[]'
        if isinstance(type_expr, ObjectLiteralType):
            members = [m for m in type_expr.members if not isinstance(m, CommentMember)]
            if not members:
                return '{}'
            return '{ ' + '; '.join(self.print_member(m) for m in members) + ' }'
        raise TypeError(f'Cannot print type {type_expr!r}')

    def _operand(self, type_expr: TypeExpr, needs_parens) -> str:
        text = self.print_type(type_expr)
        if isinstance(type_expr, needs_parens):
            return f'({text})'
        return text

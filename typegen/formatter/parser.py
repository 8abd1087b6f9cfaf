"""
Declaration parser implementation.

The DeclarationParser converts a stream of tokens from the DeclarationLexer
into an AST of the declaration subset the formatter prints. Anything outside
that subset is rejected with a DeclarationSyntaxError.
"""

from typing import List

from .tokens import Token, TokenType, KEYWORDS
from .lexer import DeclarationSyntaxError
from .ast_nodes import (
    # Types
    TypeExpr,
    TypeReference,
    LiteralType,
    UnionType,
    IntersectionType,
    ArrayType,
    ObjectLiteralType,
    # Members
    Parameter,
    Member,
    PropertyMember,
    MethodMember,
    CallSignature,
    IndexSignature,
    CommentMember,
    # Statements
    Statement,
    Comment,
    TypeAlias,
    InterfaceDeclaration,
    ClassDeclaration,
    VariableDeclaration,
    ExportDefault,
    SourceFile,
)


# Tokens usable as a member key or parameter name
NAME_TOKENS = (TokenType.IDENTIFIER,) + tuple(KEYWORDS.values())
KEY_TOKENS = NAME_TOKENS + (TokenType.STRING_LITERAL, TokenType.NUMBER)


class DeclarationParser:
    """
    Recursive descent parser for TypeScript declaration source.

    Comments are kept at statement and member boundaries; comments inside
    a type expression or parameter list are dropped.
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def _at_comment(self) -> bool:
        return self.pos < len(self.tokens) and self.tokens[self.pos].type == TokenType.COMMENT

    def peek(self, offset: int = 0) -> Token:
        """Look ahead past comments without consuming."""
        pos = self.pos
        remaining = offset
        while pos < len(self.tokens):
            token = self.tokens[pos]
            if token.type != TokenType.COMMENT:
                if remaining == 0:
                    return token
                remaining -= 1
            pos += 1
        return self.tokens[-1]  # Return EOF

    def current(self) -> Token:
        """Return the current token, dropping any comments before it."""
        while self._at_comment():
            self.pos += 1
        return self.peek()

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        self.pos += 1
        return token

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.peek().type in types

    def expect(self, *types: TokenType, message: str = '') -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        token = self.peek()
        if token.type not in types:
            expected = ' or '.join(t.name for t in types)
            detail = f': {message}' if message else ''
            raise DeclarationSyntaxError(
                f'Expected {expected} but got {token.type.name}{detail}',
                token.line, token.column,
            )
        return self.advance()

    def _end(self, *closers: TokenType) -> None:
        """Consume a terminator, or accept a line break / closer in its place."""
        if self.match(TokenType.SEMICOLON, TokenType.COMMA):
            self.advance()
            return
        token = self.peek()
        if token.type in closers + (TokenType.EOF,):
            return
        if token.line > self.previous().end_line:
            return
        raise DeclarationSyntaxError(
            f'Expected SEMICOLON but got {token.type.name}', token.line, token.column
        )

    # =========================================================================
    # TOP-LEVEL PARSING
    # =========================================================================

    def parse(self) -> SourceFile:
        """Parse the entire source into a SourceFile AST."""
        source = SourceFile()
        while True:
            if self._at_comment():
                source.statements.append(self.parse_comment())
                continue
            if self.match(TokenType.EOF):
                break
            if self.match(TokenType.SEMICOLON):
                self.advance()  # Empty statement
                continue
            source.statements.append(self.parse_statement())
        return source

    def parse_comment(self) -> Comment:
        token = self.tokens[self.pos]
        self.pos += 1
        attached = self.tokens[self.pos].line == token.end_line + 1
        return Comment(token.value, attached)

    def parse_statement(self) -> Statement:
        """Parse a single declaration statement."""
        modifiers = []
        while self.match(TokenType.EXPORT, TokenType.DECLARE):
            if self.match(TokenType.EXPORT) and self.peek(1).type == TokenType.DEFAULT:
                return self.parse_export_default()
            modifiers.append(self.advance().value)

        if self.match(TokenType.TYPE):
            return self.parse_type_alias(modifiers)
        if self.match(TokenType.INTERFACE):
            self.advance()
            name = self.expect(TokenType.IDENTIFIER).value
            return InterfaceDeclaration(name, self.parse_body(), modifiers)
        if self.match(TokenType.CLASS):
            self.advance()
            name = self.expect(TokenType.IDENTIFIER).value
            return ClassDeclaration(name, self.parse_body(), modifiers)
        if self.match(TokenType.LET, TokenType.CONST, TokenType.VAR):
            return self.parse_variable(modifiers)

        token = self.peek()
        raise DeclarationSyntaxError(
            f'Unexpected {token.type.name} {token.value!r}', token.line, token.column
        )

    def parse_export_default(self) -> ExportDefault:
        self.expect(TokenType.EXPORT)
        self.expect(TokenType.DEFAULT)
        name = self.expect(TokenType.IDENTIFIER).value
        self._end()
        return ExportDefault(name)

    def parse_type_alias(self, modifiers: List[str]) -> TypeAlias:
        self.expect(TokenType.TYPE)
        name = self.expect(TokenType.IDENTIFIER).value
        self.expect(TokenType.EQ)
        alias = TypeAlias(name, self.parse_type(), modifiers)
        self._end()
        return alias

    def parse_variable(self, modifiers: List[str]) -> VariableDeclaration:
        kind = self.advance().value
        name = self.expect(TokenType.IDENTIFIER).value
        var = VariableDeclaration(kind, name, modifiers=modifiers)
        if self.match(TokenType.COLON):
            self.advance()
            var.type = self.parse_type()
        self._end()
        return var

    # =========================================================================
    # MEMBER PARSING
    # =========================================================================

    def parse_body(self) -> List[Member]:
        """Parse a braced member list."""
        self.expect(TokenType.LBRACE)
        members: List[Member] = []
        while True:
            if self._at_comment():
                members.append(CommentMember(self.tokens[self.pos].value))
                self.pos += 1
                continue
            if self.match(TokenType.RBRACE):
                break
            if self.match(TokenType.EOF):
                token = self.peek()
                raise DeclarationSyntaxError('Unterminated body', token.line, token.column)
            members.append(self.parse_member())
            self._end(TokenType.RBRACE)
        self.expect(TokenType.RBRACE)
        return members

    def parse_member(self) -> Member:
        """Parse a property, method, call signature or index signature."""
        if self.match(TokenType.LPAREN):
            parameters = self.parse_parameters()
            self.expect(TokenType.COLON)
            return CallSignature(parameters, self.parse_type())

        if self.match(TokenType.LBRACKET):
            self.advance()
            name = self.expect(*NAME_TOKENS).value
            self.expect(TokenType.COLON, message='only index signatures are supported')
            parameter = Parameter(name, self.parse_type())
            self.expect(TokenType.RBRACKET)
            self.expect(TokenType.COLON)
            return IndexSignature(parameter, self.parse_type())

        readonly = False
        if self.match(TokenType.READONLY) and self.peek(1).type in KEY_TOKENS:
            self.advance()
            readonly = True

        key = self.expect(*KEY_TOKENS, message='member name').value
        optional = False
        if self.match(TokenType.QUESTION):
            self.advance()
            optional = True

        if self.match(TokenType.LPAREN):
            if readonly:
                token = self.peek()
                raise DeclarationSyntaxError(
                    "'readonly' modifier can only appear on a property", token.line, token.column
                )
            parameters = self.parse_parameters()
            self.expect(TokenType.COLON)
            return MethodMember(key, parameters, self.parse_type(), optional)

        self.expect(TokenType.COLON)
        return PropertyMember(key, self.parse_type(), readonly, optional)

    def parse_parameters(self) -> List[Parameter]:
        """Parse a parenthesised parameter list."""
        self.expect(TokenType.LPAREN)
        parameters = []
        while not self.match(TokenType.RPAREN):
            name = self.expect(*NAME_TOKENS, message='parameter name').value
            optional = False
            if self.match(TokenType.QUESTION):
                self.advance()
                optional = True
            self.expect(TokenType.COLON)
            parameters.append(Parameter(name, self.parse_type(), optional))
            if not self.match(TokenType.RPAREN):
                self.expect(TokenType.COMMA)
        self.expect(TokenType.RPAREN)
        return parameters

    # =========================================================================
    # TYPE PARSING
    # =========================================================================

    def parse_type(self) -> TypeExpr:
        """Parse a union type (lowest precedence)."""
        if self.match(TokenType.PIPE):
            self.advance()
        members = [self.parse_intersection()]
        while self.match(TokenType.PIPE):
            self.advance()
            members.append(self.parse_intersection())
        if len(members) == 1:
            return members[0]
        return UnionType(members)

    def parse_intersection(self) -> TypeExpr:
        if self.match(TokenType.AMPERSAND):
            self.advance()
        members = [self.parse_postfix()]
        while self.match(TokenType.AMPERSAND):
            self.advance()
            members.append(self.parse_postfix())
        if len(members) == 1:
            return members[0]
        return IntersectionType(members)

    def parse_postfix(self) -> TypeExpr:
        type_expr = self.parse_primary()
        while self.match(TokenType.LBRACKET) and self.peek(1).type == TokenType.RBRACKET:
            self.advance()
            self.advance()
            type_expr = ArrayType(type_expr)
        return type_expr

    def parse_primary(self) -> TypeExpr:
        """Parse a type reference, literal, object literal or parenthesised type."""
        if self.match(TokenType.IDENTIFIER):
            name = self.advance().value
            while self.match(TokenType.DOT):
                self.advance()
                name += '.' + self.expect(TokenType.IDENTIFIER).value
            return TypeReference(name)

        if self.match(TokenType.STRING_LITERAL, TokenType.NUMBER):
            return LiteralType(self.advance().value)

        if self.match(TokenType.LBRACE):
            return ObjectLiteralType(self.parse_body())

        if self.match(TokenType.LPAREN):
            self.advance()
            inner = self.parse_type()
            self.expect(TokenType.RPAREN)
            return inner

        token = self.peek()
        raise DeclarationSyntaxError(
            f'Expected a type but got {token.type.name}', token.line, token.column
        )

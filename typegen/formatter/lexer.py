"""
Lexer implementation for TypeScript declaration source.

The DeclarationLexer tokenizes declaration text into a stream of tokens
that can be consumed by the parser. Comments are kept as tokens so the
printer can reproduce them.
"""

from typing import List

from .tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_OPS


class DeclarationSyntaxError(SyntaxError):
    """Raised when declaration source cannot be tokenized or parsed."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        if line:
            message = f'{message} at line {line}, column {column}'
        super().__init__(message)
        self.line = line
        self.column = column


class DeclarationLexer:
    """
    Lexer for TypeScript declaration source.

    Converts source text into a list of tokens for parsing.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def skip_whitespace(self) -> None:
        """Skip over whitespace characters."""
        ch = self.peek()
        while ch and ch in ' \t\r\n':
            self.advance()
            ch = self.peek()

    def read_comment(self) -> str:
        """Read a single-line or multi-line comment including its markers."""
        start_line, start_col = self.line, self.column
        result = self.advance() + self.advance()
        if result == '//':
            while self.peek() and self.peek() != '\n':
                result += self.advance()
            return result.rstrip()

        while self.peek():
            if self.peek() == '*' and self.peek(1) == '/':
                result += self.advance() + self.advance()
                return result
            result += self.advance()
        raise DeclarationSyntaxError('Unterminated comment', start_line, start_col)

    def read_string(self) -> str:
        """Read a string literal including its quotes."""
        start_line, start_col = self.line, self.column
        quote = self.advance()
        result = quote
        while self.peek() and self.peek() != quote:
            if self.peek() == '\n':
                break
            if self.peek() == '\\':
                result += self.advance()
            result += self.advance()
        if self.peek() != quote:
            raise DeclarationSyntaxError('Unterminated string literal', start_line, start_col)
        result += self.advance()
        return result

    def read_number(self) -> str:
        """Read a decimal numeric literal."""
        result = ''
        while self.peek() and (self.peek().isdigit() or self.peek() == '.'):
            result += self.advance()
        return result

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() in '_$'):
            result += self.advance()
        return result

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects, ending with an EOF token.

        Raises:
            DeclarationSyntaxError: on characters outside the declaration syntax
        """
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            start_line = self.line
            start_col = self.column
            ch = self.peek()

            # Comments
            if ch == '/' and self.peek(1) in '/*':
                value = self.read_comment()
                self.tokens.append(Token(TokenType.COMMENT, value, start_line, start_col, self.line))
                continue

            # String literals
            if ch in '"\'':
                value = self.read_string()
                self.tokens.append(Token(TokenType.STRING_LITERAL, value, start_line, start_col, start_line))
                continue

            # Numbers
            if ch.isdigit():
                value = self.read_number()
                self.tokens.append(Token(TokenType.NUMBER, value, start_line, start_col, start_line))
                continue

            # Identifiers and keywords
            if ch.isalpha() or ch in '_$':
                value = self.read_identifier()
                token_type = KEYWORDS.get(value, TokenType.IDENTIFIER)
                self.tokens.append(Token(token_type, value, start_line, start_col, start_line))
                continue

            # Punctuation
            if ch in SINGLE_CHAR_OPS:
                self.advance()
                self.tokens.append(Token(SINGLE_CHAR_OPS[ch], ch, start_line, start_col, start_line))
                continue

            raise DeclarationSyntaxError(f'Unexpected character {ch!r}', start_line, start_col)

        self.tokens.append(Token(TokenType.EOF, '', self.line, self.column, self.line))
        return self.tokens

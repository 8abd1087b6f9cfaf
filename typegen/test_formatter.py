#!/usr/bin/env python3
"""
Unit tests for the declaration formatter.

Run with: python3 -m pytest typegen/test_formatter.py
"""

import subprocess
import unittest
from unittest import mock

from typegen.formatter import (
    DeclarationFormatter,
    DeclarationLexer,
    DeclarationSyntaxError,
    FormatterConfig,
    FormatterUnavailableError,
    PrettierFormatter,
    TokenType,
    format_declarations,
    requote,
)


class TestDeclarationLexer(unittest.TestCase):
    """Test tokenization of declaration source."""

    def test_keywords_and_identifiers(self):
        tokens = DeclarationLexer('declare class $Root_1 {}').tokenize()
        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.DECLARE, TokenType.CLASS, TokenType.IDENTIFIER,
             TokenType.LBRACE, TokenType.RBRACE, TokenType.EOF],
        )
        self.assertEqual(tokens[2].value, '$Root_1')

    def test_comments_kept(self):
        tokens = DeclarationLexer('/* a\n b */\n// c').tokenize()
        self.assertEqual(tokens[0].type, TokenType.COMMENT)
        self.assertEqual((tokens[0].line, tokens[0].end_line), (1, 2))
        self.assertEqual(tokens[1].value, '// c')

    def test_unknown_character(self):
        with self.assertRaises(DeclarationSyntaxError) as cm:
            DeclarationLexer('declare let a: #A;').tokenize()
        self.assertEqual((cm.exception.line, cm.exception.column), (1, 16))

    def test_unterminated_string(self):
        with self.assertRaises(DeclarationSyntaxError):
            DeclarationLexer("declare type A = 'abc;").tokenize()

    def test_unterminated_comment(self):
        with self.assertRaises(DeclarationSyntaxError):
            DeclarationLexer('/* never closed').tokenize()


class TestRequote(unittest.TestCase):
    """Test string literal quote normalization."""

    def test_prefers_double_quotes(self):
        self.assertEqual(requote("'large'"), '"large"')

    def test_single_quote_option(self):
        self.assertEqual(requote('"large"', single_quote=True), "'large'")

    def test_keeps_quote_needing_fewer_escapes(self):
        self.assertEqual(requote("'say \"hi\"'"), "'say \"hi\"'")

    def test_drops_unneeded_escape(self):
        self.assertEqual(requote("'it\\'s'"), '"it\'s"')

    def test_keeps_other_escapes(self):
        self.assertEqual(requote("'a\\\\b\\n'"), '"a\\\\b\\n"')


class TestDeclarationFormatter(unittest.TestCase):
    """Test canonical layout."""

    def test_canonical_layout(self):
        source = (
            'declare   type Style={[str:string]:boolean}&symbol\n'
            'interface  A{(enabled?:any):Style}\n\n\n\n'
            'export default out'
        )
        expected = (
            'declare type Style = { [str: string]: boolean } & symbol;\n'
            '\n'
            'interface A {\n'
            '  (enabled?: any): Style;\n'
            '}\n'
            '\n'
            'export default out;\n'
        )
        self.assertEqual(format_declarations(source), expected)

    def test_idempotent(self):
        source = (
            '// header\n'
            'declare class Root { readonly a: A & Style; m(x: string): Style; '
            "'b-c'?(): Style }\n"
            'declare let out: Root & Style;\n'
        )
        once = format_declarations(source)
        self.assertEqual(format_declarations(once), once)

    def test_indent_width(self):
        output = DeclarationFormatter(FormatterConfig(indent_width=4)).format(
            'declare class A { b(): B; }')
        self.assertEqual(output, 'declare class A {\n    b(): B;\n}\n')

    def test_empty_body(self):
        self.assertEqual(format_declarations('declare class A {\n\n}'), 'declare class A {}\n')

    def test_empty_source(self):
        self.assertEqual(format_declarations('  \n'), '')

    def test_comment_grouping(self):
        source = '// one\n// two\n\n\n/* block */\ndeclare let a: A;\n'
        self.assertEqual(
            format_declarations(source),
            '// one\n// two\n\n/* block */\ndeclare let a: A;\n',
        )

    def test_member_comments(self):
        source = 'declare class A {\n// note\nreadonly b: B;\n}'
        self.assertEqual(
            format_declarations(source),
            'declare class A {\n  // note\n  readonly b: B;\n}\n',
        )

    def test_keyword_member_names(self):
        source = 'declare class A { readonly readonly: B; type(): C; default?: D }'
        self.assertEqual(
            format_declarations(source),
            'declare class A {\n  readonly readonly: B;\n  type(): C;\n  default?: D;\n}\n',
        )

    def test_type_precedence(self):
        source = 'export type T = (A | B) & C; type U = (A)[]; type V = (A & B)[]'
        self.assertEqual(
            format_declarations(source),
            'export type T = (A | B) & C;\n\ntype U = A[];\n\ntype V = (A & B)[];\n',
        )

    def test_array_of_union(self):
        output = format_declarations('type T = ( A|B )[ ]')
        self.assertEqual(output, 'type T = (A | B)[];\n')
        self.assertEqual(format_declarations(output), output)

    def test_number_literal_types(self):
        output = format_declarations('type N =1|2.5')
        self.assertEqual(output, 'type N = 1 | 2.5;\n')
        self.assertEqual(format_declarations(output), output)

    def test_dotted_type_reference(self):
        output = format_declarations('declare let r: Foo . Bar.Baz')
        self.assertEqual(output, 'declare let r: Foo.Bar.Baz;\n')
        self.assertEqual(format_declarations(output), output)

    def test_leading_union_pipe(self):
        self.assertEqual(
            format_declarations("type T =\n  | 'a'\n  | 'b';"),
            'type T = "a" | "b";\n',
        )

    def test_missing_semicolon_on_same_line(self):
        with self.assertRaises(DeclarationSyntaxError):
            format_declarations('declare let a: A declare let b: B;')

    def test_unbalanced_braces(self):
        with self.assertRaises(DeclarationSyntaxError):
            format_declarations('declare class A { b(): B;')

    def test_class_name_with_space(self):
        with self.assertRaises(DeclarationSyntaxError):
            format_declarations('declare class Bad Name {}')

    def test_readonly_method_rejected(self):
        with self.assertRaises(DeclarationSyntaxError):
            format_declarations('declare class A { readonly b(): B; }')

    def test_unsupported_statement(self):
        with self.assertRaises(DeclarationSyntaxError):
            format_declarations('function f(): void;')


class TestPrettierFormatter(unittest.TestCase):
    """Test the external prettier adapter without running node."""

    def test_command(self):
        formatter = PrettierFormatter(('npx', 'prettier'), FormatterConfig(single_quote=True))
        self.assertEqual(
            formatter.build_command(),
            ['npx', 'prettier', '--parser', 'typescript', '--tab-width', '2', '--single-quote'],
        )

    def test_success_returns_stdout(self):
        completed = subprocess.CompletedProcess(['prettier'], 0, stdout='formatted\n', stderr='')
        with mock.patch('typegen.formatter.formatter.subprocess.run',
                        return_value=completed) as run:
            self.assertEqual(PrettierFormatter().format('raw'), 'formatted\n')
        self.assertEqual(run.call_args.kwargs['input'], 'raw')

    def test_failure_raises_syntax_error(self):
        completed = subprocess.CompletedProcess(['prettier'], 2, stdout='',
                                                stderr='SyntaxError: ; expected\n')
        with mock.patch('typegen.formatter.formatter.subprocess.run', return_value=completed):
            with self.assertRaises(DeclarationSyntaxError) as cm:
                PrettierFormatter().format('declare class Bad Name {}')
        self.assertIn('; expected', str(cm.exception))

    def test_missing_binary_raises_unavailable(self):
        with mock.patch('typegen.formatter.formatter.subprocess.run',
                        side_effect=FileNotFoundError(2, 'No such file or directory')):
            with self.assertRaises(FormatterUnavailableError) as cm:
                PrettierFormatter(('missing-prettier',)).format('declare let a: A;')
        self.assertIn('missing-prettier --parser typescript', str(cm.exception))
        self.assertIsInstance(cm.exception.__cause__, FileNotFoundError)


if __name__ == '__main__':
    unittest.main(verbosity=2)

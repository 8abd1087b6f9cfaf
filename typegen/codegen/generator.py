"""
Top-level declaration file generator.

This module assembles the complete declaration file for a root ObjType:
header, shared style type, nested declarations and the default-exported
singleton, then hands the text to the canonical formatter.
"""

from typing import Optional

from ..type_system import header_comment, STYLE_TYPE_BODY
from ..formatter import DeclarationFormatter, DeclarationSyntaxError, Formatter
from .context import CodeGenerationContext
from .diagnostics import GeneratorDiagnostics
from .method import MethodSignatureGenerator
from .object import ObjectGenerator


class EmissionError(RuntimeError):
    """Generated text was rejected by the formatter.

    This always points at a defect in the generators, not at the input tree.
    """

    def __init__(self, message: str, stage: str, node_name: str = ''):
        super().__init__(message)
        self.stage = stage
        self.node_name = node_name


class TypeScriptDeclarationGenerator:
    """
    Generates a TypeScript declaration file from a style type tree.

    Keyword options are passed through to CodeGenerationContext
    (indent_str, style_type, export_name, header_title, strict, verbose).
    """

    def __init__(self, formatter: Optional[Formatter] = None, **options):
        self.formatter = formatter or DeclarationFormatter()
        self._options = options
        self._ctx: Optional[CodeGenerationContext] = None

    @property
    def diagnostics(self) -> GeneratorDiagnostics:
        """Diagnostics of the most recent generate() call."""
        if self._ctx is None:
            return GeneratorDiagnostics()
        return self._ctx.diagnostics

    def assemble(self, root, ctx: CodeGenerationContext) -> str:
        """Build the unformatted declaration source for a root node."""
        style = ctx.style_type

        preamble = (
            f'{header_comment(ctx.header_title)}\n\n'
            f'declare type {style} = {STYLE_TYPE_BODY};\n'
        )
        ctx.record_block('preamble', style, preamble)

        method_generator = MethodSignatureGenerator(ctx)
        body = ObjectGenerator(ctx, method_generator).generate(root)

        export = (
            f'declare let {ctx.export_name}: {root.name} & {style};\n\n'
            f'export default {ctx.export_name};\n'
        )
        ctx.record_block('export', ctx.export_name, export)

        return '\n'.join([preamble, body, export])

    def generate(self, root) -> str:
        """Generate the formatted declaration file for a root ObjType.

        Raises:
            EmissionError: if the assembled text does not parse
            MalformedTreeError: in strict mode, for degenerate state lists
        """
        ctx = CodeGenerationContext(**self._options)
        self._ctx = ctx
        source = self.assemble(root, ctx)

        try:
            output = self.formatter.format(source)
        except DeclarationSyntaxError as e:
            raise self._locate_failure(ctx, root.name, e) from e

        if ctx.verbose:
            ctx.diagnostics.print_summary()
        return output

    def _locate_failure(
        self,
        ctx: CodeGenerationContext,
        root_name: str,
        error: DeclarationSyntaxError,
    ) -> EmissionError:
        """Find the first emitted block that fails to format on its own."""
        for block in ctx.blocks:
            try:
                self.formatter.format(block.text)
            except DeclarationSyntaxError as block_error:
                return EmissionError(
                    f'Generated {block.stage} declaration "{block.node_name}" '
                    f'is not valid TypeScript: {block_error}',
                    stage=block.stage,
                    node_name=block.node_name,
                )
        return EmissionError(
            f'Assembled declarations for "{root_name}" are not valid TypeScript: {error}',
            stage='assembly',
            node_name=root_name,
        )


def format_typescript(root, formatter: Optional[Formatter] = None, **options) -> str:
    """Generate the declaration file for a root ObjType in one call."""
    return TypeScriptDeclarationGenerator(formatter, **options).generate(root)

# src/md_kit/renderers/plaintext.py

from md_kit.document.models import (
    Alignment,
    Block,
    CodeBlock,
    Document,
    Heading,
    ListItem,
    Paragraph,
    Table,
)

from .base import Renderer, TargetFormat

CODE_INDENT = "    "


class PlainTextRenderer(Renderer):
    """
    Terminal-friendly rendering.
    - Level 1/2 headings underlined with '=' / '-'
    - Deeper headings keep their '#' prefix
    - Tables padded per column, alignment honored
    """

    target_format = TargetFormat.PLAIN_TEXT

    def render(self, document: Document) -> str:
        parts: list[str] = []

        if self.config.include_toc and document.toc:
            parts.append(self._render_toc(document))

        previous: Block | None = None
        for block in document.blocks:
            text = self._render_block(block)
            if isinstance(block, ListItem) and isinstance(previous, ListItem):
                # Consecutive items stay on adjacent lines.
                parts[-1] = parts[-1] + "\n" + text
            else:
                parts.append(text)
            previous = block

        if not parts:
            return ""
        return "\n\n".join(parts) + "\n"

    def _render_block(self, block: Block) -> str:
        if isinstance(block, Heading):
            if block.level == 1:
                return f"{block.text}\n{'=' * len(block.text)}"
            if block.level == 2:
                return f"{block.text}\n{'-' * len(block.text)}"
            return f"{'#' * block.level} {block.text}"
        if isinstance(block, Paragraph):
            return block.text
        if isinstance(block, ListItem):
            indent = " " * (self.config.list_indent * block.depth)
            bullet = block.marker if block.ordered else "-"
            return f"{indent}{bullet} {block.text}"
        if isinstance(block, CodeBlock):
            return self._render_code(block)
        if isinstance(block, Table):
            return self._render_table(block)
        raise TypeError(f"Unknown block type: {type(block).__name__}")

    def _render_code(self, block: CodeBlock) -> str:
        lines = [f"[{block.language}]"] if block.language else []
        for line in block.content.split("\n"):
            lines.append(CODE_INDENT + line if line else "")
        return "\n".join(lines)

    def _render_table(self, table: Table) -> str:
        widths = [
            max(len(row[col]) for row in table.rows) for col in range(len(table.header))
        ]

        def fmt(row: tuple[str, ...]) -> str:
            cells = [
                _align(cell, widths[col], table.alignment(col))
                for col, cell in enumerate(row)
            ]
            return " | ".join(cells).rstrip()

        separator = "-+-".join("-" * max(width, 1) for width in widths)
        lines = [fmt(table.header), separator]
        lines.extend(fmt(row) for row in table.body)
        return "\n".join(lines)

    def _render_toc(self, document: Document) -> str:
        top = min(ref.level for ref in document.toc)
        lines = ["Contents"]
        for ref in document.toc:
            indent = " " * (self.config.list_indent * (ref.level - top + 1))
            lines.append(f"{indent}{ref.text}")
        return "\n".join(lines)


def _align(text: str, width: int, alignment: Alignment) -> str:
    if alignment == "right":
        return text.rjust(width)
    if alignment == "center":
        return text.center(width)
    return text.ljust(width)

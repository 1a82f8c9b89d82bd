# src/md_kit/renderers/html.py

from html import escape

from md_kit.document.models import (
    Block,
    CodeBlock,
    Document,
    Heading,
    ListItem,
    Paragraph,
    Table,
)

from .base import Renderer, TargetFormat


class HtmlRenderer(Renderer):
    target_format = TargetFormat.HTML

    def render(self, document: Document) -> str:
        anchors = {ref.block_index: ref.anchor for ref in document.toc}
        parts: list[str] = []

        if self.config.include_toc and document.toc:
            parts.append(self._render_toc(document))

        pending_items: list[ListItem] = []
        for index, block in enumerate(document.blocks):
            if isinstance(block, ListItem):
                pending_items.append(block)
                continue
            if pending_items:
                parts.append(self._render_list(pending_items))
                pending_items = []
            parts.append(self._render_block(block, anchors.get(index)))
        if pending_items:
            parts.append(self._render_list(pending_items))

        body = "\n".join(parts)
        if self.config.standalone:
            return self._wrap_page(document.title, body)
        return body + "\n" if body else ""

    def _render_block(self, block: Block, anchor: str | None) -> str:
        if isinstance(block, Heading):
            tag = f"h{block.level}"
            if anchor and self.config.heading_anchors:
                return f'<{tag} id="{escape(anchor)}">{escape(block.text)}</{tag}>'
            return f"<{tag}>{escape(block.text)}</{tag}>"
        if isinstance(block, Paragraph):
            return f"<p>{escape(block.text)}</p>"
        if isinstance(block, CodeBlock):
            return self._render_code(block)
        if isinstance(block, Table):
            return self._render_table(block)
        raise TypeError(f"Unknown block type: {type(block).__name__}")

    def _render_code(self, block: CodeBlock) -> str:
        content = escape(block.content)
        if block.language:
            css = escape(self.config.code_class_prefix + block.language)
            return f'<pre><code class="{css}">{content}</code></pre>'
        return f"<pre><code>{content}</code></pre>"

    def _render_table(self, table: Table) -> str:
        lines = ["<table>", "<thead>", self._render_row(table, table.header, "th")]
        lines.append("</thead>")
        if table.body:
            lines.append("<tbody>")
            lines.extend(self._render_row(table, row, "td") for row in table.body)
            lines.append("</tbody>")
        lines.append("</table>")
        return "\n".join(lines)

    def _render_row(self, table: Table, row: tuple[str, ...], tag: str) -> str:
        cells = "".join(
            f'<{tag} style="text-align: {table.alignment(col)}">{escape(cell)}</{tag}>'
            for col, cell in enumerate(row)
        )
        return f"<tr>{cells}</tr>"

    def _render_list(self, items: list[ListItem]) -> str:
        """Group consecutive items into nested <ul>/<ol> by depth."""
        out: list[str] = []
        stack: list[tuple[int, str]] = []  # (depth, tag) of open lists

        for item in items:
            tag = "ol" if item.ordered else "ul"
            while stack and stack[-1][0] > item.depth:
                out.append(f"</li></{stack.pop()[1]}>")
            if stack and stack[-1][0] == item.depth:
                if stack[-1][1] == tag:
                    out.append("</li>")
                else:
                    out.append(f"</li></{stack.pop()[1]}>")
            if not stack or stack[-1][0] < item.depth:
                out.append(self._open_list(item))
                stack.append((item.depth, tag))
            out.append(f"<li>{escape(item.text)}")

        while stack:
            out.append(f"</li></{stack.pop()[1]}>")
        return "\n".join(out)

    def _open_list(self, item: ListItem) -> str:
        if not item.ordered:
            return "<ul>"
        start = int(item.marker[:-1])
        if start != 1:
            return f'<ol start="{start}">'
        return "<ol>"

    def _render_toc(self, document: Document) -> str:
        lines = ['<nav class="toc">', "<ul>"]
        for ref in document.toc:
            lines.append(
                f'<li class="toc-h{ref.level}">'
                f'<a href="#{escape(ref.anchor)}">{escape(ref.text)}</a></li>'
            )
        lines.extend(["</ul>", "</nav>"])
        return "\n".join(lines)

    def _wrap_page(self, title: str, body: str) -> str:
        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{escape(title)}</title>\n"
            "</head>\n"
            "<body>\n"
            f"{body}\n"
            "</body>\n"
            "</html>\n"
        )

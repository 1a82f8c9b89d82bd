# src/md_kit/document/markdown_parser.py

import logging
import re

from md_kit.errors import ParseError

from .base import DocumentParser
from .models import (
    Alignment,
    Block,
    CodeBlock,
    Document,
    Heading,
    HeadingRef,
    ListItem,
    Paragraph,
    Table,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Document"
TAB_SIZE = 4

_FENCE_OPEN = re.compile(r"^(?P<indent> *)(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_FENCE_CLOSE = re.compile(r"^(?P<indent> *)(?P<fence>`{3,}|~{3,})[ \t]*$")
_HEADING = re.compile(r"^ {0,3}(?P<hashes>#{1,6})(?:[ \t]+(?P<text>.*))?$")
_CLOSING_HASHES = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")
_THEMATIC_BREAK = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")
_LIST_ITEM = re.compile(
    r"^(?P<indent> *)(?P<marker>[-*+]|\d{1,9}[.)])[ \t]+(?P<text>.*)$"
)
_DELIMITER_CELL = re.compile(r"^:?-+:?$")
_CELL_SPLIT = re.compile(r"(?<!\\)\|")


class MarkdownParser(DocumentParser):
    """
    Deterministic block-level Markdown parser.
    - ATX headings, paragraphs, bullet and ordered list items
    - Fenced code blocks (backticks or tildes), also nested under list items
    - Pipe tables with alignment row
    Inline markup is kept as literal text. Code block content is taken from
    the raw source lines, so tabs inside fences survive unchanged.
    """

    def parse(self, source_text: str) -> Document:
        raw = source_text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        # Tab-expanded copy, used only to match syntax and measure indentation.
        lines = [line.expandtabs(TAB_SIZE) for line in raw]

        blocks: list[Block] = []
        i = 0
        n_lines = len(lines)
        # Content column of the list item the current line belongs to.
        container_indent = 0

        while i < n_lines:
            line = lines[i]

            if not line.strip():
                i += 1
                continue

            item = self._match_list_item(line)
            if item is not None:
                container_indent = item.start("text")
            elif _indent_width(line) < container_indent:
                container_indent = 0

            block, i = self._next_block(raw, lines, i, item, container_indent)
            if block is None:
                continue

            logger.debug("Parsed %s at line %d", type(block).__name__, block.line)
            blocks.append(block)

        toc = self._build_toc(blocks)
        return Document(
            title=self._extract_title(blocks),
            blocks=tuple(blocks),
            toc=toc,
            metadata={"source_type": "markdown"},
        )

    def _next_block(
        self,
        raw: list[str],
        lines: list[str],
        i: int,
        item: re.Match[str] | None,
        container_indent: int,
    ) -> tuple[Block | None, int]:
        line = lines[i]

        fence = self._match_fence(line, container_indent)
        if fence is not None:
            return self._parse_code_block(raw, lines, i, fence, container_indent)

        heading = _HEADING.match(line)
        if heading is not None:
            return self._parse_heading(heading, i)

        if _THEMATIC_BREAK.match(line):
            # No block variant for rules; they only separate content.
            return None, i + 1

        if self._is_table_start(lines, i):
            return self._parse_table(lines, i)

        if item is not None:
            return self._parse_list_item(lines, i, item)

        return self._parse_paragraph(lines, i, container_indent)

    # ------------------------------------------------------------------
    # Block scanners. Each returns the block and the index of the next line.
    # ------------------------------------------------------------------

    def _parse_code_block(
        self,
        raw: list[str],
        lines: list[str],
        start: int,
        match: re.Match[str],
        container_indent: int,
    ) -> tuple[CodeBlock, int]:
        indent = len(match.group("indent"))
        fence = match.group("fence")
        info = match.group("info").strip()
        language = info.split()[0] if info else ""

        content: list[str] = []
        i = start + 1
        while i < len(lines):
            closing = _FENCE_CLOSE.match(lines[i])
            if (
                closing
                and len(closing.group("indent")) <= container_indent + 3
                and closing.group("fence")[0] == fence[0]
                and len(closing.group("fence")) >= len(fence)
            ):
                block = CodeBlock(
                    content="\n".join(content), language=language, line=start + 1
                )
                return block, i + 1
            content.append(_strip_columns(raw[i], indent))
            i += 1

        logger.error("Unterminated code fence opened at line %d", start + 1)
        raise ParseError("Unterminated code fence", line=start + 1)

    def _parse_heading(self, match: re.Match[str], start: int) -> tuple[Heading, int]:
        text = match.group("text") or ""
        text = _CLOSING_HASHES.sub("", text).strip()
        heading = Heading(level=len(match.group("hashes")), text=text, line=start + 1)
        return heading, start + 1

    def _parse_table(self, lines: list[str], start: int) -> tuple[Table, int]:
        header = self._split_row(lines[start])
        width = len(header)
        delimiter = self._split_row(lines[start + 1])
        alignments = [self._alignment(cell) for cell in delimiter][:width]

        rows = [tuple(header)]
        i = start + 2
        while i < len(lines):
            line = lines[i]
            if not line.strip() or "|" not in line:
                break
            cells = self._split_row(line)
            cells = (cells + [""] * width)[:width]
            rows.append(tuple(cells))
            i += 1

        table = Table(rows=tuple(rows), alignments=tuple(alignments), line=start + 1)
        return table, i

    def _parse_list_item(
        self, lines: list[str], start: int, match: re.Match[str]
    ) -> tuple[ListItem, int]:
        marker = match.group("marker")
        text = match.group("text").strip()
        i = start + 1
        while i < len(lines) and not self._starts_block(lines, i, match.start("text")):
            text += " " + lines[i].strip()
            i += 1

        item = ListItem(
            text=text,
            ordered=marker[0].isdigit(),
            marker=marker,
            depth=len(match.group("indent")) // 2,
            line=start + 1,
        )
        return item, i

    def _parse_paragraph(
        self, lines: list[str], start: int, container_indent: int
    ) -> tuple[Paragraph, int]:
        parts = [lines[start].strip()]
        i = start + 1
        while i < len(lines) and not self._starts_block(lines, i, container_indent):
            parts.append(lines[i].strip())
            i += 1
        return Paragraph(text=" ".join(parts), line=start + 1), i

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _starts_block(self, lines: list[str], i: int, container_indent: int) -> bool:
        """True when line i ends a running paragraph or list item."""
        line = lines[i]
        if not line.strip():
            return True
        if self._match_fence(line, container_indent) is not None:
            return True
        if _HEADING.match(line) or _THEMATIC_BREAK.match(line):
            return True
        if _LIST_ITEM.match(line):
            return True
        return self._is_table_start(lines, i)

    def _match_fence(self, line: str, container_indent: int) -> re.Match[str] | None:
        """Opening fence indented at most three columns past its container."""
        match = _FENCE_OPEN.match(line)
        if match is None or len(match.group("indent")) > container_indent + 3:
            return None
        # Backtick fences cannot carry backticks in their info string.
        if match.group("fence")[0] == "`" and "`" in match.group("info"):
            return None
        return match

    def _match_list_item(self, line: str) -> re.Match[str] | None:
        if _THEMATIC_BREAK.match(line):
            return None
        return _LIST_ITEM.match(line)

    def _is_table_start(self, lines: list[str], i: int) -> bool:
        if "|" not in lines[i] or i + 1 >= len(lines):
            return False
        cells = self._split_row(lines[i + 1])
        if len(cells) != len(self._split_row(lines[i])):
            return False
        return all(_DELIMITER_CELL.match(c) for c in cells)

    def _split_row(self, line: str) -> list[str]:
        row = line.strip()
        if row.startswith("|"):
            row = row[1:]
        if row.endswith("|") and not row.endswith("\\|"):
            row = row[:-1]
        return [cell.strip().replace("\\|", "|") for cell in _CELL_SPLIT.split(row)]

    def _alignment(self, cell: str) -> Alignment:
        if cell.startswith(":") and cell.endswith(":"):
            return "center"
        if cell.endswith(":"):
            return "right"
        return "left"

    def _extract_title(self, blocks: list[Block]) -> str:
        """
        Simple heuristic:
        - First level-1 heading, else first heading of any level
        """
        headings = [b for b in blocks if isinstance(b, Heading) and b.text]
        for heading in headings:
            if heading.level == 1:
                return heading.text
        if headings:
            return headings[0].text
        return DEFAULT_TITLE

    def _build_toc(self, blocks: list[Block]) -> tuple[HeadingRef, ...]:
        issued: set[str] = set()
        refs = []
        for index, block in enumerate(blocks):
            if not isinstance(block, Heading):
                continue
            base = slugify(block.text)
            anchor = base
            suffix = 0
            while anchor in issued:
                suffix += 1
                anchor = f"{base}-{suffix}"
            issued.add(anchor)
            refs.append(
                HeadingRef(
                    level=block.level, text=block.text, anchor=anchor, block_index=index
                )
            )
        return tuple(refs)


def slugify(text: str) -> str:
    """GitHub-style heading anchor: lowercase, punctuation dropped, spaces to '-'."""
    slug = re.sub(r"[^\w\- ]", "", text.lower()).strip().replace(" ", "-")
    return slug or "section"


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _strip_columns(line: str, columns: int) -> str:
    """Remove up to `columns` columns of leading spaces/tabs from a raw line."""
    col = 0
    pos = 0
    while pos < len(line) and col < columns:
        char = line[pos]
        if char == " ":
            width = 1
        elif char == "\t":
            width = TAB_SIZE - col % TAB_SIZE
        else:
            break
        if col + width > columns:
            break
        col += width
        pos += 1
    return line[pos:]

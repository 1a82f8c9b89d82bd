# src/md_kit/document/models.py

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

Alignment = Literal["left", "center", "right"]


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    line: int = 0


@dataclass(frozen=True)
class Paragraph:
    text: str
    line: int = 0


@dataclass(frozen=True)
class ListItem:
    text: str
    ordered: bool = False
    marker: str = "-"
    depth: int = 0
    line: int = 0


@dataclass(frozen=True)
class CodeBlock:
    """Literal fenced text. The language tag is informational only."""

    content: str
    language: str = ""
    line: int = 0


@dataclass(frozen=True)
class Table:
    """Rows of cell strings; the first row is the header."""

    rows: tuple[tuple[str, ...], ...]
    alignments: tuple[Alignment, ...] = ()
    line: int = 0

    @property
    def header(self) -> tuple[str, ...]:
        return self.rows[0] if self.rows else ()

    @property
    def body(self) -> tuple[tuple[str, ...], ...]:
        return self.rows[1:]

    def alignment(self, column: int) -> Alignment:
        if column < len(self.alignments):
            return self.alignments[column]
        return "left"


Block: TypeAlias = Heading | Paragraph | ListItem | CodeBlock | Table


@dataclass(frozen=True)
class HeadingRef:
    """Table of contents entry pointing at a Heading in Document.blocks."""

    level: int
    text: str
    anchor: str
    block_index: int


@dataclass(frozen=True)
class Document:
    """Parsed Markdown document.

    Immutable. Blocks are kept in source order.
    """

    title: str
    blocks: tuple[Block, ...]
    toc: tuple[HeadingRef, ...] = ()
    metadata: dict = field(default_factory=dict)

    @property
    def headings(self) -> list[Heading]:
        return [b for b in self.blocks if isinstance(b, Heading)]

    @property
    def code_blocks(self) -> list[CodeBlock]:
        return [b for b in self.blocks if isinstance(b, CodeBlock)]

    @property
    def tables(self) -> list[Table]:
        return [b for b in self.blocks if isinstance(b, Table)]

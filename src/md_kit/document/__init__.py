from .base import DocumentParser
from .markdown_parser import MarkdownParser, slugify
from .models import (
    Block,
    CodeBlock,
    Document,
    Heading,
    HeadingRef,
    ListItem,
    Paragraph,
    Table,
)
from .store import DocumentStore, load, load_file

__all__ = [
    # Store
    "DocumentStore",
    "load",
    "load_file",
    # Parsers
    "DocumentParser",
    "MarkdownParser",
    "slugify",
    # Types
    "Block",
    "CodeBlock",
    "Document",
    "Heading",
    "HeadingRef",
    "ListItem",
    "Paragraph",
    "Table",
]

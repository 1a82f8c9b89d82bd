# Document store
from .document import (
    CodeBlock,
    Document,
    DocumentStore,
    Heading,
    HeadingRef,
    ListItem,
    MarkdownParser,
    Paragraph,
    Table,
    load,
    load_file,
)

# Errors
from .errors import MdKitError, ParseError, UnsupportedFormatError

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Renderers
from .renderers import (
    HtmlRenderer,
    PlainTextRenderer,
    RenderConfig,
    Renderer,
    TargetFormat,
    create_renderer,
    render,
)

__all__ = [
    # Document store
    "CodeBlock",
    "Document",
    "DocumentStore",
    "Heading",
    "HeadingRef",
    "ListItem",
    "MarkdownParser",
    "Paragraph",
    "Table",
    "load",
    "load_file",
    # Errors
    "MdKitError",
    "ParseError",
    "UnsupportedFormatError",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Renderers
    "HtmlRenderer",
    "PlainTextRenderer",
    "RenderConfig",
    "Renderer",
    "TargetFormat",
    "create_renderer",
    "render",
]

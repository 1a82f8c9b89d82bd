"""Renderers for md-kit documents.

Example:
    >>> from md_kit.document import load
    >>> from md_kit.renderers import TargetFormat, render
    >>>
    >>> document = load("# Naming\\n\\nUse snake_case.\\n")
    >>> print(render(document, TargetFormat.PLAIN_TEXT))
"""

from .base import Renderer, TargetFormat, resolve_format
from .config import RenderConfig
from .factory import create_renderer, render
from .html import HtmlRenderer
from .plaintext import PlainTextRenderer

__all__ = [
    # Factory
    "create_renderer",
    "render",
    # Base
    "Renderer",
    "TargetFormat",
    "resolve_format",
    # Config
    "RenderConfig",
    # Implementations
    "HtmlRenderer",
    "PlainTextRenderer",
]

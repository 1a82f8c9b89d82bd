# src/md_kit/renderers/base.py

import logging
from abc import ABC, abstractmethod
from enum import Enum

from md_kit.document.models import Document
from md_kit.errors import UnsupportedFormatError

from .config import RenderConfig

logger = logging.getLogger(__name__)


class TargetFormat(str, Enum):
    """Output surfaces a Document can be rendered to."""

    HTML = "html"
    PLAIN_TEXT = "plain_text"


def resolve_format(target_format: object) -> TargetFormat:
    """Coerce a TargetFormat or its string value.

    Raises:
        UnsupportedFormatError: For anything else, e.g. ``42`` or ``"pdf"``.
    """
    if isinstance(target_format, TargetFormat):
        return target_format
    if isinstance(target_format, str):
        try:
            return TargetFormat(target_format.lower())
        except ValueError:
            pass
    logger.error("Unsupported target format: %r", target_format)
    raise UnsupportedFormatError(target_format)


class Renderer(ABC):
    """Turns a Document into text for one TargetFormat.

    Design principles:
    - Stateless: the same Document always renders to the same string
    - Structural: block order and heading levels are preserved
    - No inline markup interpretation: text is emitted literally
    """

    target_format: TargetFormat

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    @abstractmethod
    def render(self, document: Document) -> str:
        raise NotImplementedError

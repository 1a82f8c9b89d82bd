# src/md_kit/renderers/factory.py

import logging
from time import monotonic

from md_kit.document.models import Document
from md_kit.errors import UnsupportedFormatError
from md_kit.observability import names
from md_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import Renderer, TargetFormat, resolve_format
from .config import RenderConfig

logger = logging.getLogger(__name__)


def create_renderer(
    target_format: TargetFormat | str,
    config: RenderConfig | None = None,
) -> Renderer:
    """Create a renderer for a target format.

    Args:
        target_format: A TargetFormat member or its string value.
        config: Optional renderer options.

    Returns:
        Configured Renderer implementation.

    Raises:
        UnsupportedFormatError: If target_format is unknown.

    Example:
        >>> renderer = create_renderer(TargetFormat.HTML)
        >>> html = renderer.render(document)
    """
    target_format = resolve_format(target_format)

    if target_format is TargetFormat.HTML:
        from .html import HtmlRenderer

        return HtmlRenderer(config)

    if target_format is TargetFormat.PLAIN_TEXT:
        from .plaintext import PlainTextRenderer

        return PlainTextRenderer(config)

    raise UnsupportedFormatError(target_format)


def render(
    document: Document,
    target_format: TargetFormat | str = TargetFormat.HTML,
    config: RenderConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Render a document. Aborts on the first error; nothing is retried."""
    start = monotonic()
    metrics_hook.increment(names.RENDER_REQUESTS_TOTAL)
    try:
        renderer = create_renderer(target_format, config)
    except UnsupportedFormatError:
        metrics_hook.increment(names.RENDER_ERRORS_TOTAL)
        raise

    labels = {"format": renderer.target_format.value}
    output = renderer.render(document)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.RENDER_DURATION, elapsed_ms, labels)
    metrics_hook.record_gauge(names.RENDER_OUTPUT_CHARS, len(output), labels)
    logger.info(
        "Rendered %r as %s (%d chars)",
        document.title,
        renderer.target_format.value,
        len(output),
    )
    return output

"""
md-kit: render a Markdown style guide to HTML or plain text.

Usage:
  md-kit [PATH] [--format html|plain_text] [--config FILE] [--output FILE]

Reads stdin when PATH is omitted or "-".
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from md_kit.document.store import DocumentStore
from md_kit.errors import MdKitError
from md_kit.observability.base import LoggingMetricsHook, NoOpMetricsHook
from md_kit.renderers.base import TargetFormat
from md_kit.renderers.config import RenderConfig
from md_kit.renderers.factory import render

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md-kit",
        description="Render a Markdown document to HTML or plain text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version="md-kit 0.1.0")
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Markdown file to render (default: stdin)",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="target_format",
        choices=[f.value for f in TargetFormat],
        default=TargetFormat.HTML.value,
        help="Output format (default: html)",
    )
    parser.add_argument(
        "-c", "--config", type=Path, help="YAML file with renderer options"
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="Write output here instead of stdout"
    )
    parser.add_argument(
        "--toc", action="store_true", help="Include a table of contents"
    )
    parser.add_argument(
        "--standalone", action="store_true", help="Emit a full HTML page"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging and metrics"
    )
    return parser


def _load_config(args: argparse.Namespace) -> RenderConfig:
    config = RenderConfig.from_yaml(args.config) if args.config else RenderConfig()
    overrides = {}
    if args.toc:
        overrides["include_toc"] = True
    if args.standalone:
        overrides["standalone"] = True
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    metrics_hook = LoggingMetricsHook() if args.verbose else NoOpMetricsHook()
    store = DocumentStore(metrics_hook=metrics_hook)

    try:
        config = _load_config(args)
        if args.path == "-":
            document = store.load(sys.stdin.read())
        else:
            document = store.load_file(args.path)
        output = render(document, args.target_format, config, metrics_hook)
        if args.output:
            args.output.write_text(output, encoding="utf-8")
            logger.info("Wrote %s", args.output)
        else:
            sys.stdout.write(output)
    except (
        MdKitError,
        OSError,
        UnicodeDecodeError,
        ValidationError,
        yaml.YAMLError,
    ) as exc:
        logger.debug("Render failed", exc_info=True)
        print(f"md-kit: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

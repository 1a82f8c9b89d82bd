# src/md_kit/renderers/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class RenderConfig(BaseModel):
    """Renderer options.

    Immutable. Explicit. No magic defaults from environment.
    """

    include_toc: bool = False
    standalone: bool = False  # HTML only: wrap in a full page
    heading_anchors: bool = True
    code_class_prefix: str = "language-"
    list_indent: int = Field(default=2, ge=0)

    class Config:
        extra = "forbid"
        frozen = True

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RenderConfig":
        logger.info("Loading render config from %s", path)
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

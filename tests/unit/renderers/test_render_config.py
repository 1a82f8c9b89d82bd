from pathlib import Path

import pytest
from pydantic import ValidationError

from md_kit.renderers.config import RenderConfig


class TestRenderConfig:
    def test_defaults(self) -> None:
        config = RenderConfig()

        assert config.include_toc is False
        assert config.standalone is False
        assert config.heading_anchors is True
        assert config.code_class_prefix == "language-"
        assert config.list_indent == 2

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RenderConfig(colour="blue")  # type: ignore[call-arg]

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RenderConfig(list_indent=-1)

    def test_is_immutable(self) -> None:
        config = RenderConfig()

        with pytest.raises(ValidationError):
            config.include_toc = True  # type: ignore[misc]


class TestRenderConfigFromYaml:
    def test_loads_values(self, tmp_path: Path) -> None:
        path = tmp_path / "render.yaml"
        path.write_text("include_toc: true\nstandalone: true\nlist_indent: 4\n")

        config = RenderConfig.from_yaml(path)

        assert config.include_toc is True
        assert config.standalone is True
        assert config.list_indent == 4

    def test_empty_file_yields_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RenderConfig.from_yaml(path) == RenderConfig()

    def test_unknown_key_in_file_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("theme: dark\n")

        with pytest.raises(ValidationError):
            RenderConfig.from_yaml(path)

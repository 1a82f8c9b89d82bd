import io
from pathlib import Path

import pytest

from md_kit.cli import build_parser, main

GUIDE = "# Style Guide\n\n## Python\n\n```python\nx = 1\n```\n"


@pytest.fixture
def guide_path(tmp_path: Path) -> Path:
    path = tmp_path / "guide.md"
    path.write_text(GUIDE, encoding="utf-8")
    return path


class TestCli:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])

        assert args.path == "-"
        assert args.target_format == "html"

    def test_renders_html_to_stdout(
        self, guide_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(guide_path)]) == 0

        out = capsys.readouterr().out
        assert '<h1 id="style-guide">Style Guide</h1>' in out
        assert '<pre><code class="language-python">x = 1</code></pre>' in out

    def test_renders_plain_text(
        self, guide_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(guide_path), "--format", "plain_text"]) == 0

        assert capsys.readouterr().out.startswith("Style Guide\n===========\n")

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("# From stdin\n"))

        assert main(["-"]) == 0
        assert "From stdin" in capsys.readouterr().out

    def test_writes_output_file(self, guide_path: Path, tmp_path: Path) -> None:
        output = tmp_path / "out.html"

        assert main([str(guide_path), "--standalone", "-o", str(output)]) == 0
        assert "<title>Style Guide</title>" in output.read_text(encoding="utf-8")

    def test_config_file_and_toc_flag(
        self, guide_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "render.yaml"
        config.write_text("heading_anchors: false\n")

        assert main([str(guide_path), "-c", str(config), "--toc"]) == 0

        out = capsys.readouterr().out
        assert '<nav class="toc">' in out
        assert "<h1>Style Guide</h1>" in out

    def test_unterminated_fence_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "broken.md"
        path.write_text("# Broken\n\n```\nno end\n")

        assert main([str(path)]) == 1
        assert "Unterminated code fence (line 3)" in capsys.readouterr().err

    def test_missing_file_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(tmp_path / "nope.md")]) == 1
        assert "md-kit: error:" in capsys.readouterr().err

    def test_bad_config_exits_1(self, guide_path: Path, tmp_path: Path) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("unknown_option: 1\n")

        assert main([str(guide_path), "-c", str(config)]) == 1

    def test_invalid_utf8_file_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "latin1.md"
        path.write_bytes(b"# Caf\xe9\n\xff\xfe\n")

        assert main([str(path)]) == 1
        assert "md-kit: error:" in capsys.readouterr().err

    def test_invalid_utf8_stdin_exits_1(self, monkeypatch: pytest.MonkeyPatch) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(b"# \xff\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)

        assert main(["-"]) == 1

    def test_unwritable_output_exits_1(
        self, guide_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        output = tmp_path / "missing_dir" / "out.html"

        assert main([str(guide_path), "-o", str(output)]) == 1
        assert not output.exists()
        assert "md-kit: error:" in capsys.readouterr().err

    def test_unknown_format_is_usage_error(self, guide_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(guide_path), "--format", "pdf"])

        assert exc_info.value.code == 2

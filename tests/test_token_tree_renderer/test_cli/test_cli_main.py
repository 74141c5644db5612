"""Tests for the CLI main module."""

import io
import json
import tempfile
from pathlib import Path

import pytest

from token_tree_renderer.cli.main import (
    MarkdownProcessor,
    create_argument_parser,
    format_report,
    load_config,
    main,
)
from token_tree_renderer.shared.config import ConfigValidationError, RendererConfig


@pytest.fixture
def markdown_file():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "doc.md"
        path.write_text("*hi*\n", encoding="utf-8")
        yield path


class TestLoadConfig:
    """Test configuration loading from arguments."""

    def test_default(self) -> None:
        """Test the default preset."""
        args = create_argument_parser().parse_args(["render", "a.md"])

        assert load_config(args) == RendererConfig.default()

    def test_plain_and_no_remap(self) -> None:
        """Test the preset and remap flags."""
        plain = load_config(create_argument_parser().parse_args(["render", "a.md", "--plain"]))
        no_remap = load_config(create_argument_parser().parse_args(["render", "a.md", "--no-remap"]))

        assert plain.name == "plain"
        assert not plain.annotate_softbreaks
        assert not no_remap.remap_attributes
        assert no_remap.annotate_softbreaks

    def test_plain_with_config_file(self, tmp_path: Path) -> None:
        """Test that the config file overrides the selected preset."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"softbreak_marker": "data-br"}), encoding="utf-8")

        config = load_config(
            create_argument_parser().parse_args(
                ["render", "a.md", "--plain", "-c", str(config_path)]
            )
        )

        assert config.softbreak_marker == "data-br"
        assert not config.remap_attributes
        assert not config.annotate_emphasis_markup

    def test_config_file(self, tmp_path: Path) -> None:
        """Test loading configuration from a JSON file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"softbreak_marker": "data-br"}), encoding="utf-8")

        config = load_config(
            create_argument_parser().parse_args(["render", "a.md", "-c", str(config_path)])
        )

        assert config.softbreak_marker == "data-br"

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        """Test that unknown fields are rejected."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"no_such_option": 1}), encoding="utf-8")

        with pytest.raises(ConfigValidationError):
            load_config(
                create_argument_parser().parse_args(["render", "a.md", "-c", str(config_path)])
            )


class TestMarkdownProcessor:
    """Test per-file processing."""

    def test_process_success(self, markdown_file: Path) -> None:
        """Test rendering an existing file."""
        processor = MarkdownProcessor(RendererConfig())

        report = processor.process(markdown_file)

        assert report["success"]
        assert report["file"] == str(markdown_file)
        assert format_report(report, processor, "html") == '<p><em data-markup="*">hi</em></p>'

    def test_process_missing_file(self, tmp_path: Path) -> None:
        """Test reporting of unreadable sources."""
        processor = MarkdownProcessor(RendererConfig())

        report = processor.process(tmp_path / "missing.md")

        assert not report["success"]
        assert "error" in report
        assert format_report(report, processor, "html") is None


class TestMain:
    """Test the command-line entry point."""

    def test_no_command(self, capsys: pytest.CaptureFixture) -> None:
        """Test that help is shown without a command."""
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out

    def test_render_html(self, markdown_file: Path, capsys: pytest.CaptureFixture) -> None:
        """Test HTML output on stdout."""
        assert main(["render", str(markdown_file)]) == 0

        assert capsys.readouterr().out == '<p><em data-markup="*">hi</em></p>\n'

    def test_render_plain(self, markdown_file: Path, capsys: pytest.CaptureFixture) -> None:
        """Test the plain preset flag."""
        assert main(["render", str(markdown_file), "--plain"]) == 0

        assert capsys.readouterr().out == "<p><em>hi</em></p>\n"

    def test_render_json(self, markdown_file: Path, capsys: pytest.CaptureFixture) -> None:
        """Test JSON output."""
        assert main(["render", str(markdown_file), "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["file"] == str(markdown_file)
        assert data["success"] is True
        em = data["tree"][0]["children"][0]
        assert em["tag"] == "em"
        assert em["attributes"] == {"data-markup": "*"}
        assert em["children"] == [{"tag": "#fragment", "children": ["hi"]}]

    def test_render_to_output_file(self, markdown_file: Path, tmp_path: Path) -> None:
        """Test writing output to a file."""
        output = tmp_path / "out.html"

        assert main(["render", str(markdown_file), "-o", str(output)]) == 0

        assert output.read_text(encoding="utf-8") == '<p><em data-markup="*">hi</em></p>\n'

    def test_render_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Test reading markdown from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("# Title\n"))

        assert main(["render", "-"]) == 0

        assert capsys.readouterr().out == "<h1>Title</h1>\n"

    def test_render_failure(
        self, markdown_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """Test that rendering errors give a non-zero exit code."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"inline_container_type": "nope"}), encoding="utf-8")

        assert main(["render", str(markdown_file), "-c", str(config_path)]) == 1

        err = capsys.readouterr().err
        assert "Failed to render" in err
        assert 'unable to determine tag for token type "inline"' in err

    def test_invalid_config(
        self, markdown_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """Test that a broken configuration file exits with an error."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{not json", encoding="utf-8")

        assert main(["render", str(markdown_file), "-c", str(config_path)]) == 1

        assert "Invalid configuration" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that unreadable files are reported."""
        assert main(["render", str(tmp_path / "missing.md")]) == 1

        assert "Failed to render" in capsys.readouterr().err

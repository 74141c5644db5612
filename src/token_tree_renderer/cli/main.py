"""Main CLI entry point for the ``token-tree`` command-line tool.

Renders markdown files through markdown-it-py and the token tree renderer,
writing HTML or a JSON view of the rendered tree.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from token_tree_renderer import __version__
from token_tree_renderer.api.markdown import create_markdown_parser, parse_markdown
from token_tree_renderer.rendering import Renderer, RenderResult
from token_tree_renderer.shared.config import ConfigError, RendererConfig
from token_tree_renderer.shared.logging import get_logger


class MarkdownProcessor:
    """Renders markdown sources with one shared parser and renderer."""

    def __init__(self, config: RendererConfig) -> None:
        self.config = config
        self.md = create_markdown_parser()
        self.renderer = Renderer(config=config)
        self.logger = get_logger(__name__, config.correlation_id, "cli_processor")

    def read_source(self, path: Path) -> str:
        if str(path) == "-":
            return sys.stdin.read()
        return path.read_text(encoding="utf-8")

    def process(self, path: Path) -> Dict[str, Any]:
        """Render one source and return a report dictionary."""
        try:
            text = self.read_source(path)
        except OSError as e:
            self.logger.warning("Could not read source", extra={"file": str(path)})
            return {"file": str(path), "success": False, "error": str(e)}

        result = self.renderer.render_result(parse_markdown(text, self.md))
        report: Dict[str, Any] = {
            "file": str(path),
            "success": result.success,
            "result": result,
        }
        if not result.success:
            report["error"] = str(result.error)
        return report


def load_config(args: argparse.Namespace) -> RendererConfig:
    """Build the renderer configuration from a file and command-line flags.

    The preset selected by ``--plain`` is the base the config file overrides.
    """
    config = RendererConfig.plain() if args.plain else RendererConfig.default()
    if args.config:
        config = RendererConfig.from_json(
            args.config.read_text(encoding="utf-8"), base=config
        )
    if args.no_remap:
        config = config.override(remap_attributes=False)
    return config


def format_report(
    report: Dict[str, Any], processor: MarkdownProcessor, format_type: str
) -> Optional[str]:
    """Format one successful report, or None for failures."""
    result: Optional[RenderResult] = report.get("result")
    if result is None or not result.success:
        return None
    if format_type == "json":
        return json.dumps({"file": report["file"], **result.to_dict()}, indent=2)
    return processor.renderer.node_factory.serialize(result.tree)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="token-tree",
        description="Render markdown token streams into HTML or JSON trees",
    )
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render markdown files")
    render_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Markdown files to render ('-' reads stdin)"
    )
    render_parser.add_argument(
        "--format", "-f",
        choices=["html", "json"],
        default="html",
        help="Output format (default: html)"
    )
    render_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    render_parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Renderer configuration JSON file"
    )
    render_parser.add_argument(
        "--no-remap",
        action="store_true",
        help="Copy token attributes verbatim"
    )
    render_parser.add_argument(
        "--plain",
        action="store_true",
        help="Disable attribute remapping and injected annotations"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def cmd_render(args: argparse.Namespace) -> int:
    """Handle render command."""
    try:
        config = load_config(args)
    except (ConfigError, OSError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    processor = MarkdownProcessor(config)
    outputs: List[str] = []
    failures = 0
    for path in args.paths:
        report = processor.process(path)
        formatted = format_report(report, processor, args.format)
        if formatted is None:
            failures += 1
            print(f"Failed to render {report['file']}: {report['error']}", file=sys.stderr)
            continue
        outputs.append(formatted)

    output_text = "\n".join(outputs)
    if args.output:
        try:
            args.output.write_text(output_text + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    elif outputs:
        print(output_text)

    return 0 if failures == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        if args.command == "render":
            return cmd_render(args)
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())

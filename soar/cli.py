"""
SOAR command line.

    soar analyze ./my-project -o architecture.json
    soar validate architecture.json
    soar show architecture.json --detail module --expand user-service
    soar sample -o sample.json
    soar serve --port 8000
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import requests
import structlog

from soar import config
from soar.analyzer import ANALYSIS_TYPES, AnalysisRequest, ArchitectureAnalyzer
from soar.analyzer.config import PROVIDERS
from soar.logging_config import configure_logging
from soar.query.graph import (
    count_edge_kinds,
    count_node_kinds,
    default_detail_level,
    visible_nodes_with_depth,
)
from soar.sample_data import sample_payload
from soar.schema.consistency import check_references
from soar.schema.errors import AnalysisError, ConfigurationError, ParseError
from soar.schema.kinds import NODE_KIND_STYLE, DetailLevel, depth_ceiling
from soar.schema.models import AnalysisResult, Architecture
from soar.schema.validation import ValidationResult, format_validation_errors, parse_analysis

logger = structlog.get_logger()


class CLIError(Exception):
    """Aborts the current command with exit code 1."""


# ============================
# Helpers
# ============================

def _err(message: str) -> None:
    print(message, file=sys.stderr)


def _load(path: str, architecture_only: bool = False) -> ValidationResult:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CLIError(f"Error reading {path}: {e}") from e
    try:
        return parse_analysis(text, architecture_only=architecture_only)
    except ParseError as e:
        raise CLIError(f"Error parsing {path}: {e}") from e


def _write_json(payload: dict, output: Optional[str]) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if not output:
        print(text)
        return
    try:
        Path(output).write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise CLIError(f"Error writing {output}: {e}") from e
    print(f"Architecture saved to: {output}")


def _format_counts(counts: dict) -> str:
    return ", ".join(f"{kind}={n}" for kind, n in sorted(counts.items())) or "none"


def print_summary(result: AnalysisResult, out=None) -> None:
    architecture = result.architecture
    node_kinds = count_node_kinds(architecture)
    edge_kinds = count_edge_kinds(architecture)

    print("\nSummary:", file=out)
    if result.summary:
        print(f"   {result.summary}", file=out)
    print(f"\n   Nodes: {sum(node_kinds.values())} ({len(architecture.nodes)} top-level)", file=out)
    print(f"   Node kinds: {_format_counts(node_kinds)}", file=out)
    print(f"   Connections: {len(architecture.connections)}", file=out)
    print(f"   Connection kinds: {_format_counts(edge_kinds)}", file=out)

    if result.insights:
        print("\nInsights:", file=out)
        for insight in result.insights:
            print(f"   • {insight}", file=out)

    if result.warnings:
        print("\nWarnings:", file=out)
        for warning in result.warnings:
            print(f"   • {warning}", file=out)


def print_consistency(architecture: Architecture, out=None) -> None:
    report = check_references(architecture)
    if report.is_consistent:
        return
    print("\nReference issues:", file=out)
    for message in report.messages():
        print(f"   • {message}", file=out)


def render_tree(
    architecture: Architecture,
    detail_level,
    expanded_ids: Sequence[str] = (),
) -> List[str]:
    lines = []
    for node, depth in visible_nodes_with_depth(architecture, detail_level, frozenset(expanded_ids)):
        icon = NODE_KIND_STYLE[node.kind]["icon"]
        hidden = ""
        if node.children:
            shown_below = depth < depth_ceiling(detail_level) or node.id in expanded_ids
            if not shown_below:
                hidden = f" [+{len(node.children)}]"
        lines.append(f"{'  ' * (depth - 1)}{icon} {node.name} ({node.kind.value}, {node.id}){hidden}")
    return lines


# ============================
# Commands
# ============================

def cmd_analyze(args) -> int:
    repository_path = str(Path(args.repository).resolve())
    # stdout carries the JSON when no output file is given
    out = None if args.output else sys.stderr
    print(f"\nAnalyzing repository: {repository_path}", file=out)
    print(f"   Type: {args.type}", file=out)
    print(f"   Max depth: {args.depth}\n", file=out)

    try:
        analyzer = ArchitectureAnalyzer(provider=args.provider)
        result = analyzer.analyze(AnalysisRequest(
            repository_path=repository_path,
            analysis_type=args.type,
            max_depth=args.depth,
            include_patterns=args.include or [],
            exclude_patterns=args.exclude or [],
        ))
    except ConfigurationError as e:
        raise CLIError(f"Error: {e}") from e
    except AnalysisError as e:
        message = f"Error analyzing repository: {e}"
        if e.errors:
            message = f"{message}\n{format_validation_errors(e.errors)}"
        raise CLIError(message) from e
    except (ParseError, requests.RequestException) as e:
        raise CLIError(f"Error analyzing repository: {e}") from e

    _write_json(result.to_wire(), args.output)
    print_summary(result, out=out)
    print_consistency(result.architecture, out=out)
    print(file=out)
    return 0


def cmd_validate(args) -> int:
    result = _load(args.file, architecture_only=args.architecture_only)
    if not result.success:
        _err(format_validation_errors(result.errors))
        return 1

    print(f"{args.file}: valid")
    print_summary(result.data)
    print_consistency(result.data.architecture)
    return 0


def cmd_show(args) -> int:
    result = _load(args.file, architecture_only=args.architecture_only)
    if not result.success:
        _err(format_validation_errors(result.errors))
        return 1

    architecture = result.data.architecture
    level = args.detail or default_detail_level(architecture).value
    print(f"{architecture.name} v{architecture.version} [{level}]")
    for line in render_tree(architecture, level, args.expand or []):
        print(line)
    return 0


def cmd_sample(args) -> int:
    _write_json(sample_payload(), args.output)
    return 0


def cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("soar.main:app", host=args.host, port=args.port)
    return 0


# ============================
# Entry point
# ============================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="soar",
        description="SOAR - Software Architecture Analyzer",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Generate an architecture model for a repository")
    analyze.add_argument("repository", help="Path to the repository")
    analyze.add_argument("-o", "--output", help="Output file path (default: stdout)")
    analyze.add_argument("-t", "--type", choices=ANALYSIS_TYPES, default="full", help="Analysis type")
    analyze.add_argument("-d", "--depth", type=int, default=3, help="Maximum directory depth (default: 3)")
    analyze.add_argument("--provider", choices=PROVIDERS, help="Model provider (default: LLM_PROVIDER)")
    analyze.add_argument("--include", action="append", metavar="GLOB", help="Only list files matching GLOB")
    analyze.add_argument("--exclude", action="append", metavar="GLOB", help="Skip paths matching GLOB")
    analyze.set_defaults(func=cmd_analyze)

    validate = sub.add_parser("validate", help="Validate an architecture JSON file")
    validate.add_argument("file")
    validate.add_argument("--architecture-only", action="store_true",
                          help="File holds a bare architecture, not an analysis envelope")
    validate.set_defaults(func=cmd_validate)

    show = sub.add_parser("show", help="Print the visible node tree")
    show.add_argument("file")
    show.add_argument("--detail", choices=[level.value for level in DetailLevel])
    show.add_argument("--expand", action="append", metavar="NODE_ID",
                      help="Expand a node past the detail ceiling (repeatable)")
    show.add_argument("--architecture-only", action="store_true")
    show.set_defaults(func=cmd_show)

    sample = sub.add_parser("sample", help="Write the built-in sample architecture")
    sample.add_argument("-o", "--output")
    sample.set_defaults(func=cmd_sample)

    serve = sub.add_parser("serve", help="Run the viewer HTTP API")
    serve.add_argument("--host", default=config.API_HOST)
    serve.add_argument("--port", type=int, default=config.API_PORT)
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except CLIError as e:
        logger.debug("cli_failed", command=args.command)
        _err(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Command-line entry point for the srcset parser."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

import requests

from .config import DEFAULT_TAGS, DEFAULT_TIMEOUT, ExtractConfig
from .extract import extract_srcsets, fetch_html
from .models import ImageCandidate, SrcsetAttribute
from .parser import parse

logger = logging.getLogger("srcset.cli")


def _ensure_command_prefix(argv: Sequence[str], commands: Iterable[str]) -> Sequence[str]:
    if not argv:
        return argv
    first = argv[0]
    if first in commands or first.startswith("-"):
        return argv
    return ("parse", *argv)


def _split_tags(value: str) -> Tuple[str, ...]:
    tags = tuple(part.strip().lower() for part in value.split(",") if part.strip())
    if not tags:
        raise argparse.ArgumentTypeError("at least one tag name is required")
    return tags


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=("json", "text"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging, including dropped candidates",
    )


def _add_extract_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--tags",
        type=_split_tags,
        default=DEFAULT_TAGS,
        help="Comma-separated element names whose srcset attributes are read",
    )
    _add_common_arguments(parser)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="srcset",
        description="Parse HTML srcset attribute values into image candidates.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse", help="Parse one or more srcset attribute values"
    )
    parse_parser.add_argument("values", nargs="+", help="Raw srcset values")
    _add_common_arguments(parse_parser)

    html_parser = subparsers.add_parser(
        "html", help="Extract and parse srcset attributes from HTML files"
    )
    html_parser.add_argument(
        "paths",
        nargs="+",
        help="HTML files to read; '-' reads standard input",
    )
    _add_extract_arguments(html_parser)

    url_parser = subparsers.add_parser(
        "url", help="Fetch pages and parse their srcset attributes"
    )
    url_parser.add_argument("urls", nargs="+", help="One or more URLs to fetch")
    url_parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Request timeout in seconds",
    )
    _add_extract_arguments(url_parser)

    argv = list(sys.argv[1:] if argv is None else argv)
    argv = list(_ensure_command_prefix(argv, subparsers.choices.keys()))
    return parser.parse_args(argv)


def _format_candidate(candidate: ImageCandidate) -> str:
    parts = [candidate.url]
    if candidate.width is not None:
        parts.append(f"{candidate.width}w")
    if candidate.height is not None:
        parts.append(f"{candidate.height}h")
    if candidate.density is not None:
        parts.append(f"{candidate.density:g}x")
    return " ".join(parts)


def _format_header(result: SrcsetAttribute) -> str:
    parts = []
    if result.source:
        parts.append(result.source)
    if result.tag:
        parts.append(f"<{result.tag}>")
    parts.append(repr(result.value))
    return "# " + " ".join(parts)


def _emit(results: List[SrcsetAttribute], output_format: str) -> None:
    """Write parse results to STDOUT; logging stays on STDERR."""
    if output_format == "json":
        json.dump([result.to_dict() for result in results], sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        for result in results:
            sys.stdout.write(_format_header(result) + "\n")
            for candidate in result.candidates:
                sys.stdout.write(_format_candidate(candidate) + "\n")
    sys.stdout.flush()


def _read_html(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


def _collect(source: str, html: str, config: ExtractConfig) -> List[SrcsetAttribute]:
    attributes = extract_srcsets(html, config)
    logger.info("%s: %d srcset attribute(s)", source, len(attributes))
    for attribute in attributes:
        attribute.source = source
    return attributes


def _run_parse(args: argparse.Namespace) -> int:
    results = [SrcsetAttribute(None, value, parse(value)) for value in args.values]
    _emit(results, args.format)
    return 0


def _run_html(args: argparse.Namespace) -> int:
    config = ExtractConfig(tags=args.tags)
    results: List[SrcsetAttribute] = []
    failures = 0
    for path in args.paths:
        try:
            html = _read_html(path)
        except OSError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            failures += 1
            continue
        results.extend(_collect(path, html, config))
    _emit(results, args.format)
    return 1 if failures else 0


def _run_url(args: argparse.Namespace) -> int:
    config = ExtractConfig(tags=args.tags, timeout=args.timeout)
    results: List[SrcsetAttribute] = []
    failures = 0
    for url in args.urls:
        try:
            html = fetch_html(url, config)
        except requests.RequestException as exc:
            logger.error("Failed to fetch %s: %s", url, exc)
            failures += 1
            continue
        results.extend(_collect(url, html, config))
    _emit(results, args.format)
    return 1 if failures else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    if args.command == "parse":
        return _run_parse(args)
    if args.command == "html":
        return _run_html(args)
    return _run_url(args)


if __name__ == "__main__":
    sys.exit(main())

"""CLI for json-markup."""

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any

from json_markup.domain.errors import JSONMarkupError
from json_markup.domain.models import RenderOptions
from json_markup.engine import JSONMarkup
from json_markup.output.page_builder import PageBuilder

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 1
EXIT_INVALID_JSON = 2
EXIT_RENDER_ERROR = 3


@dataclass
class RenderResult:
    """Result summary of a render operation."""

    output: str
    output_path: str | None


def load_value(path: str) -> Any:
    """Read and parse a JSON document; ``-`` reads stdin."""
    if path == '-':
        return json.load(sys.stdin)
    with open(path, encoding='utf-8') as f:
        return json.load(f)


def render_value(
    value: Any,
    options: RenderOptions,
    output_path: str | None = None,
    page: bool = False,
    title: str = 'JSON',
) -> RenderResult:
    """Render a value to markup, optionally as a full page written to disk."""
    engine = JSONMarkup(value, options)
    if page:
        output = PageBuilder().build(engine, title=title)
    else:
        output = engine.to_html()

    if output_path:
        PageBuilder.write(output, output_path)
        logger.info(f"Wrote {len(output):,} chars to {output_path}")

    return RenderResult(output=output, output_path=output_path)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='json-markup', description='Render JSON as collapsible HTML')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command')

    # render command
    render_parser = subparsers.add_parser('render', help='Render JSON as HTML markup')
    render_parser.add_argument('input', help='Path to JSON file, or - for stdin')
    render_parser.add_argument('-o', '--output', help='Write output to this file instead of stdout')
    render_parser.add_argument('--page', action='store_true', help='Emit a standalone HTML page')
    render_parser.add_argument('--title', default='JSON', help='Page title (with --page)')
    render_parser.add_argument('--max-depth', type=int, default=None, help='Reject deeper nesting')

    # compact / pretty commands
    for name, help_text in (('compact', 'Print compact JSON'), ('pretty', 'Print tab-indented JSON')):
        text_parser = subparsers.add_parser(name, help=help_text)
        text_parser.add_argument('input', help='Path to JSON file, or - for stdin')

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command not in ('render', 'compact', 'pretty'):
        parser.print_help()
        return 0

    if args.input != '-' and not os.path.isfile(args.input):
        print(f"Error: {args.input} not found", file=sys.stderr)
        return EXIT_NOT_FOUND

    try:
        value = load_value(args.input)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        print(f"Error: {args.input} is not valid JSON: {e}", file=sys.stderr)
        return EXIT_INVALID_JSON

    try:
        if args.command == 'render':
            options = RenderOptions(max_depth=args.max_depth)
            result = render_value(value, options, args.output, page=args.page, title=args.title)
            if not result.output_path:
                print(result.output)
        else:
            engine = JSONMarkup(value)
            text = engine.serialize_compact() if args.command == 'compact' else engine.serialize_pretty()
            if text is not None:
                print(text)
    except JSONMarkupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDER_ERROR

    return 0


if __name__ == '__main__':
    sys.exit(main())

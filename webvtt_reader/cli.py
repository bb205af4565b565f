"""
Command-line interface for the WebVTT reader
"""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .config import Config, ConfigError
from .core import Cue, ParseResult, format_seconds
from .errors import ParserError
from .parser import parse
from .services import source as source_svc
from .services.errors import DocumentReadError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAMES = ('webvtt.yml', 'webvtt.yaml')
OUTPUT_FORMATS = ('text', 'json')


def format_cue(cue: Cue) -> str:
    """Render a cue as a timing line followed by its text."""
    start = format_seconds(cue.start) if cue.start is not None else '--'
    end = format_seconds(cue.end) if cue.end is not None else '--'
    return f"{start} --> {end}\n{cue.text}"


def render_result(result: ParseResult, output_format: str = 'text', indent: Optional[int] = 2) -> str:
    """Render a parse result in one of ``OUTPUT_FORMATS``."""
    if output_format == 'json':
        return json.dumps(result.as_dict(), indent=indent, ensure_ascii=False)
    if output_format == 'text':
        return "\n\n".join(format_cue(cue) for cue in result.cues)
    raise ValueError(f"Unsupported output format: {output_format}")


def find_default_config(cwd: Optional[str] = None) -> Optional[str]:
    """Return the first ``webvtt.yml``/``webvtt.yaml`` found in ``cwd``."""
    cwd = cwd or os.getcwd()
    for name in DEFAULT_CONFIG_NAMES:
        candidate = os.path.join(cwd, name)
        if os.path.exists(candidate):
            return candidate
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Parse a WebVTT caption file and print its cues')
    parser.add_argument('input', nargs='?', help='Path to the .vtt file')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--format', dest='output_format', choices=OUTPUT_FORMATS, help='Output format (default: text)')
    parser.add_argument('--indent', type=int, help='JSON indentation (json format only)')
    parser.add_argument('--encoding', type=str, help='Input file encoding (default: utf-8)')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')
    # Single block (documented behavior) or every block
    blocks_group = parser.add_mutually_exclusive_group()
    blocks_group.add_argument('--all-blocks', dest='all_blocks', action='store_true', help='Read every cue block until the end of the file')
    blocks_group.add_argument('--single-block', dest='all_blocks', action='store_false', help='Read only the first cue block')
    parser.set_defaults(all_blocks=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = Config(config_file=args.config or find_default_config())
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    # CLI arguments take precedence
    config.update_from_args({
        'input': args.input,
        'encoding': args.encoding,
        'all_blocks': args.all_blocks,
        'log_level': args.log_level,
        'output': {'format': args.output_format, 'indent': args.indent},
    })

    logging.basicConfig(level=getattr(logging, str(config.get('log_level', 'WARNING')).upper(), logging.WARNING))

    path = config.get('input')
    if not path:
        print("No input file given (pass a path or set 'input' in the configuration)", file=sys.stderr)
        return 2

    try:
        content = source_svc.read_document(path, encoding=config.get('encoding') or 'utf-8')
    except DocumentReadError as e:
        print(f"Cannot read {path}: {e}", file=sys.stderr)
        return 2

    try:
        result = parse(content, all_blocks=bool(config.get('all_blocks', False)))
    except ParserError as e:
        logger.debug("Parse failed: kind=%s line=%d offset=%d", e.kind, e.line, e.offset)
        print(f"{path}: {e.kind}: {e}", file=sys.stderr)
        return 1

    output = config.get('output') or {}
    try:
        rendered = render_result(result, output.get('format', 'text'), output.get('indent', 2))
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if rendered:
        print(rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())

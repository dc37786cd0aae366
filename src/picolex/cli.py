"""Command-line interface for picolex."""

from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import dataclass, replace
from io import StringIO
from pathlib import Path

from picolex.config import CONFIG_FILENAME, load_config, options_from_config
from picolex.debug import dump_tokens, token_records
from picolex.errors import ConfigError
from picolex.lexer import tokenize
from picolex.tokens import Token
from picolex.validators import TokenizerOptions, charset, keywords


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    output_format: str
    tokenizer: TokenizerOptions
    watch: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="picolex",
        description="Split text into classified lexical tokens",
    )
    p.add_argument("input", help="Input file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_FILENAME})",
    )
    p.add_argument(
        "--eof",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Append an EOF token (default: from config, else off)",
    )
    p.add_argument(
        "-i",
        "--instruction",
        action="append",
        default=[],
        metavar="WORD",
        help="Identifier to classify as an instruction (repeatable)",
    )
    p.add_argument(
        "--number-separators",
        metavar="CHARS",
        help="Characters allowed inside numbers (default: .)",
    )
    p.add_argument(
        "--strings",
        metavar="CHARS",
        help='String delimiter characters (default: ")',
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-tokenize")
    return p


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    if input_file is not None and input_file.parent.parts:
        search_dir = input_file.parent
    else:
        search_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)
    tok_options = options_from_config(
        config, path=config_path if config_path is not None else search_dir / CONFIG_FILENAME
    )

    validators = tok_options.validators
    if args.instruction:
        validators = replace(validators, is_instruction=keywords(args.instruction))
    if args.number_separators is not None:
        validators = replace(validators, is_number_separator=charset(args.number_separators))
    if args.strings is not None:
        validators = replace(validators, is_string=charset(args.strings))

    insert_eof = tok_options.insert_eof if args.eof is None else args.eof

    return CliOptions(
        input_file=input_file,
        output_file=Path(args.output) if args.output else None,
        output_format=args.format,
        tokenizer=replace(tok_options, validators=validators, insert_eof=insert_eof),
        watch=args.watch,
    )


def format_tokens(tokens: list[Token], output_format: str) -> str:
    """Render tokens in the requested output format."""
    if output_format == "json":
        return json.dumps(token_records(tokens), ensure_ascii=False, indent=2) + "\n"

    buf = StringIO()
    dump_tokens(tokens, file=buf)
    return buf.getvalue()


def tokenize_file(options: CliOptions) -> str:
    """Read, tokenize, and format the input."""
    if options.input_file is None:
        source = sys.stdin.read()
    else:
        source = options.input_file.read_text(encoding="utf-8")
    tokens = tokenize(source, options.tokenizer)
    return format_tokens(tokens, options.output_format)


def _write(options: CliOptions, output: str) -> None:
    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)
        sys.stdout.flush()


def run_once(options: CliOptions) -> int:
    """Tokenize the input and write the result. Returns 0, or 1 if unreadable."""
    try:
        output = tokenize_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 1
    _write(options, output)
    return 0


def watch_loop(options: CliOptions, path: Path, interval: float = 0.5) -> None:
    """Call run_once() whenever the mtime of *path* changes, until interrupted."""
    last_mtime: float | None = None
    print(f"Watching {path} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = path.stat().st_mtime
            except OSError:
                mtime = last_mtime
            if mtime != last_mtime:
                last_mtime = mtime
                if run_once(options) == 0:
                    print(f"Tokenized {path}", file=sys.stderr)
            time.sleep(interval)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if options.watch:
        if options.input_file is None:
            print("error: --watch needs an input file, not stdin", file=sys.stderr)
            return 2
        watch_loop(options, options.input_file)
        return 0

    return run_once(options)

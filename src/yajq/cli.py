from __future__ import annotations

import argparse
import copy
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console

from . import __version__
from .config import YAJQ_CONFIG, YajqConfig, normalize_log_level
from .errors import YajqError
from .io import read_document, write_result
from .query import evaluate, format_path, tokenize
from .query.paths import describe
from .runtime.logging import configure_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yajq",
        description="Yet another JSON query language: extract a sub-value "
        "from a JSON document with a dotted path such as 'items.*.name'.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        default=None,
        help="dotted path; '*' fans out over arrays (omit to print the whole document)",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=None,
        help="JSON file to read (default: stdin; '-' also means stdin)",
    )
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument(
        "--indent",
        type=_non_negative_int,
        default=None,
        help="spaces per indentation level (0 for compact output)",
    )
    layout.add_argument(
        "-c",
        "--compact",
        action="store_true",
        help="print the result on a single line",
    )
    parser.add_argument(
        "-S",
        "--sort-keys",
        action="store_true",
        default=None,
        help="sort object keys in the output",
    )
    parser.add_argument(
        "--color",
        choices=("auto", "always", "never"),
        default=None,
        help="colorize the output (default: auto)",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        help="diagnostics written to stderr (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    config = _resolve_config(args)
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    configure_logging(config.log_level, console=Console(file=stderr))
    logger = get_logger()

    try:
        document = read_document(args.file, stdin=stdin)
        logger.debug("read %s document from %s", describe(document), args.file or "<stdin>")
        if args.expression is None:
            result = document
        else:
            tokens = tokenize(args.expression)
            logger.debug("expression: %s", format_path(tokens))
            result = evaluate(document, tokens)
    except YajqError as exc:
        logger.debug("query failed: %r", exc)
        stderr.write(f"{exc.category}: {exc}\n")
        return 1

    logger.debug("result type: %s", describe(result))
    write_result(result, config=config, stream=stdout)
    return 0


def _resolve_config(args: argparse.Namespace) -> YajqConfig:
    config = copy.copy(YAJQ_CONFIG)
    if args.compact:
        config.indent = None
    elif args.indent is not None:
        config.indent = args.indent or None
    if args.sort_keys is not None:
        config.sort_keys = args.sort_keys
    if args.color is not None:
        config.color = args.color
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _log_level(raw: str) -> str:
    try:
        return normalize_log_level(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


if __name__ == "__main__":
    sys.exit(main())

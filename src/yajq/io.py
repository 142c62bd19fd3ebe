"""Reading documents and writing query results."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console

from .config import YajqConfig
from .errors import InputError, JsonDecodeError
from .query.paths import JSONValue

STDIN_MARKER = "-"


def read_document(source: Path | None, *, stdin: TextIO | None = None) -> JSONValue:
    """Read and parse a JSON document from ``source``, or stdin when ``None``/``-``."""

    if source is None or str(source) == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        try:
            text = stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f"failed to read stdin: {exc}") from exc
        origin = "<stdin>"
    else:
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f"failed to read {source}: {exc}") from exc
        origin = str(source)

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonDecodeError(f"{origin}: {exc}") from exc


def dumps(value: JSONValue, *, indent: int | None = 2, sort_keys: bool = False) -> str:
    return json.dumps(
        value,
        indent=indent or None,
        sort_keys=sort_keys,
        ensure_ascii=False,
    )


def write_result(value: JSONValue, *, config: YajqConfig, stream: TextIO) -> None:
    if _use_color(config, stream):
        console = Console(file=stream, force_terminal=True)
        console.print_json(
            data=value,
            indent=config.indent or None,
            sort_keys=config.sort_keys,
            ensure_ascii=False,
        )
        return

    stream.write(dumps(value, indent=config.indent, sort_keys=config.sort_keys))
    stream.write("\n")


def _use_color(config: YajqConfig, stream: TextIO) -> bool:
    if config.color == "always":
        return True
    if config.color == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


__all__ = ["STDIN_MARKER", "dumps", "read_document", "write_result"]

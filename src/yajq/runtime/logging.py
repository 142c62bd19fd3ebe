from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import YAJQ_CONFIG, normalize_log_level

LOGGER_NAME = "yajq"

_LEVEL_STYLES = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class _YajqRichConsoleHandler(logging.Handler):
    """Render yajq log records on stderr through a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console if console is not None else Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        text = Text()
        text.append(record.levelname, style=_LEVEL_STYLES.get(record.levelname, ""))
        text.append(" ")
        text.append(record.getMessage())
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self._format_message_text(record)
            text.append(" ")
            text.append(self._format_location(record), style="dim")
            self.console.print(text, soft_wrap=True, highlight=False)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(
    level: str | None = None, *, console: Console | None = None
) -> logging.Logger:
    """Attach the rich console handler to the yajq logger.

    Safe to call repeatedly: an existing handler is reused, only its level
    and (when given) its console change.
    """

    logger = get_logger()
    resolved = normalize_log_level(level if level is not None else YAJQ_CONFIG.log_level)

    handler = next(
        (h for h in logger.handlers if isinstance(h, _YajqRichConsoleHandler)), None
    )
    if handler is None:
        handler = _YajqRichConsoleHandler(console)
        logger.addHandler(handler)
    elif console is not None:
        handler.console = console

    logger.setLevel(resolved)
    logger.propagate = False
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]

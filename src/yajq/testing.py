from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import YAJQ_CONFIG, ColorMode, YajqConfig
from .runtime.logging import get_logger


@dataclass(frozen=True)
class _YajqConfigSnapshot:
    indent: int | None
    sort_keys: bool
    color: ColorMode
    log_level: str

    @classmethod
    def capture(cls) -> "_YajqConfigSnapshot":
        return cls(
            indent=YAJQ_CONFIG.indent,
            sort_keys=YAJQ_CONFIG.sort_keys,
            color=YAJQ_CONFIG.color,
            log_level=YAJQ_CONFIG.log_level,
        )

    def restore(self) -> None:
        YAJQ_CONFIG.indent = self.indent
        YAJQ_CONFIG.sort_keys = self.sort_keys
        YAJQ_CONFIG.color = self.color
        YAJQ_CONFIG.log_level = self.log_level


def _apply_test_config() -> YajqConfig:
    YAJQ_CONFIG.indent = 2
    YAJQ_CONFIG.sort_keys = False
    YAJQ_CONFIG.color = "never"
    YAJQ_CONFIG.log_level = "WARNING"
    return YAJQ_CONFIG


@contextmanager
def yajq_test_env() -> Generator[YajqConfig, None, None]:
    """Run with deterministic config defaults, restoring the previous values."""
    snapshot = _YajqConfigSnapshot.capture()
    logger = get_logger()
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    try:
        yield _apply_test_config()
    finally:
        snapshot.restore()
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate


@pytest.fixture()
def yajq_config() -> Generator[YajqConfig, None, None]:
    """Configure yajq with test defaults for the duration of the test."""
    with yajq_test_env() as config:
        yield config

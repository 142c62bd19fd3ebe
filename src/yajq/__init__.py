"""
yajq: yet another JSON query language.

Extract a sub-value from a JSON document with a dotted path expression such
as ``items.*.name``. This package uses a src-layout. Import it as `yajq`.
"""

from importlib.metadata import version

__version__ = version("yajq")

from .config import YAJQ_CONFIG, YajqConfig
from .errors import (
    FilterError,
    IndexOutOfBoundsError,
    InputError,
    InvalidIndexError,
    JsonDecodeError,
    KeyNotFoundError,
    ScalarDescentError,
    WildcardOnNonArrayError,
    YajqError,
)
from .io import dumps, read_document
from .query import AnyStep, KeyStep, Token, evaluate, format_path, query, tokenize
from .runtime import configure_logging, get_logger

__all__ = [
    "__version__",
    "YAJQ_CONFIG",
    "AnyStep",
    "FilterError",
    "IndexOutOfBoundsError",
    "InputError",
    "InvalidIndexError",
    "JsonDecodeError",
    "KeyNotFoundError",
    "KeyStep",
    "ScalarDescentError",
    "Token",
    "WildcardOnNonArrayError",
    "YajqConfig",
    "YajqError",
    "configure_logging",
    "dumps",
    "evaluate",
    "format_path",
    "get_logger",
    "query",
    "read_document",
    "tokenize",
]

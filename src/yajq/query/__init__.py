from .ast import AnyStep, KeyStep, Token
from .eval import evaluate, query
from .parse import format_path, tokenize
from .paths import JSONScalar, JSONValue

__all__ = [
    "AnyStep",
    "JSONScalar",
    "JSONValue",
    "KeyStep",
    "Token",
    "evaluate",
    "format_path",
    "query",
    "tokenize",
]

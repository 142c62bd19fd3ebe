"""Path evaluator."""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..errors import (
    IndexOutOfBoundsError,
    InvalidIndexError,
    KeyNotFoundError,
    ScalarDescentError,
    WildcardOnNonArrayError,
)
from .ast import AnyStep, KeyStep, Token
from .parse import tokenize
from .paths import JSONValue, is_array, is_object

_INDEX_PATTERN = re.compile(r"\+?[0-9]+")


def evaluate(value: JSONValue, tokens: Sequence[Token]) -> JSONValue:
    """Apply ``tokens`` to ``value`` and return the selected sub-value.

    The result shares structure with ``value``; the evaluator never mutates
    either. Raises a :class:`~yajq.errors.FilterError` subclass on the
    first step that cannot be applied.
    """

    return _evaluate(value, tuple(tokens), 0)


def query(document: JSONValue, expression: str | None) -> JSONValue:
    """Evaluate ``expression`` against ``document``.

    ``None`` means no expression was given and returns the whole document
    unchanged. An empty string is a real expression with a single empty key.
    """

    if expression is None:
        return document
    return evaluate(document, tokenize(expression))


def _evaluate(value: JSONValue, tokens: tuple[Token, ...], position: int) -> JSONValue:
    if position == len(tokens):
        return value

    token = tokens[position]
    if isinstance(token, AnyStep):
        if not is_array(value):
            raise WildcardOnNonArrayError()
        return [_evaluate(element, tokens, position + 1) for element in value]

    if isinstance(token, KeyStep):
        return _evaluate(_lookup(value, token.name), tokens, position + 1)

    raise TypeError(f"unsupported path step {token!r}")


def _lookup(value: JSONValue, name: str) -> JSONValue:
    if is_object(value):
        if name not in value:
            raise KeyNotFoundError(name)
        return value[name]

    if is_array(value):
        try:
            index = _parse_index(name)
        except ValueError as exc:
            raise InvalidIndexError(name, str(exc)) from exc
        if index >= len(value):
            raise IndexOutOfBoundsError(index, len(value))
        return value[index]

    raise ScalarDescentError(name)


def _parse_index(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if _INDEX_PATTERN.fullmatch(text) is None:
        raise ValueError("invalid digit found in string")
    return int(text)


__all__ = ["evaluate", "query"]

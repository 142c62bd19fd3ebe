"""Path expression tokenizer."""

from __future__ import annotations

from collections.abc import Sequence

from .ast import SEPARATOR, WILDCARD, AnyStep, KeyStep, Token


def tokenize(expression: str) -> list[Token]:
    """Split ``expression`` on ``.`` into navigation steps.

    A segment equal to ``*`` becomes an :class:`AnyStep`; every other
    segment, including empty and numeric ones, becomes a :class:`KeyStep`.
    Never fails: ``tokenize("")`` is ``[KeyStep(name="")]``.
    """

    return [_to_step(segment) for segment in expression.split(SEPARATOR)]


def format_path(tokens: Sequence[Token]) -> str:
    """Render ``tokens`` back to expression text."""

    return SEPARATOR.join(
        WILDCARD if isinstance(token, AnyStep) else token.name for token in tokens
    )


def _to_step(segment: str) -> Token:
    if segment == WILDCARD:
        return AnyStep()
    return KeyStep(name=segment)


__all__ = ["format_path", "tokenize"]

"""JSON value aliases shared by the tokenizer and the evaluator."""

from __future__ import annotations

from typing import TypeAlias, TypeGuard

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = (
    JSONScalar | list["JSONValue"] | tuple["JSONValue", ...] | dict[str, "JSONValue"]
)


def is_object(value: JSONValue) -> TypeGuard[dict[str, JSONValue]]:
    return isinstance(value, dict)


def is_array(value: JSONValue) -> TypeGuard[list[JSONValue] | tuple[JSONValue, ...]]:
    return isinstance(value, (list, tuple))


def describe(value: JSONValue) -> str:
    """Return the JSON type name of ``value``."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_array(value):
        return "array"
    return "object"


__all__ = ["JSONScalar", "JSONValue", "describe", "is_array", "is_object"]

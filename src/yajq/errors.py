"""Exception hierarchy for yajq."""

from __future__ import annotations

from typing import ClassVar


class YajqError(Exception):
    """Base class for every error raised by yajq."""

    category: ClassVar[str] = "Error"


class FilterError(YajqError):
    """A path expression could not be applied to the document."""

    category: ClassVar[str] = "Filtering Error"


class KeyNotFoundError(FilterError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key {key} not in dict")


class InvalidIndexError(FilterError):
    """A key step applied to an array is not a non-negative integer."""

    category: ClassVar[str] = "Parsing Error"

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        message = f"invalid array index {text!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class IndexOutOfBoundsError(FilterError):
    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            f"index {index} out of bounds for array of length {length}"
        )


class ScalarDescentError(FilterError):
    """A key step was applied to null, a boolean, a number or a string."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unit can't be filtered for key {key}")


class WildcardOnNonArrayError(FilterError):
    def __init__(self) -> None:
        super().__init__("Can't use * on non array")


class InputError(YajqError):
    """The input document could not be read."""

    category: ClassVar[str] = "IO Error"


class JsonDecodeError(YajqError):
    """The input document is not valid JSON."""

    category: ClassVar[str] = "Json Error"


__all__ = [
    "FilterError",
    "IndexOutOfBoundsError",
    "InputError",
    "InvalidIndexError",
    "JsonDecodeError",
    "KeyNotFoundError",
    "ScalarDescentError",
    "WildcardOnNonArrayError",
    "YajqError",
]

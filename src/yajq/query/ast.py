"""Navigation step models for path expressions."""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field


class _Step(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class AnyStep(_Step):
    """Wildcard step: fans out over every element of an array."""

    kind: Literal["any"] = "any"


class KeyStep(_Step):
    """Named step: an object field, or an array index when numeric."""

    kind: Literal["key"] = "key"
    name: str


Token: TypeAlias = Annotated[AnyStep | KeyStep, Field(discriminator="kind")]

WILDCARD = "*"
SEPARATOR = "."


__all__ = [
    "AnyStep",
    "KeyStep",
    "SEPARATOR",
    "Token",
    "WILDCARD",
]

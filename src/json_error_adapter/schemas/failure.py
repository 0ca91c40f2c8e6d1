"""Parse failure values handed over by a JSON parser."""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import Field

from .base import SchemaBase


class ParseFailureCategory(str, Enum):
    SYNTAX = "syntax"
    EOF = "eof"
    IO = "io"
    DATA = "data"


class ParseFailure(SchemaBase):
    """A tagged parse failure with its source position.

    ``category`` accepts plain strings too, so a parser reporting a category
    this package does not know yet still produces a valid failure value.
    Line and column are 1-based; 0 means the position is unknown.
    """

    category: Union[ParseFailureCategory, str] = Field(..., union_mode="left_to_right")
    line: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)
    description: str = Field(default="")

    @property
    def is_known(self) -> bool:
        return isinstance(self.category, ParseFailureCategory)

"""Converter configuration schema."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field, model_validator

from .base import SchemaBase
from .failure import ParseFailureCategory


class ConverterSettings(SchemaBase):
    """Settings shared by converter instances.

    Attributes:
        line_key: Context key receiving the failure line.
        column_key: Context key receiving the failure column.
        detail_key: Context key receiving the parser's description.
        include_diagnostics: When False, no diagnostic keys are added.
        sort_context_keys: Lexical key order when True, otherwise caller keys
            first (in caller order) followed by diagnostics.
        default_messages: Per-category replacements for the built-in default
            messages.
    """

    line_key: str = Field(default="line", min_length=1)
    column_key: str = Field(default="column", min_length=1)
    detail_key: str = Field(default="detail", min_length=1)
    include_diagnostics: bool = Field(default=True)
    sort_context_keys: bool = Field(default=True)
    default_messages: Dict[ParseFailureCategory, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _distinct_keys(self) -> "ConverterSettings":
        keys = {self.line_key, self.column_key, self.detail_key}
        if len(keys) != 3:
            raise ValueError("line_key, column_key and detail_key must be distinct")
        return self

    def message_for(self, category: ParseFailureCategory) -> Optional[str]:
        return self.default_messages.get(category) or None

"""Uniform tool result envelope."""

from __future__ import annotations

import json
from typing import Any, Union

import mcp.types as types
from pydantic import BaseModel, Field


class ToolResult(BaseModel):
    """What every tool returns: one user-facing text plus optional structured fields.

    ``data`` keys mirror what the assistant host expects next to the text
    (``client``, ``case``, ``documents``, ``question`` ...).
    """

    text: str
    data: dict[str, Any] = Field(default_factory=dict)
    is_error: bool = False

    @classmethod
    def ok(cls, text: str, **data: Any) -> "ToolResult":
        return cls(text=text, data=data)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=True)

    @classmethod
    def json_listing(cls, key: str, value: Any) -> "ToolResult":
        text = json.dumps(value, ensure_ascii=False, indent=2)
        return cls(text=text, data={key: value})

    def to_mcp(self) -> Union[list[types.TextContent], tuple[list[types.TextContent], dict[str, Any]]]:
        content = [types.TextContent(type="text", text=self.text)]
        if not self.data:
            return content
        return (content, self.data)

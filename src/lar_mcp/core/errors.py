"""Adapter error taxonomy.

Network failures are left as ``httpx.HTTPError``; everything below is raised by
the adapter itself.
"""

from __future__ import annotations

from typing import Optional


class LarError(Exception):
    """Base class for adapter errors"""


class ConfigurationError(LarError):
    """Required environment values are missing. Raised before any network call."""


class AuthenticationError(LarError):
    """The backend refused the login or returned an unusable auth payload."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ValidationError(LarError):
    """Caller input the tool refuses to forward. The message is user-facing as is."""


class BackendError(LarError):
    """Non-2xx backend response whose message is already user-facing."""

    def __init__(self, message: str, status: int, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class ToolCallFailed(LarError):
    """A tool finished with an error result.

    Raised only at the MCP boundary: the SDK answers it with ``isError`` set and
    the message as the single text content.
    """

"""Core package for the Legal Assistant RAG adapter

Authentication, backend HTTP access, SSE decoding, edit merging and the tool
error boundary.
"""

from .boundary import tool_boundary
from .errors import (
    AuthenticationError,
    BackendError,
    ConfigurationError,
    LarError,
    ToolCallFailed,
    ValidationError,
)

__all__ = [
    "tool_boundary",
    # Errors
    "AuthenticationError",
    "BackendError",
    "ConfigurationError",
    "LarError",
    "ToolCallFailed",
    "ValidationError",
]

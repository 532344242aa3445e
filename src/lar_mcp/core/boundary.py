"""
Error boundary shared by all tools.

A tool always answers with a ``ToolResult``; failures that were not turned
into a specific message where they happened end up here.
"""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from lar_mcp.core.errors import BackendError, ValidationError
from lar_mcp.models.results import ToolResult
from lar_mcp.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ERROR_PREFIX = "Error en el proceso"

F = TypeVar("F", bound=Callable[..., Awaitable[ToolResult]])


def describe(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


def tool_boundary(prefix: str = DEFAULT_ERROR_PREFIX) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> ToolResult:
            try:
                return await func(*args, **kwargs)
            except (BackendError, ValidationError) as e:
                return ToolResult.error(str(e))
            except Exception as e:
                logger.exception(f"{func.__name__} failed")
                return ToolResult.error(f"{prefix}: {describe(e)}")

        return wrapper  # type: ignore[return-value]

    return decorator

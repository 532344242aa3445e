"""lar_mcp.main

Entrypoint for the Legal Assistant RAG MCP adapter.

MCP_TRANSPORT selects how the tools are served:
- stdio: MCP over stdin/stdout
- http (default): FastAPI app with a stateless streamable-HTTP MCP endpoint
  at /mcp and GET /health
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncIterator
from datetime import datetime, timezone

from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.types import Receive, Scope, Send

from lar_mcp.config.settings import settings
from lar_mcp.mcp import server as mcp_server
from lar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


TRANSPORTS = ("stdio", "http")


class MCPEndpoint:
    """ASGI app forwarding /mcp requests to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


def create_app() -> FastAPI:
    # One manager per app: a StreamableHTTPSessionManager can only be run once.
    session_manager = StreamableHTTPSessionManager(
        app=mcp_server.server,
        event_store=None,
        json_response=False,
        stateless=True,
    )

    @contextlib.asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        async with session_manager.run():
            logger.info("StreamableHTTP session manager ready")
            yield

    app = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "version": settings.service_version,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": {
                "backend_url": settings.api_base_url,
                "credentials": "configured" if settings.credentials_configured else "not_configured",
            },
        }

    app.add_route("/mcp", MCPEndpoint(session_manager), methods=["GET", "POST", "DELETE"])
    return app


def resolve_transport(value: str | None) -> str:
    transport = (value or "http").strip().lower()
    if transport not in TRANSPORTS:
        raise ValueError(f"Unknown MCP_TRANSPORT mode: {value}")
    return transport


def main() -> None:
    transport = resolve_transport(settings.mcp_transport)

    if transport == "stdio":
        logger.info("MCP Server running in stdio mode.")
        mcp_server.main()
        return

    import uvicorn

    logger.info(f"MCP Server HTTP listening on {settings.mcp_http_host}:{settings.mcp_http_port}/mcp")
    uvicorn.run(
        create_app(),
        host=settings.mcp_http_host,
        port=settings.mcp_http_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

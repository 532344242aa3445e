"""
lar-ask: questions about an uploaded document, answered over SSE.
"""

from __future__ import annotations

import anyio

from lar_mcp.config.settings import settings
from lar_mcp.core import auth, backend
from lar_mcp.core.boundary import tool_boundary
from lar_mcp.core.streaming import decode_event_stream
from lar_mcp.models.results import ToolResult
from lar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


ASK_PATH = "/api/chat/ask"
NO_ANSWER = "No se recibió respuesta del servidor."


@tool_boundary()
async def ask(message: str, file_id: int) -> ToolResult:
    token = await auth.login()
    descriptor = backend.json_request(
        "POST",
        ASK_PATH,
        token,
        body={"message": message, "fileId": file_id},
        accept=backend.EVENT_STREAM_MEDIA_TYPE,
    )

    # fail_after(None) never fires: no limit unless ASK_TIMEOUT is set.
    with anyio.fail_after(settings.ask_timeout):
        async with backend.create_client() as client:
            async with client.stream(
                descriptor.method, descriptor.url, **descriptor.request_kwargs()
            ) as response:
                if not response.is_success:
                    await response.aread()
                    return ToolResult.error(
                        f"Error al realizar la consulta: {response.status_code} - {response.text}"
                    )

                answer = await decode_event_stream(response.aiter_bytes())

    logger.info(f"lar-ask fileId={file_id} answered with {len(answer)} chars")
    return ToolResult.ok(answer or NO_ANSWER, question=message, fileId=file_id)

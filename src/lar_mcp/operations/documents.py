"""
Document tools: upload from URL, delete by name, list.
"""

from __future__ import annotations

from typing import Any

import httpx

from lar_mcp.core import auth, backend
from lar_mcp.core.boundary import tool_boundary
from lar_mcp.core.errors import ValidationError
from lar_mcp.models.results import ToolResult
from lar_mcp.utils.dates import utc_now_iso
from lar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


FILES_PATH = "/api/files"
PDF_MAGIC = b"%PDF-"
PDF_MEDIA_TYPE = "application/pdf"

NOT_PDF_TYPE = "Solo se permiten archivos PDF. El archivo descargado no tiene tipo PDF."
NOT_PDF_CONTENT = "Solo se permiten archivos PDF. El archivo descargado no es un PDF válido."
INVALID_URL = "La URL del documento no es válida. Usa una URL http o https."


def _validate_source_url(url: str) -> None:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ValidationError(INVALID_URL) from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ValidationError(INVALID_URL)


async def download_pdf(url: str) -> bytes:
    """
    Fetch a PDF from a public URL.

    Both the Content-Type header and the leading ``%PDF-`` signature must
    identify a PDF. The body is not read when the header already rules it out.
    """
    _validate_source_url(url)

    async with backend.create_client() as client:
        async with client.stream("GET", url) as response:
            content_type = response.headers.get("content-type", "")
            if "pdf" not in content_type.lower():
                raise ValidationError(NOT_PDF_TYPE)
            content = await response.aread()

    if content[: len(PDF_MAGIC)] != PDF_MAGIC:
        raise ValidationError(NOT_PDF_CONTENT)
    return content


def _uploaded_id(result: Any) -> Any:
    if isinstance(result, dict):
        return result.get("Id") or result.get("id") or "desconocido"
    return "desconocido"


@tool_boundary()
async def upload_document(name: str, url: str) -> ToolResult:
    # Credentials first: nothing is downloaded for an unconfigured adapter.
    auth.require_credentials()
    content = await download_pdf(url)
    logger.info(f"Downloaded {len(content)} bytes for document '{name}'")

    token = await auth.login()
    response = await backend.execute(
        backend.form_request(
            FILES_PATH,
            token,
            data={"Name": name, "ScrapedAt": utc_now_iso()},
            files={"File": (name, content, PDF_MEDIA_TYPE)},
        )
    )
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al subir el documento", response))

    result = response.payload
    return ToolResult.ok(
        f"Documento subido correctamente. ID: {_uploaded_id(result)}",
        apiResponse=result,
    )


@tool_boundary()
async def delete_document(name: str) -> ToolResult:
    token = await auth.login()
    response = await backend.execute(
        backend.json_request("DELETE", f"{FILES_PATH}/{backend.quote_segment(name)}", token)
    )

    if response.status == 404:
        return ToolResult.error(f'No se encontró ningún documento con el nombre "{name}".')
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al eliminar el documento", response))

    return ToolResult.ok(f'Documento "{name}" eliminado correctamente.')


@tool_boundary("Error al obtener los documentos")
async def list_documents() -> ToolResult:
    token = await auth.login()
    response = await backend.execute(backend.json_request("GET", FILES_PATH, token))
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al obtener los documentos", response))

    return ToolResult.json_listing("documents", response.payload)

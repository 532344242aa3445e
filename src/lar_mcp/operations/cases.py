"""
Case tools: list, create, delete, edit.

Court dates are checked before any backend call and sent as UTC ISO
timestamps.
"""

from __future__ import annotations

from typing import Any, Optional

from lar_mcp.core import auth, backend
from lar_mcp.core.boundary import tool_boundary
from lar_mcp.core.errors import ValidationError
from lar_mcp.core.merge import CASE_FIELDS, fetch_current, merge_fields
from lar_mcp.models.entities import CaseStatus
from lar_mcp.models.results import ToolResult
from lar_mcp.utils.dates import normalize_iso_date

CASES_PATH = "/api/cases"

INVALID_DATE = (
    "Formato de fecha inválido. Por favor, usa el formato YYYY-MM-DD o YYYY-MM-DDTHH:MM:SS±HH:MM."
)
NO_CASES = "No hay casos disponibles en el sistema."


def _case_path(case_id: int) -> str:
    return f"{CASES_PATH}/{backend.quote_segment(case_id)}"


def parse_court_date(court_date: Optional[str]) -> Optional[str]:
    """Normalized court date, None when not given. Raises ValidationError when unparseable."""
    if not court_date:
        return None
    normalized = normalize_iso_date(court_date)
    if normalized is None:
        raise ValidationError(INVALID_DATE)
    return normalized


@tool_boundary("Error al obtener los casos")
async def list_cases() -> ToolResult:
    token = await auth.login()
    response = await backend.execute(backend.json_request("GET", CASES_PATH, token))
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al obtener los casos", response))

    cases = response.payload
    if not isinstance(cases, list) or not cases:
        return ToolResult.ok(NO_CASES)

    return ToolResult.json_listing("cases", cases)


@tool_boundary()
async def create_case(
    title: str,
    client_id: int,
    description: Optional[str] = None,
    status: str = CaseStatus.open.value,
    court_date: Optional[str] = None,
) -> ToolResult:
    normalized_date = parse_court_date(court_date)
    status = CaseStatus(status or CaseStatus.open.value).value

    token = await auth.login()
    assigned_user_id = await auth.get_user_id()

    body: dict[str, Any] = {
        "title": title,
        "assignedUserId": assigned_user_id,
        "clientId": client_id,
        "status": status,
    }
    if description:
        body["description"] = description
    if normalized_date:
        body["courtDate"] = normalized_date

    response = await backend.execute(backend.json_request("POST", CASES_PATH, token, body=body))
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al crear el caso", response))

    return ToolResult.ok("Caso creado correctamente.", case=response.payload)


@tool_boundary()
async def delete_case(case_id: int) -> ToolResult:
    token = await auth.login()
    response = await backend.execute(backend.json_request("DELETE", _case_path(case_id), token))

    if response.status == 404:
        return ToolResult.error(f"No se encontró ningún caso con el ID {case_id}.")
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al eliminar el caso", response))

    return ToolResult.ok(f"Caso con ID {case_id} eliminado correctamente.")


@tool_boundary()
async def edit_case(
    case_id: int,
    title: Optional[str] = None,
    description: Optional[str] = None,
    status: Optional[str] = None,
    court_date: Optional[str] = None,
    client_id: Optional[int] = None,
    assigned_user_id: Optional[int] = None,
) -> ToolResult:
    normalized_date = parse_court_date(court_date)
    if status:
        status = CaseStatus(status).value

    token = await auth.login()
    path = _case_path(case_id)
    current = await fetch_current(token, path, "Error al obtener el caso para editar")

    body = merge_fields(
        CASE_FIELDS,
        current,
        {
            "title": title,
            "description": description,
            "status": status,
            "clientId": client_id,
        },
    )
    # No fallback to the stored assignee: an edit without one reassigns to the caller.
    body["assignedUserId"] = assigned_user_id or await auth.get_user_id()

    if normalized_date:
        body["courtDate"] = normalized_date
    elif current.get("courtDate"):
        body["courtDate"] = current["courtDate"]

    response = await backend.execute(backend.json_request("PUT", path, token, body=body))
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al actualizar el caso", response))

    return ToolResult.ok(f"Caso con ID {case_id} actualizado correctamente.", case=response.payload)

"""
Client tools: list, create, delete, edit.
"""

from __future__ import annotations

from typing import Any, Optional

from lar_mcp.core import auth, backend
from lar_mcp.core.boundary import tool_boundary
from lar_mcp.core.merge import CLIENT_FIELDS, fetch_current, merge_fields
from lar_mcp.models.results import ToolResult

CLIENTS_PATH = "/api/clients"
USER_CLIENTS_PATH = "/api/clients/user"

HAS_CASES_MARKER = "associated cases"
HAS_CASES_MESSAGE = (
    "No se puede eliminar el cliente porque tiene casos asociados. "
    "Por favor, elimine primero los casos o reasígnelos a otro cliente."
)


def _client_path(client_id: int) -> str:
    return f"{CLIENTS_PATH}/{backend.quote_segment(client_id)}"


@tool_boundary("Error al obtener los clientes")
async def list_clients() -> ToolResult:
    token = await auth.login()
    response = await backend.execute(backend.json_request("GET", USER_CLIENTS_PATH, token))
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al obtener los clientes", response))

    return ToolResult.json_listing("clients", response.payload)


@tool_boundary()
async def create_client(
    name: str,
    contact_information: str,
    address: Optional[str] = None,
    notes: Optional[str] = None,
) -> ToolResult:
    token = await auth.login()
    user_id = await auth.get_user_id()

    body: dict[str, Any] = {
        "idUser": user_id,
        "name": name,
        "contactInformation": contact_information,
    }
    if address:
        body["address"] = address
    if notes:
        body["notes"] = notes

    response = await backend.execute(backend.json_request("POST", CLIENTS_PATH, token, body=body))
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al crear el cliente", response))

    return ToolResult.ok("Cliente creado correctamente.", client=response.payload)


@tool_boundary()
async def delete_client(client_id: int) -> ToolResult:
    token = await auth.login()
    response = await backend.execute(backend.json_request("DELETE", _client_path(client_id), token))

    if response.status == 400 and HAS_CASES_MARKER in response.text:
        return ToolResult.error(HAS_CASES_MESSAGE)
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al eliminar el cliente", response))

    return ToolResult.ok(f"Cliente con ID {client_id} eliminado correctamente.")


@tool_boundary()
async def edit_client(
    client_id: int,
    name: Optional[str] = None,
    contact_information: Optional[str] = None,
    address: Optional[str] = None,
    notes: Optional[str] = None,
) -> ToolResult:
    token = await auth.login()
    path = _client_path(client_id)

    current = await fetch_current(token, path, "Error al obtener el cliente para editar")
    user_id = await auth.get_user_id()

    body: dict[str, Any] = {"idUser": user_id}
    body.update(
        merge_fields(
            CLIENT_FIELDS,
            current,
            {
                "name": name,
                "contactInformation": contact_information,
                "address": address,
                "notes": notes,
            },
        )
    )

    response = await backend.execute(backend.json_request("PUT", path, token, body=body))
    if not response.ok:
        return ToolResult.error(backend.failure_text("Error al actualizar el cliente", response))

    return ToolResult.ok(f"Cliente con ID {client_id} actualizado correctamente.", client=response.payload)

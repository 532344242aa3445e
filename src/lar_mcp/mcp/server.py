"""lar_mcp.mcp.server

MCP (Model Context Protocol) server for the Legal Assistant RAG backend.

Tools:
  - lar-ask
  - lar-upload-document, lar-delete-document, lar-list-documents
  - lar-list-clients, lar-create-client, lar-delete-client, lar-edit-client
  - lar-list-cases, lar-create-case, lar-delete-case, lar-edit-case

Arguments are validated against each tool's inputSchema by the MCP SDK before
``call_tool`` runs. Every tool returns a ToolResult; backend and network
failures become error results, which ``call_tool`` hands to the SDK as
ToolCallFailed so the host sees ``isError`` with the same text.
"""

from __future__ import annotations

from typing import Any

import anyio
import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.stdio import stdio_server

from lar_mcp.config.settings import settings
from lar_mcp.core.errors import ToolCallFailed
from lar_mcp.models.entities import CaseStatus
from lar_mcp.models.results import ToolResult
from lar_mcp.operations import cases, chat, clients, documents
from lar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


SERVER_NAME = "Legal Assistant Rag"


server = Server(
    SERVER_NAME,
    version=settings.service_version,
    instructions=(
        "A legal assistant that can answer questions about your documents and more. "
        "Use lar-list-documents to find a document id before calling lar-ask, "
        "and lar-list-clients / lar-list-cases before editing or deleting."
    ),
)


_POSITIVE_ID = {"type": "integer", "minimum": 1}
_STATUS = {"type": "string", "enum": [s.value for s in CaseStatus]}
_COURT_DATE = {
    "type": "string",
    "description": "Court date in ISO format (YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS±HH:MM).",
}


def _schema(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": required or [],
        "additionalProperties": False,
    }


TOOLS: list[types.Tool] = [
    types.Tool(
        name="lar-ask",
        description="Tool to answer questions about your documents using Legal Assistant RAG.",
        inputSchema=_schema(
            {
                "message": {"type": "string", "description": "The question to ask the legal assistant."},
                "fileId": {**_POSITIVE_ID, "description": "The ID of the document to search in."},
            },
            ["message", "fileId"],
        ),
    ),
    types.Tool(
        name="lar-upload-document",
        description="Tool to upload a PDF document from a URL to Legal Assistant RAG.",
        inputSchema=_schema(
            {
                "name": {"type": "string", "description": "The name to assign to the document."},
                "url": {"type": "string", "format": "uri", "description": "The URL of the PDF to upload."},
            },
            ["name", "url"],
        ),
    ),
    types.Tool(
        name="lar-delete-document",
        description="Tool to delete a document from the Legal Assistant RAG system.",
        inputSchema=_schema(
            {"name": {"type": "string", "description": "The name of the document to delete."}},
            ["name"],
        ),
    ),
    types.Tool(
        name="lar-list-documents",
        description="Tool to list all available documents in Legal Assistant RAG.",
        inputSchema=_schema({}),
    ),
    types.Tool(
        name="lar-list-clients",
        description="Tool to list all available clients in Legal Assistant RAG.",
        inputSchema=_schema({}),
    ),
    types.Tool(
        name="lar-create-client",
        description="Tool to create a new client in the Legal Assistant RAG system.",
        inputSchema=_schema(
            {
                "name": {"type": "string", "description": "The name of the client."},
                "contactInformation": {
                    "type": "string",
                    "description": "Contact information for the client (phone, email, etc.).",
                },
                "address": {"type": "string", "description": "The address of the client (optional)."},
                "notes": {"type": "string", "description": "Additional notes about the client (optional)."},
            },
            ["name", "contactInformation"],
        ),
    ),
    types.Tool(
        name="lar-delete-client",
        description="Tool to delete a client from the system.",
        inputSchema=_schema(
            {"clientId": {**_POSITIVE_ID, "description": "The ID of the client to delete."}},
            ["clientId"],
        ),
    ),
    types.Tool(
        name="lar-edit-client",
        description="Tool to edit an existing client in the system. Omitted fields keep their current value.",
        inputSchema=_schema(
            {
                "clientId": {**_POSITIVE_ID, "description": "The ID of the client to edit."},
                "name": {"type": "string", "description": "The new name of the client."},
                "contactInformation": {"type": "string", "description": "New contact information."},
                "address": {"type": "string", "description": "New address of the client."},
                "notes": {"type": "string", "description": "New additional notes about the client."},
            },
            ["clientId"],
        ),
    ),
    types.Tool(
        name="lar-list-cases",
        description="Tool to list all cases in the Legal Assistant RAG system.",
        inputSchema=_schema({}),
    ),
    types.Tool(
        name="lar-create-case",
        description="Tool to create a new legal case in the system.",
        inputSchema=_schema(
            {
                "title": {"type": "string", "description": "The title of the case."},
                "description": {"type": "string", "description": "Description of the case (optional)."},
                "status": {**_STATUS, "default": CaseStatus.open.value},
                "courtDate": _COURT_DATE,
                "clientId": {**_POSITIVE_ID, "description": "The ID of the client associated with this case."},
            },
            ["title", "clientId"],
        ),
    ),
    types.Tool(
        name="lar-delete-case",
        description="Tool to delete a legal case from the system.",
        inputSchema=_schema(
            {"caseId": {**_POSITIVE_ID, "description": "The ID of the case to delete."}},
            ["caseId"],
        ),
    ),
    types.Tool(
        name="lar-edit-case",
        description="Tool to edit an existing legal case in the system. Omitted fields keep their current value.",
        inputSchema=_schema(
            {
                "caseId": {**_POSITIVE_ID, "description": "The ID of the case to edit."},
                "title": {"type": "string", "description": "The new title of the case."},
                "description": {"type": "string", "description": "New description of the case."},
                "status": _STATUS,
                "courtDate": _COURT_DATE,
                "clientId": {**_POSITIVE_ID, "description": "The ID of the client to associate with this case."},
                "assignedUserId": {
                    **_POSITIVE_ID,
                    "description": "The ID of the user to assign (leave empty to assign to current user).",
                },
            },
            ["caseId"],
        ),
    ),
]


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    return TOOLS


async def dispatch(name: str, args: dict[str, Any]) -> ToolResult:
    if name == "lar-ask":
        return await chat.ask(message=args["message"], file_id=args["fileId"])

    if name == "lar-upload-document":
        return await documents.upload_document(name=args["name"], url=args["url"])

    if name == "lar-delete-document":
        return await documents.delete_document(name=args["name"])

    if name == "lar-list-documents":
        return await documents.list_documents()

    if name == "lar-list-clients":
        return await clients.list_clients()

    if name == "lar-create-client":
        return await clients.create_client(
            name=args["name"],
            contact_information=args["contactInformation"],
            address=args.get("address"),
            notes=args.get("notes"),
        )

    if name == "lar-delete-client":
        return await clients.delete_client(client_id=args["clientId"])

    if name == "lar-edit-client":
        return await clients.edit_client(
            client_id=args["clientId"],
            name=args.get("name"),
            contact_information=args.get("contactInformation"),
            address=args.get("address"),
            notes=args.get("notes"),
        )

    if name == "lar-list-cases":
        return await cases.list_cases()

    if name == "lar-create-case":
        return await cases.create_case(
            title=args["title"],
            client_id=args["clientId"],
            description=args.get("description"),
            status=args.get("status") or CaseStatus.open.value,
            court_date=args.get("courtDate"),
        )

    if name == "lar-delete-case":
        return await cases.delete_case(case_id=args["caseId"])

    if name == "lar-edit-case":
        return await cases.edit_case(
            case_id=args["caseId"],
            title=args.get("title"),
            description=args.get("description"),
            status=args.get("status"),
            court_date=args.get("courtDate"),
            client_id=args.get("clientId"),
            assigned_user_id=args.get("assignedUserId"),
        )

    raise ValueError(f"Unknown tool: {name}")


@server.call_tool()
async def call_tool(name: str, arguments: dict | None):
    args = arguments or {}
    logger.info(f"Tool call: {name}")
    result = await dispatch(name, args)
    if result.is_error:
        raise ToolCallFailed(result.text)
    return result.to_mcp()


def initialization_options():
    return server.create_initialization_options(
        notification_options=NotificationOptions(
            prompts_changed=False,
            resources_changed=False,
            tools_changed=False,
        ),
        experimental_capabilities={},
    )


async def _run() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, initialization_options())


def main() -> None:
    anyio.run(_run)


if __name__ == "__main__":
    main()

"""
Manual smoke check against a running Legal Assistant RAG backend.

Logs in with API_URL / API_EMAIL / API_PASSWORD and runs the read-only tools.
"""
import argparse
import asyncio

from lar_mcp.config.settings import settings
from lar_mcp.operations import cases, chat, clients, documents
from lar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


async def main(file_id: int | None, question: str) -> None:
    if not settings.credentials_configured:
        print("❌ API_URL, API_EMAIL o API_PASSWORD no están configuradas.")
        print("   - Copia .env.example a .env y completa las credenciales.")
        return

    print("=" * 80)
    print(f"Legal Assistant RAG - backend check ({settings.api_base_url})")
    print("=" * 80)

    for title, tool in (
        ("Documentos", documents.list_documents),
        ("Clientes", clients.list_clients),
        ("Casos", cases.list_cases),
    ):
        print(f"\n{title}")
        print("-" * 80)
        result = await tool()
        marker = "❌" if result.is_error else "✅"
        print(f"{marker} {result.text[:1000]}")

    if file_id is not None:
        print(f"\nPregunta sobre el documento {file_id}: {question}")
        print("-" * 80)
        result = await chat.ask(message=question, file_id=file_id)
        print(result.text)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Smoke-check the Legal Assistant RAG backend")
    parser.add_argument("--file-id", type=int, default=None, help="Document id for a lar-ask round trip")
    parser.add_argument("--question", default="Resume el documento.")
    args = parser.parse_args()

    asyncio.run(main(args.file_id, args.question))

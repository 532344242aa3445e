"""MCP server package for the Legal Assistant RAG adapter.

The MCP server lets LLM agents work with the legal backend through tools like:
- lar-ask
- lar-upload-document / lar-list-documents
- lar-create-client / lar-edit-case

Transport:
- stdio
- streamable HTTP (see lar_mcp.main)
"""

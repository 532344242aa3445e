"""
HTTP access to the Legal Assistant RAG backend.

Every tool builds an ``OperationDescriptor`` and runs it through ``execute``.
Bodies are read as text first and parsed as JSON when possible; a body that is
not JSON comes back as ``Raw`` instead of raising.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

import httpx

from lar_mcp.config.settings import settings
from lar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


JSON_MEDIA_TYPE = "application/json"
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"


def create_client() -> httpx.AsyncClient:
    """HTTP client for one tool call. Nothing is pooled across calls."""
    return httpx.AsyncClient(timeout=settings.http_timeout, follow_redirects=True)


def build_url(path: str) -> str:
    return f"{settings.api_base_url}{path}"


def quote_segment(value: Any) -> str:
    """Percent-encode a value interpolated into a URL path"""
    return quote(str(value), safe="")


def bearer_headers(token: str, accept: str = JSON_MEDIA_TYPE) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}", "Accept": accept}


@dataclass(frozen=True)
class Parsed:
    value: Any


@dataclass(frozen=True)
class Raw:
    text: str


Body = Union[Parsed, Raw]


def parse_body(text: str) -> Body:
    try:
        return Parsed(json.loads(text))
    except ValueError:
        return Raw(text)


@dataclass(frozen=True)
class BackendResponse:
    status: int
    text: str
    body: Body

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299

    @property
    def payload(self) -> Any:
        if isinstance(self.body, Parsed):
            return self.body.value
        return {"raw": self.body.text}


@dataclass(frozen=True)
class OperationDescriptor:
    """One backend call: method, path and body shape."""

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    json_body: Optional[Any] = None
    data: Optional[Mapping[str, str]] = None
    files: Optional[Mapping[str, tuple[str, bytes, str]]] = None

    @property
    def url(self) -> str:
        return build_url(self.path)

    def request_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headers": dict(self.headers)}
        if self.json_body is not None:
            kwargs["json"] = self.json_body
        if self.data is not None:
            kwargs["data"] = dict(self.data)
        if self.files is not None:
            kwargs["files"] = dict(self.files)
        return kwargs


def json_request(
    method: str,
    path: str,
    token: str,
    body: Optional[Any] = None,
    accept: str = JSON_MEDIA_TYPE,
) -> OperationDescriptor:
    headers = bearer_headers(token, accept=accept)
    if body is not None:
        headers["Content-Type"] = JSON_MEDIA_TYPE
    return OperationDescriptor(method=method, path=path, headers=headers, json_body=body)


def form_request(
    path: str,
    token: str,
    data: Mapping[str, str],
    files: Mapping[str, tuple[str, bytes, str]],
) -> OperationDescriptor:
    # httpx sets the multipart Content-Type with its boundary.
    return OperationDescriptor(
        method="POST",
        path=path,
        headers={"Authorization": f"Bearer {token}"},
        data=data,
        files=files,
    )


async def execute(descriptor: OperationDescriptor) -> BackendResponse:
    async with create_client() as client:
        response = await client.request(descriptor.method, descriptor.url, **descriptor.request_kwargs())
        text = response.text

    logger.debug(f"{descriptor.method} {descriptor.path} -> {response.status_code}")
    if not 200 <= response.status_code <= 299:
        logger.warning(f"{descriptor.method} {descriptor.path} failed: {response.status_code} {text[:500]}")

    return BackendResponse(status=response.status_code, text=text, body=parse_body(text))


def failure_text(prefix: str, response: BackendResponse) -> str:
    return f"{prefix}: {response.status} - {response.text}"

"""Backend payload models.

Clients, cases and documents are owned by the Legal Assistant RAG backend and
travel through the adapter as plain JSON dicts. Only the auth payloads and the
case status enum are modelled here.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CaseStatus(str, Enum):
    open = "Open"
    closed = "Closed"
    pending = "Pending"


class LoginResponse(BaseModel):
    """Body of POST /api/auth/login"""

    model_config = ConfigDict(extra="ignore")

    token: str = Field(..., min_length=1)
    expiration: Optional[str] = None


class UserIdResponse(BaseModel):
    """Body of GET /api/auth/user-id"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_id: Union[str, int] = Field(..., alias="userId")

    @property
    def value(self) -> str:
        return str(self.user_id)

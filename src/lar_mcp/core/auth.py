"""
Backend authentication.

There is no token cache: every tool call logs in again, and ``get_user_id``
performs its own login before asking for the user id.
"""

from __future__ import annotations

import pydantic

from lar_mcp.config.settings import settings
from lar_mcp.core import backend
from lar_mcp.core.errors import AuthenticationError, ConfigurationError
from lar_mcp.models.entities import LoginResponse, UserIdResponse
from lar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


LOGIN_PATH = "/api/auth/login"
USER_ID_PATH = "/api/auth/user-id"


def require_credentials() -> None:
    """Raise ConfigurationError when the backend account is not configured."""
    if not settings.credentials_configured:
        raise ConfigurationError("Faltan las variables de entorno API_URL, API_EMAIL o API_PASSWORD")


async def login() -> str:
    """Exchange the configured account for a bearer token."""
    require_credentials()

    logger.debug(f"Logging in to {settings.api_base_url} as {settings.api_email}")
    async with backend.create_client() as client:
        response = await client.post(
            backend.build_url(LOGIN_PATH),
            json={"email": settings.api_email, "password": settings.api_password},
        )

    if response.is_error:
        raise AuthenticationError(
            f"Login rechazado por el servidor: {response.status_code}",
            status=response.status_code,
        )

    try:
        return LoginResponse.model_validate_json(response.content).token
    except pydantic.ValidationError as e:
        raise AuthenticationError("Respuesta de login sin token válido", status=response.status_code) from e


async def get_user_id() -> str:
    token = await login()

    async with backend.create_client() as client:
        response = await client.get(
            backend.build_url(USER_ID_PATH),
            headers=backend.bearer_headers(token),
        )

    if response.is_error:
        raise AuthenticationError(
            f"No se pudo obtener el usuario actual: {response.status_code}",
            status=response.status_code,
        )

    try:
        return UserIdResponse.model_validate_json(response.content).value
    except pydantic.ValidationError as e:
        raise AuthenticationError("Respuesta de usuario sin userId", status=response.status_code) from e

"""
Configuration settings for the Legal Assistant RAG MCP adapter
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Service
    service_name: str = "Legal Assistant Rag"
    service_version: str = "1.0.0"
    log_level: str = "INFO"

    # Legal Assistant RAG backend
    api_url: str = Field(
        default="",
        description="Backend base URL, e.g. https://lar.example.com (required for every tool call)",
    )
    api_email: str = Field(default="", description="Account email used for /api/auth/login")
    api_password: str = Field(default="", description="Account password used for /api/auth/login")
    default_api_url: str = "http://localhost:3000"

    # HTTP client
    http_timeout: float = 30.0
    ask_timeout: Optional[float] = Field(
        default=None,
        description="Overall limit in seconds for one lar-ask stream. Unset means no limit.",
    )

    # MCP transport
    mcp_transport: str = "http"  # stdio, http
    mcp_http_host: str = "0.0.0.0"
    mcp_http_port: int = 8080

    @property
    def api_base_url(self) -> str:
        """Base URL used to build backend endpoints"""
        return (self.api_url or self.default_api_url).rstrip("/")

    @property
    def credentials_configured(self) -> bool:
        return bool(self.api_url and self.api_email and self.api_password)


# Global settings instance
settings = Settings()

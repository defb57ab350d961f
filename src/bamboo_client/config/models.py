"""Pydantic models for client configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from bamboo_client.config.constants import DEFAULT_TIMEOUT


class ServerProfile(BaseModel):
    """A named Bamboo server connection profile."""

    name: str
    url: str = Field(description="Server base URL, e.g. https://bamboo.example.com")
    token: str | None = Field(default=None, description="Personal access token")
    username: str | None = Field(default=None, description="Basic auth username")
    password: str | None = Field(default=None, description="Basic auth password")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


class ClientConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    profiles: dict[str, ServerProfile] = Field(default_factory=dict)

"""Typed configuration models for the Proxmox gateway."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ProxmoxConfig(BaseModel):
    """Where the Proxmox API lives and how to reach it."""

    url: str = "https://192.168.1.1:8006"
    # Proxmox ships self-signed certificates; verification stays off unless
    # an operator explicitly turns it on.
    verify_ssl: bool = False
    timeout: float = Field(default=30, gt=0)

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("url must not be empty")
        return value


class AuthConfig(BaseModel):
    """Credential material. Token auth wins over password auth."""

    user: str = "root@pam"
    token_id: str = ""
    token_secret: str = ""
    password: str = ""

    @property
    def mode(self) -> Optional[str]:
        if self.token_id and self.token_secret:
            return "token"
        if self.password:
            return "ticket"
        return None


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


class Config(BaseModel):
    proxmox: ProxmoxConfig = Field(default_factory=ProxmoxConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

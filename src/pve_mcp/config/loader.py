"""
Configuration loading.

Settings come from an optional JSON file (``PROXMOX_MCP_CONFIG`` or an
explicit path) and are then overridden by the ``PROXMOX_*`` environment
variables the server has always honoured.
"""
from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigurationError
from .models import Config

CONFIG_ENV_VAR = "PROXMOX_MCP_CONFIG"

# env var -> (section, field)
ENV_OVERRIDES = {
    "PROXMOX_URL": ("proxmox", "url"),
    "PROXMOX_VERIFY_SSL": ("proxmox", "verify_ssl"),
    "PROXMOX_TIMEOUT": ("proxmox", "timeout"),
    "PROXMOX_USER": ("auth", "user"),
    "PROXMOX_TOKEN_ID": ("auth", "token_id"),
    "PROXMOX_TOKEN_SECRET": ("auth", "token_secret"),
    "PROXMOX_PASSWORD": ("auth", "password"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FILE": ("logging", "file"),
}


def _read_file(config_path: str) -> Dict[str, Any]:
    if not os.path.isfile(config_path):
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a JSON object")
    return data


def load_config(
    config_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Build a validated :class:`Config` from file and environment."""
    env = os.environ if environ is None else environ
    path = config_path or env.get(CONFIG_ENV_VAR)

    data: Dict[str, Any] = _read_file(path) if path else {}
    for var, (section, key) in ENV_OVERRIDES.items():
        value = env.get(var)
        if not value:
            continue
        target = data.setdefault(section, {})
        if not isinstance(target, dict):
            raise ConfigurationError(f"Config section '{section}' must be an object")
        target[key] = value

    try:
        return Config.model_validate(data)
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc

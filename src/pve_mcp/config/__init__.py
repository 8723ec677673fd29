"""Configuration models and loader."""

from .loader import load_config
from .models import AuthConfig, Config, LoggingConfig, ProxmoxConfig

__all__ = ["AuthConfig", "Config", "LoggingConfig", "ProxmoxConfig", "load_config"]

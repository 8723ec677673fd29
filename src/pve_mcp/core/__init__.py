"""Session establishment, HTTP transport and logging setup."""

from .client import PveClient
from .session import SessionContext, establish_session

__all__ = ["PveClient", "SessionContext", "establish_session"]

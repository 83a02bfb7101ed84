from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import BindError


class AuthStatus(str, Enum):
    AUTHENTICATED = "authenticated"
    INVALID_CREDENTIALS = "invalid_credentials"
    ADMIN_REBIND_FAILED = "admin_rebind_failed"


@dataclass
class AuthResult:
    """Outcome of one authentication attempt."""
    status: AuthStatus
    error: BindError | None = None

    @property
    def success(self) -> bool:
        return self.status is AuthStatus.AUTHENTICATED

    @property
    def error_message(self) -> str:
        return self.error.message if self.error else ""

    def __bool__(self) -> bool:
        return self.success

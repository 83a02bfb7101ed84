"""Active Directory bind guard.

Public API:
    - Guard
    - AuthResult, AuthStatus
    - GuardSettings, get_settings
    - LdapConnection
    - authenticate, open_guard
    - errors (GuardError and subclasses)
"""

from .errors import (
    AdminCredentialsError,
    BindError,
    ConfigurationError,
    CredentialsRequiredError,
    GuardError,
    PasswordRequiredError,
    UsernameRequiredError,
)
from .result import AuthResult, AuthStatus
from .guard import Guard
from .settings import GuardSettings, get_settings
from .connection import LdapConnection
from .auth import authenticate, open_guard

__all__ = [
    "AdminCredentialsError",
    "AuthResult",
    "AuthStatus",
    "BindError",
    "ConfigurationError",
    "CredentialsRequiredError",
    "Guard",
    "GuardError",
    "GuardSettings",
    "LdapConnection",
    "PasswordRequiredError",
    "UsernameRequiredError",
    "authenticate",
    "get_settings",
    "open_guard",
]

from __future__ import annotations


class GuardError(Exception):
    """Base class for all errors raised by adguard."""


class CredentialsRequiredError(GuardError, ValueError):
    """Caller passed an empty username or password."""


class UsernameRequiredError(CredentialsRequiredError):
    pass


class PasswordRequiredError(CredentialsRequiredError):
    pass


class BindError(GuardError):
    """A bind was rejected by the directory (or never reached it).

    `code` is the numeric result reported by the connection, -1 when the
    failure happened on the client side.
    """

    def __init__(self, message: str, code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message


class ConfigurationError(GuardError):
    pass


class AdminCredentialsError(ConfigurationError):
    """Administrator username or password is not configured."""

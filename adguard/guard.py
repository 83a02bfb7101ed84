from __future__ import annotations

import logging
import warnings

from .errors import (
    AdminCredentialsError,
    BindError,
    PasswordRequiredError,
    UsernameRequiredError,
)
from .interfaces import DirectoryConnection, GuardConfiguration
from .result import AuthResult, AuthStatus

log = logging.getLogger(__name__)

_SSL_BIND_FAILED = (
    "Bind to Active Directory failed. Either the LDAP SSL connection failed "
    "or the login credentials are incorrect. AD said: {error}"
)
_BIND_FAILED = (
    "Bind to Active Directory failed. Check the login credentials "
    "and/or server details. AD said: {error}"
)


class Guard:
    """Checks user credentials by binding, then rebinds as administrator.

    The guard keeps no state of its own. The connection it is given ends up
    bound as the user, as the administrator, or in an undefined state after
    a failed user bind. It does not lock, so one connection must not be
    shared between concurrent attempts (see `adguard.auth.open_guard`).
    """

    def __init__(self, connection: DirectoryConnection, configuration: GuardConfiguration) -> None:
        self.connection = connection
        self.configuration = configuration

    def authenticate(self, username: str | None, password: str | None, bind_as_user: bool = False) -> AuthResult:
        """Run one authentication and report how it ended.

        Empty credentials raise `UsernameRequiredError`/`PasswordRequiredError`
        before anything is sent to the server. A rejected user bind gives
        INVALID_CREDENTIALS; a rejected administrator rebind gives
        ADMIN_REBIND_FAILED. Missing administrator credentials raise
        `AdminCredentialsError`.
        """
        self._validate_credentials(username, password)

        try:
            self.bind(username, password)
        except BindError as e:
            return AuthResult(status=AuthStatus.INVALID_CREDENTIALS, error=e)

        if not bind_as_user:
            try:
                self.bind_as_administrator()
            except BindError as e:
                log.error("Administrator rebind failed after user %s authenticated: %s", username, e)
                return AuthResult(status=AuthStatus.ADMIN_REBIND_FAILED, error=e)

        log.info("User %s authenticated (bound as %s)", username, "user" if bind_as_user else "administrator")
        return AuthResult(status=AuthStatus.AUTHENTICATED)

    def attempt(self, username: str | None, password: str | None, bind_as_user: bool = False) -> bool:
        """True/False for the user's credentials.

        Only the user bind is reduced to False; a failed administrator
        rebind raises its `BindError` since it means misconfiguration, not a
        wrong password.
        """
        result = self.authenticate(username, password, bind_as_user=bind_as_user)
        if result.status is AuthStatus.ADMIN_REBIND_FAILED:
            raise result.error
        return result.success

    def bind(
        self,
        username: str | None,
        password: str | None,
        prefix: str | None = None,
        suffix: str | None = None,
    ) -> None:
        if not username:
            # Anonymous bind: no DN is built.
            identity = None
        else:
            if prefix is None:
                prefix = self.configuration.get_account_prefix()
            if suffix is None:
                suffix = self.configuration.get_account_suffix()
            identity = f"{prefix}{username}{suffix}"

        secret = password or None

        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            ok = self.connection.bind(identity, secret)

        if ok:
            log.debug("Bind succeeded as %s", identity or "<anonymous>")
            return

        error = self.connection.get_last_error()
        if self.connection.is_using_ssl() and not self.connection.is_using_tls():
            message = _SSL_BIND_FAILED.format(error=error)
        else:
            message = _BIND_FAILED.format(error=error)

        code = self.connection.err_no()
        log.warning("Bind failed as %s (code=%s): %s", identity or "<anonymous>", code, error)
        raise BindError(message, code)

    def bind_as_administrator(self) -> None:
        credentials = tuple(self.configuration.get_admin_credentials() or ())
        username, password, suffix = (credentials + (None, None, None))[:3]

        if not username or not password:
            raise AdminCredentialsError("Administrator username and password must be configured.")

        if not suffix:
            # No admin suffix: fall back to the regular account suffix.
            suffix = self.configuration.get_account_suffix()

        self.bind(username, password, prefix="", suffix=suffix)

    def _validate_credentials(self, username: str | None, password: str | None) -> None:
        if not username:
            raise UsernameRequiredError("A username must be specified.")
        if not password:
            raise PasswordRequiredError("A password must be specified.")

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from .connection import LdapConnection
from .guard import Guard
from .result import AuthResult
from .settings import GuardSettings, get_settings


@contextmanager
def open_guard(settings: GuardSettings | None = None) -> Iterator[Guard]:
    """Guard over a fresh connection, closed on exit.

    One connection per use, so separate threads can authenticate at the
    same time without sharing a bound identity.
    """
    cfg = settings or get_settings()
    conn = LdapConnection(cfg)
    try:
        yield Guard(conn, cfg)
    finally:
        conn.close()


def authenticate(
    username: str,
    password: str,
    settings: GuardSettings | None = None,
    bind_as_user: bool = False,
) -> AuthResult:
    """Authenticate a user against Active Directory on a fresh connection.

    Args:
        username: Account name without prefix/suffix
        password: Password
        settings: Settings; read from the environment when omitted
        bind_as_user: Stay bound as the user, skip the administrator rebind

    Returns:
        AuthResult: Outcome of the attempt
    """
    with open_guard(settings) as guard:
        return guard.authenticate(username, password, bind_as_user=bind_as_user)

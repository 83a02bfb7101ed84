from __future__ import annotations

import pytest

from adguard.guard import Guard


class FakeConnection:
    """Records binds; rejects identities listed in `reject`."""

    def __init__(self, reject=(), ssl=False, tls=False, error="Invalid credentials", errno=49):
        self.reject = set(reject)
        self.ssl = ssl
        self.tls = tls
        self.error = error
        self.errno = errno
        self.binds: list[tuple[str | None, str | None]] = []

    def bind(self, identity, secret):
        self.binds.append((identity, secret))
        return identity not in self.reject

    def get_last_error(self):
        return self.error

    def err_no(self):
        return self.errno

    def is_using_ssl(self):
        return self.ssl

    def is_using_tls(self):
        return self.tls


class FakeConfiguration:
    def __init__(self, prefix="cn=", suffix=",dc=example", admin=("admin", "pw")):
        self.prefix = prefix
        self.suffix = suffix
        self.admin = admin

    def get_account_prefix(self):
        return self.prefix

    def get_account_suffix(self):
        return self.suffix

    def get_admin_credentials(self):
        return self.admin


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def configuration() -> FakeConfiguration:
    return FakeConfiguration()


@pytest.fixture
def guard(connection, configuration) -> Guard:
    return Guard(connection, configuration)


@pytest.fixture
def make_guard():
    """Factory: make_guard(reject=..., ssl=..., admin=...) -> (guard, connection)."""

    def _make(reject=(), ssl=False, tls=False, error="Invalid credentials", errno=49, **config):
        conn = FakeConnection(reject=reject, ssl=ssl, tls=tls, error=error, errno=errno)
        return Guard(conn, FakeConfiguration(**config)), conn

    return _make

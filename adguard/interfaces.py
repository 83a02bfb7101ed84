"""Capabilities the guard depends on.

Both are structural: anything with the right methods works, there is no
base class to inherit from.
"""
from __future__ import annotations

from typing import Protocol


class DirectoryConnection(Protocol):
    def bind(self, identity: str | None, secret: str | None) -> bool: ...

    def get_last_error(self) -> str: ...

    def err_no(self) -> int: ...

    def is_using_ssl(self) -> bool: ...

    def is_using_tls(self) -> bool: ...


class GuardConfiguration(Protocol):
    def get_account_prefix(self) -> str: ...

    def get_account_suffix(self) -> str: ...

    def get_admin_credentials(self) -> tuple[str | None, ...]:
        """(username, password) or (username, password, suffix)."""
        ...

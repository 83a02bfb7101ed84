from __future__ import annotations

import ssl
from typing import Any

from ldap3 import ANONYMOUS, NONE, SIMPLE, SYNC, Connection, Server, Tls
from ldap3.core.exceptions import LDAPException

from .settings import GuardSettings

# Code reported when the failure happened before the server answered.
CLIENT_ERROR = -1


class LdapConnection:
    """Directory connection for the guard, backed by ldap3.

    Holds a single ldap3 connection that is opened on the first bind (with
    StartTLS when configured) and re-bound in place on every later bind.
    """

    def __init__(self, cfg: GuardSettings, client_strategy: str = SYNC) -> None:
        self.cfg = cfg

        tls_kwargs: dict[str, Any] = {
            "validate": ssl.CERT_REQUIRED if cfg.ad_tls_validate else ssl.CERT_NONE,
        }
        # Custom CA only matters when the certificate is validated.
        if cfg.ad_tls_validate and cfg.ad_ca_cert_file:
            tls_kwargs["ca_certs_file"] = cfg.ad_ca_cert_file

        self.server = Server(
            host=cfg.host,
            port=cfg.ad_port,
            use_ssl=cfg.ad_use_ssl,
            get_info=NONE,
            tls=Tls(**tls_kwargs),
            connect_timeout=float(cfg.ad_timeout_s),
        )
        self.connection = Connection(
            self.server,
            auto_bind=False,
            client_strategy=client_strategy,
            receive_timeout=float(cfg.ad_timeout_s),
        )
        self._tls_started = False
        self._last_error = ""
        self._errno = 0

    def _open(self) -> None:
        # New socket, TLS has to be negotiated again.
        self._tls_started = False
        self.connection.open()
        if not self.cfg.ad_use_tls:
            return

        try:
            started = self.connection.start_tls()
        except LDAPException as e:
            self.close()
            raise LDAPException(f"StartTLS failed: {e}") from e
        if not started:
            reason = self.connection.last_error or self._describe(self.connection.result)
            self.close()
            raise LDAPException(f"StartTLS failed: {reason}")
        self._tls_started = True

    @staticmethod
    def _describe(result: dict | None) -> str:
        res = dict(result or {})
        desc = str(res.get("description") or "")
        msg = str(res.get("message") or "")
        if desc and msg and msg != desc:
            return f"{desc} ({msg})"
        return desc or msg or "unknown error"

    def bind(self, identity: str | None, secret: str | None) -> bool:
        self._last_error = ""
        self._errno = 0

        conn = self.connection
        try:
            if self.cfg.ad_use_tls and not self._tls_started and not conn.closed:
                # Never send credentials over a socket without StartTLS.
                self.close()
            if conn.closed:
                self._open()
            conn.user = identity
            conn.password = secret
            conn.authentication = SIMPLE if identity else ANONYMOUS
            ok = bool(conn.bind())
        except LDAPException as e:
            self._last_error = str(e) or e.__class__.__name__
            self._errno = CLIENT_ERROR
            return False

        if not ok:
            res = dict(conn.result or {})
            code = res.get("result")
            self._errno = int(code) if code is not None else CLIENT_ERROR
            self._last_error = self._describe(res)
        return ok

    def get_last_error(self) -> str:
        return self._last_error

    def err_no(self) -> int:
        return self._errno

    def is_using_ssl(self) -> bool:
        return bool(self.cfg.ad_use_ssl)

    def is_using_tls(self) -> bool:
        return bool(self.cfg.ad_use_tls)

    def close(self) -> None:
        try:
            if not self.connection.closed:
                self.connection.unbind()
        except LDAPException:
            pass
        self._tls_started = False

    def __enter__(self) -> "LdapConnection":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

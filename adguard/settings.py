from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

from .ad_utils import build_dc_fqdn, upn_suffix


class GuardSettings(BaseSettings):
    """Directory connection and account naming settings.

    Also serves as the guard's configuration provider.
    """

    # Server
    ad_dc: str = Field("", alias="AD_DC")
    ad_domain: str = Field("", alias="AD_DOMAIN")
    ad_port: int = Field(636, alias="AD_PORT")
    ad_use_ssl: bool = Field(True, alias="AD_USE_SSL")
    ad_use_tls: bool = Field(False, alias="AD_USE_TLS")  # StartTLS
    ad_tls_validate: bool = Field(False, alias="AD_TLS_VALIDATE")
    ad_ca_cert_file: str = Field("", alias="AD_CA_CERT_FILE")
    ad_timeout_s: float = Field(5.0, alias="AD_TIMEOUT_S")

    # Account naming
    ad_account_prefix: str = Field("", alias="AD_ACCOUNT_PREFIX")
    ad_account_suffix: str = Field("", alias="AD_ACCOUNT_SUFFIX")

    # Administrator
    ad_admin_username: str = Field("", alias="AD_ADMIN_USERNAME")
    ad_admin_password: str = Field("", alias="AD_ADMIN_PASSWORD")
    ad_admin_account_suffix: str = Field("", alias="AD_ADMIN_ACCOUNT_SUFFIX")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    class Config:
        populate_by_name = True

    @field_validator(
        "ad_dc",
        "ad_domain",
        "ad_ca_cert_file",
        "ad_account_prefix",
        "ad_account_suffix",
        "ad_admin_username",
        "ad_admin_account_suffix",
    )
    @classmethod
    def _strip(cls, v: str) -> str:
        return (v or "").strip()

    @field_validator("ad_port")
    @classmethod
    def _validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError(f"Invalid port: {v} (must be 1-65535).")
        return v

    @model_validator(mode="after")
    def _check_transport(self) -> "GuardSettings":
        if self.ad_use_ssl and self.ad_use_tls:
            raise ValueError("AD_USE_SSL and AD_USE_TLS are mutually exclusive (LDAPS or StartTLS).")
        return self

    @property
    def host(self) -> str:
        return build_dc_fqdn(self.ad_dc, self.ad_domain)

    def get_account_prefix(self) -> str:
        return self.ad_account_prefix

    def get_account_suffix(self) -> str:
        return self.ad_account_suffix or upn_suffix(self.ad_domain)

    def get_admin_credentials(self) -> tuple[str, ...]:
        creds = (self.ad_admin_username, self.ad_admin_password)
        if self.ad_admin_account_suffix:
            return creds + (self.ad_admin_account_suffix,)
        return creds


@lru_cache(maxsize=1)
def get_settings() -> GuardSettings:
    return GuardSettings()

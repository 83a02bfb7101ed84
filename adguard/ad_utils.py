from __future__ import annotations

import ipaddress


def build_dc_fqdn(dc_short: str, domain: str) -> str:
    dc_short = (dc_short or "").strip()
    domain = (domain or "").strip().strip(".")
    if not dc_short:
        return domain

    # IP addresses are used as-is
    try:
        ipaddress.ip_address(dc_short)
        return dc_short
    except ValueError:
        pass

    if "." in dc_short:
        return dc_short
    return f"{dc_short}.{domain}" if domain else dc_short


def upn_suffix(domain: str) -> str:
    """'corp.example.com' -> '@corp.example.com' (empty for an empty domain)."""
    d = (domain or "").strip().strip(".")
    return f"@{d}" if d else ""

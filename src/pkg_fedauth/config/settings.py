from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain.constants import JDBC_FEDAUTH_CLIENT_ID


@dataclass(slots=True)
class FedAuthSettings:
    """
    Token acquisition settings.

    Host code decides how to construct this (env, config file, etc.).
    """
    client_id: str = JDBC_FEDAUTH_CLIENT_ID

    # Bound on the wait for the provider; None waits indefinitely
    timeout_seconds: Optional[float] = None

    # HTTP behaviour of the provider client
    http_timeout_seconds: float = 30.0
    verify_ssl: bool = True
    validate_authority: bool = True

    # Kerberos configuration used for integrated authentication
    krb5_config_path: Optional[str] = None

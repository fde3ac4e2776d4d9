from __future__ import annotations

import os
from typing import Optional

from ..domain.constants import JDBC_FEDAUTH_CLIENT_ID
from .settings import FedAuthSettings


def settings_from_env() -> FedAuthSettings:
    def _bool(key: str, default: bool = True) -> bool:
        raw = os.getenv(key)
        if raw is None:
            return default
        return str(raw).strip().lower() in {"1", "true", "yes", "on"}

    def _seconds(key: str, default: Optional[float]) -> Optional[float]:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            raise RuntimeError(f"{key} must be a number of seconds, got {raw!r}") from None
        if value <= 0:
            raise RuntimeError(f"{key} must be positive, got {raw!r}")
        return value

    return FedAuthSettings(
        client_id=(os.getenv("FEDAUTH_CLIENT_ID") or "").strip() or JDBC_FEDAUTH_CLIENT_ID,
        timeout_seconds=_seconds("FEDAUTH_TIMEOUT_SECONDS", None),
        http_timeout_seconds=_seconds("FEDAUTH_HTTP_TIMEOUT_SECONDS", 30.0),
        verify_ssl=_bool("VERIFY_SSL", True),
        validate_authority=_bool("FEDAUTH_VALIDATE_AUTHORITY", True),
        krb5_config_path=os.getenv("KRB5_CONFIG_PATH") or None,
    )

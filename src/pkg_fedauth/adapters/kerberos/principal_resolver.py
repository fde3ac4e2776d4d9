from __future__ import annotations

import getpass
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ...domain.messages import format_message
from ...domain.ports import PrincipalResolver
from ...domain.value_objects import KerberosPrincipal, RealmName

logger = logging.getLogger(__name__)

DEFAULT_KRB5_CONFIG = "/etc/krb5.conf"


class Krb5PrincipalResolver(PrincipalResolver):
    """
    Adapter implementing PrincipalResolver port from the local Kerberos setup.

    The realm comes from USERDNSDOMAIN on Windows hosts joined to a domain,
    otherwise from `default_realm` in the [libdefaults] section of the
    Kerberos configuration.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        username_provider: Callable[[], str] = getpass.getuser,
    ) -> None:
        self._config_path = config_path
        self._username_provider = username_provider

    def resolve(self) -> KerberosPrincipal:
        realm = self._default_realm()
        try:
            user = self._username_provider()
        except KeyError as exc:
            # getpass.getuser() before 3.13, uid without a passwd entry
            raise OSError(f"Cannot determine the current user: {exc}") from exc
        return KerberosPrincipal.for_user(user, realm)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _default_realm(self) -> RealmName:
        if sys.platform == "win32":
            domain = os.environ.get("USERDNSDOMAIN", "").strip()
            if domain:
                return RealmName(domain.upper())

        for path in self._candidate_paths():
            if not path.is_file():
                continue
            realm = _read_default_realm(path.read_text(encoding="utf-8", errors="replace").splitlines())
            if realm:
                logger.debug("default realm found in %s", path)
                return RealmName(realm)

        raise OSError(format_message("R_KerberosRealmNotFound"))

    def _candidate_paths(self) -> List[Path]:
        if self._config_path:
            # explicitly configured file must exist
            path = Path(self._config_path)
            if not path.is_file():
                raise FileNotFoundError(f"Kerberos configuration not found: {path}")
            return [path]

        paths = [Path(p) for p in os.environ.get("KRB5_CONFIG", "").split(os.pathsep) if p.strip()]
        paths.append(Path(DEFAULT_KRB5_CONFIG))
        return paths


def _read_default_realm(lines: Iterable[str]) -> Optional[str]:
    """
    Return `default_realm` from the [libdefaults] section, if set.
    """
    section = None
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith(("#", ";")):
            continue
        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1].strip().lower()
            continue
        if section != "libdefaults" or "=" not in line:
            continue

        key, _, value = line.partition("=")
        if key.strip() == "default_realm" and value.strip():
            return value.strip()
    return None

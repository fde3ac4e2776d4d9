# src/pkg_fedauth/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .constants import DEFAULT_SCOPE_SUFFIX


def resolve_scope(spn: str) -> str:
    """
    Derive the authorization scope for a service principal name.

    The default-scope suffix is appended unless it is already there, so
    applying this twice gives the same result.
    """
    return spn if spn.endswith(DEFAULT_SCOPE_SUFFIX) else spn + DEFAULT_SCOPE_SUFFIX


# --- Federation info -------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FedAuthInfo:
    """
    Authority and resource as announced by the server during login.

    - sts_url: identity-provider authority URL
    - spn:     service principal name of the database resource
    """
    sts_url: str
    spn: str

    @property
    def scope(self) -> str:
        return resolve_scope(self.spn)


# --- Credentials -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class UsernamePasswordCredential:
    username: str
    password: str = field(repr=False)

    @property
    def identity(self) -> str:
        return self.username


@dataclass(frozen=True, slots=True)
class ClientSecretCredential:
    client_id: str
    client_secret: str = field(repr=False)

    @property
    def identity(self) -> str:
        return self.client_id


@dataclass(frozen=True, slots=True)
class IntegratedWindowsCredential:
    """
    Credential of the current OS principal.

    `principal_name` stays None until the principal has been resolved.
    """
    principal_name: Optional[str] = None

    @property
    def identity(self) -> str:
        # the principal is not known to the caller, error messages leave it blank
        return ""


Credential = Union[UsernamePasswordCredential, ClientSecretCredential, IntegratedWindowsCredential]


# --- Kerberos ----------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RealmName:
    """
    Represents a Kerberos realm, e.g. ``CORP.EXAMPLE.COM``.
    """
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Realm name must not be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class KerberosPrincipal:
    """
    Realm-qualified principal (``user@REALM``).
    """
    name: str
    realm: RealmName

    @classmethod
    def for_user(cls, user: str, realm: RealmName) -> "KerberosPrincipal":
        return cls(name=f"{user}@{realm}", realm=realm)

    def __str__(self) -> str:
        return self.name

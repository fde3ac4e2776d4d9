from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from .value_objects import Credential


@dataclass(frozen=True, slots=True)
class TokenRequest:
    """
    Everything the identity provider needs for one acquisition.
    """
    authority: str
    scopes: Tuple[str, ...]
    credential: Credential


@dataclass(frozen=True, slots=True)
class AuthenticationResult:
    """
    Successful outcome reported by the identity provider.
    """
    access_token: str = field(repr=False)
    expires_on: datetime


@dataclass(frozen=True, slots=True)
class FedAuthToken:
    """
    Bearer token handed back to the driver, with its absolute expiry.
    """
    access_token: str = field(repr=False)
    expires_on: datetime

    @classmethod
    def from_result(cls, result: AuthenticationResult) -> "FedAuthToken":
        return cls(access_token=result.access_token, expires_on=result.expires_on)

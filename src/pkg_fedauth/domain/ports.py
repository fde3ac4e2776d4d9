from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Protocol

from .entities import AuthenticationResult, TokenRequest
from .value_objects import KerberosPrincipal


class IdentityProvider(Protocol):
    """
    Port for acquiring tokens from an identity provider.

    Implementations live in the adapters layer (e.g. the MSAL provider).
    """

    def acquire_token(self, request: TokenRequest, executor: Executor) -> Future[AuthenticationResult]:
        """
        Start an acquisition on `executor` and return its future.

        Should:
          - validate the authority before submitting anything
          - complete the future with IdentityProviderError when the
            provider reports a failure
        Raises:
          - FedAuthConfigurationError
        """
        ...


class PrincipalResolver(Protocol):
    """
    Port for finding the Kerberos principal of the current OS user.
    """

    def resolve(self) -> KerberosPrincipal:
        """
        Raises:
          - OSError when the realm cannot be determined
        """
        ...

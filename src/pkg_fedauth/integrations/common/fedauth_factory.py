from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ...adapters.kerberos.principal_resolver import Krb5PrincipalResolver
from ...adapters.msal.token_provider import MsalTokenProvider
from ...application.use_cases.acquire_token import AcquireTokenUseCase
from ...config.env import settings_from_env
from ...config.settings import FedAuthSettings
from ...domain.constants import AuthenticationMode
from ...domain.entities import FedAuthToken
from ...domain.value_objects import (
    ClientSecretCredential,
    FedAuthInfo,
    IntegratedWindowsCredential,
    UsernamePasswordCredential,
)

Mode = Union[AuthenticationMode, str]


@dataclass(slots=True)
class FedAuthDependencies:
    """
    Framework-agnostic token acquisition facade.

    The driver's login code calls one entry point per authentication mode
    once the server has announced its federation info.
    """

    acquire_use_case: AcquireTokenUseCase

    def get_token(
            self,
            fed_auth_info: FedAuthInfo,
            user: str,
            password: str,
            authentication_mode: Mode = AuthenticationMode.PASSWORD,
    ) -> FedAuthToken:
        """Username/password (resource owner) flow."""
        return self.acquire_use_case.execute(
            fed_auth_info,
            UsernamePasswordCredential(username=user, password=password),
            authentication_mode,
        )

    def get_token_principal(
            self,
            fed_auth_info: FedAuthInfo,
            principal_id: str,
            principal_secret: str,
            authentication_mode: Mode = AuthenticationMode.SERVICE_PRINCIPAL,
    ) -> FedAuthToken:
        """Client credential flow for a service principal."""
        return self.acquire_use_case.execute(
            fed_auth_info,
            ClientSecretCredential(client_id=principal_id, client_secret=principal_secret),
            authentication_mode,
        )

    def get_token_integrated(
            self,
            fed_auth_info: FedAuthInfo,
            authentication_mode: Mode = AuthenticationMode.INTEGRATED,
    ) -> FedAuthToken:
        """Integrated flow for the current OS principal."""
        return self.acquire_use_case.execute(
            fed_auth_info,
            IntegratedWindowsCredential(),
            authentication_mode,
        )


def create_fedauth_from_settings(settings: FedAuthSettings) -> FedAuthDependencies:
    """
    High-level factory: settings -> FedAuthDependencies.

    - builds the MSAL token provider and the Kerberos principal resolver
    - wires AcquireTokenUseCase
    - returns a FedAuthDependencies facade.
    """
    provider = MsalTokenProvider(
        settings.client_id,
        verify_ssl=settings.verify_ssl,
        http_timeout_seconds=settings.http_timeout_seconds,
        validate_authority=settings.validate_authority,
    )
    resolver = Krb5PrincipalResolver(config_path=settings.krb5_config_path)

    acquire_uc = AcquireTokenUseCase(
        provider=provider,
        principal_resolver=resolver,
        timeout=settings.timeout_seconds,
    )
    return FedAuthDependencies(acquire_use_case=acquire_uc)


def create_fedauth_from_env() -> FedAuthDependencies:
    """Convenience wrapper using env-configured settings."""
    return create_fedauth_from_settings(settings_from_env())

"""
pkg_fedauth

Federated authentication token acquisition for database drivers:
password, service principal and integrated (Kerberos) flows against
Microsoft Entra ID, with provider failures normalized into FedAuthError.
"""

__version__ = "0.1.0"

from .domain.constants import AuthenticationMode, DEFAULT_SCOPE_SUFFIX, JDBC_FEDAUTH_CLIENT_ID
from .domain.entities import AuthenticationResult, FedAuthToken, TokenRequest
from .domain.exceptions import (
    FedAuthError,
    FedAuthConfigurationError,
    FedAuthInterruptedError,
    ProviderRejectedError,
    AcquisitionExecutionError,
    IdentityProviderError,
)
from .domain.value_objects import (
    FedAuthInfo,
    UsernamePasswordCredential,
    ClientSecretCredential,
    IntegratedWindowsCredential,
    Credential,
    KerberosPrincipal,
    RealmName,
    resolve_scope,
)
from .domain.ports import IdentityProvider, PrincipalResolver

from .application.use_cases.acquire_token import AcquireTokenUseCase
from .application.use_cases.normalize_error import correct_execution_error

from .config import FedAuthSettings, settings_from_env

# MSAL / Kerberos adapters
from .adapters.msal.token_provider import MsalTokenProvider
from .adapters.kerberos.principal_resolver import Krb5PrincipalResolver

from .integrations.common.fedauth_factory import (
    FedAuthDependencies,
    create_fedauth_from_settings,
    create_fedauth_from_env,
)

__all__ = [
    "__version__",
    # domain core
    "AuthenticationMode",
    "DEFAULT_SCOPE_SUFFIX",
    "JDBC_FEDAUTH_CLIENT_ID",
    "AuthenticationResult",
    "FedAuthToken",
    "TokenRequest",
    "FedAuthInfo",
    "UsernamePasswordCredential",
    "ClientSecretCredential",
    "IntegratedWindowsCredential",
    "Credential",
    "KerberosPrincipal",
    "RealmName",
    "resolve_scope",
    "IdentityProvider",
    "PrincipalResolver",
    # exceptions
    "FedAuthError",
    "FedAuthConfigurationError",
    "FedAuthInterruptedError",
    "ProviderRejectedError",
    "AcquisitionExecutionError",
    "IdentityProviderError",
    # use cases
    "AcquireTokenUseCase",
    "correct_execution_error",
    # config
    "FedAuthSettings",
    "settings_from_env",
    # adapters
    "MsalTokenProvider",
    "Krb5PrincipalResolver",
    # entry points
    "FedAuthDependencies",
    "create_fedauth_from_settings",
    "create_fedauth_from_env",
]

import logging
import sys
from concurrent.futures import Executor, Future
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Mapping, Optional, Union
from urllib.parse import urlparse

import jwt
import msal
from jwt.exceptions import DecodeError
from requests import Session

from ...domain.constants import JDBC_FEDAUTH_CLIENT_ID
from ...domain.entities import AuthenticationResult, TokenRequest
from ...domain.exceptions import FedAuthConfigurationError, IdentityProviderError
from ...domain.messages import format_message
from ...domain.ports import IdentityProvider
from ...domain.value_objects import (
    ClientSecretCredential,
    IntegratedWindowsCredential,
    UsernamePasswordCredential,
)

logger = logging.getLogger(__name__)


class TimeoutSession(Session):
    """
    requests Session applying a default timeout to every request.

    MSAL only sets a timeout on sessions it creates itself.
    """

    def __init__(self, timeout: float) -> None:
        super().__init__()
        self.timeout = timeout

    def request(self, method: Union[str, bytes], url: Union[str, bytes], **kwargs: Any):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


class MsalTokenProvider(IdentityProvider):
    """
    Adapter implementing IdentityProvider port using MSAL for Python.

    Infrastructure layer:
    - Knows which MSAL application and call serve each credential type.
    - Knows how MSAL reports errors and token lifetimes.
    """

    def __init__(
        self,
        client_id: str = JDBC_FEDAUTH_CLIENT_ID,
        *,
        verify_ssl: bool = True,
        http_timeout_seconds: float = 30.0,
        validate_authority: bool = True,
        session_factory: Callable[[float], Session] = TimeoutSession,
    ) -> None:
        self._client_id = client_id
        self._verify_ssl = verify_ssl
        self._http_timeout = http_timeout_seconds
        self._validate_authority = validate_authority
        self._session_factory = session_factory

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def acquire_token(self, request: TokenRequest, executor: Executor) -> "Future[AuthenticationResult]":
        """
        Submit the acquisition to `executor`.

        Raises:
            FedAuthConfigurationError when the authority is not a valid URL
        """
        try:
            _check_authority(request.authority)
        except ValueError as exc:
            raise FedAuthConfigurationError(str(exc), cause=exc) from exc

        return executor.submit(self._acquire, request)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _acquire(self, request: TokenRequest) -> AuthenticationResult:
        logger.debug("Requesting token from %s for scopes %s", request.authority, request.scopes)
        requested_at = datetime.now(timezone.utc)

        session = self._new_session()
        try:
            response = self._call_msal(request, session)
        finally:
            session.close()

        if not response or "access_token" not in response:
            raise _provider_error(response or {})

        return AuthenticationResult(
            access_token=response["access_token"],
            expires_on=_expires_on(response, requested_at),
        )

    def _new_session(self) -> Session:
        session = self._session_factory(self._http_timeout)
        session.verify = self._verify_ssl
        return session

    def _call_msal(self, request: TokenRequest, session: Session) -> Optional[Mapping[str, Any]]:
        credential = request.credential
        scopes = list(request.scopes)

        if isinstance(credential, ClientSecretCredential):
            app = msal.ConfidentialClientApplication(
                credential.client_id,
                client_credential=credential.client_secret,
                authority=request.authority,
                validate_authority=self._validate_authority,
                http_client=session,
            )
            return app.acquire_token_for_client(scopes=scopes)

        if isinstance(credential, UsernamePasswordCredential):
            app = self._public_app(request.authority, session)
            return app.acquire_token_by_username_password(
                credential.username,
                credential.password,
                scopes=scopes,
            )

        if isinstance(credential, IntegratedWindowsCredential):
            if sys.platform != "win32":
                return _integrated_unavailable()
            app = self._public_app(request.authority, session, enable_broker_on_windows=True)
            # MSAL turns the broker off for ADFS/B2C authorities or when it fails
            # to initialize; without it the call below would open a browser.
            if not app.is_pop_supported():
                return _integrated_unavailable()
            return app.acquire_token_interactive(
                scopes,
                prompt="none",
                login_hint=credential.principal_name,
                parent_window_handle=app.CONSOLE_WINDOW_HANDLE,
                timeout=self._http_timeout,
            )

        raise TypeError(f"Unsupported credential type: {type(credential).__name__}")

    def _public_app(self, authority: str, session: Session, **kwargs: Any) -> msal.PublicClientApplication:
        return msal.PublicClientApplication(
            self._client_id,
            authority=authority,
            validate_authority=self._validate_authority,
            http_client=session,
            **kwargs,
        )


def _check_authority(authority: str) -> None:
    parsed = urlparse(authority or "")
    if parsed.scheme != "https" or not parsed.netloc:
        raise ValueError(format_message("R_InvalidAuthorityURL", authority))


def _integrated_unavailable() -> Mapping[str, Any]:
    return {
        "error": "integrated_auth_unavailable",
        "error_description": format_message("R_IntegratedAuthUnavailable"),
    }


def _provider_error(response: Mapping[str, Any]) -> IdentityProviderError:
    return IdentityProviderError(
        error=response.get("error") or "unknown_error",
        error_description=response.get("error_description"),
        correlation_id=response.get("correlation_id"),
        error_codes=response.get("error_codes") or (),
    )


def _expires_on(response: Mapping[str, Any], requested_at: datetime) -> datetime:
    """
    Absolute expiry of the token in `response`.

    Prefers the relative `expires_in` lifetime; falls back to the token's
    own `exp` claim when the provider does not report one.
    """
    expires_in = response.get("expires_in")
    if expires_in is not None:
        return requested_at + timedelta(seconds=int(expires_in))

    try:
        claims = jwt.decode(response["access_token"], options={"verify_signature": False})
    except DecodeError as exc:
        raise IdentityProviderError("invalid_token", format_message("R_TokenExpiryUnknown")) from exc

    exp = claims.get("exp")
    if exp is None:
        raise IdentityProviderError("invalid_token", format_message("R_TokenExpiryUnknown"))

    return datetime.fromtimestamp(int(exp), tz=timezone.utc)

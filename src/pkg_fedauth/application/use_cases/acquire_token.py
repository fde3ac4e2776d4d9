from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from ...domain.constants import AuthenticationMode
from ...domain.entities import FedAuthToken, TokenRequest
from ...domain.exceptions import AcquisitionExecutionError, FedAuthInterruptedError
from ...domain.ports import IdentityProvider, PrincipalResolver
from ...domain.value_objects import Credential, FedAuthInfo, IntegratedWindowsCredential
from ..execution import ExecutorFactory, await_result, new_single_worker_executor, single_worker_context
from .normalize_error import correct_execution_error

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AcquireTokenUseCase:
    """
    Application use case:
    - resolve the scope (and, for integrated auth, the current principal)
    - run the provider acquisition on a per-call single-worker executor
    - map provider failures to a normalized FedAuthError

    One code path serves every credential type; only request building
    depends on the variant.
    """

    provider: IdentityProvider
    principal_resolver: PrincipalResolver
    timeout: Optional[float] = None  # None waits for the provider indefinitely
    executor_factory: ExecutorFactory = field(default=new_single_worker_executor)

    def execute(
            self,
            fed_auth_info: FedAuthInfo,
            credential: Credential,
            authentication_mode: Union[AuthenticationMode, str],
    ) -> FedAuthToken:
        """
        Acquire a token for `credential` against the announced authority.

        Raises:
            FedAuthConfigurationError
            FedAuthInterruptedError
            ProviderRejectedError
        """
        with single_worker_context(self.executor_factory) as executor:
            try:
                request = self._build_request(fed_auth_info, credential)
                future = self.provider.acquire_token(request, executor)
                result = await_result(future, self.timeout)
            except AcquisitionExecutionError as exc:
                error = correct_execution_error(exc, credential.identity, authentication_mode)
                raise error from error.cause

        return FedAuthToken.from_result(result)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _build_request(self, fed_auth_info: FedAuthInfo, credential: Credential) -> TokenRequest:
        if isinstance(credential, IntegratedWindowsCredential) and credential.principal_name is None:
            credential = replace(credential, principal_name=self._resolve_principal_name())

        return TokenRequest(
            authority=fed_auth_info.sts_url,
            scopes=(fed_auth_info.scope,),
            credential=credential,
        )

    def _resolve_principal_name(self) -> str:
        try:
            principal = self.principal_resolver.resolve()
        except OSError as exc:
            raise FedAuthInterruptedError(str(exc), cause=exc) from exc

        # principal name does not matter, only the realm is used by the provider
        logger.debug("realm name is: %s", principal.realm)
        return principal.name

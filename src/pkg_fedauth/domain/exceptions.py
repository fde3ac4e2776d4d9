from __future__ import annotations

from typing import Optional, Sequence


class FedAuthError(Exception):
    """
    Raised when a federated authentication token cannot be acquired.

    This is the single type surfaced to callers. The provider diagnostic,
    when there is one, is available through the cause chain.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


class FedAuthConfigurationError(FedAuthError):
    """Raised when the authority URL is malformed."""
    pass


class FedAuthInterruptedError(FedAuthError):
    """Raised when the wait was cancelled or timed out, or the realm could not be resolved."""
    pass


class ProviderRejectedError(FedAuthError):
    """Raised when the identity provider declined or failed the token exchange."""
    pass


class AcquisitionExecutionError(Exception):
    """Wraps the exception a failed acquisition future completed with."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.__cause__ = cause


class IdentityProviderError(Exception):
    """Error response reported by the identity provider."""

    def __init__(
            self,
            error: str,
            error_description: Optional[str] = None,
            correlation_id: Optional[str] = None,
            error_codes: Sequence[int] = (),
    ) -> None:
        super().__init__(error_description or error)
        self.error = error
        self.error_description = error_description
        self.correlation_id = correlation_id
        self.error_codes = tuple(error_codes)

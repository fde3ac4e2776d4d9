from __future__ import annotations

import logging
from typing import Union

from ...domain.constants import AuthenticationMode
from ...domain.exceptions import AcquisitionExecutionError, ProviderRejectedError
from ...domain.messages import format_message

logger = logging.getLogger(__name__)

# The provider escapes line breaks in its error text; this is the literal
# backslash-r backslash-n sequence, not control characters.
_ESCAPED_CRLF = "\\r\\n"
_CRLF = "\r\n"


def mode_label(authentication_mode: Union[AuthenticationMode, str]) -> str:
    if isinstance(authentication_mode, AuthenticationMode):
        return authentication_mode.value
    return str(authentication_mode)


def correct_execution_error(
        failure: BaseException,
        identity: str,
        authentication_mode: Union[AuthenticationMode, str],
) -> ProviderRejectedError:
    """
    Turn a failed acquisition into the error surfaced to the caller.

    The result keeps the shape of the original chain:

        ProviderRejectedError -> AcquisitionExecutionError -> RuntimeError

    with escaped line breaks in the provider message turned into real CRLFs.
    When the failure has no diagnosable cause the error carries only the
    formatted message.
    """
    logger.debug("MSAL exception: %s", failure)

    message = format_message("R_MSALExecution", identity, mode_label(authentication_mode))

    cause = failure.__cause__
    cause_message = str(cause) if cause is not None else ""
    if not cause_message:
        return ProviderRejectedError(message)

    corrected = RuntimeError(cause_message.replace(_ESCAPED_CRLF, _CRLF))
    return ProviderRejectedError(message, cause=AcquisitionExecutionError(corrected))

# src/pkg_fedauth/domain/messages.py

from __future__ import annotations


_ERROR_MESSAGES = {
    "R_MSALExecution": "Failed to authenticate the user {0} in Active Directory (Authentication={1}).",
    "R_InvalidAuthorityURL": "The authority URL {0!r} is not a valid https URL.",
    "R_FedAuthTimeout": "Token acquisition did not complete within {0} seconds.",
    "R_FedAuthCancelled": "Token acquisition was cancelled.",
    "R_KerberosRealmNotFound": "Cannot locate default realm",
    "R_IntegratedAuthUnavailable": (
        "Integrated authentication requires the Windows authentication broker, "
        "which is not available for this platform or authority."
    ),
    "R_TokenExpiryUnknown": "The identity provider returned a token without expiry information.",
}


def get_err_string(key: str) -> str:
    """Return the message template registered under `key`."""
    return _ERROR_MESSAGES[key]


def format_message(key: str, *args: object) -> str:
    return get_err_string(key).format(*args)

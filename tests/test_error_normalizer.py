# tests/test_error_normalizer.py
from pkg_fedauth.application.use_cases.normalize_error import correct_execution_error
from pkg_fedauth.domain.constants import AuthenticationMode
from pkg_fedauth.domain.exceptions import (
    AcquisitionExecutionError,
    FedAuthError,
    IdentityProviderError,
    ProviderRejectedError,
)


def _failure(cause: BaseException) -> AcquisitionExecutionError:
    return AcquisitionExecutionError(cause)


def test_escaped_line_breaks_are_corrected():
    failure = _failure(RuntimeError("Bad creds\\r\\nTry again"))

    err = correct_execution_error(failure, "alice", "ActiveDirectoryPassword")

    assert isinstance(err, ProviderRejectedError)
    assert isinstance(err, FedAuthError)
    execution = err.__cause__
    assert isinstance(execution, AcquisitionExecutionError)
    underlying = execution.__cause__
    assert isinstance(underlying, RuntimeError)
    assert str(underlying) == "Bad creds\r\nTry again"
    # same depth as the uncorrected chain: top -> execution failure -> cause
    assert underlying.__cause__ is None


def test_every_escaped_sequence_is_replaced():
    text = "AADSTS50126: invalid\\r\\nTrace ID: 1\\r\\nCorrelation ID: 2\\r\\n"
    err = correct_execution_error(_failure(IdentityProviderError("invalid_grant", text)), "bob", "ActiveDirectoryPassword")

    message = str(err.__cause__.__cause__)
    assert "\\r\\n" not in message
    assert message.count("\r\n") == 3
    assert message == "AADSTS50126: invalid\r\nTrace ID: 1\r\nCorrelation ID: 2\r\n"


def test_message_names_identity_and_mode():
    err = correct_execution_error(_failure(RuntimeError("x")), "app-id", AuthenticationMode.SERVICE_PRINCIPAL)
    assert err.message == (
        "Failed to authenticate the user app-id in Active Directory "
        "(Authentication=ActiveDirectoryServicePrincipal)."
    )


def test_integrated_identity_is_blank():
    err = correct_execution_error(_failure(RuntimeError("x")), "", AuthenticationMode.INTEGRATED)
    assert err.message == "Failed to authenticate the user  in Active Directory (Authentication=ActiveDirectoryIntegrated)."


def test_failure_without_cause_has_no_cause():
    err = correct_execution_error(RuntimeError("future failed"), "alice", "ActiveDirectoryPassword")
    assert isinstance(err, ProviderRejectedError)
    assert err.__cause__ is None
    assert err.cause is None


def test_cause_with_empty_message_has_no_cause():
    err = correct_execution_error(_failure(RuntimeError("")), "alice", "ActiveDirectoryPassword")
    assert err.__cause__ is None
    assert "alice" in err.message


def test_text_without_escapes_is_kept():
    err = correct_execution_error(_failure(RuntimeError("plain text")), "alice", "ActiveDirectoryPassword")
    assert str(err.__cause__.__cause__) == "plain text"

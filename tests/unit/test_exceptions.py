import pytest

from pidfinder.exceptions import (
    ApplicationError,
    ExecutablePathNotFoundError,
    ProcessLookupTimeoutError,
    ProcessTableEnumerationError,
)


@pytest.mark.parametrize(
    ("exc_cls", "builtin", "default_message"),
    [
        (ProcessTableEnumerationError, OSError, "Process table root could not be enumerated"),
        (ExecutablePathNotFoundError, LookupError, "Executable image path could not be resolved"),
        (ProcessLookupTimeoutError, TimeoutError, "Process lookup timed out"),
    ],
)
def test_exceptions_default_messages_and_bases(exc_cls, builtin, default_message):
    exc = exc_cls()

    assert isinstance(exc, ApplicationError)
    assert isinstance(exc, builtin)
    assert str(exc) == default_message


def test_keyword_context_becomes_attributes():
    exc = ProcessTableEnumerationError("cannot list /proc", root="/proc")

    assert str(exc) == "cannot list /proc"
    assert exc.root == "/proc"


def test_application_error_falls_back_to_docstring():
    assert str(ApplicationError()) == ApplicationError.__doc__

"""Exception hierarchy for resultkit."""

from __future__ import annotations

from typing import Any


class ResultKitError(Exception):
    """Base exception for all resultkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class AssertionFailedError(ResultKitError, AssertionError):
    """A checked condition did not hold.

    Default error of the assertion helpers. Also an ``AssertionError`` so
    callers that already catch those keep working.
    """


class CoercedError(ResultKitError):
    """A non-exception error object turned into a raisable exception.

    The message is ``str(original)``; the raw object is kept on
    :attr:`original` so structured data is not lost outright.
    """

    def __init__(self, original: Any, *, hint: str | None = None) -> None:
        super().__init__(str(original), hint=hint)
        self.original = original


class TransportedError(ResultKitError):
    """Failure rebuilt from a serialized record.

    Only the message and the original class name survive transport.
    """

    def __init__(
        self, message: str, *, type_name: str, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.type_name = type_name


def as_exception(error: Any) -> BaseException:
    """Return *error* if it can be raised, else wrap it in ``CoercedError``."""
    if isinstance(error, BaseException):
        return error
    return CoercedError(error)

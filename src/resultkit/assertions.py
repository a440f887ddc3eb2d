"""Assertion helpers that either raise or return a failure.

Unlike ``try_result``, these default to ``should_throw=True``: invariants are
asserted loudly unless the caller opts into early-return style:

    check = assert_not_nil(user.name, "Name is required", should_throw=False)
    if is_failure(check):
        return check
    name = check.value
"""

from __future__ import annotations

import typing

from resultkit.errors import AssertionFailedError
from resultkit.result import Failure, Result, Success

T = typing.TypeVar("T")
E = typing.TypeVar("E", bound=BaseException)

__all__ = [
    "DEFAULT_ASSERT_MESSAGE",
    "DEFAULT_NOT_NIL_MESSAGE",
    "assert_",
    "assert_not_nil",
    "assert_or",
]

DEFAULT_ASSERT_MESSAGE = "Assertion failed"
DEFAULT_NOT_NIL_MESSAGE = "Expected value to be non-null"


def _fail(error: E, should_throw: bool) -> Failure[E]:
    if should_throw:
        raise error
    return Failure(error)


def assert_(
    condition: bool,
    error: BaseException | None = None,
    should_throw: bool = True,
) -> Result[typing.Literal[True], BaseException]:
    """Return ``success(True)`` if *condition* holds, else raise or fail.

    A fresh ``AssertionFailedError("Assertion failed")`` is used when no
    *error* is given.
    """
    if condition:
        return Success(True)
    if error is None:
        error = AssertionFailedError(DEFAULT_ASSERT_MESSAGE)
    return _fail(error, should_throw)


def assert_or(
    condition: bool,
    error: E,
    should_throw: bool = True,
) -> Result[typing.Literal[True], E]:
    """Like :func:`assert_`, with a required, caller-typed error."""
    if condition:
        return Success(True)
    return _fail(error, should_throw)


def assert_not_nil(
    value: T | None,
    message: str = DEFAULT_NOT_NIL_MESSAGE,
    should_throw: bool = True,
) -> Result[T, AssertionFailedError]:
    """Return ``success(value)`` unless *value* is None.

    Only ``None`` is nil: ``0``, ``False`` and ``""`` pass through.
    """
    if value is None:
        return _fail(AssertionFailedError(message), should_throw)
    return Success(value)

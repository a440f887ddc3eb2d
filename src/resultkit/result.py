"""Result Monad for Explicit Error Handling.

A fallible computation returns either ``Success(value)`` or ``Failure(error)``
instead of raising. Both variants are frozen dataclasses that carry a fixed
class-level ``ok`` discriminant, so a Result can be inspected with the
predicates below or destructured with ``match``:

    match parse(text):
        case Success(value):
            use(value)
        case Failure(error):
            log.warning("parse failed: %s", error)

Transformations never mutate; they return new Results, and failures
short-circuit through ``map_result`` untouched (railway style).
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import typing

from typing_extensions import TypeIs

from resultkit._dev_flags import dev_validate_enabled
from resultkit._validation import _require_callable, _require_result
from resultkit.errors import ResultKitError, as_exception

T = typing.TypeVar("T")
U = typing.TypeVar("U")
E = typing.TypeVar("E")
F = typing.TypeVar("F")

__all__ = [
    "Failure",
    "Result",
    "Success",
    "failure",
    "is_failure",
    "is_success",
    "map_err",
    "map_result",
    "success",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
]


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[T]):
    """A successful outcome carrying a payload."""

    value: T
    ok: typing.ClassVar[typing.Literal[True]] = True


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(typing.Generic[E]):
    """A failed outcome carrying the error object."""

    error: E
    ok: typing.ClassVar[typing.Literal[False]] = False


Result = Success[T] | Failure[E]


def success(value: T) -> Success[T]:
    """Wrap *value* as a success. Falsy payloads are valid payloads."""
    return Success(value)


def failure(error: E) -> Failure[E]:
    """Wrap *error* as a failure; the same object is kept, not a copy."""
    return Failure(error)


def _check(result: object) -> None:
    if dev_validate_enabled():
        _require_result(result)


def is_success(result: Result[T, E]) -> TypeIs[Success[T]]:
    """Return True if *result* is a success."""
    _check(result)
    return result.ok


def is_failure(result: Result[T, E]) -> TypeIs[Failure[E]]:
    """Return True if *result* is a failure."""
    _check(result)
    return not result.ok


def unwrap(result: Result[T, E]) -> T:
    """Return the payload of a success, or raise the failure's error as-is.

    Branch on :func:`is_success` first when extraction must not raise.

    Raises:
        BaseException: The error carried by the failure. Error objects that
            are not exceptions are raised as ``CoercedError``.
    """
    _check(result)
    if result.ok:
        return result.value
    raise as_exception(result.error)


def unwrap_or(result: Result[T, E], default: T) -> T:
    """Return the payload of a success, or *default* for a failure."""
    _check(result)
    return result.value if result.ok else default


def unwrap_err(result: Result[T, E]) -> E:
    """Return the error of a failure. Raises ``ResultKitError`` on a success."""
    _check(result)
    if not result.ok:
        return result.error
    raise ResultKitError(
        "Called unwrap_err on a success",
        hint="Check is_failure(result) before extracting the error.",
    )


def map_result(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Apply *fn* to a success payload; pass a failure through unchanged.

    Exceptions raised by *fn* are not caught.
    """
    if dev_validate_enabled():
        _require_result(result)
        _require_callable(fn, "fn")
    if result.ok:
        return Success(fn(result.value))
    return result


def map_err(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Apply *fn* to a failure's error; pass a success through unchanged."""
    if dev_validate_enabled():
        _require_result(result)
        _require_callable(fn, "fn")
    if result.ok:
        return result
    return Failure(fn(result.error))

"""Adapters from exception-raising code into Results.

``try_result`` is the boundary for wrapping third-party calls: whatever the
callable raises becomes a ``Failure`` (or is re-raised when the caller asks
for pass-through behaviour). A callable that already returns a Result is
collapsed, never nested.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
import inspect
import logging
import typing

from resultkit._dev_flags import dev_validate_enabled
from resultkit._validation import _require_zero_arg_callable
from resultkit.result import Failure, Result, Success, unwrap

T = typing.TypeVar("T")

log = logging.getLogger(__name__)

__all__ = ["try_result", "try_result_sync"]


def _captured(
    exc: BaseException, *, should_throw: bool, origin: str
) -> Result[typing.Any, BaseException]:
    log.debug(
        "%s captured %s: %s (should_throw=%s)",
        origin,
        type(exc).__name__,
        exc,
        should_throw,
    )
    if should_throw:
        raise exc
    return Failure(exc)


def _collapse(
    value: typing.Any, *, should_throw: bool, origin: str
) -> Result[typing.Any, BaseException]:
    if not isinstance(value, Success | Failure):
        return Success(value)
    try:
        return Success(unwrap(value))
    except BaseException as exc:
        # The inner failure's error is a value handed back by fn, not a live
        # interrupt, so any BaseException it carries passes through as data.
        return _captured(exc, should_throw=should_throw, origin=origin)


async def try_result(
    fn: Callable[[], Awaitable[T | Result[T, typing.Any]] | T],
    should_throw: bool = False,
) -> Result[T, BaseException]:
    """Await ``fn()`` and return its outcome as a Result.

    Args:
        fn: Zero-argument callable, normally returning an awaitable. It may
            resolve to a plain value or to a Result; the latter is unwrapped
            once so the inner variant passes through. A non-awaitable return
            value is used as-is.
        should_throw: Re-raise captured exceptions instead of returning a
            failure. Defaults to False.

    Returns:
        ``Success`` with the resolved value, or ``Failure`` with the captured
        exception (only when ``should_throw`` is False).

    Raises:
        Exception: The captured exception, when ``should_throw`` is True.

    Example:
        result = await try_result(lambda: client.get("/users/1"))
        if is_failure(result):
            return result

    Cancellation and other ``BaseException`` subclasses raised while running
    ``fn`` are never captured.
    """
    if dev_validate_enabled():
        _require_zero_arg_callable(fn, "fn")
    try:
        value = fn()
        if inspect.isawaitable(value):
            value = await value
    except Exception as exc:
        return _captured(exc, should_throw=should_throw, origin="try_result")
    return _collapse(value, should_throw=should_throw, origin="try_result")


def try_result_sync(
    fn: Callable[[], T | Result[T, typing.Any]],
    should_throw: bool = False,
) -> Result[T, BaseException]:
    """Synchronous counterpart of :func:`try_result`."""
    if dev_validate_enabled():
        _require_zero_arg_callable(fn, "fn")
    try:
        value = fn()
    except Exception as exc:
        return _captured(exc, should_throw=should_throw, origin="try_result_sync")
    return _collapse(value, should_throw=should_throw, origin="try_result_sync")

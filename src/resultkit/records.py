"""Serializable records for logging and cross-process transport.

A ``ResultRecord`` is the flat form of a Result: a boolean ``ok``
discriminant plus exactly one of ``value`` or ``error``. The model validator
enforces that the discriminant agrees with the populated field, so a record
that round-trips through JSON cannot come back inconsistent.
"""

from __future__ import annotations

import typing
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from resultkit._dev_flags import dev_validate_enabled
from resultkit._validation import _require_result
from resultkit.errors import TransportedError
from resultkit.result import Failure, Result, Success

__all__ = ["ErrorInfo", "ResultRecord", "from_record", "to_record"]


class ErrorInfo(BaseModel):
    """Message and class name of a failure's error."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(min_length=1)
    message: str
    hint: str | None = None


class ResultRecord(BaseModel):
    """Flat, validated representation of a Result."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Any = None
    error: ErrorInfo | None = None

    @model_validator(mode="after")
    def check_discriminant(self) -> Self:
        """Reject records whose ``ok`` flag disagrees with the populated field."""
        if self.ok and self.error is not None:
            raise ValueError("success record must not carry an error")
        if not self.ok:
            if self.error is None:
                raise ValueError("failure record requires an error")
            if self.value is not None:
                raise ValueError("failure record must not carry a value")
        return self


def _error_info(error: Any) -> ErrorInfo:
    if isinstance(error, TransportedError):
        type_name = error.type_name
    else:
        type_name = type(error).__name__
    hint = getattr(error, "hint", None)
    return ErrorInfo(
        type=type_name,
        message=str(error),
        hint=hint if isinstance(hint, str) else None,
    )


def to_record(result: Result[Any, Any]) -> ResultRecord:
    """Flatten *result* into a ``ResultRecord``.

    The payload is stored as-is; serializing it to JSON is left to pydantic
    and fails for payloads pydantic cannot encode.
    """
    if dev_validate_enabled():
        _require_result(result)
    if result.ok:
        return ResultRecord(ok=True, value=result.value)
    return ResultRecord(ok=False, error=_error_info(result.error))


def from_record(record: ResultRecord) -> Result[Any, TransportedError]:
    """Rebuild a Result from *record*.

    Failures come back as ``TransportedError`` carrying the original message,
    class name and hint; the original exception object is not recoverable.
    """
    if record.ok:
        return Success(record.value)
    info = typing.cast("ErrorInfo", record.error)  # set when ok is False
    return Failure(
        TransportedError(info.message, type_name=info.type, hint=info.hint)
    )

"""Internal validation helpers used when dev validation is enabled.

These helpers centralize argument checks so error messages stay consistent
between the result, adapter and record modules.
"""

from __future__ import annotations

import inspect
import typing


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_result(value: typing.Any, field_name: str = "result") -> None:
    # Imported lazily: result.py imports this module.
    from resultkit.result import Failure, Success

    _require(
        condition=isinstance(value, Success | Failure),
        message=f"expected Success or Failure, got {type(value).__name__}",
        field_name=field_name,
        exc=TypeError,
    )


def _require_callable(func: typing.Any, field_name: str) -> None:
    _require(
        condition=callable(func),
        message="must be callable",
        field_name=field_name,
        exc=TypeError,
    )


def _require_zero_arg_callable(func: typing.Any, field_name: str) -> None:
    """Validate callable takes no required arguments."""
    _require_callable(func, field_name)

    try:
        sig = inspect.signature(func)
    except (ValueError, TypeError):
        # Some builtins have no introspectable signature; accept them.
        return
    has_required_params = any(
        p.default is p.empty
        and p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.KEYWORD_ONLY)
        for p in sig.parameters.values()
    )
    _require(
        condition=not has_required_params,
        message="must be a zero-argument callable",
        field_name=field_name,
        exc=TypeError,
    )

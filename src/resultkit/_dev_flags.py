"""Internal helpers for development-time feature flags.

Centralizes how opt-in validation toggles are read so the semantics stay
consistent across modules. Flags are read on every call; nothing is cached.
"""

from __future__ import annotations

import os

__all__ = ["VALIDATE_ENV_VAR", "dev_validate_enabled"]

VALIDATE_ENV_VAR = "RESULTKIT_VALIDATE"


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Return True when dev-time argument validation is enabled.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``RESULTKIT_VALIDATE`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv(VALIDATE_ENV_VAR) == "1"

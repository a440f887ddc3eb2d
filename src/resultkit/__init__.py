"""resultkit: explicit, value-based error handling.

Public API:
    - success() / failure(): Construct a Result
    - is_success() / is_failure(): Inspect the discriminant
    - unwrap() / unwrap_or() / unwrap_err(): Extract
    - map_result() / map_err(): Transform without mutating
    - try_result() / try_result_sync(): Adapt raising code into Results
    - assert_() / assert_or() / assert_not_nil(): Raise-or-fail guards
    - to_record() / from_record(): Flat, validated transport form
"""

from __future__ import annotations

import logging

from resultkit.adapter import try_result, try_result_sync
from resultkit.assertions import assert_, assert_not_nil, assert_or
from resultkit.errors import (
    AssertionFailedError,
    CoercedError,
    ResultKitError,
    TransportedError,
)
from resultkit.records import ErrorInfo, ResultRecord, from_record, to_record
from resultkit.result import (
    Failure,
    Result,
    Success,
    failure,
    is_failure,
    is_success,
    map_err,
    map_result,
    success,
    unwrap,
    unwrap_err,
    unwrap_or,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "AssertionFailedError",
    "CoercedError",
    "ErrorInfo",
    "Failure",
    "Result",
    "ResultKitError",
    "ResultRecord",
    "Success",
    "TransportedError",
    "assert_",
    "assert_not_nil",
    "assert_or",
    "failure",
    "from_record",
    "is_failure",
    "is_success",
    "map_err",
    "map_result",
    "success",
    "to_record",
    "try_result",
    "try_result_sync",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
]

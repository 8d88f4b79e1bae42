"""
okfail — a two-rail Result container for Python.

Explicit, composable error handling: outcomes are values, not exceptions.

    from okfail import Fail, Ok, Result

    def parse_age(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Fail(f"not a number: {raw!r}")
        return Ok(int(raw))

    result = (
        Ok({"name": "Alice", "age": "30"})
        .flat_map(lambda d: parse_age(d["age"]))
        .map(lambda age: f"Valid user, age {age}")
    )
"""

from okfail.result import AsyncResult, Fail, Failure, Ok, Result, Success
from okfail.errors import (
    NoFailureValueError,
    NoSuccessValueError,
    UnwrapError,
    UnwrapErrorKind,
)
from okfail.execution import (
    ComposableExecutionContext,
    ExecutionContext,
    LoggingExecutionContext,
    NoOpExecutionContext,
    with_context,
)
from okfail.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "Ok",
    "Fail",
    "AsyncResult",
    "UnwrapError",
    "UnwrapErrorKind",
    "NoSuccessValueError",
    "NoFailureValueError",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ComposableExecutionContext",
    "with_context",
    "ResultAssertions",
]

__version__ = "1.0.0"

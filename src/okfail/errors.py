"""
Unwrap errors — raised only when a Result is unwrapped on the wrong rail.

These are programming errors, never data-level failures. Domain failures
travel as ordinary payloads inside Failure(...); nothing else in okfail
raises.

One error type, two fixed kinds. The kind is an Enum member, so errors
carry no state beyond it and compare by `is`:

    >>> err = NoSuccessValueError()
    >>> err.kind is UnwrapErrorKind.NO_SUCCESS_VALUE
    True
    >>> str(err)
    'Cannot unwrap a failed result'
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class UnwrapErrorKind(Enum):
    """The two ways a Result can be unwrapped on the wrong rail."""

    NO_SUCCESS_VALUE = "Cannot unwrap a failed result"
    """unwrap() called on a Failure (no success payload exists)."""

    NO_FAILURE_VALUE = "Cannot unwrap_failure a successful result"
    """unwrap_failure() called on a Success (no failure payload exists)."""


class UnwrapError(Exception):
    """Base class for both unwrap misuse errors."""

    kind: UnwrapErrorKind

    def __init__(self, kind: UnwrapErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    @property
    def message(self) -> str:
        return self.kind.value


class NoSuccessValueError(UnwrapError):
    """Raised by Result.unwrap() on a Failure."""

    def __init__(self) -> None:
        super().__init__(UnwrapErrorKind.NO_SUCCESS_VALUE)


class NoFailureValueError(UnwrapError):
    """Raised by Result.unwrap_failure() on a Success."""

    def __init__(self) -> None:
        super().__init__(UnwrapErrorKind.NO_FAILURE_VALUE)

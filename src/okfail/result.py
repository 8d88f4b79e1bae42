"""
Result container — the core of okfail.

A Result[S, E] is either Success(value: S) or Failure(error: E). Operations
return a new Result instead of raising, and failures short-circuit through
chains of .flat_map() automatically.

    ┌───────────┐   flat_map    ┌───────────┐   flat_map    ┌──────────┐
    │ validate  │──Success──────│  enrich   │──Success──────│ persist  │──→ Result[S, E]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result[S, E]

The two variants are frozen dataclasses behind a shared base class, so the
active rail IS the runtime type. A Success has no error slot and a Failure
has no value slot; the wrong payload cannot be read by accident.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

from okfail.errors import NoFailureValueError, NoSuccessValueError

S = TypeVar("S")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
K = TypeVar("K")
R = TypeVar("R")


class Result(Generic[S, E]):
    """
    Two-rail outcome: Success(value) or Failure(error).

    Never instantiate Result directly; use Result.success / Result.failure,
    the Ok / Fail aliases, or the variant classes themselves.

    Usage:
        >>> Result.success(21).map(lambda x: x * 2)
        Success(42)

        >>> Result.failure("boom").map(lambda x: x * 2)
        Failure('boom')

        >>> Result.collect([Ok(1), Fail("X"), Ok(2), Fail("Y")])
        Failure('X')
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Result[S, E]:
        # A bare Result would carry no rail at all
        if cls is Result:
            raise TypeError(
                "Result cannot be instantiated directly; use Result.success / Result.failure"
            )
        return super().__new__(cls)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: S) -> Result[S, Any]:
        """Create a Success holding `value`. Any value is accepted, None included."""
        return Success(value)

    @staticmethod
    def failure(error: E) -> Result[Any, E]:
        """Create a Failure holding `error`. Any value is accepted, None included."""
        return Failure(error)

    @staticmethod
    def from_optional(value: S | None, error: E) -> Result[S, E]:
        """
        Success(value) unless value is None, in which case Failure(error).

            Result.from_optional(user, "User is required")
        """
        if value is not None:
            return Success(value)
        return Failure(error)

    @staticmethod
    def from_computation(
        computation: Callable[[], S],
        on_error: Callable[[Exception], E] | None = None,
        catch: type[Exception] | tuple[type[Exception], ...] = Exception,
    ) -> Result[S, Any]:
        """
        Run a computation that may raise and capture the outcome as a Result.

        Exceptions matching `catch` become Failure(on_error(exc)), or
        Failure(exc) when no on_error is given. Anything else propagates.

        Before:
            try:
                user = repo.find(user_id)
                return Result.success(user)
            except LookupError as e:
                return Result.failure(f"lookup failed: {e}")

        After:
            return Result.from_computation(
                lambda: repo.find(user_id),
                lambda e: f"lookup failed: {e}",
                catch=LookupError,
            )
        """
        try:
            value = computation()
        except catch as e:
            return Failure(on_error(e) if on_error is not None else e)
        return Success(value)

    @staticmethod
    def is_result(value: object) -> bool:
        """
        True iff `value` is a Result (Success or Failure).

        This is a type-identity check. An unrelated object exposing
        is_success / is_failure methods is not a Result.
        """
        return isinstance(value, Result)

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    # ──────────────────────── Unwrapping ────────────────────────

    def unwrap(self) -> S:
        """
        Extract the success value. Raises NoSuccessValueError on a Failure.

        Escape hatch: prefer .map() / .flat_map() chains, .either(), or
        match/case, which cannot pick the wrong rail.
        """
        match self:
            case Success(v):
                return v
            case Failure(_):
                raise NoSuccessValueError()
        raise TypeError("unreachable")  # pragma: no cover

    def unwrap_failure(self) -> E:
        """
        Extract the failure payload. Raises NoFailureValueError on a Success.

        Escape hatch, same caveats as .unwrap().
        """
        match self:
            case Failure(err):
                return err
            case Success(_):
                raise NoFailureValueError()
        raise TypeError("unreachable")  # pragma: no cover

    def unwrap_or(self, default: S) -> S:
        """Extract the success value or return `default` on failure."""
        match self:
            case Success(v):
                return v
            case _:
                return default

    def unwrap_or_else(self, fallback: Callable[[E], S]) -> S:
        """Extract the success value or compute one from the failure payload."""
        return self.either(lambda v: v, fallback)

    def either(self, on_success: Callable[[S], R], on_failure: Callable[[E], R]) -> R:
        """
        Apply exactly one of two functions depending on the rail.

            result.either(
                on_success=lambda user: f"Hello {user.name}",
                on_failure=lambda err: f"Error: {err}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Core Transformations ────────────────────────

    def map(self, mapper: Callable[[S], U]) -> Result[U, E]:
        """
        Transform the success value. Short-circuits on failure.

            Result.success(5).map(lambda x: x * 2)   # → Success(10)
            Result.failure("e").map(lambda x: x * 2) # → Failure('e'), mapper not called
        """
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map_failure(self, mapper: Callable[[E], F]) -> Result[S, F]:
        """
        Transform the failure payload. Passes success through unchanged.

            result.map_failure(lambda err: f"wrapped: {err}")
        """
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return Failure(mapper(err))
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[S], Result[U, F]]) -> Result[U, E | F]:
        """
        Chain a Result-returning function. Short-circuits on failure.

        The returned Result keeps whatever rail the mapper chose, so a
        pipeline step can both transform and fail:

            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Fail("must be positive")

            Result.success(5).flat_map(validate)   # → Success(5)
            Result.success(-1).flat_map(validate)  # → Failure('must be positive')
        """
        match self:
            case Success(v):
                return _copy_of(mapper(v), "flat_map")
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map_failure(self, mapper: Callable[[E], Result[U, F]]) -> Result[S | U, F]:
        """
        Chain a Result-returning function on the failure rail.

        Lets a failure be recovered (mapper returns Success) or replaced
        (mapper returns Failure). Success passes through untouched.
        """
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return _copy_of(mapper(err), "flat_map_failure")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[S], Any]) -> Result[S, E]:
        """Run `action` on the success value without altering the Result."""
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[E], Any]) -> Result[S, E]:
        """Run `action` on the failure payload without altering the Result."""
        match self:
            case Failure(err):
                action(err)
        return self

    # ──────────────────────── Async Support ────────────────────────

    async def map_async(self, mapper: Callable[[S], Awaitable[U]]) -> Result[U, E]:
        """
        Async map — await `mapper` on the success value.

            result = await Result.success(user_id).map_async(fetch_user)
        """
        match self:
            case Success(v):
                return Success(await mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    async def map_failure_async(self, mapper: Callable[[E], Awaitable[F]]) -> Result[S, F]:
        """Async map_failure — await `mapper` on the failure payload."""
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return Failure(await mapper(err))
        raise TypeError("unreachable")  # pragma: no cover

    async def flat_map_async(
        self, mapper: Callable[[S], Awaitable[Result[U, F]]]
    ) -> Result[U, E | F]:
        """
        Async flat_map — chain an async Result-returning function.

            result = await Result.success(order).flat_map_async(persist_order)
        """
        match self:
            case Success(v):
                return _copy_of(await mapper(v), "flat_map_async")
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    async def flat_map_failure_async(
        self, mapper: Callable[[E], Awaitable[Result[U, F]]]
    ) -> Result[S | U, F]:
        """Async flat_map_failure — chain an async Result-returning recovery."""
        match self:
            case Success(v):
                return Success(v)
            case Failure(err):
                return _copy_of(await mapper(err), "flat_map_failure_async")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Aggregation ────────────────────────

    @staticmethod
    def collect(results: Iterable[Result[S, E]]) -> Result[list[S], E]:
        """
        Turn an iterable of Results into a Result of list.

        Returns the first Failure in iteration order and stops there, so a
        lazy iterable is not advanced past it. Otherwise Success with every
        value, in order. Elements that are not Results are skipped.

            Result.collect([Ok(1), Ok(2)])            # → Success([1, 2])
            Result.collect([Ok(1), Fail("X"), Fail("Y")])  # → Failure('X')
            Result.collect([])                        # → Success([])
        """
        values: list[S] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure(err):
                    return Failure(err)
        return Success(values)

    @staticmethod
    def collect_keyed(mapping: Mapping[K, Any]) -> Result[dict[K, Any], Any]:
        """
        Turn a mapping of key → Result (or plain value) into a Result of dict.

        Entries are visited in the mapping's iteration order. The first
        Failure wins and stops the walk. Success values are unwrapped under
        the same key; plain values pass through as they are.

            Result.collect_keyed({"a": Ok(1), "b": "B", "c": Ok(3)})
            # → Success({'a': 1, 'b': 'B', 'c': 3})
        """
        collected: dict[K, Any] = {}
        for key, entry in mapping.items():
            match entry:
                case Success(v):
                    collected[key] = v
                case Failure(err):
                    return Failure(err)
                case _:
                    collected[key] = entry
        return Success(collected)

    # ──────────────────────── Execution Context ────────────────────────

    def within(self, execution_context: Any) -> Result[S, E]:
        """
        Hand this Result to an execution context.

            result = (
                Result.success(data)
                .flat_map(validate)
                .flat_map(persist)
                .within(LoggingExecutionContext(operation="persist"))
            )
        """
        return execution_context.execute(lambda: self)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[S, E]):
    """The success rail — wraps a value of type S."""

    _value: S

    def __init__(self, value: S) -> None:
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Result[S, E]):
    """The failure rail — wraps an error payload of type E."""

    _error: E

    def __init__(self, error: E) -> None:
        object.__setattr__(self, "_error", error)

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


def _copy_of(result: object, operation: str) -> Result[Any, Any]:
    """Fresh instance on the same rail as `result`; rejects non-Results."""
    match result:
        case Success(v):
            return Success(v)
        case Failure(err):
            return Failure(err)
    raise TypeError(
        f"{operation} mapper must return a Result, got {type(result).__name__}"
    )


AsyncResult = Awaitable[Result[S, E]]

Ok = Result.success
Fail = Result.failure

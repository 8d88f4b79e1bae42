"""
Execution contexts — run a Result pipeline inside a boundary.

Pipelines built from map / flat_map describe WHAT happens and stay pure.
An ExecutionContext describes HOW they run: logged, timed, nested inside
other boundaries. The two are never mixed.

Usage:
    def pipeline(order: dict) -> Result[str, str]:
        return (
            Result.success(order)
            .flat_map(validate)
            .map(render)
        )

    # Explicit boundary
    result = pipeline(order).within(LoggingExecutionContext(operation="render"))

    # Or as a decorator
    @with_context(LoggingExecutionContext(operation="render"))
    def handle(order: dict) -> Result[str, str]:
        return pipeline(order)
"""

from __future__ import annotations

import functools
import time
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

import structlog

from okfail.result import Result

S = TypeVar("S")
E = TypeVar("E")

log = structlog.get_logger(__name__)


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class ExecutionContext(Protocol):
    """
    Anything with execute(computation) -> Result is an execution context.

    Structural typing, no inheritance required.
    """

    def execute(self, computation: Callable[[], Result[S, E]]) -> Result[S, E]:
        """Run a Result-returning computation within this context."""
        ...


# ──────────────────────── NoOp ────────────────────────


class NoOpExecutionContext:
    """
    Passthrough context — runs the computation with no wrapper.

    Handy in tests and for pipelines with nothing to observe.
    """

    def execute(self, computation: Callable[[], Result[S, E]]) -> Result[S, E]:
        return computation()


# ──────────────────────── Logging ────────────────────────


class LoggingExecutionContext:
    """
    Logs start, completion, elapsed time and outcome rail via structlog.

    Wraps another context (decorator pattern):

        ctx = LoggingExecutionContext(NoOpExecutionContext(), operation="import")

    A raising computation is a programming error, not a Failure: it is
    logged as execution.raised and re-raised untouched.
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
    ) -> None:
        self._inner = inner or NoOpExecutionContext()
        self._operation = operation

    def execute(self, computation: Callable[[], Result[S, E]]) -> Result[S, E]:
        bound = log.bind(operation=self._operation)
        bound.info("execution.started")
        start = time.monotonic()

        try:
            result = self._inner.execute(computation)
        except Exception as e:
            bound.error(
                "execution.raised",
                elapsed_s=round(time.monotonic() - start, 3),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        bound.info(
            "execution.completed",
            elapsed_s=round(time.monotonic() - start, 3),
            outcome="success" if result.is_success() else "failure",
        )
        return result


# ──────────────────────── Composable ────────────────────────


class ComposableExecutionContext:
    """
    Compose several contexts into one. The first one given is outermost:

        composed = ComposableExecutionContext(
            LoggingExecutionContext(operation="outer"),
            LoggingExecutionContext(operation="inner"),
        )
        # outer wraps inner wraps computation
    """

    def __init__(self, *contexts: ExecutionContext) -> None:
        if not contexts:
            raise ValueError("At least one execution context is required")
        self._contexts = list(contexts)

    def execute(self, computation: Callable[[], Result[S, E]]) -> Result[S, E]:
        # Build the onion from the inside out
        wrapped = computation
        for ctx in reversed(self._contexts):
            prev = wrapped
            wrapped = lambda _ctx=ctx, _prev=prev: _ctx.execute(_prev)
        return wrapped()


# ──────────────────────── Decorator Helper ────────────────────────


def with_context(ctx: ExecutionContext) -> Callable:
    """
    Decorator running a Result-returning function inside `ctx`.

        @with_context(NoOpExecutionContext())
        def handle(cmd: dict) -> Result[int, str]:
            return Result.success(cmd).flat_map(validate)

    Equivalent to `handle_body(cmd).within(ctx)`.
    """

    def decorator(fn: Callable[..., Result[S, E]]) -> Callable[..., Result[S, E]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[S, E]:
            return ctx.execute(lambda: fn(*args, **kwargs))
        return wrapper
    return decorator

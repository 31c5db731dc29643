"""Result type with deferred cleanup actions.

This module implements a generic Result that chains fallible steps, stops at
the first failure and keeps an ordered list of deferred actions. Deferred
actions only run when the result is consumed with ``err()``, which makes them
usable as scoped finalizers for resources produced along the chain.

Usage:
    from monad.result import Result, success

    def greet(name: str) -> Result[str]:
        return success("hello, " + name)

    error = success("world").bind(greet).defer(print).err()
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Generic, TypeVar

from monad.exceptions import ERROR_WAS_EXPECTED
from monad.shared.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Payload type
U = TypeVar("U")  # Map target type

DeferredAction = Callable[[], None]


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a fallible operation plus the cleanup it owes.

    Exactly one of the two states holds: success (``error is None``) or
    failure (``error`` set, ``value`` is ``None``). Every combinator returns
    a new instance.
    """

    value: T | None = None
    error: Exception | None = None
    deferred: tuple[DeferredAction, ...] = field(default=(), repr=False)

    @classmethod
    def new(cls, value: T | None, err: Exception | None) -> "Result[T]":
        """Build a failure if ``err`` is set, otherwise a success."""
        if err is not None:
            return cls.failure(err)
        return cls.success(value)

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        """Successful result holding ``value``."""
        return cls(value=value)

    @classmethod
    def failure(cls, err: Exception) -> "Result[T]":
        """Failed result holding ``err``.

        Raises:
            TypeError: If ``err`` is None
        """
        if err is None:
            raise TypeError("Result.failure() requires an error, got None")
        return cls(value=None, error=err)

    @classmethod
    def attempt(
        cls,
        func: Callable[..., T],
        *args: Any,
        exceptions: tuple[type[Exception], ...] = (Exception,),
        **kwargs: Any,
    ) -> "Result[T]":
        """Call ``func`` and capture its outcome.

        A return value becomes a success. An exception listed in
        ``exceptions`` becomes a failure; any other exception propagates.

        Args:
            func: Callable to invoke
            *args: Positional arguments for ``func``
            exceptions: Exception types converted into failures
            **kwargs: Keyword arguments for ``func``

        Returns:
            Success with the return value, or failure with the caught error

        Example:
            >>> Result.attempt(int, "42")
            Success(42)
        """
        try:
            value = func(*args, **kwargs)
        except exceptions as e:
            logger.debug(f"{getattr(func, '__name__', func)!s} raised {e!r}, wrapping as failure")
            return cls.failure(e)
        return cls.success(value)

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return self.error is None

    def is_err(self) -> bool:
        """Check if this is a failure result."""
        return self.error is not None

    def unwrap_or(self, default: T) -> T:
        """Get the value, or ``default`` on failure. Deferred actions do not run."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]

    def bind(self, func: "Callable[[T], Result[T]]") -> "Result[T]":
        """Run the next fallible step on the success value.

        A failure is returned unchanged and ``func`` is not called. On success
        ``func`` is called once and its outcome is returned with this
        result's deferred actions placed ahead of its own.

        Raises:
            TypeError: If ``func`` does not return a Result
        """
        if self.error is not None:
            logger.debug(f"bind skipped {getattr(func, '__name__', func)!s}: {self.error!r}")
            return self

        next_result = func(self.value)  # type: ignore[arg-type]
        if not isinstance(next_result, Result):
            raise TypeError(
                f"bound function must return a Result, got {type(next_result).__name__}"
            )
        return self._augment(next_result)

    def chain(self, *funcs: "Callable[[T], Result[T]]") -> "Result[T]":
        """Bind each step in order, stopping at the first failure."""
        result = self
        for func in funcs:
            if result.error is not None:
                break
            result = result.bind(func)
        return result

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Transform the success value, keeping deferred actions."""
        if self.error is not None:
            return self  # type: ignore[return-value]
        return Result(value=func(self.value), deferred=self.deferred)  # type: ignore[arg-type]

    def defer(self, func: Callable[[T], None]) -> "Result[T]":
        """Register ``func`` to run with the current value on ``err()``.

        On a failure the action is dropped and the result is returned as is.
        """
        if self.error is not None:
            return self

        logger.debug(f"deferring {getattr(func, '__name__', func)!s} (#{len(self.deferred) + 1})")
        return Result(
            value=self.value,
            error=None,
            deferred=self.deferred + (partial(func, self.value),),
        )

    def on_error_fn(self, func: Callable[[Exception], None]) -> "Result[T]":
        """Call ``func`` with the error if this is a failure. Returns self."""
        if self.error is not None:
            func(self.error)
        return self

    def on_error(self) -> "Result[None]":
        """Invert the state for code paths where failure is the expected outcome.

        A success becomes a failure holding ``ERROR_WAS_EXPECTED``; a failure
        becomes a success. Deferred actions are carried over.
        """
        if self.error is None:
            return Result(value=None, error=ERROR_WAS_EXPECTED, deferred=self.deferred)
        return Result(value=None, error=None, deferred=self.deferred)

    def err(self) -> Exception | None:
        """Run deferred actions in registration order and return the error.

        Every action runs even if an earlier one raises. With the ``raise``
        deferred error policy the first exception is re-raised once all
        actions ran, chained to the held error if there is one; with ``log``
        exceptions are only logged.

        ``ERROR_WAS_EXPECTED`` is returned with its traceback cleared. Compare
        against it rather than raising it.

        Returns:
            The held error, or None on success
        """
        if self.deferred:
            logger.debug(f"running {len(self.deferred)} deferred action(s)")

        first_failure: Exception | None = None
        for action in self.deferred:
            try:
                action()
            except Exception as e:
                logger.error(f"deferred action failed: {e!r}", exc_info=True)
                if first_failure is None:
                    first_failure = e

        if first_failure is not None and get_settings().deferred_error_policy == "raise":
            raise first_failure from self.error

        if self.error is ERROR_WAS_EXPECTED:
            return ERROR_WAS_EXPECTED.with_traceback(None)
        return self.error

    def _augment(self, next_result: "Result[T]") -> "Result[T]":
        if not self.deferred:
            return next_result
        return Result(
            value=next_result.value,
            error=next_result.error,
            deferred=self.deferred + next_result.deferred,
        )

    def __repr__(self) -> str:
        pending = f", deferred={len(self.deferred)}" if self.deferred else ""
        if self.error is not None:
            return f"Failure({self.error!r}{pending})"
        return f"Success({self.value!r}{pending})"


def new_result(value: T | None, err: Exception | None) -> Result[T]:
    """Module-level alias for ``Result.new``."""
    return Result.new(value, err)


def success(value: T) -> Result[T]:
    """Module-level alias for ``Result.success``."""
    return Result.success(value)


def failure(err: Exception) -> Result[Any]:
    """Module-level alias for ``Result.failure``."""
    return Result.failure(err)

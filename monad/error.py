"""Helpers for unit-valued results.

Steps in this module take no input and return only an error marker
(``Exception`` or ``None``), which suits side-effecting sequences such as
"open, write, flush" where there is no payload to pass along.
"""

from collections.abc import Callable

from monad.result import Result

Step = Callable[[], Exception | None]


def ret(err: Exception | None = None) -> Result[None]:
    """Wrap an error, or its absence, into a unit-valued result."""
    return Result.new(None, err)


def lift(step: Step) -> Callable[[None], Result[None]]:
    """Adapt a zero-argument step for ``Result.bind`` and ``Result.chain``."""

    def bound(_: None) -> Result[None]:
        return ret(step())

    bound.__name__ = getattr(step, "__name__", "step")
    return bound


def bind(step: Step) -> Result[None]:
    """Always run ``step`` and wrap what it returns."""
    return ret(step())


def chain(*steps: Step) -> Result[None]:
    """Run steps in order until one of them returns an error."""
    return ret(None).chain(*(lift(step) for step in steps))

"""Library-level exceptions.

Failures of caller code travel inside a Result; these classes cover the few
errors the library produces itself.
"""


class MonadError(Exception):
    """Base exception for all errors raised or produced by this package."""
    pass


class ErrorWasExpected(MonadError):
    """Produced by ``Result.on_error`` when a failure was expected but none occurred."""

    def __init__(self, message: str = "an error was expected, but none occurred"):
        super().__init__(message)


# Single sentinel instance so inverted results compare equal. Compare with
# ``is``; raising it would attach a traceback to a module-level object.
ERROR_WAS_EXPECTED = ErrorWasExpected()

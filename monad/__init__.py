"""
Result monad with deferred cleanup actions.

Chains fallible steps, short-circuits on the first failure and runs
registered cleanup actions when the result is consumed with ``err()``.
"""

from monad.exceptions import ERROR_WAS_EXPECTED, ErrorWasExpected, MonadError
from monad.result import Result, failure, new_result, success

__all__ = [
    "Result",
    "success",
    "failure",
    "new_result",
    "MonadError",
    "ErrorWasExpected",
    "ERROR_WAS_EXPECTED",
]

"""Fetching an HTTP resource through a Result.

The response is closed by a deferred action, so it is released whether or
not the later steps succeed.

Usage:
    python -m examples.fetch_response https://example.com
"""

import logging
import sys

import httpx

from monad.result import Result
from monad.shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


class UnexpectedStatus(Exception):
    """Raised for non-2xx responses."""

    def __init__(self, status_code: int):
        super().__init__(f"unexpected status code {status_code}")
        self.status_code = status_code


def fetch(client: httpx.Client, url: str) -> Result[httpx.Response]:
    """Send a streaming GET and close the response on consumption."""
    request = client.build_request("GET", url)
    return Result.attempt(
        client.send, request, stream=True, exceptions=(httpx.HTTPError,)
    ).defer(lambda response: response.close())


def check_status(response: httpx.Response) -> Result[httpx.Response]:
    if not response.is_success:
        return Result.failure(UnexpectedStatus(response.status_code))
    return Result.success(response)


def read_body(client: httpx.Client, url: str) -> tuple[bytes | None, Exception | None]:
    """Fetch ``url`` and return its body together with the error, Go style."""
    body: list[bytes] = []

    def collect(response: httpx.Response) -> Result[httpx.Response]:
        result = Result.attempt(response.read, exceptions=(httpx.HTTPError,))
        if result.is_ok():
            body.append(result.value)
        return result.map(lambda _: response)

    error = (
        fetch(client, url)
        .chain(check_status, collect)
        .on_error_fn(lambda e: logger.warning(f"fetching {url} failed: {e}"))
        .err()
    )
    return (body[0] if body else None), error


def main(argv: list[str]) -> int:
    configure_logging()
    with httpx.Client(timeout=10.0) as client:
        for url in argv:
            content, error = read_body(client, url)
            if error is not None:
                return 1
            logger.info(f"{url}: {len(content or b'')} bytes")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

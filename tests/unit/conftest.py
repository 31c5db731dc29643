"""Test configuration and fixtures.

Provides:
- Python path setup for imports
- Settings cache isolation between tests
"""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from monad.shared.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings so each test reads its own environment."""
    monkeypatch.delenv("MONAD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MONAD_DEFERRED_ERROR_POLICY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

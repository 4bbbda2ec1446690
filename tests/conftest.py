from collections.abc import Iterator

import pytest

from flashcookie.config import get_settings

TEST_KEY = "test-signing-key-not-for-production"


@pytest.fixture(autouse=True)
def flash_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Provide a signing key and a non-production environment."""
    monkeypatch.setenv("FLASH_ENV", "test")
    monkeypatch.setenv("FLASH_SIGNING_KEY", TEST_KEY)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

import pytest
from pydantic import ValidationError

from flashcookie.config import FlashSettings, get_settings
from flashcookie.errors import MissingSigningKey
from flashcookie.main import create_app


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLASH_COOKIE_NAME", "notice")
    monkeypatch.setenv("FLASH_SAME_SITE", "strict")
    monkeypatch.setenv("FLASH_MAX_AGE", "600")
    monkeypatch.setenv("FLASH_FALLBACK_SIGNING_KEYS", '["old-key"]')

    settings = FlashSettings(_env_file=None)
    assert settings.cookie_name == "notice"
    assert settings.same_site == "strict"
    assert settings.max_age == 600
    assert [k.get_secret_value() for k in settings.fallback_signing_keys] == ["old-key"]
    assert "test-signing-key" not in repr(settings)


@pytest.mark.parametrize(
    ("env", "secure", "expected"),
    [
        ("dev", None, False),
        ("test", None, False),
        ("prod", None, True),
        ("staging", None, True),
        ("dev", True, True),
        ("prod", False, False),
    ],
)
def test_secure_cookie_default(env: str, secure: bool | None, expected: bool) -> None:
    settings = FlashSettings(_env_file=None, env=env, secure=secure)
    assert settings.use_secure_cookies is expected


def test_invalid_same_site(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLASH_SAME_SITE", "sometimes")
    with pytest.raises(ValidationError):
        FlashSettings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_app_refuses_to_start_without_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLASH_SIGNING_KEY", "")
    with pytest.raises(MissingSigningKey):
        create_app()

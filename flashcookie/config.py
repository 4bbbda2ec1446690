"""Flash settings using Pydantic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class FlashSettings(BaseSettings):
    """Flash cookie and reference application settings."""

    app_name: str = Field(default="Flash Messages")
    env: str = Field(default="dev")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    signing_key: SecretStr | None = Field(default=None)
    fallback_signing_keys: list[SecretStr] = Field(default_factory=list)

    cookie_name: str = Field(default="flash")
    cookie_path: str = Field(default="/")
    cookie_domain: str | None = Field(default=None)
    # None: secure everywhere except local dev/test
    secure: bool | None = Field(default=None)
    http_only: bool = Field(default=True)
    same_site: Literal["lax", "strict", "none"] = Field(default="lax")
    max_age: int | None = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FLASH_",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def use_secure_cookies(self) -> bool:
        if self.secure is not None:
            return self.secure
        return self.env.lower() not in ("dev", "test")


@lru_cache
def get_settings() -> FlashSettings:
    """Get cached settings instance."""
    return FlashSettings()
